import random
import pytest
from gjstep.config import EPS
from gjstep.solver import GaussJordan, solve
from gjstep.steplog import StepLog
from gjstep.types import DimensionError, SolveState, copy_matrix
from gjstep.verify import residuals

def _solution_lines(lines):
    i = lines.index("Solution x:")
    return lines[i + 1:]

def test_three_unknowns_transcript():
    A = [[2, 1, 1, 5], [1, 3, 2, 10], [1, 0, 0, 2]]
    original = copy_matrix(A)
    res = GaussJordan().solve(A, 3, 4)
    lines = res.lines()
    assert res.ok and res.state is SolveState.DONE
    assert lines[:3] == ["Initial matrix:", "Matrix [A | b]:", "  [ 2 1 1 | 5 ]"]
    assert lines[6] == "Iter 1: Scale R1 by 1/2 (pivot->1)"
    assert "Iter 2: R2 <- R2 - (1) * R1" in lines
    assert "Iter 5: R1 <- R1 - (1/2) * R2" in lines
    assert "Iter 6: R3 <- R3 - (-1/2) * R2" in lines
    assert "Iter 7: Scale R3 by -5 (pivot->1)" in lines
    assert "Finished Gauss-Jordan. Expect [I | x]." in lines
    assert _solution_lines(lines) == ["  x[0] = 2", "  x[1] = 6", "  x[2] = -5"]
    assert all(abs(r) < 1e-9 for r in residuals(original, res.solution))
    assert res.log.count() == 70

def test_dependent_pair_is_singular_at_second_column():
    res = solve([[1, 2, 3], [2, 4, 7]], 2, 3)
    lines = res.lines()
    assert res.state is SolveState.SINGULAR and not res.ok
    assert res.singular_column == 1
    assert res.solution is None
    assert lines[6] == "Iter 1: Swap R1 <-> R2"
    assert lines[-4].startswith("Iter 4: ~0 pivot in column 2.")
    assert lines[-3:] == ["  [ 1 2 | 7/2 ]", "  [ 0 0 | -1/2 ]", ""]
    assert "Solution x:" not in lines
    assert [t["kind"] for t in res.trace] == ["pivot", "swap", "scale", "eliminate", "singular"]
    assert [t["iteration"] for t in res.trace] == [None, 1, 2, 3, 4]
    assert res.trace[1]["detail"] == {"rows": [0, 1]}

def test_singular_stops_before_later_columns():
    A = [[0, 1, 2, 3], [0, 4, 5, 6], [0, 7, 8, 10]]
    res = solve(A, 3, 4)
    assert res.singular_column == 0
    assert A == [[0, 1, 2, 3], [0, 4, 5, 6], [0, 7, 8, 10]]
    assert res.log.count() == 1 + 5 + 1 + 5

def test_singular_in_last_column_after_swaps():
    res = solve([[1, 2, 3, 4], [2, 4, 6, 8], [1, 1, 1, 1]], 3, 4)
    assert res.state is SolveState.SINGULAR
    assert res.singular_column == 2
    assert "Iter 5: Swap R2 <-> R3" in res.lines()
    assert any(l.startswith("Iter 8: ~0 pivot in column 3.") for l in res.lines())
    # column 3 and the augmented column are left as they were when the pivot vanished
    assert [row[2:] for row in res.matrix] == [[-1.0, -2.0], [2.0, 3.0], [0.0, 0.0]]

def test_done_leaves_identity_block():
    rng = random.Random(7)
    for _ in range(50):
        n = rng.choice([2, 3])
        A = [[rng.uniform(-10, 10) for _ in range(n + 1)] for _ in range(n)]
        original = copy_matrix(A)
        res = solve(A, n, n + 1)
        assert res.ok
        for i in range(n):
            for j in range(n):
                assert abs(A[i][j] - (1.0 if i == j else 0.0)) < EPS
        assert all(abs(r) < 1e-6 for r in residuals(original, res.solution))

def test_caller_log_is_reset_and_bounded():
    log = StepLog(capacity=10)
    log.append("stale")
    res = solve([[3, 0, 1], [0, 3, 2]], 2, 3, log)
    assert res.log is log
    assert log[0] == "Initial matrix:"
    assert log.count() == 10
    assert log.truncated
    assert res.ok and res.solution == pytest.approx([1 / 3, 2 / 3])

def test_rejects_bad_dimensions():
    with pytest.raises(DimensionError):
        solve([[1, 2, 3], [4, 5, 6], [7, 8, 9]], 3, 3)
