import math
from sympy import Rational
from gjstep.catalog import Catalog
from gjstep.config import CATALOG_PATH
from gjstep.formatters import format_solution
from gjstep.solver import solve
from gjstep.steplog import StepLog
from gjstep.verify import exact_residuals, identity_block, residuals, sanity_checks

def test_residuals_plain():
    assert residuals([[1, 1, 3], [1, -1, 1]], [2.0, 1.0]) == [0.0, 0.0]

def test_displayed_fractions_are_exact():
    entry = Catalog.from_file(CATALOG_PATH).get("thirds")
    res = solve(entry.matrix(), entry.rows, entry.cols)
    shown = format_solution(res.solution)
    assert shown == ["1/3", "2/3"]
    assert exact_residuals(entry.cells, shown) == [0, 0]

def test_exact_residual_catches_wrong_display():
    out = exact_residuals([[3, 0, 1], [0, 3, 2]], ["1/3", "1/2"])
    assert out == [0, Rational(-1, 2)]

def test_sanity_checks_done_and_singular():
    A = [[2, 1, 1, 5], [1, 3, 2, 10], [1, 0, 0, 2]]
    res = solve([row[:] for row in A], 3, 4)
    assert identity_block(res)
    assert sanity_checks(res, A) == {
        "identity_block": True, "residual_small": True,
        "exact_solution": True, "transcript_complete": True,
    }
    bad = solve([[1, 2, 3], [2, 4, 7]], 2, 3, StepLog(capacity=4))
    assert sanity_checks(bad, [[1, 2, 3], [2, 4, 7]]) == {
        "identity_block": False, "residual_small": False,
        "exact_solution": False, "transcript_complete": False,
    }

def test_rounded_display_is_not_exact():
    A = [[1, 0, math.pi], [0, 1, 1]]
    res = solve([row[:] for row in A], 2, 3)
    assert format_solution(res.solution) == ["355/113", "1"]
    checks = sanity_checks(res, A)
    assert checks["residual_small"] and checks["identity_block"]
    assert not checks["exact_solution"]

def test_fraction_solution_is_exact():
    entry = Catalog.from_file(CATALOG_PATH).get("thirds")
    res = solve(entry.matrix(), entry.rows, entry.cols)
    assert sanity_checks(res, entry.cells)["exact_solution"]
