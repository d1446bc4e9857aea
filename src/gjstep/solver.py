# -----------------------------------------------------------------------------
# Solver: verbose Gauss-Jordan elimination
# Responsibilities:
#   • Reduce a 2x3 or 3x4 augmented matrix in place with partial pivoting
#   • Narrate every pivot choice, swap, scale and elimination into a StepLog,
#     with a full matrix snapshot after each operation
#   • Stop at the first ~0 pivot (singular / underdetermined system)
#   • Report the final state, solution vector and a structured trace
# -----------------------------------------------------------------------------

from __future__ import annotations
import logging
from typing import Optional

from .config import EPS
from .formatters import render_matrix, small_val
from .steplog import OpTrace, StepLog
from .types import Matrix, SolveResult, SolveState, validate_dims

LOG = logging.getLogger(__name__)


class GaussJordan:
    def __init__(self, eps: float = EPS):
        self.eps = eps

    # ---------------- internal helpers ----------------

    def _pivot_row(self, A: Matrix, col: int, n: int) -> tuple[int, float]:
        """Row in col..n-1 with the largest |A[r][col]|; earliest row wins ties."""
        pivot = col
        best = abs(A[pivot][col])
        for r in range(col + 1, n):
            v = abs(A[r][col])
            if v > best:
                best, pivot = v, r
        return pivot, best

    @staticmethod
    def _swap(A: Matrix, i: int, j: int, cols: int) -> None:
        for k in range(cols):
            A[i][k], A[j][k] = A[j][k], A[i][k]

    # ---------------- main entry ----------------

    def solve(self, matrix: Matrix, rows: int, cols: int, log: Optional[StepLog] = None) -> SolveResult:
        """
        Run Gauss-Jordan on `matrix` (mutated in place).

        The log is reset first; pass one in to control its capacity/width,
        otherwise a default-sized log is created. The transcript alone tells
        the story: it ends either with the solution lines (DONE) or with a
        "~0 pivot" / "pivot vanished" narration (SINGULAR).
        """
        validate_dims(rows, cols)
        if log is None:
            log = StepLog()
        log.reset()
        trace = OpTrace()
        A = matrix
        n = rows  # left block is n x n
        it = 1

        def result(state: SolveState, singular_column: Optional[int] = None) -> SolveResult:
            solution = [A[i][cols - 1] for i in range(rows)] if state is SolveState.DONE else None
            return SolveResult(state=state, matrix=A, log=log, rows=rows, cols=cols,
                               singular_column=singular_column, solution=solution,
                               trace=trace.export())

        log.append("Initial matrix:")
        render_matrix(log, A, rows, cols)

        for col in range(n):
            # pivot search
            pivot, best = self._pivot_row(A, col, n)
            LOG.debug("column %d: pivot row %d (|p|=%g)", col, pivot, best)
            if best < self.eps:
                log.append("Iter %d: ~0 pivot in column %d. Singular/underdetermined.", it, col + 1)
                render_matrix(log, A, rows, cols)
                trace.record("singular", it, column=col, magnitude=best)
                LOG.debug("singular at column %d", col)
                return result(SolveState.SINGULAR, col)
            trace.record("pivot", column=col, row=pivot, magnitude=best)

            # swap
            if pivot != col:
                log.append("Iter %d: Swap R%d <-> R%d", it, col + 1, pivot + 1)
                self._swap(A, pivot, col, cols)
                render_matrix(log, A, rows, cols)
                trace.record("swap", it, rows=[col, pivot])
                it += 1

            # scale pivot row
            p = A[col][col]
            if abs(p) < self.eps:
                log.append("Iter %d: pivot vanished; abort.", it)
                trace.record("singular", it, column=col, magnitude=abs(p))
                return result(SolveState.SINGULAR, col)
            inv = 1.0 / p
            for j in range(col, cols):
                A[col][j] *= inv
            log.append("Iter %d: Scale R%d by %s (pivot->1)", it, col + 1, small_val(inv))
            render_matrix(log, A, rows, cols)
            trace.record("scale", it, row=col, factor=inv)
            it += 1

            # eliminate other rows (above and below)
            for r in range(n):
                if r == col:
                    continue
                factor = A[r][col]
                if abs(factor) < self.eps:
                    continue
                for j in range(col, cols):
                    A[r][j] -= factor * A[col][j]
                log.append("Iter %d: R%d <- R%d - (%s) * R%d", it, r + 1, r + 1, small_val(factor), col + 1)
                render_matrix(log, A, rows, cols)
                trace.record("eliminate", it, row=r, pivot_row=col, factor=factor)
                it += 1

        log.append("Finished Gauss-Jordan. Expect [I | x].")
        render_matrix(log, A, rows, cols)
        log.append("Solution x:")
        for i in range(rows):
            log.append("  x[%d] = %s", i, small_val(A[i][cols - 1]))
        trace.record("done", solution=[A[i][cols - 1] for i in range(rows)])
        return result(SolveState.DONE)


def solve(matrix: Matrix, rows: int, cols: int, log: Optional[StepLog] = None) -> SolveResult:
    # Module-level convenience with the default epsilon
    return GaussJordan().solve(matrix, rows, cols, log)
