from __future__ import annotations
from typing import Dict, List, Sequence

from sympy import Matrix as SMatrix, Rational, nsimplify

from .config import EPS
from .formatters import format_solution
from .types import Matrix, SolveResult

TOL = 1e-6


def residuals(original: Matrix, solution: Sequence[float]) -> List[float]:
    """A x - b for each equation of the original augmented matrix."""
    n = len(solution)
    return [sum(row[j] * solution[j] for j in range(n)) - row[n] for row in original]


def exact_residuals(original: Matrix, displayed: Sequence[str]) -> List[Rational]:
    """
    Check the printed solution exactly: original cells are rationalized with
    nsimplify, the displayed strings ("2", "-5/3", "0.142857") are read as
    exact rationals, and A x - b is evaluated without rounding.
    """
    n = len(displayed)
    A = SMatrix([[nsimplify(c, rational=True) for c in row[:n]] for row in original])
    b = SMatrix([nsimplify(row[n], rational=True) for row in original])
    x = SMatrix([Rational(s) for s in displayed])
    return list(A * x - b)


def identity_block(result: SolveResult, eps: float = EPS) -> bool:
    n = result.rows
    return all(abs(result.matrix[i][j] - (1.0 if i == j else 0.0)) < eps
               for i in range(n) for j in range(n))


def sanity_checks(result: SolveResult, original: Matrix) -> Dict[str, bool]:
    """
    Named boolean checks shown next to the transcript. `exact_solution` holds
    when the solution as printed (e.g. "1/3", "355/113") satisfies the
    original system with no rounding at all.
    """
    if not result.ok:
        return {"identity_block": False, "residual_small": False, "exact_solution": False,
                "transcript_complete": not result.log.truncated}
    res = residuals(original, result.solution or [])
    shown = format_solution(result.solution or [])
    return {
        "identity_block": identity_block(result),
        "residual_small": all(abs(r) < TOL for r in res),
        "exact_solution": all(r == 0 for r in exact_residuals(original, shown)),
        "transcript_complete": not result.log.truncated,
    }
