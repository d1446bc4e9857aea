# -----------------------------------------------------------------------------
# Number & matrix formatting
# Purpose:
#   Turn floating-point results of elimination back into short, readable text:
#   integers when close to one, small fractions (denominator <= 1000) found by
#   a bounded continued-fraction expansion, and a 6-significant-digit decimal
#   otherwise. render_matrix writes a matrix snapshot into a StepLog.
# -----------------------------------------------------------------------------

from __future__ import annotations
import math
from typing import List, Sequence, Tuple

from .config import (
    CELL_WIDTH, CF_MAX_ITER, CF_REMAINDER_EPS, CF_TOL, INT_EPS, LINE_WIDTH,
    MAX_DEN, SNAP_EPS, ZERO_EPS,
)
from .steplog import StepLog


def _round_half_away(x: float) -> float:
    # halves round away from zero
    return math.floor(x + 0.5) if x >= 0 else -math.floor(-x + 0.5)


def continued_fraction(ax: float, max_den: int = MAX_DEN) -> Tuple[int, int]:
    """
    Best convergent p/q of a non-negative value with q <= max_den.

    Stops on the first of:
      - the next denominator exceeds max_den (previous convergent is kept),
      - the candidate is within CF_TOL of ax (accepted),
      - the fractional remainder vanishes (exact rational, accepted).
    Returns (0, 0) when nothing usable was produced.
    """
    v = ax
    p0, q0, p1, q1 = 0, 1, 1, 0

    for _ in range(CF_MAX_ITER):
        a = math.floor(v)
        p = a * p1 + p0
        q = a * q1 + q0

        if q > max_den:
            break

        if abs(p / q - ax) < CF_TOL:
            p0, q0, p1, q1 = p, q, 0, 0
            break

        p0, q0, p1, q1 = p1, q1, p, q
        r = v - a
        if r < CF_REMAINDER_EPS:
            p0, q0, p1, q1 = p, q, 0, 0
            break
        v = 1.0 / r

    if p1 or q1:
        return p1, q1
    return p0, q0


def format_frac(x: float) -> str:
    """Shortest "nice" text for x: integer, n/d, or compact decimal."""
    if not math.isfinite(x):
        if math.isnan(x):
            return "NaN"
        return "inf" if x > 0 else "-inf"

    # squash tiny noise to zero
    if abs(x) < ZERO_EPS:
        return "0"

    # close to integer?
    rintx = _round_half_away(x)
    if abs(x - rintx) < INT_EPS:
        return str(int(rintx))

    num, den = continued_fraction(abs(x))

    # cap re-checked here as well: the expansion may also end on iteration count
    if den == 0 or den > MAX_DEN:
        return f"{x:.6g}"

    # put sign on numerator only
    if x < 0:
        num = -num
    if den < 0:
        den, num = -den, -num

    if den == 1:
        return str(num)
    return f"{num}/{den}"


def small_val(v: float) -> str:
    """Cell-sized variant: zero-out ultratiny residue, cap at CELL_WIDTH chars."""
    if abs(v) < SNAP_EPS:
        v = 0.0
    return format_frac(v)[:CELL_WIDTH]


def format_row(row: Sequence[float], cols: int) -> str:
    cells = " ".join(small_val(row[j]) for j in range(cols - 1))
    text = f"  [ {cells} | {small_val(row[cols - 1])} ]"
    return text[:LINE_WIDTH]


def render_matrix(log: StepLog, matrix: Sequence[Sequence[float]], rows: int, cols: int) -> None:
    log.append("Matrix [A | b]:")
    for i in range(rows):
        log.append("%s", format_row(matrix[i], cols))
    log.append("")


def format_solution(solution: Sequence[float]) -> List[str]:
    return [small_val(v) for v in solution]
