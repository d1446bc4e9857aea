# -----------------------------------------------------------------------------
# Types module: shared dataclasses and errors for the Gauss-Jordan pipeline
# Purpose:
#   Define the matrix alias, the solve states, the structured solve result and
#   the domain errors used by parsing, the catalog, the engine and the API.
# -----------------------------------------------------------------------------

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .config import VALID_DIMS
from .steplog import StepLog

Matrix = List[List[float]]


class ParseError(ValueError): pass


class DimensionError(ValueError): pass


class SolveState(str, Enum):
    REDUCING = "reducing"
    SINGULAR = "singular"
    DONE = "done"


def validate_dims(rows: int, cols: int) -> None:
    """Only 2x3 and 3x4 augmented systems are accepted."""
    if (rows, cols) not in VALID_DIMS:
        raise DimensionError(f"Only 2x3 or 3x4 allowed (got {rows}x{cols})")


def copy_matrix(matrix: Matrix) -> Matrix:
    return [list(map(float, row)) for row in matrix]


@dataclass
class SolveResult:
    """
    Outcome of one verbose Gauss-Jordan run.
    - state: DONE or SINGULAR (REDUCING never escapes a finished run)
    - singular_column: 0-indexed column whose pivot vanished, when SINGULAR
    - solution: augmented column of the reduced matrix, when DONE
    - matrix: the (partially) reduced matrix, same object the caller passed in
    - log: caller-owned transcript
    - trace: JSON-friendly list of {"kind", "iteration", "detail"} operation records
    """
    state: SolveState
    matrix: Matrix
    log: StepLog
    rows: int
    cols: int
    singular_column: Optional[int] = None
    solution: Optional[List[float]] = None
    trace: List[Dict[str, Any]] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.state is SolveState.DONE

    def lines(self) -> List[str]:
        return list(self.log.lines())
