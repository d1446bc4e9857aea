# -----------------------------------------------------------------------------
# Cell & integer parsing
# Purpose:
#   Read user-typed matrix cells ("3", "-2.5", "1e-3", "-4/7") and dimension
#   answers the way the calculator homescreen did: a numeric prefix is taken,
#   trailing garbage is ignored, blank input counts as 0, and only a zero
#   denominator or an over-long numerator is rejected.
# -----------------------------------------------------------------------------

from __future__ import annotations
import math
import re
from typing import Any, List, Sequence

from .types import Matrix, ParseError, validate_dims

# Regex fragment for a strtod-style prefix: decimals, scientific notation, inf/nan words
_NUM = re.compile(
    r"\s*([-+]?(?:(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)
_INT = re.compile(r"\s*([-+]?\d+)")

NUMERATOR_MAX = 23     # characters that fit the calculator's numerator buffer
DENOMINATOR_MAX = 23
DEN_EPS = 1e-18


def _strtod(text: str) -> float:
    # Longest numeric prefix; no prefix reads as 0.0 like strtod(s, NULL)
    m = _NUM.match(text)
    return float(m.group(1)) if m else 0.0


def parse_number(text: str | None) -> float:
    """
    Parse a decimal or an "a/b" fraction (signs allowed).
    Raises ParseError for a missing input object, an over-long numerator or a
    zero denominator.
    """
    if text is None:
        raise ParseError("No input")
    s = text.lstrip(" \t")
    if not s:
        return 0.0

    if "/" in s:
        num_text, den_text = s.split("/", 1)
        if len(num_text) > NUMERATOR_MAX:
            raise ParseError(f"Numerator too long: {num_text!r}")
        num = _strtod(num_text)
        den = _strtod(den_text[:DENOMINATOR_MAX])
        if abs(den) < DEN_EPS:
            raise ParseError(f"Zero denominator in {text!r}")
        return num / den
    return _strtod(s)


def parse_int(text: str | None) -> int:
    """strtol-style base-10 prefix; at least one digit must be consumed."""
    m = _INT.match(text or "")
    if not m:
        raise ParseError(f"Invalid integer: {text!r}")
    return int(m.group(1))


def parse_cell(value: Any) -> float:
    # Catalog/API cells may already be numbers
    if isinstance(value, bool):
        raise ParseError(f"Invalid cell: {value!r}")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        return parse_number(value)
    raise ParseError(f"Invalid cell: {value!r}")


def parse_matrix(cells: Sequence[Sequence[Any]], rows: int, cols: int) -> Matrix:
    """Validate the shape and parse every cell into a finite float matrix."""
    validate_dims(rows, cols)
    if len(cells) != rows or any(len(r) != cols for r in cells):
        raise ParseError(f"Expected {rows} rows of {cols} cells")
    out: List[List[float]] = []
    for i, row in enumerate(cells):
        parsed = []
        for j, c in enumerate(row):
            try:
                v = parse_cell(c)
            except ParseError as e:
                raise ParseError(f"Cell [{i + 1},{j + 1}]: {e}") from e
            if not math.isfinite(v):
                raise ParseError(f"Cell [{i + 1},{j + 1}]: value must be finite")
            parsed.append(v)
        out.append(parsed)
    return out
