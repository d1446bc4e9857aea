# -----------------------------------------------------------------------------
# Interactive value acquisition
# Purpose:
#   Sequential prompts for the system size and every matrix cell. Invalid
#   answers are reported and asked again; an unsupported size falls back to
#   2x3. input/output callables are injectable so the flow can be scripted.
# -----------------------------------------------------------------------------

from __future__ import annotations
from typing import Callable, List, Tuple

from .parsing import parse_int, parse_number
from .types import DimensionError, Matrix, ParseError, validate_dims

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]


def _wait_key(read: InputFn, write: OutputFn, message: str) -> None:
    write(message)
    read("")


def prompt_number(prompt: str, read: InputFn = input, write: OutputFn = print) -> float:
    while True:
        try:
            return parse_number(read(prompt))
        except ParseError:
            _wait_key(read, write, "Invalid number. Any key...")


def prompt_int(prompt: str, read: InputFn = input, write: OutputFn = print) -> int:
    while True:
        try:
            return parse_int(read(prompt))
        except ParseError:
            _wait_key(read, write, "Invalid integer. Any key...")


def sequential_input(read: InputFn = input, write: OutputFn = print) -> Tuple[Matrix, int, int]:
    r = prompt_int("Rows? (2 or 3): ", read, write)
    c = prompt_int("Cols? (3 or 4): ", read, write)

    try:
        validate_dims(r, c)
    except DimensionError:
        _wait_key(read, write, "Only 2x3 or 3x4 allowed. Any key...")
        r, c = 2, 3

    A: List[List[float]] = []
    for i in range(r):
        row = []
        for j in range(c):
            if j == c - 1:
                prompt = f"Enter b[{i + 1}]: "
            else:
                prompt = f"Enter A[{i + 1},{j + 1}]: "
            row.append(prompt_number(prompt, read, write))
        A.append(row)
    return A, r, c
