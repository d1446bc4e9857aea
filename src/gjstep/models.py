from __future__ import annotations
from typing import Any, Dict, List, Literal, Optional, Union
from pydantic import BaseModel, Field, model_validator

from .config import VALID_DIMS

Cell = Union[float, str]


class ParseRequest(BaseModel):
    rows: int
    cols: int
    cells: List[List[Cell]]

    @model_validator(mode="after")
    def _check_dims(self):
        if (self.rows, self.cols) not in VALID_DIMS:
            raise ValueError("Only 2x3 or 3x4 allowed.")
        return self


class Parsed(BaseModel):
    rows: int
    cols: int
    matrix: List[List[float]]


class SolveRequest(BaseModel):
    # Either a catalog system id, or an explicit size + cells
    system_id: Optional[str] = None
    rows: Optional[int] = None
    cols: Optional[int] = None
    cells: Optional[List[List[Cell]]] = None
    max_lines: Optional[int] = Field(default=None, ge=1)

    @model_validator(mode="after")
    def _check_source(self):
        if self.system_id is None:
            if self.rows is None or self.cols is None or self.cells is None:
                raise ValueError("Provide system_id or rows, cols and cells.")
            if (self.rows, self.cols) not in VALID_DIMS:
                raise ValueError("Only 2x3 or 3x4 allowed.")
        return self


class SolveResponse(BaseModel):
    ok: bool
    state: Literal["done", "singular"]
    singular_column: Optional[int] = None
    rows: int
    cols: int
    lines: List[str]
    count: int
    truncated: bool = False
    matrix: List[List[float]]
    solution: Optional[List[float]] = None
    solution_display: Optional[List[str]] = None
    checks: Dict[str, bool] = Field(default_factory=dict)
    trace: List[Dict[str, Any]] = Field(default_factory=list)
