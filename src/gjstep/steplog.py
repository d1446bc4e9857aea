# -----------------------------------------------------------------------------
# Step log & tracing
# Purpose:
#   StepLog: bounded, append-only transcript of fixed-width text lines. Once
#   capacity is reached further appends are dropped silently; the transcript
#   is best-effort and never grows past its declared size.
#   OpTrace: one typed record per row operation (pivot choice, swap, scale,
#   elimination, singular stop, done), keyed to the transcript Iter number
#   and exported as plain dicts for JSON responses.
# -----------------------------------------------------------------------------

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Literal, Optional, Tuple, get_args

from .config import LINE_WIDTH, MAX_LINES

LOG = logging.getLogger(__name__)


class StepLog:
    def __init__(self, capacity: int = MAX_LINES, width: int = LINE_WIDTH):
        self.capacity = capacity
        self.width = width
        self._lines: List[str] = []
        self.truncated = False

    def append(self, template: str, *args: Any) -> None:
        """
        printf-style append: `template % args` when args are given, the raw
        template otherwise. The rendered line is cut to `width` characters.
        """
        if len(self._lines) >= self.capacity:
            if not self.truncated:
                LOG.debug("step log full at %d lines; dropping further output", self.capacity)
            self.truncated = True
            return
        text = template % args if args else template
        self._lines.append(text[: self.width])

    def count(self) -> int:
        return len(self._lines)

    def reset(self) -> None:
        self._lines = []
        self.truncated = False

    @property
    def full(self) -> bool:
        return len(self._lines) >= self.capacity

    def lines(self) -> Tuple[str, ...]:
        # Read-only view for viewers
        return tuple(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    def __getitem__(self, index: int) -> str:
        return self._lines[index]

    def __iter__(self) -> Iterator[str]:
        return iter(tuple(self._lines))


OpKind = Literal["pivot", "swap", "scale", "eliminate", "singular", "done"]
OP_KINDS: Tuple[str, ...] = get_args(OpKind)


@dataclass
class OpRecord:
    kind: OpKind
    iteration: Optional[int]      # "Iter n" of the transcript; None for pivot choice / done
    detail: Dict[str, Any]

    def as_dict(self) -> Dict[str, Any]:
        return {"kind": self.kind, "iteration": self.iteration, "detail": self.detail}


class OpTrace:
    def __init__(self):
        self._ops: List[OpRecord] = []

    def record(self, kind: str, iteration: Optional[int] = None, **detail: Any) -> None:
        if kind not in OP_KINDS:
            raise ValueError(f"Unknown operation kind: {kind!r}")
        self._ops.append(OpRecord(kind, iteration, detail))

    def kinds(self) -> List[str]:
        return [op.kind for op in self._ops]

    def export(self) -> List[Dict[str, Any]]:
        return [op.as_dict() for op in self._ops]
