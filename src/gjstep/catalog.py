# -----------------------------------------------------------------------------
# Example-system catalog
# Purpose: Parse a YAML list of named linear systems into typed entries used by
# the API, the UIs and the tests.
# -----------------------------------------------------------------------------

from __future__ import annotations
import yaml
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .parsing import parse_matrix
from .types import Matrix, copy_matrix


# Domain-specific error to signal malformed catalog inputs, missing fields, etc.
class CatalogError(Exception): pass


@dataclass
class SystemEntry:
    """
    One named system.
    Example:
        id: "three_by_four"
        rows: 3, cols: 4
        cells: [[2, 1, 1, 5], [1, 3, 2, 10], [1, 0, 0, 2]]
    """
    id: str
    name: str
    rows: int
    cols: int
    cells: Matrix
    tags: List[str] = field(default_factory=list)
    notes: str = ""

    def matrix(self) -> Matrix:
        # Fresh copy each time; the engine mutates what it is given
        return copy_matrix(self.cells)


@dataclass
class Catalog:
    systems: List[SystemEntry]

    @staticmethod
    def from_yaml_dict(d: Dict[str, Any]) -> "Catalog":
        """
        Expected YAML shape:
          systems:
            - id: ...
              name: ...
              rows: 3
              cols: 4
              cells: [[...], ...]     # numbers or "a/b" strings
              tags: [...]
              notes: "..."
        """
        if not isinstance(d, dict):
            raise CatalogError("Catalog root must be a mapping")
        out: List[SystemEntry] = []
        seen = set()
        for sd in d.get("systems") or []:
            try:
                sid = str(sd["id"])
                rows, cols = int(sd["rows"]), int(sd["cols"])
                cells = parse_matrix(sd["cells"], rows, cols)
            except (KeyError, TypeError) as e:
                raise CatalogError(f"Malformed system entry: {sd!r}") from e
            except ValueError as e:
                # ParseError / DimensionError
                raise CatalogError(f"System {sd.get('id')!r}: {e}") from e
            if sid in seen:
                raise CatalogError(f"Duplicate system id: {sid}")
            seen.add(sid)
            out.append(SystemEntry(
                id=sid, name=str(sd.get("name", sid)), rows=rows, cols=cols, cells=cells,
                tags=list(sd.get("tags", [])), notes=str(sd.get("notes", "")),
            ))
        return Catalog(systems=out)

    @staticmethod
    def from_yaml_text(text: str) -> "Catalog":
        return Catalog.from_yaml_dict(yaml.safe_load(text))

    @staticmethod
    def from_file(path: str) -> "Catalog":
        with open(path, "r", encoding="utf-8") as f:
            return Catalog.from_yaml_text(f.read())

    def get(self, system_id: str) -> SystemEntry:
        for s in self.systems:
            if s.id == system_id:
                return s
        raise CatalogError(f"Unknown system: {system_id}")

    def list_systems(self) -> List[Dict[str, Any]]:
        """UI-friendly listing (id, name, size, tags, cells)."""
        return [{
            "id": s.id, "name": s.name, "rows": s.rows, "cols": s.cols,
            "cells": s.cells, "tags": s.tags, "notes": s.notes,
        } for s in self.systems]


