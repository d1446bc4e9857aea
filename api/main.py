# --- GJSTEP: Verbose Gauss-Jordan Solver API (FastAPI) -------------------------
# Purpose: Minimal API that (1) parses typed matrix cells into numbers, then
# (2) runs the narrated Gauss-Jordan engine and returns the full transcript.
# ------------------------------------------------------------------------------

from __future__ import annotations
import logging
from fastapi import FastAPI, HTTPException

from gjstep.catalog import Catalog, CatalogError
from gjstep.config import CATALOG_PATH, LOG_LEVEL
from gjstep.formatters import format_solution
from gjstep.models import Parsed, ParseRequest, SolveRequest, SolveResponse
from gjstep.parsing import parse_matrix
from gjstep.solver import GaussJordan
from gjstep.steplog import StepLog
from gjstep.types import DimensionError, ParseError, copy_matrix
from gjstep.verify import sanity_checks

# gjstep.config has already loaded .env (catalog path, log level)
logging.basicConfig(level=LOG_LEVEL)
LOG = logging.getLogger("gjstep.api")

# FastAPI app with two main endpoints: /parse and /solve
app = FastAPI(title="GJSTEP Gauss-Jordan Solver API")

_catalog = Catalog.from_file(CATALOG_PATH)
_solver = GaussJordan()


# ----------------------------- Routes -----------------------------------------
@app.get("/health")
def health(): return {"ok": True}

@app.get("/catalog")
def list_catalog():
    """List the example systems shipped with the service."""
    return {"count": len(_catalog.systems), "items": _catalog.list_systems()}

@app.post("/parse", response_model=Parsed)
def parse_input(req: ParseRequest):
    """Convert typed cells ("3", "-1/2", "") into a float matrix."""
    try:
        matrix = parse_matrix(req.cells, req.rows, req.cols)
    except (ParseError, DimensionError) as e:
        raise HTTPException(status_code=422, detail=str(e))
    return Parsed(rows=req.rows, cols=req.cols, matrix=matrix)

@app.post("/solve", response_model=SolveResponse)
def solve(req: SolveRequest):
    """
    Core solving path:
    1) Resolve the system (catalog id or explicit cells).
    2) Run the verbose engine on a private copy with a fresh step log.
    3) Return transcript lines, state, solution and sanity checks.
    """
    if req.system_id is not None:
        try:
            entry = _catalog.get(req.system_id)
        except CatalogError as e:
            raise HTTPException(status_code=404, detail=str(e))
        rows, cols, original = entry.rows, entry.cols, entry.matrix()
    else:
        try:
            original = parse_matrix(req.cells, req.rows, req.cols)
        except (ParseError, DimensionError) as e:
            raise HTTPException(status_code=422, detail=str(e))
        rows, cols = req.rows, req.cols

    log = StepLog(capacity=req.max_lines) if req.max_lines else StepLog()
    res = _solver.solve(copy_matrix(original), rows, cols, log)
    LOG.info("solved %dx%d system: %s (%d lines)", rows, cols, res.state.value, log.count())

    return SolveResponse(
        ok=res.ok,
        state=res.state.value,
        singular_column=res.singular_column,
        rows=rows,
        cols=cols,
        lines=res.lines(),
        count=log.count(),
        truncated=log.truncated,
        matrix=res.matrix,
        solution=res.solution,
        solution_display=format_solution(res.solution) if res.solution is not None else None,
        checks=sanity_checks(res, original),
        trace=res.trace,
    )
