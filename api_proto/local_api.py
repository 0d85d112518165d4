from typing import List, Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from nonogram import build_grid, parse_puzzle, solve
from nonogram.config import MAX_ROUNDS
from nonogram.errors import NonogramError
from nonogram.logging_utils import get_logger
from nonogram.postprocess.render_result import build_result

logger = get_logger()

app = FastAPI()


class SolveRequest(BaseModel):
    # Either the puzzle text (nonogram-db format) or explicit constraints
    source: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    rows: Optional[List[List[int]]] = None
    columns: Optional[List[List[int]]] = None
    max_rounds: int = MAX_ROUNDS


@app.post("/api/solve")
async def api_solve(request: SolveRequest):
    """
    Solver API endpoint.
    Builds the grid from the request, runs line propagation and returns the rendered result.
    """
    try:
        if request.source is not None:
            grid = parse_puzzle(request.source)
        else:
            grid = build_grid(
                request.width,
                request.height,
                request.rows or [],
                request.columns or [],
            )
    except NonogramError as e:
        raise HTTPException(status_code=400, detail=str(e))

    result = solve(grid, max_rounds=request.max_rounds)
    logger.info("api_solve: %dx%d -> %s", grid.width, grid.height, result.status.value)
    return build_result(grid, result)


@app.get("/api/health")
async def api_health():
    return {"status": "ok"}
