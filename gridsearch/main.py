from __future__ import annotations

import logging
import math
import time
from typing import List, Optional, Tuple

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from . import config
from .algorithms import engine
from .algorithms.loader import list_algorithms
from .algorithms.types import Cell, SearchAlgorithm, SearchResult

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Grid Search Visualizer Backend", version="0.1.0")

# In dev, the frontend uses a Vite proxy. This CORS config is just extra safety.
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

REGISTRY = engine.REGISTRY


class AlgorithmInfo(BaseModel):
    id: str
    name: str
    description: str = ""


class RunOptionsModel(BaseModel):
    max_visited: Optional[int] = Field(default=None, gt=0)


class RunRequestModel(BaseModel):
    algorithm_id: str
    rows: int = Field(gt=0)
    columns: int = Field(gt=0)
    start: Tuple[int, int]
    target: Tuple[int, int]
    walls: List[Tuple[int, int]] = Field(default_factory=list)
    options: Optional[RunOptionsModel] = None


class CellModel(BaseModel):
    id: str
    row: int
    column: int
    # null when the cell was never reached
    distance: Optional[float] = None

    @classmethod
    def from_cell(cls, cell: Cell) -> "CellModel":
        d = cell.distance if math.isfinite(cell.distance) else None
        return cls(id=cell.id, row=cell.row, column=cell.column, distance=d)


class RunResponseModel(BaseModel):
    visited: List[CellModel]
    pending: List[CellModel]
    steps_to_find: int
    expanded: int
    path: List[CellModel]
    runtime_ms: float


@app.get("/api/health")
def health():
    return {"ok": True, "algorithms": len(REGISTRY)}


@app.get("/api/algorithms", response_model=list[AlgorithmInfo])
def algorithms() -> list[AlgorithmInfo]:
    out: list[AlgorithmInfo] = []
    for spec in list_algorithms(REGISTRY):
        out.append(AlgorithmInfo(id=spec.id, name=spec.name, description=spec.description))
    return out


@app.post("/api/run", response_model=RunResponseModel)
def run(req: RunRequestModel) -> RunResponseModel:
    try:
        key = SearchAlgorithm(req.algorithm_id)
    except ValueError:
        raise HTTPException(status_code=404, detail=f"Unknown algorithm_id: {req.algorithm_id}")
    if key not in REGISTRY:
        raise HTTPException(status_code=404, detail=f"Unknown algorithm_id: {req.algorithm_id}")

    n = req.rows * req.columns
    if n > config.MAX_GRID_CELLS:
        raise HTTPException(
            status_code=400,
            detail=f"grid of {n} cells exceeds MAX_GRID_CELLS={config.MAX_GRID_CELLS}",
        )

    opts = req.options or RunOptionsModel()
    budget = opts.max_visited if opts.max_visited is not None else config.DEFAULT_MAX_VISITED

    t0 = time.perf_counter()
    try:
        result: SearchResult = engine.run(
            req.rows,
            req.columns,
            req.start,
            req.target,
            walls=req.walls,
            algorithm=key,
            budget=budget,
            registry=REGISTRY,
        )
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("algorithm %s crashed", key.value)
        raise HTTPException(status_code=500, detail=f"Algorithm crashed: {type(e).__name__}: {e}")
    t1 = time.perf_counter()

    runtime_ms = (t1 - t0) * 1000.0

    return RunResponseModel(
        visited=[CellModel.from_cell(c) for c in result.visited],
        pending=[CellModel.from_cell(c) for c in result.pending],
        steps_to_find=result.steps_to_find,
        expanded=int(result.expanded),
        path=[CellModel.from_cell(c) for c in result.path],
        runtime_ms=runtime_ms,
    )
