# main.py
import uvicorn
from typing import List, Optional, Union
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from pathcost.commands.generator import CommandGenerator
from pathcost.entities.grid import CostGrid
from pathcost.pathfinding.path_coster import PathCoster
from pathcost.utils.consts import (
    CRUCIBLE_MAX_RUN,
    CRUCIBLE_MIN_RUN,
    DEFAULT_INITIAL_HEADINGS,
    SERVER_HOST,
    SERVER_PORT,
)
from pathcost.utils.errors import ConfigError

app = FastAPI(title="Path Cost Server")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# =============================================================================
# PYDANTIC MODELS
# =============================================================================

class CostInput(BaseModel):
    # Rows are either digit strings ("2413") or lists of integer costs
    grid: List[Union[str, List[int]]]
    start: Optional[List[int]] = None     # Default (0, 0)
    goal: Optional[List[int]] = None      # Default bottom-right
    min_run: int = CRUCIBLE_MIN_RUN
    max_run: int = CRUCIBLE_MAX_RUN
    initial_headings: Optional[List[str]] = None
    max_expansions: Optional[int] = None

class PathPoint(BaseModel):
    x: int
    y: int
    d: int
    r: int

class CostOutput(BaseModel):
    status: str
    cost: Optional[int] = None
    reachable: bool
    expanded: int
    path: List[PathPoint]
    commands: List[str]


# =============================================================================
# CORE ALGORITHM
# =============================================================================

def build_grid(rows: List[Union[str, List[int]]]) -> CostGrid:
    if rows and all(isinstance(row, str) for row in rows):
        return CostGrid.from_lines(rows)
    if any(isinstance(row, str) for row in rows):
        raise ConfigError("grid rows must be all digit strings or all integer lists")
    return CostGrid(rows)


def run_search(
    rows: List[Union[str, List[int]]],
    start: Optional[List[int]],
    goal: Optional[List[int]],
    min_run: int,
    max_run: int,
    initial_headings: Optional[List[str]] = None,
    max_expansions: Optional[int] = None,
) -> dict:
    grid = build_grid(rows)
    coster = PathCoster(
        grid,
        min_run,
        max_run,
        initial_headings=initial_headings or DEFAULT_INITIAL_HEADINGS,
        max_expansions=max_expansions,
    )

    print(f"🧩 Searching {grid.width}x{grid.height} grid (runs {min_run}..{max_run})...")
    result = coster.search(start if start is not None else (0, 0), goal)

    if result.status == "done":
        print(f"🚀 OPTIMAL PATH FOUND! Cost: {result.cost} ({result.expanded} states settled)")
        commands = CommandGenerator().generate_commands(result.path)
    elif result.status == "budget_exceeded":
        print(f"⏱️ Gave up after {result.expanded} states (budget {max_expansions})")
        commands = []
    else:
        print(f"💀 NO PATH. Goal unreachable under runs {min_run}..{max_run}")
        commands = []

    return {
        "status": result.status,
        "cost": result.cost,
        "reachable": result.reachable,
        "expanded": result.expanded,
        "path": [s.get_dict() for s in result.path],
        "commands": commands,
    }


# =============================================================================
# ENDPOINTS
# =============================================================================

@app.get("/status")
def health_check():
    return {"status": "ok", "message": "Path cost server is running"}


@app.post("/cost", response_model=CostOutput)
def compute_cost(input_data: CostInput):
    try:
        return run_search(
            input_data.grid,
            input_data.start,
            input_data.goal,
            input_data.min_run,
            input_data.max_run,
            input_data.initial_headings,
            input_data.max_expansions,
        )
    except ConfigError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        import traceback; traceback.print_exc()
        raise HTTPException(status_code=500, detail=str(e))


if __name__ == "__main__":
    uvicorn.run(app, host=SERVER_HOST, port=SERVER_PORT)
