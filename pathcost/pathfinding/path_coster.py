"""
Least-cost route across a CostGrid when the mover must keep going straight
for at least ``min_run`` cells before it may turn (or stop) and may never go
straight for more than ``max_run`` cells.

A plain grid cell is not enough state for this: whether a move is legal
depends on the heading we arrived with and how long we have been going that
way. So the search runs Dijkstra over (x, y, heading, run) states. Entry
costs are non-negative, so the first time a goal state with run >= min_run
leaves the frontier its cost is optimal.
"""

import heapq
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from pathcost.entities.grid import CostGrid
from pathcost.utils.consts import (
    CRUCIBLE_MAX_RUN,
    CRUCIBLE_MIN_RUN,
    DEFAULT_INITIAL_HEADINGS,
    UNREACHED,
)
from pathcost.utils.enums import Heading, Movement
from pathcost.utils.errors import ConfigError
from pathcost.utils.types import Position, SearchState, as_position, is_integral


@dataclass
class SearchResult:
    status: str                   # "done" | "no_path" | "budget_exceeded"
    cost: Optional[int] = None
    path: List[SearchState] = field(default_factory=list)
    expanded: int = 0
    goal_state: Optional[SearchState] = None

    @property
    def reachable(self) -> bool:
        return self.status == "done"


class PathCoster:
    """
    Owns the grid and the run limits; every call to search() builds a fresh
    cost table and frontier, so one instance can serve many queries.
    """

    def __init__(
        self,
        grid: CostGrid,
        min_run: int = CRUCIBLE_MIN_RUN,
        max_run: int = CRUCIBLE_MAX_RUN,
        initial_headings: Iterable[Heading] = DEFAULT_INITIAL_HEADINGS,
        max_expansions: Optional[int] = None,
    ):
        if not isinstance(grid, CostGrid):
            grid = CostGrid(grid)
        self.grid = grid

        if not is_integral(min_run) or min_run < 1:
            raise ConfigError(f"min_run must be an integer >= 1, got {min_run!r}")
        if not is_integral(max_run) or max_run < min_run:
            raise ConfigError(f"max_run must be an integer >= min_run ({min_run}), got {max_run!r}")
        self.min_run = int(min_run)
        self.max_run = int(max_run)

        self.initial_headings = _parse_headings(initial_headings)

        if max_expansions is not None and (not is_integral(max_expansions) or max_expansions < 1):
            raise ConfigError(f"max_expansions must be a positive integer or None, got {max_expansions!r}")
        self.max_expansions = None if max_expansions is None else int(max_expansions)

    # ------------------------------------------------------------------
    # State model
    # ------------------------------------------------------------------

    def seed_states(self, start: Position) -> List[SearchState]:
        """One run=0 pseudo-state per allowed first heading."""
        return [SearchState(start.x, start.y, h, 0) for h in self.initial_headings]

    def get_neighbors(self, state: SearchState) -> List[Tuple[SearchState, int]]:
        """Legal successors of state with the cost of entering each one."""
        neighbors = []
        for movement in Movement:
            if movement is Movement.STRAIGHT:
                if state.run >= self.max_run:
                    continue
                nxt = state.step(state.heading, state.run + 1)
            else:
                if state.run < self.min_run:
                    continue
                nxt = state.step(movement.apply(state.heading), 1)

            if not self.grid.is_within_bounds(nxt.x, nxt.y):
                continue
            neighbors.append((nxt, self.grid.cost_at(nxt.x, nxt.y)))
        return neighbors

    def accepts(self, state: SearchState, goal: Position) -> bool:
        return state.x == goal.x and state.y == goal.y and state.run >= self.min_run

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    def search(self, start, goal=None) -> SearchResult:
        """
        Run the search from start to goal (default: bottom-right corner).

        Returns a SearchResult; an unreachable goal is status "no_path",
        not an exception.
        """
        start = as_position(start)
        goal = as_position(goal) if goal is not None else self.grid.bottom_right
        self.grid.require_position(start, "start")
        self.grid.require_position(goal, "goal")

        # Dense table indexed by (y, x, heading, run); run 0 is only used by
        # the start pseudo-states. Holds Python ints, so sums are unbounded.
        best = np.full(
            (self.grid.height, self.grid.width, len(Heading), self.max_run + 1),
            UNREACHED,
            dtype=object,
        )
        parents: Dict[SearchState, SearchState] = {}
        frontier: List[Tuple[int, int, SearchState]] = []
        seq = 0

        for seed in self.seed_states(start):
            best[seed.key()] = 0
            heapq.heappush(frontier, (0, seq, seed))
            seq += 1

        expanded = 0
        while frontier:
            cost, _, state = heapq.heappop(frontier)
            if cost > best[state.key()]:
                continue  # stale

            if self.max_expansions is not None and expanded >= self.max_expansions:
                return SearchResult(status="budget_exceeded", expanded=expanded)
            expanded += 1

            if self.accepts(state, goal):
                return SearchResult(
                    status="done",
                    cost=int(cost),
                    path=self._reconstruct_path(parents, state),
                    expanded=expanded,
                    goal_state=state,
                )

            for nxt, step_cost in self.get_neighbors(state):
                new_cost = cost + step_cost
                key = nxt.key()
                recorded = best[key]
                if recorded != UNREACHED and recorded <= new_cost:
                    continue
                best[key] = new_cost
                parents[nxt] = state
                heapq.heappush(frontier, (new_cost, seq, nxt))
                seq += 1

        return SearchResult(status="no_path", expanded=expanded)

    def minimal_cost(self, start, goal=None) -> Optional[int]:
        return self.search(start, goal).cost

    def _reconstruct_path(self, parents: Dict[SearchState, SearchState], end: SearchState) -> List[SearchState]:
        path = [end]
        while path[-1] in parents:
            path.append(parents[path[-1]])
        return path[::-1]


# ----------------------------------------------------------------------
# Functional entry points
# ----------------------------------------------------------------------

def find_path(grid, start, goal, min_run: int, max_run: int, **kwargs) -> SearchResult:
    return PathCoster(grid, min_run, max_run, **kwargs).search(start, goal)


def minimal_cost(grid, start, goal, min_run: int, max_run: int, **kwargs) -> Optional[int]:
    """
    Minimum total entry cost from start to goal, or None if no route
    satisfies the run limits.

    Raises ConfigError for a malformed grid, out-of-bounds endpoints or
    max_run < min_run.
    """
    return find_path(grid, start, goal, min_run, max_run, **kwargs).cost

def _parse_headings(headings: Iterable) -> Tuple[Heading, ...]:
    parsed = []
    for h in headings:
        try:
            heading = Heading.from_letter(h) if isinstance(h, str) else Heading(h)
        except (TypeError, ValueError):
            raise ConfigError(f"unknown heading: {h!r}") from None
        if heading in parsed:
            raise ConfigError(f"duplicate initial heading: {heading.name}")
        parsed.append(heading)
    if not parsed:
        raise ConfigError("at least one initial heading is required")
    return tuple(parsed)
