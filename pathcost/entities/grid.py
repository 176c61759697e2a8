# pathcost/entities/grid.py

from typing import Iterable, Sequence, Union

import numpy as np

from pathcost.utils.consts import DIGITS
from pathcost.utils.errors import ConfigError
from pathcost.utils.types import Position, is_integral


class CostGrid:
    """
    Immutable rectangular matrix of non-negative entry costs.

    cells[y][x] is the cost charged for ENTERING (x, y). The start cell's
    own cost is never charged.
    """

    def __init__(self, rows: Union[Sequence[Sequence[int]], np.ndarray]):
        if isinstance(rows, np.ndarray):
            if rows.ndim != 2:
                raise ConfigError(f"grid must be 2-dimensional, got {rows.ndim} dimensions")
            raw = rows.tolist()
        else:
            raw = [list(row) for row in rows]

        if not raw or not raw[0]:
            raise ConfigError("grid must have at least one row and one column")

        width = len(raw[0])
        for y, row in enumerate(raw):
            if len(row) != width:
                raise ConfigError(f"row {y} has {len(row)} cells, expected {width} (jagged grid)")
            for x, cost in enumerate(row):
                if not is_integral(cost):
                    raise ConfigError(f"cost at ({x}, {y}) is not an integer: {cost!r}")
                if cost < 0:
                    raise ConfigError(f"cost at ({x}, {y}) is negative: {cost}")
                row[x] = int(cost)

        # Python ints so very large "wall" costs never overflow
        self.cells = np.array(raw, dtype=object)
        self.cells.setflags(write=False)
        self.height, self.width = self.cells.shape

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> 'CostGrid':
        """One digit per cell, one row per line. Blank lines are ignored."""
        rows = []
        for line_no, line in enumerate(lines, start=1):
            line = line.strip()
            if not line:
                continue
            bad = [c for c in line if c not in DIGITS]
            if bad:
                raise ConfigError(f"line {line_no}: not a digit: {bad[0]!r}")
            rows.append([int(c) for c in line])
        return cls(rows)

    def is_within_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cost_at(self, x: int, y: int) -> int:
        return int(self.cells[y, x])

    def require_position(self, pos: Position, label: str) -> None:
        """Raise ConfigError if pos lies outside the grid."""
        if not self.is_within_bounds(pos.x, pos.y):
            raise ConfigError(
                f"{label} ({pos.x}, {pos.y}) is outside the {self.width}x{self.height} grid"
            )

    @property
    def bottom_right(self) -> Position:
        return Position(self.width - 1, self.height - 1)

    def __repr__(self) -> str:
        return f"CostGrid(width={self.width}, height={self.height})"


def parse_grid(text: str) -> CostGrid:
    return CostGrid.from_lines(text.splitlines())
