# IN THIS FILE: POSITION, SEARCHSTATE

from typing import Optional, Tuple

from pathcost.utils.enums import Heading
from pathcost.utils.errors import ConfigError


class Position:
    """
    A grid coordinate. This is the base class for any position-related data.
    """

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y

    def as_tuple(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return False
        return self.x == other.x and self.y == other.y

    def __hash__(self) -> int:
        return hash((self.x, self.y))

    def __repr__(self) -> str:
        return f"Position(x={self.x}, y={self.y})"


class SearchState(Position):
    """
    Position augmented with how we got there: the heading of the last move
    and how many cells in a row were entered along it.

    The start pseudo-states carry run=0; every other state has
    1 <= run <= max_run.
    """

    def __init__(self, x: int, y: int, heading: Heading, run: int):
        super().__init__(x, y)
        self.heading = heading
        self.run = run

    def key(self) -> Tuple[int, int, int, int]:
        """Index into the dense cost table: (y, x, heading, run)."""
        return (self.y, self.x, self.heading.index, self.run)

    def step(self, heading: Heading, run: int) -> 'SearchState':
        dx, dy = heading.offset
        return SearchState(self.x + dx, self.y + dy, heading, run)

    def get_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        return {
            "x": self.x,
            "y": self.y,
            "d": int(self.heading),
            "r": self.run,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SearchState):
            return False
        return (self.x == other.x and
                self.y == other.y and
                self.heading == other.heading and
                self.run == other.run)

    def __hash__(self) -> int:
        return hash((self.x, self.y, self.heading, self.run))

    def __repr__(self) -> str:
        return f"SearchState(x={self.x}, y={self.y}, d={self.heading.name}, r={self.run})"


def as_position(value) -> Optional[Position]:
    """Accept a Position or an (x, y) pair."""
    if value is None or isinstance(value, Position):
        return value
    try:
        x, y = value
        return Position(int(x), int(y))
    except (TypeError, ValueError):
        raise ConfigError(f"expected an (x, y) pair, got {value!r}") from None


def is_integral(value) -> bool:
    """True for ints, numpy integers and integral floats; never bools or strings."""
    if isinstance(value, (bool, str)):
        return False
    try:
        return int(value) == value
    except (TypeError, ValueError, OverflowError):
        return False
