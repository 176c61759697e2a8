# IN THIS FILE: HEADINGS and MOVEMENT TYPES
from enum import Enum
from typing import Tuple


class Heading(int, Enum):
    """
    Direction of the most recent move into a cell.
    Uses even numbers so a 90-degree rotation is +/- 2 (mod 8).
    """
    EAST = 0
    NORTH = 2
    WEST = 4
    SOUTH = 6

    def __int__(self):
        return self.value

    @property
    def index(self) -> int:
        """Dense 0..3 index used by the cost table."""
        return self.value // 2

    @property
    def letter(self) -> str:
        return self.name[0]

    @property
    def offset(self) -> Tuple[int, int]:
        """(dx, dy) of one step. y grows NORTH."""
        return _OFFSETS[self]

    def rotate_cw(self) -> 'Heading':
        return Heading((self.value - 2) % 8)

    def rotate_ccw(self) -> 'Heading':
        return Heading((self.value + 2) % 8)

    def opposite(self) -> 'Heading':
        return Heading((self.value + 4) % 8)

    @staticmethod
    def from_letter(letter: str) -> 'Heading':
        """Accepts "E" as well as "east"."""
        for heading in Heading:
            if letter.upper() in (heading.letter, heading.name):
                return heading
        raise ValueError(f"unknown heading letter: {letter!r}")


_OFFSETS = {
    Heading.EAST: (1, 0),
    Heading.NORTH: (0, 1),
    Heading.WEST: (-1, 0),
    Heading.SOUTH: (0, -1),
}


class Movement(Enum):
    """
    Legal transitions out of a search state.
    Value is the command prefix used by the command generator.
    """
    STRAIGHT = "FW"
    TURN_CW = "TR"
    TURN_CCW = "TL"

    def apply(self, heading: Heading) -> Heading:
        if self is Movement.TURN_CW:
            return heading.rotate_cw()
        if self is Movement.TURN_CCW:
            return heading.rotate_ccw()
        return heading
