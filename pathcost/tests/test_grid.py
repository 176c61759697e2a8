"""
Tests for CostGrid, text parsing, headings and search states.
"""

import numpy as np
import pytest

from pathcost.entities.grid import CostGrid, parse_grid
from pathcost.utils.enums import Heading, Movement
from pathcost.utils.errors import ConfigError
from pathcost.utils.types import Position, SearchState, as_position, is_integral


# ========== CostGrid ==========

def test_parse_grid_first_line_is_row_zero():
    grid = parse_grid("123\n456\n")
    assert (grid.width, grid.height) == (3, 2)
    assert grid.cost_at(0, 0) == 1
    assert grid.cost_at(2, 0) == 3
    assert grid.cost_at(0, 1) == 4
    assert grid.bottom_right == Position(2, 1)


def test_parse_grid_skips_blank_lines_and_trailing_whitespace():
    grid = CostGrid.from_lines(["12  \n", "\n", "34\n"])
    assert grid.cells.tolist() == [[1, 2], [3, 4]]


def test_parse_grid_rejects_non_digits():
    with pytest.raises(ConfigError, match="line 2"):
        parse_grid("12\n3x\n")


def test_parse_grid_rejects_jagged_text():
    with pytest.raises(ConfigError, match="jagged"):
        parse_grid("123\n45\n")


def test_grid_is_read_only():
    grid = CostGrid([[1, 2], [3, 4]])
    with pytest.raises(ValueError):
        grid.cells[0, 0] = 7


def test_grid_rejects_non_integer_costs():
    with pytest.raises(ConfigError):
        CostGrid([[1, 2.5]])
    with pytest.raises(ConfigError):
        CostGrid([["1", "2"]])
    with pytest.raises(ConfigError):
        CostGrid(np.zeros(3))


def test_grid_accepts_integral_floats():
    grid = CostGrid(np.ones((2, 3)))
    assert grid.cost_at(2, 1) == 1


def test_bounds():
    grid = CostGrid([[1, 2], [3, 4]])
    assert grid.is_within_bounds(1, 1)
    assert not grid.is_within_bounds(2, 0)
    assert not grid.is_within_bounds(0, -1)
    with pytest.raises(ConfigError, match="goal"):
        grid.require_position(Position(0, 2), "goal")


# ========== Heading / Movement ==========

def test_rotations_are_quarter_turns():
    assert Heading.EAST.rotate_ccw() == Heading.NORTH
    assert Heading.EAST.rotate_cw() == Heading.SOUTH
    assert Heading.SOUTH.rotate_cw() == Heading.WEST
    for h in Heading:
        assert h.rotate_cw().rotate_ccw() == h
        assert h.rotate_cw().rotate_cw() == h.opposite()
        assert h.opposite() not in (h.rotate_cw(), h.rotate_ccw())


def test_offsets_and_letters():
    assert Heading.NORTH.offset == (0, 1)
    assert Heading.WEST.offset == (-1, 0)
    assert [h.index for h in Heading] == [0, 1, 2, 3]
    assert Heading.from_letter("s") == Heading.SOUTH
    assert Heading.from_letter("north") == Heading.NORTH
    with pytest.raises(ValueError):
        Heading.from_letter("Q")


def test_movement_apply():
    assert Movement.STRAIGHT.apply(Heading.WEST) == Heading.WEST
    assert Movement.TURN_CW.apply(Heading.NORTH) == Heading.EAST
    assert Movement.TURN_CCW.apply(Heading.NORTH) == Heading.WEST


# ========== SearchState ==========

def test_search_state_identity():
    a = SearchState(1, 2, Heading.EAST, 3)
    assert a == SearchState(1, 2, Heading.EAST, 3)
    assert a != SearchState(1, 2, Heading.EAST, 2)
    assert a != Position(1, 2)
    assert len({a, SearchState(1, 2, Heading.EAST, 3)}) == 1
    assert a.key() == (2, 1, 0, 3)


def test_search_state_step_and_dict():
    nxt = SearchState(1, 1, Heading.EAST, 1).step(Heading.NORTH, 1)
    assert nxt == SearchState(1, 2, Heading.NORTH, 1)
    assert nxt.get_dict() == {"x": 1, "y": 2, "d": 2, "r": 1}


def test_as_position():
    assert as_position((3, 4)) == Position(3, 4)
    assert as_position(Position(1, 1)) == Position(1, 1)
    assert as_position(None) is None
    with pytest.raises(ConfigError):
        as_position("abc")


def test_is_integral_shared_rule():
    assert is_integral(3)
    assert is_integral(np.int64(3))
    assert is_integral(2.0)
    assert is_integral(2 ** 80)
    assert not is_integral(2.5)
    assert not is_integral(True)
    assert not is_integral("3")
    assert not is_integral(None)
    assert not is_integral(float("nan"))


def test_search_states_have_no_ordering():
    a = SearchState(0, 0, Heading.EAST, 1)
    with pytest.raises(TypeError):
        a < SearchState(1, 0, Heading.EAST, 1)
