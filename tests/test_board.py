from __future__ import annotations

import pytest

from othello import Board, InvalidInput, Side
from othello.board import EMPTY


def test_initial_position_has_four_centre_discs():
    b = Board.initial()
    assert b.get(3, 3) == Side.LIGHT
    assert b.get(3, 4) == Side.DARK
    assert b.get(4, 3) == Side.DARK
    assert b.get(4, 4) == Side.LIGHT
    assert b.counts() == (2, 2)
    assert b.occupied() == 4


def test_copy_is_independent():
    b = Board.initial()
    c = b.copy()
    c.set(0, 0, Side.DARK)
    assert b.get(0, 0) == EMPTY
    assert c.get(0, 0) == Side.DARK
    assert b != c


def test_from_rows_round_trips_through_str():
    b = Board.from_rows([
        "D.......",
        "........",
        "........",
        "...LD...",
        "...DL...",
        "........",
        "........",
        ".......L",
    ])
    assert b.get(0, 0) == Side.DARK
    assert b.get(7, 7) == Side.LIGHT
    assert b.counts() == (3, 3)
    assert "D . . . . . . ." in str(b)


@pytest.mark.parametrize("row,col", [(-1, 0), (0, 8), (8, 8), (3, 99)])
def test_out_of_range_coordinates_are_rejected(row, col):
    b = Board.initial()
    with pytest.raises(InvalidInput):
        b.get(row, col)


def test_set_rejects_non_side_values():
    b = Board()
    with pytest.raises(InvalidInput):
        b.set(0, 0, 1)


def test_bad_layouts_are_rejected():
    with pytest.raises(InvalidInput):
        Board.from_rows(["........"] * 7)
    with pytest.raises(InvalidInput):
        Board.from_rows(["X......."] + ["........"] * 7)


def test_side_opponent_and_parse():
    assert Side.DARK.opponent is Side.LIGHT
    assert Side.LIGHT.opponent is Side.DARK
    assert Side.parse("Light") is Side.LIGHT
    with pytest.raises(InvalidInput):
        Side.parse("white")


def test_rows_snapshot_does_not_alias_board():
    b = Board.initial()
    rows = b.rows()
    rows[0][0] = 1
    assert b.get(0, 0) == EMPTY


def test_grid_is_an_immutable_view_of_current_cells():
    b = Board.initial()
    grid = b.grid
    assert grid[3][3] == Side.LIGHT
    with pytest.raises(TypeError):
        grid[0][0] = Side.DARK
    b.set(0, 0, Side.DARK)
    assert grid[0][0] == EMPTY
    assert b.grid[0][0] == Side.DARK
