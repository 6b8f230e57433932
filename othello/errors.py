from __future__ import annotations


class OthelloError(Exception):
    """Base class for errors raised by the othello engine."""


class InvalidInput(OthelloError, ValueError):
    """Coordinates off the board or a value that is not a Side."""


class IllegalMove(OthelloError):
    """A placement that captures nothing or targets an occupied cell.

    The board is never modified when this is raised.
    """

    def __init__(self, side, row: int, col: int) -> None:
        self.side = side
        self.row = row
        self.col = col
        super().__init__(f"Illegal move for {side.name.lower()}: ({row}, {col})")


class OutOfTurn(OthelloError):
    """A move submitted for a side that is not the side to move."""

    def __init__(self, side, to_move) -> None:
        self.side = side
        self.to_move = to_move
        super().__init__(f"Not {side.name.lower()}'s turn, {to_move.name.lower()} to move")
