"""Move legality, capture resolution and the game-over test.

Legality and capture share one scan (``flips``) so the two can never
disagree about which discs a placement brackets.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .board import BOARD_SIZE, EMPTY, Board, Move, Side, check_coords, check_side
from .errors import IllegalMove

DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
)


def _scan(cells: Sequence[Sequence[int]], side: Side, row: int, col: int) -> List[Move]:
    if cells[row][col] != EMPTY:
        return []
    opponent = side.opponent
    flipped: List[Move] = []
    for dr, dc in DIRECTIONS:
        run: List[Move] = []
        r, c = row + dr, col + dc
        while 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE and cells[r][c] == opponent:
            run.append((r, c))
            r += dr
            c += dc
        if run and 0 <= r < BOARD_SIZE and 0 <= c < BOARD_SIZE and cells[r][c] == side:
            flipped.extend(run)
    return flipped


def flips(board: Board, side: Side, row: int, col: int) -> List[Move]:
    """Cells that a disc of ``side`` placed at (row, col) would capture.

    Empty when the target is occupied or nothing is bracketed.
    """
    check_side(side)
    check_coords(row, col)
    return _scan(board.grid, side, row, col)


def is_legal_move(board: Board, side: Side, row: int, col: int) -> bool:
    return bool(flips(board, side, row, col))


def legal_moves(board: Board, side: Side) -> List[Move]:
    """All legal placements for ``side`` in row-major order."""
    check_side(side)
    cells = board.grid
    return [
        (r, c)
        for r in range(BOARD_SIZE)
        for c in range(BOARD_SIZE)
        if cells[r][c] == EMPTY and _scan(cells, side, r, c)
    ]


def has_legal_move(board: Board, side: Side) -> bool:
    check_side(side)
    cells = board.grid
    for r in range(BOARD_SIZE):
        for c in range(BOARD_SIZE):
            if cells[r][c] == EMPTY and _scan(cells, side, r, c):
                return True
    return False


def play(board: Board, side: Side, row: int, col: int) -> List[Move]:
    """Place a disc for ``side`` and flip every bracketed run, in place.

    Returns the flipped cells, which is enough to undo the move exactly.
    Raises IllegalMove, leaving the board untouched, when nothing would be
    captured.
    """
    captured = flips(board, side, row, col)
    if not captured:
        raise IllegalMove(side, row, col)
    board.set(row, col, side)
    for r, c in captured:
        board.set(r, c, side)
    return captured


def apply_move(board: Board, side: Side, row: int, col: int) -> Board:
    play(board, side, row, col)
    return board


def is_terminal(board: Board) -> bool:
    """True when neither side can move, regardless of whose turn it is."""
    return not has_legal_move(board, Side.DARK) and not has_legal_move(board, Side.LIGHT)


def winner(board: Board) -> Optional[Side]:
    """Side with more discs, or None on a draw."""
    dark, light = board.counts()
    if dark > light:
        return Side.DARK
    if light > dark:
        return Side.LIGHT
    return None
