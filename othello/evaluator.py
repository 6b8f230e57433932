from __future__ import annotations

from typing import Optional, Tuple

from .board import BOARD_SIZE, Board
from .config import EvalConfig
from .rules import is_terminal


class Evaluator:
    """Static evaluation for Othello positions.

    Positive scores favor Light, negative scores favor Dark. The result does
    not depend on whose turn it is.
    """

    CORNERS: Tuple[Tuple[int, int], ...] = (
        (0, 0), (0, BOARD_SIZE - 1), (BOARD_SIZE - 1, 0), (BOARD_SIZE - 1, BOARD_SIZE - 1),
    )

    # Border cells minus the corners
    EDGES: Tuple[Tuple[int, int], ...] = tuple(
        cell
        for i in range(1, BOARD_SIZE - 1)
        for cell in ((0, i), (BOARD_SIZE - 1, i), (i, 0), (i, BOARD_SIZE - 1))
    )

    def __init__(self, config: Optional[EvalConfig] = None) -> None:
        self.config = config or EvalConfig()

    def evaluate(self, board: Board) -> int:
        cfg = self.config
        cells = board.grid
        score = 0

        # Cell values are +1 for Light and -1 for Dark
        score += cfg.corner_weight * sum(cells[r][c] for r, c in self.CORNERS)
        score += cfg.edge_weight * sum(cells[r][c] for r, c in self.EDGES)

        dark, light = board.counts()
        material = light - dark
        score += cfg.material_weight * material

        if is_terminal(board):
            score += cfg.terminal_weight * material

        return int(score)


def evaluate(board: Board) -> int:
    return Evaluator().evaluate(board)
