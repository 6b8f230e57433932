"""Othello engine package providing rules, evaluation, and AI search.

Modules:
- board: the 8x8 grid and the Side enumeration
- rules: legality, capture and the game-over test
- evaluator: Heuristic evaluation function for positions
- ai: Minimax with alpha-beta pruning
- game: turn ownership and the API collaborators call
"""

from .ai import AIPlayer, SearchResult
from .board import Board, Side
from .errors import IllegalMove, InvalidInput, OthelloError, OutOfTurn
from .evaluator import Evaluator, evaluate
from .game import Game, attempt_move, computer_move, is_terminal, legal_moves, new_game, score

__all__ = [
    "AIPlayer",
    "SearchResult",
    "Board",
    "Side",
    "IllegalMove",
    "InvalidInput",
    "OthelloError",
    "OutOfTurn",
    "Evaluator",
    "evaluate",
    "Game",
    "attempt_move",
    "computer_move",
    "is_terminal",
    "legal_moves",
    "new_game",
    "score",
]
