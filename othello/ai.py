from __future__ import annotations

import logging
from concurrent.futures import ProcessPoolExecutor
from concurrent.futures.process import BrokenProcessPool
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from .board import Board, Move, Side, check_side
from .config import SearchConfig
from .errors import InvalidInput
from .evaluator import Evaluator
from .rules import apply_move, has_legal_move, legal_moves

logger = logging.getLogger(__name__)

INF = 10**9


@dataclass
class SearchResult:
    best_move: Optional[Move]
    score: int
    nodes: int
    scored_moves: List[Tuple[Move, int]] = field(default_factory=list)


class AIPlayer:
    """Fixed-depth minimax with alpha-beta pruning.

    Light is the maximizing side and Dark the minimizing side, matching the
    evaluator's sign convention. Every ply is explored on a copy of the
    board, so sibling branches never see each other's moves.
    """

    def __init__(self, config: Optional[SearchConfig] = None, evaluator: Optional[Evaluator] = None) -> None:
        self.config = config or SearchConfig()
        self.evaluator = evaluator or Evaluator()
        self.nodes = 0

    def select_move(self, board: Board, side: Side, depth: Optional[int] = None) -> Optional[Move]:
        """Best move for ``side`` or None when it has no legal move."""
        return self.search_root(board, side, depth).best_move

    def search_root(self, board: Board, side: Side, depth: Optional[int] = None) -> SearchResult:
        """Score every root move and keep the best one for ``side``.

        Each root move is followed by a ``depth``-ply search, so depth 0
        scores the children statically. Ties go to the earliest move in
        row-major order.
        """
        check_side(side)
        depth = self.config.depth if depth is None else depth
        if not isinstance(depth, int) or depth < 0:
            raise InvalidInput(f"Search depth must be a non-negative integer, got {depth!r}")

        moves = legal_moves(board, side)
        if not moves:
            return SearchResult(best_move=None, score=self.evaluator.evaluate(board), nodes=0)

        if self.config.workers > 1 and len(moves) > 1:
            scored = self._score_parallel(board, side, moves, depth)
        else:
            scored = [self._score_root_move(board, side, move, depth) for move in moves]

        sign = 1 if side is Side.LIGHT else -1
        best_move: Optional[Move] = None
        best_score = -INF
        nodes = 0
        scored_moves: List[Tuple[Move, int]] = []
        for move, (score, sub_nodes) in zip(moves, scored):
            nodes += sub_nodes
            scored_moves.append((move, score))
            if best_move is None or sign * score > sign * best_score:
                best_score = score
                best_move = move

        logger.debug(
            "search %s depth=%d: best=%s score=%d nodes=%d",
            side.name.lower(), depth, best_move, best_score, nodes,
        )
        return SearchResult(best_move=best_move, score=best_score, nodes=nodes, scored_moves=scored_moves)

    def _score_root_move(self, board: Board, side: Side, move: Move, depth: int) -> Tuple[int, int]:
        self.nodes = 0
        child = apply_move(board.copy(), side, *move)
        opponent = side.opponent
        score = self.search(child, depth, opponent is Side.LIGHT, -INF, INF, opponent)
        return score, self.nodes + 1

    def _score_parallel(
        self, board: Board, side: Side, moves: List[Move], depth: int
    ) -> List[Tuple[int, int]]:
        tasks = [(self.config, self.evaluator, board, side, move, depth) for move in moves]
        n_procs = min(self.config.workers, len(moves))
        try:
            with ProcessPoolExecutor(max_workers=n_procs) as pool:
                # map keeps task order, so the tie-break is unaffected
                return list(pool.map(_root_worker, tasks))
        except (OSError, BrokenProcessPool) as exc:
            logger.warning("Parallel root search failed (%s), falling back to sequential", exc)
            return [self._score_root_move(board, side, move, depth) for move in moves]

    def search(
        self,
        board: Board,
        depth: int,
        maximizing: bool,
        alpha: int,
        beta: int,
        side_to_move: Side,
    ) -> int:
        self.nodes += 1
        opponent = side_to_move.opponent

        if depth == 0:
            return self.evaluator.evaluate(board)

        moves = legal_moves(board, side_to_move)
        if not moves:
            if not has_legal_move(board, opponent):
                return self.evaluator.evaluate(board)
            # Forced pass: same position, other side to move
            return self.search(board, depth - 1, not maximizing, alpha, beta, opponent)

        value = -INF if maximizing else INF
        for row, col in moves:
            child = apply_move(board.copy(), side_to_move, row, col)
            score = self.search(child, depth - 1, not maximizing, alpha, beta, opponent)
            if maximizing:
                value = max(value, score)
                alpha = max(alpha, value)
            else:
                value = min(value, score)
                beta = min(beta, value)
            if self.config.alpha_beta and beta <= alpha:
                break
        return value


def _root_worker(args) -> Tuple[int, int]:
    config, evaluator, board, side, move, depth = args
    return AIPlayer(config, evaluator)._score_root_move(board, side, move, depth)
