from __future__ import annotations

import logging
import threading
from concurrent.futures import Executor, Future
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .ai import AIPlayer
from .board import Board, Move, Side, check_coords, check_side
from .config import CONFIG
from .errors import IllegalMove, OutOfTurn
from . import rules

logger = logging.getLogger(__name__)


@dataclass
class MoveRecord:
    side: Side
    move: Optional[Move]  # None for a forced pass
    flipped: List[Move] = field(default_factory=list)


class Game:
    """Owns the authoritative board and whose turn it is.

    Every mutation goes through this class and the rules module, under one
    lock. Collaborators only ever receive copies or snapshots. The computer
    searches on a copy of the board and its move is applied once the search
    has finished.
    """

    def __init__(
        self,
        computer_side: Optional[Side] = Side.LIGHT,
        depth: Optional[int] = None,
        ai: Optional[AIPlayer] = None,
        start: Optional[Board] = None,
    ) -> None:
        self.ai = ai or AIPlayer(CONFIG.search)
        self.depth = CONFIG.search.depth if depth is None else depth
        self._lock = threading.RLock()
        self._version = 0
        self._pending_version = 0
        self.pending: Optional[Future] = None
        self.reset(computer_side, start)

    def reset(
        self,
        computer_side: Optional[Side] = Side.LIGHT,
        start: Optional[Board] = None,
        side_to_move: Side = Side.DARK,
    ) -> None:
        """Start over, from the standard opening unless ``start`` is given."""
        with self._lock:
            self.computer_side = check_side(computer_side) if computer_side is not None else None
            self._board = start.copy() if start is not None else new_game()
            self._side_to_move = check_side(side_to_move)
            self._game_over = rules.is_terminal(self._board)
            if not self._game_over and not rules.has_legal_move(self._board, self._side_to_move):
                self._side_to_move = self._side_to_move.opponent
            self.history: List[MoveRecord] = []
            # bumped on reset so a search started for an older game is dropped
            self._version += 1
        logger.info("New game, computer plays %s", self.computer_side.name.lower() if self.computer_side else "nobody")

    @property
    def board(self) -> Board:
        with self._lock:
            return self._board.copy()

    @property
    def side_to_move(self) -> Side:
        return self._side_to_move

    @property
    def game_over(self) -> bool:
        return self._game_over

    @property
    def thinking(self) -> bool:
        pending = self.pending
        return pending is not None and not pending.done() and self._pending_version == self._version

    def get_legal_moves(self) -> List[Move]:
        with self._lock:
            if self._game_over:
                return []
            return rules.legal_moves(self._board, self._side_to_move)

    def score(self) -> Dict[str, int]:
        with self._lock:
            return score(self._board)

    def winner(self) -> Optional[Side]:
        with self._lock:
            if not self._game_over:
                return None
            return rules.winner(self._board)

    def attempt_move(self, row: int, col: int, side: Optional[Side] = None) -> List[Move]:
        """Play (row, col) for the side to move and return the flipped cells.

        Raises IllegalMove with no state change when the placement is not
        legal or the game is already over, and OutOfTurn when ``side`` is
        given and is not the side to move.
        """
        check_coords(row, col)
        if side is not None:
            check_side(side)
        with self._lock:
            if self._game_over:
                raise IllegalMove(self._side_to_move, row, col)
            if side is not None and side is not self._side_to_move:
                raise OutOfTurn(side, self._side_to_move)
            return self._play(self._side_to_move, row, col)

    def _play(self, side: Side, row: int, col: int) -> List[Move]:
        flipped = rules.play(self._board, side, row, col)
        self.history.append(MoveRecord(side=side, move=(row, col), flipped=flipped))
        logger.info("%s plays (%d, %d), flipping %d", side.name.lower(), row, col, len(flipped))
        self._advance(side)
        return flipped

    def _advance(self, mover: Side) -> None:
        opponent = mover.opponent
        if rules.is_terminal(self._board):
            self._game_over = True
            self._side_to_move = opponent
            dark, light = self._board.counts()
            logger.info("Game over: dark %d, light %d", dark, light)
        elif rules.has_legal_move(self._board, opponent):
            self._side_to_move = opponent
        else:
            self.history.append(MoveRecord(side=opponent, move=None))
            self._side_to_move = mover
            logger.info("%s has no legal move and passes", opponent.name.lower())

    def is_computer_turn(self) -> bool:
        return not self._game_over and self._side_to_move is self.computer_side

    def computer_move(self) -> Optional[Move]:
        """Search and play one move for the computer side, blocking."""
        with self._lock:
            if not self.is_computer_turn():
                return None
            board, side, version = self._board.copy(), self._side_to_move, self._version
        return self._search_and_play(board, side, version)

    def request_computer_move(self, executor: Executor) -> Optional[Future]:
        """Schedule the computer's turn(s) on ``executor`` without blocking.

        The future resolves to the list of moves the computer played; more
        than one when the human is forced to pass in between.
        """
        with self._lock:
            if not self.is_computer_turn():
                return None
            version = self._version
            if self.thinking:
                return self.pending
            self._pending_version = version
            self.pending = executor.submit(self._computer_turns, version)
            return self.pending

    def _computer_turns(self, version: int) -> List[Move]:
        played: List[Move] = []
        while True:
            with self._lock:
                if self._version != version or not self.is_computer_turn():
                    return played
                board, side = self._board.copy(), self._side_to_move
            move = self._search_and_play(board, side, version)
            if move is None:
                return played
            played.append(move)

    def _search_and_play(self, board: Board, side: Side, version: int) -> Optional[Move]:
        move = self.ai.select_move(board, side, self.depth)
        with self._lock:
            if self._version != version or self._side_to_move is not side or self._game_over:
                logger.info("Discarding search result for a position that no longer exists")
                return None
            if move is not None:
                self._play(side, *move)
        return move

    def wait(self, timeout: Optional[float] = None) -> List[Move]:
        pending = self.pending
        if pending is None:
            return []
        return pending.result(timeout=timeout)

    def snapshot(self) -> Dict[str, object]:
        with self._lock:
            last = self.history[-1] if self.history else None
            winner = self.winner()
            return {
                "board": self._board.rows(),
                "turn": self._side_to_move.name.lower(),
                "computer": self.computer_side.name.lower() if self.computer_side else None,
                "legal_moves": [list(m) for m in self.get_legal_moves()],
                "score": self.score(),
                "game_over": self._game_over,
                "winner": winner.name.lower() if winner else None,
                "last_move": list(last.move) if last and last.move else None,
                "last_flipped": [list(m) for m in last.flipped] if last else [],
                "passed": last.side.name.lower() if last and last.move is None else None,
                "thinking": self.thinking,
            }


def new_game() -> Board:
    """Standard opening position."""
    return Board.initial()


def legal_moves(board: Board, side: Side) -> List[Move]:
    return rules.legal_moves(board, side)


def attempt_move(board: Board, side: Side, move: Move) -> Board:
    row, col = move
    return rules.apply_move(board, side, row, col)


def score(board: Board) -> Dict[str, int]:
    dark, light = board.counts()
    return {"dark": dark, "light": light}


def is_terminal(board: Board) -> bool:
    return rules.is_terminal(board)


def computer_move(board: Board, side: Side, depth: Optional[int] = None) -> Optional[Move]:
    return AIPlayer(CONFIG.search).select_move(board, side, depth)
