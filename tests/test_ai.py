from __future__ import annotations

import pytest

from othello import AIPlayer, Board, InvalidInput, Side
from othello.ai import INF
from othello.config import SearchConfig
from othello.rules import apply_move, legal_moves

EMPTY_ROW = "........"

MIDGAME = Board.from_rows([
    "........",
    "........",
    "..DDD...",
    "..DLL...",
    "..LLD...",
    ".....L..",
    "........",
    "........",
])

CORNER_FOR_LIGHT = Board.from_rows([EMPTY_ROW] * 6 + [".D......", ".DL....."])
CORNER_FOR_DARK = Board.from_rows([EMPTY_ROW] * 6 + [".L......", ".LD....."])


def _after(board, side, move):
    return apply_move(board.copy(), side, *move)


def test_opening_tie_goes_to_first_move():
    ai = AIPlayer(SearchConfig(depth=0))
    result = ai.search_root(Board.initial(), Side.DARK)
    # all four replies are symmetric
    assert {score for _, score in result.scored_moves} == {-3}
    assert result.best_move == (2, 3)


def test_light_takes_the_corner():
    ai = AIPlayer()
    assert legal_moves(CORNER_FOR_LIGHT, Side.LIGHT) == [(5, 0), (7, 0)]
    result = ai.search_root(CORNER_FOR_LIGHT, Side.LIGHT, depth=0)
    assert result.best_move == (7, 0)
    assert result.score == 72


def test_dark_takes_the_corner():
    ai = AIPlayer()
    result = ai.search_root(CORNER_FOR_DARK, Side.DARK, depth=0)
    assert result.best_move == (7, 0)
    assert result.score == -72


def test_no_legal_move_returns_none():
    b = Board.from_rows(["LD......"] + [EMPTY_ROW] * 7)
    assert AIPlayer().select_move(b, Side.DARK, depth=3) is None


def test_forced_pass_is_searched_not_evaluated():
    b = Board.from_rows(["LD......"] + [EMPTY_ROW] * 7)
    ai = AIPlayer()
    static = ai.evaluator.evaluate(b)
    # dark passes, light plays (0, 2) and takes every disc
    score = ai.search(b, 2, False, -INF, INF, Side.DARK)
    assert static == 40
    assert score == 50 + 20 + 3 + 15


def test_selected_move_is_legal():
    ai = AIPlayer(SearchConfig(depth=2))
    move = ai.select_move(MIDGAME, Side.LIGHT)
    assert move in legal_moves(MIDGAME, Side.LIGHT)


def test_search_does_not_touch_the_board():
    b = MIDGAME.copy()
    AIPlayer(SearchConfig(depth=3)).select_move(b, Side.DARK)
    assert b == MIDGAME


@pytest.mark.parametrize(
    "board,side",
    [
        (Board.initial(), Side.DARK),
        (_after(Board.initial(), Side.DARK, (2, 3)), Side.LIGHT),
        (MIDGAME, Side.DARK),
        (MIDGAME, Side.LIGHT),
    ],
)
def test_pruning_never_changes_the_choice(board, side):
    pruned = AIPlayer(SearchConfig(alpha_beta=True)).search_root(board, side, depth=3)
    full = AIPlayer(SearchConfig(alpha_beta=False)).search_root(board, side, depth=3)
    assert pruned.best_move == full.best_move
    assert pruned.score == full.score
    assert pruned.nodes <= full.nodes


def test_pruning_visits_fewer_nodes_on_a_real_position():
    pruned = AIPlayer(SearchConfig(alpha_beta=True)).search_root(MIDGAME, Side.LIGHT, depth=3)
    full = AIPlayer(SearchConfig(alpha_beta=False)).search_root(MIDGAME, Side.LIGHT, depth=3)
    assert pruned.best_move == full.best_move
    assert pruned.nodes < full.nodes


def test_parallel_root_matches_sequential():
    sequential = AIPlayer(SearchConfig(depth=2)).search_root(MIDGAME, Side.LIGHT)
    parallel = AIPlayer(SearchConfig(depth=2, workers=2)).search_root(MIDGAME, Side.LIGHT)
    assert parallel.best_move == sequential.best_move
    assert parallel.scored_moves == sequential.scored_moves


@pytest.mark.parametrize("depth", [-1, "3"])
def test_depth_must_be_a_non_negative_int(depth):
    with pytest.raises(InvalidInput):
        AIPlayer().select_move(Board.initial(), Side.DARK, depth)


def test_side_is_validated():
    with pytest.raises(InvalidInput):
        AIPlayer().select_move(Board.initial(), 1, 1)


def test_each_root_move_is_followed_by_depth_plies():
    board = Board.initial()
    ai = AIPlayer()
    result = ai.search_root(board, Side.DARK, depth=1)
    for move, score in result.scored_moves:
        child = _after(board, Side.DARK, move)
        replies = [ai.evaluator.evaluate(_after(child, Side.LIGHT, reply)) for reply in legal_moves(child, Side.LIGHT)]
        # light answers with its best reply
        assert score == max(replies)


def test_depth_zero_scores_children_statically():
    board = MIDGAME
    ai = AIPlayer()
    result = ai.search_root(board, Side.LIGHT, depth=0)
    assert result.scored_moves == [
        (move, ai.evaluator.evaluate(_after(board, Side.LIGHT, move))) for move in legal_moves(board, Side.LIGHT)
    ]
