"""
Tests for the AI player at all three difficulty levels.
"""

import random
from functools import lru_cache

import pytest

from core.ai_player import AIPlayer, Difficulty, _minimax, select_move
from core.board import Board, Player
from core.errors import NoLegalMoves
from core.move_validator import legal_moves
from core.win_checker import GameStatus, evaluate


FULL_BOARD = Board.from_string("OXO XXO OOX")


def to_move(board):
    """WHITE moves first, so WHITE is to move when the counts are equal."""
    whites = board.cells.count(Player.WHITE)
    blacks = board.cells.count(Player.BLACK)
    return Player.WHITE if whites == blacks else Player.BLACK


@lru_cache(maxsize=None)
def game_value(board, player):
    """Value of the position for player (who is to move): 1 win, 0 draw, -1 loss."""
    outcome = evaluate(board)
    if outcome.status == GameStatus.WON:
        return 1 if outcome.winner == player else -1
    if outcome.status == GameStatus.DRAW:
        return 0
    return max(-game_value(board.place(i, player), player.opposite()) for i in legal_moves(board))


def reachable_boards():
    """Every non-finished board reachable from the empty board."""
    seen = set()
    stack = [Board.empty()]
    while stack:
        board = stack.pop()
        if board in seen or evaluate(board).is_terminal:
            continue
        seen.add(board)
        player = to_move(board)
        stack.extend(board.place(i, player) for i in legal_moves(board))
    return seen


# ---------------------------------------------------------------------- All levels


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_full_board_raises(difficulty):
    with pytest.raises(NoLegalMoves):
        select_move(difficulty, Player.WHITE, FULL_BOARD)


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_move_is_legal(difficulty):
    board = Board.from_string("OX. .O. ..X")
    move = select_move(difficulty, Player.WHITE, board, random.Random(1))
    assert move in legal_moves(board)


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_single_free_cell_is_played(difficulty):
    board = Board.from_string("OXO XXO OO.")
    assert select_move(difficulty, Player.BLACK, board, random.Random(0)) == 8


def test_difficulty_accepts_level_numbers():
    board = Board.from_string("OO. .X. ...")
    assert select_move(2, Player.WHITE, board) == 2


# ---------------------------------------------------------------------- Random


def test_random_uses_rng():
    board = Board.empty()
    first = [select_move(Difficulty.RANDOM, Player.WHITE, board, random.Random(7)) for _ in range(5)]
    second = [select_move(Difficulty.RANDOM, Player.WHITE, board, random.Random(7)) for _ in range(5)]
    assert first == second


def test_random_covers_all_moves():
    rng = random.Random(3)
    board = Board.from_string("O.X ... X.O")
    moves = {select_move(Difficulty.RANDOM, Player.WHITE, board, rng) for _ in range(200)}
    assert moves == set(legal_moves(board))


# ---------------------------------------------------------------------- Heuristic


def test_heuristic_takes_win():
    board = Board.from_string("OO. XX. ...")
    assert select_move(Difficulty.HEURISTIC, Player.WHITE, board) == 2


def test_heuristic_prefers_win_over_block():
    # BLACK can win at 5 or block at 2; winning comes first
    board = Board.from_string("OO. XX. O..")
    assert select_move(Difficulty.HEURISTIC, Player.BLACK, board) == 5


def test_heuristic_blocks():
    board = Board.from_string("OO. .X. ...")
    assert select_move(Difficulty.HEURISTIC, Player.BLACK, board) == 2


def test_heuristic_blocks_first_threat_in_index_order():
    # WHITE threatens 2 and 6, BLACK has no win of its own
    board = Board.from_string("OO. OX. ..X")
    assert select_move(Difficulty.HEURISTIC, Player.BLACK, board) == 2


def test_heuristic_takes_first_win_in_index_order():
    board = Board.from_string("OO. OX. .XX")
    assert select_move(Difficulty.HEURISTIC, Player.WHITE, board) == 2


def test_heuristic_falls_back_to_random():
    board = Board.from_string("O.. ... ...")
    move = select_move(Difficulty.HEURISTIC, Player.BLACK, board, random.Random(5))
    assert move == select_move(Difficulty.RANDOM, Player.BLACK, board, random.Random(5))


# ---------------------------------------------------------------------- Minimax


def test_minimax_first_move_is_lowest_index():
    # Every opening is a draw, ties keep the first move
    assert select_move(Difficulty.EXHAUSTIVE, Player.WHITE, Board.empty()) == 0


def test_minimax_takes_first_winning_move():
    board = Board.from_string("OO. OX. .XX")
    assert select_move(Difficulty.EXHAUSTIVE, Player.WHITE, board) == 2


def test_minimax_blocks():
    board = Board.from_string("OO. .X. ...")
    assert select_move(Difficulty.EXHAUSTIVE, Player.BLACK, board) == 2


def test_minimax_avoids_fork():
    # WHITE on opposite corners: BLACK must take an edge, not a corner
    board = Board.from_string("O.. .X. ..O")
    move = select_move(Difficulty.EXHAUSTIVE, Player.BLACK, board)
    assert move in (1, 3, 5, 7)


def test_minimax_never_picks_a_worse_move():
    for board in reachable_boards():
        player = to_move(board)
        move = select_move(Difficulty.EXHAUSTIVE, player, board)
        chosen = -game_value(board.place(move, player), player.opposite())
        assert chosen == game_value(board, player)


@pytest.mark.parametrize("ai_side", list(Player))
def test_minimax_never_loses(ai_side):
    # Try every opponent reply at every turn
    stack = [Board.empty()]
    while stack:
        board = stack.pop()
        outcome = evaluate(board)
        if outcome.is_terminal:
            assert outcome.winner != ai_side.opposite()
            continue

        player = to_move(board)
        if player == ai_side:
            stack.append(board.place(select_move(Difficulty.EXHAUSTIVE, player, board), player))
        else:
            stack.extend(board.place(i, player) for i in legal_moves(board))


def test_minimax_self_play_is_draw():
    board = Board.empty()
    player = Player.WHITE
    while not evaluate(board).is_terminal:
        board = board.place(select_move(Difficulty.EXHAUSTIVE, player, board), player)
        player = player.opposite()

    assert evaluate(board).status == GameStatus.DRAW


@pytest.mark.parametrize("weak", [Difficulty.RANDOM, Difficulty.HEURISTIC])
def test_minimax_never_loses_to_weaker_levels(weak):
    rng = random.Random(11)
    for game in range(20):
        levels = {Player.WHITE: Difficulty.EXHAUSTIVE, Player.BLACK: weak}
        if game % 2:
            levels = {Player.WHITE: weak, Player.BLACK: Difficulty.EXHAUSTIVE}

        board = Board.empty()
        player = Player.WHITE
        while not evaluate(board).is_terminal:
            board = board.place(select_move(levels[player], player, board, rng), player)
            player = player.opposite()

        assert levels.get(evaluate(board).winner) in (None, Difficulty.EXHAUSTIVE)


# ---------------------------------------------------------------------- AIPlayer


def test_ai_player_counts_new_positions():
    _minimax.cache_clear()
    ai = AIPlayer(Player.BLACK, Difficulty.EXHAUSTIVE)
    board = Board.from_string("OO. .X. ...")

    assert ai.get_best_move(board) == 2
    assert ai.moves_evaluated > 0

    # Same position again is already known
    assert ai.get_best_move(board) == 2
    assert ai.moves_evaluated == 0


def test_ai_player_defaults():
    ai = AIPlayer()
    assert ai.player == Player.BLACK
    assert ai.difficulty == Difficulty.EXHAUSTIVE


def test_difficulty_labels():
    assert Difficulty.RANDOM.label == "Level 1 (Random)"
    assert Difficulty(3) == Difficulty.EXHAUSTIVE
