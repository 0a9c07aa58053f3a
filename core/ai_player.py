"""
AI player for TicTacToe.
Three difficulty levels: random moves, a one-move-ahead heuristic,
and a full Minimax search.
"""

import random
from enum import Enum
from functools import lru_cache
from typing import Optional, Tuple

from .board import Board, Player
from .config import debug
from .errors import NoLegalMoves
from .move_validator import legal_moves
from .win_checker import GameStatus, evaluate


class Difficulty(Enum):
    """AI difficulty levels."""
    RANDOM = 1        # Random moves
    HEURISTIC = 2     # Win if possible, else block, else random
    EXHAUSTIVE = 3    # Full minimax

    @property
    def label(self) -> str:
        return f"Level {self.value} ({self.name.capitalize()})"


def random_move(player: Player, board: Board, rng: Optional[random.Random] = None) -> int:
    """Pick any empty cell, uniformly at random."""
    moves = legal_moves(board)
    if not moves:
        raise NoLegalMoves()
    return (rng or random).choice(moves)


def heuristic_move(player: Player, board: Board, rng: Optional[random.Random] = None) -> int:
    """
    Look one move ahead.

    1. Take a winning move if there is one
    2. Otherwise block the opponent's winning move
    3. Otherwise play randomly

    Forks and deeper traps are not detected.
    """
    moves = legal_moves(board)
    if not moves:
        raise NoLegalMoves()

    for mover in (player, player.opposite()):
        for index in moves:
            outcome = evaluate(board.place(index, mover))
            if outcome.status == GameStatus.WON and outcome.winner == mover:
                return index

    return random_move(player, board, rng)


def minimax_move(player: Player, board: Board, rng: Optional[random.Random] = None) -> int:
    """Best move for player (who is to move) according to a full Minimax search."""
    if not legal_moves(board):
        raise NoLegalMoves()
    _, move = _minimax(board, player, player)
    return move


@lru_cache(maxsize=None)
def _minimax(board: Board, to_move: Player, player: Player) -> Tuple[int, Optional[int]]:
    """
    Minimax over the whole game tree.

    Scores are from player's point of view: +1 win, -1 loss, 0 draw.
    Ties keep the first (lowest index) move. Boards are immutable and
    hashable, so every position is only searched once per side to move.

    Returns:
        (score, move). move is None on a finished board.
    """
    outcome = evaluate(board)
    if outcome.status == GameStatus.WON:
        return (1 if outcome.winner == player else -1), None
    if outcome.status == GameStatus.DRAW:
        return 0, None

    maximizing = to_move == player
    best_score = None
    best_move = None

    for index in legal_moves(board):
        score, _ = _minimax(board.place(index, to_move), to_move.opposite(), player)

        if best_score is None:
            better = True
        elif maximizing:
            better = score > best_score
        else:
            better = score < best_score

        if better:
            best_score = score
            best_move = index

    return best_score, best_move


_STRATEGIES = {
    Difficulty.RANDOM: random_move,
    Difficulty.HEURISTIC: heuristic_move,
    Difficulty.EXHAUSTIVE: minimax_move,
}


def select_move(
    difficulty: Difficulty,
    player: Player,
    board: Board,
    rng: Optional[random.Random] = None
) -> int:
    """
    Choose a move for player at the given difficulty.

    Args:
        difficulty: Which strategy to use.
        player: The player to move.
        board: Current board.
        rng: Random source for the random parts (default: the random module).

    Returns:
        Cell index (0-8).

    Raises:
        NoLegalMoves: The board is full.
    """
    return _STRATEGIES[Difficulty(difficulty)](player, board, rng)


class AIPlayer:
    """
    An AI seat: one player at one difficulty.

    At EXHAUSTIVE difficulty the AI plays optimally - it will win if
    possible, block the opponent if needed, and never lose (at worst, draw).
    """

    def __init__(
        self,
        player: Player = Player.BLACK,
        difficulty: Difficulty = Difficulty.EXHAUSTIVE,
        rng: Optional[random.Random] = None
    ):
        """
        Initialize the AI player.

        Args:
            player: Which player the AI controls (default: BLACK)
            difficulty: How well it plays (default: EXHAUSTIVE)
            rng: Random source, pass a seeded random.Random for repeatable games
        """
        self.player = player
        self.difficulty = difficulty
        self.rng = rng

        # How many new positions the last search looked at (for debugging)
        self.moves_evaluated = 0

    def get_best_move(self, board: Board) -> int:
        """
        Get the move for the current position.

        Raises:
            NoLegalMoves: The board is full.
        """
        misses_before = _minimax.cache_info().misses
        move = select_move(self.difficulty, self.player, board, self.rng)
        self.moves_evaluated = _minimax.cache_info().misses - misses_before

        if self.difficulty == Difficulty.EXHAUSTIVE:
            debug(f"AI evaluated {self.moves_evaluated} new positions. Best move: {move}")
        return move
