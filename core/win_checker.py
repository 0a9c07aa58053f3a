"""
Win checker for TicTacToe.
Decides whether a board is won, drawn, or still in progress.
"""

from enum import Enum
from typing import Optional, Tuple
from dataclasses import dataclass

from .board import Board, Player


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class Outcome:
    """Result of evaluating a board. winner is only set when status is WON."""
    status: GameStatus
    winner: Optional[Player] = None

    @classmethod
    def in_progress(cls) -> "Outcome":
        return cls(GameStatus.IN_PROGRESS)

    @classmethod
    def won(cls, player: Player) -> "Outcome":
        return cls(GameStatus.WON, player)

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(GameStatus.DRAW)

    @property
    def is_terminal(self) -> bool:
        return self.status != GameStatus.IN_PROGRESS

    def __str__(self) -> str:
        if self.status == GameStatus.WON:
            return f"{self.winner.value.upper()} WINS!"
        if self.status == GameStatus.DRAW:
            return "DRAW!"
        return "In progress"


class WinChecker:
    """
    Checks for win conditions in TicTacToe.

    Win condition: 3 pieces of the same player in a row
    (horizontally, vertically, or diagonally)
    """

    # All possible winning lines, checked in this order
    WINNING_LINES = (
        # Rows
        (0, 1, 2),
        (3, 4, 5),
        (6, 7, 8),
        # Columns
        (0, 3, 6),
        (1, 4, 7),
        (2, 5, 8),
        # Diagonals
        (0, 4, 8),
        (2, 4, 6),
    )

    def check_winner(self, board: Board) -> Optional[Player]:
        """
        Check if there's a winner.

        Args:
            board: The board to check.

        Returns:
            The winning Player, or None if no winner yet.
        """
        line = self.get_winning_line(board)
        if line is None:
            return None
        return board.cells[line[0]]

    def get_winning_line(self, board: Board) -> Optional[Tuple[int, int, int]]:
        """
        Get the first completed line, in WINNING_LINES order.

        Returns:
            The winning line as a triple of cell indices, or None.
        """
        cells = board.cells
        for line in self.WINNING_LINES:
            a, b, c = line
            if cells[a] is not None and cells[a] == cells[b] == cells[c]:
                return line
        return None

    def evaluate(self, board: Board) -> Outcome:
        """
        Evaluate the board.

        Returns:
            Won(player) for the first completed line, Draw for a full board
            without a line, otherwise InProgress.
        """
        winner = self.check_winner(board)
        if winner is not None:
            return Outcome.won(winner)
        if board.is_full():
            return Outcome.draw()
        return Outcome.in_progress()


_checker = WinChecker()


def evaluate(board: Board) -> Outcome:
    """Evaluate a board with the shared WinChecker."""
    return _checker.evaluate(board)


def get_winning_line(board: Board) -> Optional[Tuple[int, int, int]]:
    return _checker.get_winning_line(board)
