"""
Move validator for TicTacToe.
Lists the legal moves and checks move requests before they are played.
"""

from typing import Optional, List
from dataclasses import dataclass

from .board import Board
from .win_checker import Outcome


@dataclass
class ValidationResult:
    """Result of move validation."""
    is_valid: bool
    error_message: Optional[str] = None


def legal_moves(board: Board) -> List[int]:
    """
    Get all empty cells, in ascending index order.

    An empty list means the board is full.
    """
    return [index for index, cell in enumerate(board.cells) if cell is None]


class MoveValidator:
    """
    Validates TicTacToe moves.

    Rules:
    1. Index must be 0-8 (anything else is a bug and raises)
    2. Can only place on empty cells
    3. Game must not be over
    """

    def validate_move(
        self,
        board: Board,
        outcome: Outcome,
        index: int
    ) -> ValidationResult:
        """
        Validate a move.

        Args:
            board: Current board.
            outcome: Current outcome of the game.
            index: Cell to place a piece on (0-8).

        Returns:
            ValidationResult with is_valid and error_message.
        """
        # Out of range raises IndexOutOfRange
        occupant = board.get(index)

        # Check if game is over
        if outcome.is_terminal:
            return ValidationResult(
                is_valid=False,
                error_message="Game is already over!"
            )

        # Check if cell is empty
        if occupant is not None:
            return ValidationResult(
                is_valid=False,
                error_message=f"Cell {index} is already occupied by {occupant.value}"
            )

        return ValidationResult(is_valid=True)
