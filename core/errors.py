"""
Errors raised by the TicTacToe game core.
"""


class GameError(Exception):
    """Base class for all game core errors."""


class IndexOutOfRange(GameError, IndexError):
    """A cell index outside 0-8 was used. This is a programming error."""

    def __init__(self, index):
        super().__init__(f"Invalid cell index {index!r}. Must be 0-8.")
        self.index = index


class CellOccupied(GameError, ValueError):
    """A piece was placed on a cell that is not empty."""

    def __init__(self, index, occupant):
        super().__init__(f"Cell {index} is already occupied by {occupant.value}")
        self.index = index
        self.occupant = occupant


class NoLegalMoves(GameError, RuntimeError):
    """The AI was asked for a move on a full board."""

    def __init__(self):
        super().__init__("No legal moves left on the board!")
