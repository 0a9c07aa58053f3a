"""
Board model for TicTacToe.
Holds the nine cells and the two players.
"""

from enum import Enum
from typing import Optional, Tuple, List
from dataclasses import dataclass

from .config import GameConfig
from .errors import IndexOutOfRange, CellOccupied


class Player(Enum):
    """The two players in the game. WHITE always moves first."""
    WHITE = "white"
    BLACK = "black"

    def opposite(self) -> "Player":
        """Get the opposite player."""
        return Player.BLACK if self == Player.WHITE else Player.WHITE

    @property
    def symbol(self) -> str:
        """Mark shown on the board: O for white, X for black."""
        return "O" if self == Player.WHITE else "X"


# A cell is either empty (None) or holds the player who took it
Cell = Optional[Player]


@dataclass(frozen=True)
class Board:
    """
    The 3x3 TicTacToe board as an immutable value.

    Cells are indexed 0-8, row by row:

        0 | 1 | 2
        3 | 4 | 5
        6 | 7 | 8

    Placing a piece returns a new Board, so boards can be shared freely
    (the AI search relies on this).
    """

    cells: Tuple[Cell, ...] = (None,) * GameConfig.CELL_COUNT

    def __post_init__(self):
        if len(self.cells) != GameConfig.CELL_COUNT:
            raise ValueError(
                f"A board has {GameConfig.CELL_COUNT} cells, got {len(self.cells)}"
            )

    @classmethod
    def empty(cls) -> "Board":
        """Create an empty board."""
        return cls()

    @classmethod
    def from_string(cls, layout: str) -> "Board":
        """
        Build a board from a 9-character layout.

        'O' is white, 'X' is black, anything else ('.', '-') is empty.
        Whitespace between rows is ignored, e.g. "XO. .X. ..O".
        """
        marks = layout.replace("\n", "").replace(" ", "")
        symbols = {player.symbol: player for player in Player}
        return cls(tuple(symbols.get(mark.upper()) for mark in marks))

    def get(self, index: int) -> Cell:
        """
        Read a cell.

        Args:
            index: Cell index (0-8).

        Returns:
            The player on that cell, or None if empty.
        """
        self._check_index(index)
        return self.cells[index]

    def place(self, index: int, player: Player) -> "Board":
        """
        Place a piece and return the resulting board.

        Args:
            index: Cell index (0-8).
            player: Who is placing the piece.

        Returns:
            A new Board. This board is left unchanged.
        """
        occupant = self.get(index)
        if occupant is not None:
            raise CellOccupied(index, occupant)

        cells = list(self.cells)
        cells[index] = player
        return Board(tuple(cells))

    def occupied_count(self) -> int:
        return sum(1 for cell in self.cells if cell is not None)

    def is_full(self) -> bool:
        return self.occupied_count() == GameConfig.CELL_COUNT

    def rows(self) -> List[Tuple[Cell, ...]]:
        """The board as 3 rows of 3 cells."""
        size = GameConfig.BOARD_SIZE
        return [self.cells[row * size:(row + 1) * size] for row in range(size)]

    def render(self) -> str:
        """Render the board as text for the console."""
        lines = []
        for row_num, row in enumerate(self.rows()):
            marks = []
            for col, cell in enumerate(row):
                if cell is None:
                    # Show the index so the human knows what to type
                    marks.append(str(row_num * GameConfig.BOARD_SIZE + col))
                else:
                    marks.append(cell.symbol)
            lines.append(" " + " | ".join(marks))
        return "\n---+---+---\n".join(lines)

    @staticmethod
    def _check_index(index: int):
        if not isinstance(index, int) or not 0 <= index < GameConfig.CELL_COUNT:
            raise IndexOutOfRange(index)
