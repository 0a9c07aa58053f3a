"""
Core module for TicTacToe.
Handles the board, game rules, sessions, and the AI opponent.
"""

__version__ = "1.0.0"

from .errors import GameError, IndexOutOfRange, CellOccupied, NoLegalMoves
from .config import GameConfig
from .board import Board, Player
from .win_checker import WinChecker, Outcome, GameStatus, evaluate
from .move_validator import MoveValidator, legal_moves
from .ai_player import AIPlayer, Difficulty, select_move
from .game_session import (
    GameSession,
    GameMode,
    GameView,
    new_session,
    current_view,
    request_move,
    trigger_ai_if_due,
    restart,
    abandon,
)
from .scheduler import AIMoveScheduler
