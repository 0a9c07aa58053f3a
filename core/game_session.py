"""
Game session management for TicTacToe.
Tracks the board, whose turn it is, which seats the AI plays,
and the game result. This is the controller the UI talks to.
"""

import random
from enum import Enum
from typing import Callable, Dict, List, Optional, Tuple
from dataclasses import dataclass, field

from .ai_player import AIPlayer, Difficulty
from .board import Board, Player
from .config import GameConfig, debug
from .move_validator import MoveValidator
from .win_checker import Outcome, evaluate, get_winning_line


class GameMode(Enum):
    """Who plays each seat."""
    HUMAN_VS_HUMAN = "human_vs_human"
    HUMAN_VS_AI = "human_vs_ai"
    AI_VS_AI = "ai_vs_ai"

    @property
    def label(self) -> str:
        return {
            "human_vs_human": "Human vs Human",
            "human_vs_ai": "Human vs AI",
            "ai_vs_ai": "AI vs AI",
        }[self.value]


@dataclass(frozen=True)
class GameView:
    """
    Read-only snapshot of a session, for rendering.
    """
    board: Board
    turn: Player
    outcome: Outcome
    winning_line: Optional[Tuple[int, int, int]] = None


Listener = Callable[["GameSession"], None]


@dataclass
class GameSession:
    """
    One play-through of TicTacToe.

    Tracks:
    - The board (replaced, never modified, on each move)
    - Current player
    - Game mode and per-player AI difficulty
    - Game result (in progress, won, draw)
    - A generation number, bumped on every restart, so AI moves computed
      for an earlier game can be recognised and thrown away

    AI moves are not played automatically. Whoever drives the session
    calls trigger_ai_if_due() and then apply_ai_move() (usually after a
    short delay, see AIMoveScheduler).
    """

    mode: GameMode = GameMode.HUMAN_VS_HUMAN

    # Difficulty per player; only used for AI-controlled seats
    difficulties: Dict[Player, Difficulty] = field(default_factory=dict)

    # Which seat the human takes in HUMAN_VS_AI
    human_player: Player = field(default_factory=lambda: Player(GameConfig.DEFAULT_HUMAN_PLAYER))

    # Random source for the AI (None uses the random module)
    rng: Optional[random.Random] = None

    board: Board = field(default_factory=Board.empty)
    current_player: Player = Player.WHITE
    outcome: Outcome = field(default_factory=Outcome.in_progress)
    generation: int = 0
    is_abandoned: bool = False

    ai_players: Dict[Player, AIPlayer] = field(init=False, default_factory=dict)
    _listeners: List[Listener] = field(init=False, default_factory=list, repr=False)
    _validator: MoveValidator = field(init=False, default_factory=MoveValidator, repr=False)

    def __post_init__(self):
        default = Difficulty(GameConfig.DEFAULT_DIFFICULTY)
        for player in Player:
            if self.is_ai_controlled(player):
                difficulty = Difficulty(self.difficulties.get(player, default))
                self.difficulties[player] = difficulty
                self.ai_players[player] = AIPlayer(player, difficulty, self.rng)

    # ------------------------------------------------------------------ Seats

    def is_ai_controlled(self, player: Player) -> bool:
        """Check whether the AI plays this seat in the current mode."""
        if self.mode == GameMode.AI_VS_AI:
            return True
        if self.mode == GameMode.HUMAN_VS_AI:
            return player != self.human_player
        return False

    @property
    def is_game_over(self) -> bool:
        return self.outcome.is_terminal

    @property
    def move_count(self) -> int:
        return self.board.occupied_count()

    # ------------------------------------------------------------------ Moves

    def apply_move(self, index: int) -> bool:
        """
        Place the current player's piece.

        Args:
            index: Cell index (0-8).

        Returns:
            True if the move was played. Requests on a finished game or an
            occupied cell are ignored and return False.

        Raises:
            IndexOutOfRange: index is not 0-8.
        """
        if self.is_abandoned:
            debug("Session was abandoned, ignoring move.")
            return False

        result = self._validator.validate_move(self.board, self.outcome, index)
        if not result.is_valid:
            debug(result.error_message)
            return False

        player = self.current_player
        self.board = self.board.place(index, player)
        self.current_player = player.opposite()
        self.outcome = evaluate(self.board)

        debug(f"{player.value} moves to {index}")
        if self.outcome.is_terminal:
            debug(f"Game over: {self.outcome}")

        self._notify()
        return True

    def request_move(self, index: int) -> bool:
        """
        Play a move for a human.

        Ignored when the seat to move belongs to the AI.

        Raises:
            IndexOutOfRange: index is not 0-8, whoever is to move.
        """
        # Out of range raises IndexOutOfRange, even on the AI's turn
        self.board.get(index)
        if self.is_ai_controlled(self.current_player):
            debug(f"It's the AI's turn ({self.current_player.value}), ignoring click.")
            return False
        return self.apply_move(index)

    def trigger_ai_if_due(self) -> Optional[int]:
        """
        Ask the AI for its move if it is the AI's turn.

        Returns:
            The chosen cell, or None when the game is over, the session was
            abandoned, or a human is to move. The move is not played.
        """
        if self.is_abandoned or self.is_game_over:
            return None
        ai = self.ai_players.get(self.current_player)
        if ai is None:
            return None
        return ai.get_best_move(self.board)

    def apply_ai_move(self, index: int, generation: int) -> bool:
        """
        Play a move chosen by trigger_ai_if_due().

        Args:
            index: The chosen cell.
            generation: The session generation the move was computed for.

        Returns:
            True if played. Moves from an earlier generation are discarded.
        """
        if generation != self.generation:
            debug(f"Discarding stale AI move {index} (generation {generation} != {self.generation})")
            return False
        if not self.is_ai_controlled(self.current_player):
            return False
        return self.apply_move(index)

    # ------------------------------------------------------------------ Lifecycle

    def restart(self):
        """Start a new game with the same mode and difficulties."""
        debug("Restarting game...")
        self.board = Board.empty()
        self.current_player = Player.WHITE
        self.outcome = Outcome.in_progress()
        self.generation += 1
        self._notify()

    def abandon(self):
        """Discard the session (back to the menu). All later requests are ignored."""
        debug("Leaving game.")
        self.is_abandoned = True
        self.generation += 1
        self._notify()
        self._listeners.clear()

    # ------------------------------------------------------------------ Observers

    def add_listener(self, listener: Listener):
        """Call listener(session) after every state change."""
        self._listeners.append(listener)

    def remove_listener(self, listener: Listener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self):
        for listener in list(self._listeners):
            listener(self)

    def current_view(self) -> GameView:
        """Get a read-only snapshot for rendering."""
        return GameView(
            board=self.board,
            turn=self.current_player,
            outcome=self.outcome,
            winning_line=get_winning_line(self.board),
        )

    def print_board(self):
        """Print the board to console."""
        print()
        print(self.board.render())

        # Print game info
        if self.is_game_over:
            if self.outcome.winner:
                print(f"\n{self.outcome.winner.value.upper()} ({self.outcome.winner.symbol}) WINS!")
            else:
                print("\nIt's a DRAW!")
        else:
            seat = "AI" if self.is_ai_controlled(self.current_player) else "Human"
            print(f"\nCurrent turn: {self.current_player.value} ({self.current_player.symbol}, {seat})")


# ---------------------------------------------------------------------- Interface for the UI


def new_session(
    mode: GameMode,
    difficulties: Optional[Dict[Player, Difficulty]] = None,
    human_player: Optional[Player] = None,
    rng: Optional[random.Random] = None
) -> GameSession:
    """
    Create a session for the chosen mode.

    human_player defaults to GameConfig.DEFAULT_HUMAN_PLAYER.
    """
    if human_player is None:
        human_player = Player(GameConfig.DEFAULT_HUMAN_PLAYER)
    return GameSession(
        mode=GameMode(mode),
        difficulties=dict(difficulties or {}),
        human_player=human_player,
        rng=rng,
    )


def current_view(session: GameSession) -> GameView:
    return session.current_view()


def request_move(session: GameSession, index: int) -> bool:
    return session.request_move(index)


def trigger_ai_if_due(session: GameSession) -> Optional[int]:
    return session.trigger_ai_if_due()


def restart(session: GameSession):
    session.restart()


def abandon(session: GameSession):
    session.abandon()
