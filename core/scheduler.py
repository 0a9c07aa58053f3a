"""
Schedules AI moves for a game session.
Waits a short delay before each AI move so a human can follow along.
"""

from typing import Callable, Optional, Tuple

from .config import GameConfig, debug
from .game_session import GameSession

# schedule(delay_ms, callback) - e.g. tkinter's root.after
ScheduleFn = Callable[[int, Callable[[], None]], object]


def run_immediately(delay_ms: int, callback: Callable[[], None]):
    """Schedule function that ignores the delay and runs the callback now."""
    callback()


class AIMoveScheduler:
    """
    Drives the AI seats of a GameSession.

    Whenever the session changes and an AI is to move, the AI picks its
    move right away and the move is played after the display delay.
    Each pending move is tagged with the session generation; if the game
    is restarted or left before the delay runs out, the move is dropped.
    """

    def __init__(
        self,
        session: GameSession,
        schedule: ScheduleFn = run_immediately,
        delay_ms: Optional[int] = None
    ):
        """
        Args:
            session: The session to drive.
            schedule: Function that runs a callback after delay_ms.
            delay_ms: Delay before each AI move. Defaults to the
                GameConfig.AI_DELAY_MS value for the session's mode.
        """
        self.session = session
        self.schedule = schedule
        if delay_ms is None:
            delay_ms = GameConfig.AI_DELAY_MS.get(session.mode.value, 0)
        self.delay_ms = delay_ms

        # (generation, move_count) of the move waiting to be played
        self._pending: Optional[Tuple[int, int]] = None

        session.add_listener(self._on_change)

    def start(self):
        """Kick off the first AI move (needed when the AI plays first)."""
        self.poll()

    def stop(self):
        self.session.remove_listener(self._on_change)

    def poll(self) -> Optional[int]:
        """
        Schedule an AI move if one is due and none is pending.

        Returns:
            The scheduled cell, or None.
        """
        session = self.session
        position = (session.generation, session.move_count)
        if self._pending == position:
            return None

        index = session.trigger_ai_if_due()
        if index is None:
            return None

        generation = session.generation
        self._pending = position
        debug(f"AI ({session.current_player.value}) will play {index} in {self.delay_ms}ms")
        self.schedule(self.delay_ms, lambda: self._play(index, generation))
        return index

    def _play(self, index: int, generation: int):
        self.session.apply_ai_move(index, generation)

    def _on_change(self, session: GameSession):
        self.poll()
