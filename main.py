"""
Main entry point for TicTacToe.

Launches the Tkinter UI by default, or plays in the console with --no-ui.

Run this script to play TicTacToe against a friend or the computer!
"""

import time
from typing import Optional

from core.ai_player import Difficulty
from core.board import Player
from core.config import GameConfig
from core.errors import IndexOutOfRange
from core.game_session import GameMode, GameSession, new_session
from core.scheduler import AIMoveScheduler


class ConsoleGame:
    """
    Plays TicTacToe in the terminal.

    Game flow:
    1. Board is printed
    2. Human types a cell (0-8), or the AI picks one after a short delay
    3. Repeat until someone wins or it's a draw
    4. Play again, or quit
    """

    def __init__(self, session: GameSession, delay_ms: Optional[int] = None):
        """
        Initialize the console game.

        Args:
            session: The session to play.
            delay_ms: Pause before each AI move (default from GameConfig).
        """
        self.session = session
        self.is_running = False
        self.scheduler = AIMoveScheduler(session, self._sleep_then_run, delay_ms)

        print("\n" + "="*60)
        print(f"   TicTacToe - {session.mode.label}")
        for player in Player:
            if session.is_ai_controlled(player):
                role = f"AI, {session.difficulties[player].label}"
            else:
                role = "Human"
            print(f"   {player.value.upper()} ({player.symbol}): {role}")
        print("="*60 + "\n")

    @staticmethod
    def _sleep_then_run(delay_ms: int, callback):
        time.sleep(delay_ms / 1000)
        callback()

    def start(self):
        """Start the game."""
        print("Type a cell number (0-8) to move, 'r' to restart, 'q' to quit\n")
        self.is_running = True

        while self.is_running:
            # Plays every AI move that is due (all of them in AI vs AI)
            self.scheduler.poll()
            self.session.print_board()

            if self.session.is_game_over:
                self._ask_play_again()
            elif not self.session.is_ai_controlled(self.session.current_player):
                self._human_turn()

    def _human_turn(self):
        """Read and play one human move."""
        text = input(f"{self.session.current_player.value} > ").strip().lower()

        if text == "q":
            self._quit()
        elif text == "r":
            self.session.restart()
        else:
            try:
                index = int(text)
                if not self.session.request_move(index):
                    print("That cell is taken, try another one.")
            except (ValueError, IndexOutOfRange):
                print(f"Invalid input {text!r}. Enter a number from 0 to 8.")

    def _ask_play_again(self):
        answer = input("\nPlay again? [y/N] ").strip().lower()
        if answer == "y":
            self.session.restart()
        else:
            self._quit()

    def _quit(self):
        self.is_running = False
        self.scheduler.stop()
        self.session.abandon()


def main(argv=None):
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe")
    parser.add_argument(
        "--no-ui",
        action="store_true",
        help="Run without UI (console mode)"
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in GameMode],
        default=GameMode.HUMAN_VS_AI.value,
        help="Game mode for console play (default: human_vs_ai)"
    )
    parser.add_argument(
        "--white-level",
        type=int,
        choices=[difficulty.value for difficulty in Difficulty],
        default=GameConfig.DEFAULT_DIFFICULTY,
        help="AI level for WHITE: 1 random, 2 win/block, 3 minimax"
    )
    parser.add_argument(
        "--black-level",
        type=int,
        choices=[difficulty.value for difficulty in Difficulty],
        default=GameConfig.DEFAULT_DIFFICULTY,
        help="AI level for BLACK: 1 random, 2 win/block, 3 minimax"
    )
    parser.add_argument(
        "--ai-first",
        action="store_true",
        help="Give the human's default seat to the AI in Human vs AI"
    )
    parser.add_argument(
        "--delay",
        type=int,
        default=None,
        help="Delay before each AI move in milliseconds"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Hide debug messages"
    )

    args = parser.parse_args(argv)

    if args.quiet:
        GameConfig.DEBUG_MODE = False

    human_player = Player(GameConfig.DEFAULT_HUMAN_PLAYER)
    if args.ai_first:
        human_player = human_player.opposite()

    # Launch UI by default
    if not args.no_ui:
        from ui import TicTacToeUI
        print("\n" + "="*60)
        print("   TicTacToe UI")
        print("="*60 + "\n")
        ui = TicTacToeUI(human_player=human_player, delay_ms=args.delay)
        ui.run()
        return

    # Console mode (--no-ui)
    session = new_session(
        GameMode(args.mode),
        {
            Player.WHITE: Difficulty(args.white_level),
            Player.BLACK: Difficulty(args.black_level),
        },
        human_player=human_player,
    )
    game = ConsoleGame(session, delay_ms=args.delay)

    try:
        game.start()
    except (KeyboardInterrupt, EOFError):
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
