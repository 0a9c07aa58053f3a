"""
TicTacToe UI
A graphical interface for TicTacToe using Tkinter.

Shows:
- Mode selection menu (Human vs Human, Human vs AI, AI vs AI)
- AI level for each player
- The 3x3 board (O for white, X for black)
- Game status, restart and back-to-menu buttons
"""

import tkinter as tk
from tkinter import ttk
from typing import Dict, List, Optional

from core.ai_player import Difficulty
from core.board import Player
from core.config import GameConfig
from core.game_session import GameMode, GameSession, new_session
from core.scheduler import AIMoveScheduler
from core.win_checker import GameStatus


class TicTacToeUI:
    """
    Main UI class for TicTacToe.

    The UI only renders session snapshots and forwards clicks. AI moves
    are played by an AIMoveScheduler using root.after for the delay.
    """

    def __init__(self, human_player: Optional[Player] = None, delay_ms: Optional[int] = None):
        """Initialize the UI."""
        self.human_player = human_player or Player(GameConfig.DEFAULT_HUMAN_PLAYER)
        self.delay_ms = delay_ms

        self.session: Optional[GameSession] = None
        self.scheduler: Optional[AIMoveScheduler] = None

        self.board_cells: List[tk.Button] = []
        self.level_vars: Dict[Player, tk.IntVar] = {}

        self._create_ui()
        self._show_menu()

    def _create_ui(self):
        """Create the Tkinter window and styles."""
        self.root = tk.Tk()
        self.root.title(GameConfig.WINDOW_TITLE)
        self.root.configure(bg=GameConfig.BG_COLOR)
        self.root.minsize(360, 460)

        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=GameConfig.BG_COLOR)
        style.configure('TLabel', background=GameConfig.BG_COLOR, foreground='white',
                        font=(GameConfig.FONT, 11))
        style.configure('Title.TLabel', font=(GameConfig.FONT, 18, 'bold'),
                        foreground=GameConfig.TITLE_COLOR)
        style.configure('Status.TLabel', font=(GameConfig.FONT, 13),
                        foreground=GameConfig.STATUS_COLOR)

        self.main_frame = ttk.Frame(self.root)
        self.main_frame.pack(fill=tk.BOTH, expand=True, padx=20, pady=20)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _clear(self):
        for child in self.main_frame.winfo_children():
            child.destroy()
        self.board_cells = []

    def _button(self, parent, text: str, command, color: str = GameConfig.BUTTON_COLOR) -> tk.Button:
        return tk.Button(
            parent,
            text=text,
            font=(GameConfig.FONT, 11, 'bold'),
            bg=color,
            fg='white',
            activebackground=color,
            width=16,
            command=command
        )

    # ------------------------------------------------------------------ Menu screen

    def _show_menu(self):
        """Show mode selection and AI levels."""
        self._clear()

        ttk.Label(self.main_frame, text="Tic-Tac-Toe", style='Title.TLabel').pack(pady=(0, 20))

        for mode in GameMode:
            self._button(
                self.main_frame,
                mode.label,
                command=lambda m=mode: self._start_game(m)
            ).pack(pady=4)

        ttk.Separator(self.main_frame, orient='horizontal').pack(fill=tk.X, pady=15)
        ttk.Label(self.main_frame, text="AI Level", style='Status.TLabel').pack()

        levels_frame = ttk.Frame(self.main_frame)
        levels_frame.pack(pady=10)

        for row, player in enumerate(Player):
            var = self.level_vars.get(player)
            if var is None:
                var = tk.IntVar(value=GameConfig.DEFAULT_DIFFICULTY)
                self.level_vars[player] = var

            ttk.Label(
                levels_frame,
                text=f"{player.value.capitalize()} ({player.symbol}) AI:"
            ).grid(row=row, column=0, sticky=tk.W, padx=5, pady=3)

            for col, difficulty in enumerate(Difficulty, start=1):
                tk.Radiobutton(
                    levels_frame,
                    text=str(difficulty.value),
                    variable=var,
                    value=difficulty.value,
                    bg=GameConfig.BG_COLOR,
                    fg='white',
                    selectcolor=GameConfig.CELL_COLOR,
                    activebackground=GameConfig.BG_COLOR
                ).grid(row=row, column=col, padx=2)

        ttk.Label(
            self.main_frame,
            text="1 = Random   2 = Win/Block   3 = Minimax"
        ).pack(pady=(5, 0))

    # ------------------------------------------------------------------ Game screen

    def _start_game(self, mode: GameMode):
        """Create a session for the mode and show the board."""
        difficulties = {
            player: Difficulty(var.get()) for player, var in self.level_vars.items()
        }
        print(f"Starting {mode.label} ({', '.join(f'{p.value}: {d.label}' for p, d in difficulties.items())})")

        self.session = new_session(mode, difficulties, human_player=self.human_player)
        self._show_board()

        self.session.add_listener(lambda session: self._update_board_display())
        self.scheduler = AIMoveScheduler(self.session, self.root.after, self.delay_ms)
        self._update_board_display()
        self.scheduler.start()

    def _show_board(self):
        self._clear()

        ttk.Label(self.main_frame, text=self.session.mode.label, style='Title.TLabel').pack(pady=(0, 10))

        self.status_label = ttk.Label(self.main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=(0, 10))

        board_frame = ttk.Frame(self.main_frame)
        board_frame.pack(pady=10)

        for index in range(GameConfig.CELL_COUNT):
            cell = tk.Button(
                board_frame,
                text="",
                font=(GameConfig.FONT, 24, 'bold'),
                width=3,
                height=1,
                bg=GameConfig.CELL_COLOR,
                fg='white',
                relief='ridge',
                borderwidth=2,
                command=lambda i=index: self._on_cell_click(i)
            )
            row, col = divmod(index, GameConfig.BOARD_SIZE)
            cell.grid(row=row, column=col, padx=2, pady=2)
            self.board_cells.append(cell)

        control_frame = ttk.Frame(self.main_frame)
        control_frame.pack(pady=15)
        self._button(control_frame, "Restart", self._restart_game).pack(side=tk.LEFT, padx=5)
        self._button(control_frame, "Back to Menu", self._back_to_menu).pack(side=tk.LEFT, padx=5)

    def _on_cell_click(self, index: int):
        """Forward a click on a cell to the session."""
        if self.session is not None:
            self.session.request_move(index)

    def _update_board_display(self):
        """Render the current session snapshot."""
        if self.session is None or not self.board_cells:
            return

        view = self.session.current_view()
        human_turn = not self.session.is_ai_controlled(view.turn)
        game_over = view.outcome.is_terminal

        for index, cell in enumerate(self.board_cells):
            piece = view.board.cells[index]
            if piece is None:
                symbol, fg_color = "", 'white'
            else:
                symbol = piece.symbol
                fg_color = GameConfig.WHITE_COLOR if piece == Player.WHITE else GameConfig.BLACK_COLOR

            if view.winning_line and index in view.winning_line:
                bg_color = GameConfig.HIGHLIGHT_COLOR
            else:
                bg_color = GameConfig.CELL_COLOR

            # Only empty cells on a human turn are clickable
            clickable = piece is None and human_turn and not game_over
            cell.configure(
                text=symbol,
                fg=fg_color,
                disabledforeground=fg_color,
                bg=bg_color,
                state='normal' if clickable else 'disabled'
            )

        if view.outcome.status == GameStatus.WON:
            winner = view.outcome.winner
            self.status_label.configure(text=f"{winner.value.capitalize()} ({winner.symbol}) wins!")
        elif view.outcome.status == GameStatus.DRAW:
            self.status_label.configure(text="It's a draw!")
        else:
            seat = "Human" if human_turn else "AI"
            self.status_label.configure(
                text=f"Turn: {view.turn.value.capitalize()} ({view.turn.symbol}, {seat})"
            )

    def _restart_game(self):
        if self.session is not None:
            self.session.restart()

    def _back_to_menu(self):
        """Leave the game. Pending AI moves are dropped."""
        if self.scheduler is not None:
            self.scheduler.stop()
        if self.session is not None:
            self.session.abandon()
        self.session = None
        self.scheduler = None
        self._show_menu()

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        if self.scheduler is not None:
            self.scheduler.stop()
        if self.session is not None:
            self.session.abandon()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()


def main():
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(description="TicTacToe UI")
    parser.add_argument(
        "--ai-first",
        action="store_true",
        help="Give the human's default seat to the AI in Human vs AI"
    )
    args = parser.parse_args()

    human_player = Player(GameConfig.DEFAULT_HUMAN_PLAYER)
    if args.ai_first:
        human_player = human_player.opposite()
    ui = TicTacToeUI(human_player=human_player)
    ui.run()


if __name__ == "__main__":
    main()
