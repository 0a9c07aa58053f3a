"""
Game configuration for TicTacToe.
All the settings for the board, AI timing, and the UI.
"""


class GameConfig:
    """
    Configuration class for game settings.
    Change these values to tune how the game looks and plays.
    """

    # ==================== BOARD SETTINGS ====================
    # TicTacToe is a 3x3 grid
    BOARD_SIZE = 3
    CELL_COUNT = BOARD_SIZE * BOARD_SIZE  # 9 cells, indexed 0-8

    # ==================== AI SETTINGS ====================
    # Delay before an AI move is shown (milliseconds)
    # Only there so a human can follow along - 0 plays instantly
    AI_DELAY_MS = {
        "human_vs_ai": 200,
        "ai_vs_ai": 500,
    }

    # Difficulty used when none is chosen (1 = random, 2 = heuristic, 3 = minimax)
    DEFAULT_DIFFICULTY = 1

    # Seat the human takes in Human vs AI ("white" moves first)
    DEFAULT_HUMAN_PLAYER = "white"

    # ==================== UI SETTINGS ====================
    WINDOW_TITLE = "Tic-Tac-Toe"
    BG_COLOR = "#1a1a2e"
    CELL_COLOR = "#16213e"
    WHITE_COLOR = "#10b981"   # O
    BLACK_COLOR = "#f87171"   # X
    HIGHLIGHT_COLOR = "#065f46"
    TITLE_COLOR = "#00d4ff"
    STATUS_COLOR = "#ffd700"
    BUTTON_COLOR = "#6366f1"
    FONT = "Segoe UI"

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = True


def debug(message: str):
    """Print a debug message when DEBUG_MODE is on."""
    if GameConfig.DEBUG_MODE:
        print(message)
