"""
Kiddy Calc Configuration Settings
"""
import os
import random

# Application Settings
APP_NAME = "Kiddy Calc"
VERSION = "1.0.0"

# Display Settings (portrait, phone-like window)
WINDOW_WIDTH = 380
WINDOW_HEIGHT = 620
TITLE_FONT = ("Comic Sans MS", 22, "bold")
DISPLAY_FONT = ("Consolas", 40, "bold")
DISPLAY_FONT_MIN = 16
BUTTON_FONT = ("Comic Sans MS", 20, "bold")
EMOJI_FONT = ("Segoe UI Emoji", 10)

# Calculator Settings
MAX_DISPLAY_LENGTH = 10
LONG_DECIMALS = 4    # main display, when a result is too long
SHORT_DECIMALS = 2   # equation preview
OOPS_TEXT = "Oops!"

TITLE_FACES = ["🐣", "🦄", "🍭", "🌈", "🐼", "⭐️"]


def cute_title(rng=random):
    """App name with a random friendly face"""
    return f"{APP_NAME} {rng.choice(TITLE_FACES)}"

# ── Pastel palette ─────────────────────────────────────────────────────────────

PALETTE = {
    "bg":           "#FFF7FB",   # screen background
    "title_fg":     "#FF5FA2",
    "display_bg":   "#FFFFFF",
    "display_fg":   "#4A3B5C",
    "border":       "#F4D6E4",
    "btn_fg":       "#4A3B5C",
    "important_fg": "#FFFFFF",
    "operator":     "#FFB3C7",
    "equals":       "#FF86C8",
    "clear":        "#FFD6E7",
    "dot":          "#E5E0FF",
    "pressed":      "#F2E6F0",
}

# Button grid: (label, colour, emoji, important)
BUTTON_ROWS = [
    [("7", "#FFD9E3", "🐣", False), ("8", "#FFE6AA", "🦒", False),
     ("9", "#C7F2FF", "🐳", False), ("÷", PALETTE["operator"], None, True)],
    [("4", "#D7F9D7", "🐢", False), ("5", "#E6D9FF", "🦄", False),
     ("6", "#FFF3B0", "🐤", False), ("×", PALETTE["operator"], None, True)],
    [("1", "#FFEDD5", "🐼", False), ("2", "#D1F7FF", "🐬", False),
     ("3", "#E3FFD9", "🦕", False), ("-", PALETTE["operator"], None, True)],
    [("C", PALETTE["clear"], None, False), ("0", "#D6F4FF", "⭐️", False),
     (".", PALETTE["dot"], None, False), ("+", PALETTE["operator"], None, True)],
]

# Wide equals key under the grid
EQUALS_BUTTON = ("=", PALETTE["equals"], None, True)


def all_buttons():
    """Every button on screen, row by row, equals last."""
    return [button for row in BUTTON_ROWS for button in row] + [EQUALS_BUTTON]


# Web Portal settings
WEB_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "web")
WEB_HOST = '127.0.0.1'
WEB_PORT = 8888
LAUNCH_WEB_PORTAL = False   # also serve the screen in a browser when the desktop app starts
