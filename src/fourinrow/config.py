# src/fourinrow/config.py

from __future__ import annotations
from pathlib import Path

BOARD_SIZE = 6
WIN_COUNT = 4

# Advisor search
SEARCH_DEPTH = 4
WIN_SCORE = 100_000

# Window weights for the static evaluation
THREE_SCORE = 100
TWO_SCORE = 10
BLOCK_THREE_SCORE = 150  # 1.5x THREE, untuned
CENTER_BONUS = 3

# Persistence
HISTORY_LIMIT = 100
DEFAULT_STORE_PATH = Path.home() / ".fourinrow" / "store.json"
DEFAULT_PLAYERS = (
    ("Player 1", "blue"),
    ("Player 2", "green"),
)

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = True

# “AI thinking” effect shown while a hint is computed
AI_THINKING_SPINNER = True
AI_THINK_DELAY_SEC = 0.3
