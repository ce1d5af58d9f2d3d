"""Layout constants, colors, and audio defaults."""
from __future__ import annotations

from pathlib import Path

# Timing
FPS = 60

# Window
SCREEN_W = 1200
SCREEN_H = 1000
WINDOW_TITLE = "Type Racer"

# Fonts
FONT_NAME = "monospace"
WORD_FONT_SIZE = 28
HUD_FONT_SIZE = 34
INPUT_FONT_SIZE = 40
GAME_OVER_FONT_SIZE = 40
LABEL_MARGIN = 10
PANEL_MARGIN = 30

# Colors
BG_COLOR = (0, 0, 0)
TEXT_COLOR = (255, 255, 255)
HUD_COLOR = (220, 220, 220)
INFO_BG = (192, 192, 192)
INFO_TEXT = (48, 116, 115)
OUTLINE_COLOR = (255, 60, 60)

# Color-changing words step through this palette.
WORD_PALETTE: list[tuple[int, int, int]] = [
    (255, 90, 90),
    (255, 200, 60),
    (90, 230, 120),
    (80, 180, 255),
    (200, 110, 255),
]
PALETTE_TICKS = 8  # ticks each palette color is held

# Audio
RESOURCES = Path(__file__).parent / "resources"
DEFAULT_WORDS = RESOURCES / "words.dict"
MUSIC_FILE = RESOURCES / "music.wav"
TYPED_SOUND_FILE = RESOURCES / "typed.wav"
INITIAL_VOLUME = 0.05
VOLUME_STEP = 0.005


def word_color(color_changing: bool, tick_number: int) -> tuple[int, int, int]:
    """Color to draw a word with on the given tick."""
    if not color_changing:
        return TEXT_COLOR
    return WORD_PALETTE[(tick_number // PALETTE_TICKS) % len(WORD_PALETTE)]
