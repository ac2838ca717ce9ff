from __future__ import annotations

from util import to_argb

TITLE = "keystroke-overlay"
VERSION = "1.0"

# Window (defaults)
WINDOW_W = 1280
WINDOW_H = 720
TARGET_FPS = 144

BG_COLOR = (14, 16, 20)

# Logging
LOGGER_NAME = "keystroke"
LOG_LEVEL = "INFO"
LOG_FILE = ""  # empty disables the rotating file handler
LOG_FILE_MAX_BYTES = 1024 * 1024
LOG_FILE_BACKUPS = 3

# Layout was designed for a 1920x1080 screen; all bounds are percentages.
BASE_SCREEN_W = 1920.0
BASE_SCREEN_H = 1080.0
SCREEN_RATIO = 1.777

BASE_X = 75.0
BASE_Y = 25.0
KEY_WIDTH = 5.0

# Text
TEXT_BASE_SCALE = 4.0
CPS_TEXT_SCALE = 0.75
FONT_BASE_PX = 12
UNKNOWN_KEY_LABEL = "???"

# Colors (0xAARRGGBB)
KEY_UP_COLOR = to_argb(0x10, 0xA0, 0xA0, 0xA0)
KEY_DOWN_COLOR = to_argb(0x10, 0x50, 0x50, 0x50)
TEXT_COLOR = to_argb(0xFF, 0xFF, 0xFF, 0xFF)

# Clicks-per-second window
CPS_WINDOW_MS = 1000

# 0 disables key repeat; otherwise (delay, interval) in ms passed to pygame.key.set_repeat.
KEY_REPEAT_DELAY_MS = 0
KEY_REPEAT_INTERVAL_MS = 30

# Bindings: ("keyboard", pygame key name) or ("mouse", pygame button number).
KEY_BINDINGS = {
    "forward": ("keyboard", "w"),
    "back": ("keyboard", "s"),
    "left": ("keyboard", "a"),
    "right": ("keyboard", "d"),
    "attack": ("mouse", 1),
    "use": ("mouse", 3),
    "jump": ("keyboard", "space"),
}


def key_height(width: float) -> float:
    return width * SCREEN_RATIO
