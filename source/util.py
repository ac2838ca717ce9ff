# util.py
from __future__ import annotations

import math
import time
from typing import Tuple


def ceil_to_int(v: float) -> int:
    # Exact for integral values: ceil_to_int(4.0) == 4.
    return int(math.ceil(v))


def now_ms() -> int:
    return int(time.perf_counter() * 1000.0)


def to_argb(alpha: int, red: int, green: int, blue: int) -> int:
    """Pack four channels into 0xAARRGGBB, keeping only the low byte of each."""
    return ((alpha & 0xFF) << 24) | ((red & 0xFF) << 16) | ((green & 0xFF) << 8) | (blue & 0xFF)


def argb_to_rgba(color: int) -> Tuple[int, int, int, int]:
    return (
        (color >> 16) & 0xFF,
        (color >> 8) & 0xFF,
        color & 0xFF,
        (color >> 24) & 0xFF,
    )
