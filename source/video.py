# video.py
from __future__ import annotations

from typing import Tuple

import pygame

from logger import get_logger

log = get_logger("video")


def normalize_windowed_size(size: Tuple[int, int]) -> Tuple[int, int]:
    w = max(1, int(size[0]))
    h = max(1, int(size[1]))
    return (w, h)


def apply_display_mode(size: Tuple[int, int]) -> pygame.Surface:
    w, h = normalize_windowed_size(size)
    screen = pygame.display.set_mode((w, h), pygame.RESIZABLE)
    log.info("Window mode %dx%d", *screen.get_size())
    return screen
