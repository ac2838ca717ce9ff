# render.py
from __future__ import annotations

import time
from typing import Dict, Iterable

import pygame

import config
from keys import DrawInstruction, FillInstruction, RenderInstruction, TextInstruction
from util import argb_to_rgba, ceil_to_int


class RateMeter:
    def __init__(self) -> None:
        self._window_start = time.perf_counter()
        self._count = 0
        self.value = 0.0

    def tick(self) -> None:
        self._count += 1
        now = time.perf_counter()
        dt = now - self._window_start
        if dt >= 1.0:
            self.value = self._count / dt
            self._count = 0
            self._window_start = now


class FontCache:
    def __init__(self, base_px: int = config.FONT_BASE_PX) -> None:
        self.base_px = int(base_px)
        self._fonts: Dict[int, pygame.font.Font] = {}

    def get(self, scale: float) -> pygame.font.Font:
        size = max(1, int(round(self.base_px * scale)))
        font = self._fonts.get(size)
        if font is None:
            font = pygame.font.Font(None, size)
            self._fonts[size] = font
        return font


def draw_fill(surface: pygame.Surface, fill: FillInstruction) -> None:
    r = fill.rect
    if r.w <= 0 or r.h <= 0:
        return
    rgba = argb_to_rgba(fill.color)
    if rgba[3] == 0xFF:
        pygame.draw.rect(surface, rgba[:3], pygame.Rect(r.x, r.y, r.w, r.h))
        return
    panel = pygame.Surface((r.w, r.h), flags=pygame.SRCALPHA)
    panel.fill(rgba)
    surface.blit(panel, (r.x, r.y))


def draw_text(surface: pygame.Surface, fonts: FontCache, text: TextInstruction) -> None:
    t = fonts.get(text.scale).render(text.text, True, argb_to_rgba(text.color)[:3])
    x = ceil_to_int(text.x) - t.get_width() // 2
    cy = ceil_to_int(text.y)
    if text.anchor == "bottom":
        y = cy - 1 - t.get_height()
    elif text.anchor == "top":
        y = cy + 1
    else:
        y = cy - t.get_height() // 2
    surface.blit(t, (x, y))


def draw_instruction(surface: pygame.Surface, fonts: FontCache, instruction: DrawInstruction) -> None:
    if isinstance(instruction, FillInstruction):
        draw_fill(surface, instruction)
    else:
        draw_text(surface, fonts, instruction)


def draw_instructions(surface: pygame.Surface, fonts: FontCache, frame: Iterable[RenderInstruction]) -> None:
    for key in frame:
        for instruction in key.instructions():
            draw_instruction(surface, fonts, instruction)
