# geometry.py
from __future__ import annotations

from dataclasses import dataclass

from util import ceil_to_int


@dataclass(frozen=True)
class Rectangle:
    """
    Bounds in percentage space: x and width are percentages of the viewport
    width, y and height of the viewport height. Values are not clamped.
    """

    x: float
    y: float
    width: float
    height: float


@dataclass(frozen=True)
class PixelRect:
    x: int
    y: int
    w: int
    h: int

    @property
    def right(self) -> int:
        return self.x + self.w

    @property
    def center(self) -> tuple[float, float]:
        return (self.x + self.w / 2.0, self.y + self.h / 2.0)

    def inset(self, dx: int, dy: int) -> "PixelRect":
        return PixelRect(self.x + dx, self.y + dy, self.w - 2 * dx, self.h - 2 * dy)

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.x, self.y, self.w, self.h)


def scale_to_pixels(viewport_w: int, viewport_h: int, rect: Rectangle) -> PixelRect:
    return PixelRect(
        ceil_to_int(viewport_w * rect.x / 100.0),
        ceil_to_int(viewport_h * rect.y / 100.0),
        ceil_to_int(viewport_w * rect.width / 100.0),
        ceil_to_int(viewport_h * rect.height / 100.0),
    )
