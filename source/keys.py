# keys.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional, Tuple, Union

import config
from cps import CpsCounter
from geometry import PixelRect, Rectangle, scale_to_pixels

NameResolver = Callable[[int], Optional[str]]


class KeyKind(Enum):
    STANDARD = "standard"
    FILLED_BAR = "filled_bar"
    CPS = "cps"


class InputDevice(Enum):
    KEYBOARD = "keyboard"
    MOUSE = "mouse"


@dataclass
class KeyState:
    pressed: bool = False

    def set(self, pressed: bool) -> None:
        self.pressed = bool(pressed)


@dataclass(frozen=True)
class FillInstruction:
    rect: PixelRect
    color: int


@dataclass(frozen=True)
class TextInstruction:
    """
    Text centered horizontally on x. The anchor places it vertically against y:
    "middle" centers it, "bottom" ends it one pixel above y, "top" starts it
    one pixel below y.
    """

    text: str
    x: float
    y: float
    scale: float
    color: int
    anchor: str = "middle"


DrawInstruction = Union[FillInstruction, TextInstruction]


@dataclass(frozen=True)
class RenderInstruction:
    background: FillInstruction
    body: Tuple[DrawInstruction, ...]

    def instructions(self) -> Tuple[DrawInstruction, ...]:
        return (self.background,) + self.body


def text_scale(viewport_w: int, viewport_h: int) -> float:
    return min(viewport_w / config.BASE_SCREEN_W, viewport_h / config.BASE_SCREEN_H) * config.TEXT_BASE_SCALE


class KeyWidget:
    """
    One on-screen key indicator: percentage bounds, the input it listens to,
    its press state and, for the CPS kind, a click-rate window.
    """

    def __init__(
        self,
        bounds: Rectangle,
        device: InputDevice,
        code: int,
        kind: KeyKind = KeyKind.STANDARD,
        label: Optional[str] = None,
    ) -> None:
        self.bounds = bounds
        self.device = device
        self.code = int(code)
        self.kind = kind
        self.label = label
        self.state = KeyState()
        self.cps: Optional[CpsCounter] = CpsCounter() if kind is KeyKind.CPS else None

    @property
    def pressed(self) -> bool:
        return self.state.pressed

    def matches(self, device: InputDevice, code: int) -> bool:
        return self.device is device and self.code == code

    def set_pressed(self, pressed: bool, now_ms: int) -> None:
        self.state.set(pressed)
        # Every press event counts, including repeat-while-held deliveries.
        if pressed and self.cps is not None:
            self.cps.record_press(now_ms)

    def display_name(self, resolve_name: Optional[NameResolver] = None) -> str:
        if self.label is not None:
            return self.label
        name = resolve_name(self.code) if resolve_name is not None else None
        if name:
            return name.upper()
        return config.UNKNOWN_KEY_LABEL

    def render(
        self,
        viewport_w: int,
        viewport_h: int,
        now_ms: int,
        resolve_name: Optional[NameResolver] = None,
    ) -> RenderInstruction:
        box = scale_to_pixels(viewport_w, viewport_h, self.bounds)
        color = config.KEY_DOWN_COLOR if self.state.pressed else config.KEY_UP_COLOR
        background = FillInstruction(box.inset(1, 1), color)

        if self.kind is KeyKind.FILLED_BAR:
            body = self._bar_body(box)
        elif self.kind is KeyKind.CPS:
            body = self._cps_body(box, text_scale(viewport_w, viewport_h), now_ms, resolve_name)
        else:
            body = self._label_body(box, text_scale(viewport_w, viewport_h), resolve_name)

        return RenderInstruction(background, body)

    def _label_body(
        self, box: PixelRect, scale: float, resolve_name: Optional[NameResolver]
    ) -> Tuple[DrawInstruction, ...]:
        cx, cy = box.center
        return (TextInstruction(self.display_name(resolve_name), cx, cy, scale, config.TEXT_COLOR),)

    def _bar_body(self, box: PixelRect) -> Tuple[DrawInstruction, ...]:
        return (FillInstruction(box.inset(box.w // 4, box.h * 3 // 8), config.TEXT_COLOR),)

    def _cps_body(
        self, box: PixelRect, scale: float, now_ms: int, resolve_name: Optional[NameResolver]
    ) -> Tuple[DrawInstruction, ...]:
        cx, cy = box.center
        scale *= config.CPS_TEXT_SCALE
        count = self.cps.current_count(now_ms) if self.cps is not None else 0
        return (
            TextInstruction(self.display_name(resolve_name), cx, cy, scale, config.TEXT_COLOR, anchor="bottom"),
            TextInstruction(f"{count} CPS", cx, cy, scale, config.TEXT_COLOR, anchor="top"),
        )

    def __repr__(self) -> str:
        return f"KeyWidget({self.kind.value}, {self.device.value}:{self.code}, label={self.label!r})"
