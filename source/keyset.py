# keyset.py
from __future__ import annotations

from typing import Iterator, List, Mapping, Optional, Sequence, Tuple

import config
from geometry import Rectangle
from keys import InputDevice, KeyKind, KeyWidget, NameResolver, RenderInstruction
from logger import get_logger

log = get_logger("keyset")

Binding = Tuple[InputDevice, int]


class KeySet:
    """
    The ordered, fixed collection of key widgets. Built once at startup and
    handed to the dispatcher and the renderer.
    """

    def __init__(self, widgets: Sequence[KeyWidget]) -> None:
        self._widgets: Tuple[KeyWidget, ...] = tuple(widgets)

        seen = set()
        for w in self._widgets:
            ident = (w.device, w.code)
            if ident in seen:
                log.warning("Duplicate binding %s:%d, only the first key receives events", w.device.value, w.code)
            seen.add(ident)

    def __iter__(self) -> Iterator[KeyWidget]:
        return iter(self._widgets)

    def __len__(self) -> int:
        return len(self._widgets)

    def __getitem__(self, index: int) -> KeyWidget:
        return self._widgets[index]

    def find(self, device: InputDevice, code: int) -> Optional[KeyWidget]:
        for w in self._widgets:
            if w.matches(device, code):
                return w
        return None

    def render(
        self,
        viewport_w: int,
        viewport_h: int,
        now_ms: int,
        resolve_name: Optional[NameResolver] = None,
    ) -> List[RenderInstruction]:
        return [w.render(viewport_w, viewport_h, now_ms, resolve_name) for w in self._widgets]


def build_default_keyset(bindings: Mapping[str, Binding]) -> KeySet:
    bx = config.BASE_X
    by = config.BASE_Y
    w = config.KEY_WIDTH
    h = config.key_height(w)

    def key(action: str, bounds: Rectangle, kind: KeyKind = KeyKind.STANDARD, label: Optional[str] = None) -> KeyWidget:
        device, code = bindings[action]
        return KeyWidget(bounds, device, code, kind=kind, label=label)

    keyset = KeySet(
        [
            key("forward", Rectangle(bx, by, w, h)),
            key("back", Rectangle(bx, by + h, w, h)),
            key("left", Rectangle(bx - w, by + h, w, h)),
            key("right", Rectangle(bx + w, by + h, w, h)),
            key("attack", Rectangle(bx - w, by + h * 2, w * 1.5, h), KeyKind.CPS, "LMB"),
            key("use", Rectangle(bx + w * 0.5, by + h * 2, w * 1.5, h), KeyKind.CPS, "RMB"),
            key("jump", Rectangle(bx - w, by + h * 3, w * 3, h / 2), KeyKind.FILLED_BAR, "JUMP"),
        ]
    )
    log.debug("Built key set: %s", list(keyset))
    return keyset
