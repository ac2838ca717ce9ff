# dispatcher.py
from __future__ import annotations

from typing import Callable, Optional

from keys import InputDevice
from keyset import KeySet
from logger import get_logger
from util import now_ms

log = get_logger("dispatcher")


class Dispatcher:
    def __init__(self, keyset: KeySet, clock: Callable[[], int] = now_ms) -> None:
        self.keyset = keyset
        self.clock = clock

    def on_input(self, device: InputDevice, code: int, pressed: bool, now: Optional[int] = None) -> bool:
        """
        Route one press/release event to the first key bound to (device, code).
        Returns False when nothing is bound to it; that is not an error.
        """
        widget = self.keyset.find(device, code)
        if widget is None:
            return False

        widget.set_pressed(pressed, self.clock() if now is None else now)
        log.debug("%r pressed=%s", widget, pressed)
        return True
