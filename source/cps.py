# cps.py
from __future__ import annotations

from collections import deque
from typing import Deque

import config


class CpsCounter:
    """
    Presses within the trailing window, measured from the moment of the query.

    Timestamps are appended in arrival order and purged lazily from the front
    on every query, so each entry is removed at most once. Purging stops at the
    first entry still inside the window; if the clock ever went backward the
    count can be stale until the older entries age out, but it never raises.
    """

    def __init__(self, window_ms: int = config.CPS_WINDOW_MS) -> None:
        self.window_ms = int(window_ms)
        self._stamps: Deque[int] = deque()

    def record_press(self, now_ms: int) -> None:
        self._stamps.append(now_ms)

    def current_count(self, now_ms: int) -> int:
        stamps = self._stamps
        while stamps and stamps[0] + self.window_ms < now_ms:
            stamps.popleft()
        return len(stamps)

    def __len__(self) -> int:
        return len(self._stamps)
