"""A pausable stopwatch counting milliseconds."""

from __future__ import annotations

import time
from typing import Callable

_TICK_MASK = 0xFFFFFFFF


def _monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


class Timer:
    """Stopwatch driven by a clock that returns milliseconds."""

    def __init__(self, clock: Callable[[], int] = _monotonic_ms) -> None:
        self._clock = clock
        self._start_ticks = 0
        self._paused_ticks = 0
        self._started = False
        self._paused = False

    def _now(self) -> int:
        return int(self._clock()) & _TICK_MASK

    def start(self) -> None:
        self._started = True
        self._paused = False
        self._start_ticks = self._now()
        self._paused_ticks = 0

    def stop(self) -> None:
        self._started = False
        self._paused = False
        self._start_ticks = 0
        self._paused_ticks = 0

    def pause(self) -> None:
        if self._started and not self._paused:
            self._paused = True
            self._paused_ticks = (self._now() - self._start_ticks) & _TICK_MASK
            self._start_ticks = 0

    def unpause(self) -> None:
        if self._started and self._paused:
            self._paused = False
            self._start_ticks = (self._now() - self._paused_ticks) & _TICK_MASK
            self._paused_ticks = 0

    def ticks(self) -> int:
        """Milliseconds counted so far; zero when not started."""
        if not self._started:
            return 0
        if self._paused:
            return self._paused_ticks
        return (self._now() - self._start_ticks) & _TICK_MASK

    def is_started(self) -> bool:
        return self._started

    def is_paused(self) -> bool:
        return self._paused and self._started