# studiofolio/services/scheduler.py
"""
Timer and animation-frame scheduling.

Controllers never touch the event loop directly; they go through a
Scheduler so tests can drive time by hand.
"""

import asyncio
import time
from typing import Callable, Optional, Protocol

# Frame pacing for server-driven animations (~60 fps)
FRAME_INTERVAL_SEC = 1 / 60


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Clock + one-shot timers + animation frames.

    Times are milliseconds on a monotonic clock.
    """

    def now(self) -> float: ...

    def call_later(self, delay_sec: float, callback: Callable[[], None]) -> TimerHandle: ...

    def request_frame(self, callback: Callable[[float], None]) -> TimerHandle: ...


class AsyncioScheduler:
    """Scheduler backed by the running asyncio loop (NiceGUI's loop at runtime)."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    @property
    def loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            self._loop = asyncio.get_running_loop()
        return self._loop

    def now(self) -> float:
        return time.monotonic() * 1000.0

    def call_later(self, delay_sec: float, callback: Callable[[], None]) -> asyncio.TimerHandle:
        return self.loop.call_later(max(0.0, delay_sec), callback)

    def request_frame(self, callback: Callable[[float], None]) -> asyncio.TimerHandle:
        return self.loop.call_later(FRAME_INTERVAL_SEC, lambda: callback(self.now()))

