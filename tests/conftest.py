from __future__ import annotations

import sys
from pathlib import Path

import pytest


# Ensure the project root is importable when running `pytest` via its entrypoint
# (e.g., `uv run --extra test pytest`), where `sys.path[0]` may not be the repo root.
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(_PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(_PROJECT_ROOT))


class ManualHandle:
    def __init__(self, scheduler: "ManualScheduler", due: float, callback, is_frame: bool):
        self.scheduler = scheduler
        self.due = due
        self.callback = callback
        self.is_frame = is_frame
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Scheduler whose clock only moves when a test advances it (milliseconds)."""

    frame_ms = 16.0

    def __init__(self, start: float = 1000.0):
        self.time = start
        self._handles: list[ManualHandle] = []

    def now(self) -> float:
        return self.time

    def call_later(self, delay_sec, callback):
        handle = ManualHandle(self, self.time + delay_sec * 1000.0, callback, is_frame=False)
        self._handles.append(handle)
        return handle

    def request_frame(self, callback):
        handle = ManualHandle(self, self.time + self.frame_ms, callback, is_frame=True)
        self._handles.append(handle)
        return handle

    @property
    def pending(self) -> list[ManualHandle]:
        return [h for h in self._handles if not h.cancelled]

    def advance(self, ms: float) -> None:
        """Move the clock forward, firing due timers and frames in order."""
        target = self.time + ms
        while True:
            due = [h for h in self.pending if h.due <= target]
            if not due:
                break
            handle = min(due, key=lambda h: h.due)
            self._handles.remove(handle)
            self.time = handle.due
            if handle.is_frame:
                handle.callback(self.time)
            else:
                handle.callback()
        self.time = target

    def run_frames(self, limit: int = 1000) -> int:
        """Fire frames until none are pending. Returns the number fired."""
        fired = 0
        while fired < limit:
            frames = [h for h in self.pending if h.is_frame]
            if not frames:
                break
            self.advance(min(h.due for h in frames) - self.time)
            fired += 1
        return fired


class FakeScroller:
    def __init__(self):
        self.calls: list[tuple] = []

    def scroll_to_section(self, section_id: str) -> None:
        self.calls.append(("section", section_id))

    def scroll_to_top(self, smooth: bool = False) -> None:
        self.calls.append(("top", smooth))


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def scroller() -> FakeScroller:
    return FakeScroller()
