# studiofolio/services/animation.py
"""
Scroll-triggered animations.

- ScrollReveal: one-way "visible" flag driving fade/slide-in of a section
- CountUp: integer counter interpolated from 0 to a target over a fixed duration

Both consume IntersectionEntry reports from the page bridge; neither knows
about NiceGUI, so they can be driven from tests with a manual scheduler.
"""

import logging
import math
from typing import Callable, Optional

from studiofolio.models.types import IntersectionEntry
from studiofolio.services.scheduler import Scheduler, TimerHandle

logger = logging.getLogger(__name__)

DEFAULT_REVEAL_THRESHOLD = 0.1
# Negative bottom margin: fire slightly before the element is fully in view
DEFAULT_REVEAL_ROOT_MARGIN = "0px 0px -50px 0px"

DEFAULT_COUNT_UP_DURATION_MS = 2000
DEFAULT_COUNT_UP_THRESHOLD = 0.5


class ScrollReveal:
    """
    Flips `visible` to True the first time the observed node enters the viewport.

    Never reverts. After the flip the observer detaches itself, so later
    entries (including "left the viewport") are ignored.
    """

    def __init__(
        self,
        target: str,
        threshold: float = DEFAULT_REVEAL_THRESHOLD,
        root_margin: str = DEFAULT_REVEAL_ROOT_MARGIN,
    ):
        self.target = target
        self.threshold = threshold
        self.root_margin = root_margin
        self.visible = False
        self.attached = False
        self._listeners: list[Callable[[], None]] = []

    def on_visible(self, callback: Callable[[], None]) -> None:
        """Register a callback fired once when the node becomes visible"""
        self._listeners.append(callback)

    def attach(self) -> None:
        if self.visible:
            return
        self.attached = True

    def detach(self) -> None:
        self.attached = False

    def handle_entry(self, entry: IntersectionEntry) -> bool:
        """Process an intersection report. Returns True if this entry revealed the node."""
        if not self.attached or self.visible:
            return False
        if entry.target != self.target:
            return False
        if not entry.is_intersecting or entry.ratio < self.threshold:
            return False

        self.visible = True
        self.detach()
        logger.debug("Section revealed: %s (ratio=%.2f)", self.target, entry.ratio)
        for callback in self._listeners:
            callback()
        return True


class CountUp:
    """
    Animates an integer from 0 to `end` once the node is at least half visible.

    Frame algorithm:
        first frame records the start timestamp
        progress = clamp((now - start) / duration, 0, 1)
        value = floor(progress * end)
        keep requesting frames while progress < 1

    At progress == 1 the value is exactly `end`. Runs once per mount.
    """

    def __init__(
        self,
        target: str,
        end: int,
        scheduler: Scheduler,
        suffix: str = "",
        duration_ms: float = DEFAULT_COUNT_UP_DURATION_MS,
        threshold: float = DEFAULT_COUNT_UP_THRESHOLD,
    ):
        if duration_ms <= 0:
            raise ValueError(f"duration_ms must be positive, got {duration_ms}")
        self.target = target
        self.end = end
        self.suffix = suffix
        self.duration_ms = duration_ms
        self.threshold = threshold
        self.value = 0
        self.started = False
        self.finished = False
        self.attached = False
        self._scheduler = scheduler
        self._start_time: Optional[float] = None
        self._frame: Optional[TimerHandle] = None
        self._listeners: list[Callable[[int], None]] = []

    @property
    def display(self) -> str:
        return f"{self.value}{self.suffix}"

    @property
    def running(self) -> bool:
        return self._frame is not None

    def on_update(self, callback: Callable[[int], None]) -> None:
        """Register a callback receiving every new displayed value"""
        self._listeners.append(callback)

    def attach(self) -> None:
        if self.started:
            return
        self.attached = True

    def handle_entry(self, entry: IntersectionEntry) -> bool:
        """Start the animation on the first qualifying entry. Returns True if started."""
        if not self.attached or self.started:
            return False
        if entry.target != self.target:
            return False
        if not entry.is_intersecting or entry.ratio < self.threshold:
            return False

        self.started = True
        # Only the first intersection matters
        self.attached = False
        self._frame = self._scheduler.request_frame(self._on_frame)
        logger.debug("Count-up started: %s -> %d", self.target, self.end)
        return True

    def cancel(self) -> None:
        """Stop observing and drop any pending frame (view teardown)"""
        self.attached = False
        if self._frame is not None:
            self._frame.cancel()
            self._frame = None

    def _on_frame(self, timestamp: float) -> None:
        self._frame = None
        if self._start_time is None:
            self._start_time = timestamp

        progress = (timestamp - self._start_time) / self.duration_ms
        progress = min(max(progress, 0.0), 1.0)
        self._set_value(math.floor(progress * self.end))

        if progress < 1.0:
            self._frame = self._scheduler.request_frame(self._on_frame)
        else:
            self.finished = True

    def _set_value(self, value: int) -> None:
        if value == self.value:
            return
        self.value = value
        for callback in self._listeners:
            callback(value)
