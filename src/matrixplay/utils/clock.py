"""Frame timing utilities."""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Optional

import pygame

logger = logging.getLogger(__name__)


@dataclass
class FrameClock:
    target_fps: int

    def __post_init__(self) -> None:
        self._clock = pygame.time.Clock()

    def tick(self) -> float:
        return self._clock.tick(self.target_fps) / 1000.0

    def get_fps(self) -> float:
        return self._clock.get_fps()


@dataclass
class FrameScheduler:
    """
    Fires ``callback`` once per ``interval`` seconds of wall-clock time.

    The host loop calls ``pump()`` as often as it likes; late pumps fire one
    tick and schedule the next one a full interval later, so missed ticks are
    dropped instead of replayed. Use as a context manager to guarantee the
    scheduler is stopped when the view goes away.
    """
    interval: float
    callback: Callable[[], None]
    time_source: Callable[[], float] = time.perf_counter
    skipped: int = field(default=0, init=False)
    _deadline: Optional[float] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.interval <= 0:
            raise ValueError(f"Scheduler interval must be positive, got {self.interval}")

    @property
    def running(self) -> bool:
        return self._deadline is not None

    def start(self) -> None:
        if self.running:
            return
        self._deadline = self.time_source() + self.interval
        logger.debug("Frame scheduler started (%.1f ms interval)", self.interval * 1000.0)

    def stop(self) -> None:
        if not self.running:
            return
        self._deadline = None
        logger.debug("Frame scheduler stopped (%d ticks skipped)", self.skipped)

    def pump(self) -> bool:
        """Run the callback if a tick is due. Returns True when it ran."""
        if self._deadline is None:
            return False
        now = self.time_source()
        if now < self._deadline:
            return False
        self.skipped += int((now - self._deadline) // self.interval)
        self._deadline = now + self.interval
        self.callback()
        return True

    def __enter__(self) -> "FrameScheduler":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
