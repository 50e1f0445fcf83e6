"""Wall-clock stopwatch for a game and a one-shot countdown timer."""

from __future__ import annotations

import time
from collections.abc import Callable


class GameStopwatch:
    """Measures how long a game has been played."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self.started_at = clock()
        self.total_time = 0.0

    def start(self) -> None:
        """Restart the measurement from now."""
        self.started_at = self._clock()
        self.total_time = 0.0

    def pause(self) -> float:
        """Record the time elapsed since the start and return it."""
        self.total_time = self._clock() - self.started_at
        return self.total_time


class GameTimer:
    """A one-shot timer that finishes once its duration has elapsed."""

    def __init__(self, duration: float) -> None:
        if duration < 0:
            raise ValueError(f"timer duration must not be negative, got {duration}")
        self.duration = duration
        self.elapsed = 0.0
        self._finished = False

    def tick(self, delta: float) -> GameTimer:
        """Advance the timer by ``delta`` seconds."""
        if delta < 0:
            raise ValueError(f"cannot tick by a negative delta, got {delta}")
        if not self._finished:
            self.elapsed = min(self.elapsed + delta, self.duration)
            self._finished = self.elapsed >= self.duration
        return self

    def reset(self) -> None:
        self.elapsed = 0.0
        self._finished = False

    def finished(self) -> bool:
        return self._finished