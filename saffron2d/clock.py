"""Frame clock measuring time in seconds, plus a process-wide instance."""

from __future__ import annotations

import time
from typing import Callable


class Clock:
    """Tracks the last frame's duration and the total time since creation."""

    def __init__(self, timer: Callable[[], float] = time.perf_counter) -> None:
        self._timer = timer
        self._mark = timer()
        self._dt = 0.0
        self._start = 0.0

    def frame_time(self) -> float:
        """Duration of the last completed frame."""
        return self._dt

    def elapsed_time(self) -> float:
        """Time since the last restart."""
        return self._timer() - self._mark

    def restart(self) -> float:
        """End the current frame and return its duration."""
        now = self._timer()
        elapsed = now - self._mark
        self._start += elapsed
        self._dt = elapsed
        self._mark = now
        return elapsed

    def since_start(self) -> float:
        """Total time since the clock was created."""
        return self._start + self.elapsed_time()


_global_clock = Clock()


def frame_time() -> float:
    """Last frame duration of the global clock."""
    return _global_clock.frame_time()


def elapsed_time() -> float:
    """Time since the global clock's last restart."""
    return _global_clock.elapsed_time()


def restart() -> float:
    """Restart the global clock, returning the frame duration."""
    return _global_clock.restart()


def since_start() -> float:
    """Total time measured by the global clock."""
    return _global_clock.since_start()