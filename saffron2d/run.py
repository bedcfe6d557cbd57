"""Deferred, delayed, periodic and per-frame callbacks driven by frame time."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from saffron2d import clock
from saffron2d.identifier import UUID

Function = Callable[[], object]


@dataclass
class _AfterFunction:
    function: Function
    delay: float
    counter: float = 0.0
    executed: bool = False


@dataclass
class _PeriodicFunction:
    function: Function
    interval: float
    counter: float = 0.0


class Run:
    """Schedules callbacks and runs the due ones each time :meth:`execute` is called."""

    def __init__(self) -> None:
        self._later: list[Function] = []
        self._after: list[_AfterFunction] = []
        self._periodic: dict[UUID, _PeriodicFunction] = {}
        self._frame: dict[UUID, Function] = {}

    def execute(self, frame_time: float | None = None) -> None:
        """Advance by ``frame_time`` seconds (the global clock's by default)."""
        ts = clock.frame_time() if frame_time is None else frame_time

        pending, self._later = self._later, []
        for function in pending:
            function()

        for entry in list(self._after):
            entry.counter += ts
            if entry.counter > entry.delay:
                entry.function()
                entry.executed = True
        self._after = [entry for entry in self._after if not entry.executed]

        for entry in list(self._periodic.values()):
            entry.counter += ts
            if entry.counter >= entry.interval:
                entry.counter = 0.0
                entry.function()

        for function in list(self._frame.values()):
            function()

    def later(self, function: Function) -> None:
        """Run ``function`` once on the next execution."""
        self._later.append(function)

    def after(self, function: Function, delay: float) -> None:
        """Run ``function`` once after more than ``delay`` seconds."""
        self._after.append(_AfterFunction(function, delay))

    def periodically(self, function: Function, interval: float) -> UUID:
        """Run ``function`` every ``interval`` seconds until removed."""
        handle = UUID()
        self._periodic[handle] = _PeriodicFunction(function, interval)
        return handle

    def every_frame(self, function: Function) -> UUID:
        """Run ``function`` on every execution until removed."""
        handle = UUID()
        self._frame[handle] = function
        return handle

    def remove(self, handle: UUID) -> None:
        """Cancel a periodic or per-frame function; unknown handles are ignored."""
        self._periodic.pop(handle, None)
        self._frame.pop(handle, None)