"""A fixed set of worker threads, each running one named job at a time."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Any, Callable

_log = logging.getLogger(__name__)


@dataclass
class _Worker:
    work_id: str = ""
    thread: threading.Thread | None = None
    available: bool = True
    function: Callable[[], object] | None = None
    use_counter: int = 0


class ThreadPool:
    """Runs named jobs on up to ``max_threads`` threads; a name runs once at a time."""

    MAX_THREADS = 24

    def __init__(self, max_threads: int = MAX_THREADS, poll_interval: float = 0.05) -> None:
        if max_threads < 1:
            raise ValueError(f"max_threads must be positive: {max_threads}")
        self._workers = [_Worker() for _ in range(max_threads)]
        self._poll_interval = poll_interval
        self._lock = threading.Lock()

    def dispatch_work(self, work_id: str, fn: Callable[[], object]) -> bool:
        """Start ``fn`` under ``work_id``, waiting for a free thread.

        Returns False without starting anything if a job with that id is held.
        """
        with self._lock:
            if any(worker.work_id == work_id for worker in self._workers):
                return False

            while True:
                for worker in self._workers:
                    if worker.available:
                        if worker.thread is not None:
                            worker.thread.join()
                        worker.work_id = work_id
                        worker.available = False
                        worker.function = fn
                        worker.thread = threading.Thread(target=self._run, args=(worker,), daemon=True)
                        worker.thread.start()
                        worker.use_counter += 1
                        return True
                time.sleep(self._poll_interval)

    def collect_all(self) -> None:
        """Wait for every running job to finish."""
        with self._lock:
            for worker in self._workers:
                worker.available = False
                if worker.thread is not None:
                    worker.thread.join()
                worker.work_id = ""
                worker.available = True

    def __enter__(self) -> ThreadPool:
        return self

    def __exit__(self, *args: Any) -> None:
        self.collect_all()

    @staticmethod
    def _run(worker: _Worker) -> None:
        try:
            if worker.function is not None:
                worker.function()
        except Exception:
            _log.exception("ThreadPool caught uncaught thread exception")
        worker.function = None
        worker.work_id = ""
        worker.available = True