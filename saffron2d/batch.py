"""A queue of jobs executed one after another on a background thread."""

from __future__ import annotations

import threading
from enum import Enum, auto
from typing import Callable

from saffron2d.subscriber_list import SubscriberList

Job = Callable[[], object]

_FINALIZING = object()


class BatchStatus(Enum):
    PREPARING = auto()
    EXECUTING = auto()
    FINISHED = auto()


class BatchError(RuntimeError):
    """Raised when a batch is used in a state that does not allow it."""


class Batch:
    """Collects jobs while preparing, then runs them in order on a worker thread.

    ``on_started`` and ``on_finished`` are invoked from the worker thread.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self.on_started = SubscriberList()
        self.on_finished = SubscriberList()
        self._status = BatchStatus.PREPARING
        self._queue: list[tuple[Job, str]] = []
        self._finished_jobs = 0
        self._finalizing_status = "Finalizing"
        self._progress = 0.0
        self._job_status: object = None
        self._queue_lock = threading.Lock()
        self._worker: threading.Thread | None = None

    def submit(self, function: Job, short_description: str) -> None:
        """Queue a job; only allowed while the batch is preparing."""
        if self._status is not BatchStatus.PREPARING:
            raise BatchError("Batch must be in preparing state when submitting jobs")
        with self._queue_lock:
            self._queue.append((function, short_description))

    def execute(self) -> None:
        """Start running the queued jobs on a new worker thread."""
        self._join_worker()
        with self._queue_lock:
            self._worker = threading.Thread(target=self._work, name=f"batch-{self.name}", daemon=True)
            self._worker.start()

    def wait(self, timeout: float | None = None) -> bool:
        """Wait for the worker; True once it has stopped."""
        worker = self._worker
        if worker is None:
            return True
        if worker is not threading.current_thread():
            worker.join(timeout)
        return not worker.is_alive()

    def force_exit(self) -> None:
        """Skip any remaining jobs and wait for the worker to stop."""
        self._status = BatchStatus.FINISHED
        self._join_worker()

    def reset(self) -> None:
        """Stop the worker and empty the queue, ready for new jobs."""
        self.force_exit()
        with self._queue_lock:
            self._queue.clear()
            self._finished_jobs = 0
            self._progress = 0.0
            self._status = BatchStatus.PREPARING

    def progress(self) -> float:
        """Percentage of jobs done, from 0 to 100."""
        return self._progress

    def job_status(self) -> str:
        """Description of the running job, or the finalizing message once done."""
        if self._job_status is _FINALIZING:
            return self._finalizing_status
        return "" if self._job_status is None else str(self._job_status)

    def job_count(self) -> int:
        return len(self._queue)

    def jobs_done(self) -> int:
        return self._finished_jobs

    def jobs_left(self) -> int:
        return self.job_count() - self._finished_jobs

    def status(self) -> BatchStatus:
        return self._status

    def set_finalizing_status(self, status_message: str) -> None:
        self._finalizing_status = status_message

    def _join_worker(self) -> None:
        worker = self._worker
        if worker is not None and worker is not threading.current_thread():
            worker.join()

    def _work(self) -> None:
        with self._queue_lock:
            self._status = BatchStatus.EXECUTING
            self.on_started.invoke()

            self._progress = 0.0
            total = len(self._queue)
            for function, description in self._queue:
                # A status of FINISHED here means an exit was requested.
                if self._status is BatchStatus.FINISHED:
                    break
                self._job_status = description
                function()
                self._finished_jobs += 1
                self._progress += 100.0 / total
            self._job_status = _FINALIZING
            self._status = BatchStatus.FINISHED
            self._progress = 100.0

        self.on_finished.invoke()