"""Thread pool that dispatches queued jobs of several priorities to a fixed set of workers."""

from __future__ import annotations

import threading
from collections import deque
from enum import IntEnum
from typing import Any, Callable, Optional

DEFAULT_MAX_JOBS = 100

_CHANCES = (2, 3, 5, 7, 11)
_MASK32 = 0xFFFFFFFF

Job = tuple[Callable[[Any], Any], Any]


class JobStatus(IntEnum):
    """State of a worker thread."""

    READY = 0
    BUSY = 1
    WAITING = 2
    TERM = 3


class JobPriority(IntEnum):
    """Queue a job is placed in; lower values are visited first."""

    REALTIME = 0
    HIGH = 1
    NORMAL = 2
    LOW = 3
    IDLE = 4


def _check_priority(priority: Any) -> JobPriority:
    try:
        return JobPriority(priority)
    except ValueError:
        raise ValueError(f"invalid job priority: {priority!r}") from None


class _Worker:
    def __init__(self, failures: list[BaseException]) -> None:
        self._cond = threading.Condition()
        self._status = JobStatus.WAITING
        self._job: Optional[Job] = None
        self._failures = failures
        self.thread = threading.Thread(target=self._run, daemon=True)

    @property
    def status(self) -> JobStatus:
        with self._cond:
            return self._status

    def assign(self, job: Job) -> None:
        with self._cond:
            self._job = job
            self._status = JobStatus.READY
            self._cond.notify()

    def terminate(self) -> None:
        with self._cond:
            self._status = JobStatus.TERM
            self._cond.notify()

    def _run(self) -> None:
        while True:
            with self._cond:
                self._cond.wait_for(lambda: self._status is not JobStatus.WAITING)
                if self._status is JobStatus.TERM:
                    return
                self._status = JobStatus.BUSY
                proc, data = self._job
            try:
                proc(data)
            except Exception as exc:  # a failing job must not take its worker down
                self._failures.append(exc)
            finally:
                with self._cond:
                    if self._status is JobStatus.BUSY:
                        self._status = JobStatus.WAITING


class JobSystem:
    """A fixed pool of worker threads fed from per-priority bounded queues.

    Jobs are handed to idle workers only when :meth:`process` is called,
    normally from the main thread in a loop. Exceptions raised by jobs are
    collected in :attr:`failures`.
    """

    def __init__(self, max_threads: int, max_jobs: int = DEFAULT_MAX_JOBS) -> None:
        if max_threads < 0 or max_jobs < 0:
            raise ValueError("thread and job limits must not be negative")
        self.max_threads = max_threads
        self.max_jobs = max_jobs
        self.failures: list[BaseException] = []
        self._counter = 0
        self._lock = threading.Lock()
        self._queues: list[deque[Job]] = [deque() for _ in JobPriority]
        self._closed = False
        self._workers = [_Worker(self.failures) for _ in range(max_threads)]
        for worker in self._workers:
            worker.thread.start()

    def __enter__(self) -> "JobSystem":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        """Stop all workers and wait for them; jobs still queued are dropped."""
        if self._closed:
            return
        self._closed = True
        for worker in self._workers:
            worker.terminate()
        for worker in self._workers:
            worker.thread.join()
        with self._lock:
            for queue in self._queues:
                queue.clear()

    def enqueue(self, proc: Callable[[Any], Any], data: Any = None,
                priority: JobPriority = JobPriority.NORMAL) -> bool:
        """Queue ``proc(data)``; return False if that priority's queue is full."""
        level = _check_priority(priority)
        if not callable(proc):
            raise TypeError("job procedure must be callable")
        with self._lock:
            queue = self._queues[level]
            if len(queue) >= self.max_jobs:
                return False
            queue.append((proc, data))
            return True

    def empty(self, priority: JobPriority) -> bool:
        """Return whether the queue for *priority* holds no jobs."""
        level = _check_priority(priority)
        with self._lock:
            return not self._queues[level]

    def full(self, priority: JobPriority) -> bool:
        """Return whether the queue for *priority* is at its limit."""
        level = _check_priority(priority)
        with self._lock:
            return len(self._queues[level]) >= self.max_jobs

    def empty_all(self) -> bool:
        """Return whether every queue is empty."""
        return all(self.empty(priority) for priority in JobPriority)

    def full_all(self) -> bool:
        """Return whether every queue is full."""
        return all(self.full(priority) for priority in JobPriority)

    def done(self) -> bool:
        """Return whether all workers are idle and no jobs remain queued."""
        if any(worker.status is not JobStatus.WAITING for worker in self._workers):
            return False
        return self.empty_all()

    def process(self) -> bool:
        """Hand queued jobs to idle workers; return False if nothing was queued."""
        if self.empty_all():
            return False
        for worker in self._workers:
            if worker.status is not JobStatus.WAITING:
                continue
            with self._lock:
                job = self._pick_job()
            if job is not None:
                worker.assign(job)
        return True

    def _pick_job(self) -> Optional[Job]:
        for priority in JobPriority:
            queue = self._queues[priority]
            if not queue:
                continue
            chance_hit = self._counter % _CHANCES[priority] == 0
            self._counter = (self._counter + 1) & _MASK32
            if not chance_hit:
                continue
            return queue.popleft()
        return None