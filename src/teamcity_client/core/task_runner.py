# -*- coding: utf-8 -*-
"""Background jobs whose calls run in parallel and join on completion."""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import Any, Callable

logger = logging.getLogger(__name__)


TaskCallable = Callable[[], Any]
CompletionCallback = Callable[[list[Future]], None]


@dataclass
class GatherJob:
    """Calls issued together; ``on_complete`` runs once all of them settled."""

    name: str
    calls: list[TaskCallable]
    on_complete: CompletionCallback
    futures: list[Future] = field(default_factory=list)
    remaining: int = 0


class TaskRunner:
    """Run gathered calls on a thread pool without blocking the caller."""

    def __init__(self, max_workers: int = 4) -> None:
        self.max_workers = int(max_workers)
        self._executor = ThreadPoolExecutor(max_workers=self.max_workers, thread_name_prefix="teamcity")
        self._lock = threading.Lock()
        self._idle = threading.Condition(self._lock)
        self._active = 0
        self._peak_active = 0

    def gather(self, name: str, calls: list[TaskCallable], on_complete: CompletionCallback) -> GatherJob:
        """Submit ``calls`` concurrently; ``on_complete`` receives their futures in call order."""
        job = GatherJob(name=name, calls=list(calls), on_complete=on_complete, remaining=len(calls))
        with self._lock:
            self._active += 1
            self._peak_active = max(self._peak_active, self._active)
        if not job.calls:
            self._finish(job)
            return job

        job.futures = [self._executor.submit(call) for call in job.calls]
        for future in job.futures:
            future.add_done_callback(lambda _future, job=job: self._on_call_done(job))
        return job

    def _on_call_done(self, job: GatherJob) -> None:
        with self._lock:
            job.remaining -= 1
            last = job.remaining == 0
        if last:
            self._finish(job)

    def _finish(self, job: GatherJob) -> None:
        try:
            job.on_complete(job.futures)
        except Exception:
            logger.exception("Completion of job '%s' failed", job.name)
        finally:
            with self._idle:
                self._active = max(0, self._active - 1)
                self._idle.notify_all()

    def wait_for_all(self, timeout: float | None = None) -> bool:
        """Block until every job ran its completion. Returns False on timeout."""
        with self._idle:
            return self._idle.wait_for(lambda: self._active == 0, timeout=timeout)

    def active_jobs(self) -> int:
        with self._lock:
            return self._active

    def peak_active_jobs(self) -> int:
        with self._lock:
            return self._peak_active

    def shutdown(self, wait_for_tasks: bool = True) -> None:
        self._executor.shutdown(wait=wait_for_tasks, cancel_futures=False)
