# file: src/module5_scheduler/schedulers.py

"""
Yield primitives for incremental derivation.

A Scheduler only has to run a callback "soon", after whatever is
already pending. The derivation state machine reschedules itself
through it between chunks and never blocks.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from collections import deque
from concurrent.futures import Executor, Future
from typing import Callable, Deque, Optional

logger = logging.getLogger(__name__)


Callback = Callable[[], None]


class Scheduler(ABC):
    """Injectable yield primitive."""

    @abstractmethod
    def call_soon(self, callback: Callback) -> None:
        """Queue callback to run after currently pending work."""
        raise NotImplementedError


class CooperativeScheduler(Scheduler):
    """
    Single-threaded FIFO run queue.

    Callbacks queued with call_soon() run in order when run() or
    run_once() is called. Several derivations sharing one scheduler
    interleave chunk by chunk.
    """

    def __init__(self):
        self._queue: Deque[Callback] = deque()

    def call_soon(self, callback: Callback) -> None:
        self._queue.append(callback)

    @property
    def pending(self) -> int:
        return len(self._queue)

    def run_once(self) -> bool:
        """Run the next queued callback. Returns False if the queue was empty."""
        if not self._queue:
            return False
        callback = self._queue.popleft()
        callback()
        return True

    def run(self) -> int:
        """Run until the queue is empty; returns the number of callbacks run."""
        count = 0
        while self.run_once():
            count += 1
        return count


class AsyncioScheduler(Scheduler):
    """
    Schedules callbacks on an asyncio event loop.

    Without an explicit loop, must be constructed inside a running loop.
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self.loop = loop if loop is not None else asyncio.get_running_loop()

    def call_soon(self, callback: Callback) -> None:
        self.loop.call_soon(callback)


class ExecutorScheduler(Scheduler):
    """
    Submits callbacks to a concurrent.futures executor (task-queue model).

    Each chunk only queues the next one after it has finished, so chunks
    of one derivation never overlap even on a multi-worker pool.
    """

    def __init__(self, executor: Executor):
        self.executor = executor

    def call_soon(self, callback: Callback) -> None:
        future = self.executor.submit(callback)
        future.add_done_callback(self._report_failure)

    @staticmethod
    def _report_failure(future: Future) -> None:
        if future.cancelled():
            return
        exc = future.exception()
        if exc is not None:
            logger.error("Scheduled chunk failed", exc_info=exc)
