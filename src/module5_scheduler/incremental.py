# file: src/module5_scheduler/incremental.py

"""
Chunked PBKDF2 derivation as an explicit state machine.

    IDLE -> RUNNING -> (RUNNING | BLOCK_COMPLETE) -> RUNNING -> ... -> DONE

Each step runs at most chunk_size iterations, reports progress, then
either reschedules itself through the injected Scheduler or delivers
the key. cancel() moves to CANCELLED at the next chunk boundary.
"""

import logging
import threading
from enum import Enum
from typing import Callable, Optional

from module4_pbkdf2 import (
    DEFAULT_CHUNK_SIZE,
    ConfigurationError,
    Pbkdf2Session,
    SessionStateError,
)

from .schedulers import Scheduler

logger = logging.getLogger(__name__)


StatusCallback = Callable[[float], None]
ResultCallback = Callable[[str], None]


class DerivationState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    BLOCK_COMPLETE = "block_complete"
    DONE = "done"
    CANCELLED = "cancelled"


class IncrementalDerivation:
    """
    Drives a Pbkdf2Session in bounded chunks.

    Guarantees:
        - status_callback values are non-decreasing and end at 100
        - result_callback fires exactly once, after the final status call
        - nothing fires after DONE or CANCELLED
    """

    def __init__(
        self,
        session: Pbkdf2Session,
        scheduler: Scheduler,
        chunk_size: int = DEFAULT_CHUNK_SIZE
    ):
        if isinstance(chunk_size, bool) or not isinstance(chunk_size, int) or chunk_size <= 0:
            raise ConfigurationError(f"chunk_size must be a positive integer, got {chunk_size!r}")

        self.session = session
        self.scheduler = scheduler
        self.chunk_size = chunk_size
        self.state = DerivationState.IDLE
        self.chunks_run = 0

        # Guards state transitions against cancel() from another thread
        self._lock = threading.RLock()

        self._status_callback: Optional[StatusCallback] = None
        self._result_callback: Optional[ResultCallback] = None

    @property
    def finished(self) -> bool:
        return self.state in (DerivationState.DONE, DerivationState.CANCELLED)

    def start(self, status_callback: StatusCallback, result_callback: ResultCallback) -> None:
        """
        Begin derivation; the first chunk runs when the scheduler gets to it.

        Raises:
            SessionStateError: If this derivation was already started or cancelled
        """
        with self._lock:
            if self.state is not DerivationState.IDLE:
                raise SessionStateError(f"Derivation already started (state: {self.state.value})")

            self._status_callback = status_callback
            self._result_callback = result_callback
            self.state = DerivationState.RUNNING
        self.scheduler.call_soon(self._step)

    def cancel(self) -> None:
        """Stop at the next chunk boundary. No-op once finished."""
        with self._lock:
            if not self.finished:
                logger.info("Derivation cancelled")
                self.state = DerivationState.CANCELLED

    def _step(self) -> None:
        if self.state is DerivationState.CANCELLED:
            return

        report = self.session.advance(self.chunk_size)
        self.chunks_run += 1
        logger.debug(
            f"Chunk {self.chunks_run}: block {report.block_index}, "
            f"{report.iterations_run} iterations, {report.percent_complete:.1f}%"
        )

        with self._lock:
            # cancel() may have landed while the chunk was running
            if self.state is DerivationState.CANCELLED:
                return

            self.state = (
                DerivationState.BLOCK_COMPLETE if report.block_complete
                else DerivationState.RUNNING
            )
            self._status_callback(report.percent_complete)

            # The status callback may have cancelled us
            if self.state is DerivationState.CANCELLED:
                return

            if report.done:
                self.state = DerivationState.DONE
                self._result_callback(self.session.key_hex)
                return

            self.state = DerivationState.RUNNING

        self.scheduler.call_soon(self._step)
