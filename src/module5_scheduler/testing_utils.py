# file: src/module5_scheduler/testing_utils.py

"""
Testing utilities for the scheduler module.

Records callback invocations so ordering guarantees can be asserted.
Used only in test/evaluation contexts.
"""

from typing import List, Tuple


class RecordingCallbacks:
    """
    Captures status and result callbacks in call order.

    Example:
        >>> rec = RecordingCallbacks()
        >>> _ = PBKDF2(b"password", b"salt", 1, 20).derive_key(rec.status, rec.result)
        >>> rec.results
        ['0c60c80f961f0e71f3a9b524af6012062fe037a6']
    """

    def __init__(self):
        self.percents: List[float] = []
        self.results: List[str] = []
        self.events: List[Tuple[str, object]] = []

    def status(self, percent: float) -> None:
        self.percents.append(percent)
        self.events.append(("status", percent))

    def result(self, key_hex: str) -> None:
        self.results.append(key_hex)
        self.events.append(("result", key_hex))

    @property
    def is_monotonic(self) -> bool:
        return all(a <= b for a, b in zip(self.percents, self.percents[1:]))
