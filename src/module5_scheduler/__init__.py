# file: src/module5_scheduler/__init__.py

"""
Module 5: Incremental Scheduler

Splits a PBKDF2 derivation into bounded chunks executed through an
injectable scheduler, with progress and completion callbacks.

Public API:
    - PBKDF2(password, salt, iteration_count, key_length, options=None)
    - PBKDF2.derive_key(status_callback, result_callback, scheduler=None)
    - IncrementalDerivation, DerivationState
    - Scheduler, CooperativeScheduler, AsyncioScheduler, ExecutorScheduler
"""

from .pbkdf2 import PBKDF2
from .incremental import IncrementalDerivation, DerivationState
from .schedulers import (
    Scheduler,
    CooperativeScheduler,
    AsyncioScheduler,
    ExecutorScheduler,
)

__version__ = "1.0.0"

__all__ = [
    "PBKDF2",
    "IncrementalDerivation",
    "DerivationState",
    "Scheduler",
    "CooperativeScheduler",
    "AsyncioScheduler",
    "ExecutorScheduler",
]
