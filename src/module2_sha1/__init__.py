# file: src/module2_sha1/__init__.py

"""
Module 2: SHA-1 Core

FIPS 180 SHA-1 over word arrays with an explicit bit length.

Public API:
    - sha1_words(words, bit_length) -> 5-word digest
    - sha1_digest(data: bytes) -> bytes
"""

from .sha1_core import (
    DIGEST_WORDS,
    DIGEST_SIZE,
    BLOCK_WORDS,
    sha1_words,
    sha1_digest,
)
from .errors import Sha1Error, MessageTooLongError

__version__ = "1.0.0"

__all__ = [
    "DIGEST_WORDS",
    "DIGEST_SIZE",
    "BLOCK_WORDS",
    "sha1_words",
    "sha1_digest",
    "Sha1Error",
    "MessageTooLongError",
]
