# file: src/module4_pbkdf2/__init__.py

"""
Module 4: PBKDF2 Engine

PBKDF2-HMAC-SHA1 block/iteration algorithm as a resumable session.

Public API:
    - Pbkdf2Session(password, salt, iteration_count, key_length)
    - pbkdf2_hmac_sha1(password, salt, iteration_count, key_length) -> bytes
    - DerivationOptions, load_config
"""

from .session import (
    Pbkdf2Session,
    SessionState,
    ChunkReport,
    pbkdf2_hmac_sha1,
    HASH_LENGTH,
    MAX_KEY_LENGTH,
)
from .config import (
    DerivationOptions,
    DEFAULT_CHUNK_SIZE,
    DEFAULT_CONFIG,
    DEFAULT_CONFIG_PATH,
    load_config,
    load_default_config,
)
from .errors import (
    Pbkdf2Error,
    InvalidParameterError,
    SessionStateError,
    ConfigurationError,
)

__version__ = "1.0.0"

__all__ = [
    "Pbkdf2Session",
    "SessionState",
    "ChunkReport",
    "pbkdf2_hmac_sha1",
    "HASH_LENGTH",
    "MAX_KEY_LENGTH",
    "DerivationOptions",
    "DEFAULT_CHUNK_SIZE",
    "DEFAULT_CONFIG",
    "DEFAULT_CONFIG_PATH",
    "load_config",
    "load_default_config",
    "Pbkdf2Error",
    "InvalidParameterError",
    "SessionStateError",
    "ConfigurationError",
]
