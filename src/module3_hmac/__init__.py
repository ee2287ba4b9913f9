# file: src/module3_hmac/__init__.py

"""
Module 3: HMAC-SHA-1

Keyed pseudorandom function built from two SHA-1 passes over
precomputed inner/outer pad blocks.
"""

from .hmac_sha1 import HmacSha1, PadPair, derive_pad_pair, INNER_PAD_WORD, OUTER_PAD_WORD

__all__ = [
    "HmacSha1",
    "PadPair",
    "derive_pad_pair",
    "INNER_PAD_WORD",
    "OUTER_PAD_WORD",
]

__version__ = "1.0.0"
