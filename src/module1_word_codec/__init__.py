# file: src/module1_word_codec/__init__.py

"""
Module 1: Word Codec

Converts between byte strings and arrays of big-endian 32-bit words,
and renders bytes as hexadecimal text.

Public API:
    - bytes_to_words(data) -> (words, bit_length)
    - words_to_bytes(words) -> bytes
    - bytes_to_hex(data, uppercase=False) -> str
    - to_bytes(data) -> bytes
"""

from .codec import (
    WORD_DTYPE,
    BytesLike,
    bytes_to_words,
    words_to_bytes,
    bytes_to_hex,
    to_bytes,
)

__version__ = "1.0.0"

__all__ = [
    "WORD_DTYPE",
    "BytesLike",
    "bytes_to_words",
    "words_to_bytes",
    "bytes_to_hex",
    "to_bytes",
]
