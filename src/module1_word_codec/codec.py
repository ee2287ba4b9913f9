# file: src/module1_word_codec/codec.py

"""
Byte <-> word conversion utilities.

Word arrays are numpy uint32 arrays. Each word packs four consecutive
bytes in big-endian order; a trailing partial word is zero-filled.
"""

from typing import Sequence, Tuple, Union

import numpy as np


WORD_DTYPE = np.uint32

BytesLike = Union[bytes, bytearray, memoryview, str]


def to_bytes(data: BytesLike) -> bytes:
    """
    Normalize a password/salt style input to bytes.

    Args:
        data: bytes-like object, or str (encoded as UTF-8)

    Returns:
        Immutable byte string

    Raises:
        TypeError: If data is not bytes-like or str
    """
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, str):
        return data.encode("utf-8")
    raise TypeError(f"Expected bytes or str, got {type(data).__name__}")


def bytes_to_words(data: BytesLike) -> Tuple[np.ndarray, int]:
    """
    Pack a byte string into big-endian 32-bit words.

    Args:
        data: Byte string (str is encoded as UTF-8)

    Returns:
        Tuple of (words, bit_length) where:
        - words: uint32 array of ceil(len(data) / 4) words
        - bit_length: len(data) * 8

    Example:
        >>> words, bits = bytes_to_words(b"abcde")
        >>> [hex(w) for w in words], bits
        (['0x61626364', '0x65000000'], 40)
    """
    raw = to_bytes(data)
    n_words = (len(raw) + 3) // 4

    # Zero-fill the final partial word
    padded = raw + b"\x00" * (n_words * 4 - len(raw))
    words = np.frombuffer(padded, dtype=">u4").astype(WORD_DTYPE)

    return words, len(raw) * 8


def words_to_bytes(words: Union[np.ndarray, Sequence[int]]) -> bytes:
    """
    Unpack big-endian 32-bit words into bytes.

    Emits exactly len(words) * 4 bytes; callers truncate as needed.
    """
    return np.asarray(words, dtype=WORD_DTYPE).astype(">u4").tobytes()


def bytes_to_hex(data: bytes, uppercase: bool = False) -> str:
    """
    Render bytes as hex, two digits per byte.

    Args:
        data: Byte string
        uppercase: Emit A-F instead of a-f

    Returns:
        Hex string of length 2 * len(data)
    """
    text = bytes(data).hex()
    return text.upper() if uppercase else text
