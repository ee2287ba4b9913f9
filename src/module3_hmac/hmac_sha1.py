# file: src/module3_hmac/hmac_sha1.py

"""
HMAC-SHA-1 (RFC 2104) on word arrays.
"""

from dataclasses import dataclass
from typing import Union

import numpy as np

from module1_word_codec import WORD_DTYPE, bytes_to_words, words_to_bytes
from module2_sha1 import BLOCK_WORDS, DIGEST_WORDS, sha1_words


INNER_PAD_WORD = 0x36363636
OUTER_PAD_WORD = 0x5C5C5C5C

BLOCK_BITS = BLOCK_WORDS * 32
DIGEST_BITS = DIGEST_WORDS * 32


@dataclass(frozen=True)
class PadPair:
    """Inner and outer 16-word pad blocks for one key (read-only)."""
    inner: np.ndarray
    outer: np.ndarray


def derive_pad_pair(key: Union[bytes, str]) -> PadPair:
    """
    Derive the HMAC pad blocks from a key.

    Keys longer than one 64-byte block are replaced by their SHA-1 digest;
    shorter keys are zero-padded to 16 words before the XOR.

    Args:
        key: Key bytes (str is encoded as UTF-8)

    Returns:
        PadPair with read-only uint32 arrays of 16 words each
    """
    key_words, key_bits = bytes_to_words(key)
    if len(key_words) > BLOCK_WORDS:
        key_words = sha1_words(key_words, key_bits)

    block_key = np.zeros(BLOCK_WORDS, dtype=WORD_DTYPE)
    block_key[:len(key_words)] = key_words

    inner = block_key ^ WORD_DTYPE(INNER_PAD_WORD)
    outer = block_key ^ WORD_DTYPE(OUTER_PAD_WORD)
    inner.setflags(write=False)
    outer.setflags(write=False)

    return PadPair(inner=inner, outer=outer)


class HmacSha1:
    """
    HMAC-SHA-1 keyed on a fixed password.

    The pad pair is computed once at construction and shared by every
    call; compute() never mutates it.

    Example:
        >>> mac = HmacSha1(b"Jefe")
        >>> mac.digest(b"what do ya want for nothing?").hex()
        'effcdf6ae5eb2fa2d27416d5f184df9c259a7c79'
    """

    def __init__(self, key: Union[bytes, str]):
        self.pads = derive_pad_pair(key)

    def compute(self, message_words: np.ndarray, message_bit_length: int) -> np.ndarray:
        """
        Compute HMAC over a word-array message.

        Args:
            message_words: Big-endian uint32 words
            message_bit_length: Exact number of meaningful message bits

        Returns:
            5-word uint32 digest
        """
        inner = sha1_words(
            np.concatenate((self.pads.inner, np.asarray(message_words, dtype=WORD_DTYPE))),
            BLOCK_BITS + message_bit_length
        )
        return sha1_words(
            np.concatenate((self.pads.outer, inner)),
            BLOCK_BITS + DIGEST_BITS
        )

    def digest(self, message: bytes) -> bytes:
        """Compute the 20-byte HMAC of a byte string."""
        words, bit_length = bytes_to_words(message)
        return words_to_bytes(self.compute(words, bit_length))
