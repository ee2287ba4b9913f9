# file: src/module2_sha1/sha1_core.py

"""
SHA-1 compression over big-endian word arrays.

The message is given as a uint32 word array plus the exact number of
meaningful bits, so callers can hash concatenations of pad blocks and
previous digests without converting back to bytes.

Only the low 32 bits of the 64-bit length field are used: messages of
2**32 bits or more are rejected with MessageTooLongError.
"""

from typing import List, Sequence, Union

import numpy as np

from module1_word_codec import WORD_DTYPE, bytes_to_words, words_to_bytes

from .errors import MessageTooLongError


MASK = 0xFFFFFFFF

BLOCK_WORDS = 16    # 512-bit chunk
DIGEST_WORDS = 5    # 160-bit digest
DIGEST_SIZE = 20    # bytes

MAX_BIT_LENGTH = 2 ** 32 - 1

INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)

# Additive constants for rounds [0,20) [20,40) [40,60) [60,80)
ROUND_CONSTANTS = (0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xCA62C1D6)


def _rotl(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & MASK


def _pad(words: Sequence[int], bit_length: int) -> List[int]:
    """
    Build the padded message: 1 bit, zeros, 64-bit length.

    Returns a new list whose length is a multiple of 16.
    """
    n_used = (bit_length + 31) >> 5
    n_total = (((bit_length + 64) >> 9) << 4) + BLOCK_WORDS

    padded = [int(w) for w in words[:n_used]]
    padded.extend([0] * (n_total - len(padded)))

    index = bit_length >> 5
    offset = bit_length & 31
    if offset:
        # Clear bits past the end of the message
        padded[index] &= ~(MASK >> offset) & MASK
    padded[index] |= 0x80000000 >> offset

    # High word of the length field stays zero
    padded[n_total - 1] = bit_length

    return padded


def _compress(state: Sequence[int], chunk: Sequence[int]) -> List[int]:
    """
    Run the 80-round compression function on one 16-word chunk.

    Returns the updated working registers (not yet added to state).
    """
    w = list(chunk) + [0] * 64
    for j in range(16, 80):
        w[j] = _rotl(w[j - 3] ^ w[j - 8] ^ w[j - 14] ^ w[j - 16], 1)

    a, b, c, d, e = state

    for j in range(80):
        if j < 20:
            f = (b & c) | (~b & d)
            k = ROUND_CONSTANTS[0]
        elif j < 40:
            f = b ^ c ^ d
            k = ROUND_CONSTANTS[1]
        elif j < 60:
            f = (b & c) | (b & d) | (c & d)
            k = ROUND_CONSTANTS[2]
        else:
            f = b ^ c ^ d
            k = ROUND_CONSTANTS[3]

        t = (_rotl(a, 5) + f + e + k + w[j]) & MASK
        e = d
        d = c
        c = _rotl(b, 30)
        b = a
        a = t

    return [a, b, c, d, e]


def sha1_words(words: Union[np.ndarray, Sequence[int]], bit_length: int) -> np.ndarray:
    """
    Compute SHA-1 of the first bit_length bits of a word array.

    Args:
        words: Big-endian 32-bit words (not modified)
        bit_length: Number of meaningful bits, at most len(words) * 32

    Returns:
        Digest as a uint32 array of 5 words

    Raises:
        ValueError: If bit_length is negative or exceeds the word array
        MessageTooLongError: If bit_length >= 2**32
    """
    if bit_length < 0 or bit_length > len(words) * 32:
        raise ValueError(
            f"bit_length {bit_length} out of range for {len(words)} words"
        )
    if bit_length > MAX_BIT_LENGTH:
        raise MessageTooLongError(
            f"Message of {bit_length} bits exceeds the 32-bit length field",
            bit_length=bit_length
        )

    padded = _pad(words, bit_length)
    state = np.array(INITIAL_STATE, dtype=WORD_DTYPE)

    for i in range(0, len(padded), BLOCK_WORDS):
        registers = _compress(state.tolist(), padded[i:i + BLOCK_WORDS])
        # uint32 addition wraps modulo 2**32
        state = state + np.array(registers, dtype=WORD_DTYPE)

    return state


def sha1_digest(data: bytes) -> bytes:
    """
    Compute the 20-byte SHA-1 digest of a byte string.

    Example:
        >>> sha1_digest(b"abc").hex()
        'a9993e364706816aba3e25717850c26c9cd0d89d'
    """
    words, bit_length = bytes_to_words(data)
    return words_to_bytes(sha1_words(words, bit_length))
