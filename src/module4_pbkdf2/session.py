# file: src/module4_pbkdf2/session.py

"""
PBKDF2-HMAC-SHA1 (RFC 2898) as a resumable session.

A session owns the mutable derivation state and advances it a bounded
number of iterations at a time, so a scheduler can interleave it with
other work. Sessions are single-use.
"""

import logging
import struct
from dataclasses import dataclass, field
from typing import Optional

import numpy as np

from module1_word_codec import (
    WORD_DTYPE,
    BytesLike,
    bytes_to_hex,
    bytes_to_words,
    to_bytes,
    words_to_bytes,
)
from module2_sha1 import DIGEST_SIZE, DIGEST_WORDS
from module3_hmac import HmacSha1

from .errors import InvalidParameterError, SessionStateError

logger = logging.getLogger(__name__)


HASH_LENGTH = DIGEST_SIZE
MAX_BLOCKS = 2 ** 32 - 1
MAX_KEY_LENGTH = MAX_BLOCKS * HASH_LENGTH


@dataclass
class ChunkReport:
    """Outcome of one advance() call."""
    iterations_run: int
    percent_complete: float
    block_index: int
    block_complete: bool
    done: bool


@dataclass
class SessionState:
    """Mutable PBKDF2 state; owned by exactly one session."""
    total_iterations: int
    key_length: int
    total_blocks: int
    current_block: int = 1
    iterations_done: int = 0
    accumulator: np.ndarray = field(
        default_factory=lambda: np.zeros(DIGEST_WORDS, dtype=WORD_DTYPE)
    )
    previous: Optional[np.ndarray] = None
    key_hex: str = ""
    done: bool = False


def _require_positive_int(value, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameterError(
            f"{name} must be an integer, got {type(value).__name__}",
            parameter=name
        )
    if value <= 0:
        raise InvalidParameterError(f"{name} must be positive, got {value}", parameter=name)
    return value


def _require_bytes(value, name: str) -> bytes:
    try:
        return to_bytes(value)
    except TypeError as e:
        raise InvalidParameterError(f"{name}: {e}", parameter=name) from e


class Pbkdf2Session:
    """
    Incremental PBKDF2-HMAC-SHA1 derivation.

    Parameters:
        password: Password bytes (str is encoded as UTF-8)
        salt: Salt bytes (str is encoded as UTF-8)
        iteration_count: c, number of HMAC rounds per block
        key_length: dkLen, derived key length in bytes
        hex_uppercase: Render the key with A-F instead of a-f

    Invariants:
        - total_blocks = ceil(key_length / 20)
        - Only the final block is truncated
        - The accumulator is updated incrementally, never recomputed
    """

    def __init__(
        self,
        password: BytesLike,
        salt: BytesLike,
        iteration_count: int,
        key_length: int,
        hex_uppercase: bool = False
    ):
        password = _require_bytes(password, "password")
        self.salt = _require_bytes(salt, "salt")
        _require_positive_int(iteration_count, "iteration_count")
        _require_positive_int(key_length, "key_length")
        if key_length > MAX_KEY_LENGTH:
            raise InvalidParameterError(
                f"Derived key too long: {key_length} bytes (maximum {MAX_KEY_LENGTH})",
                parameter="key_length"
            )
        if not isinstance(hex_uppercase, bool):
            raise InvalidParameterError(
                f"hex_uppercase must be a boolean, got {type(hex_uppercase).__name__}",
                parameter="hex_uppercase"
            )

        self.hex_uppercase = hex_uppercase
        self.prf = HmacSha1(password)
        self.state = SessionState(
            total_iterations=iteration_count,
            key_length=key_length,
            total_blocks=(key_length + HASH_LENGTH - 1) // HASH_LENGTH,
        )

        logger.info(
            f"PBKDF2 session: {iteration_count} iterations, "
            f"{key_length}-byte key ({self.state.total_blocks} blocks)"
        )

    @property
    def done(self) -> bool:
        return self.state.done

    @property
    def key_hex(self) -> str:
        """The derived key in hex; available once the session is done."""
        if not self.state.done:
            raise SessionStateError("Derivation has not completed")
        return self.state.key_hex

    def percent_complete(self) -> float:
        state = self.state
        return 100 * (
            state.current_block - 1 + state.iterations_done / state.total_iterations
        ) / state.total_blocks

    def _first_round(self) -> np.ndarray:
        # U_1 = PRF(P, S || INT(i)), block index as 4 big-endian bytes
        message = self.salt + struct.pack(">I", self.state.current_block)
        words, bit_length = bytes_to_words(message)
        return self.prf.compute(words, bit_length)

    def advance(self, max_iterations: int) -> ChunkReport:
        """
        Run up to max_iterations HMAC rounds of the current block.

        When the block's last round completes, its contribution is
        appended to the key and the session moves to the next block,
        or finishes if it was the last one.

        Raises:
            SessionStateError: If the session is already done
            ValueError: If max_iterations is not positive
        """
        state = self.state
        if state.done:
            raise SessionStateError("PBKDF2 session is single-use and already done")
        if max_iterations <= 0:
            raise ValueError(f"max_iterations must be positive, got {max_iterations}")

        iterations = min(max_iterations, state.total_iterations - state.iterations_done)

        for _ in range(iterations):
            if state.iterations_done == 0:
                u = self._first_round()
            else:
                u = self.prf.compute(state.previous, DIGEST_WORDS * 32)

            state.accumulator ^= u
            state.previous = u
            state.iterations_done += 1

        block_index = state.current_block
        percent = self.percent_complete()
        block_complete = state.iterations_done == state.total_iterations

        if block_complete:
            self._finish_block()

        return ChunkReport(
            iterations_run=iterations,
            percent_complete=percent,
            block_index=block_index,
            block_complete=block_complete,
            done=state.done,
        )

    def _finish_block(self) -> None:
        state = self.state
        block = words_to_bytes(state.accumulator)

        if state.current_block == state.total_blocks:
            block = block[:state.key_length - (state.total_blocks - 1) * HASH_LENGTH]

        state.key_hex += bytes_to_hex(block, uppercase=self.hex_uppercase)
        logger.debug(f"Block {state.current_block}/{state.total_blocks} complete")

        if state.current_block == state.total_blocks:
            state.done = True
            state.previous = None
            logger.info("PBKDF2 derivation complete")
            return

        state.current_block += 1
        state.iterations_done = 0
        state.accumulator = np.zeros(DIGEST_WORDS, dtype=WORD_DTYPE)
        state.previous = None

    def run_to_completion(self) -> str:
        """Advance until done and return the hex key."""
        while not self.state.done:
            self.advance(self.state.total_iterations)
        return self.state.key_hex


def pbkdf2_hmac_sha1(
    password: BytesLike,
    salt: BytesLike,
    iteration_count: int,
    key_length: int
) -> bytes:
    """
    Derive a key with PBKDF2-HMAC-SHA1 in a single blocking call.

    Example:
        >>> pbkdf2_hmac_sha1(b"password", b"salt", 1, 20).hex()
        '0c60c80f961f0e71f3a9b524af6012062fe037a6'
    """
    session = Pbkdf2Session(password, salt, iteration_count, key_length)
    return bytes.fromhex(session.run_to_completion())
