# file: src/module5_scheduler/pbkdf2.py

"""
PBKDF2 facade: construct with the derivation parameters, then
derive_key(status_callback, result_callback).
"""

from typing import Optional

from module1_word_codec import BytesLike
from module4_pbkdf2 import DerivationOptions, Pbkdf2Session, SessionStateError

from .incremental import IncrementalDerivation, ResultCallback, StatusCallback
from .schedulers import CooperativeScheduler, Scheduler


class PBKDF2:
    """
    Single-use PBKDF2-HMAC-SHA1 derivation with progress reporting.

    Parameters are validated at construction (InvalidParameterError).

    Example:
        >>> keys = []
        >>> _ = PBKDF2(b"password", b"salt", 2, 20).derive_key(lambda p: None, keys.append)
        >>> keys[0]
        'ea6c014dc72d6f8ccd1ed92ace1d41f0d8de8957'
    """

    def __init__(
        self,
        password: BytesLike,
        salt: BytesLike,
        iteration_count: int,
        key_length: int,
        options: Optional[DerivationOptions] = None
    ):
        self.options = options if options is not None else DerivationOptions()
        self.session = Pbkdf2Session(
            password,
            salt,
            iteration_count,
            key_length,
            hex_uppercase=self.options.hex_uppercase
        )
        self.derivation: Optional[IncrementalDerivation] = None

    def derive_key(
        self,
        status_callback: StatusCallback,
        result_callback: ResultCallback,
        scheduler: Optional[Scheduler] = None
    ) -> IncrementalDerivation:
        """
        Begin derivation.

        Without a scheduler, a private CooperativeScheduler is drained
        before returning, so both callbacks have fired on return. With
        an injected scheduler only the first chunk is queued.

        Returns:
            The IncrementalDerivation driving this session (for cancel())

        Raises:
            SessionStateError: If derive_key was already called
        """
        if self.derivation is not None:
            raise SessionStateError("derive_key already called; PBKDF2 instances are single-use")

        own_scheduler = scheduler is None
        if own_scheduler:
            scheduler = CooperativeScheduler()

        derivation = IncrementalDerivation(
            self.session,
            scheduler,
            chunk_size=self.options.chunk_size
        )
        self.derivation = derivation
        derivation.start(status_callback, result_callback)

        if own_scheduler:
            scheduler.run()

        return derivation
