# file: src/module2_sha1/errors.py

"""
SHA-1 exception types.
"""


class Sha1Error(Exception):
    """Base exception for SHA-1 core errors."""
    pass


class MessageTooLongError(Sha1Error):
    """Raised when a message bit length does not fit the 32-bit length field."""

    def __init__(self, message: str, bit_length: int = None):
        super().__init__(message)
        self.bit_length = bit_length
