# file: src/module4_pbkdf2/errors.py

"""
PBKDF2 exception hierarchy.

All exceptions inherit from Pbkdf2Error for unified handling.
"""


class Pbkdf2Error(Exception):
    """Base exception for PBKDF2 derivation errors."""
    pass


class InvalidParameterError(Pbkdf2Error):
    """Raised at construction when a derivation parameter is out of contract."""

    def __init__(self, message: str, parameter: str = None):
        super().__init__(message)
        self.parameter = parameter


class SessionStateError(Pbkdf2Error):
    """Raised when a single-use session is advanced or started again."""
    pass


class ConfigurationError(Pbkdf2Error):
    """Raised when derivation configuration is invalid."""
    pass
