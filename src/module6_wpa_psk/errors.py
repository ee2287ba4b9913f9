# file: src/module6_wpa_psk/errors.py

"""
WPA pre-shared key exception types.
"""


class PskError(Exception):
    """Base exception for WPA PSK derivation."""
    pass


class InvalidPassphraseError(PskError):
    """Raised when a passphrase is not 8..63 printable ASCII characters."""
    pass


class InvalidSsidError(PskError):
    """Raised when an SSID is empty or longer than 32 bytes."""
    pass
