# file: src/module6_wpa_psk/__init__.py

"""
Module 6: WPA Pre-Shared Key

Derives WPA/WPA2-Personal keys from an SSID and passphrase, plus the
pbkdf2-sha1 command line tool.
"""

from .psk import (
    derive_wpa_psk,
    validate_passphrase,
    validate_ssid,
    WPA_ITERATIONS,
    WPA_KEY_LENGTH,
)
from .errors import PskError, InvalidPassphraseError, InvalidSsidError

__all__ = [
    "derive_wpa_psk",
    "validate_passphrase",
    "validate_ssid",
    "WPA_ITERATIONS",
    "WPA_KEY_LENGTH",
    "PskError",
    "InvalidPassphraseError",
    "InvalidSsidError",
]

__version__ = "1.0.0"
