# file: src/module6_wpa_psk/psk.py

"""
WPA/WPA2-Personal pre-shared key derivation (IEEE 802.11i, Annex H.4).

PSK = PBKDF2-HMAC-SHA1(passphrase, SSID, 4096, 32)
"""

from typing import Callable, Optional, Union

from module4_pbkdf2 import DerivationOptions
from module5_scheduler import PBKDF2

from .errors import InvalidPassphraseError, InvalidSsidError


WPA_ITERATIONS = 4096
WPA_KEY_LENGTH = 32

MIN_PASSPHRASE_LENGTH = 8
MAX_PASSPHRASE_LENGTH = 63
MAX_SSID_LENGTH = 32


def validate_passphrase(passphrase: str) -> bytes:
    """
    Check a WPA passphrase and return it as bytes.

    Raises:
        InvalidPassphraseError: If not 8..63 printable ASCII characters
    """
    if not isinstance(passphrase, str):
        raise InvalidPassphraseError(f"Passphrase must be str, got {type(passphrase).__name__}")
    if not MIN_PASSPHRASE_LENGTH <= len(passphrase) <= MAX_PASSPHRASE_LENGTH:
        raise InvalidPassphraseError(
            f"Passphrase must be {MIN_PASSPHRASE_LENGTH}-{MAX_PASSPHRASE_LENGTH} "
            f"characters, got {len(passphrase)}"
        )
    if any(not 32 <= ord(ch) <= 126 for ch in passphrase):
        raise InvalidPassphraseError("Passphrase must contain only printable ASCII characters")

    return passphrase.encode("ascii")


def validate_ssid(ssid: Union[str, bytes]) -> bytes:
    """
    Check an SSID and return it as bytes (str is encoded as UTF-8).

    Raises:
        InvalidSsidError: If empty or longer than 32 bytes
    """
    if isinstance(ssid, str):
        ssid = ssid.encode("utf-8")
    if not isinstance(ssid, bytes):
        raise InvalidSsidError(f"SSID must be str or bytes, got {type(ssid).__name__}")
    if not 1 <= len(ssid) <= MAX_SSID_LENGTH:
        raise InvalidSsidError(f"SSID must be 1-{MAX_SSID_LENGTH} bytes, got {len(ssid)}")

    return ssid


def derive_wpa_psk(
    ssid: Union[str, bytes],
    passphrase: str,
    options: Optional[DerivationOptions] = None,
    status_callback: Optional[Callable[[float], None]] = None
) -> str:
    """
    Derive the 256-bit WPA PSK for a network.

    Args:
        ssid: Network name (salt)
        passphrase: 8..63 character ASCII passphrase (password)
        options: Chunk size and hex case (defaults if None)
        status_callback: Optional progress callback, percent in [0, 100]

    Returns:
        64-digit hex PSK

    Example:
        >>> derive_wpa_psk("IEEE", "password")
        'f42c6fc52df0ebef9ebb4b90b38a5f902e83fe1b135a70e23aed762e9710a12e'
    """
    salt = validate_ssid(ssid)
    password = validate_passphrase(passphrase)

    keys = []
    PBKDF2(password, salt, WPA_ITERATIONS, WPA_KEY_LENGTH, options=options).derive_key(
        status_callback if status_callback is not None else (lambda percent: None),
        keys.append
    )

    return keys[0]
