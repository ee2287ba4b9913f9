# file: tests/test_wpa_psk.py

"""
Unit tests for Module 6: WPA Pre-Shared Key and CLI.

Test coverage:
    - IEEE 802.11i known answer
    - Passphrase and SSID validation
    - Command line derive/psk subcommands and error exits
"""

import hashlib

import pytest

from module4_pbkdf2 import DerivationOptions
from module6_wpa_psk import (
    derive_wpa_psk,
    validate_passphrase,
    validate_ssid,
    PskError,
    InvalidPassphraseError,
    InvalidSsidError,
)
from module6_wpa_psk.cli import main


IEEE_PSK = "f42c6fc52df0ebef9ebb4b90b38a5f902e83fe1b135a70e23aed762e9710a12e"


class TestDeriveWpaPsk:
    """Test PSK derivation."""

    def test_ieee_vector(self):
        """IEEE 802.11i Annex H.4 test vector."""
        assert derive_wpa_psk("IEEE", "password") == IEEE_PSK

    def test_matches_hashlib(self):
        """PSK equals PBKDF2-HMAC-SHA1(passphrase, ssid, 4096, 32)."""
        expected = hashlib.pbkdf2_hmac("sha1", b"ThisIsAPassword", b"ThisIsASSID", 4096, 32)
        assert derive_wpa_psk(b"ThisIsASSID", "ThisIsAPassword") == expected.hex()

    def test_progress_reported(self):
        """status_callback sees progress ending at 100."""
        percents = []
        options = DerivationOptions(chunk_size=1024)
        derive_wpa_psk("IEEE", "password", options=options, status_callback=percents.append)
        # 2 blocks x 4 chunks
        assert len(percents) == 8
        assert percents[-1] == 100


class TestValidation:
    """Test passphrase and SSID checks."""

    @pytest.mark.parametrize("passphrase", ["short", "x" * 64, ""])
    def test_passphrase_length(self, passphrase):
        """Passphrases must be 8..63 characters."""
        with pytest.raises(InvalidPassphraseError, match="8-63"):
            validate_passphrase(passphrase)

    def test_passphrase_non_ascii(self):
        """Non-printable or non-ASCII characters are rejected."""
        with pytest.raises(InvalidPassphraseError, match="printable ASCII"):
            validate_passphrase("pässwörd123")
        with pytest.raises(InvalidPassphraseError, match="printable ASCII"):
            validate_passphrase("pass\tword")

    def test_passphrase_bounds_accepted(self):
        """8 and 63 characters are valid."""
        assert validate_passphrase("a" * 8) == b"a" * 8
        assert validate_passphrase("b" * 63) == b"b" * 63

    @pytest.mark.parametrize("ssid", ["", "s" * 33, b""])
    def test_ssid_length(self, ssid):
        """SSIDs must be 1..32 bytes."""
        with pytest.raises(InvalidSsidError, match="1-32"):
            validate_ssid(ssid)

    def test_ssid_utf8(self):
        """str SSIDs are measured in UTF-8 bytes."""
        assert validate_ssid("café") == "café".encode("utf-8")
        with pytest.raises(InvalidSsidError):
            validate_ssid("é" * 17)

    def test_errors_share_base(self):
        """Validation errors derive from PskError."""
        with pytest.raises(PskError):
            derive_wpa_psk("IEEE", "short")


class TestCli:
    """Test the pbkdf2-sha1 command line tool."""

    def test_derive(self, capsys):
        """derive prints the hex key."""
        code = main([
            "--quiet", "derive",
            "--password", "password", "--salt", "salt",
            "--iterations", "2", "--key-length", "20",
        ])
        assert code == 0
        assert capsys.readouterr().out.strip() == "ea6c014dc72d6f8ccd1ed92ace1d41f0d8de8957"

    def test_derive_uppercase(self, capsys):
        """--uppercase switches hex case."""
        code = main([
            "--quiet", "--uppercase", "derive",
            "--password", "password", "--salt", "salt",
            "--iterations", "1", "--key-length", "20",
        ])
        assert code == 0
        assert capsys.readouterr().out.strip() == "0C60C80F961F0E71F3A9B524AF6012062FE037A6"

    def test_psk(self, capsys):
        """psk derives the WPA key."""
        code = main(["--quiet", "--chunk-size", "512", "psk", "--ssid", "IEEE", "--passphrase", "password"])
        assert code == 0
        assert capsys.readouterr().out.strip() == IEEE_PSK

    def test_psk_prompts_for_passphrase(self, capsys, monkeypatch):
        """Missing --passphrase is read with getpass."""
        monkeypatch.setattr("module6_wpa_psk.cli.getpass", lambda prompt: "password")
        code = main(["--quiet", "psk", "--ssid", "IEEE"])
        assert code == 0
        assert capsys.readouterr().out.strip() == IEEE_PSK

    def test_invalid_iterations(self, capsys):
        """Invalid parameters exit with status 1 and no key."""
        code = main([
            "--quiet", "derive",
            "--password", "p", "--salt", "s",
            "--iterations", "0", "--key-length", "20",
        ])
        assert code == 1
        assert capsys.readouterr().out == ""

    def test_invalid_passphrase(self, capsys):
        """Short passphrase exits with status 1."""
        assert main(["--quiet", "psk", "--ssid", "IEEE", "--passphrase", "short"]) == 1

    def test_invalid_chunk_size(self):
        """Non-positive chunk size is a configuration error."""
        assert main(["--quiet", "--chunk-size", "0", "psk", "--ssid", "IEEE", "--passphrase", "password"]) == 1

    def test_config_file(self, tmp_path, capsys):
        """Options are read from --config."""
        path = tmp_path / "config.yaml"
        path.write_text("pbkdf2:\n  chunk_size: 1\n  hex_uppercase: true\nlogging:\n  level: DEBUG\n")
        code = main([
            "--quiet", "--config", str(path), "derive",
            "--password", "password", "--salt", "salt",
            "--iterations", "1", "--key-length", "20",
        ])
        assert code == 0
        assert capsys.readouterr().out.strip() == "0C60C80F961F0E71F3A9B524AF6012062FE037A6"

    def test_missing_config_file(self, tmp_path):
        """A missing config file exits with status 1."""
        code = main([
            "--quiet", "--config", str(tmp_path / "nope.yaml"), "derive",
            "--password", "p", "--salt", "s", "--iterations", "1", "--key-length", "20",
        ])
        assert code == 1

    def test_malformed_config_file(self, tmp_path, capsys):
        """Unparseable YAML exits with status 1 instead of a traceback."""
        path = tmp_path / "bad.yaml"
        path.write_text("pbkdf2: [chunk_size: 4\n")
        code = main([
            "--quiet", "--config", str(path), "derive",
            "--password", "p", "--salt", "s", "--iterations", "1", "--key-length", "20",
        ])
        assert code == 1
        assert capsys.readouterr().out == ""

    def test_empty_logging_section(self, tmp_path, capsys):
        """A null logging section falls back to INFO."""
        path = tmp_path / "config.yaml"
        path.write_text("logging:\n")
        code = main([
            "--quiet", "--config", str(path), "derive",
            "--password", "password", "--salt", "salt",
            "--iterations", "1", "--key-length", "20",
        ])
        assert code == 0
        assert capsys.readouterr().out.strip() == "0c60c80f961f0e71f3a9b524af6012062fe037a6"

    def test_logging_section_not_mapping(self, tmp_path):
        """A scalar logging section is a configuration error."""
        path = tmp_path / "config.yaml"
        path.write_text("logging: verbose\n")
        code = main([
            "--quiet", "--config", str(path), "derive",
            "--password", "p", "--salt", "s", "--iterations", "1", "--key-length", "20",
        ])
        assert code == 1

    def test_packaged_default_config(self, tmp_path, monkeypatch, capsys):
        """Without --config the packaged default_config.yaml is read."""
        path = tmp_path / "default_config.yaml"
        path.write_text("pbkdf2:\n  hex_uppercase: true\n")
        monkeypatch.setattr("module4_pbkdf2.config.DEFAULT_CONFIG_PATH", path)
        code = main([
            "--quiet", "derive",
            "--password", "password", "--salt", "salt",
            "--iterations", "1", "--key-length", "20",
        ])
        assert code == 0
        assert capsys.readouterr().out.strip() == "0C60C80F961F0E71F3A9B524AF6012062FE037A6"
