#!/usr/bin/env python3
"""
pbkdf2-sha1 command line tool.

Subcommands:
    derive  PBKDF2-HMAC-SHA1 with explicit password, salt, iterations, key length
    psk     WPA/WPA2 pre-shared key from SSID and passphrase

The derived key is printed to stdout as hex; progress goes to stderr.
"""

import argparse
import logging
import sys
from dataclasses import replace
from getpass import getpass
from typing import List, Optional

from tqdm import tqdm

from module4_pbkdf2 import (
    ConfigurationError,
    DerivationOptions,
    Pbkdf2Error,
    load_config,
    load_default_config,
)
from module5_scheduler import PBKDF2

from .errors import PskError
from .psk import derive_wpa_psk

logger = logging.getLogger(__name__)


# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

def setup_logging(level: str = "INFO", quiet: bool = False):
    """Configure logging for the command line tool."""
    logging.basicConfig(
        level=logging.WARNING if quiet else getattr(logging, str(level).upper(), logging.INFO),
        format='%(asctime)s [%(levelname)s] %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


# =============================================================================
# ARGUMENTS
# =============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='pbkdf2-sha1',
        description='PBKDF2-HMAC-SHA1 key derivation (RFC 2898)'
    )
    parser.add_argument('--config', help='YAML configuration file (optional)')
    parser.add_argument('--chunk-size', type=int, help='Iterations per scheduled chunk')
    parser.add_argument('--uppercase', action='store_true', help='Print hex digits in uppercase')
    parser.add_argument('--quiet', action='store_true', help='No progress bar or info logging')

    subparsers = parser.add_subparsers(dest='command', required=True)

    derive = subparsers.add_parser('derive', help='Derive a key from password and salt')
    derive.add_argument('--password', required=True, help='Password (UTF-8)')
    derive.add_argument('--salt', required=True, help='Salt (UTF-8)')
    derive.add_argument('--iterations', type=int, required=True, help='Iteration count')
    derive.add_argument('--key-length', type=int, required=True, help='Derived key length in bytes')

    psk = subparsers.add_parser('psk', help='Derive a WPA/WPA2 pre-shared key')
    psk.add_argument('--ssid', required=True, help='Network SSID')
    psk.add_argument(
        '--passphrase',
        help='WPA passphrase (optional, will ask via stdin if not provided)'
    )

    return parser


def log_level(config: dict) -> str:
    """Level from the logging section; a missing or empty section means INFO."""
    section = config.get('logging') or {}
    if not isinstance(section, dict):
        raise ConfigurationError("'logging' config section must be a mapping")
    return section.get('level') or 'INFO'


def resolve_options(args: argparse.Namespace, config: dict) -> DerivationOptions:
    """Config file values, overridden by command line flags."""
    options = DerivationOptions.from_config(config)
    if args.chunk_size is not None:
        options = replace(options, chunk_size=args.chunk_size)
    if args.uppercase:
        options = replace(options, hex_uppercase=True)
    return options


# =============================================================================
# MAIN
# =============================================================================

def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config) if args.config else load_default_config()
        setup_logging(log_level(config), quiet=args.quiet)
        options = resolve_options(args, config)
    except (FileNotFoundError, Pbkdf2Error) as e:
        setup_logging(quiet=args.quiet)
        logger.error(f"Invalid configuration: {e}")
        return 1

    progress = tqdm(total=100, unit='%', disable=args.quiet, file=sys.stderr)

    def on_status(percent: float):
        progress.update(percent - progress.n)

    try:
        if args.command == 'derive':
            keys = []
            PBKDF2(
                args.password,
                args.salt,
                args.iterations,
                args.key_length,
                options=options
            ).derive_key(on_status, keys.append)
            key_hex = keys[0]
        else:
            passphrase = args.passphrase
            if passphrase is None:
                passphrase = getpass('Passphrase: ')
            key_hex = derive_wpa_psk(args.ssid, passphrase, options=options, status_callback=on_status)
    except (Pbkdf2Error, PskError) as e:
        logger.error(f"Derivation failed: {e}")
        return 1
    finally:
        progress.close()

    print(key_hex)
    return 0


if __name__ == '__main__':
    sys.exit(main())
