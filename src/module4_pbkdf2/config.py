# file: src/module4_pbkdf2/config.py

"""
Derivation options and YAML configuration loading.
"""

import copy
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .errors import ConfigurationError


DEFAULT_CHUNK_SIZE = 10

DEFAULT_CONFIG_PATH = Path(__file__).with_name("default_config.yaml")

DEFAULT_CONFIG: Dict[str, Any] = {
    'pbkdf2': {
        'chunk_size': DEFAULT_CHUNK_SIZE,
        'hex_uppercase': False,
    },
    'logging': {
        'level': 'INFO',
    },
}


@dataclass(frozen=True)
class DerivationOptions:
    """Scheduling granularity and hex output case for a derivation."""
    chunk_size: int = DEFAULT_CHUNK_SIZE
    hex_uppercase: bool = False

    def __post_init__(self):
        if isinstance(self.chunk_size, bool) or not isinstance(self.chunk_size, int):
            raise ConfigurationError(
                f"chunk_size must be an integer, got {type(self.chunk_size).__name__}"
            )
        if self.chunk_size <= 0:
            raise ConfigurationError(f"chunk_size must be positive, got {self.chunk_size}")
        if not isinstance(self.hex_uppercase, bool):
            raise ConfigurationError(
                f"hex_uppercase must be a boolean, got {type(self.hex_uppercase).__name__}"
            )

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]]) -> "DerivationOptions":
        """
        Build options from a configuration dictionary.

        Reads config['pbkdf2']['chunk_size'] and config['pbkdf2']['hex_uppercase'];
        missing keys fall back to the defaults.
        """
        section = (config or {}).get('pbkdf2') or {}
        if not isinstance(section, dict):
            raise ConfigurationError("'pbkdf2' config section must be a mapping")

        return cls(
            chunk_size=section.get('chunk_size', DEFAULT_CHUNK_SIZE),
            hex_uppercase=section.get('hex_uppercase', False),
        )


def load_config(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        path: Path to the YAML file

    Returns:
        Configuration dictionary

    Raises:
        FileNotFoundError: If the file doesn't exist
        ConfigurationError: If the YAML is malformed or not a mapping
    """
    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Malformed YAML in {config_path}: {e}") from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"Config root must be a mapping, got {type(config).__name__}"
        )

    return config


def load_default_config() -> Dict[str, Any]:
    """
    Load the default_config.yaml shipped beside this module.

    Falls back to the built-in DEFAULT_CONFIG if the file is absent.
    """
    if DEFAULT_CONFIG_PATH.exists():
        return load_config(DEFAULT_CONFIG_PATH)
    return copy.deepcopy(DEFAULT_CONFIG)
