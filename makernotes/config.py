# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Formatting configuration

Controls the generic rendering used when a descriptor has no specialised
handler for a tag, and the text-encoding detection applied to byte strings.

Configuration files use simple ``key=value`` lines; blank lines and lines
starting with ``#`` are ignored:

    # makernotes.cfg
    max_array_values=32
    float_places=2
    fallback_encodings=utf-8,cp1252

Copyright 2025 DNAi inc.
"""

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Tuple, Union
import codecs

from makernotes.exceptions import ConfigError


@dataclass(frozen=True)
class FormatConfig:
    """Options for generic value rendering and text decoding."""
    max_array_values: int = 16  # Longer arrays render as "[N values]"
    float_places: int = 3  # Maximum decimals shown for floats
    encoding_confidence: float = 0.5  # Minimum chardet confidence accepted
    fallback_encodings: Tuple[str, ...] = ('utf-8', 'latin-1')


_DEFAULT_CONFIG = FormatConfig()
_current_config = _DEFAULT_CONFIG


def get_config() -> FormatConfig:
    """Return the process-wide formatting configuration."""
    return _current_config


def set_config(config: FormatConfig = None) -> None:
    """
    Replace the process-wide formatting configuration.

    Call this before any directory is described; descriptors read the
    configuration on every call.

    Args:
        config: New configuration, or None to restore the defaults
    """
    global _current_config
    _current_config = config if config is not None else _DEFAULT_CONFIG


def _parse_option(key: str, raw: str):
    if key in ('max_array_values', 'float_places'):
        try:
            value = int(raw)
        except ValueError:
            raise ConfigError(f"Option '{key}' must be an integer, got '{raw}'")
        if value < 0:
            raise ConfigError(f"Option '{key}' must not be negative")
        return value
    if key == 'encoding_confidence':
        try:
            value = float(raw)
        except ValueError:
            raise ConfigError(f"Option '{key}' must be a number, got '{raw}'")
        if not 0.0 <= value <= 1.0:
            raise ConfigError(f"Option '{key}' must be between 0 and 1")
        return value
    # fallback_encodings
    encodings = tuple(part.strip() for part in raw.split(',') if part.strip())
    for encoding in encodings:
        try:
            codecs.lookup(encoding)
        except LookupError:
            raise ConfigError(f"Unknown encoding '{encoding}' in '{key}'")
    return encodings


def load_config(path: Union[str, Path], base: FormatConfig = None) -> FormatConfig:
    """
    Load a configuration file.

    Args:
        path: Path to a ``key=value`` configuration file
        base: Configuration providing values for options the file omits

    Returns:
        New FormatConfig

    Raises:
        ConfigError: If the file cannot be read, or holds an unknown
            option or an invalid value
    """
    config_file = Path(path)
    try:
        text = config_file.read_text(encoding='utf-8')
    except OSError as e:
        raise ConfigError(f"Cannot read config file {config_file}: {e}")

    known = {f.name for f in fields(FormatConfig)}
    options = {}
    for line_number, line in enumerate(text.splitlines(), start=1):
        line = line.strip()
        if not line or line.startswith('#'):
            continue
        if '=' not in line:
            raise ConfigError(f"{config_file}:{line_number}: expected key=value")
        key, value = line.split('=', 1)
        key = key.strip()
        if key not in known:
            raise ConfigError(f"{config_file}:{line_number}: unknown option '{key}'")
        options[key] = _parse_option(key, value.strip())

    return replace(base or _DEFAULT_CONFIG, **options)
