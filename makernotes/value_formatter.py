# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Value formatter for converting raw makernote values to strings.

This module provides the raw (un-interpreted) rendering shared by the tag
value store and the generic descriptor fallback, and the byte-string
decoding used for text tags.

Copyright 2025 DNAi inc.
"""

import logging
from typing import Any, Optional

import chardet

from makernotes.config import FormatConfig, get_config
from makernotes.rational import Rational

logger = logging.getLogger(__name__)


def unknown_tag_name(tag_id: int) -> str:
    """Fallback label for a tag id missing from its vendor schema."""
    return f"Unknown tag (0x{tag_id:04x})"


def is_array_value(value: Any) -> bool:
    """Return True for values rendered element by element."""
    return isinstance(value, (bytes, bytearray, list, tuple))


def format_float(value: float, places: Optional[int] = None) -> str:
    """
    Format a float with at most ``places`` decimals and no trailing zeros.

    Args:
        value: Number to format
        places: Maximum number of decimals (defaults to the configured value)

    Returns:
        Formatted string ("1.5", "2", "0.333"); negative zero renders as "0"
    """
    if places is None:
        places = get_config().float_places
    text = f"{value:.{places}f}"
    if '.' in text:
        text = text.rstrip('0').rstrip('.')
    if text == '-0':
        return '0'
    return text


def _format_element(value: Any, places: int) -> str:
    if isinstance(value, bool):
        return str(value)
    if isinstance(value, float):
        return format_float(value, places)
    return str(value)


def format_raw_value(value: Any, config: Optional[FormatConfig] = None) -> str:
    """
    Render a stored value without any tag-specific interpretation.

    Args:
        value: Raw value as held by a TagValueStore
        config: Formatting options (defaults to the process configuration)

    Returns:
        String form: integers as decimal text, byte arrays and other arrays
        as space-separated values, rationals in simple form, strings as-is
    """
    config = config or get_config()
    places = config.float_places

    if isinstance(value, Rational):
        return value.to_simple_string(True)
    if isinstance(value, (bytes, bytearray)):
        # Bytes are unsigned in Python already
        return ' '.join(str(b) for b in value)
    if isinstance(value, (list, tuple)):
        return ' '.join(_format_element(v, places) for v in value)
    if isinstance(value, float):
        return format_float(value, places)
    # Trailing whitespace written by some cameras is data; trimming is left
    # to the presentation layer.
    return str(value)


def decode_text(raw: bytes, encoding: Optional[str] = None,
                config: Optional[FormatConfig] = None) -> str:
    """
    Decode a byte string to text.

    A declared encoding is tried first. Otherwise the encoding is detected
    with chardet and accepted when its confidence exceeds the configured
    threshold; the configured fallback encodings are tried next, and UTF-8
    with replacement characters is the last resort.

    Args:
        raw: Bytes to decode
        encoding: Declared encoding, if known
        config: Formatting options (defaults to the process configuration)

    Returns:
        Decoded text (never raises)
    """
    config = config or get_config()
    data = bytes(raw)

    if encoding:
        try:
            return data.decode(encoding)
        except (UnicodeDecodeError, LookupError):
            logger.debug("Declared encoding %s failed for %d bytes, detecting", encoding, len(data))

    if data:
        detected = chardet.detect(data)
        detected_encoding = detected.get('encoding')
        confidence = detected.get('confidence') or 0.0
        if detected_encoding and confidence > config.encoding_confidence:
            try:
                return data.decode(detected_encoding)
            except (UnicodeDecodeError, LookupError):
                logger.debug("Detected encoding %s failed to decode", detected_encoding)

    for fallback in config.fallback_encodings:
        try:
            return data.decode(fallback)
        except (UnicodeDecodeError, LookupError):
            continue

    return data.decode('utf-8', errors='replace')
