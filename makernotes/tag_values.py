# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Raw tag value storage

A TagValueStore maps integer tag ids to the values decoded from a makernote
block, in the order they were first stored. It knows nothing about vendors
or tag names; the typed accessors coerce a stored value to the requested
shape when possible and return None otherwise.

Copyright 2025 DNAi inc.
"""

from typing import Any, Dict, Iterator, List, Optional, Tuple

from makernotes.exceptions import TagValueError
from makernotes.rational import Rational
from makernotes.value_formatter import decode_text, format_raw_value


class StringValue:
    """
    Undecoded string bytes with an optional declared encoding.

    The reader stores these when a field's encoding is only known from
    context; ``str()`` decodes with the declared encoding, falling back to
    detection.
    """

    __slots__ = ('raw', 'encoding')

    def __init__(self, raw: bytes, encoding: Optional[str] = None):
        self.raw = bytes(raw)
        self.encoding = encoding

    def decode(self, encoding: Optional[str] = None) -> str:
        """Decode with ``encoding``, else the declared encoding, else detection."""
        return decode_text(self.raw, encoding or self.encoding)

    def __str__(self) -> str:
        return self.decode()

    def __len__(self) -> int:
        return len(self.raw)

    def __eq__(self, other):
        if not isinstance(other, StringValue):
            return NotImplemented
        return self.raw == other.raw and self.encoding == other.encoding

    def __hash__(self):
        return hash((self.raw, self.encoding))

    def __repr__(self) -> str:
        return f"StringValue({self.raw!r}, {self.encoding!r})"


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Rational))


def _number_to_int(value: Any) -> int:
    if isinstance(value, Rational):
        return value.to_int()
    return int(value)


class TagValueStore:
    """
    Ordered mapping from tag id to raw decoded value.

    Re-setting a tag id overwrites its value in place; ids are never
    duplicated. The store is written by a single decode pass and treated as
    read-only afterwards.
    """

    def __init__(self):
        self._values: Dict[int, Any] = {}

    # ------------------------------------------------------------------
    # Mapping operations
    # ------------------------------------------------------------------

    def set(self, tag_id: int, value: Any) -> None:
        """
        Store a value, replacing any previous value for the tag.

        Args:
            tag_id: Integer tag id
            value: Decoded value (int, float, str, bytes, Rational,
                StringValue, or a list/tuple of these)

        Raises:
            ValueError: If value is None
        """
        if value is None:
            raise ValueError(f"Cannot store None for tag 0x{tag_id:04x}")
        self._values[tag_id] = value

    def get(self, tag_id: int) -> Optional[Any]:
        """Return the stored value, or None when the tag is not set."""
        return self._values.get(tag_id)

    def contains(self, tag_id: int) -> bool:
        return tag_id in self._values

    def __contains__(self, tag_id: int) -> bool:
        return tag_id in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[int]:
        return iter(self._values)

    def tag_ids(self) -> List[int]:
        """Tag ids in insertion order."""
        return list(self._values)

    def items(self) -> List[Tuple[int, Any]]:
        return list(self._values.items())

    # ------------------------------------------------------------------
    # Typed accessors (None when absent or not convertible)
    # ------------------------------------------------------------------

    def get_int(self, tag_id: int) -> Optional[int]:
        """
        Return the value as an int, if possible.

        Conversions:
            - int: unchanged (bool gives 0/1)
            - float, Rational: truncated
            - str: parsed as an integer (None if it does not parse)
            - single-element list/tuple/bytes: the element

        Returns:
            Integer value, or None if unset or not convertible
        """
        value = self._values.get(tag_id)
        if value is None:
            return None
        if isinstance(value, int):
            return int(value)
        if isinstance(value, float):
            if value != value or value in (float('inf'), float('-inf')):
                return None
            return int(value)
        if isinstance(value, Rational):
            return value.to_int()
        if isinstance(value, (str, StringValue)):
            text = str(value)
            try:
                return int(text)
            except ValueError:
                return None
        if isinstance(value, (bytes, bytearray)):
            return value[0] if len(value) == 1 else None
        if isinstance(value, (list, tuple)):
            if len(value) == 1 and _is_number(value[0]):
                return _number_to_int(value[0])
        return None

    def get_float(self, tag_id: int) -> Optional[float]:
        """Return the value as a float (numbers, rationals, numeric strings)."""
        value = self._values.get(tag_id)
        if value is None:
            return None
        if isinstance(value, Rational):
            return value.to_float()
        if isinstance(value, (int, float)):
            return float(value)
        if isinstance(value, (str, StringValue)):
            try:
                return float(str(value))
            except ValueError:
                return None
        return None

    def get_bool(self, tag_id: int) -> Optional[bool]:
        """Return the value as a bool (numbers compare with zero)."""
        value = self._values.get(tag_id)
        if value is None:
            return None
        if isinstance(value, bool):
            return value
        if isinstance(value, Rational):
            return not value.is_zero
        if isinstance(value, (int, float)):
            return value != 0
        if isinstance(value, (str, StringValue)):
            text = str(value).strip().lower()
            if text == 'true':
                return True
            if text == 'false':
                return False
        return None

    def get_rational(self, tag_id: int) -> Optional[Rational]:
        """Return the value as a Rational; integers become n/1."""
        value = self._values.get(tag_id)
        if isinstance(value, Rational):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return Rational(value, 1)
        return None

    def get_rational_array(self, tag_id: int) -> Optional[List[Rational]]:
        value = self._values.get(tag_id)
        if isinstance(value, (list, tuple)) and all(isinstance(v, Rational) for v in value):
            return list(value)
        return None

    def get_int_array(self, tag_id: int) -> Optional[List[int]]:
        """
        Return the value as a list of ints.

        Supported for numeric lists (rationals truncated), bytes, strings
        (code points) and single integers.
        """
        value = self._values.get(tag_id)
        if value is None:
            return None
        if isinstance(value, (bytes, bytearray)):
            return list(value)
        if isinstance(value, (list, tuple)):
            if all(_is_number(v) for v in value):
                return [_number_to_int(v) for v in value]
            return None
        if isinstance(value, (str, StringValue)):
            return [ord(c) for c in str(value)]
        if isinstance(value, int):
            return [int(value)]
        return None

    def get_byte_array(self, tag_id: int) -> Optional[bytes]:
        """
        Return the value as bytes.

        Integers are masked to 0..255; strings are UTF-8 encoded and
        StringValue yields its undecoded bytes.
        """
        value = self._values.get(tag_id)
        if value is None:
            return None
        if isinstance(value, (bytes, bytearray)):
            return bytes(value)
        if isinstance(value, StringValue):
            return value.raw
        if isinstance(value, (list, tuple)):
            if all(_is_number(v) for v in value):
                return bytes(_number_to_int(v) & 0xFF for v in value)
            return None
        if isinstance(value, str):
            return value.encode('utf-8')
        if isinstance(value, int):
            return bytes([value & 0xFF])
        return None

    def get_string_array(self, tag_id: int) -> Optional[List[str]]:
        value = self._values.get(tag_id)
        if value is None:
            return None
        if isinstance(value, (str, StringValue)):
            return [str(value)]
        if isinstance(value, (list, tuple)):
            return [v.to_simple_string(False) if isinstance(v, Rational) else str(v) for v in value]
        return None

    def get_string(self, tag_id: int) -> Optional[str]:
        """
        Return the raw string rendering of the value.

        This is the un-interpreted value; a descriptor provides the
        presentable form.
        """
        value = self._values.get(tag_id)
        if value is None:
            return None
        return format_raw_value(value)

    def get_text(self, tag_id: int, encoding: Optional[str] = None) -> Optional[str]:
        """
        Decode a byte-valued tag as text.

        Args:
            tag_id: Tag id
            encoding: Encoding to use; detected with chardet when omitted

        Returns:
            Decoded text, the string itself for str values, or None
        """
        value = self._values.get(tag_id)
        if value is None:
            return None
        if isinstance(value, str):
            return value
        if isinstance(value, StringValue):
            return value.decode(encoding)
        if isinstance(value, (bytes, bytearray)):
            return decode_text(value, encoding)
        if isinstance(value, (list, tuple)) and all(isinstance(v, int) and 0 <= v <= 255 for v in value):
            return decode_text(bytes(value), encoding)
        return None

    # ------------------------------------------------------------------
    # Strict accessors
    # ------------------------------------------------------------------

    def require_int(self, tag_id: int) -> int:
        """
        Return the value as an int.

        Raises:
            TagValueError: If the tag is unset or not convertible
        """
        result = self.get_int(tag_id)
        if result is not None:
            return result
        self._raise_unconvertible(tag_id, 'an int')

    def require_float(self, tag_id: int) -> float:
        """
        Return the value as a float.

        Raises:
            TagValueError: If the tag is unset or not convertible
        """
        result = self.get_float(tag_id)
        if result is not None:
            return result
        self._raise_unconvertible(tag_id, 'a float')

    def _raise_unconvertible(self, tag_id: int, target: str) -> None:
        value = self._values.get(tag_id)
        if value is None:
            raise TagValueError(f"Tag 0x{tag_id:04x} has not been set")
        raise TagValueError(
            f"Tag 0x{tag_id:04x} cannot be converted to {target}; "
            f"it is of type '{type(value).__name__}'"
        )
