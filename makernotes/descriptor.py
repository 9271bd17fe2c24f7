# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Tag descriptors

A TagDescriptor turns the raw values of one Directory into human-readable
descriptions. Vendor descriptors override only the tags that need
interpretation, through a class-level ``HANDLERS`` table mapping tag id to a
callable ``(descriptor, tag_id) -> Optional[str]``:

    class AppleMakernoteDescriptor(TagDescriptor):
        HANDLERS = {
            TAG_HDR_IMAGE_TYPE: indexed("HDR Image", "Original Image", base=3),
        }

Every other tag, and every handler that returns None, is rendered by the
generic fallback (``get_default_description``).

Most vendor handlers are enumerations: ``resolve_indexed_description`` maps
a small integer onto an ordered label list and reports out-of-range values
as None, never as an error.

Copyright 2025 DNAi inc.
"""

import logging
import math
import weakref
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Mapping, Optional, Sequence

from makernotes.config import get_config
from makernotes.value_formatter import decode_text, format_float, format_raw_value, is_array_value

if TYPE_CHECKING:
    from makernotes.directory import Directory

logger = logging.getLogger(__name__)

Handler = Callable[['TagDescriptor', int], Optional[str]]

# Characters removed by get_string_from_bytes (space and all control characters)
_TRIM_CHARS = ''.join(chr(i) for i in range(33))

# Encoding prefixes of EXIF UserComment-style fields
_TEXT_ENCODING_PREFIXES = (
    ('ASCII', None),
    ('UNICODE', 'utf-16-le'),
    ('JIS', 'shift_jis'),
)


def resolve_indexed_description(value: Optional[int], labels: Sequence[Optional[str]],
                                base: int = 0) -> Optional[str]:
    """
    Map an integer onto an ordered list of labels.

    Args:
        value: Raw integer value (None gives None)
        labels: Labels for ``base``, ``base + 1``, ...; a None entry marks an
            undocumented value
        base: Value corresponding to the first label

    Returns:
        ``labels[value - base]`` when in range, otherwise None. Negative
        offsets, offsets past the end and empty label lists are all
        "no match".
    """
    if value is None:
        return None
    index = value - base
    if 0 <= index < len(labels):
        return labels[index]
    return None


def indexed(*labels: Optional[str], base: int = 0) -> Handler:
    """
    Build a handler describing a tag by ``resolve_indexed_description``.

    Args:
        *labels: Labels in value order
        base: Value of the first label
    """
    def handler(descriptor: 'TagDescriptor', tag_id: int) -> Optional[str]:
        return descriptor.get_indexed_description(tag_id, *labels, base=base)
    return handler


def mapped(mapping: Mapping[int, str]) -> Handler:
    """
    Build a handler describing a tag by a sparse value-to-label map.
    """
    table = dict(mapping)

    def handler(descriptor: 'TagDescriptor', tag_id: int) -> Optional[str]:
        return descriptor.get_mapped_description(tag_id, table)
    return handler


def _format_half_up(value: float, places: int, trim: bool = False) -> str:
    quantum = Decimal(1).scaleb(-places)
    text = str(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))
    if trim and '.' in text:
        text = text.rstrip('0').rstrip('.')
    return text


class TagDescriptor:
    """
    Base class for all tag descriptors.

    A descriptor holds a weak reference to its directory and no other state,
    so the same directory contents always give the same descriptions. The
    directory owns its descriptor; a descriptor must not outlive it.
    """

    HANDLERS: Dict[int, Handler] = {}

    def __init__(self, directory: 'Directory'):
        self._directory_ref = weakref.ref(directory)

    @property
    def directory(self) -> 'Directory':
        directory = self._directory_ref()
        if directory is None:
            raise ReferenceError("The directory of this descriptor no longer exists")
        return directory

    @classmethod
    def supported_tag_ids(cls) -> List[int]:
        """Tag ids with a specialised handler, ascending."""
        return sorted(cls.HANDLERS)

    def get_description(self, tag_id: int) -> Optional[str]:
        """
        Describe the value stored for a tag.

        Args:
            tag_id: Tag id

        Returns:
            Human-readable description, or None if the tag is not set
        """
        directory = self.directory
        if not directory.contains_tag(tag_id):
            return None

        handler = self.HANDLERS.get(tag_id)
        if handler is not None:
            try:
                description = handler(self, tag_id)
            except (TypeError, ValueError, IndexError, ArithmeticError) as e:
                logger.debug("%s: handler for tag 0x%04x failed: %s", directory.name, tag_id, e)
                description = None
            if description is not None:
                return description
            logger.debug("%s: no specific description for tag 0x%04x, using raw value",
                         directory.name, tag_id)

        return self.get_default_description(tag_id)

    def get_default_description(self, tag_id: int) -> Optional[str]:
        """
        Generic rendering used when no handler applies.

        Arrays longer than the configured limit render as "[N values]";
        anything else uses the raw value formatting.
        """
        value = self.directory.get_object(tag_id)
        if value is None:
            return None
        config = get_config()
        if is_array_value(value) and len(value) > config.max_array_values:
            return f"[{len(value)} values]"
        return format_raw_value(value, config)

    # ------------------------------------------------------------------
    # Helpers shared by vendor descriptors
    # ------------------------------------------------------------------

    def get_indexed_description(self, tag_id: int, *labels: Optional[str],
                                base: int = 0) -> Optional[str]:
        """Describe an enumerated tag; None when the value has no label."""
        return resolve_indexed_description(self.directory.get_int(tag_id), labels, base)

    def get_mapped_description(self, tag_id: int, mapping: Mapping[int, str]) -> Optional[str]:
        """Describe a tag by a sparse value-to-label map."""
        value = self.directory.get_int(tag_id)
        if value is None:
            return None
        return mapping.get(value)

    def get_byte_length_description(self, tag_id: int) -> Optional[str]:
        """Describe binary data by its size, e.g. "(12 bytes)"."""
        data = self.directory.get_byte_array(tag_id)
        if data is None:
            return None
        return f"({len(data)} byte{'' if len(data) == 1 else 's'})"

    def get_simple_rational(self, tag_id: int) -> Optional[str]:
        value = self.directory.get_rational(tag_id)
        if value is None:
            return None
        return value.to_simple_string(True)

    def get_decimal_rational(self, tag_id: int, decimal_places: int) -> Optional[str]:
        value = self.directory.get_rational(tag_id)
        if value is None:
            return None
        return f"{value.to_float():.{decimal_places}f}"

    def get_formatted_int(self, tag_id: int, fmt: str) -> Optional[str]:
        """Format an int value with ``str.format`` (e.g. ``"{} mm"``)."""
        value = self.directory.get_int(tag_id)
        if value is None:
            return None
        return fmt.format(value)

    def get_formatted_float(self, tag_id: int, fmt: str) -> Optional[str]:
        value = self.directory.get_float(tag_id)
        if value is None:
            return None
        return fmt.format(value)

    def get_formatted_string(self, tag_id: int, fmt: str) -> Optional[str]:
        value = self.directory.get_string(tag_id)
        if value is None:
            return None
        return fmt.format(value)

    def get_version_bytes_description(self, tag_id: int, major_digits: int) -> Optional[str]:
        values = self.directory.get_int_array(tag_id)
        if values is None:
            return None
        return self.convert_bytes_to_version_string(values, major_digits)

    def get_epoch_time_description(self, tag_id: int) -> Optional[str]:
        """Describe a millisecond Unix timestamp in UTC."""
        value = self.directory.get_int(tag_id)
        if value is None:
            return None
        try:
            moment = datetime.fromtimestamp(value / 1000.0, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
        return moment.strftime('%a %b %d %H:%M:%S UTC %Y')

    def get_bit_flag_description(self, tag_id: int, *labels: Any) -> Optional[str]:
        """
        Describe a bit field, least significant bit first.

        Each label is None (bit ignored), a string (shown when the bit is
        set) or a ``(clear_label, set_label)`` pair.
        """
        value = self.directory.get_int(tag_id)
        if value is None:
            return None
        parts = []
        for label in labels:
            is_set = value & 1 == 1
            if isinstance(label, (tuple, list)):
                parts.append(label[1 if is_set else 0])
            elif is_set and isinstance(label, str):
                parts.append(label)
            value >>= 1
        return ', '.join(parts)

    def get_7bit_string_from_bytes(self, tag_id: int) -> Optional[str]:
        """Decode bytes up to the first NUL or non-ASCII byte."""
        data = self.directory.get_byte_array(tag_id)
        if data is None:
            return None
        length = len(data)
        for index, byte in enumerate(data):
            if byte == 0 or byte > 0x7F:
                length = index
                break
        return data[:length].decode('ascii')

    def get_string_from_bytes(self, tag_id: int, encoding: Optional[str] = None) -> Optional[str]:
        """Decode bytes as text and trim surrounding spaces and control characters."""
        data = self.directory.get_byte_array(tag_id)
        if data is None:
            return None
        return decode_text(data, encoding).strip(_TRIM_CHARS)

    def get_encoded_text_description(self, tag_id: int) -> Optional[str]:
        """
        Describe a text field carrying an 8-byte encoding prefix
        ("ASCII", "UNICODE", "JIS") as used by UserComment.
        """
        data = self.directory.get_byte_array(tag_id)
        if data is None:
            return None
        if not data:
            return ''
        if len(data) >= 10:
            head = data[:10].decode('latin-1')
            for prefix, encoding in _TEXT_ENCODING_PREFIXES:
                if head.startswith(prefix):
                    # Skip padding after the prefix, up to 10 bytes from the start
                    for start in range(len(prefix), 10):
                        if data[start] not in (0x00, 0x20):
                            return decode_text(data[start:], encoding).strip(_TRIM_CHARS)
                    return decode_text(data[10:], encoding).strip(_TRIM_CHARS)
        return decode_text(data).strip(_TRIM_CHARS)

    def get_rational_or_float_string(self, tag_id: int) -> Optional[str]:
        rational = self.directory.get_rational(tag_id)
        if rational is not None:
            return rational.to_simple_string(True)
        value = self.directory.get_float(tag_id)
        if value is not None:
            return format_float(value, 3)
        return None

    def get_lens_specification_description(self, tag_id: int) -> Optional[str]:
        """Describe a 4-rational lens specification, e.g. "24-70mm f/2.8"."""
        values = self.directory.get_rational_array(tag_id)
        if values is None or len(values) != 4 or (values[0].is_zero and values[2].is_zero):
            return None
        if values[0] == values[1]:
            text = f"{values[0].to_simple_string(True)}mm"
        else:
            text = f"{values[0].to_simple_string(True)}-{values[1].to_simple_string(True)}mm"
        if not values[2].is_zero:
            if values[2] == values[3]:
                text += ' ' + self.get_f_stop_description(values[2].to_float())
            else:
                text += (f" f/{_format_half_up(values[2].to_float(), 1)}"
                         f"-{_format_half_up(values[3].to_float(), 1)}")
        return text

    def get_orientation_description(self, tag_id: int) -> Optional[str]:
        return self.get_indexed_description(
            tag_id,
            "Top, left side (Horizontal / normal)",
            "Top, right side (Mirror horizontal)",
            "Bottom, right side (Rotate 180)",
            "Bottom, left side (Mirror vertical)",
            "Left side, top (Mirror horizontal and rotate 270 CW)",
            "Right side, top (Rotate 90 CW)",
            "Right side, bottom (Mirror horizontal and rotate 90 CW)",
            "Left side, bottom (Rotate 270 CW)",
            base=1,
        )

    def get_shutter_speed_description(self, tag_id: int) -> Optional[str]:
        """Describe an APEX shutter speed value, e.g. "1/250 sec"."""
        apex = self.directory.get_float(tag_id)
        if apex is None:
            return None
        if apex <= 1:
            apex_power = 1 / 2 ** apex
            rounded = math.floor(apex_power * 10.0 + 0.5) / 10.0
            return f"{_format_half_up(rounded, 2, trim=True)} sec"
        return f"1/{int(2 ** apex)} sec"

    # ------------------------------------------------------------------
    # Static formatting helpers
    # ------------------------------------------------------------------

    @staticmethod
    def convert_bytes_to_version_string(components: Optional[Sequence[int]],
                                        major_digits: int) -> Optional[str]:
        """
        Convert up to four version components to a version string.

        Both ASCII digits and raw numbers are accepted:
            [0x30, 0x32, 0x31, 0x30] -> "2.10"
            [0, 1, 0, 0] -> "1.00"

        Args:
            components: Version components
            major_digits: Number of components before the decimal point

        Returns:
            Version string, or None if components is None
        """
        if components is None:
            return None
        version = []
        for i, component in enumerate(components[:4]):
            if i == major_digits:
                version.append('.')
            c = chr(component)
            if c < '0':
                c = chr(component + ord('0'))
            if i == 0 and c == '0':
                continue
            version.append(c)
        return ''.join(version)

    @staticmethod
    def get_f_stop_description(f_stop: float) -> str:
        return f"f/{_format_half_up(f_stop, 1)}"

    @staticmethod
    def get_focal_length_description(mm: float) -> str:
        return f"{_format_half_up(mm, 1, trim=True)} mm"
