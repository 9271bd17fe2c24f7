"""
Unit tests for TagDescriptor and the indexed description resolver.
"""

import gc

import pytest

from makernotes.config import FormatConfig, set_config
from makernotes.descriptor import TagDescriptor, indexed, mapped, resolve_indexed_description
from makernotes.directory import Directory
from makernotes.makernote_apple import AppleMakernoteDirectory, TAG_HDR_IMAGE_TYPE
from makernotes.makernote_casio import CasioType1MakernoteDirectory, TAG_SHARPNESS
from makernotes.rational import Rational
from makernotes.tag_schema import TagSchema

HDR_LABELS = ["HDR Image", "Original Image"]


class TestResolveIndexedDescription:
    """Tests for resolve_indexed_description."""

    def test_in_range(self):
        assert resolve_indexed_description(0, HDR_LABELS) == "HDR Image"
        assert resolve_indexed_description(1, HDR_LABELS) == "Original Image"

    def test_out_of_range(self):
        assert resolve_indexed_description(2, HDR_LABELS) is None
        assert resolve_indexed_description(-1, HDR_LABELS) is None

    def test_empty_labels(self):
        assert resolve_indexed_description(0, []) is None

    def test_base_offset(self):
        assert resolve_indexed_description(3, HDR_LABELS, base=3) == "HDR Image"
        assert resolve_indexed_description(2, HDR_LABELS, base=3) is None

    def test_none_label_is_no_match(self):
        assert resolve_indexed_description(1, ["A", None, "C"]) is None

    def test_none_value(self):
        assert resolve_indexed_description(None, HDR_LABELS) is None


class _ExampleDescriptor(TagDescriptor):

    def _broken(self, tag_id):
        raise ValueError("bad value")

    def _decline(self, tag_id):
        return None

    HANDLERS = {
        0x01: indexed("HDR Image", "Original Image"),
        0x02: mapped({10: "Ten"}),
        0x03: _broken,
        0x04: _decline,
    }


class _ExampleDirectory(Directory):
    SCHEMA = TagSchema("Example", {0x01: "Mode"})
    DESCRIPTOR_CLASS = _ExampleDescriptor


class TestDispatch:
    """Tests for get_description dispatch and fallback."""

    def test_indexed_handler(self):
        directory = _ExampleDirectory()
        directory.set(0x01, 1)
        assert directory.get_description(0x01) == "Original Image"

    def test_indexed_miss_falls_back_to_number(self):
        directory = _ExampleDirectory()
        directory.set(0x01, 2)
        assert directory.get_description(0x01) == "2"
        directory.set(0x01, -1)
        assert directory.get_description(0x01) == "-1"

    def test_mapped_handler(self):
        directory = _ExampleDirectory()
        directory.set(0x02, 10)
        assert directory.get_description(0x02) == "Ten"
        directory.set(0x02, 11)
        assert directory.get_description(0x02) == "11"

    def test_failing_handler_falls_back(self):
        directory = _ExampleDirectory()
        directory.set(0x03, 5)
        assert directory.get_description(0x03) == "5"
        assert not directory.has_errors()

    def test_declining_handler_falls_back(self):
        directory = _ExampleDirectory()
        directory.set(0x04, "raw")
        assert directory.get_description(0x04) == "raw"

    def test_absent_tag(self):
        directory = _ExampleDirectory()
        assert directory.get_description(0x01) is None

    def test_idempotent(self):
        directory = _ExampleDirectory()
        directory.set(0x01, 0)
        assert directory.get_description(0x01) == directory.get_description(0x01)

    def test_supported_tag_ids(self):
        assert _ExampleDescriptor.supported_tag_ids() == [1, 2, 3, 4]
        assert TagDescriptor.supported_tag_ids() == []


class TestDefaultDescription:
    """Tests for the generic rendering."""

    def test_scalars(self, sample_directory):
        sample_directory.set(1, 1.25)
        sample_directory.set(2, -0.0001)
        assert sample_directory.get_description(1) == "1.25"
        assert sample_directory.get_description(2) == "0"

    def test_rational(self, sample_directory):
        sample_directory.set(1, Rational(1, 250))
        assert sample_directory.get_description(1) == "1/250"

    def test_short_array(self, sample_directory):
        sample_directory.set(1, [1, 2, 3])
        sample_directory.set(2, bytes([0, 128, 255]))
        assert sample_directory.get_description(1) == "1 2 3"
        assert sample_directory.get_description(2) == "0 128 255"

    def test_long_array(self, sample_directory):
        sample_directory.set(1, list(range(17)))
        sample_directory.set(2, list(range(16)))
        assert sample_directory.get_description(1) == "[17 values]"
        assert sample_directory.get_description(2).startswith("0 1 2")

    def test_configured_array_limit(self, sample_directory):
        set_config(FormatConfig(max_array_values=2))
        sample_directory.set(1, [1, 2, 3])
        assert sample_directory.get_description(1) == "[3 values]"


class TestAppleScenario:
    """HDR image type uses labels starting at 3."""

    def test_hdr_image_type(self):
        directory = AppleMakernoteDirectory()
        directory.set(TAG_HDR_IMAGE_TYPE, 3)
        assert directory.get_description(TAG_HDR_IMAGE_TYPE) == "HDR Image"
        directory.set(TAG_HDR_IMAGE_TYPE, 4)
        assert directory.get_description(TAG_HDR_IMAGE_TYPE) == "Original Image"
        directory.set(TAG_HDR_IMAGE_TYPE, 2)
        assert directory.get_description(TAG_HDR_IMAGE_TYPE) == "2"


class TestHelpers:
    """Tests for the shared helper methods."""

    def test_byte_length(self, sample_directory):
        sample_directory.set(1, b"\x00" * 12)
        assert sample_directory.descriptor.get_byte_length_description(1) == "(12 bytes)"
        assert sample_directory.descriptor.get_byte_length_description(2) is None

    def test_decimal_rational(self, sample_directory):
        sample_directory.set(1, Rational(3, 2))
        assert sample_directory.descriptor.get_decimal_rational(1, 3) == "1.500"

    def test_simple_rational(self, sample_directory):
        sample_directory.set(1, Rational(10, 20))
        sample_directory.set(2, "text")
        assert sample_directory.descriptor.get_simple_rational(1) == "0.5"
        assert sample_directory.descriptor.get_simple_rational(2) is None

    def test_formatted(self, sample_directory):
        sample_directory.set(1, 35)
        assert sample_directory.descriptor.get_formatted_int(1, "{} mm") == "35 mm"
        assert sample_directory.descriptor.get_formatted_string(1, "<{}>") == "<35>"
        assert sample_directory.descriptor.get_formatted_float(1, "{:.1f}x") == "35.0x"
        assert sample_directory.descriptor.get_formatted_float(2, "{}") is None

    def test_bit_flags(self, sample_directory):
        sample_directory.set(1, 0b101)
        description = sample_directory.descriptor.get_bit_flag_description(
            1, ("No Flash", "Flash"), "Second", "Third")
        assert description == "Flash, Third"

    def test_7bit_string(self, sample_directory):
        sample_directory.set(1, b"ABC\x00DEF")
        assert sample_directory.descriptor.get_7bit_string_from_bytes(1) == "ABC"

    def test_string_from_bytes_trims(self, sample_directory):
        sample_directory.set(1, b"  Leica \x00\x00")
        assert sample_directory.descriptor.get_string_from_bytes(1, "ascii") == "Leica"

    def test_encoded_text(self, sample_directory):
        sample_directory.set(1, b"ASCII\x00\x00\x00Hello")
        sample_directory.set(2, b"UNICODE\x00" + "Hi".encode("utf-16-le"))
        assert sample_directory.descriptor.get_encoded_text_description(1) == "Hello"
        assert sample_directory.descriptor.get_encoded_text_description(2) == "Hi"

    def test_version_bytes(self, sample_directory):
        sample_directory.set(1, b"0210")
        sample_directory.set(2, [0, 1, 0, 0])
        assert sample_directory.descriptor.get_version_bytes_description(1, 2) == "2.10"
        assert sample_directory.descriptor.get_version_bytes_description(2, 2) == "1.00"

    def test_epoch_time(self, sample_directory):
        sample_directory.set(1, 0)
        assert sample_directory.descriptor.get_epoch_time_description(1) == "Thu Jan 01 00:00:00 UTC 1970"

    def test_rational_or_float(self, sample_directory):
        sample_directory.set(1, Rational(5, 1))
        sample_directory.set(2, 2.54321)
        assert sample_directory.descriptor.get_rational_or_float_string(1) == "5"
        assert sample_directory.descriptor.get_rational_or_float_string(2) == "2.543"

    def test_lens_specification(self, sample_directory):
        sample_directory.set(1, [Rational(24, 1), Rational(70, 1), Rational(28, 10), Rational(28, 10)])
        sample_directory.set(2, [Rational(50, 1), Rational(50, 1), Rational(0, 1), Rational(0, 1)])
        sample_directory.set(3, [Rational(0, 1)] * 4)
        descriptor = sample_directory.descriptor
        assert descriptor.get_lens_specification_description(1) == "24-70mm f/2.8"
        assert descriptor.get_lens_specification_description(2) == "50mm"
        assert descriptor.get_lens_specification_description(3) is None

    def test_orientation(self, sample_directory):
        sample_directory.set(1, 6)
        assert sample_directory.descriptor.get_orientation_description(1) == "Right side, top (Rotate 90 CW)"

    def test_shutter_speed(self, sample_directory):
        sample_directory.set(1, 8.0)
        sample_directory.set(2, 1.0)
        assert sample_directory.descriptor.get_shutter_speed_description(1) == "1/256 sec"
        assert sample_directory.descriptor.get_shutter_speed_description(2) == "0.5 sec"

    def test_static_formatters(self):
        assert TagDescriptor.get_f_stop_description(2.85) == "f/2.9"
        assert TagDescriptor.get_focal_length_description(35.0) == "35 mm"
        assert TagDescriptor.get_focal_length_description(4.65) == "4.7 mm"
        assert TagDescriptor.convert_bytes_to_version_string(None, 2) is None


class TestDirectoryReference:
    """The descriptor must not keep its directory alive."""

    def test_weak_reference(self):
        directory = AppleMakernoteDirectory()
        descriptor = directory.descriptor
        del directory
        gc.collect()
        with pytest.raises(ReferenceError):
            descriptor.directory


class TestTextInNumericTags:
    """Strings that are not numbers never match an enumeration."""

    def test_indexed_tag_holding_text(self):
        directory = AppleMakernoteDirectory()
        directory.set(TAG_HDR_IMAGE_TYPE, "\x03")
        assert directory.get_description(TAG_HDR_IMAGE_TYPE) == "\x03"

    def test_empty_text_is_not_index_zero(self):
        directory = CasioType1MakernoteDirectory()
        directory.set(TAG_SHARPNESS, "")
        assert directory.get_description(TAG_SHARPNESS) == ""

    def test_numeric_text_still_matches(self):
        directory = CasioType1MakernoteDirectory()
        directory.set(TAG_SHARPNESS, "2")
        assert directory.get_description(TAG_SHARPNESS) == "Hard"
