"""
Unit tests for the built-in vendor schemas and descriptors.
"""

import pytest

from makernotes import makernote_casio as casio
from makernotes import makernote_leica as leica
from makernotes import makernote_pentax as pentax
from makernotes import makernote_ricoh as ricoh
from makernotes import makernote_sanyo as sanyo
from makernotes import makernote_sigma as sigma
from makernotes.rational import Rational


class TestPentax:
    """Tests for the Pentax makernote."""

    def test_names(self):
        directory = pentax.PentaxMakernoteDirectory()
        assert directory.name == "Pentax Makernote"
        assert directory.get_tag_name(pentax.TAG_COLOUR) == "Colour"
        assert directory.get_tag_name(pentax.TAG_DAYLIGHT_SAVINGS) == "Daylight Savings"

    @pytest.mark.parametrize("tag_id, value, expected", [
        (pentax.TAG_CAPTURE_MODE, 1, "Night-scene"),
        (pentax.TAG_CAPTURE_MODE, 3, "3"),
        (pentax.TAG_FOCUS_MODE, 3, "Auto"),
        (pentax.TAG_FLASH_MODE, 6, "Red-eye Reduction"),
        (pentax.TAG_FLASH_MODE, 3, "3"),
        (pentax.TAG_ISO_SPEED, 16, "ISO 200"),
        (pentax.TAG_ISO_SPEED, 400, "400"),
        (pentax.TAG_COLOUR, 3, "Sepia"),
        (pentax.TAG_DIGITAL_ZOOM, 0, "Off"),
        (pentax.TAG_DIGITAL_ZOOM, 1.5, "1.5"),
    ])
    def test_descriptions(self, tag_id, value, expected):
        directory = pentax.PentaxMakernoteDirectory()
        directory.set(tag_id, value)
        assert directory.get_description(tag_id) == expected


class TestCasio:
    """Tests for the Casio type 1 makernote."""

    @pytest.mark.parametrize("tag_id, value, expected", [
        (casio.TAG_RECORDING_MODE, 5, "Landscape"),
        (casio.TAG_QUALITY, 3, "Fine"),
        (casio.TAG_FOCUSING_MODE, 2, "Macro"),
        (casio.TAG_FLASH_INTENSITY, 15, "Strong"),
        (casio.TAG_OBJECT_DISTANCE, 1200, "1200 mm"),
        (casio.TAG_WHITE_BALANCE, 129, "Manual"),
        (casio.TAG_DIGITAL_ZOOM, 0x40000, "4x digital zoom"),
        (casio.TAG_CCD_SENSITIVITY, 80, "Normal (ISO 80 equivalent)"),
        (casio.TAG_CCD_SENSITIVITY, 81, "81"),
    ])
    def test_descriptions(self, tag_id, value, expected):
        directory = casio.CasioType1MakernoteDirectory()
        directory.set(tag_id, value)
        assert directory.get_description(tag_id) == expected

    def test_unknown_tags_named(self):
        directory = casio.CasioType1MakernoteDirectory()
        assert directory.get_tag_name(casio.TAG_UNKNOWN_8) == "Makernote Unknown 8"


class TestSanyo:
    """Tests for the Sanyo makernote."""

    def test_quality(self):
        directory = sanyo.SanyoMakernoteDirectory()
        directory.set(sanyo.TAG_SANYO_QUALITY, 0x0103)
        assert directory.get_description(sanyo.TAG_SANYO_QUALITY) == "Fine/Medium"
        directory.set(sanyo.TAG_SANYO_QUALITY, 0x0207)
        assert directory.get_description(sanyo.TAG_SANYO_QUALITY) == "Super Fine/Super High"

    def test_digital_zoom(self):
        directory = sanyo.SanyoMakernoteDirectory()
        directory.set(sanyo.TAG_DIGITAL_ZOOM, Rational(3, 2))
        assert directory.get_description(sanyo.TAG_DIGITAL_ZOOM) == "1.500"

    def test_off_on(self):
        directory = sanyo.SanyoMakernoteDirectory()
        directory.set(sanyo.TAG_VOICE_MEMO, 1)
        directory.set(sanyo.TAG_RESAVED, 0)
        assert directory.get_description(sanyo.TAG_VOICE_MEMO) == "On"
        assert directory.get_description(sanyo.TAG_RESAVED) == "No"

    def test_print_im_name(self):
        directory = sanyo.SanyoMakernoteDirectory()
        assert directory.get_tag_name(sanyo.TAG_PRINT_IMAGE_MATCHING_INFO) == "Print IM"


class TestLeica:
    """Tests for the Leica type 5 makernote."""

    def test_exposure_mode(self):
        directory = leica.LeicaType5MakernoteDirectory()
        directory.set(leica.TAG_EXPOSURE_MODE, bytes([1, 1, 0, 0]))
        assert directory.get_description(leica.TAG_EXPOSURE_MODE) == "Aperture-priority AE (1)"

    def test_exposure_mode_unknown_pattern(self):
        directory = leica.LeicaType5MakernoteDirectory()
        directory.set(leica.TAG_EXPOSURE_MODE, bytes([9, 0, 0, 0]))
        assert directory.get_description(leica.TAG_EXPOSURE_MODE) == "9 0 0 0"

    def test_exposure_mode_too_short(self):
        directory = leica.LeicaType5MakernoteDirectory()
        directory.set(leica.TAG_EXPOSURE_MODE, bytes([3, 0]))
        assert directory.get_description(leica.TAG_EXPOSURE_MODE) == "3 0"


class TestGenericVendors:
    """Vendors without specialised handlers."""

    def test_ricoh(self):
        directory = ricoh.RicohMakernoteDirectory()
        directory.set(ricoh.TAG_VERSION, "Rv00")
        assert directory.name == "Ricoh Makernote"
        assert directory.get_description(ricoh.TAG_VERSION) == "Rv00"

    def test_sigma(self):
        directory = sigma.SigmaMakernoteDirectory()
        directory.set(sigma.TAG_DRIVE_MODE, "SINGLE")
        assert directory.get_tag_name(sigma.TAG_FILL_LIGHT) == "Fill Light"
        assert directory.get_description(sigma.TAG_DRIVE_MODE) == "SINGLE"
        assert directory.get_tag_name(0x13) is None
