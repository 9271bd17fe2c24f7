"""
Unit tests for formatting configuration and value rendering.
"""

import pytest

from makernotes.config import FormatConfig, get_config, load_config, set_config
from makernotes.exceptions import ConfigError
from makernotes.rational import Rational
from makernotes.value_formatter import decode_text, format_float, format_raw_value


class TestLoadConfig:
    """Tests for load_config."""

    def test_defaults(self):
        config = get_config()
        assert config.max_array_values == 16
        assert config.float_places == 3
        assert config.fallback_encodings == ('utf-8', 'latin-1')

    def test_load(self, tmp_path):
        path = tmp_path / "makernotes.cfg"
        path.write_text(
            "# formatting\n"
            "max_array_values = 4\n"
            "\n"
            "float_places=1\n"
            "fallback_encodings=cp1252, utf-8\n"
        )
        config = load_config(path)
        assert config.max_array_values == 4
        assert config.float_places == 1
        assert config.fallback_encodings == ('cp1252', 'utf-8')
        assert config.encoding_confidence == 0.5

    def test_base_config(self, tmp_path):
        path = tmp_path / "partial.cfg"
        path.write_text("float_places=5\n")
        config = load_config(path, base=FormatConfig(max_array_values=3))
        assert config.max_array_values == 3
        assert config.float_places == 5

    @pytest.mark.parametrize("line, message", [
        ("colour=red", "unknown option"),
        ("max_array_values", "expected key=value"),
        ("float_places=-1", "must not be negative"),
        ("float_places=two", "must be an integer"),
        ("encoding_confidence=1.5", "between 0 and 1"),
        ("fallback_encodings=no-such-codec", "Unknown encoding"),
    ])
    def test_invalid(self, tmp_path, line, message):
        path = tmp_path / "bad.cfg"
        path.write_text(line + "\n")
        with pytest.raises(ConfigError, match=message):
            load_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="Cannot read"):
            load_config(tmp_path / "absent.cfg")

    def test_set_config_restores_defaults(self):
        set_config(FormatConfig(float_places=1))
        assert get_config().float_places == 1
        set_config()
        assert get_config().float_places == 3


class TestValueFormatter:
    """Tests for raw value rendering and text decoding."""

    def test_format_float(self):
        assert format_float(1.0) == "1"
        assert format_float(0.1 + 0.2) == "0.3"
        assert format_float(2.71828, 2) == "2.72"
        assert format_float(-0.0) == "0"

    def test_format_raw_value(self):
        assert format_raw_value(Rational(1, 3)) == "1/3"
        assert format_raw_value([1.5, 2, "x"]) == "1.5 2 x"
        assert format_raw_value(b"\x00\xff") == "0 255"
        assert format_raw_value("  padded ") == "  padded "
        assert format_raw_value(12.5, FormatConfig(float_places=0)) == "12"

    def test_decode_declared_encoding(self):
        assert decode_text("Grüße".encode("utf-8"), "utf-8") == "Grüße"

    def test_decode_bad_declared_encoding_falls_back(self):
        assert decode_text(b"plain text", "no-such-codec") == "plain text"

    def test_decode_fallback(self):
        config = FormatConfig(encoding_confidence=1.0, fallback_encodings=('latin-1',))
        assert decode_text(b"caf\xe9", config=config) == "café"

    def test_decode_empty(self):
        assert decode_text(b"") == ""
