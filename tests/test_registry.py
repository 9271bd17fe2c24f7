"""
Unit tests for the vendor registry.
"""

import sys
import types

import pytest

from makernotes import registry
from makernotes.directory import Directory
from makernotes.exceptions import MakernoteError, UnknownVendorError
from makernotes.makernote_apple import AppleMakernoteDirectory
from makernotes.tag_schema import TagSchema


class TestRegistry:
    """Tests for registry lookups."""

    def test_builtin_vendors(self):
        vendors = registry.registered_vendors()
        for vendor in ('apple', 'casio', 'kyocera', 'leica', 'pentax', 'ricoh', 'sanyo', 'sigma'):
            assert vendor in vendors
        assert vendors == sorted(vendors)

    def test_case_insensitive_lookup(self):
        assert registry.get_directory_class('Apple') is AppleMakernoteDirectory
        directory = registry.create_directory(' APPLE ')
        assert isinstance(directory, AppleMakernoteDirectory)

    def test_unknown_vendor(self):
        with pytest.raises(UnknownVendorError, match="nikon"):
            registry.create_directory('nikon')

    def test_duplicate_registration(self):
        class Other(Directory):
            SCHEMA = TagSchema("Other", {})

        with pytest.raises(MakernoteError, match="already registered"):
            registry.register_directory('apple')(Other)

    def test_reregistering_same_class_is_allowed(self):
        assert registry.register_directory('apple')(AppleMakernoteDirectory) is AppleMakernoteDirectory

    def test_requires_schema(self):
        class NoSchema(Directory):
            pass

        with pytest.raises(MakernoteError, match="no SCHEMA"):
            registry.register_directory('noschema-test')(NoSchema)

    def test_load_vendor_module(self, monkeypatch):
        module = types.ModuleType('makernotes_test_plugin')
        calls = []

        def init():
            @registry.register_directory('plugin-test')
            class PluginDirectory(Directory):
                SCHEMA = TagSchema("Plugin Makernote", {1: "One"})
            calls.append(PluginDirectory)

        module.init = init
        monkeypatch.setitem(sys.modules, 'makernotes_test_plugin', module)
        registry.registered_vendors()
        monkeypatch.setattr(registry, '_directory_classes', dict(registry._directory_classes))

        assert registry.load_vendor_module('makernotes_test_plugin') is module
        assert registry.create_directory('plugin-test').name == "Plugin Makernote"
        assert len(calls) == 1

    def test_load_missing_module(self):
        with pytest.raises(MakernoteError, match="Could not load"):
            registry.load_vendor_module('makernotes_no_such_module')
