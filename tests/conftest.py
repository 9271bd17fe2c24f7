"""
Shared fixtures for makernotes tests.
"""

import pytest

from makernotes.config import set_config
from makernotes.directory import Directory
from makernotes.tag_schema import TagSchema


@pytest.fixture(autouse=True)
def default_config():
    """Every test starts and ends with the default formatting options."""
    set_config()
    yield
    set_config()


@pytest.fixture
def sample_schema():
    return TagSchema("Sample Makernote", {0x0001: "First Tag", 0x0002: "Second Tag"})


@pytest.fixture
def sample_directory(sample_schema):
    return Directory(sample_schema)
