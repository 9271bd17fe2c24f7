# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
makernotes - camera makernote tag directories and descriptors

Stores the tag values decoded from manufacturer-specific EXIF makernote
blocks and turns them into human-readable descriptions. Each vendor
contributes a tag schema and a descriptor; the directory mechanics are
shared.

    from makernotes import create_directory

    directory = create_directory('apple')
    directory.set(0x000a, 3)
    directory.get_tag_name(0x000a)     # 'HDR Image Type'
    directory.get_description(0x000a)  # 'HDR Image'

Copyright 2025 DNAi inc.
"""

__version__ = "0.1.0"
__author__ = "DNAi inc."

import logging

from makernotes.config import FormatConfig, get_config, load_config, set_config
from makernotes.descriptor import TagDescriptor, indexed, mapped, resolve_indexed_description
from makernotes.directory import Directory, Tag
from makernotes.exceptions import (
    ConfigError,
    InvalidTagError,
    MakernoteError,
    TagValueError,
    UnknownVendorError,
)
from makernotes.rational import Rational
from makernotes.registry import (
    create_directory,
    get_directory_class,
    load_vendor_module,
    register_directory,
    registered_vendors,
)
from makernotes.report import TagReport, describe_directory, format_report, unknown_tag_name
from makernotes.tag_lister import TagLister
from makernotes.tag_schema import TagSchema
from makernotes.tag_values import StringValue, TagValueStore

# Library code only logs; the CLI attaches handlers
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    'ConfigError',
    'Directory',
    'FormatConfig',
    'InvalidTagError',
    'MakernoteError',
    'Rational',
    'StringValue',
    'Tag',
    'TagDescriptor',
    'TagLister',
    'TagReport',
    'TagSchema',
    'TagValueError',
    'TagValueStore',
    'UnknownVendorError',
    'create_directory',
    'describe_directory',
    'format_report',
    'get_config',
    'get_directory_class',
    'indexed',
    'load_config',
    'load_vendor_module',
    'mapped',
    'register_directory',
    'registered_vendors',
    'resolve_indexed_description',
    'set_config',
    'unknown_tag_name',
]
