# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Ricoh makernote tags

No Ricoh tag needs interpretation beyond the generic rendering, so the
directory uses the base TagDescriptor.
"""

from makernotes.directory import Directory
from makernotes.registry import register_directory
from makernotes.tag_schema import TagSchema

TAG_MAKERNOTE_DATA_TYPE = 0x0001
TAG_VERSION = 0x0002
TAG_PRINT_IMAGE_MATCHING_INFO = 0x0E00
TAG_RICOH_CAMERA_INFO_MAKERNOTE_SUB_IFD_POINTER = 0x2001

RICOH_SCHEMA = TagSchema("Ricoh Makernote", {
    TAG_MAKERNOTE_DATA_TYPE: "Makernote Data Type",
    TAG_VERSION: "Version",
    TAG_PRINT_IMAGE_MATCHING_INFO: "Print Image Matching (PIM) Info",
    TAG_RICOH_CAMERA_INFO_MAKERNOTE_SUB_IFD_POINTER: "Ricoh Camera Info Makernote Sub-IFD",
})


@register_directory('ricoh')
class RicohMakernoteDirectory(Directory):
    SCHEMA = RICOH_SCHEMA
