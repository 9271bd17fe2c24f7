# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Apple makernote tags (iPhone/iPad cameras)

Copyright 2025 DNAi inc.
"""

from makernotes.descriptor import TagDescriptor, indexed
from makernotes.directory import Directory
from makernotes.registry import register_directory
from makernotes.tag_schema import TagSchema

TAG_RUN_TIME = 0x0003
TAG_HDR_IMAGE_TYPE = 0x000a
TAG_BURST_UUID = 0x000b

APPLE_SCHEMA = TagSchema("Apple Makernote", {
    TAG_RUN_TIME: "Run Time",
    TAG_HDR_IMAGE_TYPE: "HDR Image Type",
    TAG_BURST_UUID: "Burst UUID",
})


class AppleMakernoteDescriptor(TagDescriptor):
    HANDLERS = {
        # 3 is the merged HDR frame, 4 the original exposure kept alongside it
        TAG_HDR_IMAGE_TYPE: indexed("HDR Image", "Original Image", base=3),
    }


@register_directory('apple')
class AppleMakernoteDirectory(Directory):
    SCHEMA = APPLE_SCHEMA
    DESCRIPTOR_CLASS = AppleMakernoteDescriptor
