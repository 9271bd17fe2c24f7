# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Kyocera and Contax makernote tags

Copyright 2025 DNAi inc.
"""

from typing import Optional

from makernotes.descriptor import TagDescriptor
from makernotes.directory import Directory
from makernotes.registry import register_directory
from makernotes.tag_schema import TagSchema

TAG_PROPRIETARY_THUMBNAIL = 0x0001
TAG_PRINT_IMAGE_MATCHING_INFO = 0x0E00

KYOCERA_SCHEMA = TagSchema("Kyocera/Contax Makernote", {
    TAG_PROPRIETARY_THUMBNAIL: "Proprietary Thumbnail Format Data",
    TAG_PRINT_IMAGE_MATCHING_INFO: "Print Image Matching (PIM) Info",
})


class KyoceraMakernoteDescriptor(TagDescriptor):

    def _thumbnail_description(self, tag_id: int) -> Optional[str]:
        # Thumbnail payload is opaque; only its size is meaningful
        return self.get_byte_length_description(tag_id)

    HANDLERS = {
        TAG_PROPRIETARY_THUMBNAIL: _thumbnail_description,
    }


@register_directory('kyocera')
class KyoceraMakernoteDirectory(Directory):
    SCHEMA = KYOCERA_SCHEMA
    DESCRIPTOR_CLASS = KyoceraMakernoteDescriptor
