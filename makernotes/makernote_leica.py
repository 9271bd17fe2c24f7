# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Leica makernote tags (type 5: X1, X2, X Vario, T and later bodies)

Copyright 2025 DNAi inc.
"""

from typing import Optional

from makernotes.descriptor import TagDescriptor
from makernotes.directory import Directory
from makernotes.registry import register_directory
from makernotes.tag_schema import TagSchema

TAG_LENS_MODEL = 0x0303
TAG_ORIGINAL_FILE_NAME = 0x0407
TAG_ORIGINAL_DIRECTORY = 0x0408
TAG_EXPOSURE_MODE = 0x040d
TAG_SHOT_INFO = 0x0410
TAG_FILM_MODE = 0x0412
TAG_WB_RGB_LEVELS = 0x0413

LEICA_TYPE5_SCHEMA = TagSchema("Leica Makernote", {
    TAG_LENS_MODEL: "Lens Model",
    TAG_ORIGINAL_FILE_NAME: "Original File Name",
    TAG_ORIGINAL_DIRECTORY: "Original Directory",
    TAG_EXPOSURE_MODE: "Exposure Mode",
    TAG_SHOT_INFO: "Shot Info",
    TAG_FILM_MODE: "Film Mode",
    TAG_WB_RGB_LEVELS: "WB RGB Levels",
})

# Keyed by the first four bytes of the exposure mode field
EXPOSURE_MODES = {
    (0, 0, 0, 0): "Program AE",
    (1, 0, 0, 0): "Aperture-priority AE",
    (1, 1, 0, 0): "Aperture-priority AE (1)",
    (2, 0, 0, 0): "Shutter speed priority AE",  # unconfirmed
    (3, 0, 0, 0): "Manual",
}


class LeicaType5MakernoteDescriptor(TagDescriptor):

    def _exposure_mode_description(self, tag_id: int) -> Optional[str]:
        values = self.directory.get_byte_array(tag_id)
        if values is None or len(values) < 4:
            return None
        return EXPOSURE_MODES.get(tuple(values[:4]))

    HANDLERS = {
        TAG_EXPOSURE_MODE: _exposure_mode_description,
    }


@register_directory('leica')
class LeicaType5MakernoteDirectory(Directory):
    SCHEMA = LEICA_TYPE5_SCHEMA
    DESCRIPTOR_CLASS = LeicaType5MakernoteDescriptor
