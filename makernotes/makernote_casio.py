# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Casio makernote tags (type 1, the older header-less layout)

Copyright 2025 DNAi inc.
"""

from typing import Optional

from makernotes.descriptor import TagDescriptor, indexed, mapped
from makernotes.directory import Directory
from makernotes.registry import register_directory
from makernotes.tag_schema import TagSchema

TAG_RECORDING_MODE = 0x0001
TAG_QUALITY = 0x0002
TAG_FOCUSING_MODE = 0x0003
TAG_FLASH_MODE = 0x0004
TAG_FLASH_INTENSITY = 0x0005
TAG_OBJECT_DISTANCE = 0x0006
TAG_WHITE_BALANCE = 0x0007
TAG_UNKNOWN_1 = 0x0008
TAG_UNKNOWN_2 = 0x0009
TAG_DIGITAL_ZOOM = 0x000A
TAG_SHARPNESS = 0x000B
TAG_CONTRAST = 0x000C
TAG_SATURATION = 0x000D
TAG_UNKNOWN_3 = 0x000E
TAG_UNKNOWN_4 = 0x000F
TAG_UNKNOWN_5 = 0x0010
TAG_UNKNOWN_6 = 0x0011
TAG_UNKNOWN_7 = 0x0012
TAG_UNKNOWN_8 = 0x0013
TAG_CCD_SENSITIVITY = 0x0014

CASIO_SCHEMA = TagSchema("Casio Makernote", {
    TAG_RECORDING_MODE: "Recording Mode",
    TAG_QUALITY: "Quality",
    TAG_FOCUSING_MODE: "Focusing Mode",
    TAG_FLASH_MODE: "Flash Mode",
    TAG_FLASH_INTENSITY: "Flash Intensity",
    TAG_OBJECT_DISTANCE: "Object Distance",
    TAG_WHITE_BALANCE: "White Balance",
    TAG_UNKNOWN_1: "Makernote Unknown 1",
    TAG_UNKNOWN_2: "Makernote Unknown 2",
    TAG_DIGITAL_ZOOM: "Digital Zoom",
    TAG_SHARPNESS: "Sharpness",
    TAG_CONTRAST: "Contrast",
    TAG_SATURATION: "Saturation",
    TAG_UNKNOWN_3: "Makernote Unknown 3",
    TAG_UNKNOWN_4: "Makernote Unknown 4",
    TAG_UNKNOWN_5: "Makernote Unknown 5",
    TAG_UNKNOWN_6: "Makernote Unknown 6",
    TAG_UNKNOWN_7: "Makernote Unknown 7",
    TAG_UNKNOWN_8: "Makernote Unknown 8",
    TAG_CCD_SENSITIVITY: "CCD Sensitivity",
})


class CasioType1MakernoteDescriptor(TagDescriptor):

    def _object_distance_description(self, tag_id: int) -> Optional[str]:
        value = self.directory.get_int(tag_id)
        if value is None:
            return None
        return self.get_focal_length_description(float(value))

    HANDLERS = {
        TAG_RECORDING_MODE: indexed("Single shutter", "Panorama", "Night scene", "Portrait", "Landscape", base=1),
        TAG_QUALITY: indexed("Economy", "Normal", "Fine", base=1),
        TAG_FOCUSING_MODE: indexed("Macro", "Auto focus", "Manual focus", "Infinity", base=2),
        TAG_FLASH_MODE: indexed("Auto", "On", "Off", "Red eye reduction", base=1),
        TAG_FLASH_INTENSITY: mapped({11: "Weak", 13: "Normal", 15: "Strong"}),
        TAG_OBJECT_DISTANCE: _object_distance_description,
        TAG_WHITE_BALANCE: mapped({
            1: "Auto",
            2: "Tungsten",
            3: "Daylight",
            4: "Florescent",
            5: "Shade",
            129: "Manual",
        }),
        TAG_DIGITAL_ZOOM: mapped({
            0x10000: "No digital zoom",
            0x10001: "2x digital zoom",
            0x20000: "2x digital zoom",
            0x40000: "4x digital zoom",
        }),
        TAG_SHARPNESS: indexed("Normal", "Soft", "Hard"),
        TAG_CONTRAST: indexed("Normal", "Low", "High"),
        TAG_SATURATION: indexed("Normal", "Low", "High"),
        TAG_CCD_SENSITIVITY: mapped({
            64: "Normal",
            125: "+1.0",
            250: "+2.0",
            244: "+3.0",
            80: "Normal (ISO 80 equivalent)",
            100: "High",
        }),
    }


@register_directory('casio')
class CasioType1MakernoteDirectory(Directory):
    SCHEMA = CASIO_SCHEMA
    DESCRIPTOR_CLASS = CasioType1MakernoteDescriptor
