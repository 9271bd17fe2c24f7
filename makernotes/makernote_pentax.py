# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Pentax and Asahi makernote tags

Value tables follow http://www.ozhiker.com/electronics/pjmt/jpeg_info/pentax_mn.html

Copyright 2025 DNAi inc.
"""

from typing import Optional

from makernotes.descriptor import TagDescriptor, indexed, mapped
from makernotes.directory import Directory
from makernotes.registry import register_directory
from makernotes.tag_schema import TagSchema

TAG_CAPTURE_MODE = 0x0001
TAG_QUALITY_LEVEL = 0x0002
TAG_FOCUS_MODE = 0x0003
TAG_FLASH_MODE = 0x0004
TAG_WHITE_BALANCE = 0x0007
TAG_DIGITAL_ZOOM = 0x000A  # 0 = Off
TAG_SHARPNESS = 0x000B
TAG_CONTRAST = 0x000C
TAG_SATURATION = 0x000D
TAG_ISO_SPEED = 0x0014
TAG_COLOUR = 0x0017
TAG_PRINT_IMAGE_MATCHING_INFO = 0x0E00
TAG_TIME_ZONE = 0x1000  # String
TAG_DAYLIGHT_SAVINGS = 0x1001  # String

PENTAX_SCHEMA = TagSchema("Pentax Makernote", {
    TAG_CAPTURE_MODE: "Capture Mode",
    TAG_QUALITY_LEVEL: "Quality Level",
    TAG_FOCUS_MODE: "Focus Mode",
    TAG_FLASH_MODE: "Flash Mode",
    TAG_WHITE_BALANCE: "White Balance",
    TAG_DIGITAL_ZOOM: "Digital Zoom",
    TAG_SHARPNESS: "Sharpness",
    TAG_CONTRAST: "Contrast",
    TAG_SATURATION: "Saturation",
    TAG_ISO_SPEED: "ISO Speed",
    TAG_COLOUR: "Colour",
    TAG_PRINT_IMAGE_MATCHING_INFO: "Print Image Matching (PIM) Info",
    TAG_TIME_ZONE: "Time Zone",
    TAG_DAYLIGHT_SAVINGS: "Daylight Savings",
})


class PentaxMakernoteDescriptor(TagDescriptor):

    def _digital_zoom_description(self, tag_id: int) -> Optional[str]:
        value = self.directory.get_float(tag_id)
        if value is None:
            return None
        return "Off" if value == 0 else str(value)

    HANDLERS = {
        TAG_CAPTURE_MODE: indexed("Auto", "Night-scene", "Manual", None, "Multiple"),
        TAG_QUALITY_LEVEL: indexed("Good", "Better", "Best"),
        TAG_FOCUS_MODE: indexed("Custom", "Auto", base=2),
        TAG_FLASH_MODE: indexed("Auto", "Flash On", None, "Flash Off", None, "Red-eye Reduction", base=1),
        TAG_WHITE_BALANCE: indexed("Auto", "Daylight", "Shade", "Tungsten", "Fluorescent", "Manual"),
        TAG_DIGITAL_ZOOM: _digital_zoom_description,
        TAG_SHARPNESS: indexed("Normal", "Soft", "Hard"),
        TAG_CONTRAST: indexed("Normal", "Low", "High"),
        TAG_SATURATION: indexed("Normal", "Low", "High"),
        # Older bodies store 10/16, newer ones the ISO value itself
        TAG_ISO_SPEED: mapped({10: "ISO 100", 16: "ISO 200", 100: "ISO 100", 200: "ISO 200"}),
        TAG_COLOUR: indexed("Normal", "Black & White", "Sepia", base=1),
    }


@register_directory('pentax')
class PentaxMakernoteDirectory(Directory):
    SCHEMA = PENTAX_SCHEMA
    DESCRIPTOR_CLASS = PentaxMakernoteDescriptor
