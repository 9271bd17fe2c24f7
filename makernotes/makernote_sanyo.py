# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Sanyo makernote tags

Copyright 2025 DNAi inc.
"""

from typing import Optional

from makernotes.descriptor import TagDescriptor, indexed, mapped
from makernotes.directory import Directory
from makernotes.registry import register_directory
from makernotes.tag_schema import TagSchema

TAG_MAKERNOTE_OFFSET = 0x00ff
TAG_SANYO_THUMBNAIL = 0x0100
TAG_SPECIAL_MODE = 0x0200
TAG_SANYO_QUALITY = 0x0201
TAG_MACRO = 0x0202
TAG_DIGITAL_ZOOM = 0x0204
TAG_SOFTWARE_VERSION = 0x0207
TAG_PICT_INFO = 0x0208
TAG_CAMERA_ID = 0x0209
TAG_SEQUENTIAL_SHOT = 0x020e
TAG_WIDE_RANGE = 0x020f
TAG_COLOR_ADJUSTMENT_MODE = 0x0210
TAG_QUICK_SHOT = 0x0213
TAG_SELF_TIMER = 0x0214
TAG_VOICE_MEMO = 0x0216
TAG_RECORD_SHUTTER_RELEASE = 0x0217
TAG_FLICKER_REDUCE = 0x0218
TAG_OPTICAL_ZOOM_ON = 0x0219
TAG_DIGITAL_ZOOM_ON = 0x021b
TAG_LIGHT_SOURCE_SPECIAL = 0x021d
TAG_RESAVED = 0x021e
TAG_SCENE_SELECT = 0x021f
TAG_MANUAL_FOCUS_DISTANCE_OR_FACE_INFO = 0x0223
TAG_SEQUENCE_SHOT_INTERVAL = 0x0224
TAG_FLASH_MODE = 0x0225
TAG_PRINT_IMAGE_MATCHING_INFO = 0x0E00
TAG_DATA_DUMP = 0x0f00

SANYO_SCHEMA = TagSchema("Sanyo Makernote", {
    TAG_MAKERNOTE_OFFSET: "Makernote Offset",
    TAG_SANYO_THUMBNAIL: "Sanyo Thumbnail",
    TAG_SPECIAL_MODE: "Special Mode",
    TAG_SANYO_QUALITY: "Sanyo Quality",
    TAG_MACRO: "Macro",
    TAG_DIGITAL_ZOOM: "Digital Zoom",
    TAG_SOFTWARE_VERSION: "Software Version",
    TAG_PICT_INFO: "Pict Info",
    TAG_CAMERA_ID: "Camera ID",
    TAG_SEQUENTIAL_SHOT: "Sequential Shot",
    TAG_WIDE_RANGE: "Wide Range",
    TAG_COLOR_ADJUSTMENT_MODE: "Color Adjustment Mode",
    TAG_QUICK_SHOT: "Quick Shot",
    TAG_SELF_TIMER: "Self Timer",
    TAG_VOICE_MEMO: "Voice Memo",
    TAG_RECORD_SHUTTER_RELEASE: "Record Shutter Release",
    TAG_FLICKER_REDUCE: "Flicker Reduce",
    TAG_OPTICAL_ZOOM_ON: "Optical Zoom On",
    TAG_DIGITAL_ZOOM_ON: "Digital Zoom On",
    TAG_LIGHT_SOURCE_SPECIAL: "Light Source Special",
    TAG_RESAVED: "Resaved",
    TAG_SCENE_SELECT: "Scene Select",
    TAG_MANUAL_FOCUS_DISTANCE_OR_FACE_INFO: "Manual Focus Distance or Face Info",
    TAG_SEQUENCE_SHOT_INTERVAL: "Sequence Shot Interval",
    TAG_FLASH_MODE: "Flash Mode",
    TAG_PRINT_IMAGE_MATCHING_INFO: "Print IM",
    TAG_DATA_DUMP: "Data Dump",
})

# High byte is the compression grade, low byte the resolution level
_QUALITY_GRADES = ("Normal", "Fine", "Super Fine")
_QUALITY_LEVELS = (
    "Very Low", "Low", "Medium Low", "Medium",
    "Medium High", "High", "Very High", "Super High",
)
SANYO_QUALITY = {
    (grade_index << 8) | level_index: f"{grade}/{level}"
    for grade_index, grade in enumerate(_QUALITY_GRADES)
    for level_index, level in enumerate(_QUALITY_LEVELS)
}

_off_on = indexed("Off", "On")


class SanyoMakernoteDescriptor(TagDescriptor):

    def _digital_zoom_description(self, tag_id: int) -> Optional[str]:
        return self.get_decimal_rational(tag_id, 3)

    HANDLERS = {
        TAG_SANYO_QUALITY: mapped(SANYO_QUALITY),
        TAG_MACRO: indexed("Normal", "Macro", "View", "Manual"),
        TAG_DIGITAL_ZOOM: _digital_zoom_description,
        TAG_SEQUENTIAL_SHOT: indexed("None", "Standard", "Best", "Adjust Exposure"),
        TAG_WIDE_RANGE: _off_on,
        TAG_COLOR_ADJUSTMENT_MODE: _off_on,
        TAG_QUICK_SHOT: _off_on,
        TAG_SELF_TIMER: _off_on,
        TAG_VOICE_MEMO: _off_on,
        TAG_RECORD_SHUTTER_RELEASE: indexed("Record while down", "Press start, press stop"),
        TAG_FLICKER_REDUCE: _off_on,
        TAG_OPTICAL_ZOOM_ON: _off_on,
        TAG_DIGITAL_ZOOM_ON: _off_on,
        TAG_LIGHT_SOURCE_SPECIAL: _off_on,
        TAG_RESAVED: indexed("No", "Yes"),
        TAG_SCENE_SELECT: indexed("Off", "Sport", "TV", "Night", "User 1", "User 2", "Lamp"),
        TAG_SEQUENCE_SHOT_INTERVAL: indexed("5 frames/sec", "10 frames/sec", "15 frames/sec", "20 frames/sec"),
        TAG_FLASH_MODE: indexed("Auto", "Force", "Disabled", "Red eye"),
    }


@register_directory('sanyo')
class SanyoMakernoteDirectory(Directory):
    SCHEMA = SANYO_SCHEMA
    DESCRIPTOR_CLASS = SanyoMakernoteDescriptor
