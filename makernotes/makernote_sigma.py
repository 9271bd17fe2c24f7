# Copyright 2025 DNAi inc.

# Dual-licensed under the DNAi Free License v1.1 and the
# DNAi Commercial License v1.1.
# See the LICENSE files in the project root for details.

"""
Sigma and Foveon makernote tags

Sigma stores its settings as plain strings, so every tag is rendered by the
generic descriptor.
"""

from makernotes.directory import Directory
from makernotes.registry import register_directory
from makernotes.tag_schema import TagSchema

TAG_SERIAL_NUMBER = 0x2
TAG_DRIVE_MODE = 0x3
TAG_RESOLUTION_MODE = 0x4
TAG_AUTO_FOCUS_MODE = 0x5
TAG_FOCUS_SETTING = 0x6
TAG_WHITE_BALANCE = 0x7
TAG_EXPOSURE_MODE = 0x8
TAG_METERING_MODE = 0x9
TAG_LENS_RANGE = 0xa
TAG_COLOR_SPACE = 0xb
TAG_EXPOSURE = 0xc
TAG_CONTRAST = 0xd
TAG_SHADOW = 0xe
TAG_HIGHLIGHT = 0xf
TAG_SATURATION = 0x10
TAG_SHARPNESS = 0x11
TAG_FILL_LIGHT = 0x12
TAG_COLOR_ADJUSTMENT = 0x14
TAG_ADJUSTMENT_MODE = 0x15
TAG_QUALITY = 0x16
TAG_FIRMWARE = 0x17
TAG_SOFTWARE = 0x18
TAG_AUTO_BRACKET = 0x19

SIGMA_SCHEMA = TagSchema("Sigma Makernote", {
    TAG_SERIAL_NUMBER: "Serial Number",
    TAG_DRIVE_MODE: "Drive Mode",
    TAG_RESOLUTION_MODE: "Resolution Mode",
    TAG_AUTO_FOCUS_MODE: "Auto Focus Mode",
    TAG_FOCUS_SETTING: "Focus Setting",
    TAG_WHITE_BALANCE: "White Balance",
    TAG_EXPOSURE_MODE: "Exposure Mode",
    TAG_METERING_MODE: "Metering Mode",
    TAG_LENS_RANGE: "Lens Range",
    TAG_COLOR_SPACE: "Color Space",
    TAG_EXPOSURE: "Exposure",
    TAG_CONTRAST: "Contrast",
    TAG_SHADOW: "Shadow",
    TAG_HIGHLIGHT: "Highlight",
    TAG_SATURATION: "Saturation",
    TAG_SHARPNESS: "Sharpness",
    TAG_FILL_LIGHT: "Fill Light",
    TAG_COLOR_ADJUSTMENT: "Color Adjustment",
    TAG_ADJUSTMENT_MODE: "Adjustment Mode",
    TAG_QUALITY: "Quality",
    TAG_FIRMWARE: "Firmware",
    TAG_SOFTWARE: "Software",
    TAG_AUTO_BRACKET: "Auto Bracket",
})


@register_directory('sigma')
class SigmaMakernoteDirectory(Directory):
    SCHEMA = SIGMA_SCHEMA
