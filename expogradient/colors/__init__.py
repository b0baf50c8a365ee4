"""
Expogradient Color Classes
==========================

Immutable RGB/RGBA color values in three formats, and the channel codecs that
turn any supported color value into four unit floats and back.

Usage
-----
>>> from expogradient.colors import ColorRGBINT, ColorUnitRGBA, UnitRGBACodec
>>>
>>> red = ColorRGBINT((255, 0, 0))
>>> UnitRGBACodec().to_channels(red)
(1.0, 0.0, 0.0, 1.0)
>>> UnitRGBACodec().from_channels(0.0, 0.0, 1.0, 0.5)
ColorUnitRGBA((0.0, 0.0, 1.0, 0.5))

Color Classes
-------------
    - ColorRGBINT: Integer RGB (0-255)
    - ColorRGBAINT: Integer RGBA with alpha
    - ColorUnitRGB: Float RGB (0.0-1.0)
    - ColorUnitRGBA: Float RGBA with alpha
    - ColorPercentageRGB: Percentage RGB (0-100)
    - ColorPercentageRGBA: Percentage RGBA with alpha

Notes
-----
- All values are clamped to maxima during initialization
- Codecs never substitute a default color; unsupported input raises
  UnsupportedColorFormat
"""

from .color_base import ColorBase, WithAlpha
from .rgb import (
    ColorRGBINT,
    ColorRGBAINT,
    ColorUnitRGB,
    ColorUnitRGBA,
    ColorPercentageRGB,
    ColorPercentageRGBA,
    RGB,
    RGBA,
    get_color_class,
)
from .hex import parse_hex, to_hex
from .channels import ChannelCodec, UnitRGBACodec, DEFAULT_CODEC, resolve_codec

__all__ = [
    "ColorBase", "WithAlpha",
    "ColorRGBINT", "ColorRGBAINT",
    "ColorUnitRGB", "ColorUnitRGBA",
    "ColorPercentageRGB", "ColorPercentageRGBA",
    "RGB", "RGBA", "get_color_class",
    "parse_hex", "to_hex",
    "ChannelCodec", "UnitRGBACodec", "DEFAULT_CODEC", "resolve_codec",
]
