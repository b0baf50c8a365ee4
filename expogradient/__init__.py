"""
Expogradient - Exponential Multi-Stop Color Gradients
=====================================================

Turns an ordered list of color stops into a denser list whose plain linear
rendering approximates exponential (power-law) interpolation between the
original stops.

Quick Start
-----------
>>> from expogradient import ColorStop, ColorUnitRGB, subdivide
>>>
>>> red = ColorUnitRGB((1.0, 0.0, 0.0))
>>> blue = ColorUnitRGB((0.0, 0.0, 1.0))
>>>
>>> stops = subdivide([ColorStop(red, 0.0), ColorStop(blue, 1.0)], exponent=2.0, subdivisions=4)
>>> len(stops)
5
>>> stops.locations
[0.0, 0.25, 0.5, 0.75, 1.0]

Modules
-------
- interpolation: lerp_exp, np_lerp_exp
- subdivide: subdivide
- stops: ColorStop, Gradient
- gradient: ExponentialGradient, LinearGradient
- render: sample_linear, rasterize
- colors: color classes and channel codecs
"""

from .colors.rgb import (
    ColorRGBINT, ColorRGBAINT,
    ColorUnitRGB, ColorUnitRGBA,
    ColorPercentageRGB, ColorPercentageRGBA,
)
from .colors.color_base import ColorBase
from .colors.channels import ChannelCodec, UnitRGBACodec
from .exceptions import ExpoGradientError, InvalidParameter, UnsupportedColorFormat
from .gradient import ExponentialGradient, LinearGradient
from .interpolation import lerp_exp, np_lerp_exp
from .render import rasterize, sample_linear
from .stops import ColorStop, Gradient
from .subdivide import subdivide
from .types import FormatType, UnitPoint
from .utils.default import DEFAULT_EXPONENT, DEFAULT_SUBDIVISIONS

__version__ = "1.0.0"

__all__ = [
    # Core
    "subdivide", "lerp_exp", "np_lerp_exp",

    # Stops and gradients
    "ColorStop", "Gradient",
    "ExponentialGradient", "LinearGradient", "UnitPoint",

    # Rendering
    "sample_linear", "rasterize",

    # Colors
    "ColorBase",
    "ColorRGBINT", "ColorRGBAINT",
    "ColorUnitRGB", "ColorUnitRGBA",
    "ColorPercentageRGB", "ColorPercentageRGBA",
    "ChannelCodec", "UnitRGBACodec",
    "FormatType",

    # Errors
    "ExpoGradientError", "InvalidParameter", "UnsupportedColorFormat",

    # Defaults
    "DEFAULT_EXPONENT", "DEFAULT_SUBDIVISIONS",

    "__version__",
]
