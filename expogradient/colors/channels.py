"""
Channel extraction for the interpolator.

A codec turns a color value into four unit floats ``(r, g, b, a)`` and builds a
color value back from them. The interpolator only ever sees channels, so any
color model can be plugged in by passing another codec.
"""
from __future__ import annotations
from numbers import Real
from typing import Any, Optional, Protocol, runtime_checkable

import numpy as np

from ..exceptions import UnsupportedColorFormat
from ..types.color_types import Channels
from ..types.format_type import FormatType
from .color_base import ColorBase
from .hex import parse_hex
from .rgb import ColorUnitRGBA


@runtime_checkable
class ChannelCodec(Protocol):
    def to_channels(self, color: Any) -> Channels:
        ...

    def from_channels(self, r: float, g: float, b: float, a: float) -> Any:
        ...


def _channels_from_sequence(values: Any, original: Any) -> Channels:
    if any(isinstance(v, (bool, np.bool_)) or not isinstance(v, (Real, np.number)) for v in values):
        raise UnsupportedColorFormat(f"Color channels must be real numbers: {original!r}")
    floats = tuple(float(v) for v in values)
    # nan fails both comparisons
    if not all(0.0 <= f <= 1.0 for f in floats):
        raise UnsupportedColorFormat(f"Unit color channels must lie in [0, 1]: {original!r}")
    n = len(floats)
    if n == 1:
        return floats[0], floats[0], floats[0], 1.0
    if n == 2:
        return floats[0], floats[0], floats[0], floats[1]
    if n == 3:
        return floats[0], floats[1], floats[2], 1.0
    if n == 4:
        return floats[0], floats[1], floats[2], floats[3]
    raise UnsupportedColorFormat(
        f"Expected 1 (gray), 2 (gray, alpha), 3 (rgb) or 4 (rgba) channels, got {n}: {original!r}"
    )


class UnitRGBACodec:
    """
    Default codec: unit RGBA floats in, ``ColorUnitRGBA`` out.

    Accepted colors:
        - any RGB/RGBA ``ColorBase`` (INT, FLOAT or PERCENTAGE format)
        - tuples, lists or 1-D arrays of 1, 2, 3 or 4 unit floats, each in [0, 1]
        - hex strings (``#rgb``, ``#rgba``, ``#rrggbb``, ``#rrggbbaa``)

    Everything else raises ``UnsupportedColorFormat``.
    """

    def to_channels(self, color: Any) -> Channels:
        if isinstance(color, ColorBase):
            unit = color.rescaled(FormatType.FLOAT)
            return _channels_from_sequence(unit.value, color)
        if isinstance(color, str):
            return parse_hex(color)
        if isinstance(color, np.ndarray):
            if color.ndim != 1:
                raise UnsupportedColorFormat(f"Expected a 1-D channel array, got shape {color.shape}")
            return _channels_from_sequence(color.tolist(), color)
        if isinstance(color, (tuple, list)):
            return _channels_from_sequence(color, color)
        raise UnsupportedColorFormat(f"Cannot extract channels from {type(color).__name__}: {color!r}")

    def from_channels(self, r: float, g: float, b: float, a: float) -> ColorUnitRGBA:
        return ColorUnitRGBA((r, g, b, a))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


DEFAULT_CODEC = UnitRGBACodec()


def resolve_codec(codec: Optional[ChannelCodec]) -> ChannelCodec:
    """Return ``codec``, or the default unit RGBA codec when it is None."""
    if codec is None:
        return DEFAULT_CODEC
    if not isinstance(codec, ChannelCodec):
        raise TypeError(f"codec must provide to_channels/from_channels, got {type(codec).__name__}")
    return codec
