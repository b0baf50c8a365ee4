"""
Exponential color interpolation.

The fraction ``t`` inside a segment is warped by ``t ** exponent`` before the
usual per-channel blend, so ``exponent > 1`` starts slowly and finishes fast and
``exponent < 1`` does the opposite. ``exponent == 1`` is plain linear
interpolation. All four channels, alpha included, use the same warped fraction.
"""
from __future__ import annotations
from typing import Any, Optional

import numpy as np

from .colors.channels import ChannelCodec, resolve_codec
from .exceptions import InvalidParameter
from .types.color_types import Channels
from .utils.validation import validate_exponent


def warp_fraction(t: float, exponent: float) -> float:
    # a negative base with a fractional exponent has no real power
    if t < 0:
        raise InvalidParameter(f"t must be >= 0, got {t}")
    return t ** exponent


def lerp_channels(a: Channels, b: Channels, f: float) -> Channels:
    # a * (1 - f) + b * f is exact at both f == 0 and f == 1
    return tuple(ca * (1.0 - f) + cb * f for ca, cb in zip(a, b))  # type: ignore[return-value]


def lerp_exp(
    color_a: Any,
    color_b: Any,
    t: float,
    exponent: float,
    codec: Optional[ChannelCodec] = None,
) -> Any:
    """
    Interpolate between two colors along a power-law curve.

    Args:
        color_a: Color at ``t == 0``.
        color_b: Color at ``t == 1``.
        t: Linear position inside the segment, expected in [0, 1]. Not clamped;
            negative values raise.
        exponent: Curve parameter, finite and > 0.
        codec: Channel codec used to read both colors and build the result.
            Defaults to ``UnitRGBACodec``.

    Returns:
        The blended color, built by ``codec.from_channels``.

    Raises:
        InvalidParameter: if ``exponent`` is not finite and positive, or ``t < 0``.
        UnsupportedColorFormat: if the codec cannot read either color.
    """
    exponent = validate_exponent(exponent)
    codec = resolve_codec(codec)
    a = codec.to_channels(color_a)
    b = codec.to_channels(color_b)
    return codec.from_channels(*lerp_channels(a, b, warp_fraction(t, exponent)))


def np_lerp_exp(
    starts: np.ndarray,
    ends: np.ndarray,
    t: np.ndarray | float,
    exponent: float,
) -> np.ndarray:
    """
    Vectorized ``lerp_exp`` over channel arrays.

    ``starts`` and ``ends`` have shape ``(..., 4)``; ``t`` broadcasts against
    their leading dimensions, so a 1-D ``t`` of length N with single colors
    gives an ``(N, 4)`` result.
    """
    exponent = validate_exponent(exponent)
    starts = np.asarray(starts, dtype=np.float64)
    ends = np.asarray(ends, dtype=np.float64)
    t = np.asarray(t, dtype=np.float64)
    if np.any(t < 0):
        raise InvalidParameter("t must be >= 0")
    f = np.asarray(np.power(t, exponent))[..., np.newaxis]
    return starts * (1.0 - f) + ends * f
