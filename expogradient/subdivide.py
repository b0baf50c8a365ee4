"""
Gradient subdivision.

A linear gradient renderer only blends straight lines between stops. Splitting
every segment into ``subdivisions`` evenly spaced sub-stops whose colors follow
``t ** exponent`` makes that renderer draw an approximation of the exponential
curve instead.
"""
from __future__ import annotations
from typing import Iterable, List, Optional

from .colors.channels import ChannelCodec, resolve_codec
from .interpolation import lerp_channels, warp_fraction
from .stops import ColorStop, Gradient, StopLike, as_gradient
from .utils.default import DEFAULT_EXPONENT, DEFAULT_SUBDIVISIONS
from .utils.validation import validate_exponent, validate_subdivisions


def subdivide_segment(
    current: ColorStop,
    following: ColorStop,
    exponent: float,
    subdivisions: int,
    codec: ChannelCodec,
) -> List[ColorStop]:
    """
    Sub-stops for one segment, ``following`` excluded.

    Locations are spaced linearly; only the colors follow the curve. The first
    sub-stop is ``current`` itself since the curve starts exactly on it.
    """
    start = codec.to_channels(current.color)
    end = codec.to_channels(following.color)
    span = following.location - current.location

    result = [current]
    for step in range(1, subdivisions):
        t = step / subdivisions
        channels = lerp_channels(start, end, warp_fraction(t, exponent))
        result.append(ColorStop(codec.from_channels(*channels), current.location + span * t))
    return result


def subdivide(
    stops: Iterable[StopLike],
    exponent: float = DEFAULT_EXPONENT,
    subdivisions: int = DEFAULT_SUBDIVISIONS,
    codec: Optional[ChannelCodec] = None,
) -> Gradient:
    """
    Densify a gradient so that linear rendering approximates exponential interpolation.

    Args:
        stops: Ordered stops (``ColorStop`` or ``(color, location)`` pairs). Never
            sorted and never mutated.
        exponent: Curve parameter, finite and > 0. 1.0 is linear.
        subdivisions: Sub-stops generated per segment, integer >= 1.
        codec: Channel codec for reading and building colors. Defaults to
            ``UnitRGBACodec``.

    Returns:
        A ``Gradient`` of ``(n - 1) * subdivisions + 1`` stops for ``n >= 2``
        input stops, ending with the last input stop itself. With fewer than
        two stops the input is returned unchanged.

    Raises:
        InvalidParameter: for an invalid ``exponent`` or ``subdivisions``, even
            when there is nothing to subdivide.
        UnsupportedColorFormat: if the codec cannot read a stop color.
    """
    exponent = validate_exponent(exponent)
    subdivisions = validate_subdivisions(subdivisions)
    codec = resolve_codec(codec)

    source = as_gradient(stops, stacklevel=3)
    if len(source) <= 1:
        return source

    result: List[ColorStop] = []
    for current, following in zip(source, source[1:]):
        result.extend(subdivide_segment(current, following, exponent, subdivisions, codec))
    result.append(source[-1])
    return Gradient._trusted(tuple(result))
