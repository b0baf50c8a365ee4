"""
Reference linear gradient renderer.

Stands in for the linear gradient primitive of a drawing toolkit: piecewise
linear blending between stops, padded with the end colors outside the stop
range. Output is float64 unit RGBA.
"""
from __future__ import annotations
from typing import Iterable, Optional

import numpy as np

from .colors.channels import ChannelCodec, resolve_codec
from .exceptions import InvalidParameter
from .gradient import LinearGradient
from .stops import Gradient, StopLike, as_gradient
from .utils.validation import validate_positive_int


def stop_channels(stops: Gradient, codec: Optional[ChannelCodec] = None) -> np.ndarray:
    """Stop colors as an ``(n, 4)`` float64 array of unit channels."""
    codec = resolve_codec(codec)
    return np.array([codec.to_channels(s.color) for s in stops], dtype=np.float64).reshape(-1, 4)


def sample_linear(
    stops: Iterable[StopLike],
    positions: np.ndarray | float,
    codec: Optional[ChannelCodec] = None,
) -> np.ndarray:
    """
    Sample a stop list with straight-line blending between neighbouring stops.

    Args:
        stops: Stops in ascending location order.
        positions: Locations to sample, any shape.
        codec: Channel codec for reading the stop colors.

    Returns:
        Array of shape ``positions.shape + (4,)``.

    Raises:
        InvalidParameter: if there are no stops.
    """
    gradient = as_gradient(stops, stacklevel=3)
    if len(gradient) == 0:
        raise InvalidParameter("Cannot sample an empty gradient")

    positions = np.asarray(positions, dtype=np.float64)
    channels = stop_channels(gradient, codec)
    if len(gradient) == 1:
        return np.broadcast_to(channels[0], positions.shape + (4,)).copy()

    locations = np.asarray(gradient.locations, dtype=np.float64)
    flat = positions.ravel()
    # np.interp pads with the first/last value outside [locations[0], locations[-1]]
    sampled = np.stack(
        [np.interp(flat, locations, channels[:, c]) for c in range(4)],
        axis=-1,
    )
    return sampled.reshape(positions.shape + (4,))


def axis_positions(linear: LinearGradient, width: int, height: int) -> np.ndarray:
    """Projection of every pixel center onto the start->end axis, shape ``(height, width)``."""
    xs = (np.arange(width, dtype=np.float64) + 0.5) / width
    ys = (np.arange(height, dtype=np.float64) + 0.5) / height
    grid_x, grid_y = np.meshgrid(xs, ys)

    dx = linear.end_point.x - linear.start_point.x
    dy = linear.end_point.y - linear.start_point.y
    length_sq = dx * dx + dy * dy
    if length_sq == 0:
        return np.zeros((height, width), dtype=np.float64)
    return ((grid_x - linear.start_point.x) * dx + (grid_y - linear.start_point.y) * dy) / length_sq


def rasterize(
    linear: LinearGradient,
    width: int,
    height: int,
    codec: Optional[ChannelCodec] = None,
) -> np.ndarray:
    """
    Paint a ``LinearGradient`` into an ``(height, width, 4)`` unit RGBA image.

    Coincident anchors paint the first stop color everywhere. Without an explicit
    ``codec`` the one carried by ``linear`` is used.
    """
    codec = codec if codec is not None else linear.codec
    width = validate_positive_int(width, "width")
    height = validate_positive_int(height, "height")
    if len(linear.stops) == 0:
        raise InvalidParameter("Cannot rasterize an empty gradient")

    if linear.start_point == linear.end_point:
        first = stop_channels(linear.stops[:1], codec)[0]
        return np.broadcast_to(first, (height, width, 4)).copy()
    return sample_linear(linear.stops, axis_positions(linear, width, height), codec)
