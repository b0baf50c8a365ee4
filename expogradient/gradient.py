"""Exponential gradient descriptor and its hand-off to a linear renderer."""
from __future__ import annotations
from dataclasses import dataclass, field
from functools import cached_property
from typing import Any, Iterable, NamedTuple, Optional

from .colors.channels import ChannelCodec
from .stops import Gradient, StopLike, as_gradient
from .subdivide import subdivide
from .types.unit_point import UnitPoint
from .utils.default import DEFAULT_EXPONENT, DEFAULT_SUBDIVISIONS
from .utils.validation import validate_exponent, validate_subdivisions


class LinearGradient(NamedTuple):
    """Everything a linear gradient primitive needs: stops, two anchors and the stop codec."""
    stops: Gradient
    start_point: UnitPoint
    end_point: UnitPoint
    codec: Optional[ChannelCodec] = None


@dataclass(frozen=True)
class ExponentialGradient:
    """
    A gradient whose segments are interpolated with ``t ** exponent``.

    The descriptor holds the original stops and curve parameters; ``stops``
    computes the subdivided sequence and ``to_linear`` packages it with the
    anchors for any linear gradient primitive.
    """
    gradient: Gradient
    start_point: UnitPoint = UnitPoint.top
    end_point: UnitPoint = UnitPoint.bottom
    exponent: float = DEFAULT_EXPONENT
    subdivisions: int = DEFAULT_SUBDIVISIONS
    codec: Optional[ChannelCodec] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.gradient, Gradient):
            object.__setattr__(self, 'gradient', as_gradient(self.gradient, stacklevel=4))
        object.__setattr__(self, 'start_point', UnitPoint(*self.start_point))
        object.__setattr__(self, 'end_point', UnitPoint(*self.end_point))
        object.__setattr__(self, 'exponent', validate_exponent(self.exponent))
        object.__setattr__(self, 'subdivisions', validate_subdivisions(self.subdivisions))

    @classmethod
    def from_colors(
        cls,
        colors: Iterable[Any],
        start_point: UnitPoint = UnitPoint.top,
        end_point: UnitPoint = UnitPoint.bottom,
        exponent: float = DEFAULT_EXPONENT,
        subdivisions: int = DEFAULT_SUBDIVISIONS,
        codec: Optional[ChannelCodec] = None,
    ) -> ExponentialGradient:
        return cls(Gradient.from_colors(colors), start_point, end_point, exponent, subdivisions, codec)

    @classmethod
    def from_stops(
        cls,
        stops: Iterable[StopLike],
        start_point: UnitPoint = UnitPoint.top,
        end_point: UnitPoint = UnitPoint.bottom,
        exponent: float = DEFAULT_EXPONENT,
        subdivisions: int = DEFAULT_SUBDIVISIONS,
        codec: Optional[ChannelCodec] = None,
    ) -> ExponentialGradient:
        return cls(as_gradient(stops, stacklevel=3), start_point, end_point, exponent, subdivisions, codec)

    @cached_property
    def stops(self) -> Gradient:
        return subdivide(self.gradient, self.exponent, self.subdivisions, self.codec)

    def to_linear(self) -> LinearGradient:
        return LinearGradient(self.stops, self.start_point, self.end_point, self.codec)
