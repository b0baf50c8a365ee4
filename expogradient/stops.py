"""Color stops and the ordered stop sequence they form."""
from __future__ import annotations
import warnings
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Optional, Sequence, Tuple, Union, overload

from .colors.channels import ChannelCodec, resolve_codec


@dataclass(frozen=True)
class ColorStop:
    """A color anchored at a location along the gradient axis."""
    color: Any
    location: float

    def __iter__(self):
        yield self.color
        yield self.location


StopLike = Union[ColorStop, Tuple[Any, float]]


def warn_if_unordered(stops: Sequence[ColorStop], stacklevel: int) -> None:
    """
    Warn when locations decrease anywhere along ``stops``.

    ``stacklevel`` counts from this function, as in ``warnings.warn``.
    """
    if any(b.location < a.location for a, b in zip(stops, stops[1:])):
        warnings.warn(
            "Gradient stop locations are not non-decreasing; "
            "stops are used in the given order",
            UserWarning,
            stacklevel=stacklevel,
        )


def as_stop(item: StopLike) -> ColorStop:
    if isinstance(item, ColorStop):
        return item
    try:
        color, location = item
    except (TypeError, ValueError):
        raise TypeError(f"Expected a ColorStop or a (color, location) pair, got {item!r}") from None
    return ColorStop(color, float(location))


class Gradient(Sequence[ColorStop]):
    """
    Immutable ordered sequence of ``ColorStop``.

    Stops are kept in the order given. Decreasing locations are legal but
    trigger a ``UserWarning``.
    """
    __slots__ = ('_stops',)

    def __init__(self, stops: Iterable[StopLike] = ()) -> None:
        self._stops: Tuple[ColorStop, ...] = tuple(as_stop(s) for s in stops)
        warn_if_unordered(self._stops, stacklevel=3)

    @classmethod
    def from_stops(cls, stops: Iterable[StopLike]) -> Gradient:
        return as_gradient(stops, stacklevel=3)

    @classmethod
    def from_colors(cls, colors: Iterable[Any]) -> Gradient:
        """Evenly space ``colors`` at ``i / (n - 1)``; a lone color sits at 0.0."""
        colors = list(colors)
        n = len(colors)
        if n == 1:
            return cls([ColorStop(colors[0], 0.0)])
        return cls(ColorStop(c, i / (n - 1)) for i, c in enumerate(colors))

    @classmethod
    def _trusted(cls, stops: Tuple[ColorStop, ...]) -> Gradient:
        # skips conversion and the ordering warning for internally built sequences
        instance = cls.__new__(cls)
        instance._stops = stops
        return instance

    @property
    def stops(self) -> Tuple[ColorStop, ...]:
        return self._stops

    @property
    def colors(self) -> List[Any]:
        return [s.color for s in self._stops]

    @property
    def locations(self) -> List[float]:
        return [s.location for s in self._stops]

    def normalized(self, codec: Optional[ChannelCodec] = None) -> Gradient:
        """Re-express every color through ``codec``, failing early on unsupported colors."""
        codec = resolve_codec(codec)
        return Gradient._trusted(tuple(
            ColorStop(codec.from_channels(*codec.to_channels(s.color)), s.location)
            for s in self._stops
        ))

    @overload
    def __getitem__(self, index: int) -> ColorStop: ...
    @overload
    def __getitem__(self, index: slice) -> Gradient: ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Gradient._trusted(self._stops[index])
        return self._stops[index]

    def __len__(self) -> int:
        return len(self._stops)

    def __iter__(self) -> Iterator[ColorStop]:
        return iter(self._stops)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Gradient):
            return self._stops == other._stops
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._stops)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({list(self._stops)!r})"


def as_gradient(stops: Iterable[StopLike], stacklevel: int) -> Gradient:
    """
    Return ``stops`` as a ``Gradient``, reusing it when it already is one.

    ``stacklevel`` counts from this function, as in ``warnings.warn``, so
    library entry points can attribute the ordering warning to their caller.
    """
    if isinstance(stops, Gradient):
        return stops
    stops = tuple(as_stop(s) for s in stops)
    warn_if_unordered(stops, stacklevel=stacklevel + 1)
    return Gradient._trusted(stops)
