from __future__ import annotations
from typing import Any, ClassVar, Tuple, cast, Self
from boundednumbers.functions import clamp
from ..types.format_type import FormatType, format_classes, max_channel_value
from ..types.color_types import ColorMode, Scalar, ScalarVector
from ..utils import get_dimension


class ColorBase:
    __slots__ = ('_value', '_is_frozen')  # prevents adding new attributes → immutability

    num_channels: ClassVar[int] = 3
    mode:       ClassVar[ColorMode]
    maxima:     ClassVar[Tuple[Scalar, ...]]
    format_type: ClassVar[FormatType]

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, '_is_frozen', False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def __init__(self, value: ScalarVector | ColorBase) -> None:
        if self.num_channels != len(self.maxima):
            raise ValueError(f"{self.mode} expects {self.maxima!r}-shaped maxima")

        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            value = value.rescaled(self.format_type).value
            if len(value) != self.num_channels:
                if self.num_channels == 4:
                    value = value + (self.maxima[-1],)
                else:
                    value = value[:self.num_channels]

        value_dim = get_dimension(value)
        if value_dim != self.num_channels:
            raise ValueError(f"{self.mode} expects {self.maxima!r}-shaped value, got {value!r}")

        # type enforcement, then clamp to maxima
        cast_type = format_classes[self.format_type]
        value = tuple(
            cast_type(clamp(cast_type(v), 0, m))
            for v, m in zip(cast(Tuple[Any, ...], value), self.maxima)
        )

        # safe assignment; __setattr__ still allows it during init
        self._value = value

        # freeze instance — no more writes allowed
        super().__setattr__('_is_frozen', True)

    # ------------------ READ-ONLY PROPERTIES ------------------
    @property
    def value(self) -> Tuple[Scalar, ...]:
        return self._value

    @property
    def has_alpha(self) -> bool:
        """Check if this color space includes an alpha channel."""
        return self.mode.endswith('a')

    def rescaled(self, format_type: FormatType) -> ColorBase:
        """
        Return the same color expressed in another format (INT, FLOAT or PERCENTAGE).

        INT targets are rounded to the nearest integer.
        """
        from .rgb import rgb_tuple_to_class
        if format_type == self.format_type:
            return self
        src_max = max_channel_value[self.format_type]
        cls = rgb_tuple_to_class[(self.mode, format_type)]
        dst_max = max_channel_value[format_type]
        scaled = tuple(float(v) / src_max * dst_max for v in self.value)
        if format_type == FormatType.INT:
            scaled = tuple(round(v) for v in scaled)
        return cls(scaled)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase):
            return NotImplemented
        return (
            self.mode == other.mode
            and self.format_type == other.format_type
            and self.value == other.value
        )

    def __hash__(self) -> int:
        return hash((self.mode, self.format_type, self.value))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value!r})"


class WithAlpha:
    """
    Mixin for a ColorBase subclass that includes an alpha channel.
    Assumes alpha is the *last* channel.
    """

    # Tell static checkers these come from the real subclass
    num_channels: ClassVar[int]
    maxima: ClassVar[Tuple[Scalar, ...]]
    mode: ClassVar[ColorMode]
    value: Tuple[Scalar, ...]

    alpha_index: ClassVar[int] = -1

    @property
    def alpha(self) -> Scalar:
        return self.value[self.alpha_index]

    @property
    def alpha_max(self) -> Scalar:
        return self.maxima[self.alpha_index]

    def with_alpha(self, alpha: Scalar) -> Self:
        """Return a new instance with the alpha channel replaced (clamped to the format maximum)."""
        a = clamp(alpha, 0, self.alpha_max)
        return self.__class__(self.value[:-1] + (a,))  # type: ignore


def build_registry(*classes: type[ColorBase]):
    return {
        (cls.mode, cls.format_type): cls
        for cls in classes
    }
