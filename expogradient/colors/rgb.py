from typing import ClassVar, Tuple
from ..types.format_type import FormatType
from .color_base import ColorBase, WithAlpha, build_registry


class ColorRGBINT(ColorBase):
    num_channels: ClassVar[int] = 3
    mode: ClassVar[str] = "rgb"
    maxima: ClassVar[Tuple[int, int, int]] = (255, 255, 255)
    format_type: ClassVar[FormatType] = FormatType.INT


class ColorRGBAINT(ColorBase, WithAlpha):
    num_channels: ClassVar[int] = 4
    mode: ClassVar[str] = "rgba"
    maxima: ClassVar[Tuple[int, int, int, int]] = (255, 255, 255, 255)
    format_type: ClassVar[FormatType] = FormatType.INT


class ColorUnitRGB(ColorBase):
    num_channels: ClassVar[int] = 3
    mode: ClassVar[str] = "rgb"
    maxima: ClassVar[Tuple[float, float, float]] = (1.0, 1.0, 1.0)
    format_type: ClassVar[FormatType] = FormatType.FLOAT


class ColorUnitRGBA(ColorBase, WithAlpha):
    num_channels: ClassVar[int] = 4
    mode: ClassVar[str] = "rgba"
    maxima: ClassVar[Tuple[float, float, float, float]] = (1.0, 1.0, 1.0, 1.0)
    format_type: ClassVar[FormatType] = FormatType.FLOAT


class ColorPercentageRGB(ColorBase):
    num_channels: ClassVar[int] = 3
    mode: ClassVar[str] = "rgb"
    maxima: ClassVar[Tuple[float, float, float]] = (100.0, 100.0, 100.0)
    format_type: ClassVar[FormatType] = FormatType.PERCENTAGE


class ColorPercentageRGBA(ColorBase, WithAlpha):
    num_channels: ClassVar[int] = 4
    mode: ClassVar[str] = "rgba"
    maxima: ClassVar[Tuple[float, float, float, float]] = (100.0, 100.0, 100.0, 100.0)
    format_type: ClassVar[FormatType] = FormatType.PERCENTAGE


RGB = ColorRGBINT
RGBA = ColorRGBAINT


rgb_tuple_to_class = build_registry(
    ColorRGBINT,
    ColorRGBAINT,
    ColorUnitRGB,
    ColorUnitRGBA,
    ColorPercentageRGB,
    ColorPercentageRGBA,
)


def get_color_class(mode: str, format_type: FormatType) -> type[ColorBase]:
    color_class = rgb_tuple_to_class.get((mode, format_type))
    if color_class is None:
        raise ValueError(
            f"Unsupported color mode/format combination: {mode}/{format_type}"
        )
    return color_class
