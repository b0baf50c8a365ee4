from .format_type import FormatType, max_channel_value, format_classes
from .color_types import Scalar, ScalarVector, Channels, ColorMode
from .unit_point import UnitPoint

__all__ = [
    "FormatType", "max_channel_value", "format_classes",
    "Scalar", "ScalarVector", "Channels", "ColorMode",
    "UnitPoint",
]
