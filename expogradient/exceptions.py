class ExpoGradientError(Exception):
    """Base class for errors raised by expogradient."""


class InvalidParameter(ExpoGradientError, ValueError):
    """A curve, resolution or raster parameter is outside its valid range."""


class UnsupportedColorFormat(ExpoGradientError, TypeError):
    """A color value cannot be expressed as four normalized channels."""
