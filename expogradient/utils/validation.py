"""Parameter checks shared by the interpolator, the subdivider and the renderer."""
import math
from numbers import Integral, Real

from ..exceptions import InvalidParameter


def validate_exponent(exponent: float) -> float:
    """
    Check that ``exponent`` is a finite real number strictly greater than zero.

    Returns:
        The exponent as a float.

    Raises:
        InvalidParameter: if the exponent is not a real number, not finite, or <= 0.
    """
    if isinstance(exponent, bool) or not isinstance(exponent, Real):
        raise InvalidParameter(f"exponent must be a real number, got {type(exponent).__name__}")
    exponent = float(exponent)
    if not math.isfinite(exponent) or exponent <= 0:
        raise InvalidParameter(f"exponent must be finite and > 0, got {exponent}")
    return exponent


def validate_positive_int(value: int, name: str) -> int:
    """Check that ``value`` is an integer >= 1 (bools are rejected)."""
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidParameter(f"{name} must be an integer, got {type(value).__name__}")
    if value < 1:
        raise InvalidParameter(f"{name} must be >= 1, got {value}")
    return int(value)


def validate_subdivisions(subdivisions: int) -> int:
    return validate_positive_int(subdivisions, "subdivisions")
