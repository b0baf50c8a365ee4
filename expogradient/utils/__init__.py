from .default import DEFAULT_EXPONENT, DEFAULT_SUBDIVISIONS
from .dimension import get_dimension
from .validation import validate_exponent, validate_positive_int, validate_subdivisions

__all__ = [
    "DEFAULT_EXPONENT", "DEFAULT_SUBDIVISIONS",
    "get_dimension",
    "validate_exponent", "validate_positive_int", "validate_subdivisions",
]
