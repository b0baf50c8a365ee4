DEFAULT_EXPONENT: float = 2.0
DEFAULT_SUBDIVISIONS: int = 32
