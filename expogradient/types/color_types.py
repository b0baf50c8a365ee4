from __future__ import annotations
from typing import Literal, Tuple

Scalar = int | float
ScalarVector = Tuple[Scalar, ...]
Channels = Tuple[float, float, float, float]
ColorMode = Literal["rgb", "rgba"]
