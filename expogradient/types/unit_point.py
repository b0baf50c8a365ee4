from __future__ import annotations
from typing import NamedTuple


class UnitPoint(NamedTuple):
    """
    A point in unit space, x growing to the right and y growing downward.

    Used as the start and end anchors of a linear gradient. The named anchors
    are attached below the class body.
    """
    x: float
    y: float

    def lerp(self, other: UnitPoint, t: float) -> UnitPoint:
        return UnitPoint(self.x + (other.x - self.x) * t, self.y + (other.y - self.y) * t)


UnitPoint.zero = UnitPoint(0.0, 0.0)
UnitPoint.center = UnitPoint(0.5, 0.5)
UnitPoint.leading = UnitPoint(0.0, 0.5)
UnitPoint.trailing = UnitPoint(1.0, 0.5)
UnitPoint.top = UnitPoint(0.5, 0.0)
UnitPoint.bottom = UnitPoint(0.5, 1.0)
UnitPoint.top_leading = UnitPoint(0.0, 0.0)
UnitPoint.top_trailing = UnitPoint(1.0, 0.0)
UnitPoint.bottom_leading = UnitPoint(0.0, 1.0)
UnitPoint.bottom_trailing = UnitPoint(1.0, 1.0)
