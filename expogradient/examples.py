from __future__ import annotations

import numpy as np

from .gradient import ExponentialGradient
from .render import rasterize
from .stops import Gradient
from .types.unit_point import UnitPoint


def to_uint8(image: np.ndarray) -> np.ndarray:
    """Unit RGBA float image to an 8-bit array ready for ``PIL.Image.fromarray``."""
    return np.round(np.clip(image, 0.0, 1.0) * 255).astype(np.uint8)


def example(output_path=None, show=True):
    """Black to white with a strong slow start, left to right."""
    from PIL import Image

    grad = ExponentialGradient.from_colors(
        ["#000000", "#ffffff"],
        start_point=UnitPoint.leading,
        end_point=UnitPoint.trailing,
        exponent=3.0,
        subdivisions=64,
    )
    img = Image.fromarray(to_uint8(rasterize(grad.to_linear(), 500, 100)))
    if output_path:
        img.save(output_path)
    if show:
        img.show()
    return img


def example_comparison(output_path=None, show=True, exponents=(0.5, 1.0, 2.0, 4.0)):
    """One horizontal band per exponent over the same sunset stops, stacked top to bottom."""
    from PIL import Image

    stops = Gradient([
        ("#1a0b3b", 0.0),
        ("#c2185b", 0.45),
        ("#ff9800", 0.8),
        ("#fff59d", 1.0),
    ])
    bands = [
        rasterize(
            ExponentialGradient(stops, UnitPoint.leading, UnitPoint.trailing, exponent, 48).to_linear(),
            500,
            60,
        )
        for exponent in exponents
    ]
    img = Image.fromarray(to_uint8(np.concatenate(bands, axis=0)))
    if output_path:
        img.save(output_path)
    if show:
        img.show()
    return img
