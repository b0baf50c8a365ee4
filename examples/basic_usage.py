"""Basic expogradient usage examples.

Run directly with:
    python examples/basic_usage.py
"""
from expogradient import (
    ColorRGBINT,
    ColorStop,
    ExponentialGradient,
    Gradient,
    UnitPoint,
    lerp_exp,
    subdivide,
)
from expogradient.render import rasterize


def demonstrate_interpolation() -> None:
    # Halfway along a quadratic curve only a quarter of the way is covered.
    red = ColorRGBINT((255, 0, 0))
    blue = ColorRGBINT((0, 0, 255))
    print("Quadratic midpoint:", lerp_exp(red, blue, 0.5, 2.0).value)
    print("Square-root midpoint:", lerp_exp(red, blue, 0.5, 0.5).value)


def demonstrate_subdivision() -> None:
    stops = subdivide(
        [ColorStop("#ff0000", 0.0), ColorStop("#0000ff", 1.0)],
        exponent=2.0,
        subdivisions=4,
    )
    for stop in stops:
        print(f"{stop.location:.2f}", stop.color)

    # Plain color lists are spaced evenly.
    evenly = Gradient.from_colors(["#000", "#f00", "#ff0", "#fff"])
    print("Even locations:", evenly.locations)


def demonstrate_rendering() -> None:
    grad = ExponentialGradient.from_colors(
        ["#000000", "#ffffff"],
        start_point=UnitPoint.top_leading,
        end_point=UnitPoint.bottom_trailing,
        exponent=3.0,
    )
    linear = grad.to_linear()
    print("Stops handed to the linear renderer:", len(linear.stops))
    print("Raster shape:", rasterize(linear, 16, 16).shape)


if __name__ == "__main__":
    demonstrate_interpolation()
    demonstrate_subdivision()
    demonstrate_rendering()
