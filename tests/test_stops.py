import dataclasses
import pytest

from expogradient import ColorStop, Gradient, UnsupportedColorFormat
from expogradient.colors import ColorRGBINT, ColorUnitRGBA


def test_color_stop_is_frozen():
    stop = ColorStop("#ff0000", 0.25)
    with pytest.raises(dataclasses.FrozenInstanceError):
        stop.location = 0.5
    color, location = stop
    assert (color, location) == ("#ff0000", 0.25)


def test_color_stop_structural_equality():
    assert ColorStop((1, 0, 0), 0.5) == ColorStop((1, 0, 0), 0.5)
    assert ColorStop((1, 0, 0), 0.5) != ColorStop((1, 0, 0), 0.6)


def test_gradient_from_pairs():
    gradient = Gradient([("#000", 0), ColorStop("#fff", 1.0)])
    assert gradient.locations == [0.0, 1.0]
    assert isinstance(gradient.locations[0], float)
    assert gradient.colors == ["#000", "#fff"]
    assert gradient[1] == ColorStop("#fff", 1.0)


def test_gradient_rejects_bad_items():
    with pytest.raises(TypeError):
        Gradient(["#000"])


def test_from_colors_evenly_spaced():
    gradient = Gradient.from_colors(["#f00", "#0f0", "#00f", "#fff", "#000"])
    assert gradient.locations == [0.0, 0.25, 0.5, 0.75, 1.0]
    assert gradient.colors[2] == "#00f"


def test_from_colors_edge_cases():
    assert len(Gradient.from_colors([])) == 0
    assert Gradient.from_colors(["#f00"]).stops == (ColorStop("#f00", 0.0),)


def test_from_stops_matches_constructor():
    stops = [ColorStop("#f00", 0.1), ColorStop("#00f", 0.9)]
    assert Gradient.from_stops(stops) == Gradient(stops)


def test_decreasing_locations_warn_but_keep_order():
    with pytest.warns(UserWarning):
        gradient = Gradient([("#f00", 0.8), ("#00f", 0.2)])
    assert gradient.locations == [0.8, 0.2]


def test_equal_locations_do_not_warn(recwarn):
    Gradient([("#f00", 0.5), ("#00f", 0.5)])
    assert len(recwarn) == 0


def test_gradient_is_a_sequence():
    gradient = Gradient.from_colors(["#f00", "#0f0", "#00f"])
    assert len(gradient) == 3
    assert list(gradient) == list(gradient.stops)
    assert isinstance(gradient[1:], Gradient)
    assert gradient[1:].locations == [0.5, 1.0]
    assert gradient[-1].color == "#00f"
    assert ColorStop("#0f0", 0.5) in gradient


def test_normalized():
    gradient = Gradient([(ColorRGBINT((255, 0, 0)), 0.0), ("#0000ff80", 1.0)])
    normalized = gradient.normalized()
    assert normalized.colors[0] == ColorUnitRGBA((1.0, 0.0, 0.0, 1.0))
    assert normalized.colors[1].alpha == pytest.approx(128 / 255)
    assert normalized.locations == gradient.locations


def test_normalized_fails_early():
    with pytest.raises(UnsupportedColorFormat):
        Gradient([("not a color", 0.0)]).normalized()


@pytest.mark.parametrize("build", [Gradient, Gradient.from_stops])
def test_unordered_warning_points_at_caller(build):
    with pytest.warns(UserWarning) as record:
        build([("#f00", 0.8), ("#00f", 0.2)])
    assert record[0].filename == __file__
