import numpy as np
import pytest

from expogradient import (
    ColorStop, Gradient, InvalidParameter, UnsupportedColorFormat,
    DEFAULT_EXPONENT, DEFAULT_SUBDIVISIONS,
)
from expogradient.colors import ColorRGBINT, UnitRGBACodec
from expogradient.render import sample_linear
from expogradient.subdivide import subdivide, subdivide_segment

codec = UnitRGBACodec()

rainbow = [
    ColorStop((1.0, 0.0, 0.0), 0.0),
    ColorStop((1.0, 1.0, 0.0, 0.5), 0.2),
    ColorStop("#00ff00", 0.55),
    ColorStop(ColorRGBINT((0, 0, 255)), 1.0),
]


def test_red_to_blue_scenario(red, blue):
    result = subdivide([ColorStop(red, 0.0), ColorStop(blue, 1.0)], exponent=2.0, subdivisions=4)
    assert len(result) == 5
    assert result.locations == [0.0, 0.25, 0.5, 0.75, 1.0]
    for stop, t in zip(result[:4], (0.0, 0.25, 0.5, 0.75)):
        r, g, b, a = codec.to_channels(stop.color)
        f = t ** 2
        assert r == pytest.approx(1.0 - f)
        assert g == 0.0
        assert b == pytest.approx(f)
        assert a == 1.0
    assert result[-1] == ColorStop(blue, 1.0)
    assert result[-1].color is blue


def test_defaults():
    assert DEFAULT_EXPONENT == 2.0
    assert DEFAULT_SUBDIVISIONS == 32
    result = subdivide([((0, 0, 0), 0.0), ((1, 1, 1), 1.0)])
    assert len(result) == 33
    assert codec.to_channels(result[16].color)[0] == pytest.approx(0.25)


@pytest.mark.parametrize("subdivisions", [1, 2, 3, 7, 32])
@pytest.mark.parametrize("n", [2, 3, 4])
def test_length_invariant(n, subdivisions):
    result = subdivide(rainbow[:n], 1.5, subdivisions)
    assert len(result) == (n - 1) * subdivisions + 1


@pytest.mark.parametrize("stops", [[], [ColorStop("#00ff00", 0.5)]])
def test_short_gradients_unchanged(stops):
    for exponent, subdivisions in ((0.3, 1), (2.0, 32), (5.0, 100)):
        result = subdivide(stops, exponent, subdivisions)
        assert list(result) == stops


def test_single_stop_returns_same_gradient(green):
    gradient = Gradient([ColorStop(green, 0.5)])
    assert subdivide(gradient, 3.0, 10) is gradient


def test_endpoint_preservation():
    result = subdivide(rainbow, 3.0, 8)
    assert result[0] is rainbow[0]
    assert result[-1] is rainbow[-1]


def test_original_stops_kept_at_segment_starts():
    subdivisions = 5
    result = subdivide(rainbow, 2.0, subdivisions)
    for i, stop in enumerate(rainbow):
        assert result[i * subdivisions] is stop


def test_locations_are_linear_regardless_of_exponent():
    linear = subdivide(rainbow, 1.0, 6).locations
    curved = subdivide(rainbow, 4.0, 6).locations
    assert linear == curved
    assert np.allclose(np.diff(curved[:6]), 0.2 / 6)


@pytest.mark.parametrize("exponent", [0.2, 1.0, 2.0, 8.0])
def test_monotonic_locations(exponent):
    locations = subdivide(rainbow, exponent, 16).locations
    assert all(b >= a for a, b in zip(locations, locations[1:]))


def test_locations_not_clamped():
    result = subdivide([((0, 0, 0), -1.0), ((1, 1, 1), 3.0)], 2.0, 4)
    assert result.locations == [-1.0, 0.0, 1.0, 2.0, 3.0]


def test_identity_at_exponent_one():
    positions = np.linspace(-0.1, 1.1, 241)
    reference = sample_linear(rainbow, positions)
    for subdivisions in (1, 3, 16):
        result = sample_linear(subdivide(rainbow, 1.0, subdivisions), positions)
        assert np.allclose(result, reference, atol=1e-12)


def test_exponent_differs_from_linear():
    positions = np.linspace(0.0, 1.0, 11)
    linear = sample_linear(rainbow, positions)
    curved = sample_linear(subdivide(rainbow, 3.0, 32), positions)
    assert not np.allclose(linear, curved)


def test_deterministic():
    assert subdivide(rainbow, 2.5, 9) == subdivide(rainbow, 2.5, 9)


def test_input_not_mutated():
    stops = list(rainbow)
    subdivide(stops, 2.0, 4)
    assert stops == rainbow


def test_accepts_pairs_and_generators():
    pairs = (((0, 0, 0), 0.0), ((1, 1, 1), 1.0))
    from_pairs = subdivide(pairs, 2.0, 4)
    from_generator = subdivide((p for p in pairs), 2.0, 4)
    assert from_pairs == from_generator
    assert isinstance(from_pairs, Gradient)


@pytest.mark.parametrize("subdivisions", [0, -3, 2.5, "4", True, None])
def test_invalid_subdivisions(subdivisions):
    with pytest.raises(InvalidParameter):
        subdivide(rainbow, 2.0, subdivisions)


@pytest.mark.parametrize("exponent", [0, -1, float("nan"), float("inf")])
def test_invalid_exponent(exponent):
    with pytest.raises(InvalidParameter):
        subdivide(rainbow, exponent, 4)


def test_invalid_parameters_rejected_for_short_input():
    with pytest.raises(InvalidParameter):
        subdivide([], 2.0, 0)
    with pytest.raises(InvalidParameter):
        subdivide([ColorStop("#fff", 0.0)], -1, 4)


def test_unsupported_color_propagates():
    with pytest.raises(UnsupportedColorFormat):
        subdivide([ColorStop("#00ff00", 0.0), ColorStop(object(), 1.0)], 2.0, 4)


def test_subdivide_segment_single_step():
    current = ColorStop((0.0, 0.0, 0.0), 0.0)
    following = ColorStop((1.0, 1.0, 1.0), 1.0)
    assert subdivide_segment(current, following, 2.0, 1, codec) == [current]


def test_out_of_range_channels_rejected():
    stops = [ColorStop((2.0, 0.0, 0.0), 0.0), ColorStop((0.0, 0.0, 0.0), 1.0)]
    with pytest.raises(UnsupportedColorFormat):
        subdivide(stops, 2.0, 4)


def test_unordered_warning_points_at_caller():
    with pytest.warns(UserWarning) as record:
        result = subdivide([("#f00", 1.0), ("#00f", 0.0)], 2.0, 2)
    assert record[0].filename == __file__
    assert result.locations == [1.0, 0.5, 0.0]
