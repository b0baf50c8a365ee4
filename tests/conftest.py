import pytest

from expogradient.colors import ColorUnitRGB, ColorUnitRGBA


@pytest.fixture
def red():
    return ColorUnitRGB((1.0, 0.0, 0.0))


@pytest.fixture
def blue():
    return ColorUnitRGB((0.0, 0.0, 1.0))


@pytest.fixture
def green():
    return ColorUnitRGBA((0.0, 1.0, 0.0, 1.0))
