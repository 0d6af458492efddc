"""Tests for temperature, lightness and weight analysis."""

import pytest

from hueprint.core.color.analysis import (
    analysis_name,
    atmospheric_weight,
    is_light,
    perceptual_weight,
    temperature,
)
from hueprint.core.color.models import AtmosphericRole, Color, Density, Temperature


@pytest.mark.parametrize(
    ("hue", "expected"),
    [
        (0.0, Temperature.WARM),
        (59.9, Temperature.WARM),
        (60.0, Temperature.NEUTRAL),
        (179.9, Temperature.NEUTRAL),
        (180.0, Temperature.COOL),
        (299.9, Temperature.COOL),
        (300.0, Temperature.WARM),
        (359.9, Temperature.WARM),
    ],
)
def test_temperature_bands(hue: float, expected: Temperature):
    assert temperature(Color(l=0.5, c=0.1, h=hue)) == expected


def test_is_light_threshold():
    assert is_light(Color(l=0.6, c=0.1, h=0)) is False
    assert is_light(Color(l=0.61, c=0.1, h=0)) is True


def test_analysis_name():
    assert analysis_name(Color(l=0.5, c=0.123, h=89.5)) == "color-90-50-12"


class TestPerceptualWeight:
    """Weight formula and density bands."""

    def test_mid_blue(self):
        result = perceptual_weight(Color(l=0.65, c=0.12, h=240))

        assert result.weight == pytest.approx(0.3675, abs=1e-3)
        assert result.density == Density.MEDIUM
        assert result.balancing_recommendation

    def test_white_is_light(self):
        assert perceptual_weight(Color(l=1.0, c=0.0, h=200)).density == Density.LIGHT

    def test_dark_saturated_red_is_heavy(self):
        result = perceptual_weight(Color(l=0.2, c=0.3, h=5))

        assert result.weight == pytest.approx(0.32 + 0.35 + 0.225, abs=1e-3)
        assert result.density == Density.HEAVY


class TestAtmosphericWeight:
    """Warm, dark, saturated colors advance."""

    def test_cool_light_recedes(self):
        result = atmospheric_weight(Color(l=0.65, c=0.12, h=240))

        assert result.distance_weight == pytest.approx(0.12, abs=1e-3)
        assert result.atmospheric_role == AtmosphericRole.BACKGROUND
        assert result.temperature == Temperature.COOL

    def test_warm_dark_advances(self):
        result = atmospheric_weight(Color(l=0.3, c=0.25, h=20))

        assert result.distance_weight == pytest.approx(0.955, abs=1e-3)
        assert result.atmospheric_role == AtmosphericRole.FOREGROUND
        assert result.temperature == Temperature.WARM

    def test_clamped_to_unit_range(self):
        result = atmospheric_weight(Color(l=0.0, c=0.5, h=10))
        assert result.distance_weight == 1.0
