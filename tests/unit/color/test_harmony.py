"""Tests for scales, harmonies and semantic suggestions."""

import pytest

from hueprint.core.color.conversion import in_srgb_gamut
from hueprint.core.color.harmony import (
    analogous,
    complementary,
    derived_color,
    generate_scale,
    monochromatic,
    semantic_suggestions,
    tetradic,
    triadic,
)
from hueprint.core.color.models import Color


class TestDerivedColor:
    """Rounding and clamping of derived colors."""

    def test_rounds_and_wraps(self):
        color = derived_color(0.12345, 0.0125, 359.96)

        assert color.l == 0.123
        assert color.c == 0.013
        assert color.h == 0.0

    def test_clamps_lightness(self):
        assert derived_color(1.2, 0.1, 10).l == 1.0
        assert derived_color(-0.2, 0.1, 10).l == 0.0

    def test_negative_hue_wraps(self):
        assert derived_color(0.5, 0.1, -30).h == 330.0


class TestScale:
    """11-step scale generation."""

    def test_base_position_clamped(self):
        assert generate_scale(Color(l=0.9, c=0.1, h=200))[5].l == 0.7
        assert generate_scale(Color(l=0.2, c=0.1, h=200))[5].l == 0.4
        assert generate_scale(Color(l=0.55, c=0.1, h=200))[5].l == 0.55

    def test_fixed_positions(self):
        scale = generate_scale(Color(l=0.5, c=0.1, h=200))

        assert scale[0].l == 0.04
        assert scale[10].l == 0.98

    def test_achromatic_base_stays_achromatic(self):
        assert all(step.c == 0.0 for step in generate_scale(Color(l=0.5, c=0.0, h=0)))

    def test_chroma_tapers_toward_light_end(self):
        scale = generate_scale(Color(l=0.5, c=0.1, h=250))

        assert scale[10].c < scale[5].c

    @pytest.mark.parametrize(
        "color",
        [Color(l=0.5, c=0.37, h=145), Color(l=0.9, c=0.3, h=30), Color(l=0.3, c=0.4, h=265)],
    )
    def test_steps_clipped_into_gamut(self, color: Color):
        for step in generate_scale(color):
            assert in_srgb_gamut(step, epsilon=5e-3)


class TestHarmonies:
    """Fixed hue offsets with wrap-around."""

    def test_complementary(self):
        result = complementary(Color(l=0.65, c=0.12, h=240))

        assert result.h == 60.0
        assert result.l == 0.3
        assert result.c == 0.144

    def test_complementary_for_dark_base_is_light(self):
        assert complementary(Color(l=0.4, c=0.1, h=10)).l == 0.7

    def test_complementary_chroma_capped(self):
        assert complementary(Color(l=0.5, c=0.3, h=10)).c == 0.3

    def test_offsets_wrap(self):
        base = Color(l=0.5, c=0.1, h=300)

        assert [c.h for c in triadic(base)] == [60.0, 180.0]
        assert [c.h for c in analogous(base)] == [330.0, 270.0]
        assert [c.h for c in tetradic(base)] == [30.0, 120.0, 210.0]

    def test_analogous_wraps_past_zero(self):
        assert analogous(Color(l=0.5, c=0.1, h=350))[0].h == 20.0

    def test_tetradic_middle_is_complementary(self):
        base = Color(l=0.5, c=0.1, h=45)
        assert tetradic(base)[1] == complementary(base)

    def test_monochromatic_offsets_and_clamp(self):
        result = monochromatic(Color(l=0.1, c=0.05, h=100))

        assert [c.l for c in result] == [0.0, 0.0, 0.2, 0.3]
        assert all(c.h == 100.0 and c.c == 0.05 for c in result)


class TestSemanticSuggestions:
    """Role hues and lightness windows."""

    def test_canonical_hues(self):
        suggestions = semantic_suggestions(Color(l=0.65, c=0.12, h=240))

        assert suggestions.danger.h == 15.0
        assert suggestions.success.h == 135.0
        assert suggestions.warning.h == 45.0
        assert suggestions.info.h == 220.0

    def test_lightness_windows(self):
        suggestions = semantic_suggestions(Color(l=0.65, c=0.12, h=240))

        assert suggestions.danger.l == 0.7
        assert suggestions.warning.l == 0.8
        assert 0.6 <= suggestions.success.l <= 0.75
        assert 0.6 <= suggestions.info.l <= 0.75

    def test_chroma_caps(self):
        suggestions = semantic_suggestions(Color(l=0.5, c=0.4, h=0))

        assert suggestions.danger.c == 0.25
        assert suggestions.success.c == 0.2
        assert suggestions.warning.c == 0.2
        assert suggestions.info.c == 0.2
