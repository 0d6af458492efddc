"""Tests for WCAG and APCA contrast."""

import pytest

from hueprint.core.color.accessibility import (
    BLACK,
    WHITE,
    apca_contrast,
    contrast_against,
    relative_luminance,
    reported_ratio,
    wcag_contrast_ratio,
)
from hueprint.core.color.harmony import generate_scale
from hueprint.core.color.models import Color


class TestWcag:
    """Relative luminance and contrast ratio."""

    def test_extremes(self):
        assert relative_luminance(WHITE) == pytest.approx(1.0, abs=1e-6)
        assert relative_luminance(BLACK) == pytest.approx(0.0, abs=1e-9)
        assert reported_ratio(BLACK, WHITE) == 21.0
        assert reported_ratio(WHITE, WHITE) == 1.0

    def test_ratio_is_symmetric(self):
        a = Color(l=0.3, c=0.1, h=30)
        b = Color(l=0.8, c=0.05, h=200)

        assert wcag_contrast_ratio(a, b) == wcag_contrast_ratio(b, a)

    def test_reported_ratio_has_two_decimals(self):
        ratio = reported_ratio(Color(l=0.55, c=0.1, h=100), WHITE)
        assert ratio == round(ratio, 2)

    def test_contrast_against_flags(self):
        color = Color(l=0.0, c=0.0, h=0.0)
        result = contrast_against(color, WHITE, generate_scale(color))

        assert result.contrast_ratio == 21.0
        assert result.wcag_aa is True
        assert result.wcag_aaa is True

    def test_passing_indices_on_white_are_dark_steps(self):
        color = Color(l=0.5, c=0.1, h=250)
        result = contrast_against(color, WHITE, generate_scale(color))

        assert 0 in result.aa
        assert 10 not in result.aa
        assert set(result.aaa) <= set(result.aa)


class TestApca:
    """APCA-W3 polarity and magnitude."""

    def test_black_text_on_white(self):
        assert apca_contrast(BLACK, WHITE) == pytest.approx(106.0, abs=0.2)

    def test_white_text_on_black_is_negative(self):
        assert apca_contrast(WHITE, BLACK) == pytest.approx(-107.9, abs=0.2)

    def test_identical_colors_have_no_contrast(self):
        color = Color(l=0.6, c=0.1, h=40)
        assert apca_contrast(color, color) == 0.0

    def test_low_contrast_clipped_to_zero(self):
        assert apca_contrast(Color(l=0.98, c=0.0, h=0), WHITE) == 0.0
