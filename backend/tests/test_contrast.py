"""
Unit tests for the contrast ratio solver and contrast curves.
"""

import pytest

from huetone.services.colors import contrast
from huetone.services.colors.dynamiccolor import ContrastCurve


class TestRatio:
    """Test contrast ratio identities."""

    def test_same_tone_is_one(self):
        for tone in range(0, 101, 5):
            assert contrast.ratio_of_tones(tone, tone) == pytest.approx(1.0)

    def test_black_white_is_maximum(self):
        assert contrast.ratio_of_tones(0.0, 100.0) == pytest.approx(21.0)
        assert contrast.ratio_of_tones(100.0, 0.0) == pytest.approx(21.0)

    def test_symmetric_and_clamped(self):
        assert contrast.ratio_of_tones(30.0, 70.0) == pytest.approx(contrast.ratio_of_tones(70.0, 30.0))
        assert contrast.ratio_of_tones(-10.0, 120.0) == pytest.approx(21.0)

    def test_monotonic_in_distance(self):
        ratios = [contrast.ratio_of_tones(50.0, tone) for tone in range(50, 101, 10)]
        assert ratios == sorted(ratios)


class TestLighterDarker:
    """Test solving for a tone that reaches a ratio."""

    @pytest.mark.parametrize("tone,ratio", [(0.0, 3.0), (20.0, 4.5), (40.0, 3.0), (10.0, 7.0)])
    def test_lighter_reaches_ratio(self, tone, ratio):
        result = contrast.lighter(tone, ratio)
        assert result is not None
        assert result > tone
        assert contrast.ratio_of_tones(result, tone) >= ratio - contrast.CONTRAST_RATIO_EPSILON

    @pytest.mark.parametrize("tone,ratio", [(100.0, 3.0), (80.0, 4.5), (60.0, 3.0), (90.0, 7.0)])
    def test_darker_reaches_ratio(self, tone, ratio):
        result = contrast.darker(tone, ratio)
        assert result is not None
        assert result < tone
        assert contrast.ratio_of_tones(result, tone) >= ratio - contrast.CONTRAST_RATIO_EPSILON

    def test_lighter_is_minimal(self):
        """Any tone clearly below the returned one falls short of the ratio."""
        result = contrast.lighter(30.0, 4.5)
        below = result - contrast.LUMINANCE_GAMUT_MAP_TOLERANCE - 0.05
        assert contrast.ratio_of_tones(below, 30.0) < 4.5

    def test_darker_is_maximal(self):
        result = contrast.darker(70.0, 4.5)
        above = result + contrast.LUMINANCE_GAMUT_MAP_TOLERANCE + 0.05
        assert contrast.ratio_of_tones(above, 70.0) < 4.5

    def test_infeasible_returns_none(self):
        assert contrast.lighter(100.0, 2.0) is None
        assert contrast.lighter(60.0, 10.0) is None
        assert contrast.darker(0.0, 2.0) is None
        assert contrast.darker(40.0, 10.0) is None

    def test_out_of_range_tone_returns_none(self):
        assert contrast.lighter(-1.0, 1.5) is None
        assert contrast.lighter(101.0, 1.5) is None
        assert contrast.darker(-1.0, 1.5) is None
        assert contrast.darker(101.0, 1.5) is None

    def test_unsafe_variants_fall_back_to_extremes(self):
        assert contrast.lighter_unsafe(100.0, 2.0) == 100.0
        assert contrast.darker_unsafe(0.0, 2.0) == 0.0
        assert contrast.lighter_unsafe(20.0, 4.5) == contrast.lighter(20.0, 4.5)
        assert contrast.darker_unsafe(80.0, 4.5) == contrast.darker(80.0, 4.5)


class TestContrastCurve:
    """Test contrast level interpolation."""

    def test_anchor_points(self):
        curve = ContrastCurve(3.0, 4.5, 7.0, 11.0)
        assert curve.get(-1.0) == 3.0
        assert curve.get(0.0) == 4.5
        assert curve.get(0.5) == 7.0
        assert curve.get(1.0) == 11.0

    def test_interpolation_and_clamping(self):
        curve = ContrastCurve(3.0, 4.5, 7.0, 11.0)
        assert curve.get(-0.5) == pytest.approx(3.75)
        assert curve.get(0.25) == pytest.approx(5.75)
        assert curve.get(0.75) == pytest.approx(9.0)
        assert curve.get(-3.0) == 3.0
        assert curve.get(2.0) == 11.0
