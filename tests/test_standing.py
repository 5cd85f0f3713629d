"""
Unit Tests for standing bands and target projections.
"""

import pytest
from decimal import Decimal

from gpa_engine import StandingTier, ViewResult, classify_standing, gap_to, required_average


class TestClassifyStanding:
    """Competitiveness bands."""

    @pytest.mark.parametrize("value,tier", [
        ("4.000", StandingTier.EXCELLENT),
        ("3.600", StandingTier.EXCELLENT),
        ("3.599", StandingTier.COMPETITIVE),
        ("3.500", StandingTier.COMPETITIVE),
        ("3.000", StandingTier.GOOD),
        ("2.999", StandingTier.KEEP_IMPROVING),
        ("0.000", StandingTier.KEEP_IMPROVING),
    ])
    def test_bands(self, value, tier):
        assert classify_standing(Decimal(value)) is tier

    def test_no_value(self):
        assert classify_standing(None) is StandingTier.NO_DATA


class TestGapTo:
    """Points needed to reach a threshold."""

    def test_below_threshold(self):
        assert gap_to(Decimal("3.2"), Decimal("3.5")) == Decimal("0.3")

    def test_already_met(self):
        assert gap_to(Decimal("3.7"), Decimal("3.5")) == Decimal("0")

    def test_no_value(self):
        assert gap_to(None, Decimal("3.5")) is None


class TestRequiredAverage:
    """Projection of the average needed on future credits."""

    @pytest.fixture
    def current(self):
        # 3.2 over 60 credits
        return ViewResult(value=Decimal("3.200"), credits_used=Decimal("60"),
                          quality_points=Decimal("192"), course_count=20)

    def test_unreachable_target(self, current, vmcas_scale):
        projection = required_average(current, Decimal("3.5"), Decimal("30"), vmcas_scale)
        assert projection.required_average == Decimal("4.1")
        assert projection.achievable is False

    def test_reachable_target(self, current, vmcas_scale):
        projection = required_average(current, "3.5", "60", vmcas_scale)
        assert projection.required_average == Decimal("3.8")
        assert projection.achievable is True
        assert projection.planned_credits == Decimal("60")

    def test_higher_ceiling_scale(self, current, loader):
        # 4.1 is still possible on a 4.3 scale
        projection = required_average(current, Decimal("3.5"), Decimal("30"), loader.load_scale("cornell"))
        assert projection.achievable is True

    def test_uses_unrounded_quality_points(self, vmcas_scale):
        current = ViewResult(value=Decimal("3.664"), credits_used=Decimal("11"),
                             quality_points=Decimal("40.3"))
        projection = required_average(current, Decimal("3.7"), Decimal("11"), vmcas_scale)
        # (3.7 x 22 - 40.3) / 11 = 41.1 / 11
        assert projection.required_average == Decimal("3.736")

    def test_no_current_credits(self, vmcas_scale):
        empty = ViewResult(value=None, credits_used=Decimal("0"))
        projection = required_average(empty, Decimal("3.5"), Decimal("15"), vmcas_scale)
        assert projection.required_average == Decimal("3.5")

    @pytest.mark.parametrize("planned", ["0", "-1"])
    def test_planned_credits_must_be_positive(self, current, vmcas_scale, planned):
        with pytest.raises(ValueError):
            required_average(current, Decimal("3.5"), Decimal(planned), vmcas_scale)
