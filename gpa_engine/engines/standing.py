"""
Standing and target planning.

Interprets a computed GPA: which competitiveness band it falls in, how far
it is from a threshold, and what average future coursework needs to reach
a target.
"""

from decimal import Decimal
from typing import Optional

from ..config import TOP_TIER_GPA, COMPETITIVE_GPA, MINIMUM_GPA, GPA_DECIMAL_PLACES
from ..models import GradeScale, ViewResult, StandingTier, TargetProjection
from .aggregator import round_half_up


def classify_standing(value: Optional[Decimal]) -> StandingTier:
    """Map a GPA to its competitiveness band (None -> NO_DATA)."""
    if value is None:
        return StandingTier.NO_DATA
    if value >= TOP_TIER_GPA:
        return StandingTier.EXCELLENT
    if value >= COMPETITIVE_GPA:
        return StandingTier.COMPETITIVE
    if value >= MINIMUM_GPA:
        return StandingTier.GOOD
    return StandingTier.KEEP_IMPROVING


def gap_to(value: Optional[Decimal], threshold: Decimal) -> Optional[Decimal]:
    """Points needed to reach `threshold`; 0 when already there, None without a GPA."""
    if value is None:
        return None
    return max(Decimal(str(threshold)) - value, Decimal("0"))


def required_average(current: ViewResult, target: Decimal, planned_credits: Decimal,
                     scale: GradeScale,
                     decimal_places: int = GPA_DECIMAL_PLACES) -> TargetProjection:
    """
    Average needed over `planned_credits` new credits to reach `target`.

        required = (target × (current_credits + planned) - current_points) / planned

    Uses the unrounded quality points of `current`, so the projection is
    not thrown off by the displayed GPA's rounding. The target is out of
    reach when the required average is above the scale's best grade.

    Raises:
        ValueError: planned_credits is not positive
    """
    target = Decimal(str(target))
    planned_credits = Decimal(str(planned_credits))
    if planned_credits <= 0:
        raise ValueError(f"Planned credits must be positive (got {planned_credits})")

    total_credits = current.credits_used + planned_credits
    needed_points = target * total_credits - current.quality_points
    required = round_half_up(needed_points / planned_credits, decimal_places)

    return TargetProjection(
        target=target,
        planned_credits=planned_credits,
        required_average=required,
        achievable=required <= scale.max_quality_point,
    )
