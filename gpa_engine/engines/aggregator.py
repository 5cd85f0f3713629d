"""
GPA Aggregator.

The weighted-average core every view goes through. Given records, a grade
scale and an optional filter it produces one ViewResult.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Optional

from ..config import GPA_DECIMAL_PLACES
from ..models import CourseRecord, GradeScale, ViewResult, RecordFilter

logger = logging.getLogger(__name__)


def round_half_up(value: Decimal, places: int) -> Decimal:
    """Round a Decimal to `places` decimal places, halves away from zero."""
    return value.quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP)


class GPAAggregator:
    """
    Computes a credit-weighted GPA over a filtered set of records.

    ═══════════════════════════════════════════════════════════════════════════
    ALGORITHM
    ═══════════════════════════════════════════════════════════════════════════

    1. Keep records that pass the filter (no filter = every record)
    2. Resolve each grade; neutral grades (P, S, ...) drop out of BOTH the
       numerator and the denominator
    3. numerator   = Σ credits × quality_point
       denominator = Σ credits
    4. denominator == 0  ->  value is None (not 0.0, which means all F's)
    5. value = numerator / denominator, rounded ONCE with ROUND_HALF_UP

    NUMERIC SEMANTICS:
    All arithmetic is Decimal. Products of finite decimals are exact, so the
    sums do not depend on record order. Never round per record.

    CONTRACT:
    Input must already have passed RecordValidator. An unknown grade symbol
    here raises UnknownGradeSymbol instead of being skipped.

    ═══════════════════════════════════════════════════════════════════════════
    """

    def __init__(self, decimal_places: int = GPA_DECIMAL_PLACES):
        self.decimal_places = decimal_places

    def aggregate(self, records: Iterable[CourseRecord], scale: GradeScale,
                  predicate: Optional[RecordFilter] = None) -> ViewResult:
        """
        Compute the GPA of every record matching `predicate`.

        Args:
            records: Validated course records
            scale: Grade scale to resolve symbols against
            predicate: Record filter, None for the overall GPA

        Returns:
            ViewResult with value None when no GPA-bearing credits matched
        """
        matched = [r for r in records if predicate is None or predicate(r)]

        contributions = []
        for record in matched:
            quality_point, counts = scale.resolve(record.grade_symbol)
            if not counts:
                continue
            contributions.append((record.credits, quality_point))

        return self.combine(contributions, course_count=len(matched))

    def combine(self, contributions: list, course_count: int = 0) -> ViewResult:
        """
        Turn (credits, quality_point) pairs into a ViewResult.

        Shared with CreditWindowSelector so windowed and unwindowed views use
        the same formula and rounding.
        """
        quality_points = sum((c * qp for c, qp in contributions), Decimal("0"))
        credits = sum((c for c, _ in contributions), Decimal("0"))

        if credits == 0:
            logger.debug("No GPA-bearing credits among %d records", course_count)
            return ViewResult(
                value=None,
                credits_used=credits,
                quality_points=quality_points,
                course_count=course_count,
            )

        value = round_half_up(quality_points / credits, self.decimal_places)
        return ViewResult(
            value=value,
            credits_used=credits,
            quality_points=quality_points,
            course_count=course_count,
        )
