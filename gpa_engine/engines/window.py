"""
Credit-Window Selector.

Computes "last N credits" GPAs, where only the most recent N credit hours
of coursework count and the course straddling the boundary counts in part.
"""

import logging
from decimal import Decimal
from typing import Iterable, Optional

from ..models import CourseRecord, GradeScale, ViewResult, RecordFilter, WindowSlice
from .aggregator import GPAAggregator

logger = logging.getLogger(__name__)


class CreditWindowSelector:
    """
    Selects the trailing N credits of a record and aggregates them.

    RECENCY:
    The window runs over sequence_index (largest = most recent), never over
    list position, credits or grade value. It is NOT "the best N courses".

    BOUNDARY TRUNCATION:
    VMCAS-style "last 45 credits" counts a partial course at the edge:

        records, most recent first: 10cr @ 4.0, 40cr @ 3.0     N = 45
        -> 10cr @ 4.0 in full                    (10 so far)
        -> 40cr would overflow; use 45 - 10 = 35cr @ 3.0, then stop
        -> (40.0 + 105.0) / 45 = 3.222

    Only GPA-bearing records that pass the filter take up window space.
    A Pass course in the middle of the record does not shrink the window.

    DEGENERATE WINDOW:
    If fewer than N credits are available nothing is truncated and the
    result equals the unwindowed GPA for the same filter.
    """

    def __init__(self, aggregator: Optional[GPAAggregator] = None):
        self.aggregator = aggregator or GPAAggregator()

    def select(self, records: Iterable[CourseRecord], scale: GradeScale,
               window_credits: Decimal,
               predicate: Optional[RecordFilter] = None) -> list:
        """
        Return the WindowSlices that make up the window, most recent first.

        Raises:
            ValueError: window_credits is not positive
        """
        window_credits = Decimal(str(window_credits))
        if window_credits <= 0:
            raise ValueError(f"Window must be a positive number of credits (got {window_credits})")

        candidates = []
        for record in records:
            if predicate is not None and not predicate(record):
                continue
            if not scale.resolve(record.grade_symbol).counts_toward_gpa:
                continue
            candidates.append(record)

        # sorted() is stable, so records sharing a sequence_index keep input order
        candidates = sorted(candidates, key=lambda r: r.sequence_index, reverse=True)

        slices = []
        credits_so_far = Decimal("0")
        for record in candidates:
            if credits_so_far + record.credits <= window_credits:
                slices.append(WindowSlice(record, record.credits))
                credits_so_far += record.credits
            elif credits_so_far < window_credits:
                remainder = window_credits - credits_so_far
                slices.append(WindowSlice(record, remainder))
                logger.debug(
                    "Window boundary: %s contributes %s of %s credits",
                    record.id, remainder, record.credits,
                )
                break
            else:
                break

        return slices

    def aggregate(self, records: Iterable[CourseRecord], scale: GradeScale,
                  window_credits: Decimal,
                  predicate: Optional[RecordFilter] = None) -> ViewResult:
        """
        GPA over the trailing `window_credits` credits.

        course_count is the number of records inside the window, the
        partially counted boundary record included.
        """
        slices = self.select(records, scale, window_credits, predicate)
        contributions = [
            (s.credits, scale.resolve(s.record.grade_symbol).quality_point)
            for s in slices
        ]
        return self.aggregator.combine(contributions, course_count=len(slices))
