"""
Aggregation view models.

An AggregationView is a named GPA request: an optional record filter and
an optional trailing credit window. ViewResult is what the reporter
returns for each view.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Optional

from .course import CourseRecord

RecordFilter = Callable[[CourseRecord], bool]


@dataclass(frozen=True)
class AggregationView:
    """
    A named computation request.

    Examples from the veterinary calculator:
        AggregationView("cumulative")
        AggregationView("science", category_filter=by_category("science"))
        AggregationView("last_45_credits", window_credits=Decimal("45"))

    Attributes:
        name: Key of this view in the report
        category_filter: Predicate a record must pass, None means all records
        window_credits: Restrict to the most recent N credits, None means no window
    """
    name: str
    category_filter: Optional[RecordFilter] = None
    window_credits: Optional[Decimal] = None

    def __post_init__(self):
        if self.window_credits is not None and not isinstance(self.window_credits, Decimal):
            object.__setattr__(self, "window_credits", Decimal(str(self.window_credits)))

    def matches(self, record: CourseRecord) -> bool:
        return self.category_filter is None or self.category_filter(record)


@dataclass(frozen=True)
class ViewResult:
    """
    Result of one view.

    value is None when no GPA-affecting credits matched the view. This is
    deliberately distinct from 0.0, which would mean an all-F record.

    Attributes:
        value: Rounded GPA, or None
        credits_used: GPA-bearing credits in the denominator (window-truncated)
        quality_points: Unrounded numerator, sum of credits x quality point
        course_count: Records that passed the filter, neutral grades included
    """
    value: Optional[Decimal]
    credits_used: Decimal
    quality_points: Decimal = Decimal("0")
    course_count: int = 0

    @property
    def has_value(self) -> bool:
        return self.value is not None

    def to_dict(self) -> dict:
        """JSON-friendly form for API callers (Decimals become strings)."""
        return {
            "value": None if self.value is None else str(self.value),
            "credits_used": str(self.credits_used),
            "quality_points": str(self.quality_points),
            "course_count": self.course_count,
        }


# =============================================================================
# FILTER HELPERS
# =============================================================================

def by_category(*categories: str) -> RecordFilter:
    """Filter matching records whose category is one of `categories`."""
    wanted = frozenset(categories)

    def _matches(record: CourseRecord) -> bool:
        return record.category in wanted
    return _matches


def prerequisites_only(record: CourseRecord) -> bool:
    return record.is_prerequisite


def all_of(*filters: RecordFilter) -> RecordFilter:
    """Combine filters; a record must pass every one of them."""
    def _matches(record: CourseRecord) -> bool:
        return all(f(record) for f in filters)
    return _matches
