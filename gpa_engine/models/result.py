"""
Result data models.

Contains dataclasses for validation problems, window selections, target
projections and the combined report handed to the presentation layer.
"""

from dataclasses import dataclass, field
from enum import Enum
from decimal import Decimal
from typing import Optional

from .course import CourseRecord


# Issue codes carried on ValidationIssue.code
OUT_OF_BOUNDS_CREDITS = "OUT_OF_BOUNDS_CREDITS"
UNKNOWN_GRADE_SYMBOL = "UNKNOWN_GRADE_SYMBOL"
NAME_TOO_LONG = "NAME_TOO_LONG"
MISSING_VALUE = "MISSING_VALUE"
COURSE_COUNT = "COURSE_COUNT"
DUPLICATE_ID = "DUPLICATE_ID"


@dataclass(frozen=True)
class ValidationIssue:
    """
    One field-level problem found by the validator.

    Batch-level problems (too many courses, duplicate ids) use
    record_id=None for the course count and the duplicated id otherwise.
    """
    record_id: Optional[str]
    field: str
    message: str
    code: str = ""


@dataclass(frozen=True)
class WindowSlice:
    """
    A record that fell inside a credit window.

    credits is the part of the record that was used. It is smaller than
    record.credits only for the single boundary record that straddles the
    start of the window.
    """
    record: CourseRecord
    credits: Decimal

    @property
    def is_partial(self) -> bool:
        return self.credits < self.record.credits


@dataclass(frozen=True)
class TargetProjection:
    """
    Average needed over planned credits to reach a target GPA.

    Example:
        current 3.2 over 60 credits, target 3.5, 30 planned credits
        -> required_average 4.1, achievable False on a 4.0 scale
    """
    target: Decimal
    planned_credits: Decimal
    required_average: Decimal
    achievable: bool

    def to_dict(self) -> dict:
        return {
            "target": str(self.target),
            "planned_credits": str(self.planned_credits),
            "required_average": str(self.required_average),
            "achievable": self.achievable,
        }


@dataclass
class GPAReport:
    """
    Everything one calculation produced.

    When validation fails `views` is empty and `issues` explains why.
    """
    scale_name: str
    views: dict = field(default_factory=dict)     # view name -> ViewResult
    issues: list = field(default_factory=list)    # ValidationIssue objects
    total_courses: int = 0
    total_credits: Decimal = Decimal("0")

    @property
    def is_valid(self) -> bool:
        return not self.issues

    def to_dict(self) -> dict:
        return {
            "scale": self.scale_name,
            "total_courses": self.total_courses,
            "total_credits": str(self.total_credits),
            "views": {name: r.to_dict() for name, r in self.views.items()},
            "issues": [
                {"record_id": i.record_id, "field": i.field,
                 "message": i.message, "code": i.code}
                for i in self.issues
            ],
        }


class StandingTier(Enum):
    """
    Competitiveness band for a GPA value.

    EXCELLENT: competitive for top-tier programs (3.6+)
    COMPETITIVE: meets the usual threshold (3.5+)
    GOOD: above the practical minimum (3.0+)
    KEEP_IMPROVING: below the practical minimum
    NO_DATA: the view had no GPA-bearing credits
    """
    EXCELLENT = "Excellent"
    COMPETITIVE = "Competitive"
    GOOD = "Good"
    KEEP_IMPROVING = "Keep Improving"
    NO_DATA = "No Data"
