"""
Data models for the GPA engine.

This package contains all dataclasses used throughout the engine.
These serve as "contracts" between the engines, the data layer and
whatever UI sits on top.
"""

from .course import CourseRecord, CreditBounds
from .grade_scale import GradeScale, GradeValue
from .view import (
    AggregationView,
    ViewResult,
    RecordFilter,
    by_category,
    prerequisites_only,
    all_of,
)
from .result import (
    ValidationIssue,
    WindowSlice,
    TargetProjection,
    GPAReport,
    StandingTier,
)

__all__ = [
    # Course models
    "CourseRecord",
    "CreditBounds",
    # Grade scales
    "GradeScale",
    "GradeValue",
    # Views
    "AggregationView",
    "ViewResult",
    "RecordFilter",
    "by_category",
    "prerequisites_only",
    "all_of",
    # Results
    "ValidationIssue",
    "WindowSlice",
    "TargetProjection",
    "GPAReport",
    "StandingTier",
]
