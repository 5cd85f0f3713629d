"""
Course data models.

Contains the CourseRecord dataclass that represents one line of a
student's academic record, and CreditBounds which holds the structural
limits a batch of records is validated against.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ..config import (
    MIN_CREDITS,
    MAX_CREDITS,
    MAX_COURSE_NAME_LENGTH,
    MIN_COURSES,
    MAX_COURSES,
)


@dataclass(frozen=True)
class CourseRecord:
    """
    Represents a single course attempt from the student's record.

    This is the core data unit that flows through the engine. Records are
    immutable snapshots: the UI layer builds a fresh list on every edit and
    hands it over, the engine never modifies them.

    REPEATED COURSES:
    Application services such as VMCAS and AMCAS count every attempt. Two
    records with the same name are two independent attempts and both
    contribute to every aggregate. `is_repeated` is informational only.

    Attributes:
        id: Opaque unique identifier supplied by the caller
        name: Free-text label (e.g., "Organic Chemistry I"), opaque to the engine
        credits: Credit hours as a Decimal, or None if the field was left empty
        grade_symbol: Key into a GradeScale (e.g., "B+"), or None if empty
        category: Caller-defined tag used by partitioned views (e.g., "science")
        is_prerequisite: Whether the course is a program prerequisite
        sequence_index: Chronological position; larger means more recent
        is_repeated: Caller marked this as a retake of an earlier attempt
    """
    id: str
    name: str
    credits: Optional[Decimal]
    grade_symbol: Optional[str]
    category: str = ""
    is_prerequisite: bool = False
    sequence_index: int = 0
    is_repeated: bool = False

    def __post_init__(self):
        # Accept plain numbers from callers but keep arithmetic in Decimal.
        # str() first so 0.1 becomes Decimal("0.1"), not its binary expansion.
        if isinstance(self.credits, (int, float)) and not isinstance(self.credits, bool):
            object.__setattr__(self, "credits", Decimal(str(self.credits)))


@dataclass(frozen=True)
class CreditBounds:
    """
    Structural limits for a batch of course records.

    The defaults are the veterinary calculator's form limits. Other
    institutions use narrower credit ranges (0.5-8 is common), so a caller
    can construct its own bounds per configuration.
    """
    min_credits: Decimal = MIN_CREDITS
    max_credits: Decimal = MAX_CREDITS
    max_name_length: int = MAX_COURSE_NAME_LENGTH
    min_courses: int = MIN_COURSES
    max_courses: int = MAX_COURSES
