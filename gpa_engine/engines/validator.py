"""
Record Validator.

Checks a batch of course records against structural limits before any
GPA is computed.
"""

import logging
from collections import Counter
from decimal import Decimal
from typing import Optional

from ..models import CourseRecord, CreditBounds, GradeScale, ValidationIssue
from ..models.result import (
    OUT_OF_BOUNDS_CREDITS,
    UNKNOWN_GRADE_SYMBOL,
    NAME_TOO_LONG,
    MISSING_VALUE,
    COURSE_COUNT,
    DUPLICATE_ID,
)

logger = logging.getLogger(__name__)


def _format_number(value: Decimal) -> str:
    """Format a bound for messages: 20 -> "20", 0.5 -> "0.5"."""
    return format(value.normalize(), "f")


class RecordValidator:
    """
    Batch validation for course records.

    KEY RESPONSIBILITY: Find EVERY problem in one pass so the UI can flag
    all of them at once, rather than stopping at the first bad field.

    The validator never raises and never filters or modifies records. It
    returns a (possibly empty) list of ValidationIssue objects and the
    caller decides what to do:
    - block aggregation while the list is non-empty (the normal path), or
    - opt in to aggregating only the clean records via valid_subset()

    CHECKS PER RECORD:
    - credits present and within [min_credits, max_credits]
    - grade present and defined by the scale
    - name no longer than max_name_length (empty names are allowed)

    CHECKS PER BATCH:
    - number of records within [min_courses, max_courses]
    - record ids unique
    """

    def __init__(self, bounds: Optional[CreditBounds] = None):
        self.bounds = bounds or CreditBounds()

    def validate(self, records: list, scale: GradeScale,
                 bounds: Optional[CreditBounds] = None) -> list:
        """
        Validate a batch of records.

        Args:
            records: CourseRecord objects in entry order
            scale: Grade scale the records will be aggregated with
            bounds: Overrides the validator's default bounds for this call

        Returns:
            List of ValidationIssue, empty when the batch is valid
        """
        bounds = bounds or self.bounds
        issues = []

        issues.extend(self._check_batch(records, bounds))
        for record in records:
            issues.extend(self._check_record(record, scale, bounds))

        if issues:
            logger.info("Validation found %d issue(s) in %d records", len(issues), len(records))
        return issues

    def _check_batch(self, records: list, bounds: CreditBounds) -> list:
        issues = []

        if len(records) < bounds.min_courses:
            noun = "course" if bounds.min_courses == 1 else "courses"
            issues.append(ValidationIssue(
                None, "courses", f"At least {bounds.min_courses} {noun} required", COURSE_COUNT,
            ))
        elif len(records) > bounds.max_courses:
            issues.append(ValidationIssue(
                None, "courses", f"Maximum {bounds.max_courses} courses allowed", COURSE_COUNT,
            ))

        counts = Counter(r.id for r in records)
        for record_id, count in counts.items():
            if count > 1:
                issues.append(ValidationIssue(
                    record_id, "id", f"Duplicate course id ({count} records)", DUPLICATE_ID,
                ))

        return issues

    def _check_record(self, record: CourseRecord, scale: GradeScale,
                      bounds: CreditBounds) -> list:
        issues = []

        if record.name and len(record.name) > bounds.max_name_length:
            issues.append(ValidationIssue(
                record.id, "name",
                f"Name must be 1-{bounds.max_name_length} characters", NAME_TOO_LONG,
            ))

        credits = record.credits
        if credits is None:
            issues.append(ValidationIssue(record.id, "credits", "Credits required", MISSING_VALUE))
        elif (not isinstance(credits, Decimal) or not credits.is_finite()
              or not bounds.min_credits <= credits <= bounds.max_credits):
            issues.append(ValidationIssue(
                record.id, "credits",
                f"Credits must be {_format_number(bounds.min_credits)}-"
                f"{_format_number(bounds.max_credits)}",
                OUT_OF_BOUNDS_CREDITS,
            ))

        if not record.grade_symbol:
            issues.append(ValidationIssue(record.id, "grade", "Grade required", MISSING_VALUE))
        elif record.grade_symbol not in scale:
            issues.append(ValidationIssue(record.id, "grade", "Invalid grade", UNKNOWN_GRADE_SYMBOL))

        return issues

    @staticmethod
    def valid_subset(records: list, issues: list) -> list:
        """
        Records that have no record-level issue.

        Batch-level issues (record_id None) do not exclude anything. A
        duplicated id excludes every record carrying that id.
        """
        bad_ids = {i.record_id for i in issues if i.record_id is not None}
        return [r for r in records if r.id not in bad_ids]
