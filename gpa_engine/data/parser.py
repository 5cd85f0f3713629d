"""
Transcript parsing.

This module turns raw transcript dicts (from JSON, CSV or a UI form) into
CourseRecord objects.
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Optional

from ..exceptions import TranscriptFormatError
from ..models import CourseRecord

logger = logging.getLogger(__name__)

_TRUE_STRINGS = {"true", "yes", "y", "1", "x"}


def _parse_decimal(value) -> Optional[Decimal]:
    """
    Convert a raw credits value to Decimal.

    Empty values become None ("Credits required"). Text that is not a number
    becomes Decimal("NaN") so the validator reports it as out of range along
    with every other problem, instead of the parser stopping at the first one.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return Decimal("NaN")
    text = str(value).strip()
    if not text:
        return None
    try:
        return Decimal(text)
    except InvalidOperation:
        return Decimal("NaN")


def _parse_bool(value) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in _TRUE_STRINGS


def _parse_text(value) -> str:
    return "" if value is None else str(value).strip()


def _parse_index(value) -> Optional[int]:
    """Integer from "3", 3 or 3.0; None for anything fractional or non-numeric."""
    if isinstance(value, bool):
        return None
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        return None
    if not number.is_finite() or number != number.to_integral_value():
        return None
    return int(number)


class TranscriptParser:
    """
    Parses a raw transcript into CourseRecord objects.

    KEY RESPONSIBILITY: Type conversion only. The parser does not judge
    whether a record is valid; out-of-range credits and unknown grades pass
    through untouched for RecordValidator to report.

    NO DEDUPLICATION:
    Retaken courses appear once per attempt and every attempt is kept.
    VMCAS and AMCAS count both grades, unlike schools with grade replacement.

    SEQUENCE INDEX:
    When a row has no sequence_index, its 1-based position in the file is
    used. The trailing-credit window needs chronological order, so callers
    that enter courses out of order should send explicit indices.
    """

    def parse(self, transcript_data: dict) -> dict:
        """
        Parse transcript and return student info plus records.

        Args:
            transcript_data: {"student": {...}, "courses": [{...}, ...]}

        Returns:
            {
                "student": {name, institution, ...},
                "records": [CourseRecord, ...],   # file order
            }

        Raises:
            TranscriptFormatError: the structure is not a transcript
        """
        if not isinstance(transcript_data, dict):
            raise TranscriptFormatError("Transcript must be an object with a 'courses' list")

        courses_raw = transcript_data.get("courses")
        if not isinstance(courses_raw, list):
            raise TranscriptFormatError("Transcript has no 'courses' list")

        records = []
        defaulted = 0
        for position, course_data in enumerate(courses_raw, 1):
            if not isinstance(course_data, dict):
                raise TranscriptFormatError(f"Course entry {position} is not an object")
            if _parse_text(course_data.get("sequence_index")) == "":
                defaulted += 1
            records.append(self._parse_course(course_data, position))

        if defaulted:
            logger.info("%d course(s) had no sequence_index; using file order", defaulted)

        return {
            "student": transcript_data.get("student") or {},
            "records": records,
        }

    def _parse_course(self, course_data: dict, position: int) -> CourseRecord:
        """Parse a single course entry."""
        record_id = _parse_text(course_data.get("id")) or str(position)

        credits_raw = course_data.get("credits")
        if credits_raw is None:
            credits_raw = course_data.get("credit")

        grade = _parse_text(course_data.get("grade", course_data.get("grade_symbol")))

        sequence_raw = course_data.get("sequence_index")
        if _parse_text(sequence_raw) == "":
            sequence_index = position
        else:
            sequence_index = _parse_index(sequence_raw)
            if sequence_index is None:
                raise TranscriptFormatError(
                    f"Course {record_id}: sequence_index must be an integer (got {sequence_raw!r})"
                )

        return CourseRecord(
            id=record_id,
            name=_parse_text(course_data.get("name")),
            credits=_parse_decimal(credits_raw),
            grade_symbol=grade or None,
            category=_parse_text(course_data.get("category")).lower(),
            is_prerequisite=_parse_bool(course_data.get("is_prerequisite")),
            sequence_index=sequence_index,
            is_repeated=_parse_bool(course_data.get("is_repeated")),
        )
