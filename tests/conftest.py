import pytest
from decimal import Decimal

from gpa_engine import CourseRecord, DataLoader, GradeScale


@pytest.fixture(scope="session")
def loader():
    return DataLoader()


@pytest.fixture
def vmcas_scale(loader):
    """The bundled VMCAS 4.0 plus/minus scale."""
    return loader.load_scale("vmcas")


@pytest.fixture
def pass_fail_scale():
    """A small scale with one neutral PASS grade."""
    return GradeScale.from_dict({
        "name": "Test",
        "grades": {"A": "4.0", "A-": "3.7", "B+": "3.3", "B": "3.0", "C": "2.0", "F": "0.0"},
        "neutral": ["PASS"],
    })


@pytest.fixture
def make_record():
    """Factory for CourseRecord with sensible defaults and auto ids."""
    counter = {"n": 0}

    def _make(credits, grade, category="science", sequence_index=None,
              is_prerequisite=False, name=None, record_id=None):
        counter["n"] += 1
        n = counter["n"]
        return CourseRecord(
            id=record_id or f"c{n}",
            name=name if name is not None else f"Course {n}",
            credits=Decimal(str(credits)) if credits is not None else None,
            grade_symbol=grade,
            category=category,
            is_prerequisite=is_prerequisite,
            sequence_index=sequence_index if sequence_index is not None else n,
        )
    return _make
