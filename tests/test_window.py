"""
Unit Tests for CreditWindowSelector.
"""

import pytest
from decimal import Decimal

from gpa_engine import CreditWindowSelector, GPAAggregator, by_category


@pytest.fixture
def selector():
    return CreditWindowSelector()


class TestTruncation:
    """Boundary handling of the trailing credit window."""

    def test_boundary_record_is_truncated(self, selector, vmcas_scale, make_record):
        older = make_record(40, "B", sequence_index=1)
        recent = make_record(10, "A", sequence_index=2)
        result = selector.aggregate([older, recent], vmcas_scale, Decimal("45"))
        assert result.quality_points == Decimal("145.0")
        assert result.credits_used == Decimal("45")
        assert result.value == Decimal("3.222")
        assert result.course_count == 2

    def test_select_reports_partial_slice(self, selector, vmcas_scale, make_record):
        older = make_record(40, "B", sequence_index=1)
        recent = make_record(10, "A", sequence_index=2)
        slices = selector.select([older, recent], vmcas_scale, Decimal("45"))
        assert [(s.record, s.credits) for s in slices] == [
            (recent, Decimal("10")),
            (older, Decimal("35")),
        ]
        assert not slices[0].is_partial
        assert slices[1].is_partial

    def test_stops_after_boundary(self, selector, vmcas_scale, make_record):
        records = [make_record(4, "F", sequence_index=i) for i in range(1, 4)]
        records.append(make_record(4, "A", sequence_index=10))
        slices = selector.select(records, vmcas_scale, Decimal("6"))
        assert [s.credits for s in slices] == [Decimal("4"), Decimal("2")]

    def test_exact_fit_takes_no_partial(self, selector, vmcas_scale, make_record):
        records = [
            make_record(3, "C", sequence_index=1),
            make_record(3, "B", sequence_index=2),
            make_record(3, "A", sequence_index=3),
        ]
        slices = selector.select(records, vmcas_scale, Decimal("6"))
        assert [s.record.grade_symbol for s in slices] == ["A", "B"]
        assert not any(s.is_partial for s in slices)
        assert selector.aggregate(records, vmcas_scale, 6).value == Decimal("3.500")


class TestRecency:
    """The window follows sequence_index, not list position."""

    def test_uses_sequence_index_not_list_order(self, selector, vmcas_scale, make_record):
        newest = make_record(3, "A", sequence_index=30)
        oldest = make_record(3, "F", sequence_index=10)
        middle = make_record(3, "C", sequence_index=20)
        result = selector.aggregate([newest, oldest, middle], vmcas_scale, Decimal("6"))
        # A and C, never F
        assert result.value == Decimal("3.000")

    def test_not_best_courses(self, selector, vmcas_scale, make_record):
        records = [
            make_record(3, "A", sequence_index=1),
            make_record(3, "D", sequence_index=2),
        ]
        assert selector.aggregate(records, vmcas_scale, 3).value == Decimal("1.000")


class TestParticipation:
    """Only GPA-bearing, filter-matching records take window space."""

    def test_neutral_grade_does_not_use_window(self, selector, pass_fail_scale, make_record):
        records = [
            make_record(3, "B", sequence_index=1),
            make_record(20, "PASS", sequence_index=2),
            make_record(3, "A", sequence_index=3),
        ]
        result = selector.aggregate(records, pass_fail_scale, Decimal("4"))
        # 3cr A in full, 1cr of the B
        assert result.value == Decimal("3.750")
        assert result.credits_used == Decimal("4")

    def test_filter_applied_before_window(self, selector, vmcas_scale, make_record):
        records = [
            make_record(4, "C", category="science", sequence_index=1),
            make_record(4, "A", category="science", sequence_index=2),
            make_record(4, "F", category="non-science", sequence_index=3),
        ]
        result = selector.aggregate(records, vmcas_scale, Decimal("6"), by_category("science"))
        # 4cr A + 2cr C
        assert result.value == Decimal("3.333")


class TestDegenerateWindows:
    """Windows larger than the record, and empty windows."""

    def test_large_window_equals_overall(self, selector, vmcas_scale, make_record):
        records = [make_record(4, "A"), make_record(3, "A-"), make_record(4, "B+")]
        windowed = selector.aggregate(records, vmcas_scale, Decimal("45"))
        overall = GPAAggregator().aggregate(records, vmcas_scale)
        assert windowed.value == overall.value
        assert windowed.credits_used == overall.credits_used

    @pytest.mark.parametrize("window", ["11", "12", "100"])
    def test_window_at_or_above_total(self, selector, vmcas_scale, make_record, window):
        records = [make_record(4, "A"), make_record(3, "A-"), make_record(4, "B+")]
        assert selector.aggregate(records, vmcas_scale, Decimal(window)).value == Decimal("3.664")

    def test_no_credits_gives_none(self, selector, pass_fail_scale, make_record):
        result = selector.aggregate([make_record(3, "PASS")], pass_fail_scale, Decimal("45"))
        assert result.value is None
        assert result.course_count == 0

    @pytest.mark.parametrize("window", ["0", "-5"])
    def test_non_positive_window_rejected(self, selector, vmcas_scale, make_record, window):
        with pytest.raises(ValueError):
            selector.select([make_record(3, "A")], vmcas_scale, Decimal(window))
