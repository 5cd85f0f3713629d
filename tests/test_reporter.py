"""
Unit Tests for MultiViewReporter and the standard view set.
"""

import pytest
from decimal import Decimal

from gpa_engine import (
    AggregationView,
    MultiViewReporter,
    by_category,
    prerequisites_only,
    all_of,
    standard_views,
)


@pytest.fixture
def reporter():
    return MultiViewReporter()


@pytest.fixture
def vet_records(make_record):
    """A short pre-vet record in chronological order."""
    return [
        make_record(4, "A", category="science", is_prerequisite=True, name="General Biology"),
        make_record(3, "B+", category="non-science", name="English Composition"),
        make_record(4, "B", category="science", is_prerequisite=True, name="General Chemistry"),
        make_record(3, "A-", category="non-science", name="Psychology"),
        make_record(4, "C+", category="science", name="Genetics"),
    ]


class TestStandardViews:
    """The VMCAS view set."""

    def test_view_names(self):
        names = [v.name for v in standard_views()]
        assert names == [
            "cumulative", "science", "non_science", "last_45_credits", "prerequisite_science",
        ]

    def test_window_name_follows_size(self):
        views = standard_views(Decimal("30"))
        assert views[3].name == "last_30_credits"
        assert views[3].window_credits == Decimal("30")

    def test_report_values(self, reporter, vmcas_scale, vet_records):
        results = reporter.report(vet_records, vmcas_scale, standard_views())
        # science: 16 + 12 + 9.2 = 37.2 / 12
        assert results["science"].value == Decimal("3.100")
        # non-science: 9.9 + 11.1 = 21.0 / 6
        assert results["non_science"].value == Decimal("3.500")
        # cumulative: 58.2 / 18
        assert results["cumulative"].value == Decimal("3.233")
        # all 18 credits fit in 45
        assert results["last_45_credits"].value == results["cumulative"].value
        # prerequisite science: 28 / 8
        assert results["prerequisite_science"].value == Decimal("3.500")

    def test_short_window(self, reporter, vmcas_scale, vet_records):
        results = reporter.report(vet_records, vmcas_scale, standard_views(Decimal("10")))
        # C+ 4cr, A- 3cr, then 3 of B's 4cr: 9.2 + 11.1 + 9.0 = 29.3 / 10
        assert results["last_10_credits"].value == Decimal("2.930")
        assert results["last_10_credits"].credits_used == Decimal("10")


class TestReport:
    """Dispatch and independence of views."""

    def test_results_keep_view_order(self, reporter, vmcas_scale, vet_records):
        views = [AggregationView("z"), AggregationView("a"), AggregationView("m")]
        assert list(reporter.report(vet_records, vmcas_scale, views)) == ["z", "a", "m"]

    def test_view_order_does_not_change_results(self, reporter, vmcas_scale, vet_records):
        views = standard_views()
        forward = reporter.report(vet_records, vmcas_scale, views)
        backward = reporter.report(vet_records, vmcas_scale, list(reversed(views)))
        assert forward == backward

    def test_duplicate_view_names_rejected(self, reporter, vmcas_scale, vet_records):
        views = [AggregationView("gpa"), AggregationView("gpa", window_credits=10)]
        with pytest.raises(ValueError, match="gpa"):
            reporter.report(vet_records, vmcas_scale, views)

    def test_empty_view_list(self, reporter, vmcas_scale, vet_records):
        assert reporter.report(vet_records, vmcas_scale, []) == {}

    def test_window_credits_coerced_to_decimal(self):
        view = AggregationView("w", window_credits=45)
        assert view.window_credits == Decimal("45")


class TestFilters:
    """Filter helper behaviour."""

    def test_by_category_accepts_several(self, make_record):
        matches = by_category("biology", "chemistry")
        assert matches(make_record(3, "A", category="chemistry"))
        assert not matches(make_record(3, "A", category="physics"))

    def test_all_of(self, make_record):
        matches = all_of(by_category("science"), prerequisites_only)
        assert matches(make_record(3, "A", category="science", is_prerequisite=True))
        assert not matches(make_record(3, "A", category="science"))
        assert not matches(make_record(3, "A", category="arts", is_prerequisite=True))

    def test_view_without_filter_matches_everything(self, make_record):
        assert AggregationView("all").matches(make_record(3, "A", category="anything"))
