"""
Multi-View Reporter.

Runs a list of AggregationView requests over one record snapshot and
collects the results by view name.
"""

import logging
from decimal import Decimal
from typing import Optional

from ..config import DEFAULT_WINDOW_CREDITS, SCIENCE_CATEGORY, NON_SCIENCE_CATEGORY
from ..models import (
    AggregationView,
    GradeScale,
    by_category,
    prerequisites_only,
    all_of,
)
from .aggregator import GPAAggregator
from .window import CreditWindowSelector

logger = logging.getLogger(__name__)


def standard_views(window_credits: Decimal = DEFAULT_WINDOW_CREDITS) -> list:
    """
    The view set reported by the veterinary (VMCAS) calculator.

    - cumulative: every record
    - science: BCPM courses
    - non_science: everything else
    - last_N_credits: most recent N credits of any category
    - prerequisite_science: science courses flagged as prerequisites
    """
    window_credits = Decimal(str(window_credits))
    window_label = format(window_credits.normalize(), "f")
    return [
        AggregationView("cumulative"),
        AggregationView("science", category_filter=by_category(SCIENCE_CATEGORY)),
        AggregationView("non_science", category_filter=by_category(NON_SCIENCE_CATEGORY)),
        AggregationView(f"last_{window_label}_credits", window_credits=window_credits),
        AggregationView(
            "prerequisite_science",
            category_filter=all_of(by_category(SCIENCE_CATEGORY), prerequisites_only),
        ),
    ]


class MultiViewReporter:
    """
    Orchestrates aggregator and window calls into one result map.

    Each view is computed independently from the same immutable record
    list: no accumulator is shared between views, so the order of the
    view list never changes any single result.

    DISPATCH:
    - view.window_credits is None  ->  GPAAggregator.aggregate
    - otherwise                    ->  CreditWindowSelector.aggregate
    The view's category_filter is applied first in both cases.
    """

    def __init__(self, aggregator: Optional[GPAAggregator] = None,
                 window_selector: Optional[CreditWindowSelector] = None):
        self.aggregator = aggregator or GPAAggregator()
        self.window_selector = window_selector or CreditWindowSelector(self.aggregator)

    def report(self, records: list, scale: GradeScale, views: list) -> dict:
        """
        Compute every view.

        Returns:
            {view_name: ViewResult} in the order the views were given

        Raises:
            ValueError: two views share a name
        """
        names = [v.name for v in views]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"Duplicate view names: {', '.join(duplicates)}")

        results = {}
        for view in views:
            if view.window_credits is None:
                result = self.aggregator.aggregate(records, scale, view.category_filter)
            else:
                result = self.window_selector.aggregate(
                    records, scale, view.window_credits, view.category_filter
                )
            logger.debug("View %s -> %s over %s credits", view.name, result.value, result.credits_used)
            results[view.name] = result
        return results
