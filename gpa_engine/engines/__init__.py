"""
Aggregation engines.

This package contains the pure computation pipeline:

    RecordValidator -> GPAAggregator / CreditWindowSelector -> MultiViewReporter

plus standing helpers that interpret a finished result.
"""

from .validator import RecordValidator
from .aggregator import GPAAggregator, round_half_up
from .window import CreditWindowSelector
from .reporter import MultiViewReporter, standard_views
from .standing import classify_standing, gap_to, required_average

__all__ = [
    "RecordValidator",
    "GPAAggregator",
    "round_half_up",
    "CreditWindowSelector",
    "MultiViewReporter",
    "standard_views",
    "classify_standing",
    "gap_to",
    "required_average",
]
