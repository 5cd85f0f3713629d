"""
GPA Engine
==========

Weighted multi-view GPA aggregation for academic records: cumulative,
per-category (science / BCPM), most-recent-N-credits and prerequisite
GPAs from one list of course records and one institution grade scale.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                         ALGORITHM LAYER                                  │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌─────────────────┐  ┌───────────────┐  ┌──────────────────────────┐  │
│  │ RecordValidator │→ │ GPAAggregator │← │  CreditWindowSelector    │  │
│  │ (batch checks)  │  │ (weighted avg)│  │  (last N credits)        │  │
│  └─────────────────┘  └───────────────┘  └──────────────────────────┘  │
│                              ▲                                          │
│                   ┌──────────┴──────────┐                               │
│                   │  MultiViewReporter  │                               │
│                   └─────────────────────┘                               │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns dataclasses
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                  │
│                         TerminalDisplay                                  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                        GPACalculator                                     │
│          (Orchestrator - connects algorithm to presentation)            │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

gpa_engine/
├── __init__.py          # This file - main exports
├── config.py            # Configuration constants
├── exceptions.py        # GPAEngineError hierarchy
├── calculator.py        # GPACalculator orchestrator
├── cli.py               # Command-line interface
│
├── models/              # Data classes
│   ├── course.py        # CourseRecord, CreditBounds
│   ├── grade_scale.py   # GradeScale, GradeValue
│   ├── view.py          # AggregationView, ViewResult, filter helpers
│   └── result.py        # ValidationIssue, WindowSlice, GPAReport, ...
│
├── data/                # Data loading and parsing
│   ├── loader.py        # DataLoader (grade scales, transcript files)
│   ├── parser.py        # TranscriptParser
│   └── scales/          # Bundled grade scales (JSON)
│
├── engines/             # Computation
│   ├── validator.py     # RecordValidator
│   ├── aggregator.py    # GPAAggregator
│   ├── window.py        # CreditWindowSelector
│   ├── reporter.py      # MultiViewReporter, standard_views
│   └── standing.py      # Competitiveness bands, target projection
│
└── ui/
    └── terminal.py      # TerminalDisplay

USAGE
-----

    from decimal import Decimal
    from gpa_engine import (
        CourseRecord, DataLoader, GPACalculator, AggregationView, by_category,
    )

    scale = DataLoader().load_scale("vmcas")
    records = [
        CourseRecord("1", "General Chemistry", Decimal("4"), "A", "science", sequence_index=1),
        CourseRecord("2", "English Composition", Decimal("3"), "B+", "non-science", sequence_index=2),
    ]

    report = GPACalculator().calculate(records, scale)
    report.views["cumulative"].value      # Decimal("3.700")

Running from command line:

    python -m gpa_engine transcript.csv --scale vmcas

"""

# Version
__version__ = "1.0.0"

# Main exports
from .calculator import GPACalculator
from .cli import main

# Model exports
from .models import (
    CourseRecord,
    CreditBounds,
    GradeScale,
    GradeValue,
    AggregationView,
    ViewResult,
    by_category,
    prerequisites_only,
    all_of,
    ValidationIssue,
    WindowSlice,
    TargetProjection,
    GPAReport,
    StandingTier,
)

# Engine exports
from .engines import (
    RecordValidator,
    GPAAggregator,
    CreditWindowSelector,
    MultiViewReporter,
    standard_views,
    classify_standing,
    gap_to,
    required_average,
)

# Data exports
from .data import DataLoader, TranscriptParser

# UI exports
from .ui import TerminalDisplay

# Errors
from .exceptions import GPAEngineError, UnknownGradeSymbol, TranscriptFormatError

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "GPACalculator",
    "main",
    # Models
    "CourseRecord",
    "CreditBounds",
    "GradeScale",
    "GradeValue",
    "AggregationView",
    "ViewResult",
    "by_category",
    "prerequisites_only",
    "all_of",
    "ValidationIssue",
    "WindowSlice",
    "TargetProjection",
    "GPAReport",
    "StandingTier",
    # Engines
    "RecordValidator",
    "GPAAggregator",
    "CreditWindowSelector",
    "MultiViewReporter",
    "standard_views",
    "classify_standing",
    "gap_to",
    "required_average",
    # Data
    "DataLoader",
    "TranscriptParser",
    # UI
    "TerminalDisplay",
    # Errors
    "GPAEngineError",
    "UnknownGradeSymbol",
    "TranscriptFormatError",
]
