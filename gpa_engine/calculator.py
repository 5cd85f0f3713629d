"""
GPA Calculator - Main Orchestrator.

This module contains the GPACalculator class that connects the
algorithm layer to the presentation layer.
"""

import logging
from decimal import Decimal
from typing import Optional

from .config import DEFAULT_SCALE, DEFAULT_WINDOW_CREDITS
from .data import DataLoader, TranscriptParser
from .engines import (
    RecordValidator,
    GPAAggregator,
    CreditWindowSelector,
    MultiViewReporter,
    standard_views,
    classify_standing,
    required_average,
)
from .models import CreditBounds, GPAReport, GradeScale, TargetProjection
from .ui import TerminalDisplay

logger = logging.getLogger(__name__)


class GPACalculator:
    """
    Main interface for the GPA engine.

    ═══════════════════════════════════════════════════════════════════════════
    ROLE: ORCHESTRATOR
    ═══════════════════════════════════════════════════════════════════════════

    This class connects the Algorithm layer to the Presentation layer:

    1. Receives input (a transcript file, or records already in memory)
    2. Validates, then runs the requested views (pure data)
    3. Passes that data to the Presentation layer for display

    The pipeline is linear: Validate -> Filter/Window -> Aggregate -> Report.
    Nothing is kept between calls except the scale cache in DataLoader, so
    one calculator can serve concurrent callers.

    TO CHANGE THE UI:
    -----------------
    Replace `self.display = TerminalDisplay()` with your custom display class,
    or call calculate() and use the returned GPAReport directly.

    ═══════════════════════════════════════════════════════════════════════════

    USAGE:
        calculator = GPACalculator()

        # From a file, printed to the terminal
        report = calculator.run("transcript.csv", scale_name="vmcas")

        # In memory, no I/O
        scale = calculator.loader.load_scale("vmcas")
        report = calculator.calculate(records, scale)
        report.views["science"].value
    """

    def __init__(self, bounds: Optional[CreditBounds] = None):
        self.loader = DataLoader()
        self.parser = TranscriptParser()
        self.validator = RecordValidator(bounds)
        self.aggregator = GPAAggregator()
        self.window_selector = CreditWindowSelector(self.aggregator)
        self.reporter = MultiViewReporter(self.aggregator, self.window_selector)
        self.display = TerminalDisplay()

    def calculate(self, records: list, scale: GradeScale, views: Optional[list] = None,
                  valid_only: bool = False) -> GPAReport:
        """
        Validate records and compute every view.

        Args:
            records: CourseRecord objects
            scale: Grade scale for this institution
            views: AggregationView list, defaults to standard_views()
            valid_only: Aggregate the records without issues instead of
                        refusing to aggregate when any issue exists

        Returns:
            GPAReport; `views` is empty when validation failed and
            valid_only is False
        """
        views = views if views is not None else standard_views()
        issues = self.validator.validate(records, scale)

        if issues and not valid_only:
            logger.info("Skipping aggregation: %d validation issue(s)", len(issues))
            return GPAReport(
                scale_name=scale.name,
                issues=issues,
                total_courses=len(records),
            )

        usable = self.validator.valid_subset(records, issues) if issues else list(records)
        results = self.reporter.report(usable, scale, views)

        return GPAReport(
            scale_name=scale.name,
            views=results,
            issues=issues,
            total_courses=len(usable),
            total_credits=sum((r.credits for r in usable), Decimal("0")),
        )

    def run(self, transcript_path, scale_name: str = DEFAULT_SCALE,
            window_credits: Decimal = DEFAULT_WINDOW_CREDITS,
            valid_only: bool = False, display: bool = True) -> GPAReport:
        """
        Run a complete calculation from a transcript file.

        This is the main entry point for file-based use. It:
        1. Loads the grade scale and the transcript
        2. Validates every record
        3. Computes the standard views (cumulative, science, non-science,
           last N credits, prerequisite science)
        4. Displays the results in the terminal (unless display=False)

        Raises:
            FileNotFoundError: unknown scale or missing transcript
            TranscriptFormatError: transcript structure is unreadable
        """
        scale = self.loader.load_scale(scale_name)
        transcript = self.parser.parse(self.loader.load_transcript(transcript_path))
        records = transcript["records"]

        report = self.calculate(records, scale, standard_views(window_credits), valid_only)

        if display:
            self.display.print_student_info(transcript["student"])
            self.display.print_validation_issues(report.issues)
            standings = {name: classify_standing(r.value) for name, r in report.views.items()}
            self.display.print_report(report, standings)
            if report.views:
                usable = self.validator.valid_subset(records, report.issues)
                slices = self.window_selector.select(usable, scale, window_credits)
                self.display.print_window(slices, Decimal(str(window_credits)))

        return report

    def project(self, report: GPAReport, scale: GradeScale, target: Decimal,
                planned_credits: Decimal, view_name: str = "cumulative") -> TargetProjection:
        """
        Average needed on `planned_credits` future credits to lift one view
        of `report` to `target`.

        Raises:
            KeyError: the report has no view with that name
        """
        return required_average(report.views[view_name], target, planned_credits, scale)

    def list_scales(self) -> list:
        """List all bundled grade scales."""
        return self.loader.list_available_scales()
