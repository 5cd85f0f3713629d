"""
Terminal Display Implementation.

This module handles all console/terminal output formatting.
It's the ONLY place where printing happens in the gpa_engine package.

To create a different UI (web, PDF, etc.), create a new class with
the same method signatures but different output handling.
"""

from decimal import Decimal

from ..config import CREDIT_DECIMAL_PLACES, GPA_DECIMAL_PLACES
from ..models import GPAReport, StandingTier, TargetProjection, ViewResult


class TerminalDisplay:
    """
    Pretty terminal output for GPA reports.

    ═══════════════════════════════════════════════════════════════════════════
    HOW TO REPLACE THIS UI
    ═══════════════════════════════════════════════════════════════════════════

    1. FOR WEB UI:
       Create a WebDisplay class with the same method signatures.
       Instead of print(), return HTML or render templates.

    2. FOR API RESPONSE:
       Skip the display entirely and return GPAReport.to_dict().

    ═══════════════════════════════════════════════════════════════════════════
    """

    # ANSI color codes for terminal styling
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    RED = "\033[91m"
    BLUE = "\033[94m"
    CYAN = "\033[96m"
    WHITE = "\033[97m"

    BG_GREEN = "\033[42m"
    BG_RED = "\033[41m"

    TIER_COLORS = {
        StandingTier.EXCELLENT: GREEN,
        StandingTier.COMPETITIVE: BLUE,
        StandingTier.GOOD: YELLOW,
        StandingTier.KEEP_IMPROVING: RED,
        StandingTier.NO_DATA: DIM,
    }

    @classmethod
    def print_header(cls, title: str):
        """Print a major section header with decorative borders."""
        width = 70
        print()
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}  {title}{cls.RESET}")
        print(f"{cls.BOLD}{cls.CYAN}{'═' * width}{cls.RESET}")

    @classmethod
    def print_subheader(cls, title: str):
        """Print a subsection header."""
        print()
        print(f"{cls.BOLD}{cls.WHITE}  ── {title} ──{cls.RESET}")

    @classmethod
    def status_badge(cls, valid: bool) -> str:
        """Return a colored validation badge."""
        if valid:
            return f"{cls.BG_GREEN}{cls.WHITE} ✓ VALID {cls.RESET}"
        return f"{cls.BG_RED}{cls.WHITE} ✗ INVALID {cls.RESET}"

    @staticmethod
    def format_gpa(value) -> str:
        """GPA with fixed places, or "N/A" when the view had no credits."""
        if value is None:
            return "N/A"
        return f"{value:.{GPA_DECIMAL_PLACES}f}"

    @staticmethod
    def format_credits(value: Decimal) -> str:
        return f"{value:.{CREDIT_DECIMAL_PLACES}f}"

    @staticmethod
    def view_label(name: str) -> str:
        """Column label for a view name, e.g. last_45_credits -> Last 45 Credits."""
        return name.replace("_", " ").title()

    @classmethod
    def print_student_info(cls, student: dict):
        """Print student identification information, if the transcript has any."""
        if not student:
            return
        cls.print_header("STUDENT INFORMATION")
        print(f"  {cls.BOLD}Name:{cls.RESET} {student.get('name', 'Unknown')}")
        print(f"  {cls.BOLD}Institution:{cls.RESET} {student.get('institution', 'Unknown')}")

    @classmethod
    def print_validation_issues(cls, issues: list):
        """Print every validation problem, grouped by record."""
        cls.print_header("VALIDATION")
        print(f"\n  {cls.BOLD}Status:{cls.RESET} {cls.status_badge(not issues)}")
        if not issues:
            return

        print(f"\n  {cls.BOLD}{'RECORD':<12} {'FIELD':<10} {'PROBLEM'}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 66}{cls.RESET}")
        for issue in issues:
            record = issue.record_id if issue.record_id is not None else "(all)"
            print(f"  {cls.RED}{record:<12}{cls.RESET} {issue.field:<10} {issue.message}")

    @classmethod
    def print_report(cls, report: GPAReport, standings: dict = None):
        """
        Print every view of a report as a table.

        Args:
            report: GPAReport from GPACalculator
            standings: Optional {view_name: StandingTier} to show a band column
        """
        cls.print_header(f"GPA REPORT ({report.scale_name.upper()})")
        print(f"  {cls.BOLD}Courses:{cls.RESET} {report.total_courses}")
        print(f"  {cls.BOLD}Total Credits:{cls.RESET} {cls.format_credits(report.total_credits)}")

        if not report.views:
            print(f"\n  {cls.YELLOW}No GPA computed - fix the validation issues above.{cls.RESET}")
            return

        standings = standings or {}
        print(f"\n  {cls.BOLD}{'VIEW':<26} {'GPA':>7} {'CREDITS':>9} {'COURSES':>8}  {'STANDING'}{cls.RESET}")
        print(f"  {cls.DIM}{'-' * 66}{cls.RESET}")
        for name, result in report.views.items():
            cls._print_view_row(name, result, standings.get(name))

    @classmethod
    def _print_view_row(cls, name: str, result: ViewResult, tier: StandingTier = None):
        gpa = cls.format_gpa(result.value)
        credits = cls.format_credits(result.credits_used)
        tier_str = ""
        if tier is not None:
            tier_str = f"{cls.TIER_COLORS[tier]}{tier.value}{cls.RESET}"
        gpa_color = cls.DIM if result.value is None else cls.BOLD
        print(f"  {cls.view_label(name):<26} {gpa_color}{gpa:>7}{cls.RESET} "
              f"{credits:>9} {result.course_count:>8}  {tier_str}")

    @classmethod
    def print_window(cls, slices: list, window_credits: Decimal):
        """Print which records fell into a trailing credit window."""
        cls.print_subheader(f"Most Recent {cls.format_credits(window_credits)} Credits")
        if not slices:
            print(f"  {cls.DIM}(no GPA-bearing courses){cls.RESET}")
            return
        for s in slices:
            used = cls.format_credits(s.credits)
            note = f" {cls.YELLOW}(partial of {cls.format_credits(s.record.credits)}){cls.RESET}" if s.is_partial else ""
            print(f"  #{s.record.sequence_index:<4} {s.record.name or s.record.id:<40} "
                  f"{s.record.grade_symbol:<3} {used:>6}{note}")

    @classmethod
    def print_projection(cls, projection: TargetProjection):
        """Print what average is needed to reach a target GPA."""
        cls.print_subheader(f"Reaching {cls.format_gpa(projection.target)}")
        planned = cls.format_credits(projection.planned_credits)
        required = cls.format_gpa(projection.required_average)
        if projection.achievable:
            print(f"  Take {planned} credits with an average of {cls.GREEN}{required}{cls.RESET}")
        else:
            print(f"  {cls.RED}Not achievable{cls.RESET} - {planned} credits would need an average of {required}")
