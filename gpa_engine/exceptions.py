"""
Exceptions raised by the GPA engine.

Validation problems are NOT exceptions - the validator returns them as
ValidationIssue objects. The classes here cover contract violations
(aggregating unvalidated input) and unreadable transcript files.
"""


class GPAEngineError(Exception):
    """Base class for every error raised by this package."""


class UnknownGradeSymbol(GPAEngineError, KeyError):
    """A grade symbol was looked up in a scale that does not define it."""

    def __init__(self, symbol: str, scale_name: str = ""):
        self.symbol = symbol
        self.scale_name = scale_name
        where = f" in scale '{scale_name}'" if scale_name else ""
        super().__init__(f"Unknown grade symbol {symbol!r}{where}")

    def __str__(self):
        # KeyError would otherwise repr() the message
        return self.args[0]


class TranscriptFormatError(GPAEngineError, ValueError):
    """A transcript file could not be turned into course records."""
