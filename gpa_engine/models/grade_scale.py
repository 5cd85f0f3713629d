"""
Grade scale models.

A GradeScale maps grade symbols to quality points for one institution or
application service. Scales are built once (usually by DataLoader from a
bundled JSON file) and are never merged, scaled or edited afterwards.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping, NamedTuple, Optional

from ..exceptions import UnknownGradeSymbol


class GradeValue(NamedTuple):
    """
    What a grade symbol is worth.

    NEUTRAL GRADES:
    Pass/Satisfactory style grades have counts_toward_gpa=False. The course
    still exists on the record (it is valid and counted as a course), but it
    contributes zero credits and zero quality points to every GPA.
    """
    quality_point: Decimal
    counts_toward_gpa: bool = True


@dataclass(frozen=True)
class GradeScale:
    """
    Immutable mapping from grade symbol to GradeValue.

    Usage:
        scale = GradeScale.from_dict({
            "name": "Cornell",
            "grades": {"A+": "4.3", "A": "4.0", "F": "0.0"},
            "neutral": ["P", "S"],
        })
        quality_point, counts = scale.resolve("A")
    """
    name: str
    grades: Mapping[str, GradeValue] = field(default_factory=dict)

    def __post_init__(self):
        # Freeze the mapping so a scale cannot drift after construction
        object.__setattr__(self, "grades", MappingProxyType(dict(self.grades)))

    def __hash__(self):
        # mappingproxy is unhashable; hash its frozen contents instead
        return hash((self.name, tuple(sorted(self.grades.items()))))

    @classmethod
    def from_dict(cls, data: dict, name: Optional[str] = None) -> "GradeScale":
        """
        Build a scale from the bundled JSON shape.

        Quality points may be given as strings or numbers; they go through
        str() before Decimal() so 3.7 stays 3.7 and not 3.70000000000000017.
        Neutral symbols get a quality point of 0 and never count.
        """
        grades = {}
        for symbol, points in data.get("grades", {}).items():
            grades[symbol] = GradeValue(Decimal(str(points)), True)
        for symbol in data.get("neutral", []):
            grades[symbol] = GradeValue(Decimal("0"), False)
        return cls(name=name or data.get("name", ""), grades=grades)

    def resolve(self, symbol: str) -> GradeValue:
        """Return (quality_point, counts_toward_gpa) or raise UnknownGradeSymbol."""
        try:
            return self.grades[symbol]
        except KeyError:
            raise UnknownGradeSymbol(symbol, self.name) from None

    def __contains__(self, symbol) -> bool:
        return symbol in self.grades

    @property
    def symbols(self) -> list:
        """Grade symbols in the order the scale defines them."""
        return list(self.grades)

    @property
    def neutral_symbols(self) -> list:
        return [s for s, v in self.grades.items() if not v.counts_toward_gpa]

    @property
    def max_quality_point(self) -> Decimal:
        """Highest GPA-bearing value on the scale (4.0 or 4.3 in practice)."""
        counted = [v.quality_point for v in self.grades.values() if v.counts_toward_gpa]
        return max(counted) if counted else Decimal("0")
