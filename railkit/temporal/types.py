"""
Type definitions for railkit temporal parsing.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, slots=True)
class ParsedDate:
    """
    Outcome of analyzing date text.

    Attributes:
        date: The parsed calendar date
        pattern: The pattern that matched
        ambiguous: True if the pattern's day/month order could be read the
            other way round by another registered pattern
    """

    date: date
    pattern: str
    ambiguous: bool = False

    def __post_init__(self):
        if not isinstance(self.date, date):
            raise ValueError(f"Date must be a date, got {self.date!r}")
        if not self.pattern:
            raise ValueError("Pattern cannot be None or empty")

    def describe(self) -> str:
        """Human-readable description of how the date was parsed."""
        note = " (ambiguous format)" if self.ambiguous else ""
        return f"Parsed as {self.date.isoformat()} using pattern '{self.pattern}'{note}"
