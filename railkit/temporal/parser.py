"""
Multi-format date analysis with ambiguity detection.
"""

import logging
from datetime import date
from typing import Iterable

from ..errors import KitError
from ..result import Err, Ok, Result
from .patterns import DEFAULT_PATTERNS, DatePattern
from .types import ParsedDate

log = logging.getLogger(__name__)


class DateParser:
    """
    Ordered registry of date patterns; the first pattern that matches wins.

    A pattern is ambiguous when the registry also holds its sibling with the
    day and month fields swapped (e.g. "dd/MM/yyyy" and "MM/dd/yyyy").
    """

    def __init__(self, patterns: Iterable[DatePattern] = DEFAULT_PATTERNS):
        self.patterns: tuple[DatePattern, ...] = tuple(patterns)
        if not self.patterns:
            raise ValueError("DateParser needs at least one pattern")

        registered = {p.pattern for p in self.patterns}
        self._ambiguous = frozenset(
            p.pattern
            for p in self.patterns
            if p.swapped() != p.pattern and p.swapped() in registered
        )

    def is_ambiguous(self, pattern: str) -> bool:
        return pattern in self._ambiguous

    def analyze(self, text: str) -> Result[KitError, ParsedDate]:
        """
        Parse date text and report which pattern matched.

        Args:
            text: Date text; surrounding whitespace is ignored

        Returns:
            Ok(ParsedDate) for the first matching pattern, or Err if the text
            is empty or no pattern matches
        """
        if not isinstance(text, str) or not text.strip():
            return Err(KitError.conversion("Date string is null or empty"))

        trimmed = text.strip()
        for pattern in self.patterns:
            parsed = pattern.match(trimmed)
            if parsed is not None:
                return Ok(
                    ParsedDate(parsed, pattern.pattern, self.is_ambiguous(pattern.pattern))
                )

        log.debug("No pattern matched date text %r", text)
        return Err(KitError.conversion(f"Unable to parse date: {text}"))

    def smart_parse(self, text: str) -> Result[KitError, date]:
        return self.analyze(text).map(lambda parsed: parsed.date)


default_parser = DateParser()


def analyze(text: str) -> Result[KitError, ParsedDate]:
    """Analyze ``text`` with the default pattern list."""
    return default_parser.analyze(text)


def smart_parse(text: str) -> Result[KitError, date]:
    """Parse ``text`` with the default pattern list, keeping only the date."""
    return default_parser.smart_parse(text)
