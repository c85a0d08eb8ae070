"""
Date pattern compiler for railkit temporal parsing.

Supports the conventional pattern vocabulary:
- Fields: "yyyy"/"uuuu" (year), "MM" (month), "dd" (day),
  "HH" (hour), "mm" (minute), "ss" (second)
- Quoted literals: "yyyy-MM-dd'T'HH:mm:ss"
- Any other non-letter character is matched literally

Strict patterns use fixed-width fields and reject impossible dates and
times. Lenient patterns accept one or two digit day and month fields and
roll an out-of-range day over into the following month ("31/04/2024" is
read as 2024-05-01).
"""

import re
from dataclasses import dataclass, field
from datetime import date, time, timedelta
from typing import Optional

# Quoted literal, run of one repeated letter, or any single other character
_TOKEN_PATTERN = re.compile(r"'(?:[^']|'')*'|([A-Za-z])\1*|.", re.DOTALL)

# field token -> (group name, strict regex, lenient regex)
_PARSE_FIELDS = {
    "yyyy": ("year", r"\d{4}", r"\d{4}"),
    "uuuu": ("year", r"\d{4}", r"\d{4}"),
    "MM": ("month", r"\d{2}", r"\d{1,2}"),
    "dd": ("day", r"\d{2}", r"\d{1,2}"),
    "HH": ("hour", r"\d{2}", r"\d{1,2}"),
    "mm": ("minute", r"\d{2}", r"\d{2}"),
    "ss": ("second", r"\d{2}", r"\d{2}"),
}


def tokenize(pattern: str) -> list[tuple[str, bool]]:
    """
    Split a pattern into ``(text, is_field)`` tokens.

    Quoted literals are unquoted ("''" stands for a single quote).
    """
    tokens = []
    for match in _TOKEN_PATTERN.finditer(pattern):
        text = match.group(0)
        if text.startswith("'"):
            literal = "'" if text == "''" else text[1:-1].replace("''", "'")
            tokens.append((literal, False))
        elif match.group(1):
            tokens.append((text, True))
        else:
            tokens.append((text, False))
    return tokens


@dataclass(frozen=True, slots=True)
class DatePattern:
    """
    A compiled date pattern.

    Raises:
        ValueError: If the pattern uses an unsupported field, repeats a
            field, or lacks a year, month or day
    """

    pattern: str
    strict: bool = True
    _regex: re.Pattern = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        parts = []
        seen: set[str] = set()
        for text, is_field in tokenize(self.pattern):
            if not is_field:
                parts.append(re.escape(text))
                continue
            if text not in _PARSE_FIELDS:
                raise ValueError(f"Unsupported field '{text}' in pattern: {self.pattern}")
            name, strict_re, lenient_re = _PARSE_FIELDS[text]
            if name in seen:
                raise ValueError(f"Field '{name}' repeated in pattern: {self.pattern}")
            seen.add(name)
            parts.append(f"(?P<{name}>{strict_re if self.strict else lenient_re})")

        missing = {"year", "month", "day"} - seen
        if missing:
            raise ValueError(
                f"Pattern {self.pattern} lacks fields: {', '.join(sorted(missing))}"
            )
        object.__setattr__(self, "_regex", re.compile("".join(parts), re.ASCII))

    @property
    def mode(self) -> str:
        return "strict" if self.strict else "lenient"

    def swapped(self) -> str:
        """The pattern text with day and month fields exchanged."""
        return "".join(
            {"dd": "MM", "MM": "dd"}.get(text, text) if is_field else _quote(text)
            for text, is_field in tokenize(self.pattern)
        )

    def match(self, text: str) -> Optional[date]:
        """Return the date ``text`` denotes under this pattern, or None."""
        m = self._regex.fullmatch(text)
        if m is None:
            return None
        values = {name: int(raw) for name, raw in m.groupdict().items()}
        if not _valid_time(values):
            return None
        return self._resolve(values["year"], values["month"], values["day"])

    def _resolve(self, year: int, month: int, day: int) -> Optional[date]:
        try:
            if self.strict:
                return date(year, month, day)
            if not (1 <= month <= 12 and 1 <= day <= 31):
                return None
            return date(year, month, 1) + timedelta(days=day - 1)
        except (ValueError, OverflowError):
            return None


def _valid_time(values: dict[str, int]) -> bool:
    try:
        time(values.get("hour", 0), values.get("minute", 0), values.get("second", 0))
    except ValueError:
        return False
    return True


def _quote(literal: str) -> str:
    if literal.isascii() and not any(ch.isalpha() or ch == "'" for ch in literal):
        return literal
    return "'" + literal.replace("'", "''") + "'"


DEFAULT_PATTERNS: tuple[DatePattern, ...] = (
    # Strict for canonical machine-readable text (rejects 2023-02-29)
    DatePattern("yyyy-MM-dd'T'HH:mm:ss", strict=True),
    DatePattern("yyyy-MM-dd", strict=True),
    # Lenient for human-entered text (accepts 1/1/2024)
    DatePattern("dd/MM/yyyy", strict=False),
    DatePattern("MM/dd/yyyy", strict=False),
    DatePattern("dd-MM-yyyy", strict=False),
    DatePattern("yyyy/MM/dd", strict=False),
    DatePattern("dd.MM.yyyy", strict=False),
)
