"""
Railkit temporal - date analysis, universal conversion and formatting.

Usage:
    from railkit.temporal import analyze, to_date, format

    analyze("01/02/2024")           # Ok(ParsedDate(2024-02-01, 'dd/MM/yyyy', ambiguous=True))
    to_date(0)                      # Ok(date(1970, 1, 1))
    format(date(2024, 2, 1), "dd.MM.yyyy")   # "01.02.2024"
"""

from .convert import (
    UTC,
    now,
    resolve_zone,
    to_date,
    to_datetime,
    to_utc,
    to_zoned_datetime,
)
from .formatting import format
from .helpers import (
    at_end_of_day,
    at_start_of_day,
    days_between,
    is_business_day,
    is_weekend,
    with_time,
)
from .parser import DateParser, analyze, default_parser, smart_parse
from .patterns import DEFAULT_PATTERNS, DatePattern
from .types import ParsedDate

__all__ = [
    # Parsing
    "DatePattern",
    "DEFAULT_PATTERNS",
    "DateParser",
    "ParsedDate",
    "default_parser",
    "analyze",
    "smart_parse",
    # Conversion
    "UTC",
    "now",
    "resolve_zone",
    "to_date",
    "to_datetime",
    "to_zoned_datetime",
    "to_utc",
    # Formatting
    "format",
    # Business helpers
    "at_start_of_day",
    "at_end_of_day",
    "with_time",
    "is_weekend",
    "is_business_day",
    "days_between",
]
