"""
Business-day helpers built on the universal converter.

Unlike the converters, these helpers never fail: when the input cannot be
converted they log at DEBUG and substitute a default ("now" based values,
False, or 0).
"""

import logging
from datetime import date, datetime, time
from typing import Any, Callable

from ..errors import KitError
from .convert import now, to_date

log = logging.getLogger(__name__)

_END_OF_DAY = time(23, 59, 59, 999999)


def _fallback(helper: str, value: Any) -> Callable[[KitError], None]:
    return lambda error: log.debug(
        "%s could not convert %r (%s); using default", helper, value, error
    )


def at_start_of_day(value: Any) -> datetime:
    """Midnight of the converted date, or midnight today."""
    return (
        to_date(value)
        .peek_err(_fallback("at_start_of_day", value))
        .map(lambda day: datetime.combine(day, time.min))
        .get_or_else_get(lambda: datetime.combine(now().date(), time.min))
    )


def at_end_of_day(value: Any) -> datetime:
    """The last microsecond of the converted date, or of today."""
    return (
        to_date(value)
        .peek_err(_fallback("at_end_of_day", value))
        .map(lambda day: datetime.combine(day, _END_OF_DAY))
        .get_or_else_get(lambda: datetime.combine(now().date(), _END_OF_DAY))
    )


def with_time(value: Any, time_text: str) -> datetime:
    """
    Combine the converted date with a time of day given as "HH" or "HH:mm".

    Returns now() if the date cannot be converted, and the start of the day
    if the time text cannot be read.
    """
    return (
        to_date(value)
        .peek_err(_fallback("with_time", value))
        .fold(lambda _error: now(), lambda day: _at_time(day, time_text))
    )


def _at_time(day: date, time_text: str) -> datetime:
    try:
        parts = time_text.split(":")
        hour = int(parts[0])
        minute = int(parts[1]) if len(parts) > 1 else 0
        return datetime.combine(day, time(hour, minute))
    except (AttributeError, ValueError):
        log.debug("Unreadable time %r; using start of day", time_text)
        return datetime.combine(day, time.min)


def is_weekend(value: Any) -> bool:
    """True for Saturday and Sunday; False if the input cannot be converted."""
    return (
        to_date(value)
        .peek_err(_fallback("is_weekend", value))
        .map(lambda day: day.weekday() >= 5)
        .get_or_else(False)
    )


def is_business_day(value: Any) -> bool:
    return not is_weekend(value)


def days_between(first: Any, second: Any) -> int:
    """Absolute number of days between two dates; 0 if either cannot be converted."""
    return (
        to_date(first)
        .zip(to_date(second), lambda a, b: abs((b - a).days))
        .peek_err(_fallback("days_between", (first, second)))
        .get_or_else(0)
    )
