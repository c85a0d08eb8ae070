"""
Pattern-based formatting of dates, times and date-times.
"""

from datetime import date, datetime, time
from typing import Any, Callable

from .patterns import tokenize

_MONTHS = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
_WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")

_DATE = "date"
_TIME = "time"

# field token -> (component it needs, renderer)
_FORMAT_FIELDS: dict[str, tuple[str, Callable[[Any], str]]] = {
    "yyyy": (_DATE, lambda v: f"{v.year:04d}"),
    "uuuu": (_DATE, lambda v: f"{v.year:04d}"),
    "yy": (_DATE, lambda v: f"{v.year % 100:02d}"),
    "y": (_DATE, lambda v: str(v.year)),
    "MMMM": (_DATE, lambda v: _MONTHS[v.month - 1]),
    "MMM": (_DATE, lambda v: _MONTHS[v.month - 1][:3]),
    "MM": (_DATE, lambda v: f"{v.month:02d}"),
    "M": (_DATE, lambda v: str(v.month)),
    "dd": (_DATE, lambda v: f"{v.day:02d}"),
    "d": (_DATE, lambda v: str(v.day)),
    "EEEE": (_DATE, lambda v: _WEEKDAYS[v.weekday()]),
    "EEE": (_DATE, lambda v: _WEEKDAYS[v.weekday()][:3]),
    "E": (_DATE, lambda v: _WEEKDAYS[v.weekday()][:3]),
    "HH": (_TIME, lambda v: f"{v.hour:02d}"),
    "H": (_TIME, lambda v: str(v.hour)),
    "hh": (_TIME, lambda v: f"{(v.hour % 12) or 12:02d}"),
    "h": (_TIME, lambda v: str((v.hour % 12) or 12)),
    "mm": (_TIME, lambda v: f"{v.minute:02d}"),
    "m": (_TIME, lambda v: str(v.minute)),
    "ss": (_TIME, lambda v: f"{v.second:02d}"),
    "s": (_TIME, lambda v: str(v.second)),
    "SSS": (_TIME, lambda v: f"{v.microsecond // 1000:03d}"),
    "SSSSSS": (_TIME, lambda v: f"{v.microsecond:06d}"),
    "a": (_TIME, lambda v: "AM" if v.hour < 12 else "PM"),
}


def _components(value: Any) -> set[str]:
    if isinstance(value, datetime):
        return {_DATE, _TIME}
    if isinstance(value, date):
        return {_DATE}
    if isinstance(value, time):
        return {_TIME}
    return set()


def _render(value: Any, pattern: str) -> str:
    available = _components(value)
    out = []
    for text, is_field in tokenize(pattern):
        if not is_field:
            out.append(text)
            continue
        if text not in _FORMAT_FIELDS:
            raise ValueError(f"Unsupported field '{text}' in pattern: {pattern}")
        needs, renderer = _FORMAT_FIELDS[text]
        if needs not in available:
            raise ValueError(f"Field '{text}' not available on {type(value).__name__}")
        out.append(renderer(value))
    return "".join(out)


def format(value: Any, pattern: str) -> str:
    """
    Format a date, time or date-time with a pattern ("dd/MM/yyyy HH:mm").

    Never raises: None gives "", and an unusable pattern (unknown letters,
    or time fields on a plain date) falls back to the ISO representation.
    """
    if value is None:
        return ""
    try:
        return _render(value, pattern)
    except (ValueError, TypeError, AttributeError):
        isoformat = getattr(value, "isoformat", None)
        return isoformat() if callable(isoformat) else str(value)
