"""
Universal converters from heterogeneous inputs to dates and date-times.

Supported inputs, tested in this order:
- bool: rejected (bool is an int subclass and is not an epoch value)
- datetime (aware or naive)
- date
- time.struct_time (legacy calendar aggregate, local wall-clock fields)
- int: milliseconds since the Unix epoch, UTC
- str: parsed with the default DateParser

A datetime is also a date, so datetime must be tested before date, or a
date-time would silently lose its time of day.
"""

import logging
import time as _time
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Any, Callable, Optional, Union
from zoneinfo import ZoneInfo

from ..context import default_zone
from ..errors import KitError
from ..result import Err, Ok, Result, flatten, of
from .parser import smart_parse

log = logging.getLogger(__name__)

UTC = timezone.utc
_EPOCH = datetime(1970, 1, 1)

Zone = Union[tzinfo, str, None]
Converter = Callable[[Any], Result[KitError, Any]]


def _unsupported(value: Any) -> Result[KitError, Any]:
    kind = type(value)
    return Err(KitError.unsupported(f"Unsupported type: {kind.__module__}.{kind.__qualname__}"))


def _from_epoch_millis(millis: int) -> datetime:
    """Naive UTC wall-clock time for an epoch-millisecond value."""
    return _EPOCH + timedelta(milliseconds=millis)


def _start_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min)


_DATE_CONVERTERS: tuple[tuple[type, Converter], ...] = (
    (bool, _unsupported),
    (datetime, lambda v: Ok(v.date())),
    (date, Ok),
    (_time.struct_time, lambda v: Ok(date(v.tm_year, v.tm_mon, v.tm_mday))),
    (int, lambda v: Ok(_from_epoch_millis(v).date())),
    (str, smart_parse),
)

_DATETIME_CONVERTERS: tuple[tuple[type, Converter], ...] = (
    (bool, _unsupported),
    # aware values keep their own wall-clock time
    (datetime, lambda v: Ok(v.replace(tzinfo=None))),
    (date, lambda v: Ok(_start_of_day(v))),
    (_time.struct_time, lambda v: Ok(datetime(*v[:6]))),
    (int, lambda v: Ok(_from_epoch_millis(v))),
    (str, lambda v: smart_parse(v).map(_start_of_day)),
)


def _dispatch(
    value: Any, converters: tuple[tuple[type, Converter], ...]
) -> Result[KitError, Any]:
    if value is None:
        return Err(KitError.conversion("Input object is null"))

    for kind, converter in converters:
        if isinstance(value, kind):
            return flatten(
                of(
                    lambda: converter(value),
                    lambda exc: KitError.conversion(f"Conversion failed: {exc}"),
                )
            ).peek_err(lambda error: log.debug("Cannot convert %r: %s", value, error))
    return _unsupported(value)


def to_date(value: Any) -> Result[KitError, date]:
    """Convert any supported input to a calendar date."""
    return _dispatch(value, _DATE_CONVERTERS)


def to_datetime(value: Any) -> Result[KitError, datetime]:
    """
    Convert any supported input to a naive date-time.

    Aware date-times keep their wall-clock time in their own zone; epoch
    milliseconds give UTC wall-clock time; text gives the start of the day.
    """
    return _dispatch(value, _DATETIME_CONVERTERS)


def resolve_zone(zone: Zone) -> Result[KitError, tzinfo]:
    """Resolve a tzinfo or IANA zone name; None means the configured default."""
    if zone is None:
        return Ok(default_zone())
    if isinstance(zone, tzinfo):
        return Ok(zone)
    if isinstance(zone, str):
        return of(lambda: ZoneInfo(zone), lambda exc: KitError.conversion(f"Unknown zone: {zone}"))
    return _unsupported(zone)


def to_zoned_datetime(value: Any, zone: Zone = None) -> Result[KitError, datetime]:
    """
    Convert any supported input to an aware date-time in ``zone``.

    Inputs that denote an instant (aware date-times, epoch milliseconds) are
    converted to ``zone`` keeping the same instant; wall-clock inputs get
    ``zone`` attached. This differs from reading an aware value's local
    wall-clock time and attaching ``zone`` to it: 12:00 UTC requested in
    Asia/Tokyo is 21:00+09:00, not 12:00+09:00.

    Args:
        value: Input to convert
        zone: Target zone (tzinfo or IANA name); defaults to the configured zone
    """
    return resolve_zone(zone).flat_map(lambda tz: _in_zone(value, tz))


def _in_zone(value: Any, tz: tzinfo) -> Result[KitError, datetime]:
    return flatten(
        of(
            lambda: _attach_zone(value, tz),
            lambda exc: KitError.conversion(f"Zone conversion failed: {exc}"),
        )
    )


def _attach_zone(value: Any, tz: tzinfo) -> Result[KitError, datetime]:
    if isinstance(value, datetime) and value.utcoffset() is not None:
        return Ok(value.astimezone(tz))
    if isinstance(value, int) and not isinstance(value, bool):
        return to_datetime(value).map(lambda dt: dt.replace(tzinfo=UTC).astimezone(tz))
    return to_datetime(value).map(lambda dt: dt.replace(tzinfo=tz))


def to_utc(value: Any) -> Result[KitError, datetime]:
    return to_zoned_datetime(value, UTC)


def now(zone: Optional[tzinfo] = None) -> datetime:
    """Naive wall-clock time now in ``zone`` (default: the configured zone)."""
    return datetime.now(zone or default_zone()).replace(tzinfo=None)
