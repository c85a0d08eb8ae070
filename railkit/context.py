"""
Context manager for railkit configuration (default zone, serializer indent).
"""

from contextlib import contextmanager
from contextvars import ContextVar
from datetime import datetime, tzinfo
from typing import Any, Optional

_UNSET: Any = object()

# Context variables for ambient settings
_default_zone: ContextVar[Optional[tzinfo]] = ContextVar("default_zone", default=None)
_indent: ContextVar[Optional[int]] = ContextVar("indent", default=2)


def default_zone() -> tzinfo:
    """Zone used when none is given; the system local zone unless configured."""
    zone = _default_zone.get()
    if zone is None:
        zone = datetime.now().astimezone().tzinfo
    return zone


def serialize_indent() -> Optional[int]:
    """Indent used by the tree serializer; None means compact output."""
    return _indent.get()


@contextmanager
def kit_context(*, zone: Optional[tzinfo] = _UNSET, indent: Optional[int] = _UNSET):
    """
    Context manager for railkit configuration.

    Args:
        zone: Default zone for zoned conversions and "now" fallbacks.
              None restores the system local zone.
        indent: Indent for serialize(); None produces compact text.

    Settings that are not passed keep their current values.

    Example:
        from datetime import timezone
        from railkit import kit_context
        from railkit.temporal import to_zoned_datetime
        from railkit.tree import serialize

        with kit_context(zone=timezone.utc, indent=None):
            to_zoned_datetime("2024-01-01")   # 2024-01-01T00:00:00+00:00
            serialize({"a": 1})                # '{"a":1}'
    """
    tokens = []
    if zone is not _UNSET:
        tokens.append((_default_zone, _default_zone.set(zone)))
    if indent is not _UNSET:
        tokens.append((_indent, _indent.set(indent)))
    try:
        yield
    finally:
        for var, token in reversed(tokens):
            var.reset(token)
