"""
Error payloads and exceptions for railkit.

Ordinary failures travel as values inside ``Err``; exceptions are reserved
for programmer errors and for the unsafe unwrap at program boundaries.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """Kinds of failure reported through ``Err``."""

    VALIDATION = "validation"  # ensure / filter predicate failed
    CONVERSION = "conversion"  # malformed document or date text
    NAVIGATION = "navigation"  # update_path type mismatch
    UNSUPPORTED_INPUT = "unsupported_input"  # no date mapping for input kind


@dataclass(frozen=True, slots=True)
class KitError:
    """Error payload carried by tree and temporal results."""

    kind: ErrorKind
    message: str

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"

    @classmethod
    def validation(cls, message: str) -> KitError:
        return cls(ErrorKind.VALIDATION, message)

    @classmethod
    def conversion(cls, message: str) -> KitError:
        return cls(ErrorKind.CONVERSION, message)

    @classmethod
    def navigation(cls, message: str) -> KitError:
        return cls(ErrorKind.NAVIGATION, message)

    @classmethod
    def unsupported(cls, message: str) -> KitError:
        return cls(ErrorKind.UNSUPPORTED_INPUT, message)


class UnwrapError(Exception):
    """
    Raised when a Result is unwrapped on the wrong side.

    The original error payload (or the unexpected value) is kept on
    ``.error`` so callers at program boundaries can inspect it.
    """

    def __init__(self, error: Any):
        super().__init__(str(error))
        self.error = error
