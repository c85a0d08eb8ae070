"""
Path parsers for railkit tree addressing.

Supports:
- Dot paths: "users.0.address.city" (all-digit segments index arrays)
- Pointers: "/users/0/address/city" (slash-delimited, "~1" = "/", "~0" = "~")
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Union


class PathSegmentType(Enum):
    KEY = auto()
    INDEX = auto()


@dataclass(frozen=True)
class PathSegment:
    """Represents a single segment in a path."""

    type: PathSegmentType
    value: Union[str, int]

    @classmethod
    def key(cls, name: str) -> "PathSegment":
        return cls(PathSegmentType.KEY, name)

    @classmethod
    def index(cls, idx: int) -> "PathSegment":
        return cls(PathSegmentType.INDEX, idx)

    @property
    def is_index(self) -> bool:
        return self.type is PathSegmentType.INDEX

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Path:
    """Represents a parsed path expression."""

    segments: tuple[PathSegment, ...]

    def __len__(self) -> int:
        return len(self.segments)

    @property
    def parent(self) -> "Path":
        return Path(self.segments[:-1])

    @property
    def last(self) -> PathSegment:
        return self.segments[-1]


def _dot_segment(raw: str) -> PathSegment:
    # str.isdigit() also accepts non-ASCII digits such as "²"
    if raw and raw.isascii() and raw.isdigit():
        return PathSegment.index(int(raw))
    return PathSegment.key(raw)


def parse_path(path_str: str) -> Path:
    """
    Parse a dot-delimited path string.

    Raises:
        ValueError: If the path is empty or not a string
    """
    if not isinstance(path_str, str):
        raise ValueError(f"Path must be a string, got {path_str!r}")
    if not path_str:
        raise ValueError("Empty path")
    return Path(tuple(_dot_segment(part) for part in path_str.split(".")))


def parse_pointer(pointer: str) -> list[str]:
    """
    Parse a slash-delimited pointer into raw reference tokens.

    The empty pointer addresses the root and yields no tokens.

    Raises:
        ValueError: If the pointer is not a string, or is non-empty and does
            not start with "/"
    """
    if not isinstance(pointer, str):
        raise ValueError(f"Pointer must be a string, got {pointer!r}")
    if pointer == "":
        return []
    if not pointer.startswith("/"):
        raise ValueError(f"Invalid pointer syntax: {pointer}")
    return [
        token.replace("~1", "/").replace("~0", "~")
        for token in pointer[1:].split("/")
    ]
