"""
Interchangeable backends for the tree engine.

A backend knows how to turn text into a Node and back, how to turn an
arbitrary structured value into a Node, how to validate a Node into a target
shape, and how to walk a Node. Exactly one backend is active process-wide;
``set_backend`` swaps it atomically.
"""

import json
import logging
import threading
from typing import Any, Iterable, Optional, TypeVar

import pydantic_core
from pydantic import TypeAdapter

from .path import PathSegment

log = logging.getLogger(__name__)

T = TypeVar("T")

Node = Any  # dict[str, Node] | list[Node] | str | int | float | bool | None


class _Missing:
    """Marker for an address that resolves to nothing."""

    _instance: Optional["_Missing"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing()


class TreeBackend:
    """
    Base class for tree backends.

    Subclasses implement the text codec (``parse``/``serialize``). The
    structural operations have default implementations built on pydantic
    and may be overridden. Backend methods raise on failure; the engine turns
    those exceptions into ``Err`` values.
    """

    name = "base"

    def parse(self, text: str) -> Node:
        raise NotImplementedError

    def serialize(self, node: Node, indent: Optional[int] = 2) -> str:
        raise NotImplementedError

    def to_node(self, value: Any) -> Node:
        """Convert any structured value to a plain, freshly built Node."""
        return pydantic_core.to_jsonable_python(value)

    def convert(self, node: Node, target: type[T]) -> T:
        """Validate a Node into ``target`` (any type pydantic can validate)."""
        return TypeAdapter(target).validate_python(node)

    def navigate(self, node: Node, segments: Iterable[PathSegment]) -> Node:
        """
        Walk ``segments`` from ``node``.

        Returns:
            The resolved Node, or MISSING if any step cannot be taken
        """
        current = node
        for segment in segments:
            if current is None:
                return MISSING
            if segment.is_index:
                if isinstance(current, list) and segment.value < len(current):
                    current = current[segment.value]
                else:
                    return MISSING
            elif isinstance(current, dict) and segment.value in current:
                current = current[segment.value]
            else:
                return MISSING
        return current

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class JsonBackend(TreeBackend):
    """Default backend: standard library ``json`` text codec."""

    name = "json"

    def parse(self, text: str) -> Node:
        return json.loads(text)

    def serialize(self, node: Node, indent: Optional[int] = 2) -> str:
        if indent is None:
            return json.dumps(
                node, ensure_ascii=False, allow_nan=False, separators=(",", ":")
            )
        return json.dumps(node, ensure_ascii=False, allow_nan=False, indent=indent)


class PydanticCoreBackend(TreeBackend):
    """Backend using pydantic-core's JSON parser and serializer."""

    name = "pydantic-core"

    def parse(self, text: str) -> Node:
        return pydantic_core.from_json(text)

    def serialize(self, node: Node, indent: Optional[int] = 2) -> str:
        return pydantic_core.to_json(node, indent=indent).decode("utf-8")


# Sole piece of shared mutable state in railkit.
_backend_lock = threading.Lock()
_active_backend: TreeBackend = JsonBackend()


def get_backend() -> TreeBackend:
    """Return the active backend."""
    return _active_backend


def set_backend(backend: TreeBackend) -> TreeBackend:
    """
    Replace the active backend for the rest of the process lifetime.

    Args:
        backend: The backend to install

    Returns:
        The previously active backend

    Raises:
        ValueError: If backend is None
    """
    global _active_backend
    if backend is None:
        raise ValueError("Backend cannot be None")
    with _backend_lock:
        previous = _active_backend
        _active_backend = backend
    log.info("Tree backend switched from %r to %r", previous, backend)
    return previous
