"""
Tree engine: parse, serialize, navigate, update, merge, prune and stream
JSON-like document trees.

Every tree is a plain Python value (dict / list / str / int / float / bool /
None). Operations are persistent: inputs are never modified, and every tree
returned is freshly built. Fallible operations return a Result carrying a
KitError; navigation helpers return None (or a default) instead.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterator, Optional, TypeVar

from ..context import serialize_indent
from ..errors import KitError
from ..result import Err, Ok, Result, of
from .backend import MISSING, Node, TreeBackend, get_backend
from .path import Path, parse_path, parse_pointer
from .pruning import drop_null_fields, prune

log = logging.getLogger(__name__)

T = TypeVar("T")

_PLAIN_TYPES = (dict, list, str, int, float, bool)


def _conversion(prefix: str) -> Callable[[BaseException], KitError]:
    return lambda exc: KitError.conversion(f"{prefix}: {exc}")


def _log_failure(operation: str) -> Callable[[KitError], None]:
    return lambda error: log.debug("%s failed: %s", operation, error)


class NodeStream:
    """
    Lazy, restartable iteration over the elements of an array node.

    Iterating a non-array yields nothing.
    """

    def __init__(self, node: Node):
        self._node = node

    def __iter__(self) -> Iterator[Node]:
        if isinstance(self._node, list):
            yield from self._node


class TreeEngine:
    """
    Tree operations bound to a backend.

    Args:
        backend: Backend to use. When omitted, the process-wide active
            backend is looked up at the start of every operation.
    """

    def __init__(self, backend: Optional[TreeBackend] = None):
        self._backend = backend

    @property
    def backend(self) -> TreeBackend:
        return self._backend if self._backend is not None else get_backend()

    # ========== Core Operations ==========

    def parse(self, text: str) -> Result[KitError, Node]:
        """Deserialize document text into a tree."""
        if not isinstance(text, (str, bytes)) or not text.strip():
            return Err(KitError.conversion("JSON string is null or empty"))
        backend = self.backend
        return of(lambda: backend.parse(text), _conversion("JSON parsing failed")).peek_err(
            _log_failure("parse")
        )

    def serialize(self, value: Any) -> Result[KitError, str]:
        """
        Serialize any structured value to document text.

        Object fields whose value is None are omitted; array elements are kept.
        """
        backend = self.backend
        indent = serialize_indent()
        return (
            self.to_node(value)
            .map(drop_null_fields)
            .flat_map(
                lambda node: of(
                    lambda: backend.serialize(node, indent),
                    _conversion("JSON serialization failed"),
                )
            )
        )

    def to_node(self, value: Any) -> Result[KitError, Node]:
        """Convert any structured value (models, dataclasses, dates...) to a tree."""
        backend = self.backend
        return of(lambda: backend.to_node(value), _conversion("Node conversion failed"))

    def convert(self, value: Any, target: type[T]) -> Result[KitError, T]:
        """
        Convert a value to another shape by way of a tree.

        Examples:
            convert({"name": "Alice"}, User)     # dict -> model
            convert(user, dict[str, Any])        # model -> dict
        """
        if value is None:
            return Err(KitError.conversion("Source object is null"))
        return self.to_node(value).flat_map(lambda node: self._validate(node, target))

    def from_text(self, text: str, target: type[T]) -> Result[KitError, T]:
        """Parse document text straight into ``target``."""
        return self.parse(text).flat_map(lambda node: self._validate(node, target))

    def to_map(self, text: str) -> Result[KitError, dict[str, Any]]:
        return self.from_text(text, dict[str, Any])

    def to_list(self, text: str) -> Result[KitError, list[Any]]:
        return self.from_text(text, list[Any])

    def _validate(self, node: Node, target: type[T]) -> Result[KitError, T]:
        backend = self.backend
        return of(
            lambda: backend.convert(node, target), _conversion("Type conversion failed")
        ).peek_err(_log_failure("convert"))

    # ========== Safe Navigation ==========

    def get_text(self, node: Any, path: str) -> Optional[str]:
        """
        Safely read a scalar as text using a dot path ("users.0.name").

        Returns None if any step is missing or null, if an index is applied
        to a non-array or is out of range, or if the resolved node is an
        object or array. Never raises.
        """
        if node is None or not isinstance(path, str):
            return None
        try:
            parsed = parse_path(path)
        except ValueError:
            return None
        backend = self.backend
        resolved = backend.navigate(self._as_node(node), parsed.segments)
        return self._scalar_text(resolved)

    def pointer_get(self, node: Any, pointer: str, default: Node = None) -> Node:
        """
        Resolve a slash-delimited pointer ("/users/0/name").

        Returns ``default`` if the pointer is malformed or resolves to nothing.
        """
        if pointer is None:
            return default
        try:
            tokens = parse_pointer(pointer)
        except ValueError:
            return default

        current = self._as_node(node)
        for token in tokens:
            if isinstance(current, list):
                if not _is_array_token(token) or int(token) >= len(current):
                    return default
                current = current[int(token)]
            elif isinstance(current, dict) and token in current:
                current = current[token]
            else:
                return default
        return current

    def update_path(self, node: Any, path: str, value: Any) -> Result[KitError, Node]:
        """
        Return a copy of ``node`` with ``value`` written at ``path``.

        The root is rebuilt by ``to_node``, so writing never touches ``node``.
        Missing intermediate steps are created as empty objects. The parent
        of the final segment must be an object.
        """
        try:
            parsed = parse_path(path)
        except ValueError as exc:
            return Err(KitError.navigation(str(exc)))
        return (
            self.to_node(node)
            .zip(self.to_node(value), lambda root, leaf: (root, leaf))
            .flat_map(lambda pair: _write_path(pair[0], parsed, pair[1]))
            .peek_err(_log_failure("update_path"))
        )

    # ========== Advanced Operations ==========

    def merge(self, base: Any, overlay: Any) -> Result[KitError, Node]:
        """
        Deep merge two trees.

        Merge Rules:
            - Objects are merged recursively (keys from both)
            - Arrays are replaced (not concatenated)
            - Anything else in ``overlay`` replaces ``base``
        """
        return self.to_node(base).zip(self.to_node(overlay), _deep_merge)

    def prune(self, node: Any) -> Node:
        """Recursively remove null, "", [] and {} values."""
        return prune(self._as_node(node))

    def stream(self, node: Any) -> NodeStream:
        return NodeStream(self._as_node(node))

    # ========== Helper Methods ==========

    def _as_node(self, value: Any) -> Node:
        if value is None or isinstance(value, _PLAIN_TYPES):
            return value
        return self.to_node(value).get_or_else(value)

    def _scalar_text(self, value: Node) -> Optional[str]:
        if value is None or value is MISSING or isinstance(value, (dict, list)):
            return None
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, int, float)):
            return str(value)
        converted = self.to_node(value).to_optional()
        if converted is None or not isinstance(converted, (str, int, float, bool)):
            return None
        return self._scalar_text(converted)


def _is_array_token(token: str) -> bool:
    if not (token.isascii() and token.isdigit()):
        return False
    return token == "0" or not token.startswith("0")


def _write_path(root: Node, path: Path, leaf: Node) -> Result[KitError, Node]:
    current = root
    for segment in path.parent.segments:
        if segment.is_index:
            if not isinstance(current, list):
                return Err(KitError.navigation(f"Cannot index non-array node at '{segment}'"))
            if segment.value >= len(current):
                return Err(KitError.navigation(f"Array index {segment} out of range"))
            current = current[segment.value]
        else:
            if not isinstance(current, dict):
                return Err(
                    KitError.navigation(
                        f"Cannot access property '{segment}' on non-object node"
                    )
                )
            if segment.value not in current:
                current[segment.value] = {}
            current = current[segment.value]

    if not isinstance(current, dict):
        return Err(
            KitError.navigation(f"Cannot set property '{path.last}' on non-object node")
        )
    current[str(path.last.value)] = leaf
    return Ok(root)


def _deep_merge(base: Node, overlay: Node) -> Node:
    if not isinstance(base, dict) or not isinstance(overlay, dict):
        return overlay

    result = dict(base)
    for key, value in overlay.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result
