"""
Railkit tree - JSON-like document trees with Result-based error handling.

Usage:
    from railkit.tree import parse, merge, get_text, prune

    base = parse('{"a": 1, "b": {"x": 1, "y": 2}}').unwrap()
    merge(base, {"b": {"y": 9}}).map(lambda t: get_text(t, "b.y"))  # Ok("9")

The module-level functions use the process-wide active backend; build a
``TreeEngine(backend)`` to pin one explicitly.
"""

from .backend import (
    MISSING,
    JsonBackend,
    Node,
    PydanticCoreBackend,
    TreeBackend,
    get_backend,
    set_backend,
)
from .engine import NodeStream, TreeEngine
from .path import Path, PathSegment, PathSegmentType, parse_path, parse_pointer

_engine = TreeEngine()

parse = _engine.parse
serialize = _engine.serialize
to_node = _engine.to_node
convert = _engine.convert
from_text = _engine.from_text
to_map = _engine.to_map
to_list = _engine.to_list
get_text = _engine.get_text
pointer_get = _engine.pointer_get
update_path = _engine.update_path
merge = _engine.merge
prune = _engine.prune
stream = _engine.stream

__all__ = [
    # Engine
    "TreeEngine",
    "NodeStream",
    "Node",
    "MISSING",
    # Backends
    "TreeBackend",
    "JsonBackend",
    "PydanticCoreBackend",
    "get_backend",
    "set_backend",
    # Paths
    "Path",
    "PathSegment",
    "PathSegmentType",
    "parse_path",
    "parse_pointer",
    # Operations
    "parse",
    "serialize",
    "to_node",
    "convert",
    "from_text",
    "to_map",
    "to_list",
    "get_text",
    "pointer_get",
    "update_path",
    "merge",
    "prune",
    "stream",
]
