"""
Pruning utilities for railkit trees.

Removes empty values bottom-up and strips null fields before serialization.
"""

from typing import Any


def is_empty(value: Any) -> bool:
    """None and zero-length strings, arrays and objects are empty."""
    return value is None or (isinstance(value, (str, list, dict)) and len(value) == 0)


def prune(node: Any) -> Any:
    """
    Recursively remove empty values ({}, [], "", None) from a tree.

    Children are pruned first, so a container that only becomes empty after
    its children are removed is itself removed from its parent. The input is
    not modified; a new tree is returned.

    Args:
        node: The tree to prune

    Returns:
        The pruned tree. A root container that prunes to nothing is returned
        as an empty container of its own kind; scalar roots are unchanged.
    """
    if isinstance(node, dict):
        pruned = ((key, prune(value)) for key, value in node.items())
        return {key: value for key, value in pruned if not is_empty(value)}
    if isinstance(node, list):
        return [item for item in map(prune, node) if not is_empty(item)]
    return node


def drop_null_fields(node: Any) -> Any:
    """Return a copy of ``node`` without object fields whose value is None."""
    if isinstance(node, dict):
        return {k: drop_null_fields(v) for k, v in node.items() if v is not None}
    if isinstance(node, list):
        return [drop_null_fields(item) for item in node]
    return node
