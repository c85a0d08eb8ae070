from typing import Any

import pytest

from railkit.tree import get_backend, set_backend


@pytest.fixture(scope="function")
def users_document() -> dict[str, Any]:
    return {
        "users": [
            {"name": "Alice", "age": 30, "active": True, "score": 1.5, "nick": None},
            {"name": "Bob", "age": 25, "active": False, "score": 2.0, "nick": "bobby"},
            {"name": "Carol", "age": 41, "active": True, "score": 0.5, "nick": None},
        ],
        "meta": {"count": 3, "source": "directory"},
    }


@pytest.fixture(scope="function")
def config_layers() -> tuple[dict[str, Any], dict[str, Any]]:
    """Default and override configuration documents."""
    defaults = {
        "timeout": 30,
        "retries": 3,
        "database": {"host": "localhost", "port": 5432, "options": {"ssl": False}},
        "features": ["search", "export"],
    }
    overrides = {
        "timeout": 60,
        "database": {"host": "db.internal", "options": {"ssl": True}},
        "features": ["search"],
    }
    return defaults, overrides


@pytest.fixture(scope="function")
def restore_backend():
    """Put the original active backend back after a test swaps it."""
    original = get_backend()
    yield original
    set_backend(original)
