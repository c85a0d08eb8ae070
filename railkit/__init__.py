from . import temporal, tree
from .context import kit_context
from .decorator import catching
from .errors import ErrorKind, KitError, UnwrapError
from .result import (
    Err,
    Ok,
    Result,
    err,
    flatten,
    from_awaitable,
    from_future,
    of,
    ok,
    sequence,
    traverse,
)

__all__ = [
    # Result algebra
    "Result",
    "Ok",
    "Err",
    "ok",
    "err",
    "of",
    "catching",
    "sequence",
    "traverse",
    "flatten",
    "from_future",
    "from_awaitable",
    # Errors
    "ErrorKind",
    "KitError",
    "UnwrapError",
    # Configuration
    "kit_context",
    # Components
    "tree",
    "temporal",
]
