"""
The @catching decorator for turning raising functions into Result producers.
"""

from functools import wraps
from typing import Any, Callable

from .result import ErrorMapper, of


def catching(
    _func: Callable | None = None, *, error_mapper: ErrorMapper | None = None
) -> Callable:
    """
    Decorator that makes a function return a Result instead of raising.

    The decorated function's return value is wrapped in Ok; any Exception it
    raises becomes Err, passed through ``error_mapper`` when one is given.

    Can be used with or without arguments:
        @catching
        def load(path): ...

        @catching(error_mapper=lambda e: KitError.conversion(str(e)))
        def load(path): ...

    Args:
        error_mapper: Optional function converting the raised exception into
                      the error payload.

    Returns:
        Decorated function returning Ok(value) or Err(error).
    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            return of(lambda: func(*args, **kwargs), error_mapper)

        return wrapper

    return decorator if _func is None else decorator(_func)
