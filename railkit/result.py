"""
Result algebra: a success/failure value with a full combinator set.

A ``Result`` is either ``Ok(value)`` or ``Err(error)``. Both cases are
frozen dataclasses, so every combinator returns a new ``Result`` and the
receiver is never mutated. Failure short-circuits: operations that act on
the value are no-ops on ``Err`` and vice versa.

Usage:
    from railkit import Ok, Err, ok, err, of

    ok(2).map(lambda x: x * 10).get_or_else(0)        # 20
    err("boom").map(lambda x: x * 10)                 # Err("boom")
    of(lambda: int("x"), lambda e: "not a number")    # Err("not a number")
"""

from __future__ import annotations

from concurrent.futures import Future
from dataclasses import dataclass
from typing import (
    Any,
    Awaitable,
    Callable,
    Generic,
    Iterable,
    Optional,
    TypeVar,
)

from .errors import UnwrapError

E = TypeVar("E")
V = TypeVar("V")
U = TypeVar("U")
F = TypeVar("F")
R = TypeVar("R")

ErrorMapper = Callable[[BaseException], Any]


class Result(Generic[E, V]):
    """
    Base of the two Result cases.

    Not instantiated directly; use ``Ok``/``Err`` or the ``ok``/``err``
    factories.
    """

    __slots__ = ()

    # --- query ---

    def is_ok(self) -> bool:
        raise NotImplementedError

    def is_err(self) -> bool:
        return not self.is_ok()

    def contains(self, value: Any) -> bool:
        """True if this is ``Ok`` holding a value equal to ``value``."""
        raise NotImplementedError

    def contains_err(self, error: Any) -> bool:
        """True if this is ``Err`` holding an error equal to ``error``."""
        raise NotImplementedError

    # --- validation ---

    def ensure(self, predicate: Callable[[V], bool], error_if_false: E) -> Result[E, V]:
        """Turn ``Ok`` into ``Err(error_if_false)`` when the predicate fails."""
        raise NotImplementedError

    def filter(self, predicate: Callable[[V], bool], error_if_false: E) -> Result[E, V]:
        return self.ensure(predicate, error_if_false)

    def filter_not(
        self, predicate: Callable[[V], bool], error_if_true: E
    ) -> Result[E, V]:
        """Turn ``Ok`` into ``Err(error_if_true)`` when the predicate holds."""
        raise NotImplementedError

    # --- transformation ---

    def map(self, fn: Callable[[V], U]) -> Result[E, U]:
        raise NotImplementedError

    def flat_map(self, fn: Callable[[V], Result[E, U]]) -> Result[E, U]:
        """Monadic bind: ``fn`` itself returns a Result."""
        raise NotImplementedError

    def map_err(self, fn: Callable[[E], F]) -> Result[F, V]:
        raise NotImplementedError

    def bimap(self, err_fn: Callable[[E], F], ok_fn: Callable[[V], U]) -> Result[F, U]:
        raise NotImplementedError

    def zip(self, other: Result[E, U], combiner: Callable[[V, U], R]) -> Result[E, R]:
        """
        Combine two Results with a binary function.

        The receiver's ``Err`` wins over ``other``'s; if the receiver is ``Ok``
        the outcome is ``other`` mapped through the combiner.
        """
        raise NotImplementedError

    # --- side effects ---

    def peek(self, consumer: Callable[[V], Any]) -> Result[E, V]:
        raise NotImplementedError

    def peek_err(self, consumer: Callable[[E], Any]) -> Result[E, V]:
        raise NotImplementedError

    def tap(
        self, on_ok: Callable[[V], Any], on_err: Callable[[E], Any]
    ) -> Result[E, V]:
        raise NotImplementedError

    def if_ok(self, consumer: Callable[[V], Any]) -> None:
        self.peek(consumer)

    def if_err(self, consumer: Callable[[E], Any]) -> None:
        self.peek_err(consumer)

    # --- recovery ---

    def recover(self, fn: Callable[[E], V]) -> Result[E, V]:
        raise NotImplementedError

    def or_(self, supplier: Callable[[], Result[E, V]]) -> Result[E, V]:
        """Lazy alternative: ``supplier`` is only called on ``Err``."""
        raise NotImplementedError

    def or_else(self, alternative: Result[E, V]) -> Result[E, V]:
        raise NotImplementedError

    # --- terminal ---

    def fold(self, err_fn: Callable[[E], R], ok_fn: Callable[[V], R]) -> R:
        raise NotImplementedError

    def get_or_else(self, default: V) -> V:
        raise NotImplementedError

    def get_or_else_get(self, supplier: Callable[[], V]) -> V:
        raise NotImplementedError

    def get_err_or_else(self, default: E) -> E:
        raise NotImplementedError

    def get_err_or_else_get(self, supplier: Callable[[], E]) -> E:
        raise NotImplementedError

    def to_optional(self) -> Optional[V]:
        raise NotImplementedError

    def to_err_optional(self) -> Optional[E]:
        raise NotImplementedError

    def to_future(self) -> Future:
        """
        Return an already completed ``concurrent.futures.Future``.

        ``Err`` completes the future with ``UnwrapError`` wrapping the error.
        """
        future: Future = Future()
        self.tap(
            future.set_result,
            lambda error: future.set_exception(UnwrapError(error)),
        )
        return future

    def unwrap(self) -> V:
        """
        Return the value or raise ``UnwrapError``.

        Reserved for tests and program boundaries.
        """
        raise NotImplementedError

    def unwrap_err(self) -> E:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Ok(Result[E, V]):
    """Success result containing a value."""

    value: V

    def is_ok(self) -> bool:
        return True

    def contains(self, value: Any) -> bool:
        return self.value == value

    def contains_err(self, error: Any) -> bool:
        return False

    def ensure(self, predicate: Callable[[V], bool], error_if_false: E) -> Result[E, V]:
        return self if predicate(self.value) else Err(error_if_false)

    def filter_not(
        self, predicate: Callable[[V], bool], error_if_true: E
    ) -> Result[E, V]:
        return Err(error_if_true) if predicate(self.value) else self

    def map(self, fn: Callable[[V], U]) -> Result[E, U]:
        return Ok(fn(self.value))

    def flat_map(self, fn: Callable[[V], Result[E, U]]) -> Result[E, U]:
        return fn(self.value)

    def map_err(self, fn: Callable[[E], F]) -> Result[F, V]:
        return self  # type: ignore[return-value]

    def bimap(self, err_fn: Callable[[E], F], ok_fn: Callable[[V], U]) -> Result[F, U]:
        return Ok(ok_fn(self.value))

    def zip(self, other: Result[E, U], combiner: Callable[[V, U], R]) -> Result[E, R]:
        return other.map(lambda other_value: combiner(self.value, other_value))

    def peek(self, consumer: Callable[[V], Any]) -> Result[E, V]:
        consumer(self.value)
        return self

    def peek_err(self, consumer: Callable[[E], Any]) -> Result[E, V]:
        return self

    def tap(
        self, on_ok: Callable[[V], Any], on_err: Callable[[E], Any]
    ) -> Result[E, V]:
        on_ok(self.value)
        return self

    def recover(self, fn: Callable[[E], V]) -> Result[E, V]:
        return self

    def or_(self, supplier: Callable[[], Result[E, V]]) -> Result[E, V]:
        return self

    def or_else(self, alternative: Result[E, V]) -> Result[E, V]:
        return self

    def fold(self, err_fn: Callable[[E], R], ok_fn: Callable[[V], R]) -> R:
        return ok_fn(self.value)

    def get_or_else(self, default: V) -> V:
        return self.value

    def get_or_else_get(self, supplier: Callable[[], V]) -> V:
        return self.value

    def get_err_or_else(self, default: E) -> E:
        return default

    def get_err_or_else_get(self, supplier: Callable[[], E]) -> E:
        return supplier()

    def to_optional(self) -> Optional[V]:
        return self.value

    def to_err_optional(self) -> Optional[E]:
        return None

    def unwrap(self) -> V:
        return self.value

    def unwrap_err(self) -> E:
        raise UnwrapError(f"Cannot get error from Ok: {self.value!r}")


@dataclass(frozen=True, slots=True)
class Err(Result[E, V]):
    """Error result containing an error value. The error may not be None."""

    error: E

    def __post_init__(self):
        if self.error is None:
            raise ValueError("Err requires a non-None error")

    def is_ok(self) -> bool:
        return False

    def contains(self, value: Any) -> bool:
        return False

    def contains_err(self, error: Any) -> bool:
        return self.error == error

    def ensure(self, predicate: Callable[[V], bool], error_if_false: E) -> Result[E, V]:
        return self

    def filter_not(
        self, predicate: Callable[[V], bool], error_if_true: E
    ) -> Result[E, V]:
        return self

    def map(self, fn: Callable[[V], U]) -> Result[E, U]:
        return self  # type: ignore[return-value]

    def flat_map(self, fn: Callable[[V], Result[E, U]]) -> Result[E, U]:
        return self  # type: ignore[return-value]

    def map_err(self, fn: Callable[[E], F]) -> Result[F, V]:
        return Err(fn(self.error))

    def bimap(self, err_fn: Callable[[E], F], ok_fn: Callable[[V], U]) -> Result[F, U]:
        return Err(err_fn(self.error))

    def zip(self, other: Result[E, U], combiner: Callable[[V, U], R]) -> Result[E, R]:
        return self  # type: ignore[return-value]

    def peek(self, consumer: Callable[[V], Any]) -> Result[E, V]:
        return self

    def peek_err(self, consumer: Callable[[E], Any]) -> Result[E, V]:
        consumer(self.error)
        return self

    def tap(
        self, on_ok: Callable[[V], Any], on_err: Callable[[E], Any]
    ) -> Result[E, V]:
        on_err(self.error)
        return self

    def recover(self, fn: Callable[[E], V]) -> Result[E, V]:
        return Ok(fn(self.error))

    def or_(self, supplier: Callable[[], Result[E, V]]) -> Result[E, V]:
        return supplier()

    def or_else(self, alternative: Result[E, V]) -> Result[E, V]:
        return alternative

    def fold(self, err_fn: Callable[[E], R], ok_fn: Callable[[V], R]) -> R:
        return err_fn(self.error)

    def get_or_else(self, default: V) -> V:
        return default

    def get_or_else_get(self, supplier: Callable[[], V]) -> V:
        return supplier()

    def get_err_or_else(self, default: E) -> E:
        return self.error

    def get_err_or_else_get(self, supplier: Callable[[], E]) -> E:
        return self.error

    def to_optional(self) -> Optional[V]:
        return None

    def to_err_optional(self) -> Optional[E]:
        return self.error

    def unwrap(self) -> V:
        raise UnwrapError(self.error)

    def unwrap_err(self) -> E:
        return self.error


# --- construction helpers ---


def ok(value: V) -> Result[Any, V]:
    return Ok(value)


def err(error: E) -> Result[E, Any]:
    """Create an ``Err``. Raises ``ValueError`` if ``error`` is None."""
    return Err(error)


def of(thunk: Callable[[], V], error_mapper: ErrorMapper | None = None) -> Result[Any, V]:
    """
    Run a callable that may raise and capture the outcome.

    Args:
        thunk: Zero-argument callable to execute
        error_mapper: Optional function converting the raised exception into
            a domain error; without it the exception itself is the error

    Returns:
        Ok(return value) or Err(exception or mapped error)
    """
    try:
        return Ok(thunk())
    except Exception as exc:
        return Err(error_mapper(exc) if error_mapper is not None else exc)


def sequence(results: Iterable[Result[E, V]]) -> Result[E, list[V]]:
    """
    Turn an iterable of Results into a Result of list.

    The first ``Err`` in iteration order is returned and the rest of the
    iterable is not consumed.
    """
    values: list[V] = []
    for result in results:
        if isinstance(result, Err):
            return result  # type: ignore[return-value]
        values.append(result.value)
    return Ok(values)


def traverse(items: Iterable[U], fn: Callable[[U], Result[E, V]]) -> Result[E, list[V]]:
    """Apply ``fn`` to each item and sequence the outcomes lazily."""
    return sequence(fn(item) for item in items)


def flatten(nested: Result[E, Result[E, V]]) -> Result[E, V]:
    return nested.flat_map(lambda inner: inner)


def from_future(future: Future, error_mapper: ErrorMapper | None = None) -> Future:
    """
    Bridge a ``concurrent.futures.Future`` into a future of Result.

    A done callback is attached to ``future``; the returned future is
    completed exactly once, from that callback, and never blocks the caller.
    If ``error_mapper`` raises (or maps to None), the returned future fails
    with that exception.
    """
    bridged: Future = Future()

    def _complete(done: Future) -> None:
        try:
            outcome = of(done.result, error_mapper)
        except Exception as mapper_exc:
            # a failing error_mapper still completes the bridge
            bridged.set_exception(mapper_exc)
            return
        bridged.set_result(outcome)

    future.add_done_callback(_complete)
    return bridged


async def from_awaitable(
    awaitable: Awaitable[V], error_mapper: ErrorMapper | None = None
) -> Result[Any, V]:
    """Await ``awaitable`` and wrap its outcome; cancellation still propagates."""
    try:
        return Ok(await awaitable)
    except Exception as exc:
        return Err(error_mapper(exc) if error_mapper is not None else exc)
