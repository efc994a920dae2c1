"""Result monad for type-safe error handling.

Same algebra as Either, oriented explicitly around success (T) and typed
failure (E):
- Functor: map, map_error
- Monad: flat_map
- Railway-oriented composition with filter/recover
- Extraction: get_or_else, get_or_else_get, or_else_throw
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, NoReturn, TypeVar, cast

from safeflow.foundation.errors import InvalidContainer, NoValuePresent, NullPayload

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from .either import Either

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Mapped success type
F = TypeVar("F")  # Mapped error type


class Result(Generic[T, E]):
    """Discriminated union representing Success or Failure.

    None is rejected as either payload, the same policy Either applies.

    Examples:
        >>> Success(5).map(lambda x: x * 2).get()
        10
        >>> Failure("123").map_error(int).get_error()
        123

        Railway-oriented programming:
        >>> def positive(x: int) -> Result[int, str]:
        ...     return Success(x) if x > 0 else Failure("must be positive")
        >>> Success(5).flat_map(positive).map(lambda x: x * 2)
        Success(10)

        Pattern matching binds (is_success, payload):
        >>> match Failure("bad"):
        ...     case Result(True, value): print("ok", value)
        ...     case Result(False, error): print("failed", error)
        failed bad
    """

    __slots__ = ("_value", "_is_success")
    __match_args__ = ("_is_success", "_value")

    def __init__(self, value: T | E, is_success: bool) -> None:
        """Private constructor. Use Success() or Failure() instead."""
        if value is None:
            raise NullPayload("Success" if is_success else "Failure")
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_is_success", is_success)

    def __setattr__(self, name: str, value: object) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def success(cls, value: T) -> Result[T, E]:
        return cls(value, is_success=True)

    @classmethod
    def failure(cls, error: E) -> Result[T, E]:
        return cls(error, is_success=False)

    # ─────────────────────────────────────────────────────────────────
    # Type Checking
    # ─────────────────────────────────────────────────────────────────

    def is_success(self) -> bool:
        return self._is_success

    def is_failure(self) -> bool:
        return not self._is_success

    # ─────────────────────────────────────────────────────────────────
    # Value Extraction
    # ─────────────────────────────────────────────────────────────────

    def get(self) -> T:
        """Extract Success value.

        Raises:
            NoValuePresent: If Result is a Failure
        """
        if self._is_success:
            return cast(T, self._value)
        raise NoValuePresent("Failure", "success")

    def get_error(self) -> E:
        """Extract Failure error.

        Raises:
            NoValuePresent: If Result is a Success
        """
        if not self._is_success:
            return cast(E, self._value)
        raise NoValuePresent("Success", "error")

    def get_or_else(self, default: T) -> T:
        """Extract Success value or return default."""
        return cast(T, self._value) if self._is_success else default

    def get_or_else_get(self, f: Callable[[E], T]) -> T:
        """Extract Success value or compute one from the error."""
        return self.fold(f, _identity)

    def or_else_throw(self, mapper: Callable[[E], BaseException]) -> T:
        """Extract Success value or raise the exception mapped from the error."""
        if self._is_success:
            return cast(T, self._value)
        raise mapper(cast(E, self._value))

    # ─────────────────────────────────────────────────────────────────
    # Functor Operations
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Result[U, E]:
        """Map f over a Success value; a Failure passes through untouched."""
        if self._is_success:
            return Result(f(cast(T, self._value)), is_success=True)
        return cast("Result[U, E]", self)

    def map_error(self, f: Callable[[E], F]) -> Result[T, F]:
        """Map f over a Failure error; a Success passes through untouched."""
        if not self._is_success:
            return Result(f(cast(E, self._value)), is_success=False)
        return cast("Result[T, F]", self)

    # ─────────────────────────────────────────────────────────────────
    # Monad Operations
    # ─────────────────────────────────────────────────────────────────

    def flat_map(self, f: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Monadic bind - chain operations that can fail.

        Example:
            >>> def parse_int(s: str) -> Result[int, str]:
            ...     try:
            ...         return Success(int(s))
            ...     except ValueError:
            ...         return Failure(f"invalid int: {s}")
            >>> Success("42").flat_map(parse_int).get()
            42
        """
        if self._is_success:
            return _checked(f(cast(T, self._value)), "Result.flat_map")
        return cast("Result[U, E]", self)

    def fold(self, failure_fn: Callable[[E], U], success_fn: Callable[[T], U]) -> U:
        """Collapse to a single value. Exactly one of the two functions runs."""
        if self._is_success:
            return success_fn(cast(T, self._value))
        return failure_fn(cast(E, self._value))

    def filter(self, predicate: Callable[[T], bool], error_fn: Callable[[T], E]) -> Result[T, E]:
        """Turn a Success whose value fails predicate into Failure(error_fn(value))."""
        if self._is_success and not predicate(cast(T, self._value)):
            return Result(error_fn(cast(T, self._value)), is_success=False)
        return self

    def recover(self, f: Callable[[E], T]) -> Result[T, E]:
        """Turn a Failure into Success(f(error))."""
        if self._is_success:
            return self
        return Result(f(cast(E, self._value)), is_success=True)

    def recover_with(self, f: Callable[[E], Result[T, E]]) -> Result[T, E]:
        """Replace a Failure with the Result returned by f."""
        if self._is_success:
            return self
        return _checked(f(cast(E, self._value)), "Result.recover_with")

    # ─────────────────────────────────────────────────────────────────
    # Inspection
    # ─────────────────────────────────────────────────────────────────

    def on_success(self, action: Callable[[T], object]) -> Result[T, E]:
        """Call action with the Success value for side effects, return self."""
        if self._is_success:
            action(cast(T, self._value))
        return self

    def on_failure(self, action: Callable[[E], object]) -> Result[T, E]:
        """Call action with the Failure error for side effects, return self."""
        if not self._is_success:
            action(cast(E, self._value))
        return self

    def peek(self, action: Callable[[Result[T, E]], object]) -> Result[T, E]:
        """Call action with this Result regardless of variant, return self."""
        action(self)
        return self

    # ─────────────────────────────────────────────────────────────────
    # Conversion
    # ─────────────────────────────────────────────────────────────────

    def to_optional(self) -> T | None:
        return cast(T, self._value) if self._is_success else None

    def to_either(self) -> Either[E, T]:
        """Failure becomes Left, Success becomes Right."""
        from .either import Either
        return Either(self._value, is_right=self._is_success)

    # ─────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────

    def __bool__(self) -> bool:
        """Enable truthiness checking (True if Success)."""
        return self._is_success

    def __repr__(self) -> str:
        return f"{'Success' if self._is_success else 'Failure'}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        """Structural equality."""
        if not isinstance(other, Result):
            return NotImplemented
        return self._is_success == other._is_success and self._value == other._value

    def __hash__(self) -> int:
        return hash((Result, self._is_success, self._value))

    def __iter__(self) -> Iterator[T]:
        """Iterate over Success value (yields 0 or 1 element)."""
        if self._is_success:
            yield cast(T, self._value)


# ═════════════════════════════════════════════════════════════════════════════
# Constructor Functions
# ═════════════════════════════════════════════════════════════════════════════


def Success(value: T) -> Result[T, E]:  # noqa: N802
    """Construct Success variant."""
    return Result(value, is_success=True)


def Failure(error: E) -> Result[T, E]:  # noqa: N802
    """Construct Failure variant."""
    return Result(error, is_success=False)


# ═════════════════════════════════════════════════════════════════════════════
# Collection Operations
# ═════════════════════════════════════════════════════════════════════════════


def sequence(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Convert Results to a Result of list. Fails fast on the first Failure.

    Example:
        >>> sequence([Success(1), Success(2), Success(3)]).get()
        [1, 2, 3]
        >>> sequence([Success(1), Failure("fail"), Success(3)]).get_error()
        'fail'
    """
    values: list[T] = []
    for result in results:
        if result.is_failure():
            return cast("Result[list[T], E]", result)
        values.append(result.get())
    return Success(values)


def traverse(items: Iterable[U], f: Callable[[U], Result[T, E]]) -> Result[list[T], E]:
    """Map a Result-returning function over items and sequence the results.

    Items after the first Failure are never passed to f.
    """
    return sequence(f(item) for item in items)


def collect_results(results: Iterable[Result[T, E]]) -> Result[list[T], list[E]]:
    """Collect all Results, accumulating every error if any fail.

    Example:
        >>> collect_results([Success(1), Failure("e1"), Success(3), Failure("e2")]).get_error()
        ['e1', 'e2']
    """
    values: list[T] = []
    errors: list[E] = []
    for result in results:
        result.fold(errors.append, values.append)
    return Failure(errors) if errors else Success(values)


def _checked(value: object, where: str) -> Result:
    if value is None:
        raise NullPayload(where)
    if not isinstance(value, Result):
        raise InvalidContainer(where, "Result", value)
    return value


def _identity(x: T) -> T:
    return x
