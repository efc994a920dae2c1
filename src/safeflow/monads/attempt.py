"""Try: a computation whose raised fault is captured as a value.

``try_of`` is the fault-catching entry point. ``map``, ``flat_map``, ``recover``
and ``recover_with`` evaluate their callback under the same catch discipline,
so an exception raised inside a chain becomes a Failure at that step instead of
propagating. Everything else works on the already-materialized state.

Only ``Exception`` is captured; KeyboardInterrupt, SystemExit and GeneratorExit
always propagate.

Example:
    >>> attempt = try_of(lambda: int("42")).map(lambda n: n + 1)
    >>> attempt.get_or_else(0)
    43
    >>> try_of(lambda: int("x")).is_failure_of(ValueError)
    True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, NoReturn, TypeVar, cast

from safeflow.foundation.errors import InvalidContainer, NoValuePresent, NullPayload, UncheckedFault

if TYPE_CHECKING:
    from collections.abc import Iterator

    from .either import Either
    from .result import Result

T = TypeVar("T")  # Success type
U = TypeVar("U")  # Mapped success type
L = TypeVar("L")  # Mapped fault type


def _identity(x: T) -> T:
    return x


class Try(Generic[T]):
    """Success(value) or Failure(fault), fixed at construction.

    A Success never holds None. A Failure always holds an exception instance.
    ``match`` binds (is_success, payload), e.g. ``case Try(False, fault)``.
    """

    __slots__ = ("_value", "_is_success")
    __match_args__ = ("_is_success", "_value")

    def __init__(self, value: T | BaseException, is_success: bool) -> None:
        """Private constructor. Use try_of(), Try.success() or Try.failure() instead."""
        if value is None:
            raise NullPayload("Try.success" if is_success else "Try.failure")
        if not is_success and not isinstance(value, BaseException):
            raise InvalidContainer("Try.failure", "an exception instance", value)
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_is_success", is_success)

    def __setattr__(self, name: str, value: object) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def of(cls, supplier: Callable[[], T]) -> Try[T]:
        """Alias of try_of()."""
        return try_of(supplier)

    @classmethod
    def success(cls, value: T) -> Try[T]:
        return cls(value, is_success=True)

    @classmethod
    def failure(cls, fault: BaseException) -> Try[T]:
        return cls(fault, is_success=False)

    # ─────────────────────────────────────────────────────────────────
    # State
    # ─────────────────────────────────────────────────────────────────

    def is_success(self) -> bool:
        return self._is_success

    def is_failure(self) -> bool:
        return not self._is_success

    def is_failure_of(self, *fault_types: type[BaseException]) -> bool:
        """True only for a Failure whose fault is an instance of one of fault_types."""
        return not self._is_success and isinstance(self._value, fault_types)

    # ─────────────────────────────────────────────────────────────────
    # Value Extraction
    # ─────────────────────────────────────────────────────────────────

    def get(self) -> T:
        """Return the value, or raise the captured fault itself."""
        if self._is_success:
            return cast(T, self._value)
        raise cast(BaseException, self._value)

    def get_error(self) -> BaseException:
        """Return the captured fault.

        Raises:
            NoValuePresent: If this is a Success
        """
        if not self._is_success:
            return cast(BaseException, self._value)
        raise NoValuePresent("Success", "fault")

    def get_or_else(self, default: T) -> T:
        return cast(T, self._value) if self._is_success else default

    def get_or_else_get(self, f: Callable[[BaseException], T]) -> T:
        """Return the value, or compute one from the fault."""
        return self.fold(f, _identity)

    def get_or_throw(self, mapper: Callable[[BaseException], BaseException] = UncheckedFault.wrap) -> T:
        """Return the value, or raise mapper(fault) chained to the fault.

        The default mapper wraps the fault in UncheckedFault.

        Example:
            >>> try_of(lambda: 1 / 0).get_or_throw(lambda e: RuntimeError("Auth failed"))
            Traceback (most recent call last):
            RuntimeError: Auth failed
        """
        if self._is_success:
            return cast(T, self._value)
        fault = cast(BaseException, self._value)
        raised = mapper(fault)
        if raised is fault:
            raise fault
        if raised.__cause__ is None:
            raise raised from fault
        raise raised

    # ─────────────────────────────────────────────────────────────────
    # Transformations (catch discipline)
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[T], U]) -> Try[U]:
        """Success becomes try_of(f(value)); a fault raised by f becomes a Failure."""
        if self._is_success:
            value = cast(T, self._value)
            return try_of(lambda: f(value))
        return cast("Try[U]", self)

    def flat_map(self, f: Callable[[T], Try[U]]) -> Try[U]:
        """Chain a Try-returning step; a fault raised by f becomes a Failure."""
        if self._is_success:
            return _flatten(lambda: f(cast(T, self._value)), "Try.flat_map")
        return cast("Try[U]", self)

    def recover(self, f: Callable[[BaseException], T]) -> Try[T]:
        """Failure becomes try_of(f(fault)); a Success is returned unchanged."""
        if self._is_success:
            return self
        fault = cast(BaseException, self._value)
        return try_of(lambda: f(fault))

    def recover_with(self, f: Callable[[BaseException], Try[T]]) -> Try[T]:
        """Failure is replaced by the Try returned from f, evaluated under catch discipline."""
        if self._is_success:
            return self
        return _flatten(lambda: f(cast(BaseException, self._value)), "Try.recover_with")

    def filter(self, predicate: Callable[[T], bool], fault_supplier: Callable[[], BaseException]) -> Try[T]:
        """Turn a Success whose value fails predicate into Failure(fault_supplier())."""
        if self._is_success and not predicate(cast(T, self._value)):
            return Try(fault_supplier(), is_success=False)
        return self

    def fold(self, failure_fn: Callable[[BaseException], U], success_fn: Callable[[T], U]) -> U:
        """Collapse to a single value. Exactly one of the two functions runs."""
        if self._is_success:
            return success_fn(cast(T, self._value))
        return failure_fn(cast(BaseException, self._value))

    # ─────────────────────────────────────────────────────────────────
    # Inspection
    # ─────────────────────────────────────────────────────────────────

    def peek(self, action: Callable[[T], object]) -> Try[T]:
        """Call action with the value on Success, return self."""
        if self._is_success:
            action(cast(T, self._value))
        return self

    def peek_failure(self, action: Callable[[BaseException], object]) -> Try[T]:
        """Call action with the fault on Failure, return self."""
        if not self._is_success:
            action(cast(BaseException, self._value))
        return self

    on_success = peek
    on_failure = peek_failure

    # ─────────────────────────────────────────────────────────────────
    # Conversion
    # ─────────────────────────────────────────────────────────────────

    def to_optional(self) -> T | None:
        return cast(T, self._value) if self._is_success else None

    def to_either(self, fault_mapper: Callable[[BaseException], L]) -> Either[L, T]:
        """Failure becomes Left(fault_mapper(fault)), Success becomes Right."""
        from .either import Either
        if self._is_success:
            return Either(self._value, is_right=True)
        return Either(fault_mapper(cast(BaseException, self._value)), is_right=False)

    def to_result(self, fault_mapper: Callable[[BaseException], L] = _identity) -> Result[T, L]:  # type: ignore[assignment]
        from .result import Result
        if self._is_success:
            return Result(self._value, is_success=True)
        return Result(fault_mapper(cast(BaseException, self._value)), is_success=False)

    def to_stream(self) -> Iterator[T]:
        """Lazy iterator over the value: one element on Success, none on Failure.

        Each call returns a fresh iterator.
        """
        return iter(self)

    to_lazy_sequence = to_stream

    # ─────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────

    def __bool__(self) -> bool:
        return self._is_success

    def __repr__(self) -> str:
        if self._is_success:
            return f"Success({self._value!r})"
        return f"Failure({type(self._value).__name__}({str(self._value)!r}))"

    def __eq__(self, other: object) -> bool:
        """Successes compare by value; Failures by fault identity."""
        if not isinstance(other, Try):
            return NotImplemented
        if self._is_success != other._is_success:
            return False
        return self._value == other._value if self._is_success else self._value is other._value

    def __hash__(self) -> int:
        return hash((Try, self._is_success, self._value if self._is_success else id(self._value)))

    def __iter__(self) -> Iterator[T]:
        if self._is_success:
            yield cast(T, self._value)


# ═════════════════════════════════════════════════════════════════════════════
# Constructor Functions
# ═════════════════════════════════════════════════════════════════════════════


def try_of(supplier: Callable[[], T]) -> Try[T]:
    """Run supplier, capturing any raised Exception as a Failure.

    A None return is not a valid payload and becomes Failure(NullPayload).
    """
    try:
        value = supplier()
    except Exception as exc:
        return Try(exc, is_success=False)
    if value is None:
        return Try(NullPayload("Try.of"), is_success=False)
    return Try(value, is_success=True)


def _flatten(produce: Callable[[], object], where: str) -> Try:
    try:
        produced = produce()
    except Exception as exc:
        return Try(exc, is_success=False)
    if produced is None:
        return Try(NullPayload(where), is_success=False)
    if not isinstance(produced, Try):
        return Try(InvalidContainer(where, "Try", produced), is_success=False)
    return produced

