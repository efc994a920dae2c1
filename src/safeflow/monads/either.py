"""Either: a disjoint union of two payloads.

Neither side is privileged by the type itself; by convention Left carries the
failure and Right the success, so the functor/monad operations act on Right
and short-circuit on Left.

- Functor: map (Right), map_left (Left), bimap
- Monad: flat_map
- Elimination: fold
- Recovery: recover, recover_with
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Generic, NoReturn, TypeVar, cast

from safeflow.foundation.errors import InvalidContainer, NoValuePresent, NullPayload

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from .result import Result

L = TypeVar("L")  # Left (conventionally error) type
R = TypeVar("R")  # Right (conventionally success) type
T = TypeVar("T")  # Mapped right type
M = TypeVar("M")  # Mapped left type


class Either(Generic[L, R]):
    """Tagged union holding exactly one of a Left or a Right payload.

    Payloads are never None: None is the absent marker of ``to_optional`` and
    would make fold/map ambiguous, so construction rejects it with NullPayload.

    Examples:
        >>> Right(10).map(lambda i: i * 2)
        Right(20)
        >>> Left("err").recover(lambda e: 0)
        Right(0)
        >>> Left("err").map(lambda i: i * 2)
        Left('err')

    Notes:
        - Closed: variants come only from Left()/Right(); there are no subclasses
        - Immutable: every operation returns a new Either (or self)
        - Pattern matching binds (is_right, payload): ``case Either(True, value)``
    """

    __slots__ = ("_value", "_is_right")
    __match_args__ = ("_is_right", "_value")

    def __init__(self, value: L | R, is_right: bool) -> None:
        """Private constructor. Use Left() or Right() instead."""
        if value is None:
            raise NullPayload("Right" if is_right else "Left")
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_is_right", is_right)

    def __setattr__(self, name: str, value: object) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    @classmethod
    def right(cls, value: R) -> Either[L, R]:
        return cls(value, is_right=True)

    @classmethod
    def left(cls, value: L) -> Either[L, R]:
        return cls(value, is_right=False)

    # ─────────────────────────────────────────────────────────────────
    # Type Checking
    # ─────────────────────────────────────────────────────────────────

    def is_right(self) -> bool:
        return self._is_right

    def is_left(self) -> bool:
        return not self._is_right

    # ─────────────────────────────────────────────────────────────────
    # Value Extraction
    # ─────────────────────────────────────────────────────────────────

    def get_right(self) -> R:
        """Extract Right payload.

        Raises:
            NoValuePresent: If this is a Left
        """
        if self._is_right:
            return cast(R, self._value)
        raise NoValuePresent("Left", "right")

    def get_left(self) -> L:
        """Extract Left payload.

        Raises:
            NoValuePresent: If this is a Right
        """
        if not self._is_right:
            return cast(L, self._value)
        raise NoValuePresent("Right", "left")

    def get_or_else(self, default: R) -> R:
        """Extract Right payload or return default."""
        return cast(R, self._value) if self._is_right else default

    # ─────────────────────────────────────────────────────────────────
    # Functor Operations
    # ─────────────────────────────────────────────────────────────────

    def map(self, f: Callable[[R], T]) -> Either[L, T]:
        """Apply f to a Right payload; a Left passes through without calling f."""
        if self._is_right:
            return Either(f(cast(R, self._value)), is_right=True)
        return cast("Either[L, T]", self)

    def map_left(self, f: Callable[[L], M]) -> Either[M, R]:
        """Apply f to a Left payload; a Right passes through."""
        if not self._is_right:
            return Either(f(cast(L, self._value)), is_right=False)
        return cast("Either[M, R]", self)

    def bimap(self, left_fn: Callable[[L], M], right_fn: Callable[[R], T]) -> Either[M, T]:
        """Map whichever side is present."""
        if self._is_right:
            return Either(right_fn(cast(R, self._value)), is_right=True)
        return Either(left_fn(cast(L, self._value)), is_right=False)

    # ─────────────────────────────────────────────────────────────────
    # Monad Operations
    # ─────────────────────────────────────────────────────────────────

    def flat_map(self, f: Callable[[R], Either[L, T]]) -> Either[L, T]:
        """Chain an operation that itself returns an Either.

        The Either returned by f is used verbatim. Returning None raises
        NullPayload; returning anything else that is not an Either raises
        InvalidContainer.
        """
        if self._is_right:
            return _checked(f(cast(R, self._value)), "Either.flat_map")
        return cast("Either[L, T]", self)

    # ─────────────────────────────────────────────────────────────────
    # Elimination
    # ─────────────────────────────────────────────────────────────────

    def fold(self, left_fn: Callable[[L], T], right_fn: Callable[[R], T]) -> T:
        """Collapse to a single value. Exactly one of the two functions runs."""
        if self._is_right:
            return right_fn(cast(R, self._value))
        return left_fn(cast(L, self._value))

    def if_right(self, action: Callable[[R], object]) -> Either[L, R]:
        """Run action on a Right payload, return self."""
        self.fold(_ignore, action)
        return self

    def if_left(self, action: Callable[[L], object]) -> Either[L, R]:
        """Run action on a Left payload, return self."""
        self.fold(action, _ignore)
        return self

    def peek(self, inspector: Callable[[Either[L, R]], object]) -> Either[L, R]:
        """Run inspector with this Either regardless of variant, return self."""
        inspector(self)
        return self

    # ─────────────────────────────────────────────────────────────────
    # Recovery
    # ─────────────────────────────────────────────────────────────────

    def recover(self, f: Callable[[L], R]) -> Either[L, R]:
        """Turn a Left into Right(f(left)); a Right is returned unchanged."""
        if self._is_right:
            return self
        return Either(f(cast(L, self._value)), is_right=True)

    def recover_with(self, f: Callable[[L], Either[L, R]]) -> Either[L, R]:
        """Replace a Left with the Either returned by f; a Right is returned unchanged."""
        if self._is_right:
            return self
        return _checked(f(cast(L, self._value)), "Either.recover_with")

    # ─────────────────────────────────────────────────────────────────
    # Conversion
    # ─────────────────────────────────────────────────────────────────

    def swap(self) -> Either[R, L]:
        return Either(self._value, is_right=not self._is_right)

    def to_optional(self) -> R | None:
        """Right payload, or None for a Left (the Left payload is discarded)."""
        return cast(R, self._value) if self._is_right else None

    def to_result(self) -> Result[R, L]:
        """Left becomes Failure, Right becomes Success."""
        from .result import Result
        return Result(self._value, is_success=self._is_right)

    # ─────────────────────────────────────────────────────────────────
    # Dunder Methods
    # ─────────────────────────────────────────────────────────────────

    def __bool__(self) -> bool:
        """True if Right."""
        return self._is_right

    def __repr__(self) -> str:
        return f"{'Right' if self._is_right else 'Left'}({self._value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Either):
            return NotImplemented
        return self._is_right == other._is_right and self._value == other._value

    def __hash__(self) -> int:
        return hash((Either, self._is_right, self._value))

    def __iter__(self) -> Iterator[R]:
        """Yield the Right payload (0 or 1 element)."""
        if self._is_right:
            yield cast(R, self._value)


# ═════════════════════════════════════════════════════════════════════════════
# Constructor Functions
# ═════════════════════════════════════════════════════════════════════════════


def Right(value: R) -> Either[L, R]:  # noqa: N802
    """Construct the Right (conventionally success) variant."""
    return Either(value, is_right=True)


def Left(value: L) -> Either[L, R]:  # noqa: N802
    """Construct the Left (conventionally failure) variant."""
    return Either(value, is_right=False)


# ═════════════════════════════════════════════════════════════════════════════
# Collection Operations
# ═════════════════════════════════════════════════════════════════════════════


def sequence(eithers: Iterable[Either[L, R]]) -> Either[L, list[R]]:
    """Turn many Eithers into one, stopping at the first Left.

    Example:
        >>> sequence([Right(1), Right(2)])
        Right([1, 2])
        >>> sequence([Right(1), Left("bad"), Right(3)])
        Left('bad')
    """
    values: list[R] = []
    for either in eithers:
        if either.is_left():
            return cast("Either[L, list[R]]", either)
        values.append(either.get_right())
    return Right(values)


def traverse(items: Iterable[T], f: Callable[[T], Either[L, R]]) -> Either[L, list[R]]:
    """Map f over items and sequence the results. Evaluation stops at the first Left."""
    return sequence(f(item) for item in items)


def partition(eithers: Iterable[Either[L, R]]) -> tuple[list[L], list[R]]:
    """Split into (lefts, rights), preserving order."""
    lefts: list[L] = []
    rights: list[R] = []
    for either in eithers:
        either.fold(lefts.append, rights.append)
    return lefts, rights


def _checked(value: object, where: str) -> Either:
    if value is None:
        raise NullPayload(where)
    if not isinstance(value, Either):
        raise InvalidContainer(where, "Either", value)
    return value


def _ignore(_: object) -> None:
    return None
