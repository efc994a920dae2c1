"""Build Result values from optionals, futures and fallible suppliers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, TypeVar

from safeflow.monads.attempt import try_of
from safeflow.monads.result import Failure, Result, Success

from ._settle import SettledHandle, settle, settle_async

if TYPE_CHECKING:
    from collections.abc import Awaitable

T = TypeVar("T")
E = TypeVar("E")


def from_optional(source: T | None, on_absent: Callable[[], E]) -> Result[T, E]:
    """Success(source), or Failure(on_absent()) when source is None."""
    return Failure(on_absent()) if source is None else Success(source)


def from_future(source: SettledHandle[T], fault_mapper: Callable[[BaseException], E]) -> Result[T, E]:
    """Block until source settles; a fault becomes Failure(fault_mapper(cause))."""
    return settle(source).to_result(fault_mapper)


async def from_awaitable(source: Awaitable[T], fault_mapper: Callable[[BaseException], E]) -> Result[T, E]:
    """Await source; same dispatch as from_future."""
    return (await settle_async(source)).to_result(fault_mapper)


def from_supplier(supplier: Callable[[], T], fault_mapper: Callable[[BaseException], E]) -> Result[T, E]:
    """Success(supplier()), or Failure(fault_mapper(fault)) if it raises.

    Example:
        >>> from_supplier(lambda: int("x"), lambda e: type(e).__name__)
        Failure('ValueError')
    """
    return try_of(supplier).to_result(fault_mapper)


from_checked = from_supplier
