"""Build Try values from optionals, futures and suppliers."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, TypeVar

from safeflow.monads.attempt import Try, try_of

from ._settle import SettledHandle, settle, settle_async

if TYPE_CHECKING:
    from collections.abc import Awaitable

T = TypeVar("T")


def from_optional(source: T | None, on_absent: Callable[[], BaseException]) -> Try[T]:
    """Success(source), or Failure(on_absent()) when source is None."""
    return Try.failure(on_absent()) if source is None else Try.success(source)


def from_future(source: SettledHandle[T]) -> Try[T]:
    """Block until source settles; the unwrapped cause of a fault is the Failure."""
    return settle(source)


async def from_awaitable(source: Awaitable[T]) -> Try[T]:
    return await settle_async(source)


def from_supplier(supplier: Callable[[], T]) -> Try[T]:
    """Same as try_of()."""
    return try_of(supplier)


from_ = from_supplier
