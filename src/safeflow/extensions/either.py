"""Build Either values from optionals, futures and fallible suppliers.

Right carries the produced value; Left carries whatever the supplied callback
makes of the absence or fault.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, TypeVar

from safeflow.monads.attempt import try_of
from safeflow.monads.either import Either, Left, Right

from ._settle import SettledHandle, settle, settle_async

if TYPE_CHECKING:
    from collections.abc import Awaitable

L = TypeVar("L")
R = TypeVar("R")


def from_optional(source: R | None, on_absent: Callable[[], L]) -> Either[L, R]:
    """Right(source), or Left(on_absent()) when source is None."""
    return Left(on_absent()) if source is None else Right(source)


def from_future(source: SettledHandle[R], fault_mapper: Callable[[BaseException], L]) -> Either[L, R]:
    """Block until source settles; a fault becomes Left(fault_mapper(cause)).

    Example:
        >>> from concurrent.futures import Future
        >>> done: Future[str] = Future()
        >>> done.set_result("done")
        >>> from_future(done, str)
        Right('done')
    """
    return settle(source).fold(lambda fault: Left(fault_mapper(fault)), Right)


async def from_awaitable(source: Awaitable[R], fault_mapper: Callable[[BaseException], L]) -> Either[L, R]:
    """Await source; same dispatch as from_future."""
    return (await settle_async(source)).fold(lambda fault: Left(fault_mapper(fault)), Right)


def from_supplier(supplier: Callable[[], R], fault_mapper: Callable[[BaseException], L]) -> Either[L, R]:
    """Right(supplier()), or Left(fault_mapper(fault)) if it raises."""
    return try_of(supplier).fold(lambda fault: Left(fault_mapper(fault)), Right)


from_checked = from_supplier
