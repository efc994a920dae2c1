"""Settle an externally resolved computation into a Try.

Blocking (``settle``) and awaiting (``settle_async``) bridges share one rule:
the value becomes a Success, and a fault becomes a Failure after exactly one
level of wrapping is removed.
"""

from __future__ import annotations

import asyncio
import inspect
from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

from safeflow.foundation.errors import UncheckedFault
from safeflow.monads.attempt import Try, try_of
from safeflow.observability.logging import fault_fields, get_logger

if TYPE_CHECKING:
    from collections.abc import Awaitable

T_co = TypeVar("T_co", covariant=True)
T = TypeVar("T")

_log = get_logger("safeflow.extensions")


@runtime_checkable
class SettledHandle(Protocol[T_co]):
    """Anything with a blocking ``result()``, e.g. ``concurrent.futures.Future``.

    asyncio futures and tasks also expose ``result()`` but never block; settle
    rejects them.
    """

    def result(self) -> T_co: ...


def unwrap_cause(fault: BaseException) -> BaseException:
    """Strip one wrapper: an UncheckedFault's cause or a single-member exception group."""
    if isinstance(fault, UncheckedFault) and fault.__cause__ is not None:
        return fault.__cause__
    if isinstance(fault, BaseExceptionGroup) and len(fault.exceptions) == 1:
        return fault.exceptions[0]
    return fault


def settle(source: SettledHandle[T]) -> Try[T]:
    """Block on ``source.result()`` and capture the outcome.

    No timeout is applied here; bound the wait on the handle itself.

    Raises:
        TypeError: If source is awaitable (an asyncio future or task, a
            coroutine). Its result() does not block; use settle_async.
    """
    if inspect.isawaitable(source):
        raise TypeError(f"{type(source).__name__} settles on an event loop; await it with from_awaitable instead")
    return _finish(try_of(source.result))


async def settle_async(source: Awaitable[T]) -> Try[T]:
    """Await source and capture the outcome.

    A CancelledError from a cancelled source is captured. Cancellation of the
    awaiting task itself still propagates.
    """
    try:
        value = await source
    except asyncio.CancelledError as exc:
        if (task := asyncio.current_task()) is not None and task.cancelling():
            raise
        return _finish(Try.failure(exc))
    except Exception as exc:
        return _finish(Try.failure(exc))
    return _finish(try_of(lambda: value))


def _finish(outcome: Try[T]) -> Try[T]:
    if outcome.is_success():
        return outcome
    cause = unwrap_cause(outcome.get_error())
    _log.debug("future settled with fault", **fault_fields(cause))
    return Try.failure(cause)
