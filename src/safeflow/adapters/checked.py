"""Adapters for fallible callables used inside pipelines.

Two families:

- ``wrap_*`` never suppress a fault. Every exception is re-raised as-is
  (Python has no checked exceptions, so nothing needs converting) after a
  debug event is logged. They preserve the wrapped callable's metadata.
- ``safe_function_*`` capture the fault into the return value.
  ``safe_function_either`` keeps it as a Left; ``safe_function_optional``
  DISCARDS it and returns None. That information loss is intentional.

Example:
    >>> parse = safe_function_optional(int)
    >>> [n for n in map(parse, ["1", "2", "bad", "3"]) if n is not None]
    [1, 2, 3]
"""

from __future__ import annotations

from functools import wraps
from typing import Callable, ParamSpec, TypeVar

from safeflow.foundation.config import get_settings
from safeflow.foundation.errors import propagate
from safeflow.monads.either import Either, Left, Right
from safeflow.observability.logging import fault_fields, get_logger

P = ParamSpec("P")
T = TypeVar("T")
U = TypeVar("U")
R = TypeVar("R")

_log = get_logger("safeflow.adapters")


def _wraps(func: Callable[..., object]) -> Callable[[Callable[P, R]], Callable[P, R]]:
    # builtins such as int expose a class __dict__ that must not be merged
    return wraps(func, updated=())


# ─────────────────────────────────────────────────────────────────────────────
# Propagating Wrappers
# ─────────────────────────────────────────────────────────────────────────────


def _propagating(func: Callable[P, R]) -> Callable[P, R]:
    @_wraps(func)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return func(*args, **kwargs)
        except Exception as exc:
            if get_settings().adapters.log_propagated:
                _log.debug("fault propagated", function=_name(func), **fault_fields(exc))
            raise propagate(exc)
    return wrapper


def wrap_function(function: Callable[[T], R]) -> Callable[[T], R]:
    """Adapt a one-argument function for use as a pipeline mapper."""
    return _propagating(function)


def wrap_bi_function(function: Callable[[T, U], R]) -> Callable[[T, U], R]:
    """Adapt a two-argument function, e.g. a reducer."""
    return _propagating(function)


def wrap_consumer(consumer: Callable[[T], object]) -> Callable[[T], None]:
    """Adapt a one-argument side effect; its return value is dropped."""
    call = _propagating(consumer)

    @_wraps(consumer)
    def accept(item: T) -> None:
        call(item)
    return accept


def wrap_bi_consumer(consumer: Callable[[T, U], object]) -> Callable[[T, U], None]:
    """Adapt a two-argument side effect; its return value is dropped."""
    call = _propagating(consumer)

    @_wraps(consumer)
    def accept(first: T, second: U) -> None:
        call(first, second)
    return accept


def wrap_supplier(supplier: Callable[[], R]) -> Callable[[], R]:
    """Adapt a zero-argument producer."""
    return _propagating(supplier)


def wrap_runnable(runnable: Callable[[], object]) -> Callable[[], None]:
    """Adapt a zero-argument action; its return value is dropped."""
    call = _propagating(runnable)

    @_wraps(runnable)
    def run() -> None:
        call()
    return run


# ─────────────────────────────────────────────────────────────────────────────
# Capturing Wrappers
# ─────────────────────────────────────────────────────────────────────────────


def safe_function_optional(function: Callable[[T], R]) -> Callable[[T], R | None]:
    """Return f(x), or None if f raises. The fault is suppressed.

    A None returned by f is likewise absent. Use safe_function_either when the
    cause matters.
    """
    @_wraps(function)
    def apply(item: T) -> R | None:
        try:
            return function(item)
        except Exception as exc:
            if get_settings().adapters.log_suppressed:
                _log.debug("fault suppressed", function=_name(function), **fault_fields(exc))
            return None
    return apply


def safe_function_either(function: Callable[[T], R]) -> Callable[[T], Either[Exception, R]]:
    """Return Right(f(x)), or Left(fault) if f raises.

    The Right is built inside the protected region, so a None result from f
    yields Left(NullPayload).
    """
    @_wraps(function)
    def apply(item: T) -> Either[Exception, R]:
        try:
            return Right(function(item))
        except Exception as exc:
            return Left(exc)
    return apply


def _name(func: Callable[..., object]) -> str:
    return getattr(func, "__qualname__", None) or repr(func)
