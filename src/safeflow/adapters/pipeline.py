"""Lazy filters for host pipelines that carry optional or container elements.

Each helper takes any iterable and returns a generator, so it slots between
``map()`` and a consumer without materializing the stream.

Example:
    >>> from safeflow.adapters import safe_function_either
    >>> parsed = map(safe_function_either(int), ["1", "x", "3"])
    >>> list(keep_rights(parsed))
    [1, 3]
"""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from safeflow.foundation.errors import InvalidContainer
from safeflow.monads import Either, Result, Try

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

T = TypeVar("T")
L = TypeVar("L")


def keep_present(items: Iterable[T | None]) -> Iterator[T]:
    """Drop absent (None) elements, e.g. after safe_function_optional."""
    return (item for item in items if item is not None)


def keep_rights(items: Iterable[Either[L, T]]) -> Iterator[T]:
    """Yield Right payloads, dropping Lefts.

    Raises:
        InvalidContainer: On reaching an element that is not an Either
    """
    for item in items:
        if not isinstance(item, Either):
            raise InvalidContainer("keep_rights", "Either", item)
        yield from item


def keep_successes(items: Iterable[Result[T, L]]) -> Iterator[T]:
    """Yield Success values, dropping Failures. Also accepts Try elements.

    Raises:
        InvalidContainer: On reaching an element that is neither a Result nor a Try
    """
    for item in items:
        if not isinstance(item, (Result, Try)):
            raise InvalidContainer("keep_successes", "Result or Try", item)
        yield from item
