"""Conversion extensions: containers from external source shapes.

One module per container, each with the same entry points:
- from_optional(source, on_absent): None is the absent marker
- from_future(source, ...): blocks on ``source.result()``
- from_awaitable(source, ...): async counterpart of from_future
- from_supplier(supplier, ...) / from_checked: capture a raised fault

Example:
    >>> from safeflow.extensions import either as either_ext
    >>> either_ext.from_optional(None, lambda: "missing")
    Left('missing')
"""

from . import attempt, either, result
from ._settle import SettledHandle, settle, settle_async, unwrap_cause

__all__ = ["attempt", "either", "result", "SettledHandle", "settle", "settle_async", "unwrap_cause"]
