"""Adapter layer: make fallible callables usable inside pipelines.

- wrap_*: re-raise every fault unchanged (never suppress)
- safe_function_optional: fault -> None (suppresses the fault)
- safe_function_either: fault -> Left(fault)
- keep_present/keep_rights/keep_successes: lazy filters for the resulting streams
"""

from .checked import (
    safe_function_either,
    safe_function_optional,
    wrap_bi_consumer,
    wrap_bi_function,
    wrap_consumer,
    wrap_function,
    wrap_runnable,
    wrap_supplier,
)
from .pipeline import keep_present, keep_rights, keep_successes

__all__ = [
    # Propagating
    "wrap_function", "wrap_bi_function", "wrap_consumer", "wrap_bi_consumer", "wrap_supplier", "wrap_runnable",
    # Capturing
    "safe_function_optional", "safe_function_either",
    # Pipeline filters
    "keep_present", "keep_rights", "keep_successes",
]
