"""safeflow: value-level error handling for pipeline-style code.

Containers:
- Either[L, R]: Left | Right, Left conventionally the failure
- Result[T, E]: Success | Failure with a typed error
- Try[T]: Success | Failure holding a captured exception

Adapters bridge exception-raising callables into these containers so a step
inside ``map()`` or a comprehension can fail without aborting the whole stream.

Example:
    >>> from safeflow import Right, safe_function_optional, try_of
    >>> Right(10).map(lambda i: i * 2)
    Right(20)
    >>> parse = safe_function_optional(int)
    >>> [n for n in map(parse, ["1", "2", "bad", "3"]) if n is not None]
    [1, 2, 3]
    >>> try_of(lambda: 1 / 0).is_failure_of(ZeroDivisionError)
    True
"""

from .adapters import (
    keep_present,
    keep_rights,
    keep_successes,
    safe_function_either,
    safe_function_optional,
    wrap_bi_consumer,
    wrap_bi_function,
    wrap_consumer,
    wrap_function,
    wrap_runnable,
    wrap_supplier,
)
from .foundation import (
    ErrorCode,
    InvalidContainer,
    NoValuePresent,
    NullPayload,
    SafeflowError,
    SafeflowSettings,
    UncheckedFault,
    clear_settings_cache,
    get_settings,
)
from .monads import Either, Failure, Left, Result, Right, Success, Try, collect_results, partition, try_of
from .observability import configure_logging, get_logger

__version__ = "0.1.0"

__all__ = [
    # Containers
    "Either", "Left", "Right",
    "Result", "Success", "Failure",
    "Try", "try_of",
    "partition", "collect_results",
    # Adapters
    "wrap_function", "wrap_bi_function", "wrap_consumer", "wrap_bi_consumer", "wrap_supplier", "wrap_runnable",
    "safe_function_optional", "safe_function_either",
    "keep_present", "keep_rights", "keep_successes",
    # Errors
    "ErrorCode", "SafeflowError", "NoValuePresent", "NullPayload", "InvalidContainer", "UncheckedFault",
    # Configuration & logging
    "SafeflowSettings", "get_settings", "clear_settings_cache",
    "configure_logging", "get_logger",
]
