"""Error taxonomy for safeflow.

- ErrorCode: Standard codes carried by every library error
- NoValuePresent/NullPayload/InvalidContainer: Contract violations, raised immediately
- UncheckedFault: Carrier used when a captured fault is raised at an unwrap point
"""

from .errors import (
    ErrorCode,
    InvalidContainer,
    NoValuePresent,
    NullPayload,
    SafeflowError,
    UncheckedFault,
    propagate,
)

__all__ = [
    "ErrorCode", "SafeflowError",
    "NoValuePresent", "NullPayload", "InvalidContainer",
    "UncheckedFault", "propagate",
]
