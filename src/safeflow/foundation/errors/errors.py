"""Error taxonomy for container misuse and fault carriers.

Contract violations (reading the absent side, supplying a missing payload) are
raised immediately at the call that introduced them. Faults captured inside a
Left/Failure are data, not errors of this library; they only surface when a
caller explicitly unwraps.
"""

from __future__ import annotations

from enum import StrEnum
from typing import ClassVar, Self


class ErrorCode(StrEnum):
    """Standard codes for library errors."""
    NO_VALUE_PRESENT = "NO_VALUE_PRESENT"
    NULL_PAYLOAD = "NULL_PAYLOAD"
    UNCHECKED_FAULT = "UNCHECKED_FAULT"
    INVALID_CONTAINER = "INVALID_CONTAINER"


class SafeflowError(Exception):
    """Base exception for all errors raised by safeflow itself."""

    code: ClassVar[ErrorCode] = ErrorCode.UNCHECKED_FAULT


class NoValuePresent(SafeflowError, LookupError):
    """Accessed the side of a two-variant container that holds nothing."""

    code = ErrorCode.NO_VALUE_PRESENT

    def __init__(self, variant: str, requested: str) -> None:
        self.variant = variant
        super().__init__(f"No {requested} value present in {variant}")


class NullPayload(SafeflowError, ValueError):
    """A payload was required but None was supplied."""

    code = ErrorCode.NULL_PAYLOAD

    def __init__(self, where: str) -> None:
        super().__init__(f"{where} requires a non-None payload")


class InvalidContainer(SafeflowError, TypeError):
    """A chaining function returned something other than the expected container."""

    code = ErrorCode.INVALID_CONTAINER

    def __init__(self, where: str, expected: str, got: object) -> None:
        super().__init__(f"{where} expected {expected}, got {type(got).__name__}")


class UncheckedFault(SafeflowError, RuntimeError):
    """Carrier raising a captured fault at an explicit unwrap point.

    The original fault is chained as ``__cause__`` and available as ``fault``.
    """

    code = ErrorCode.UNCHECKED_FAULT

    def __init__(self, message: str, fault: BaseException | None = None) -> None:
        self.fault = fault
        super().__init__(message)
        if fault is not None:
            self.__cause__ = fault

    @classmethod
    def wrap(cls, fault: BaseException) -> Self:
        """Wrap fault with a ``"<FaultType>: <message>"`` message."""
        return cls(f"{type(fault).__name__}: {fault}", fault)


def propagate(exc: Exception) -> Exception:
    """Return the exception to re-raise from an adapted callable.

    Python draws no checked/unchecked line, so every ``Exception`` is already
    fit to cross a pipeline boundary and is returned as-is.
    """
    return exc
