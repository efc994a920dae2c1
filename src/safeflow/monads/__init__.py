"""Algebraic containers for value-level error handling.

Provides three closed two-variant types:
- Either[L, R]: disjoint union, Left by convention the failure side
- Result[T, E]: Success or typed Failure
- Try[T]: Success or captured exception, built by running a computation

Example:
    >>> from safeflow.monads import Right, Success, try_of
    >>> Right(10).map(lambda i: i * 2)
    Right(20)
    >>> Success(3).filter(lambda n: n > 5, lambda n: f"{n} too small")
    Failure('3 too small')
    >>> try_of(lambda: int("bad")).is_failure()
    True
"""

from .attempt import Try, try_of
from .either import Either, Left, Right, partition
from .result import Failure, Result, Success, collect_results

__all__ = [
    # Core types
    "Either", "Result", "Try",
    # Constructors
    "Left", "Right", "Success", "Failure", "try_of",
    # Collection operations
    "partition", "collect_results",
]
