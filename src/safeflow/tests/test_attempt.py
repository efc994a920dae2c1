"""Tests for the Try container and its catch discipline."""

from __future__ import annotations

import pytest

from safeflow.foundation.errors import InvalidContainer, NoValuePresent, NullPayload, UncheckedFault
from safeflow.monads import Failure, Left, Right, Success, Try, try_of


class IllegalStateError(Exception):
    pass


def boom(exc: BaseException) -> int:
    raise exc


# ═════════════════════════════════════════════════════════════════════════════
# Construction
# ═════════════════════════════════════════════════════════════════════════════


def test_success_contains_value() -> None:
    attempt = try_of(lambda: 42)
    assert attempt.is_success()
    assert attempt.get_or_else(-1) == 42
    assert attempt.get() == 42


def test_failure_captures_fault_identity() -> None:
    fault = OSError("IO problem")
    attempt = try_of(lambda: boom(fault))

    assert attempt.is_failure()
    assert attempt.get_error() is fault
    assert attempt.is_failure_of(OSError)
    assert not attempt.is_failure_of(KeyError)
    assert attempt.is_failure_of(KeyError, OSError)


def test_of_alias() -> None:
    assert Try.of(lambda: 1) == Try.success(1)


def test_none_result_becomes_null_payload_failure() -> None:
    attempt = try_of(lambda: None)
    assert attempt.is_failure_of(NullPayload)


def test_direct_constructors_validate_payload() -> None:
    with pytest.raises(NullPayload):
        Try.success(None)
    with pytest.raises(NullPayload):
        Try.failure(None)  # type: ignore[arg-type]
    with pytest.raises(InvalidContainer):
        Try.failure("not an exception")  # type: ignore[arg-type]


def test_keyboard_interrupt_is_not_captured() -> None:
    with pytest.raises(KeyboardInterrupt):
        try_of(lambda: boom(KeyboardInterrupt()))


def test_success_has_no_error() -> None:
    with pytest.raises(NoValuePresent):
        Try.success(1).get_error()


def test_get_reraises_the_captured_fault() -> None:
    fault = ValueError("bad")
    with pytest.raises(ValueError) as info:
        Try.failure(fault).get()
    assert info.value is fault


# ═════════════════════════════════════════════════════════════════════════════
# Laws
# ═════════════════════════════════════════════════════════════════════════════


def test_functor_identity() -> None:
    ok = Try.success(42)
    err = Try.failure(ValueError("x"))
    assert ok.map(lambda x: x) == ok
    assert err.map(lambda x: x) == err


def test_flatten_law() -> None:
    ok = Try.success(42)
    err = Try.failure(ValueError("x"))
    assert ok.flat_map(Try.success) == ok
    assert err.flat_map(Try.success) == err


# ═════════════════════════════════════════════════════════════════════════════
# Transformations
# ═════════════════════════════════════════════════════════════════════════════


def test_map_transforms_value() -> None:
    assert try_of(lambda: 10).map(lambda x: x * 2).get_or_else(-1) == 20


def test_map_captures_fault_raised_by_function() -> None:
    attempt = Try.success("abc").map(int)
    assert attempt.is_failure_of(ValueError)


def test_map_skips_function_on_failure() -> None:
    calls: list[int] = []
    err = Try.failure(ValueError("x"))
    assert err.map(lambda v: calls.append(v) or v) is err
    assert calls == []


def test_flat_map_chains_computation() -> None:
    attempt = try_of(lambda: 5).flat_map(lambda v: try_of(lambda: f"Value: {v}"))
    assert attempt.get_or_else("fail") == "Value: 5"


def test_flat_map_captures_fault_and_bad_returns() -> None:
    assert Try.success(1).flat_map(lambda v: boom(RuntimeError("x"))).is_failure_of(RuntimeError)
    assert Try.success(1).flat_map(lambda v: None).is_failure_of(NullPayload)  # type: ignore[arg-type,return-value]
    assert Try.success(1).flat_map(lambda v: Success(v)).is_failure_of(InvalidContainer)  # type: ignore[arg-type,return-value]


def test_recover_returns_fallback_value() -> None:
    attempt = try_of(lambda: boom(ValueError("bad"))).recover(lambda e: 999)
    assert attempt.get_or_else(-1) == 999


def test_recover_fault_in_recovery_is_new_failure() -> None:
    second = KeyError("second")
    attempt = Try.failure(ValueError("first")).recover(lambda e: boom(second))
    assert attempt.get_error() is second


def test_recover_keeps_success() -> None:
    ok = Try.success(1)
    assert ok.recover(lambda e: 2) is ok
    assert ok.recover_with(lambda e: Try.success(2)) is ok


def test_recover_with_returns_fallback_try() -> None:
    attempt = Try.failure(ValueError("bad")).recover_with(lambda e: try_of(lambda: 123))
    assert attempt.get_or_else(-1) == 123

    replacement = LookupError("replacement")
    assert Try.failure(ValueError("bad")).recover_with(lambda e: Try.failure(replacement)).get_error() is replacement
    assert Try.failure(ValueError("bad")).recover_with(lambda e: boom(replacement)).get_error() is replacement


def test_filter() -> None:
    attempt = Try.success(3).filter(lambda n: n > 5, lambda: ValueError("too small"))
    assert attempt.is_failure_of(ValueError)
    assert Try.success(10).filter(lambda n: n > 5, lambda: ValueError("too small")) == Try.success(10)

    err = Try.failure(KeyError("k"))
    assert err.filter(lambda n: n > 5, lambda: ValueError("too small")) is err


# ═════════════════════════════════════════════════════════════════════════════
# Extraction
# ═════════════════════════════════════════════════════════════════════════════


def test_fold() -> None:
    assert Try.success(7).fold(str, lambda v: f"Got: {v}") == "Got: 7"
    assert Try.failure(ValueError("bad")).fold(str, lambda v: f"Got: {v}") == "bad"


def test_get_or_else_get() -> None:
    assert Try.success(1).get_or_else_get(lambda e: 0) == 1
    assert Try.failure(ValueError("bad")).get_or_else_get(lambda e: len(str(e))) == 3


def test_get_or_throw_default_wraps_in_unchecked_fault() -> None:
    fault = OSError("IO problem")
    with pytest.raises(UncheckedFault) as info:
        Try.failure(fault).get_or_throw()
    assert str(info.value) == "OSError: IO problem"
    assert info.value.__cause__ is fault
    assert info.value.fault is fault


def test_get_or_throw_with_mapper_keeps_cause() -> None:
    attempt = try_of(lambda: boom(IllegalStateError("boom")))
    with pytest.raises(RuntimeError, match="Auth failed") as info:
        attempt.get_or_throw(lambda e: RuntimeError("Auth failed"))
    assert str(info.value.__cause__) == "boom"


def test_get_or_throw_returns_value_on_success() -> None:
    assert Try.success(5).get_or_throw() == 5


# ═════════════════════════════════════════════════════════════════════════════
# Inspection & Conversion
# ═════════════════════════════════════════════════════════════════════════════


def test_peek_executes_on_success_only() -> None:
    seen: list[object] = []
    Try.success(1).peek(seen.append).peek_failure(seen.append)
    fault = ValueError("x")
    Try.failure(fault).peek(seen.append).peek_failure(seen.append)
    assert seen == [1, fault]


def test_on_success_on_failure_aliases() -> None:
    seen: list[object] = []
    ok = Try.success(1)
    assert ok.on_success(seen.append).on_failure(seen.append) is ok
    assert seen == [1]


def test_to_optional() -> None:
    assert try_of(lambda: 123).to_optional() == 123
    assert Try.failure(ValueError("x")).to_optional() is None


def test_to_either() -> None:
    assert Try.success(1).to_either(str) == Right(1)
    assert Try.failure(ValueError("bad")).to_either(str) == Left("bad")


def test_to_result() -> None:
    assert Try.success(1).to_result() == Success(1)
    assert Try.failure(ValueError("bad")).to_result(str) == Failure("bad")


def test_to_stream_is_restartable() -> None:
    attempt = Try.success(5)
    assert list(attempt.to_stream()) == [5]
    assert list(attempt.to_stream()) == [5]
    assert list(attempt.to_lazy_sequence()) == [5]
    assert list(Try.failure(ValueError("x")).to_stream()) == []


def test_stream_integration() -> None:
    values = [v for raw in ["1", "x", "3"] for v in try_of(lambda raw=raw: int(raw)).to_stream()]
    assert values == [1, 3]


def test_equality_and_repr() -> None:
    fault = ValueError("x")
    assert Try.failure(fault) == Try.failure(fault)
    assert Try.failure(ValueError("x")) != Try.failure(ValueError("x"))
    assert Try.success(1) != Success(1)
    assert repr(Try.success(1)) == "Success(1)"
    assert repr(Try.failure(fault)) == "Failure(ValueError('x'))"


def test_immutable() -> None:
    with pytest.raises(AttributeError):
        Try.success(1)._is_success = False  # type: ignore[misc]


# ═════════════════════════════════════════════════════════════════════════════
# Pattern Matching
# ═════════════════════════════════════════════════════════════════════════════


def test_match_binds_value_or_fault() -> None:
    def describe(attempt: Try[int]) -> str:
        match attempt:
            case Try(True, value):
                return f"value {value}"
            case Try(False, ValueError() as fault):
                return f"bad input: {fault}"
            case Try(False, fault):
                return f"other: {type(fault).__name__}"
        raise AssertionError("unreachable")

    assert describe(try_of(lambda: int("7"))) == "value 7"
    assert describe(try_of(lambda: int("x"))).startswith("bad input: invalid literal")
    assert describe(try_of(lambda: 1 // 0)) == "other: ZeroDivisionError"
