"""Tests for the adapter layer and pipeline filters."""

from __future__ import annotations

import functools
import io
from concurrent.futures import ThreadPoolExecutor

import orjson
import pytest

from safeflow.adapters import (
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
from safeflow.foundation.config import clear_settings_cache
from safeflow.foundation.errors import InvalidContainer, NullPayload
from safeflow.monads import Failure, Left, Right, Success, Try
from safeflow.observability import configure_logging


def parse_positive(raw: str) -> int:
    """Parse and reject non-positive numbers."""
    value = int(raw)
    if value <= 0:
        raise ValueError(f"not positive: {value}")
    return value


# ═════════════════════════════════════════════════════════════════════════════
# Propagating Wrappers
# ═════════════════════════════════════════════════════════════════════════════


def test_wrap_function_passes_values_through() -> None:
    assert list(map(wrap_function(parse_positive), ["1", "2"])) == [1, 2]


def test_wrap_function_reraises_same_exception() -> None:
    fault = LookupError("missing")

    def lookup(_: str) -> str:
        raise fault

    with pytest.raises(LookupError) as info:
        list(map(wrap_function(lookup), ["a"]))
    assert info.value is fault


def test_wrap_function_preserves_metadata() -> None:
    wrapped = wrap_function(parse_positive)
    assert wrapped.__name__ == "parse_positive"
    assert wrapped.__doc__ == "Parse and reject non-positive numbers."
    assert wrapped.__wrapped__ is parse_positive  # type: ignore[attr-defined]


def test_wrap_function_accepts_builtins() -> None:
    assert wrap_function(int)("7") == 7


def test_wrap_bi_function_in_reduce() -> None:
    add = wrap_bi_function(lambda a, b: a + b)
    assert functools.reduce(add, [1, 2, 3]) == 6

    def strict_add(a: int, b: int) -> int:
        if b < 0:
            raise ValueError("negative")
        return a + b

    with pytest.raises(ValueError, match="negative"):
        functools.reduce(wrap_bi_function(strict_add), [1, -2])


def test_wrap_consumer_and_bi_consumer() -> None:
    seen: list[object] = []
    consume = wrap_consumer(seen.append)
    for item in [1, 2]:
        assert consume(item) is None

    pairs: dict[str, int] = {}
    store = wrap_bi_consumer(pairs.__setitem__)
    for key, value in {"a": 1, "b": 2}.items():
        store(key, value)

    assert seen == [1, 2]
    assert pairs == {"a": 1, "b": 2}

    with pytest.raises(KeyError):
        wrap_consumer({}.__getitem__)("missing")


def test_wrap_supplier_and_runnable() -> None:
    assert wrap_supplier(lambda: 42)() == 42
    with pytest.raises(ZeroDivisionError):
        wrap_supplier(lambda: 1 / 0)()

    ran: list[bool] = []
    assert wrap_runnable(lambda: ran.append(True))() is None
    assert ran == [True]
    def explode() -> None:
        raise RuntimeError("x")

    with pytest.raises(RuntimeError, match="x"):
        wrap_runnable(explode)()


def test_propagated_fault_is_logged_at_debug() -> None:
    buffer = io.StringIO()
    configure_logging(format="json", level="DEBUG", output=buffer)

    with pytest.raises(ValueError):
        wrap_function(parse_positive)("0")

    entry = orjson.loads(buffer.getvalue().splitlines()[0])
    assert entry["event"] == "fault propagated"
    assert entry["function"] == "parse_positive"
    assert entry["fault_type"] == "ValueError"


# ═════════════════════════════════════════════════════════════════════════════
# Capturing Wrappers
# ═════════════════════════════════════════════════════════════════════════════


def test_safe_function_optional_discards_failures() -> None:
    parse = safe_function_optional(int)
    parsed = [n for n in map(parse, ["1", "2", "bad", "3"]) if n is not None]
    assert parsed == [1, 2, 3]


def test_safe_function_optional_values() -> None:
    parse = safe_function_optional(parse_positive)
    assert parse("5") == 5
    assert parse("-1") is None
    assert safe_function_optional(lambda _: None)("x") is None


def test_safe_function_optional_logs_suppressed_fault() -> None:
    buffer = io.StringIO()
    configure_logging(format="json", level="DEBUG", output=buffer)

    assert safe_function_optional(int)("bad") is None

    entry = orjson.loads(buffer.getvalue().splitlines()[0])
    assert entry["event"] == "fault suppressed"
    assert entry["logger"] == "safeflow.adapters"
    assert entry["function"] == "int"
    assert entry["fault_type"] == "ValueError"


def test_suppressed_fault_logging_can_be_disabled(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SAFEFLOW_ADAPTERS_LOG_SUPPRESSED", "false")
    clear_settings_cache()
    buffer = io.StringIO()
    configure_logging(format="json", level="DEBUG", output=buffer)

    assert safe_function_optional(int)("bad") is None
    assert buffer.getvalue() == ""


def test_suppression_is_silent_by_default(capsys: pytest.CaptureFixture[str]) -> None:
    safe_function_optional(int)("bad")
    captured = capsys.readouterr()
    assert captured.err == ""
    assert captured.out == ""


def test_pool_workers_log_from_environment_settings(
    monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("SAFEFLOW_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("SAFEFLOW_LOG_FORMAT", "json")
    clear_settings_cache()
    configure_logging(format="none", level="DEBUG")  # context-local, workers never see it

    with ThreadPoolExecutor(max_workers=1) as pool:
        assert list(pool.map(safe_function_optional(int), ["1", "bad"])) == [1, None]

    entry = orjson.loads(capsys.readouterr().out.strip())
    assert entry["event"] == "fault suppressed"
    assert entry["fault_type"] == "ValueError"


def test_safe_function_either_captures_fault() -> None:
    parse = safe_function_either(parse_positive)
    assert parse("4") == Right(4)

    failed = parse("oops")
    assert failed.is_left()
    assert isinstance(failed.get_left(), ValueError)


def test_safe_function_either_none_result_is_left() -> None:
    result = safe_function_either(lambda _: None)("x")
    assert isinstance(result.get_left(), NullPayload)


# ═════════════════════════════════════════════════════════════════════════════
# Pipeline Filters
# ═════════════════════════════════════════════════════════════════════════════


def test_keep_present() -> None:
    parsed = map(safe_function_optional(int), ["1", "2", "bad", "3"])
    assert list(keep_present(parsed)) == [1, 2, 3]


def test_keep_present_keeps_falsy_values() -> None:
    assert list(keep_present([0, None, "", False])) == [0, "", False]


def test_keep_rights() -> None:
    parsed = map(safe_function_either(int), ["1", "x", "3"])
    assert list(keep_rights(parsed)) == [1, 3]
    assert list(keep_rights([Left("e"), Right(2)])) == [2]


def test_keep_successes_accepts_result_and_try() -> None:
    items = [Success(1), Failure("e"), Try.success(2), Try.failure(ValueError("x"))]
    assert list(keep_successes(items)) == [1, 2]


def test_container_filters_reject_foreign_elements() -> None:
    rights = keep_rights([Right(1), "ab"])  # type: ignore[list-item]
    assert next(rights) == 1
    with pytest.raises(InvalidContainer, match="keep_rights expected Either, got str"):
        next(rights)

    with pytest.raises(InvalidContainer, match="keep_successes expected Result or Try, got Either"):
        list(keep_successes([Success(1), Right(2)]))  # type: ignore[list-item]


def test_filters_are_lazy() -> None:
    pulled: list[str] = []

    def source():
        for raw in ["1", "2", "3"]:
            pulled.append(raw)
            yield int(raw)

    stream = keep_present(source())
    assert next(stream) == 1
    assert pulled == ["1"]
