"""Shared fixtures: every test starts from default settings and logging."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from safeflow.foundation.config import clear_settings_cache
from safeflow.observability.logging import reset_logging


@pytest.fixture(autouse=True)
def clean_state() -> Iterator[None]:
    clear_settings_cache()
    reset_logging()
    yield
    clear_settings_cache()
    reset_logging()
