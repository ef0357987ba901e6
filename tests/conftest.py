"""
Shared test fixtures for the railtrack test suite.

Every test starts from default settings: RAILTRACK_* variables are removed
from the environment and the cached settings are reloaded around the test.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Iterator

import pytest
import structlog

from railtrack.config import get_settings


@pytest.fixture(autouse=True)
def default_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate each test from RAILTRACK_* variables and cached settings."""
    for name in list(os.environ):
        if name.startswith("RAILTRACK_"):
            monkeypatch.delenv(name)
    get_settings.cache_clear()
    structlog.reset_defaults()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def configure(monkeypatch: pytest.MonkeyPatch) -> Callable[..., None]:
    """
    Set RAILTRACK_* variables for the current test and reload settings.

        configure(capture_policy="expected", log_captured_faults="true")
    """

    def apply(**values: str) -> None:
        for key, value in values.items():
            monkeypatch.setenv(f"RAILTRACK_{key.upper()}", value)
        get_settings.cache_clear()

    return apply


class CallCounter:
    """Callable that records every argument it is called with."""

    def __init__(self, returns: object = None) -> None:
        self.calls: list[object] = []
        self._returns = returns

    def __call__(self, arg: object = None) -> object:
        self.calls.append(arg)
        return self._returns

    @property
    def count(self) -> int:
        return len(self.calls)


@pytest.fixture()
def counter() -> CallCounter:
    """A fresh CallCounter returning None."""
    return CallCounter()
