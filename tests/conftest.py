"""Pytest configuration and shared fixtures for klaw-match tests."""

from __future__ import annotations

import sys
from collections.abc import Generator
from typing import Any

import pytest
from klaw_match import init
from klaw_match._config import _reset_config
from klaw_match._logging import add_log_hook, clear_log_hooks, configure_logging
from klaw_match.backend import _reset_backend

from tests import native_double


@pytest.fixture(autouse=True)
def fresh_backend() -> Generator[None]:
    """Every test starts before backend selection with no explicit config."""
    _reset_backend()
    _reset_config()
    yield
    _reset_backend()
    _reset_config()
    clear_log_hooks()


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio backend for async tests."""
    return 'asyncio'


@pytest.fixture
def log_events() -> list[dict[str, Any]]:
    """Capture structured log entries emitted during the test."""
    events: list[dict[str, Any]] = []
    configure_logging(level='DEBUG', json_output=True)
    add_log_hook(events.append)
    return events


@pytest.fixture
def interpreted() -> None:
    """Commit to the pure-Python matcher."""
    init(backend='python')


@pytest.fixture
def native(monkeypatch: pytest.MonkeyPatch) -> Generator[str]:
    """Install the native double and configure the selector to use it."""
    name = 'klaw_match_native_double'
    monkeypatch.setitem(sys.modules, name, native_double.build(name))
    init(backend='native', native_module=name)
    yield name


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from klaw_match import Some

    return Some('hello')


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from klaw_match import Err

    return Err(ValueError('test error'))
