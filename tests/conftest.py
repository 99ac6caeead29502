"""Pytest configuration and shared fixtures for combinate tests."""

import pytest


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from combinate import Some

    return Some('hello')


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from combinate import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from combinate import Err

    return Err(ValueError('test error'))


@pytest.fixture
def clean_config(monkeypatch: pytest.MonkeyPatch):
    """Isolate a test from COMBINATE_* environment variables, stored config and log hooks."""
    from combinate import _config, clear_log_hooks

    for name in ('COMBINATE_LOG_LEVEL', 'COMBINATE_LOG_JSON', 'COMBINATE_TRACE_LEVEL'):
        monkeypatch.delenv(name, raising=False)
    _config.reset()
    clear_log_hooks()
    yield monkeypatch
    _config.reset()
    clear_log_hooks()
