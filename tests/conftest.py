"""Pytest configuration and shared fixtures for tagged_adt tests."""

import pytest

from tagged_adt import _config
from tagged_adt._logging import clear_log_hooks, reset_logging


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from tagged_adt import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from tagged_adt import Err

    return Err(ValueError('test error'))


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from tagged_adt import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from tagged_adt import Nothing

    return Nothing


@pytest.fixture
def reset_library_state():
    """Start from, and restore, unconfigured logging and an uninitialized library."""
    _config._config = None
    clear_log_hooks()
    reset_logging()
    yield
    _config._config = None
    clear_log_hooks()
    reset_logging()
