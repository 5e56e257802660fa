"""Pytest configuration and fixtures for guard-builder tests."""

import pytest

from guard_builder.diagnostics import capture_diagnostics, sink


@pytest.fixture(autouse=True)
def reset_diagnostics():
    """Restore default sink settings around every test."""
    sink.reset()
    yield
    sink.reset()


@pytest.fixture
def diagnostics():
    """Diagnostics emitted while the test runs."""
    with capture_diagnostics() as collected:
        yield collected
