"""Pytest configuration for jsonbody tests."""

import pytest


@pytest.fixture(autouse=True)
def reset_default_provider():
    """Restore the process-wide provider after each test."""
    import jsonbody.defaults

    # Store original value
    original_provider = jsonbody.defaults._provider

    yield

    # Restore original value after test
    jsonbody.defaults._provider = original_provider
