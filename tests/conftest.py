"""Pytest configuration for federql tests."""

import pytest


@pytest.fixture(autouse=True)
def reset_resolver_registry():
    """Reset the decorator resolver registry around each test."""
    import federql.decorators

    # Store original values
    original = dict(federql.decorators._registry)

    yield

    # Restore original values after test
    federql.decorators._registry.clear()
    federql.decorators._registry.update(original)
