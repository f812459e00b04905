"""Pytest configuration for integration tests."""

import pytest


def pytest_collection_modifyitems(items):
    """Tag tests collected from this directory as gateway integration tests."""
    for item in items:
        if "integration_tests" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
