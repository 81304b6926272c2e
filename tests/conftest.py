# tests/conftest.py
import pytest


def pytest_collection_modifyitems(items):
    """Mark tests by directory: tests/unit -> unit, tests/integration -> integration."""
    for item in items:
        path = str(item.fspath)
        if "/integration/" in path:
            item.add_marker(pytest.mark.integration)
        elif "/unit/" in path:
            item.add_marker(pytest.mark.unit)
