# ABOUTME: pytest configuration for onionware tests
# ABOUTME: Registers markers, applies per-marker timeouts and isolates settings and logging per test

import pytest
from loguru import logger

from onionware.config.logging import configure_for_testing
from onionware.config.settings import get_settings


def pytest_configure(config):
    """Configure pytest for onionware tests."""
    config.addinivalue_line("markers", "unit: Unit tests with 20-second timeout")
    config.addinivalue_line("markers", "integration: Integration tests with 60-second timeout")
    config.addinivalue_line("markers", "config: Configuration tests")


def pytest_collection_modifyitems(config, items):
    """Modify test items to add appropriate timeouts based on test type."""
    for item in items:
        if item.get_closest_marker("timeout"):
            continue

        if item.get_closest_marker("unit"):
            item.add_marker(pytest.mark.timeout(20))
        elif item.get_closest_marker("integration"):
            item.add_marker(pytest.mark.timeout(60))


@pytest.fixture(autouse=True)
def isolated_environment():
    """Fresh settings and a plain logging setup for every test."""
    get_settings.cache_clear()
    configure_for_testing()
    yield
    get_settings.cache_clear()


@pytest.fixture
def log_records():
    """Collect loguru records emitted during the test."""
    records = []
    handler_id = logger.add(lambda message: records.append(message.record), level="TRACE")
    yield records
    logger.remove(handler_id)
