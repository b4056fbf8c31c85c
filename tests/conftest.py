"""
Pytest configuration and shared fixtures for the attractions service.

This module provides common test fixtures and configuration used across
unit, integration, and benchmark tests.
"""

import os
import pytest

TEST_ENVIRONMENT = {
    "POWERTOOLS_SERVICE_NAME": "test-tourist-attractions",
    "LOG_LEVEL": "DEBUG",
    "POWERTOOLS_TRACE_DISABLED": "true",  # Disable X-Ray in tests
    "SEED_ATTRACTIONS": "true",
}

# Must be set before the package creates its logger and tracer
os.environ.update(TEST_ENVIRONMENT)
# Re-read configuration on every call so tests can change the environment
os.environ["LAMBDA_ENV_MODELER_DISABLE_CACHE"] = "true"

from attractions.dal.in_memory_handler import InMemoryAttractionStore
from attractions.logic.attraction_service import AttractionService
from attractions.models.attraction import Attraction


# Test environment configuration
@pytest.fixture(scope="session", autouse=True)
def test_environment():
    """Set up test environment variables."""
    os.environ.update(TEST_ENVIRONMENT)


# Store fixtures
@pytest.fixture
def seeded_store() -> InMemoryAttractionStore:
    """Create a store holding the twelve sample attractions."""
    return InMemoryAttractionStore(seed=True)


@pytest.fixture
def empty_store() -> InMemoryAttractionStore:
    """Create a store with no attractions."""
    return InMemoryAttractionStore(seed=False)


@pytest.fixture
def service(seeded_store) -> AttractionService:
    """Create a service over a seeded store."""
    return AttractionService(seeded_store)


# Sample data fixtures
@pytest.fixture
def sample_attraction() -> Attraction:
    """Create a sample attraction for testing."""
    return Attraction(name="Test", city="X", description="d", tags=["a"])


@pytest.fixture
def seed_cities() -> list:
    """Distinct cities of the sample dataset in first-seen order."""
    return [
        "København", "Aarhus", "Kværndrup", "Aalborg", "Helsingør",
        "Odense", "Bornholm", "Skagen", "Billund",
    ]


# Pytest configuration
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "benchmark: Performance benchmark tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        # Add markers based on test location
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "benchmark" in str(item.fspath):
            item.add_marker(pytest.mark.benchmark)
