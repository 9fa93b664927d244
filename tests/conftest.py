"""Root pytest configuration for pathalgebra tests."""
import random

import pytest

from pathalgebra.ordering import build_extension_table
from pathalgebra.settings import Settings


# Configure pytest markers
def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers",
        "slow: mark test as slow (may take significant time)"
    )


# Set up test environment variables
@pytest.fixture(autouse=True)
def test_env(monkeypatch):
    """Automatically pin environment variables read by the settings loader."""
    monkeypatch.delenv("PATHALGEBRA_EXTENSION_GROUPS", raising=False)
    monkeypatch.setenv("PATHALGEBRA_LOG_LEVEL", "WARNING")


# Standardized test fixtures
@pytest.fixture
def settings():
    """Standard test settings."""
    return Settings(extension_groups=(("h", "c"), ("mli", "ml")))


@pytest.fixture
def table():
    """Extension table with the C and OCaml groups."""
    return build_extension_table([["h", "c"], ["mli", "ml"]])


@pytest.fixture
def cwd():
    """Fixed current-location provider."""
    return lambda: "/home/user/project"


@pytest.fixture
def rng():
    """Seeded random generator for property checks."""
    return random.Random(20240611)
