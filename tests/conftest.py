"""
Pytest configuration for the Brain Teasers test suite.

This conftest.py provides:
- Quiet logging (suppresses console output)
- Plain (uncolored) lab configuration for exact report assertions
- Clean BRAINTEASERS_* environment per test
"""

import io
import os

import pytest

from brainteasers.config import LabConfig, reset_lab_config
from brainteasers.logging_config import setup_logging


# ============================================================================
# GLOBAL CONFIGURATION
# ============================================================================

def pytest_configure(config):
    """Keep log output off the console during test runs."""
    os.environ.setdefault("BRAINTEASERS_QUIET", "1")


# ============================================================================
# LOGGING FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def setup_test_logging():
    """Suppress console logs for clean test output."""
    setup_logging(level="DEBUG", suppress_console=True, force=True)


# ============================================================================
# CONFIG FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def clean_lab_env(monkeypatch):
    """Drop BRAINTEASERS_* overrides so every test starts from defaults."""
    for key in list(os.environ.keys()):
        if key.startswith("BRAINTEASERS_") and key != "BRAINTEASERS_QUIET":
            monkeypatch.delenv(key, raising=False)
    reset_lab_config()
    yield
    reset_lab_config()


@pytest.fixture
def plain_config():
    """Default limits, never colored."""
    return LabConfig(max_collection_items=10, max_trace_lines=3, color=False)


@pytest.fixture
def sink():
    """In-memory text stream for reports."""
    return io.StringIO()
