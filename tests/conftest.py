"""Shared pytest fixtures."""

import pytest

from desknotify.config import configure_logging


@pytest.fixture(autouse=True)
def _log_to_stderr():
    """Keep structlog off stdout so tests can assert on the diagnostic line."""
    configure_logging("DEBUG")
    yield
