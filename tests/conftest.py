"""Pytest configuration for apiservice SDK tests."""

import logging

import pytest
import structlog
from structlog.testing import capture_logs


@pytest.fixture(autouse=True)
def configure_structlog():
    """Send every SDK event, debug included, to a plain console renderer."""
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.format_exc_info,
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(logging.DEBUG),
        # capture_logs cannot intercept cached loggers
        cache_logger_on_first_use=False,
    )
    yield
    structlog.reset_defaults()


@pytest.fixture
def log_events():
    """Collect structlog events emitted during a test as dicts."""
    with capture_logs() as events:
        yield events
