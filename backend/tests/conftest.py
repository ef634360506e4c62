"""Shared test configuration and fixtures."""

import pytest

from api.router import limiter
from config import settings


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: exercises the real simulated latency"
    )


@pytest.fixture(autouse=True)
def _fast_predictions():
    """No simulated latency or failures unless a test opts in."""
    original = (settings.prediction_delay_seconds, settings.prediction_failure_rate)
    settings.prediction_delay_seconds = 0.0
    settings.prediction_failure_rate = 0.0
    limiter.reset()
    yield
    settings.prediction_delay_seconds, settings.prediction_failure_rate = original
