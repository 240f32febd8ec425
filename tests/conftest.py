"""Shared test fixtures for all test modules."""

import pytest

from emfmetrics.core.accumulator import MetricAccumulator


@pytest.fixture
def accumulator() -> MetricAccumulator:
    """Provide a blank accumulator in the test namespace."""
    return MetricAccumulator("test-lambda-metrics")


@pytest.fixture
def fixed_time(monkeypatch: pytest.MonkeyPatch) -> float:
    """Freeze time.time() so encoded timestamps are predictable."""
    import time

    now = 1702300000.0
    monkeypatch.setattr(time, "time", lambda: now)
    return now
