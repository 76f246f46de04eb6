"""Pytest configuration for the catalog API tests."""

import pytest
from fastapi.testclient import TestClient

from catalog_api.main import app
from catalog_api.rate_limit import FixedWindowRateLimiter, get_rate_limiter


class FakeClock:
    """Monotonic clock that only moves when told to."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def limiter(clock):
    """A fresh limiter per test so request counts never leak between tests."""
    return FixedWindowRateLimiter(max_requests=256, window_seconds=15, clock=clock)


@pytest.fixture
def client(limiter):
    app.dependency_overrides[get_rate_limiter] = lambda: limiter
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
