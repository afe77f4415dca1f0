"""Root conftest — shared test configuration and deterministic test doubles.

Invariants:
    - Settings are read from a clean environment (no developer .env leaks in)
    - Route tests get a fixed clock unless they ask for the real one
"""

import os
from datetime import datetime, timezone

import pytest
from httpx import ASGITransport, AsyncClient

os.environ.setdefault("ENVIRONMENT", "production")
os.environ.setdefault("LOG_FORMAT", "text")

from vibe_ssr.api.dependencies import get_clock, get_timezone, get_uptime_source  # noqa: E402
from vibe_ssr.main import app  # noqa: E402

FIXED_NOW = datetime(2024, 1, 15, 15, 4, 5, 123456, tzinfo=timezone.utc)


class FixedClock:
    def __init__(self, now: datetime = FIXED_NOW):
        self.current = now

    def now(self) -> datetime:
        return self.current


class FixedUptime:
    def __init__(self, value: int = 4242):
        self.value = value

    def uptime(self) -> int:
        return self.value


@pytest.fixture
def fixed_clock():
    return FixedClock()


@pytest.fixture
def fixed_uptime():
    return FixedUptime()


@pytest.fixture
async def client():
    """Test client against the real providers (wall clock, random uptime)."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def fixed_client(fixed_clock, fixed_uptime):
    """Test client with clock, uptime and timezone pinned."""
    app.dependency_overrides[get_clock] = lambda: fixed_clock
    app.dependency_overrides[get_uptime_source] = lambda: fixed_uptime
    app.dependency_overrides[get_timezone] = lambda: timezone.utc
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()
