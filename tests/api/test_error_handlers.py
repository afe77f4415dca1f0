"""Global error handlers — domain misses and unexpected failures over HTTP.

Invariants:
    - An exception escaping a route yields the generic 500 body, nothing from the exception
    - Lookup misses keep their own status and body
"""

import logging

from httpx import ASGITransport, AsyncClient

from vibe_ssr.api.dependencies import get_clock
from vibe_ssr.main import app


class _BrokenClock:
    def now(self):
        raise RuntimeError("clock exploded: secret-detail")


async def test_unhandled_exception_returns_generic_500():
    app.dependency_overrides[get_clock] = lambda: _BrokenClock()
    try:
        async with AsyncClient(
            transport=ASGITransport(app=app, raise_app_exceptions=False),
            base_url="http://test",
        ) as c:
            res = await c.get("/api/stats")
    finally:
        app.dependency_overrides.clear()
    assert res.status_code == 500
    assert res.json() == {
        "error": {
            "code": "INTERNAL_ERROR",
            "message": "An unexpected error occurred",
            "category": "internal",
            "severity": "critical",
        }
    }
    assert "secret-detail" not in res.text


async def test_lookup_miss_is_not_treated_as_internal(client):
    res = await client.get("/api/users/404")
    assert res.status_code == 404
    assert "INTERNAL_ERROR" not in res.text


async def test_lookup_misses_log_below_info(client, caplog):
    caplog.set_level(logging.DEBUG, logger="vibe_ssr")
    await client.get("/api/users/404")
    await client.get("/users/404")
    ours = [r for r in caplog.records if r.name.startswith("vibe_ssr")]
    assert ours
    assert all(r.levelno == logging.DEBUG for r in ours)
