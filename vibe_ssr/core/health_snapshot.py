"""Health Snapshot — liveness report for /api/health.

Invariants:
    - status is always "healthy"; there is no failure path
    - uptime comes from the injected UptimeSource, read once per call
    - database/cache are reported as literals, nothing is probed
"""

from datetime import datetime

from vibe_ssr.core.boundary_protocols import UptimeSource
from vibe_ssr.core.envelope import build_envelope

HEALTH_MESSAGE = "Server is running normally"


def get_health(
    now: datetime,
    uptime: UptimeSource,
    *,
    environment: str = "production",
    api_version: str = "1.0.0",
) -> dict:
    """Health envelope with a freshly drawn uptime value."""
    data = {
        "status": "healthy",
        "uptime": uptime.uptime(),
        "environment": environment,
        "apiVersion": api_version,
        "database": "connected",
        "cache": "enabled",
    }
    return build_envelope(data, now, HEALTH_MESSAGE)
