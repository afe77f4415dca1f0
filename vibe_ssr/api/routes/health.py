"""Health API — GET /api/health liveness report.

Invariants:
    - Always returns 200 with status "healthy" if the process is up
    - Nothing downstream is probed; database/cache fields are literals

Design Decisions:
    - uptime source chosen by settings.health_uptime_mode (random by default)
"""

from fastapi import APIRouter, Depends, status

from vibe_ssr.api.dependencies import get_clock, get_uptime_source
from vibe_ssr.config import Settings, get_settings
from vibe_ssr.core.boundary_protocols import Clock, UptimeSource
from vibe_ssr.core.health_snapshot import get_health
from vibe_ssr.schemas.envelope import HealthEnvelope

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("", response_model=HealthEnvelope, status_code=status.HTTP_200_OK)
async def health_check(
    clock: Clock = Depends(get_clock),
    uptime: UptimeSource = Depends(get_uptime_source),
    settings: Settings = Depends(get_settings),
):
    """Basic liveness probe."""
    return get_health(
        clock.now(), uptime,
        environment=settings.environment,
        api_version=settings.api_version,
    )
