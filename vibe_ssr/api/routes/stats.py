"""Statistics API — GET /api/stats."""

from fastapi import APIRouter, Depends

from vibe_ssr.api.dependencies import get_clock
from vibe_ssr.core.boundary_protocols import Clock
from vibe_ssr.core.stats_snapshot import get_stats
from vibe_ssr.schemas.envelope import StatsEnvelope

router = APIRouter(prefix="/api/stats", tags=["stats"])


@router.get("", response_model=StatsEnvelope)
async def read_stats(clock: Clock = Depends(get_clock)):
    return get_stats(clock.now())
