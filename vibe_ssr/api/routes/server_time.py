"""Server Time API — GET /api/time, recomputed on every request."""

from datetime import tzinfo

from fastapi import APIRouter, Depends

from vibe_ssr.api.dependencies import get_clock, get_timezone
from vibe_ssr.core.boundary_protocols import Clock
from vibe_ssr.core.time_snapshot import get_time
from vibe_ssr.schemas.envelope import TimeEnvelope

router = APIRouter(prefix="/api/time", tags=["time"])


@router.get("", response_model=TimeEnvelope)
async def read_time(
    clock: Clock = Depends(get_clock),
    tz: tzinfo = Depends(get_timezone),
):
    return get_time(clock.now(), tz)
