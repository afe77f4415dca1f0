"""Request Dependencies — injectable clock, uptime source and timezone.

Invariants:
    - Routes never construct providers themselves; they Depends() on these
    - The uptime source is process-wide so ProcessUptime counts from startup
    - Tests swap any of these through app.dependency_overrides
"""

from datetime import tzinfo
from functools import lru_cache

from fastapi import Depends

from vibe_ssr.config import Settings, get_settings
from vibe_ssr.core.boundary_protocols import Clock, UptimeSource
from vibe_ssr.core.domain_types import UptimeMode
from vibe_ssr.infrastructure.clock import SystemClock, make_uptime_source, resolve_timezone

_system_clock = SystemClock()


def get_clock() -> Clock:
    return _system_clock


@lru_cache
def _uptime_source_for(mode: UptimeMode) -> UptimeSource:
    return make_uptime_source(mode)


def get_uptime_source(settings: Settings = Depends(get_settings)) -> UptimeSource:
    return _uptime_source_for(settings.health_uptime_mode)


def get_timezone(settings: Settings = Depends(get_settings)) -> tzinfo:
    return resolve_timezone(settings.timezone)
