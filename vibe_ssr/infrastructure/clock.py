"""Clock & Uptime Providers — the real implementations of the core boundary protocols.

Invariants:
    - SystemClock.now() is always timezone-aware (UTC)
    - RandomUptime draws uniformly from [0, 1_000_000) on every call
    - ProcessUptime is monotonic, never negative, and counts from module import
      (app startup), not from the first health request

Design Decisions:
    - random.Random instance per provider instead of the module-level RNG:
      tests seed it without touching global state
"""

import os
import random
import time
from datetime import datetime, timezone, tzinfo
from typing import Callable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from vibe_ssr.core.boundary_protocols import UptimeSource
from vibe_ssr.core.domain_types import UptimeMode

RANDOM_UPTIME_CEILING = 1_000_000

# Start mark for ProcessUptime; taken at import, before the first request.
PROCESS_STARTED = time.monotonic()


class SystemClock:
    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class RandomUptime:
    """Synthetic uptime: a fresh random integer per call, not a real counter."""

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng or random.Random()

    def uptime(self) -> int:
        return int(self._rng.random() * RANDOM_UPTIME_CEILING)


class ProcessUptime:
    """Whole seconds since the process imported this module, or since `started`."""

    def __init__(
        self,
        monotonic: Callable[[], float] = time.monotonic,
        started: float | None = None,
    ):
        self._monotonic = monotonic
        self._started = PROCESS_STARTED if started is None else started

    def uptime(self) -> int:
        return max(0, int(self._monotonic() - self._started))


def make_uptime_source(mode: UptimeMode) -> UptimeSource:
    if mode is UptimeMode.PROCESS:
        return ProcessUptime()
    return RandomUptime()


def _zone_from_tz_env() -> tzinfo | None:
    key = os.environ.get("TZ", "").lstrip(":")
    if not key:
        return None
    try:
        return ZoneInfo(key)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return None


def resolve_timezone(name: str | None) -> tzinfo:
    """IANA zone by name, else the TZ env key, else the host's fixed local offset."""
    if name:
        return ZoneInfo(name)
    from_env = _zone_from_tz_env()
    if from_env is not None:
        return from_env
    local = datetime.now().astimezone().tzinfo
    return local or timezone.utc
