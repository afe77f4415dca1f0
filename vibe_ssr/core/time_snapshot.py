"""Time Snapshot — the current instant in several representations.

Invariants:
    - Every field is derived from the single injected instant (no second clock read)
    - unix is whole epoch milliseconds, truncated like a JS Date
    - envelope timestamp == data["iso"]
    - utcOffset is an int for whole-hour zones, a float otherwise (e.g. 5.5)

Design Decisions:
    - readable mimics the en-US locale string ("1/15/2024, 3:04:05 PM") so clients
      written against the v1 API keep parsing it
    - Zone name prefers the IANA key; falls back to the abbreviation for fixed offsets
"""

from datetime import datetime, timedelta, timezone, tzinfo

from vibe_ssr.core.envelope import build_envelope, format_timestamp

TIME_MESSAGE = "Current server time"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def epoch_millis(now: datetime) -> int:
    return (now - _EPOCH) // timedelta(milliseconds=1)


def format_readable(local: datetime) -> str:
    """en-US style: M/D/YYYY, h:mm:ss AM."""
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return (
        f"{local.month}/{local.day}/{local.year}, "
        f"{hour}:{local.minute:02d}:{local.second:02d} {meridiem}"
    )


def zone_name(tz: tzinfo, local: datetime) -> str:
    key = getattr(tz, "key", None)
    if key:
        return key
    return local.tzname() or "UTC"


def utc_offset_hours(local: datetime) -> int | float:
    offset = local.utcoffset() or timedelta(0)
    hours = offset.total_seconds() / 3600
    return int(hours) if hours.is_integer() else hours


def compute_time(now: datetime, tz: tzinfo) -> dict:
    local = now.astimezone(tz)
    return {
        "iso": format_timestamp(now),
        "unix": epoch_millis(now),
        "readable": format_readable(local),
        "timezone": zone_name(tz, local),
        "utcOffset": utc_offset_hours(local),
    }


def get_time(now: datetime, tz: tzinfo) -> dict:
    """Time envelope for the given instant, localized to tz."""
    return build_envelope(compute_time(now, tz), now, TIME_MESSAGE)
