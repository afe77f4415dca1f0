"""Response Envelope — the {success, data, timestamp, message?} wrapper.

Invariants:
    - success is always True (failures never go through an envelope)
    - timestamp is UTC ISO-8601 with millisecond precision and a "Z" suffix
    - message key is omitted, not null, when absent
"""

from datetime import datetime, timezone


def format_timestamp(now: datetime) -> str:
    """Render an aware instant as e.g. 2024-01-15T10:30:00.123Z."""
    utc = now.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_envelope(data: dict, now: datetime, message: str | None = None) -> dict:
    envelope = {
        "success": True,
        "data": data,
        "timestamp": format_timestamp(now),
    }
    if message is not None:
        envelope["message"] = message
    return envelope
