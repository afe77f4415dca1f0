"""Snapshot tests — stats, health and time envelopes built from injected inputs.

Tests cover:
    - Stats data is identical across calls and matches the published figures
    - Health reports "healthy" with whatever the uptime source returns
    - Time fields all derive from one instant; offsets and zone names per tz
"""

from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from vibe_ssr.core.envelope import build_envelope, format_timestamp
from vibe_ssr.core.health_snapshot import get_health
from vibe_ssr.core.stats_snapshot import get_stats
from vibe_ssr.core.time_snapshot import (
    compute_time, epoch_millis, format_readable, get_time,
)

NOW = datetime(2024, 1, 15, 15, 4, 5, 123456, tzinfo=timezone.utc)


class _Uptime:
    def __init__(self, value):
        self.value = value
        self.calls = 0

    def uptime(self):
        self.calls += 1
        return self.value


# -- Envelope ------------------------------------------------------------------

def test_timestamp_is_utc_millis_with_z():
    assert format_timestamp(NOW) == "2024-01-15T15:04:05.123Z"


def test_timestamp_converts_non_utc_instants():
    plus_two = NOW.astimezone(timezone(timedelta(hours=2)))
    assert format_timestamp(plus_two) == "2024-01-15T15:04:05.123Z"


def test_envelope_omits_missing_message():
    env = build_envelope({"a": 1}, NOW)
    assert env == {"success": True, "data": {"a": 1}, "timestamp": "2024-01-15T15:04:05.123Z"}


# -- Stats ---------------------------------------------------------------------

def test_stats_data_is_fixed():
    assert get_stats(NOW)["data"] == {
        "totalUsers": 42,
        "totalPosts": 156,
        "totalProducts": 89,
        "activeUsers": 38,
        "totalRevenue": 12540.5,
        "conversionRate": 3.2,
    }


def test_stats_identical_across_calls():
    first, second = get_stats(NOW), get_stats(NOW)
    assert first == second
    assert first["data"] is not second["data"]
    assert first["message"] == "Statistics retrieved successfully"


# -- Health --------------------------------------------------------------------

def test_health_uses_uptime_source_once():
    uptime = _Uptime(777)
    result = get_health(NOW, uptime)
    assert uptime.calls == 1
    assert result["data"] == {
        "status": "healthy",
        "uptime": 777,
        "environment": "production",
        "apiVersion": "1.0.0",
        "database": "connected",
        "cache": "enabled",
    }
    assert result["message"] == "Server is running normally"


def test_health_reports_configured_identity():
    data = get_health(NOW, _Uptime(0), environment="staging", api_version="2.1.0")["data"]
    assert data["environment"] == "staging"
    assert data["apiVersion"] == "2.1.0"


# -- Time ----------------------------------------------------------------------

def test_time_in_utc():
    data = compute_time(NOW, timezone.utc)
    assert data == {
        "iso": "2024-01-15T15:04:05.123Z",
        "unix": 1705331045123,
        "readable": "1/15/2024, 3:04:05 PM",
        "timezone": "UTC",
        "utcOffset": 0,
    }


def test_time_envelope_timestamp_matches_iso():
    result = get_time(NOW, timezone.utc)
    assert result["timestamp"] == result["data"]["iso"]
    assert result["message"] == "Current server time"


def test_time_uses_iana_key_and_negative_offset():
    data = compute_time(NOW, ZoneInfo("America/New_York"))
    assert data["timezone"] == "America/New_York"
    assert data["utcOffset"] == -5
    assert isinstance(data["utcOffset"], int)
    assert data["readable"] == "1/15/2024, 10:04:05 AM"


def test_time_fractional_offset():
    data = compute_time(NOW, ZoneInfo("Asia/Kolkata"))
    assert data["utcOffset"] == 5.5
    assert data["readable"] == "1/15/2024, 8:34:05 PM"


def test_readable_midnight_and_noon():
    assert format_readable(datetime(2024, 3, 1, 0, 5, 9)) == "3/1/2024, 12:05:09 AM"
    assert format_readable(datetime(2024, 3, 1, 12, 0, 0)) == "3/1/2024, 12:00:00 PM"


def test_epoch_millis_truncates_microseconds():
    assert epoch_millis(datetime(1970, 1, 1, 0, 0, 0, 999, tzinfo=timezone.utc)) == 0
    assert epoch_millis(NOW) == 1705331045123


def test_unix_non_decreasing_for_increasing_instants():
    instants = [NOW + timedelta(microseconds=250 * i) for i in range(20)]
    values = [compute_time(t, timezone.utc)["unix"] for t in instants]
    assert values == sorted(values)
