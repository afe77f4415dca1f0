"""Statistics Snapshot — fixed business metrics, rebuilt on every call.

Invariants:
    - data is identical across calls; only the envelope timestamp moves
    - Returns a fresh dict each call so callers can't corrupt the next response
"""

from datetime import datetime

from vibe_ssr.core.envelope import build_envelope

STATS_MESSAGE = "Statistics retrieved successfully"


def compute_stats() -> dict:
    return {
        "totalUsers": 42,
        "totalPosts": 156,
        "totalProducts": 89,
        "activeUsers": 38,
        "totalRevenue": 12540.5,
        "conversionRate": 3.2,
    }


def get_stats(now: datetime) -> dict:
    """Statistics envelope. Pure apart from the injected instant."""
    return build_envelope(compute_stats(), now, STATS_MESSAGE)
