"""Domain Types — named types and enums shared by the static tables and handlers.

Invariants:
    - Path identifiers stay plain str until a table decides whether they match
    - All valid states encoded as Enums — no raw string matching

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
PostId = NewType("PostId", int)
ProductId = NewType("ProductId", int)


# ─── Enums ───────────────────────────────────────────────────────

class UserStatus(str, Enum):
    """Account status flag shown on the user record."""
    ACTIVE = "active"
    INACTIVE = "inactive"


class StockLevel(str, Enum):
    """Stock badge for the products page."""
    HIGH = "high"   # more than 20 units
    LOW = "low"     # 1–20 units
    OUT = "out"


class UptimeMode(str, Enum):
    """Where the health snapshot takes its uptime value from."""
    RANDOM = "random"
    PROCESS = "process"
