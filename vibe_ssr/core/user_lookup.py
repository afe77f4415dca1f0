"""User Lookup — resolve a path identifier against the static user table.

Invariants:
    - Match is on the raw string: "1" hits, "01" and " 1" do not
    - A miss raises UserNotFoundError carrying the input verbatim
    - No side effects
"""

from datetime import datetime
from typing import Mapping

from vibe_ssr.core.envelope import build_envelope
from vibe_ssr.core.errors import UserNotFoundError
from vibe_ssr.core.fixtures import USERS, User


def lookup_user(
    user_id: str, now: datetime, users: Mapping[str, User] = USERS,
) -> dict:
    """Return the user envelope for user_id or raise UserNotFoundError."""
    user = users.get(user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    return build_envelope(user.to_dict(), now)
