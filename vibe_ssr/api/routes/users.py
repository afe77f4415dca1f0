"""User Data API — GET /api/users/{id} against the static user table.

Invariants:
    - Path id is passed through as a string; core decides whether it matches
    - Misses raise UserNotFoundError; the global handler renders the 404 body
"""

from fastapi import APIRouter, Depends

from vibe_ssr.api.dependencies import get_clock
from vibe_ssr.core.boundary_protocols import Clock
from vibe_ssr.core.user_lookup import lookup_user
from vibe_ssr.schemas.envelope import UserEnvelope, UserNotFoundBody

router = APIRouter(prefix="/api/users", tags=["users"])


@router.get(
    "/{user_id}",
    response_model=UserEnvelope,
    responses={404: {"model": UserNotFoundBody}},
)
async def get_user(user_id: str, clock: Clock = Depends(get_clock)):
    """Fetch one user record."""
    return lookup_user(user_id, clock.now())
