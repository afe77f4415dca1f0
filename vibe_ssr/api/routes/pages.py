"""Server-Rendered Pages — plain-text views over the static tables.

Invariants:
    - Every page is rendered per request by core.render_pages (no caching)
    - /users/{id} answers 404 with the not-found page when the id doesn't resolve

Design Decisions:
    - text/plain responses: presentation markup is out of scope for this service
    - Page title exposed as an X-Page-Title header instead of an HTML <title>
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse

from vibe_ssr.core.render_pages import (
    SITE_NAME, find_profile, page_title,
    render_home_page, render_posts_page, render_products_page, render_user_page,
)

logger = logging.getLogger(__name__)
router = APIRouter(tags=["pages"], default_response_class=PlainTextResponse)


def _page(body: str, title: str, status_code: int = status.HTTP_200_OK) -> PlainTextResponse:
    return PlainTextResponse(
        body, status_code=status_code, headers={"X-Page-Title": title},
    )


@router.get("/")
async def home_page():
    return _page(render_home_page(), SITE_NAME)


@router.get("/posts")
async def posts_page():
    return _page(render_posts_page(), page_title("Blog Posts"))


@router.get("/products")
async def products_page():
    return _page(render_products_page(), page_title("Products"))


@router.get("/users/{user_id}")
async def user_page(user_id: str):
    """Profile page; unknown ids get the not-found page with a 404."""
    profile = find_profile(user_id)
    if profile is None:
        logger.debug(
            f"Profile page miss for id {user_id!r}",
            extra={"user_id": user_id, "path": f"/users/{user_id}"},
        )
        return _page(
            render_user_page(user_id), page_title(None),
            status.HTTP_404_NOT_FOUND,
        )
    return _page(render_user_page(user_id), page_title(profile.name))
