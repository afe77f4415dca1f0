"""Page Rendering — pure plain-text renderers for the server-rendered pages.

Invariants:
    - All functions are pure (no IO, no clock): same tables in, same text out
    - Renderers read the static tables through parameters so tests can pass their own
    - Unknown profile ids render a not-found page instead of raising; the shell picks the status

Design Decisions:
    - Plain text over HTML templates: layout and styling are not this service's concern
    - Profile ids parse as a leading decimal integer ("2abc" → 2, "0x2" → 0); hex and
      exponent forms are not recognized
    - More than _MAX_ID_DIGITS digits is a miss, never an int conversion
"""

import re
from datetime import date
from typing import Mapping, Sequence

from vibe_ssr.core import catalog
from vibe_ssr.core.domain_types import StockLevel
from vibe_ssr.core.fixtures import POSTS, PRODUCTS, PROFILES, Post, Product, UserProfile

SITE_NAME = "Vibe SSR"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_MAX_ID_DIGITS = 18
_RULE = "=" * 60


def page_title(name: str | None) -> str:
    """Document title for a page; None means the not-found page."""
    if name is None:
        return "User Not Found"
    return f"{name} - {SITE_NAME}"


def format_date(value: date) -> str:
    return f"{value.month}/{value.day}/{value.year}"


def parse_user_id(raw: str) -> int | None:
    """Leading decimal integer of raw, or None when absent or too long to be an id."""
    match = _LEADING_INT.match(raw)
    if not match:
        return None
    digits = match.group(1).lstrip("+-")
    if len(digits) > _MAX_ID_DIGITS:
        return None
    return int(match.group(1))


def find_profile(
    raw_id: str, profiles: Mapping[int, UserProfile] = PROFILES,
) -> UserProfile | None:
    user_id = parse_user_id(raw_id)
    if user_id is None:
        return None
    return profiles.get(user_id)


def _header(title: str, subtitle: str) -> list[str]:
    return [_RULE, title, subtitle, _RULE, ""]


# -- Home ----------------------------------------------------------------------

_SECTIONS = (
    ("/users/1", "Dynamic Routes", "Server-rendered profile pages for each user."),
    ("/posts", "Blog Posts", "Posts fetched and rendered on the server."),
    ("/products", "Products", "Catalog with server-side filtering and aggregation."),
)

_ENDPOINTS = (
    ("/api/users/{id}", "User Data API"),
    ("/api/stats", "Statistics API"),
    ("/api/health", "Health Check API"),
    ("/api/time", "Server Time API"),
)


def render_home_page() -> str:
    lines = _header(
        f"Welcome to {SITE_NAME}",
        "Server-side rendering and API routes demo",
    )
    lines.append("Pages:")
    for path, name, blurb in _SECTIONS:
        lines.append(f"  {name} ({path}): {blurb}")
    lines.append("")
    lines.append("API endpoints (GET):")
    for path, name in _ENDPOINTS:
        lines.append(f"  {path}  {name}")
    return "\n".join(lines) + "\n"


# -- Posts ---------------------------------------------------------------------

def _render_post(post: Post) -> list[str]:
    return [
        post.title,
        f"  {post.excerpt}",
        f"  By {post.author} • {format_date(post.date)} • {post.read_time} min read",
        "",
    ]


def render_posts_page(posts: Sequence[Post] = POSTS) -> str:
    lines = _header(
        "Blog & Articles",
        "Collection of articles about modern web development and Next.js SSR",
    )
    for post in posts:
        lines.extend(_render_post(post))
    return "\n".join(lines)


# -- Products ------------------------------------------------------------------

def stock_label(product: Product) -> str:
    if catalog.stock_level(product) is StockLevel.OUT:
        return "Out of stock"
    return f"{product.stock} in stock"


def availability_label(product: Product) -> str:
    return "Unavailable" if product.stock == 0 else "Add to Cart"


def _render_product(product: Product) -> list[str]:
    return [
        f"{product.name} [{product.category}]",
        f"  {product.description}",
        f"  ${product.price} | {stock_label(product)} | {availability_label(product)}",
        "",
    ]


def render_products_page(products: Sequence[Product] = PRODUCTS) -> str:
    summary = catalog.summarize_catalog(products)
    lines = _header(
        "Products",
        f"{summary['in_stock']} In Stock | {summary['categories']} Categories",
    )
    for product in products:
        lines.extend(_render_product(product))
    lines.extend([
        f"Total Products: {summary['total_products']}",
        f"Total Value: ${summary['total_value']:.2f}",
        f"Items in Stock: {summary['total_stock']}",
    ])
    return "\n".join(lines) + "\n"


# -- User profile --------------------------------------------------------------

def _render_user_not_found(raw_id: str) -> str:
    parsed = parse_user_id(raw_id)
    shown = parsed if parsed is not None else raw_id
    lines = _header("User Not Found", f"No user with ID {shown} exists")
    lines.append("Try /users/1 or go back to /")
    return "\n".join(lines) + "\n"


def render_user_page(
    raw_id: str, profiles: Mapping[int, UserProfile] = PROFILES,
) -> str:
    """Profile page for raw_id, or the not-found page when it doesn't resolve."""
    profile = find_profile(raw_id, profiles)
    if profile is None:
        return _render_user_not_found(raw_id)

    lines = _header(profile.name, f"Server-Rendered Dynamic Page (ID: {profile.id})")
    lines.extend([
        "Profile Information",
        f"  Email:   {profile.email}",
        f"  Company: {profile.company}",
        f"  Phone:   {profile.phone}",
        f"  Website: {profile.website}",
        f"  Joined:  {format_date(profile.join_date)}",
        "",
        "Bio",
        f"  {profile.bio}",
        "",
        "Other Users",
    ])
    for other in profiles.values():
        marker = "*" if other.id == profile.id else " "
        lines.append(f"  {marker} /users/{other.id}  {other.name}")
    return "\n".join(lines) + "\n"
