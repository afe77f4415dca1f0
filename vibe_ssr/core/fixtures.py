"""Static Tables — the mock users, profiles, posts and products served by the app.

Invariants:
    - Built once at import, never mutated (frozen dataclasses, tuples, MappingProxyType)
    - USERS is keyed by the path string ("1"), PROFILES by the integer id
    - Post.author is a denormalized display name, not a reference into USERS

Design Decisions:
    - Module constants over a JSON/YAML data file: no IO at startup, nothing to misconfigure
"""

from dataclasses import dataclass
from datetime import date
from types import MappingProxyType

from vibe_ssr.core.domain_types import PostId, ProductId, UserId, UserStatus


@dataclass(frozen=True)
class User:
    """User record returned by the JSON API."""
    id: UserId
    name: str
    email: str
    role: str
    status: UserStatus

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "role": self.role,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class UserProfile:
    """Richer user record shown on the profile page."""
    id: UserId
    name: str
    email: str
    company: str
    phone: str
    website: str
    join_date: date
    bio: str


@dataclass(frozen=True)
class Post:
    id: PostId
    title: str
    author: str
    excerpt: str
    date: date
    read_time: int  # minutes


@dataclass(frozen=True)
class Product:
    id: ProductId
    name: str
    price: float
    category: str
    stock: int
    description: str


USERS: MappingProxyType[str, User] = MappingProxyType({
    "1": User(UserId(1), "Alice Johnson", "alice@example.com", "Developer", UserStatus.ACTIVE),
    "2": User(UserId(2), "Bob Smith", "bob@example.com", "DevOps Engineer", UserStatus.ACTIVE),
    "3": User(UserId(3), "Carol Williams", "carol@example.com", "Designer", UserStatus.INACTIVE),
})


PROFILES: MappingProxyType[int, UserProfile] = MappingProxyType({
    1: UserProfile(
        UserId(1), "Alice Johnson", "alice@example.com", "Tech Corp",
        "+1-555-0101", "alice.dev", date(2023, 1, 15),
        "Full-stack developer passionate about Next.js and modern web technologies.",
    ),
    2: UserProfile(
        UserId(2), "Bob Smith", "bob@example.com", "StartUp Inc",
        "+1-555-0102", "bobsmith.dev", date(2023, 2, 20),
        "DevOps engineer with expertise in cloud infrastructure and containerization.",
    ),
    3: UserProfile(
        UserId(3), "Carol Williams", "carol@example.com", "Design Studio",
        "+1-555-0103", "carolwilliams.design", date(2023, 3, 10),
        "UI/UX designer focused on creating beautiful and accessible user experiences.",
    ),
})


POSTS: tuple[Post, ...] = (
    Post(
        PostId(1), "Getting Started with Next.js SSR", "Alice Johnson",
        "Learn how to leverage Server-Side Rendering with Next.js to build "
        "fast, SEO-friendly applications.",
        date(2024, 1, 15), 8,
    ),
    Post(
        PostId(2), "Advanced TypeScript Patterns", "Bob Smith",
        "Explore advanced TypeScript patterns for building robust and scalable applications.",
        date(2024, 1, 10), 12,
    ),
    Post(
        PostId(3), "Tailwind CSS Best Practices", "Carol Williams",
        "Discover best practices for using Tailwind CSS in your Next.js projects.",
        date(2024, 1, 5), 6,
    ),
    Post(
        PostId(4), "Building APIs with Next.js", "Alice Johnson",
        "Create powerful backend APIs using Next.js API routes and serverless functions.",
        date(2024, 1, 1), 10,
    ),
)


PRODUCTS: tuple[Product, ...] = (
    Product(
        ProductId(1), "Next.js Course", 99.99, "Education", 50,
        "Complete guide to building SSR applications with Next.js",
    ),
    Product(
        ProductId(2), "React Developer Pack", 149.99, "Development", 30,
        "Essential tools and resources for React development",
    ),
    Product(
        ProductId(3), "TypeScript Masterclass", 129.99, "Education", 45,
        "Advanced TypeScript patterns and best practices",
    ),
    Product(
        ProductId(4), "Web Performance Optimization", 79.99, "Education", 60,
        "Optimize your web applications for speed and efficiency",
    ),
    Product(
        ProductId(5), "DevTools Pro", 199.99, "Development", 20,
        "Professional development tools and extensions",
    ),
    Product(
        ProductId(6), "UI Component Library", 89.99, "Components", 100,
        "Pre-built, customizable UI components for React",
    ),
)
