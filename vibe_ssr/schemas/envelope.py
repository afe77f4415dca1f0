"""Envelope Schemas — response models for the /api/* JSON endpoints.

Invariants:
    - Wire names are camelCase (totalUsers, apiVersion, utcOffset)
    - timestamp is a preformatted string so the "Z" suffix and ms precision survive
    - UserEnvelope has no message field; the others always carry one

Design Decisions:
    - One data model per endpoint, envelopes composed per endpoint instead of a
      generic Envelope[T]: the OpenAPI page shows concrete names
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserData(CamelModel):
    id: int
    name: str
    email: str
    role: str
    status: Literal["active", "inactive"]


class StatsData(CamelModel):
    total_users: int
    total_posts: int
    total_products: int
    active_users: int
    total_revenue: float
    conversion_rate: float


class HealthData(CamelModel):
    status: Literal["healthy"]
    uptime: int
    environment: str
    api_version: str
    database: str
    cache: str


class TimeData(CamelModel):
    iso: str
    unix: int
    readable: str
    timezone: str
    utc_offset: int | float


class UserEnvelope(CamelModel):
    success: bool
    data: UserData
    timestamp: str


class StatsEnvelope(CamelModel):
    success: bool
    data: StatsData
    timestamp: str
    message: str


class HealthEnvelope(CamelModel):
    success: bool
    data: HealthData
    timestamp: str
    message: str


class TimeEnvelope(CamelModel):
    success: bool
    data: TimeData
    timestamp: str
    message: str


class UserNotFoundBody(BaseModel):
    """404 body for /api/users/{id}."""
    error: str
    id: str
