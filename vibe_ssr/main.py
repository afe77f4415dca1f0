"""Vibe SSR API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map VibeError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - /api/* routers registered before pages so "/" never shadows them
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from vibe_ssr.api.error_handlers import register_error_handlers
from vibe_ssr.api.routes import health, pages, server_time, stats, users
from vibe_ssr.config import get_settings
from vibe_ssr.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    logger.info(
        f"{settings.app_name} API started ({settings.environment})",
        extra={"uptime_mode": settings.health_uptime_mode.value},
    )
    yield
    logger.info(f"{settings.app_name} API shutting down")


settings = get_settings()
app = FastAPI(
    title=f"{settings.app_name} API", version=settings.api_version, lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(users.router)
app.include_router(stats.router)
app.include_router(health.router)
app.include_router(server_time.router)
app.include_router(pages.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app with uvicorn."""
    cfg = get_settings()
    uvicorn.run(
        "vibe_ssr.main:app", host=cfg.host, port=cfg.port,
        log_level=cfg.log_level.lower(),
    )
