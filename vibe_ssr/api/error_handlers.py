"""Error Handlers — global exception handlers for the demo API.

Invariants:
    - VibeError → the error's own body and http_status
    - Exception (catch-all) → InternalError body, never leaks internal details (500)
    - Lookup misses log at DEBUG only; they are expected traffic, not incidents

Design Decisions:
    - Kept out of main.py so tests can build a bare app with the same handlers
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from vibe_ssr.core.errors import InternalError, VibeError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_vibe_error_handler(app)
    _register_generic_error_handler(app)


def _register_vibe_error_handler(app: FastAPI) -> None:

    @app.exception_handler(VibeError)
    async def vibe_error_handler(request: Request, exc: VibeError):
        """Handle all domain errors (lookup misses)."""
        logger.debug(
            f"VibeError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "status_code": exc.http_status,
            },
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        err = InternalError()
        return JSONResponse(status_code=err.http_status, content=err.to_response())
