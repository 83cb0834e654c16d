"""
Global exception handlers.

Every failure is rendered as a plain-text body holding the standard reason
phrase for its status; internal details only reach the logs.
"""

from __future__ import annotations

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from api.core.errors import ApiError, AuthError

logger = logging.getLogger(__name__)


def _reason(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"


def plain_error(status_code: int, headers: dict | None = None) -> PlainTextResponse:
    return PlainTextResponse(_reason(status_code), status_code=int(status_code), headers=headers)


def register_error_handlers(app: FastAPI) -> None:
    """Register domain, framework and catch-all handlers on the app."""

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError):
        if isinstance(exc, AuthError):
            # Already logged by the shared-secret gate.
            return plain_error(exc.status_code)
        level = logging.ERROR if exc.status_code >= 500 else logging.INFO
        logger.log(level, "%s %s -> %s: %s", request.method, request.url.path, exc.status_code, exc.detail)
        return plain_error(exc.status_code)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return plain_error(exc.status_code, headers=getattr(exc, "headers", None))

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logger.error("Unhandled exception on %s %s", request.method, request.url.path, exc_info=exc)
        return plain_error(HTTPStatus.INTERNAL_SERVER_ERROR)
