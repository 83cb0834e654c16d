"""Shared-secret gate protecting every data route."""

from __future__ import annotations

import logging
import secrets

from fastapi import Request

from api.core.config import Settings
from api.core.errors import AuthError

logger = logging.getLogger(__name__)


def verify_shared_secret(supplied: str | None, expected: str) -> bool:
    """Exact, constant-time match. A missing value never matches."""
    if supplied is None:
        return False
    return secrets.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8"))


def _get_settings(request: Request) -> Settings:
    settings = getattr(getattr(request.app, "state", None), "settings", None)
    if not settings:
        raise RuntimeError("Settings not configured")
    return settings


def require_shared_secret(request: Request) -> None:
    """
    Dependency that rejects the request with 403 unless the configured
    credential header carries the shared secret verbatim.
    """
    settings = _get_settings(request)
    supplied = request.headers.get(settings.auth_header)
    if not verify_shared_secret(supplied, settings.shared_secret):
        logger.warning(
            "Rejected %s %s: %s credential",
            request.method,
            request.url.path,
            "missing" if supplied is None else "invalid",
        )
        raise AuthError("Missing or invalid credential")
