"""Error taxonomy for the records API.

Every error carries the HTTP status it maps to. The response body is always
the standard reason phrase for that status; ``detail`` is for logs only.
"""

from __future__ import annotations

from http import HTTPStatus


class ApiError(Exception):
    """Base exception for request failures that map to an HTTP status."""

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, detail: str = "") -> None:
        super().__init__(detail or self.reason)
        self.detail = detail or self.reason

    @property
    def reason(self) -> str:
        return HTTPStatus(self.status_code).phrase


class AuthError(ApiError):
    """Raised when the credential header is missing or does not match."""

    status_code = HTTPStatus.FORBIDDEN


class InvalidRecordIdError(ApiError):
    """Raised when a path identifier does not parse as an integer."""

    status_code = HTTPStatus.BAD_REQUEST


class RecordNotFoundError(ApiError):
    """Raised when the store loaded fine but no record has the requested id."""

    status_code = HTTPStatus.NOT_FOUND


class StoreError(ApiError):
    """Raised when the backing file cannot be read or parsed."""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR
