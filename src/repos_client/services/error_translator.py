"""Maps HTTP status codes onto the closed :class:`DomainError` taxonomy."""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Any

from repos_client.domain.exceptions import (
    BadRequestError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    ServiceError,
    UnauthorizedError,
    UnprocessableEntityError,
)

logger = logging.getLogger(__name__)

_STATUS_ERRORS: dict[int, type[DomainError]] = {
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    422: UnprocessableEntityError,
}


def translate(status: int, body: Any = None) -> DomainError | None:
    """Return the error for *status*, or ``None`` for 2xx.

    Anything outside 2xx and 4xx, including 1xx and 3xx, is a
    :class:`ServiceError`.
    """
    if 200 <= status < 300:
        return None

    exc_type = _STATUS_ERRORS.get(status)
    if exc_type is None:
        exc_type = BadRequestError if 400 <= status < 500 else ServiceError

    message = error_message(status, body)
    logger.debug("HTTP %d translated to %s", status, exc_type.__name__)
    return exc_type(message, status=status, body=body)


def error_message(status: int, body: Any) -> str:
    """Prefer the server's ``message`` (plus 422 field details) over the reason phrase."""
    try:
        phrase = HTTPStatus(status).phrase
    except ValueError:
        phrase = "Unknown Status"

    if isinstance(body, dict):
        message = body.get("message") or phrase
        details = [
            _describe(err) for err in body.get("errors") or [] if isinstance(err, dict)
        ]
        if details:
            return f"{message} ({'; '.join(details)})"
        return str(message)
    if isinstance(body, str) and body.strip():
        return body.strip()
    return phrase


def _describe(error: dict[str, Any]) -> str:
    if error.get("message"):
        return str(error["message"])
    parts = [str(error[key]) for key in ("resource", "field", "code") if error.get(key)]
    return " ".join(parts) or "invalid"
