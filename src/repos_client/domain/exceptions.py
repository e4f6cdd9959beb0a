"""Domain exception hierarchy.

Every failure an endpoint call can produce is a single raised
:class:`DomainError` subclass carrying its :class:`ErrorKind`, the original
HTTP status (when there was one) and a human-readable message.  Callers catch
by class, never by parsing message text.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable


class ReposClientError(Exception):
    """Base exception for the entire library."""


class ErrorKind(str, Enum):
    """Closed set of failure kinds an endpoint call can raise."""

    CLIENT_ARGUMENT = "client_argument"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    UNPROCESSABLE_ENTITY = "unprocessable_entity"
    SERVICE = "service"


# ── Declaration errors ──────────────────────────────────────────────────────


class InvalidContractError(ReposClientError):
    """A call contract was declared with inconsistent field sets."""


# ── Call errors ─────────────────────────────────────────────────────────────


class DomainError(ReposClientError):
    """Base for every error raised out of an endpoint call."""

    kind: ErrorKind = ErrorKind.SERVICE

    def __init__(
        self,
        message: str,
        *,
        status: int | None = None,
        body: Any = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status = status
        self.body = body

    def __str__(self) -> str:
        if self.status is None:
            return self.message
        return f"[{self.status}] {self.message}"


class ClientArgumentError(DomainError, ValueError):
    """The caller supplied missing or malformed arguments.

    Raised before any network I/O when detected locally.  ``missing`` lists
    every absent required name, not just the first.
    """

    kind = ErrorKind.CLIENT_ARGUMENT

    def __init__(
        self,
        message: str,
        *,
        missing: Iterable[str] = (),
        status: int | None = None,
        body: Any = None,
    ) -> None:
        super().__init__(message, status=status, body=body)
        self.missing = tuple(missing)


class BadRequestError(ClientArgumentError):
    """Generic 4xx response not covered by a more specific kind."""


class UnauthorizedError(DomainError):
    """Authentication is missing or invalid (401)."""

    kind = ErrorKind.UNAUTHORIZED


class ForbiddenError(DomainError):
    """The authenticated principal may not perform this action (403)."""

    kind = ErrorKind.FORBIDDEN


class NotFoundError(DomainError):
    """The resource does not exist or is not visible (404)."""

    kind = ErrorKind.NOT_FOUND


class UnprocessableEntityError(DomainError):
    """The server rejected the request payload as invalid (422)."""

    kind = ErrorKind.UNPROCESSABLE_ENTITY


class ServiceError(DomainError):
    """5xx, or any status outside the success and client-error ranges."""

    kind = ErrorKind.SERVICE
