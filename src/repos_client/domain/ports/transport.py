"""Port: HTTP transport — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Any, Mapping, Protocol

from repos_client.domain.entities import HttpVerb, RawResponse


class Transport(Protocol):
    """Single-attempt HTTP capability the request engine depends on.

    Implementations own connection handling, authentication headers and any
    socket-level retry.  Connectivity failures propagate untranslated.
    """

    def perform_request(
        self, verb: HttpVerb, path: str, params: Mapping[str, Any]
    ) -> RawResponse:
        """Issue *verb* against *path* and return status plus decoded body."""
        ...
