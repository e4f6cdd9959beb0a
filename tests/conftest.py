from __future__ import annotations

from typing import Any, Callable, Mapping

import httpx
import pytest

from repos_client.domain.context import ResourceContext
from repos_client.domain.entities import HttpVerb, RawResponse
from repos_client.infrastructure.config import Settings
from repos_client.infrastructure.httpx_transport import HttpxTransport
from repos_client.interface.client import GitHub
from repos_client.services.request_engine import RequestEngine


class RecordingTransport:
    """Spy transport: records every request and replays queued responses."""

    def __init__(self, responses: list[RawResponse] | None = None) -> None:
        self.requests: list[tuple[HttpVerb, str, dict[str, Any]]] = []
        self._responses = list(responses or [])

    def queue(self, status: int, body: Any = None) -> None:
        self._responses.append(RawResponse(status=status, body=body))

    def perform_request(
        self, verb: HttpVerb, path: str, params: Mapping[str, Any]
    ) -> RawResponse:
        self.requests.append((verb, path, dict(params)))
        if not self._responses:
            return RawResponse(status=200, body=None)
        return self._responses.pop(0)


@pytest.fixture
def transport() -> RecordingTransport:
    return RecordingTransport()


@pytest.fixture
def engine(transport: RecordingTransport) -> RequestEngine:
    return RequestEngine(transport)


@pytest.fixture
def context() -> ResourceContext:
    return ResourceContext()


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, oauth_token="secret-token", log_level="DEBUG")


@pytest.fixture
def github(transport: RecordingTransport, settings: Settings) -> GitHub:
    return GitHub(settings=settings, transport=transport)


Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def http_github(settings: Settings) -> Callable[[Handler], GitHub]:
    """Build a client whose real HttpxTransport talks to an httpx.MockTransport."""
    clients: list[httpx.Client] = []

    def _build(handler: Handler) -> GitHub:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return GitHub(
            settings=settings,
            transport=HttpxTransport(client, endpoint=settings.endpoint, token="secret-token"),
        )

    yield _build
    for client in clients:
        client.close()
