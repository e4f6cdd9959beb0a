import logging

import httpx
import pytest

from repos_client.domain.entities import HttpVerb
from repos_client.domain.exceptions import NotFoundError
from repos_client.infrastructure.config import Settings
from repos_client.infrastructure.httpx_transport import HttpxTransport
from repos_client.interface.client import GitHub
from repos_client.interface.dependencies import build_transport


def test_settings_read_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GITHUB_ENDPOINT", "https://ghe.example.com/api/v3")
    monkeypatch.setenv("GITHUB_OAUTH_TOKEN", "env-token")
    monkeypatch.setenv("GITHUB_TIMEOUT_SECONDS", "5")

    settings = Settings(_env_file=None)

    assert settings.endpoint == "https://ghe.example.com/api/v3"
    assert settings.oauth_token.get_secret_value() == "env-token"
    assert settings.timeout_seconds == 5.0


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("GITHUB_ENDPOINT", "GITHUB_OAUTH_TOKEN", "GITHUB_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.endpoint == "https://api.github.com"
    assert settings.oauth_token is None
    assert settings.log_level is None


def test_token_is_not_leaked_in_repr(settings: Settings) -> None:
    assert "secret-token" not in repr(settings)


def test_client_applies_package_log_level(settings: Settings, transport) -> None:
    GitHub(settings=settings, transport=transport)

    assert logging.getLogger("repos_client").level == logging.DEBUG


def test_client_owns_and_closes_http_client(settings: Settings) -> None:
    with GitHub(settings=settings) as github:
        http_client = github._http_client
        assert isinstance(http_client, httpx.Client)

    assert http_client.is_closed
    assert github._http_client is None


def test_build_transport_sends_auth_and_accept_headers(settings: Settings) -> None:
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=[])

    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        transport = build_transport(settings, client)
        raw = transport.perform_request(HttpVerb.GET, "repos/acme/widget/tags", {"page": 2})

    assert raw.status == 200
    assert raw.body == []
    request = seen[0]
    assert str(request.url) == "https://api.github.com/repos/acme/widget/tags?page=2"
    assert request.headers["authorization"] == "Bearer secret-token"
    assert request.headers["accept"] == "application/vnd.github.v3+json"
    assert request.headers["user-agent"] == "repos-client/1.0"


def test_transport_returns_text_for_non_json_body() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, text="<html>oops</html>")

    with httpx.Client(transport=httpx.MockTransport(handler)) as client:
        raw = HttpxTransport(client).perform_request(HttpVerb.DELETE, "/repos/a/b", {})

    assert raw.status == 500
    assert raw.body == "<html>oops</html>"


def test_connectivity_errors_propagate_untranslated(http_github) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    github = http_github(handler)

    with pytest.raises(httpx.ConnectError):
        github.repos().get("acme", "widget")


def test_end_to_end_not_found(http_github) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/repos/acme/widget"
        return httpx.Response(404, json={"message": "Not Found"})

    with pytest.raises(NotFoundError):
        http_github(handler).repos().get("acme", "widget")


def test_end_to_end_branches(http_github) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.path == "/repos/acme/widget/branches"
        return httpx.Response(200, json=[{"name": "main"}, {"name": "dev"}])

    seen: list[str] = []
    branches = http_github(handler).repos().branches(
        "acme", "widget", on_each=lambda b: seen.append(b.name)
    )

    assert len(branches) == 2
    assert seen == ["main", "dev"]


def test_client_leaves_host_log_level_alone_by_default(transport) -> None:
    package_logger = logging.getLogger("repos_client")
    package_logger.setLevel(logging.INFO)

    GitHub(settings=Settings(_env_file=None, log_level=None), transport=transport)

    assert package_logger.level == logging.INFO
