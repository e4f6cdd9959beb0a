"""Construction wiring — settings to transport to engine."""

from __future__ import annotations

import logging

import httpx

from repos_client.infrastructure.config import Settings
from repos_client.infrastructure.httpx_transport import HttpxTransport

_PACKAGE_LOGGER = "repos_client"


def build_http_client(settings: Settings) -> httpx.Client:
    return httpx.Client(timeout=httpx.Timeout(settings.timeout_seconds))


def build_transport(settings: Settings, client: httpx.Client) -> HttpxTransport:
    """Wrap *client* in the GitHub transport configured by *settings*."""
    token = settings.oauth_token.get_secret_value() if settings.oauth_token else None
    return HttpxTransport(
        client=client,
        endpoint=settings.endpoint,
        token=token,
        user_agent=settings.user_agent,
    )


def apply_log_level(settings: Settings) -> None:
    """Set the package logger level when one is configured.

    Without ``log_level`` the host application's logging setup is left alone;
    handlers are never installed.
    """
    if settings.log_level is None:
        return
    logging.getLogger(_PACKAGE_LOGGER).setLevel(settings.log_level.upper())
