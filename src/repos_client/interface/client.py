"""Client entry object."""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from repos_client.domain.ports.transport import Transport
from repos_client.infrastructure.config import Settings, get_settings
from repos_client.interface.dependencies import (
    apply_log_level,
    build_http_client,
    build_transport,
)
from repos_client.interface.registry import SubResourceRegistry, default_registry
from repos_client.interface.repos import Repos
from repos_client.services.request_engine import RequestEngine

logger = logging.getLogger(__name__)


class GitHub:
    """Entry point: ``GitHub().repos().list(user="acme")``.

    When no *transport* is injected an :class:`httpx.Client` is created from
    *settings* and owned by this object; close it with :meth:`close` or by
    using the client as a context manager.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        transport: Transport | None = None,
        registry: SubResourceRegistry | None = None,
    ) -> None:
        self.settings = settings if settings is not None else get_settings()
        apply_log_level(self.settings)

        self._http_client: httpx.Client | None = None
        if transport is None:
            self._http_client = build_http_client(self.settings)
            transport = build_transport(self.settings, self._http_client)
            logger.debug("Using %s", self.settings.endpoint)

        self._engine = RequestEngine(transport)
        self._registry = registry if registry is not None else default_registry()
        self._repos = Repos(self._engine, registry=self._registry)

    def repos(self, **bindings: Any) -> Repos:
        """Shared :class:`Repos` without *bindings*; a freshly bound one with them."""
        if not bindings:
            return self._repos
        return Repos(self._engine, registry=self._registry, **bindings)

    def close(self) -> None:
        if self._http_client is not None:
            self._http_client.close()
            self._http_client = None

    def __enter__(self) -> GitHub:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
