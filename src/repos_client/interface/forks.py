"""Repository forks."""

from __future__ import annotations

from typing import Any

from repos_client.domain.entities import CallContract, Endpoint, HttpVerb, ResultShape
from repos_client.interface.resource_api import ResourceApi
from repos_client.services.argument_normalizer import OnEach

LIST = Endpoint(
    HttpVerb.GET,
    "/repos/{user}/{repo}/forks",
    CallContract(required_positional=("user", "repo"), allowed_options={"sort"}),
    ResultShape.LIST,
)
CREATE = Endpoint(
    HttpVerb.POST,
    "/repos/{user}/{repo}/forks",
    CallContract(required_positional=("user", "repo"), allowed_options={"organization"}),
)


class Forks(ResourceApi):
    """``/repos/{user}/{repo}/forks``"""

    def list(self, *args: Any, on_each: OnEach | None = None, **options: Any) -> Any:
        return self._call(LIST, args, options, on_each)

    def create(self, *args: Any, **options: Any) -> Any:
        """Fork into the authenticated user's account, or ``organization``."""
        return self._call(CREATE, args, options)

    all = list
