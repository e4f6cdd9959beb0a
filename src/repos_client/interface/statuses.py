"""Commit statuses."""

from __future__ import annotations

from typing import Any

from repos_client.domain.entities import CallContract, Endpoint, HttpVerb, ResultShape
from repos_client.interface.resource_api import ResourceApi
from repos_client.services.argument_normalizer import OnEach

VALID_STATUS_STATES = ("pending", "success", "error", "failure")

_STATUSES_PATH = "/repos/{user}/{repo}/statuses/{sha}"

LIST = Endpoint(
    HttpVerb.GET,
    _STATUSES_PATH,
    CallContract(required_positional=("user", "repo", "sha")),
    ResultShape.LIST,
)
CREATE = Endpoint(
    HttpVerb.POST,
    _STATUSES_PATH,
    CallContract(
        required_positional=("user", "repo", "sha"),
        allowed_options={"state", "target_url", "description"},
        required_options={"state"},
    ),
)


class Statuses(ResourceApi):
    """``/repos/{user}/{repo}/statuses/{sha}``"""

    def list(self, *args: Any, on_each: OnEach | None = None, **options: Any) -> Any:
        return self._call(LIST, args, options, on_each)

    def create(self, *args: Any, **options: Any) -> Any:
        """``state`` is one of :data:`VALID_STATUS_STATES`; the server validates it."""
        return self._call(CREATE, args, options)

    all = list
