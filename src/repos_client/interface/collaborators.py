"""Repository collaborators."""

from __future__ import annotations

from typing import Any

from repos_client.domain.entities import CallContract, Endpoint, HttpVerb, ResultShape
from repos_client.domain.exceptions import NotFoundError
from repos_client.interface.resource_api import ResourceApi
from repos_client.services.argument_normalizer import OnEach

_MEMBER = CallContract(required_positional=("user", "repo", "collaborator"))
_MEMBER_PATH = "/repos/{user}/{repo}/collaborators/{collaborator}"

LIST = Endpoint(
    HttpVerb.GET,
    "/repos/{user}/{repo}/collaborators",
    CallContract(required_positional=("user", "repo")),
    ResultShape.LIST,
)
ADD = Endpoint(HttpVerb.PUT, _MEMBER_PATH, _MEMBER)
CHECK = Endpoint(HttpVerb.GET, _MEMBER_PATH, _MEMBER)
REMOVE = Endpoint(HttpVerb.DELETE, _MEMBER_PATH, _MEMBER)


class Collaborators(ResourceApi):
    """``/repos/{user}/{repo}/collaborators``"""

    def list(self, *args: Any, on_each: OnEach | None = None, **options: Any) -> Any:
        return self._call(LIST, args, options, on_each)

    def add(self, *args: Any, **options: Any) -> Any:
        return self._call(ADD, args, options)

    def remove(self, *args: Any, **options: Any) -> Any:
        return self._call(REMOVE, args, options)

    def is_collaborator(self, *args: Any, **options: Any) -> bool:
        """GitHub answers 204 for a collaborator and 404 otherwise."""
        try:
            self._call(CHECK, args, options)
        except NotFoundError:
            return False
        return True

    all = list
    collaborator = is_collaborator
