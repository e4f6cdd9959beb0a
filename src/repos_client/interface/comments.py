"""Commit comments."""

from __future__ import annotations

from typing import Any

from repos_client.domain.entities import CallContract, Endpoint, HttpVerb, ResultShape
from repos_client.interface.resource_api import ResourceApi
from repos_client.services.argument_normalizer import OnEach

REQUIRED_COMMENT_OPTIONS = frozenset({"body"})

_COMMENT = CallContract(required_positional=("user", "repo", "id"))
_COMMENT_PATH = "/repos/{user}/{repo}/comments/{id}"

LIST = Endpoint(
    HttpVerb.GET,
    "/repos/{user}/{repo}/comments",
    CallContract(required_positional=("user", "repo")),
    ResultShape.LIST,
)
LIST_FOR_COMMIT = Endpoint(
    HttpVerb.GET,
    "/repos/{user}/{repo}/commits/{sha}/comments",
    CallContract(required_positional=("user", "repo", "sha")),
    ResultShape.LIST,
)
GET = Endpoint(HttpVerb.GET, _COMMENT_PATH, _COMMENT)
CREATE = Endpoint(
    HttpVerb.POST,
    "/repos/{user}/{repo}/commits/{sha}/comments",
    CallContract(
        required_positional=("user", "repo", "sha"),
        allowed_options=REQUIRED_COMMENT_OPTIONS | {"path", "position", "line"},
        required_options=REQUIRED_COMMENT_OPTIONS,
    ),
)
EDIT = Endpoint(
    HttpVerb.PATCH,
    _COMMENT_PATH,
    CallContract(
        required_positional=("user", "repo", "id"),
        allowed_options=REQUIRED_COMMENT_OPTIONS,
        required_options=REQUIRED_COMMENT_OPTIONS,
    ),
)
DELETE = Endpoint(HttpVerb.DELETE, _COMMENT_PATH, _COMMENT)


class Comments(ResourceApi):
    """``/repos/{user}/{repo}/comments``"""

    def list(self, *args: Any, on_each: OnEach | None = None, **options: Any) -> Any:
        return self._call(LIST, args, options, on_each)

    def list_for_commit(
        self, *args: Any, on_each: OnEach | None = None, **options: Any
    ) -> Any:
        return self._call(LIST_FOR_COMMIT, args, options, on_each)

    def get(self, *args: Any, **options: Any) -> Any:
        return self._call(GET, args, options)

    def create(self, *args: Any, **options: Any) -> Any:
        """Comment on commit ``sha``; ``path``/``position`` place it on a diff line."""
        return self._call(CREATE, args, options)

    def edit(self, *args: Any, **options: Any) -> Any:
        return self._call(EDIT, args, options)

    def delete(self, *args: Any, **options: Any) -> Any:
        return self._call(DELETE, args, options)

    all = list
    find = get
    remove = delete
