"""Repository deploy keys."""

from __future__ import annotations

from typing import Any

from repos_client.domain.entities import CallContract, Endpoint, HttpVerb, ResultShape
from repos_client.interface.resource_api import ResourceApi
from repos_client.services.argument_normalizer import OnEach

VALID_KEY_OPTIONS = frozenset({"title", "key"})

_KEY = CallContract(required_positional=("user", "repo", "id"))
_KEY_PATH = "/repos/{user}/{repo}/keys/{id}"

LIST = Endpoint(
    HttpVerb.GET,
    "/repos/{user}/{repo}/keys",
    CallContract(required_positional=("user", "repo")),
    ResultShape.LIST,
)
GET = Endpoint(HttpVerb.GET, _KEY_PATH, _KEY)
CREATE = Endpoint(
    HttpVerb.POST,
    "/repos/{user}/{repo}/keys",
    CallContract(
        required_positional=("user", "repo"),
        allowed_options=VALID_KEY_OPTIONS,
        required_options=VALID_KEY_OPTIONS,
    ),
)
EDIT = Endpoint(
    HttpVerb.PATCH,
    _KEY_PATH,
    CallContract(required_positional=("user", "repo", "id"), allowed_options=VALID_KEY_OPTIONS),
)
DELETE = Endpoint(HttpVerb.DELETE, _KEY_PATH, _KEY)


class Keys(ResourceApi):
    """``/repos/{user}/{repo}/keys``"""

    def list(self, *args: Any, on_each: OnEach | None = None, **options: Any) -> Any:
        return self._call(LIST, args, options, on_each)

    def get(self, *args: Any, **options: Any) -> Any:
        return self._call(GET, args, options)

    def create(self, *args: Any, **options: Any) -> Any:
        return self._call(CREATE, args, options)

    def edit(self, *args: Any, **options: Any) -> Any:
        return self._call(EDIT, args, options)

    def delete(self, *args: Any, **options: Any) -> Any:
        return self._call(DELETE, args, options)

    all = list
    find = get
    remove = delete
