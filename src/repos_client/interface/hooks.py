"""Repository hooks."""

from __future__ import annotations

from typing import Any

from repos_client.domain.entities import CallContract, Endpoint, HttpVerb, ResultShape
from repos_client.interface.resource_api import ResourceApi
from repos_client.services.argument_normalizer import OnEach

VALID_HOOK_CREATE_OPTIONS = frozenset({"name", "config", "events", "active"})
VALID_HOOK_EDIT_OPTIONS = VALID_HOOK_CREATE_OPTIONS | {"add_events", "remove_events"}
REQUIRED_HOOK_OPTIONS = frozenset({"name", "config"})

_HOOK = CallContract(required_positional=("user", "repo", "id"))
_HOOK_PATH = "/repos/{user}/{repo}/hooks/{id}"

LIST = Endpoint(
    HttpVerb.GET,
    "/repos/{user}/{repo}/hooks",
    CallContract(required_positional=("user", "repo")),
    ResultShape.LIST,
)
GET = Endpoint(HttpVerb.GET, _HOOK_PATH, _HOOK)
CREATE = Endpoint(
    HttpVerb.POST,
    "/repos/{user}/{repo}/hooks",
    CallContract(
        required_positional=("user", "repo"),
        allowed_options=VALID_HOOK_CREATE_OPTIONS,
        required_options=REQUIRED_HOOK_OPTIONS,
    ),
)
EDIT = Endpoint(
    HttpVerb.PATCH,
    _HOOK_PATH,
    CallContract(
        required_positional=("user", "repo", "id"),
        allowed_options=VALID_HOOK_EDIT_OPTIONS,
        required_options=REQUIRED_HOOK_OPTIONS,
    ),
)
TEST = Endpoint(HttpVerb.POST, _HOOK_PATH + "/tests", _HOOK)
DELETE = Endpoint(HttpVerb.DELETE, _HOOK_PATH, _HOOK)


class Hooks(ResourceApi):
    """``/repos/{user}/{repo}/hooks``"""

    def list(self, *args: Any, on_each: OnEach | None = None, **options: Any) -> Any:
        return self._call(LIST, args, options, on_each)

    def get(self, *args: Any, **options: Any) -> Any:
        return self._call(GET, args, options)

    def create(self, *args: Any, **options: Any) -> Any:
        return self._call(CREATE, args, options)

    def edit(self, *args: Any, **options: Any) -> Any:
        return self._call(EDIT, args, options)

    def test(self, *args: Any, **options: Any) -> Any:
        """Trigger the hook with the latest push."""
        return self._call(TEST, args, options)

    def delete(self, *args: Any, **options: Any) -> Any:
        return self._call(DELETE, args, options)

    all = list
    find = get
    remove = delete
