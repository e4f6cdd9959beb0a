"""Repository downloads."""

from __future__ import annotations

from typing import Any

from repos_client.domain.entities import CallContract, Endpoint, HttpVerb, ResultShape
from repos_client.interface.resource_api import ResourceApi
from repos_client.services.argument_normalizer import OnEach

_REPO = CallContract(required_positional=("user", "repo"))
_DOWNLOAD = CallContract(required_positional=("user", "repo", "id"))

LIST = Endpoint(HttpVerb.GET, "/repos/{user}/{repo}/downloads", _REPO, ResultShape.LIST)
GET = Endpoint(HttpVerb.GET, "/repos/{user}/{repo}/downloads/{id}", _DOWNLOAD)
DELETE = Endpoint(HttpVerb.DELETE, "/repos/{user}/{repo}/downloads/{id}", _DOWNLOAD)
CREATE = Endpoint(
    HttpVerb.POST,
    "/repos/{user}/{repo}/downloads",
    CallContract(
        required_positional=("user", "repo"),
        allowed_options={"name", "size", "description", "content_type"},
        required_options={"name", "size"},
    ),
)


class Downloads(ResourceApi):
    """``/repos/{user}/{repo}/downloads``"""

    def list(self, *args: Any, on_each: OnEach | None = None, **options: Any) -> Any:
        return self._call(LIST, args, options, on_each)

    def get(self, *args: Any, **options: Any) -> Any:
        return self._call(GET, args, options)

    def create(self, *args: Any, **options: Any) -> Any:
        """Register a download; returns the upload descriptor GitHub hands back."""
        return self._call(CREATE, args, options)

    def delete(self, *args: Any, **options: Any) -> Any:
        return self._call(DELETE, args, options)

    all = list
    find = get
    remove = delete
