"""Repository contents."""

from __future__ import annotations

from typing import Any

from repos_client.domain.entities import CallContract, Endpoint, HttpVerb
from repos_client.interface.resource_api import ResourceApi

README = Endpoint(
    HttpVerb.GET,
    "/repos/{user}/{repo}/readme",
    CallContract(required_positional=("user", "repo"), allowed_options={"ref"}),
)
GET = Endpoint(
    HttpVerb.GET,
    "/repos/{user}/{repo}/contents/{path:path}",
    CallContract(required_positional=("user", "repo", "path"), allowed_options={"ref"}),
)


class Contents(ResourceApi):
    """``/repos/{user}/{repo}/contents``

    ``path`` is sent with its ``/`` separators intact; ``ref`` selects a
    branch, tag or commit.
    """

    def readme(self, *args: Any, **options: Any) -> Any:
        return self._call(README, args, options)

    def get(self, *args: Any, **options: Any) -> Any:
        return self._call(GET, args, options)

    find = get
