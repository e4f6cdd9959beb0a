"""Repository commits."""

from __future__ import annotations

from typing import Any

from repos_client.domain.entities import CallContract, Endpoint, HttpVerb, ResultShape
from repos_client.interface.resource_api import ResourceApi
from repos_client.services.argument_normalizer import OnEach

VALID_COMMITS_OPTIONS = frozenset({"sha", "path", "author", "since", "until"})

LIST = Endpoint(
    HttpVerb.GET,
    "/repos/{user}/{repo}/commits",
    CallContract(required_positional=("user", "repo"), allowed_options=VALID_COMMITS_OPTIONS),
    ResultShape.LIST,
)
GET = Endpoint(
    HttpVerb.GET,
    "/repos/{user}/{repo}/commits/{sha}",
    CallContract(required_positional=("user", "repo", "sha")),
)
COMPARE = Endpoint(
    HttpVerb.GET,
    "/repos/{user}/{repo}/compare/{base}...{head}",
    CallContract(required_positional=("user", "repo", "base", "head")),
)


class Commits(ResourceApi):
    """``/repos/{user}/{repo}/commits``"""

    def list(self, *args: Any, on_each: OnEach | None = None, **options: Any) -> Any:
        """Filter with ``sha`` (branch or start commit), ``path``, ``author``, ``since``, ``until``."""
        return self._call(LIST, args, options, on_each)

    def get(self, *args: Any, **options: Any) -> Any:
        return self._call(GET, args, options)

    def compare(self, *args: Any, **options: Any) -> Any:
        return self._call(COMPARE, args, options)

    all = list
    find = get
