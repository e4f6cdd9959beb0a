"""Repository merging."""

from __future__ import annotations

from typing import Any

from repos_client.domain.entities import CallContract, Endpoint, HttpVerb
from repos_client.interface.resource_api import ResourceApi

REQUIRED_MERGE_OPTIONS = frozenset({"base", "head"})

MERGE = Endpoint(
    HttpVerb.POST,
    "/repos/{user}/{repo}/merges",
    CallContract(
        required_positional=("user", "repo"),
        allowed_options=REQUIRED_MERGE_OPTIONS | {"commit_message"},
        required_options=REQUIRED_MERGE_OPTIONS,
    ),
)


class Merging(ResourceApi):
    """``/repos/{user}/{repo}/merges``"""

    def merge(self, *args: Any, **options: Any) -> Any:
        """Merge ``head`` into ``base``; returns ``None`` when nothing was merged (204)."""
        return self._call(MERGE, args, options)
