"""Sub-resource registry — explicit factories keyed by name."""

from __future__ import annotations

from typing import Callable

from repos_client.domain.context import ResourceContext
from repos_client.interface.collaborators import Collaborators
from repos_client.interface.comments import Comments
from repos_client.interface.commits import Commits
from repos_client.interface.contents import Contents
from repos_client.interface.downloads import Downloads
from repos_client.interface.forks import Forks
from repos_client.interface.hooks import Hooks
from repos_client.interface.keys import Keys
from repos_client.interface.merging import Merging
from repos_client.interface.resource_api import ResourceApi
from repos_client.interface.statuses import Statuses
from repos_client.services.request_engine import RequestEngine

ResourceFactory = Callable[[RequestEngine, ResourceContext], ResourceApi]


class SubResourceRegistry:
    """Maps a sub-resource name to the factory that builds it."""

    def __init__(self) -> None:
        self._factories: dict[str, ResourceFactory] = {}

    def register(self, name: str, factory: ResourceFactory) -> None:
        if name in self._factories:
            raise ValueError(f"Sub-resource '{name}' is already registered")
        self._factories[name] = factory

    def names(self) -> list[str]:
        return sorted(self._factories)

    def build_all(
        self, engine: RequestEngine, parent: ResourceContext
    ) -> dict[str, ResourceApi]:
        """Construct every registered sub-resource, each with a child context."""
        return {
            name: factory(engine, parent.child())
            for name, factory in self._factories.items()
        }


def default_registry() -> SubResourceRegistry:
    """Registry with every repository sub-resource this package ships."""
    registry = SubResourceRegistry()
    registry.register("collaborators", Collaborators)
    registry.register("comments", Comments)
    registry.register("commits", Commits)
    registry.register("contents", Contents)
    registry.register("downloads", Downloads)
    registry.register("forks", Forks)
    registry.register("hooks", Hooks)
    registry.register("keys", Keys)
    registry.register("merging", Merging)
    registry.register("statuses", Statuses)
    return registry
