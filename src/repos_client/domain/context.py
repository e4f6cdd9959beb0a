"""Resource-scoped bindings (owner, repo, branch, …) reused across calls."""

from __future__ import annotations

from typing import Any, Mapping


class ResourceContext:
    """Mutable key/value store owned by one resource object.

    Reads fall through to an optional parent so a sub-resource sees the
    owner/repo bound on its parent, while its own writes stay local.  Last
    write wins; ``None`` is never stored.  Not thread-safe.
    """

    def __init__(
        self,
        values: Mapping[str, Any] | None = None,
        parent: ResourceContext | None = None,
    ) -> None:
        self._values: dict[str, Any] = {}
        self._parent = parent
        if values:
            self.bind(values)

    def get(self, name: str, default: Any = None) -> Any:
        if name in self._values:
            return self._values[name]
        if self._parent is not None:
            return self._parent.get(name, default)
        return default

    def set(self, name: str, value: Any) -> None:
        if value is None:
            self._values.pop(name, None)
        else:
            self._values[name] = value

    def bind(self, values: Mapping[str, Any]) -> None:
        """Set every non-``None`` entry of *values*."""
        for name, value in values.items():
            if value is not None:
                self._values[name] = value

    def child(self, values: Mapping[str, Any] | None = None) -> ResourceContext:
        return ResourceContext(values, parent=self)

    def snapshot(self) -> dict[str, Any]:
        """Flattened view including inherited bindings."""
        merged = self._parent.snapshot() if self._parent is not None else {}
        merged.update(self._values)
        return merged

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def __repr__(self) -> str:
        return f"ResourceContext({self.snapshot()!r})"
