"""Base class for endpoint groups — the outermost binding layer."""

from __future__ import annotations

from typing import Any, Mapping

from repos_client.domain.context import ResourceContext
from repos_client.domain.entities import Endpoint
from repos_client.services.argument_normalizer import CallInvocation, OnEach
from repos_client.services.request_engine import RequestEngine


class ResourceApi:
    """Holds a :class:`ResourceContext` and forwards calls to the engine.

    Subclasses declare :class:`Endpoint` constants and expose one thin method
    per operation; aliases live only at this layer.
    """

    def __init__(
        self,
        engine: RequestEngine,
        context: ResourceContext | None = None,
        **bindings: Any,
    ) -> None:
        self._engine = engine
        self.context = context if context is not None else ResourceContext()
        self.context.bind(bindings)

    def _call(
        self,
        endpoint: Endpoint,
        args: tuple[Any, ...],
        options: Mapping[str, Any],
        on_each: OnEach | None = None,
    ) -> Any:
        invocation = CallInvocation.from_call(args, options, on_each)
        return self._engine.invoke(endpoint, self.context, invocation)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.context.snapshot()!r})"
