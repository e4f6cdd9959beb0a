"""Request engine — the single entry point every endpoint method delegates to.

Pipeline per call::

    CallInvocation ─► normalize ─► bind ids into context ─► dispatch ─► map_response

Argument errors are raised from :func:`normalize`, before the dispatcher is
touched, so an invalid call never produces a partial request.
"""

from __future__ import annotations

import logging
from typing import Any

from repos_client.domain.context import ResourceContext
from repos_client.domain.entities import (
    CallContract,
    Endpoint,
    NormalizedCall,
    ResultShape,
)
from repos_client.domain.ports.transport import Transport
from repos_client.services.argument_normalizer import CallInvocation, OnEach, normalize
from repos_client.services.dispatcher import RequestDispatcher
from repos_client.services.response_mapper import map_response

logger = logging.getLogger(__name__)


class RequestEngine:
    """Normalizes, dispatches and maps calls against one transport.

    Parameters
    ----------
    transport:
        Adapter implementing ``perform_request``.
    """

    def __init__(self, transport: Transport) -> None:
        self._dispatcher = RequestDispatcher(transport)

    # ── Public entry points ─────────────────────────────────────────────

    def invoke(
        self,
        endpoint: Endpoint,
        context: ResourceContext,
        invocation: CallInvocation,
    ) -> Any:
        """Run one declared endpoint end to end."""
        call = self.prepare(endpoint.contract, context, invocation)
        return self.execute(endpoint, call, context, invocation.on_each)

    def prepare(
        self,
        contract: CallContract,
        context: ResourceContext,
        invocation: CallInvocation,
    ) -> NormalizedCall:
        """Normalize *invocation* and remember its identifiers on *context*."""
        call = normalize(contract, context, invocation)
        context.bind(call.positional_values)
        return call

    def execute(
        self,
        endpoint: Endpoint,
        call: NormalizedCall,
        context: ResourceContext | None = None,
        on_each: OnEach | None = None,
    ) -> Any:
        """Dispatch an already-normalized call and map its response."""
        raw = self._dispatcher.dispatch(endpoint.verb, endpoint.path, call, context)
        result = map_response(raw, endpoint.shape, on_each)
        if endpoint.shape is ResultShape.LIST and isinstance(result, list):
            logger.debug("%s %s returned %d item(s)", endpoint.verb.value, endpoint.path, len(result))
        return result
