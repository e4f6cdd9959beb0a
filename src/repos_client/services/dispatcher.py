"""Request dispatcher — expands the path template and makes one transport call."""

from __future__ import annotations

import logging
from string import Formatter
from typing import Any, Mapping
from urllib.parse import quote

from repos_client.domain.context import ResourceContext
from repos_client.domain.entities import HttpVerb, NormalizedCall, RawResponse
from repos_client.domain.exceptions import ClientArgumentError
from repos_client.domain.ports.transport import Transport

logger = logging.getLogger(__name__)

_FORMATTER = Formatter()


def template_fields(template: str) -> list[str]:
    """Names of the ``{placeholders}`` in *template*, in order."""
    return [name for _, name, _, _ in _FORMATTER.parse(template) if name]


def expand_path(
    template: str,
    values: Mapping[str, Any],
    context: ResourceContext | None = None,
) -> str:
    """Fill *template* from *values*, falling back to *context*.

    Each identifier is percent-encoded as a single path segment, except
    placeholders written ``{name:path}``, which keep their ``/`` separators.
    """
    pieces: list[str] = []
    missing: list[str] = []
    for literal, name, spec, _ in _FORMATTER.parse(template):
        pieces.append(literal)
        if not name:
            continue
        value = values.get(name)
        if value is None and context is not None:
            value = context.get(name)
        if value is None:
            missing.append(name)
            continue
        if spec == "path":
            pieces.append(quote(str(value).strip("/"), safe="/"))
        else:
            pieces.append(quote(str(value), safe=""))
    if missing:
        raise ClientArgumentError(
            f"Cannot build path {template!r}: missing {', '.join(missing)}",
            missing=missing,
        )
    path = "".join(pieces)
    return path if path.startswith("/") else f"/{path}"


class RequestDispatcher:
    """Issues a single attempt through the injected :class:`Transport`."""

    def __init__(self, transport: Transport) -> None:
        self._transport = transport

    def dispatch(
        self,
        verb: HttpVerb,
        path_template: str,
        call: NormalizedCall,
        context: ResourceContext | None = None,
    ) -> RawResponse:
        path = expand_path(path_template, call.positional_values, context)
        logger.debug("%s %s params=%s", verb.value, path, sorted(call.params))
        return self._transport.perform_request(verb, path, dict(call.params))
