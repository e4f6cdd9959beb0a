"""Response mapper — raw transport result to resource value(s)."""

from __future__ import annotations

from typing import Any

from repos_client.domain.entities import RawResponse, Resource, ResultShape, wrap
from repos_client.services.argument_normalizer import OnEach
from repos_client.services.error_translator import translate


def is_empty_body(body: Any) -> bool:
    return body is None or (isinstance(body, (str, bytes)) and not body.strip())


def map_response(
    raw: RawResponse,
    shape: ResultShape = ResultShape.SINGLE,
    on_each: OnEach | None = None,
) -> Resource | list[Any] | Any:
    """Raise the translated error, or return the wrapped body.

    *on_each* observes each element of an array body in order (or a single
    object body once); its return value is ignored and the full result is
    returned either way.
    """
    error = translate(raw.status, raw.body)
    if error is not None:
        raise error

    if is_empty_body(raw.body):
        return [] if shape is ResultShape.LIST else None

    value = wrap(raw.body)
    if on_each is not None:
        for item in value if isinstance(value, list) else [value]:
            on_each(item)
    return value
