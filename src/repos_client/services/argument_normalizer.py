"""Argument normalizer — turns a loosely-shaped call into a :class:`NormalizedCall`.

Endpoint methods accept ``(*args, on_each=None, **options)``.  The raw shape
is inspected exactly once, in :meth:`CallInvocation.from_call`; everything
downstream works on the canonical result.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Sequence

from repos_client.domain.context import ResourceContext
from repos_client.domain.entities import CallContract, NormalizedCall
from repos_client.domain.exceptions import ClientArgumentError
from repos_client.services.option_filters import assert_required, is_blank, sift

logger = logging.getLogger(__name__)

OnEach = Callable[[Any], Any]


@dataclass(frozen=True, slots=True)
class CallInvocation:
    """A call split into positional identifiers, named options and an observer."""

    args: tuple[Any, ...] = ()
    options: Mapping[str, Any] = field(default_factory=dict)
    on_each: OnEach | None = None

    @classmethod
    def from_call(
        cls,
        args: Sequence[Any] = (),
        options: Mapping[str, Any] | None = None,
        on_each: OnEach | None = None,
    ) -> CallInvocation:
        """Resolve the raw call shape.

        A trailing mapping in *args* is always options, never a positional
        slot.  Keyword *options* win over keys from that trailing mapping.
        """
        positional = list(args)
        merged: dict[str, Any] = {}
        if positional and isinstance(positional[-1], Mapping):
            merged.update(_string_keys(positional.pop()))
        if options is not None:
            if not isinstance(options, Mapping):
                raise ClientArgumentError(
                    f"Options must be a mapping, got {type(options).__name__}"
                )
            merged.update(_string_keys(options))
        if on_each is not None and not callable(on_each):
            raise ClientArgumentError("on_each must be callable")
        return cls(args=tuple(positional), options=merged, on_each=on_each)


def _string_keys(options: Mapping[Any, Any]) -> dict[str, Any]:
    return {str(key): value for key, value in options.items()}


def check_identifier(name: str, value: Any) -> None:
    """Reject anything but a plain string or integer path identifier."""
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise ClientArgumentError(
            f"Argument '{name}' must be a string or integer identifier, "
            f"got {type(value).__name__}"
        )


def normalize(
    contract: CallContract,
    context: ResourceContext,
    invocation: CallInvocation,
) -> NormalizedCall:
    """Reconcile *invocation* against *contract*.

    Each required positional name is taken, in order of preference, from the
    matching positional argument, a same-named option, or *context*.  Options
    are sifted, layered over the contract defaults and checked for required
    keys.  Pure: *context* is read, never written.
    """
    names = contract.required_positional
    if len(invocation.args) > len(names):
        raise ClientArgumentError(
            f"Expected at most {len(names)} positional argument(s) "
            f"({', '.join(names) or 'none'}), got {len(invocation.args)}"
        )

    options = dict(invocation.options)
    resolved: dict[str, Any] = {}
    missing: list[str] = []
    for index, name in enumerate(names):
        value = invocation.args[index] if index < len(invocation.args) else None
        if value is None:
            value = options.pop(name, None)
        else:
            options.pop(name, None)
        if value is None:
            value = context.get(name)
        if is_blank(value):
            missing.append(name)
            continue
        check_identifier(name, value)
        resolved[name] = value

    if missing:
        raise ClientArgumentError(
            f"Missing required argument(s): {', '.join(missing)}",
            missing=missing,
        )

    params = dict(contract.default_options)
    params.update(sift(options, contract.allowed_options))
    assert_required(params, contract.required_options)

    logger.debug("Normalized call: ids=%s params=%s", sorted(resolved), sorted(params))
    return NormalizedCall(positional_values=resolved, params=params)
