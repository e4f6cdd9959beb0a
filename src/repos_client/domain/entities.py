"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from repos_client.domain.exceptions import InvalidContractError


class HttpVerb(str, Enum):
    """HTTP verbs the dispatcher knows how to issue."""

    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    PUT = "PUT"
    DELETE = "DELETE"

    @property
    def sends_body(self) -> bool:
        """True when params travel in the request body rather than the query."""
        return self in (HttpVerb.POST, HttpVerb.PATCH, HttpVerb.PUT)


class ResultShape(str, Enum):
    """Declared return shape of an endpoint, used to map empty bodies."""

    SINGLE = "single"
    LIST = "list"


@dataclass(frozen=True, slots=True)
class CallContract:
    """Per-endpoint declaration of what a call may and must carry.

    Validated on construction, so a broken contract fails at import time of
    the module that declares it rather than on first use.
    """

    required_positional: tuple[str, ...] = ()
    allowed_options: frozenset[str] = frozenset()
    required_options: frozenset[str] = frozenset()
    default_options: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "required_positional", tuple(self.required_positional))
        object.__setattr__(self, "allowed_options", frozenset(self.allowed_options))
        object.__setattr__(self, "required_options", frozenset(self.required_options))
        object.__setattr__(
            self, "default_options", MappingProxyType(dict(self.default_options))
        )

        if len(set(self.required_positional)) != len(self.required_positional):
            raise InvalidContractError(
                f"Duplicate positional names in {self.required_positional!r}"
            )
        _require_subset("required_options", self.required_options, self.allowed_options)
        _require_subset("default_options", self.default_options, self.allowed_options)

        overlap = set(self.required_positional) & self.allowed_options
        if overlap:
            raise InvalidContractError(
                f"Names declared both positional and as options: {sorted(overlap)}"
            )

    @property
    def accepted_names(self) -> frozenset[str]:
        """Every key a normalized call built from this contract may carry."""
        return self.allowed_options | frozenset(self.required_positional)


def _require_subset(label: str, names: Iterable[str], allowed: frozenset[str]) -> None:
    extra = set(names) - allowed
    if extra:
        raise InvalidContractError(
            f"{label} not in allowed_options: {sorted(extra)}"
        )


@dataclass(frozen=True, slots=True, eq=False)
class NormalizedCall:
    """Canonical, validated parameter set for one invocation.

    Compared by content; not hashable.
    """

    positional_values: Mapping[str, Any] = field(default_factory=dict)
    params: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "positional_values", MappingProxyType(dict(self.positional_values))
        )
        object.__setattr__(self, "params", MappingProxyType(dict(self.params)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NormalizedCall):
            return NotImplemented
        return dict(self.positional_values) == dict(other.positional_values) and dict(
            self.params
        ) == dict(other.params)

    __hash__ = None  # type: ignore[assignment]


@dataclass(frozen=True, slots=True)
class RawResponse:
    """What the transport hands back: status plus decoded JSON (or ``None``)."""

    status: int
    body: Any = None


@dataclass(frozen=True, slots=True)
class Endpoint:
    """One declared operation: verb, path template, contract and result shape."""

    verb: HttpVerb
    path: str
    contract: CallContract = field(default_factory=CallContract)
    shape: ResultShape = ResultShape.SINGLE


class Resource(dict):
    """A JSON object with attribute access.

    Nested objects and arrays are wrapped on construction.  Unknown public
    attributes read as ``None`` so callers can check optional fields.  Fields
    named like a dict method (``items``, ``keys``, ``get``, ...) resolve to the
    method; read those by subscript: ``resource["items"]``.
    """

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        for key in list(self):
            super().__setitem__(key, wrap(super().__getitem__(key)))

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        return self.get(name)

    def __setattr__(self, name: str, value: Any) -> None:
        self[name] = value

    def __setitem__(self, key: Any, value: Any) -> None:
        super().__setitem__(key, wrap(value))


def wrap(value: Any) -> Any:
    """Wrap decoded JSON so every object inside it is a :class:`Resource`."""
    if isinstance(value, Resource):
        return value
    if isinstance(value, Mapping):
        return Resource(value)
    if isinstance(value, list):
        return [wrap(item) for item in value]
    return value
