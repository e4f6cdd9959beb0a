"""Option sifting and required-field checks.

Sifting is deliberately lenient: unknown keys are dropped, never rejected,
so callers written against a newer API surface keep working.  Required-field
checking is strict and reports every missing name at once.
"""

from __future__ import annotations

import logging
from typing import Any, Collection, Mapping

from repos_client.domain.exceptions import ClientArgumentError

logger = logging.getLogger(__name__)


def sift(options: Mapping[str, Any], allowed: Collection[str]) -> dict[str, Any]:
    """Return a copy of *options* restricted to *allowed* keys."""
    kept = {key: value for key, value in options.items() if key in allowed}
    dropped = len(options) - len(kept)
    if dropped:
        logger.debug(
            "Dropped %d unrecognised option(s): %s",
            dropped,
            sorted(str(k) for k in options if k not in allowed),
        )
    return kept


def is_blank(value: Any) -> bool:
    """``None`` and empty strings/containers count as absent; ``0``/``False`` do not."""
    if value is None:
        return True
    if isinstance(value, (str, bytes, list, tuple, dict, set, frozenset)):
        return len(value) == 0
    return False


def assert_required(present: Mapping[str, Any], required: Collection[str]) -> None:
    """Raise :class:`ClientArgumentError` naming every blank required key."""
    missing = sorted(name for name in required if is_blank(present.get(name)))
    if missing:
        raise ClientArgumentError(
            f"Missing required option(s): {', '.join(missing)}",
            missing=missing,
        )
