"""GitHub REST transport — implements the Transport port on top of httpx."""

from __future__ import annotations

import logging
from typing import Any, Mapping

import httpx

from repos_client.domain.entities import HttpVerb, RawResponse

logger = logging.getLogger(__name__)

_GITHUB_API = "https://api.github.com"


class HttpxTransport:
    """Concrete Transport backed by a synchronous :class:`httpx.Client`.

    Query string for GET/DELETE, JSON body for POST/PATCH/PUT.  One attempt
    per call; ``httpx.HTTPError`` propagates to the caller unchanged.
    """

    def __init__(
        self,
        client: httpx.Client,
        endpoint: str = _GITHUB_API,
        token: str | None = None,
        user_agent: str = "repos-client/1.0",
    ) -> None:
        self._client = client
        self._endpoint = endpoint.rstrip("/")
        self._headers: dict[str, str] = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": user_agent,
        }
        if token:
            self._headers["Authorization"] = f"Bearer {token}"

    def perform_request(
        self, verb: HttpVerb, path: str, params: Mapping[str, Any]
    ) -> RawResponse:
        """Send one request and decode the body (``None`` when empty)."""
        url = f"{self._endpoint}/{path.lstrip('/')}"
        if verb.sends_body:
            resp = self._client.request(
                verb.value, url, headers=self._headers, json=dict(params)
            )
        else:
            resp = self._client.request(
                verb.value, url, headers=self._headers, params=dict(params) or None
            )
        logger.debug("%s %s -> HTTP %d", verb.value, url, resp.status_code)
        return RawResponse(status=resp.status_code, body=_decode_body(resp))


def _decode_body(resp: httpx.Response) -> Any:
    if not resp.content.strip():
        return None
    try:
        return resp.json()
    except ValueError:
        logger.debug("Non-JSON body (%s) — returning text", resp.headers.get("content-type"))
        return resp.text
