"""HTTP store client for the viewer REST API."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote, urlparse

import httpx

from constants import DEFAULT_REQUEST_TIMEOUT, LABELS_API_PATH
from model import LabelContent
from store.errors import AlreadyExists, NotFound, RemoteUnavailable, StoreError

log = logging.getLogger(__name__)


def build_base_url(address: str) -> str:
    """Normalize a server address, defaulting the scheme to http."""
    trimmed = address.strip().rstrip("/")
    if not trimmed:
        return ""
    parsed = urlparse(trimmed)
    if parsed.scheme:
        return trimmed
    return f"http://{trimmed}"


def label_path(name: str) -> str:
    """API path for a single label; the name is encoded as one path segment."""
    return f"{LABELS_API_PATH}/{quote(name, safe='')}"


def _error_detail(response: httpx.Response) -> str:
    """Extract the server's error message, falling back to the status line."""
    try:
        payload = response.json()
    except ValueError:
        payload = None
    if isinstance(payload, dict) and isinstance(payload.get("error"), str):
        return payload["error"]
    return f"HTTP {response.status_code}: {response.reason_phrase}"


class HttpStoreClient:
    """StoreClient backed by httpx.AsyncClient.

    Status mapping: 404 is NotFound, 409 is AlreadyExists, anything else
    outside 2xx (and every transport error) is RemoteUnavailable.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = build_base_url(base_url)
        if not self.base_url:
            raise ValueError("store base URL is empty")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            headers={"Accept": "application/json"},
            transport=transport,
        )

    async def _request(
        self,
        method: str,
        path: str,
        *,
        body: dict[str, Any] | None = None,
    ) -> httpx.Response:
        log.debug(f"{method} {path}")
        try:
            response = await self._client.request(method, path, json=body)
        except httpx.HTTPError as e:
            raise RemoteUnavailable(f"{method} {path} failed: {e}") from e

        if response.is_success:
            return response
        detail = _error_detail(response)
        if response.status_code == 404:
            raise NotFound(detail)
        if response.status_code == 409:
            raise AlreadyExists(detail)
        raise RemoteUnavailable(detail)

    @staticmethod
    def _json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise RemoteUnavailable(f"Malformed response: {e}") from e

    async def list_labels(self) -> list[str]:
        response = await self._request("GET", LABELS_API_PATH)
        payload = self._json(response)
        if not isinstance(payload, list) or not all(isinstance(n, str) for n in payload):
            raise RemoteUnavailable("Label listing is not a list of names")
        return payload

    async def fetch_label(self, name: str) -> LabelContent:
        response = await self._request("GET", label_path(name))
        payload = self._json(response)
        if not isinstance(payload, dict):
            raise RemoteUnavailable(f"Unexpected response for label: {name}")
        try:
            return LabelContent.from_payload(payload)
        except ValueError as e:
            raise RemoteUnavailable(f"Malformed label {name}: {e}") from e

    async def create_label(self, name: str, initial_text: str = "") -> None:
        await self._request(
            "POST", LABELS_API_PATH, body={"name": name, "content": initial_text}
        )

    async def write_label(self, name: str, text: str) -> None:
        await self._request("PUT", label_path(name), body={"content": text})

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> HttpStoreClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


__all__ = ["HttpStoreClient", "build_base_url", "label_path"]
