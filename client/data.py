"""
Client-side data facade for the catalog API.

CatalogClient wraps the HTTP calls the browsing UI makes and keeps an
in-memory mirror of the last fetched items and pagination, which views read
from.  Nothing is retried; every failure is raised to the caller, which
offers a manual reload.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from utils.config import ClientConfig
from utils.errors import HttpError, NotFoundError, ProtocolError, ValidationError
from utils.http import SessionManager

logger = logging.getLogger(__name__)


def _is_success(response) -> bool:
    return 200 <= response.status_code < 300


def _error_message(response) -> str:
    """Pull ``message`` (or ``detail``) out of an error body.

    An unparseable body gives "Unknown error"; a parseable one without a
    message gives the status line.
    """
    try:
        body = response.json()
    except ValueError:
        return "Unknown error"
    if isinstance(body, dict):
        for key in ("message", "detail"):
            if isinstance(body.get(key), str) and body[key]:
                return body[key]
    return f"HTTP error! status: {response.status_code}"


class CatalogClient:
    """Fetches items from the catalog API and mirrors them locally.

    Attributes:
        items: Items from the last successful ``fetch_items`` plus any
            created since.
        pagination: Pagination metadata from the last fetch, or None when
            the server answered with a bare list.
        is_loading: True while ``fetch_items`` is in flight.

    Usage::

        client = CatalogClient("http://localhost:3001/api")
        client.fetch_items(q="desk")
        for item in client.items:
            ...
    """

    def __init__(
        self,
        base_url: str | None = None,
        session: Any = None,
        timeout: float | None = None,
        fetch_limit: int | None = None,
    ) -> None:
        """Create a client.

        Args:
            base_url: API root, e.g. ``http://localhost:3001/api``
                (default: CATALOG_API_URL).
            session: Object with a requests-style ``request()`` method; a
                pooled ``requests.Session`` is created when omitted.
            timeout: Per-request timeout in seconds (default: CATALOG_TIMEOUT).
            fetch_limit: ``limit`` sent by ``fetch_items`` unless overridden
                (default: CATALOG_FETCH_LIMIT).
        """
        cfg = ClientConfig.from_env()
        self.base_url = (base_url or cfg.api_url).rstrip("/")
        self.timeout = timeout if timeout is not None else cfg.timeout_seconds
        self.fetch_limit = fetch_limit if fetch_limit is not None else cfg.fetch_limit
        self._session_manager = SessionManager() if session is None else None
        self._session = session

        self.items: list[dict] = []
        self.pagination: dict | None = None
        self.is_loading = False

    @property
    def session(self):
        if self._session is not None:
            return self._session
        return self._session_manager.session

    def close(self) -> None:
        if self._session_manager is not None:
            self._session_manager.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    # ── HTTP plumbing ─────────────────────────────────────────────────────────

    def _request(self, method: str, path: str, **kwargs):
        url = f"{self.base_url}{path}"
        try:
            return self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as exc:
            raise HttpError(f"Request to {url} failed: {exc}") from exc

    @staticmethod
    def _json(response) -> Any:
        try:
            return response.json()
        except ValueError as exc:
            raise ProtocolError("Response body is not valid JSON") from exc

    # ── Public API ────────────────────────────────────────────────────────────

    def fetch_items(self, **params: Any) -> list[dict]:
        """Fetch a page of items and replace the local mirror with it.

        Keyword arguments are sent as query parameters (``q``, ``page``,
        ``limit``) on top of the defaults ``limit=<fetch_limit>, page=1``.
        A value of None leaves the default in place.

        Raises:
            HttpError: network failure or non-success status.
            ProtocolError: the body is neither ``{items, pagination}`` nor a
                bare list.
        """
        query = {
            "limit": self.fetch_limit,
            "page": 1,
            **{k: v for k, v in params.items() if v is not None},
        }
        self.is_loading = True
        try:
            response = self._request("GET", "/items", params=query)
            if not _is_success(response):
                raise HttpError(
                    f"HTTP error! status: {response.status_code}",
                    status=response.status_code,
                )
            data = self._json(response)
            if isinstance(data, dict) and "items" in data and "pagination" in data:
                self.items = list(data["items"])
                self.pagination = data["pagination"]
            elif isinstance(data, list):
                # Older servers answer with the bare array
                self.items = list(data)
                self.pagination = None
            else:
                raise ProtocolError("Unexpected API response format")
        except (HttpError, ProtocolError) as exc:
            logger.error("Error fetching items: %s", exc.message)
            raise
        finally:
            self.is_loading = False
        return self.items

    def fetch_item_by_id(self, item_id: int | str) -> dict:
        """Fetch a single item.

        Raises:
            NotFoundError: the server answered 404.
            HttpError: any other non-success status or a network failure.
        """
        response = self._request("GET", f"/items/{item_id}")
        if not _is_success(response):
            if response.status_code == 404:
                raise NotFoundError("Item not found")
            raise HttpError(
                f"HTTP error! status: {response.status_code}",
                status=response.status_code,
            )
        return self._json(response)

    def create_item(self, candidate: dict[str, Any]) -> dict:
        """Create an item and append the server's record to ``items``.

        Raises:
            ValidationError: the server rejected the payload (400).
            HttpError: any other non-success status or a network failure.
        """
        response = self._request("POST", "/items", json=candidate)
        if not _is_success(response):
            message = _error_message(response)
            if response.status_code == 400:
                raise ValidationError(message)
            raise HttpError(message, status=response.status_code)
        item = self._json(response)
        self.items = [*self.items, item]
        return item

    def fetch_stats(self) -> dict:
        """Fetch the aggregate stats snapshot.

        Raises:
            HttpError: network failure or non-success status.
        """
        response = self._request("GET", "/stats")
        if not _is_success(response):
            raise HttpError(
                _error_message(response),
                status=response.status_code,
            )
        return self._json(response)
