"""
HTTP implementation of ListService for the remote list API.

Every resource is served by ``GET {base_url}/{resource.name}`` with filter,
``page`` and ``limit`` query parameters. The response envelope is

    {"success": true,
     "data": {"<items_key>": [...],
              "pagination": {"totalPages": N},
              "summary": {...}}}

or ``{"success": false, "message": "..."}`` on failure. Nested access uses
benedict keylists so missing blocks default cleanly instead of raising.
Keypath parsing is disabled: record payloads may carry dotted keys.
"""

from typing import Any, Mapping

import requests
from benedict import benedict

from orders_ui import config
from orders_ui.lib import clients, logs
from orders_ui.models.common import Summary
from orders_ui.services.errors import NetworkFailure, ServiceFailure
from orders_ui.services.list_service import ListPage, ListService, R, Resource
from orders_ui.utils import to_float, to_int

LOG = logs.logger(__file__)


class HttpListService(ListService):
    """
    List service backed by the remote HTTP API.

    Attributes:
        base_url: API root, e.g. ``http://localhost:3001/api``.
        timeout: Per-request transport timeout in seconds.
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = (base_url or config.api_url()).rstrip("/")
        self.timeout = timeout if timeout is not None else config.request_timeout()
        self._session = session

    @property
    def session(self) -> requests.Session:
        return self._session or clients.http_session()

    def list_records(
        self,
        resource: Resource[R],
        filters: Mapping[str, Any] | None = None,
        page: int = 1,
        limit: int = 20,
    ) -> ListPage[R]:
        """
        Fetch one page of a resource.

        Raises:
            NetworkFailure: On transport errors or non-2xx responses.
            ServiceFailure: When the body reports failure or is not JSON.
        """
        url = f"{self.base_url}/{resource.name}"
        params = {**(filters or {}), "page": max(page, 1), "limit": max(limit, 1)}
        LOG.info("GET %s params:%s", url, params)

        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
        except requests.RequestException as exc:
            LOG.warning("Request to %s failed: %s", url, exc)
            raise NetworkFailure(f"Failed to load {resource.label}: {exc}") from exc

        body = _json_body(response)
        if not response.ok:
            message = _message(body) or f"HTTP {response.status_code}"
            raise NetworkFailure(message, status_code=response.status_code)
        if body is None:
            raise ServiceFailure(f"Failed to load {resource.label}: invalid response")
        return parse_list_response(resource, body)


def parse_list_response(resource: Resource[R], body: Mapping[str, Any]) -> ListPage[R]:
    """
    Convert a decoded response envelope into a ListPage.

    Args:
        resource: Resource the response belongs to.
        body: Decoded JSON object.

    Raises:
        ServiceFailure: If the envelope reports failure or cannot be read.
    """
    try:
        b = benedict(dict(body), keypath_separator=None)
    except ValueError as exc:
        raise ServiceFailure(f"Failed to load {resource.label}: {exc}") from exc

    if not b.get("success", False):
        raise ServiceFailure(_message(body) or f"Failed to load {resource.label}")

    raw_items = b.get(["data", resource.items_key]) or []
    if not isinstance(raw_items, list):
        LOG.warning("Ignoring non-list %s payload: %r", resource.items_key, raw_items)
        raw_items = []
    items = [resource.parse(item) for item in raw_items if isinstance(item, Mapping)]

    total_pages = b.get(["data", "pagination", "totalPages"])
    summary = b.get(["data", "summary"])
    return ListPage(
        items=items,
        total_pages=to_int(total_pages) or None,
        summary=_summary(resource, summary) if isinstance(summary, Mapping) else None,
    )


def _summary(resource: Resource, payload: Mapping[str, Any]) -> Summary:
    keys = resource.summary_keys
    return Summary(
        total_value=to_float(payload.get(keys.total_value)),
        total_count=to_int(payload.get(keys.total_count)),
        average_value=to_float(payload.get(keys.average_value)),
    )


def _json_body(response: requests.Response) -> dict | None:
    try:
        body = response.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None


def _message(body: Mapping[str, Any] | None) -> str | None:
    if not body:
        return None
    message = body.get("message")
    return str(message) if message else None
