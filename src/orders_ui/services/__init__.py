"""
Service factory for the Orders UI.

This module provides the get_list_service() factory function that returns
the appropriate ListService implementation based on configuration.

Available Implementations:
- demo: In-memory service with generated sales and customers (no backend required)
- http: Client for the remote list API at ORDERS_UI_API_URL

The service is cached at the module level, so the same instance is reused
across all sessions. Configure via the ORDERS_UI_SERVICE environment variable.
"""

from functools import cache
from typing import Callable, Dict

from orders_ui import config
from orders_ui.lib import logs
from orders_ui.services.errors import ListServiceError, NetworkFailure, ServiceFailure
from orders_ui.services.list_service import (
    CUSTOMERS,
    SALES,
    ListPage,
    ListService,
    Resource,
    SummaryKeys,
)
from orders_ui.services.list_service_demo import DemoListService
from orders_ui.services.list_service_http import HttpListService

LOG = logs.logger(__file__)

_SERVICE_REGISTRY: Dict[str, Callable[[], ListService]] = {
    "demo": lambda: DemoListService(),
    "http": lambda: HttpListService(),
}


@cache
def get_list_service(kind: str | None = None) -> ListService:
    """Return the configured list service implementation."""
    resolved_kind = (kind or config.service_kind()).lower()
    LOG.info("get_list_service - kind:%s resolved_kind:%s", kind, resolved_kind)
    try:
        factory = _SERVICE_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown list service kind: {resolved_kind}"
        raise ValueError(msg) from exc
    return factory()


__all__ = [
    "CUSTOMERS",
    "SALES",
    "DemoListService",
    "HttpListService",
    "ListPage",
    "ListService",
    "ListServiceError",
    "NetworkFailure",
    "Resource",
    "ServiceFailure",
    "SummaryKeys",
    "get_list_service",
]
