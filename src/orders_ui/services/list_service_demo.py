"""
Demo implementation of ListService using static in-memory data.

This service is useful for:
- Local development without a running backend
- Testing UI components with realistic data
- Demonstrating both pagination modes of the browser

It applies the same filters as the live endpoint, pages the result, and
returns a server summary computed over the whole filtered scope.
"""

import math
from typing import Any, Mapping, Sequence

from orders_ui.data.demo_records import DEMO_CUSTOMERS, DEMO_SALES
from orders_ui.lib import logs
from orders_ui.models.common import Summary
from orders_ui.services.list_service import ListPage, ListService, R, Resource

LOG = logs.logger(__file__)

# Request parameter -> payload field for exact-match filters
_EXACT_FILTERS = {
    "status": "status",
    "paymentMethod": "paymentMethod",
    "customerId": "customerId",
}


class DemoListService(ListService):
    """
    In-memory list service backed by static demo payloads.

    Attributes:
        datasets: Raw payloads per resource name.
    """

    def __init__(self, datasets: Mapping[str, Sequence[Mapping[str, Any]]] | None = None) -> None:
        """
        Initialize with payload data.

        Args:
            datasets: Custom payloads keyed by resource name, or None to use
                the generated demo sales and customers.
        """
        if datasets is None:
            datasets = {"sales": DEMO_SALES, "customers": DEMO_CUSTOMERS}
        self.datasets = datasets

    def list_records(
        self,
        resource: Resource[R],
        filters: Mapping[str, Any] | None = None,
        page: int = 1,
        limit: int = 20,
    ) -> ListPage[R]:
        """
        Return a paginated slice of the records matching the filters.

        Args:
            resource: Resource to list; its name selects the dataset.
            filters: Optional request filters.
            page: Page number (1-indexed).
            limit: Number of items per page.

        Returns:
            ListPage with the page items, page count and scope summary.
        """
        page, limit = max(page, 1), max(limit, 1)
        payloads = [
            payload
            for payload in self.datasets.get(resource.name, [])
            if _matches_filters(payload, filters or {})
        ]
        records = [resource.parse(payload) for payload in payloads]
        start = (page - 1) * limit
        LOG.debug(
            "Demo %s filters:%s page:%s limit:%s matched:%s",
            resource.name,
            filters,
            page,
            limit,
            len(records),
        )
        return ListPage(
            items=records[start : start + limit],
            total_pages=max(1, math.ceil(len(records) / limit)),
            summary=_server_summary(records),
        )


def _matches_filters(payload: Mapping[str, Any], filters: Mapping[str, Any]) -> bool:
    """Apply the live endpoint's filter semantics to one payload."""
    for param, field_name in _EXACT_FILTERS.items():
        expected = filters.get(param)
        if expected is not None and payload.get(field_name) != expected:
            return False
    day = str(payload.get("date") or "")[:10]
    if filters.get("dateFrom") and day < filters["dateFrom"]:
        return False
    if filters.get("dateTo") and day > filters["dateTo"]:
        return False
    return True


def _server_summary(records: Sequence[Any]) -> Summary:
    total_value = sum(record.value for record in records)
    count = len(records)
    return Summary(
        total_value=total_value,
        total_count=count,
        average_value=total_value / count if count else 0.0,
    )
