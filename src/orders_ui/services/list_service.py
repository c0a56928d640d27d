"""
Abstract base class defining the remote list API contract.

All list service implementations must extend ListService and provide
list_records(). A Resource describes which entity is being listed and how
its payload is shaped, so one service instance serves every page.

Implementations:
- DemoListService: Static in-memory data for development/testing
- HttpListService: HTTP client for the remote list API
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Mapping, Sequence, TypeVar

from orders_ui.models.common import Summary
from orders_ui.models.customer import parse_customer
from orders_ui.models.sale import parse_sale

R = TypeVar("R")


@dataclass(frozen=True, slots=True)
class SummaryKeys:
    """Names of the summary fields in a list response."""

    total_value: str = "totalValue"
    total_count: str = "totalCount"
    average_value: str = "averageValue"


@dataclass(frozen=True, slots=True)
class Resource(Generic[R]):
    """
    Describes one listable entity of the remote API.

    Attributes:
        name: Endpoint path segment, e.g. ``sales``.
        items_key: Key under ``data`` that holds the record array.
        parse: Converts one raw item into a record.
        summary_keys: Field names of the server summary block.
        label: Plural noun used in notifications and empty states.
    """

    name: str
    parse: Callable[[Mapping[str, Any]], R]
    items_key: str = "items"
    summary_keys: SummaryKeys = field(default_factory=SummaryKeys)
    label: str = "records"


@dataclass(slots=True)
class ListPage(Generic[R]):
    """
    One response of the list API.

    Attributes:
        items: Parsed records of the requested page.
        total_pages: Server page count, or None when the response omits it.
        summary: Server summary over the whole filtered scope, or None.
    """

    items: Sequence[R]
    total_pages: int | None = None
    summary: Summary | None = None


SALES: Resource = Resource(
    name="sales",
    parse=parse_sale,
    items_key="sales",
    summary_keys=SummaryKeys(
        total_value="totalSales",
        total_count="totalOrders",
        average_value="avgOrderValue",
    ),
    label="orders",
)

CUSTOMERS: Resource = Resource(
    name="customers",
    parse=parse_customer,
    items_key="customers",
    label="customers",
)


class ListService(ABC):
    """
    Abstract base class for list API access.

    Implementations raise NetworkFailure or ServiceFailure on failure and
    never return partial results.
    """

    @abstractmethod
    def list_records(
        self,
        resource: Resource[R],
        filters: Mapping[str, Any] | None = None,
        page: int = 1,
        limit: int = 20,
    ) -> ListPage[R]:
        """
        Return one page of records for the resource.

        Args:
            resource: The entity to list.
            filters: Request filter parameters (camelCase API names).
            page: Page number (1-indexed).
            limit: Page size.
        """
