"""Pytest configuration and fixtures."""

import threading
from typing import Any, Mapping

import pytest

from orders_ui.models.customer import Customer, parse_customer
from orders_ui.models.sale import Sale, parse_sale
from orders_ui.services.list_service import ListPage, ListService, Resource


def make_sale(sale_id: int, total: float, **fields: Any) -> Sale:
    """Build a sale from a minimal camelCase payload."""
    payload = {
        "id": sale_id,
        "orderNumber": f"ORD-{sale_id:04d}",
        "customerName": "Walk In",
        "total": total,
        "paymentMethod": "cash",
        "status": "completed",
        "createdBy": "admin",
        "date": "2024-01-02",
    }
    payload.update(fields)
    return parse_sale(payload)


def make_customer(customer_id: int, balance: float, **fields: Any) -> Customer:
    payload = {
        "id": customer_id,
        "name": f"Customer {customer_id}",
        "phone": f"0300-000{customer_id:04d}",
        "email": f"customer{customer_id}@example.com",
        "type": "retail",
        "status": "active",
        "currentBalance": balance,
    }
    payload.update(fields)
    return parse_customer(payload)


class FakeListService(ListService):
    """
    In-memory list service that records every call.

    ``gates`` maps a page number to a threading.Event the call waits on,
    which lets a test hold one request open while another completes.
    ``errors`` maps a page number to the exception raised for it; ``error``
    applies to every page.
    """

    def __init__(self, records=(), *, total_pages=None, summary=None):
        self.records = list(records)
        self.total_pages = total_pages
        self.summary = summary
        self.error: Exception | None = None
        self.errors: dict[int, Exception] = {}
        self.gates: dict[int, threading.Event] = {}
        self.calls: list[dict[str, Any]] = []

    def list_records(
        self,
        resource: Resource,
        filters: Mapping[str, Any] | None = None,
        page: int = 1,
        limit: int = 20,
    ) -> ListPage:
        self.calls.append(
            {
                "resource": resource.name,
                "filters": dict(filters or {}),
                "page": page,
                "limit": limit,
            }
        )
        gate = self.gates.get(page)
        if gate is not None:
            gate.wait(timeout=5)
        error = self.errors.get(page) or self.error
        if error is not None:
            raise error
        start = (page - 1) * limit
        return ListPage(
            items=self.records[start : start + limit],
            total_pages=self.total_pages,
            summary=self.summary,
        )


@pytest.fixture
def sales():
    """Five sales worth 10..50; the odd ones belong to the same customer."""
    return [
        make_sale(1, 10, customerName="Match Traders"),
        make_sale(2, 20, customerName="Other Shop"),
        make_sale(3, 30, customerName="Match Traders"),
        make_sale(4, 40, customerName="Other Shop"),
        make_sale(5, 50, customerName="Match Traders"),
    ]


@pytest.fixture
def service(sales):
    return FakeListService(sales)
