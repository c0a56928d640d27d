"""
Sales order domain models and parsing helpers.

This module defines the sale structures that mirror the JSON returned by
the ``sales`` list endpoint. The hierarchy is:

    Sale
    ├── identity (id, order number, status, payment method)
    ├── customer (id, name)
    ├── SaleItem[] (product, quantity, unit price, line total)
    └── amounts (subtotal, discount, tax, total)

Parsing is lenient: missing or malformed fields degrade to empty strings,
zeros, or None so one bad record never breaks a page.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from orders_ui.utils import to_float, to_int, to_text


@dataclass(frozen=True, slots=True)
class SaleItem:
    """Represents one product line on a sale."""

    product_id: int
    product_name: str
    quantity: int
    unit_price: float
    total: float


@dataclass(frozen=True, slots=True)
class Sale:
    """Primary dataclass for sales orders."""

    id: int
    order_number: str
    customer_id: int | None
    customer_name: str
    date: str
    time: str
    items: Sequence[SaleItem]
    subtotal: float
    discount: float
    tax: float
    total: float
    payment_method: str
    status: str
    created_by: str
    created_at: str

    @property
    def value(self) -> float:
        """The amount summaries aggregate for a sale."""
        return self.total

    @property
    def item_count(self) -> int:
        """Total quantity across all line items."""
        return sum(item.quantity for item in self.items)

    def searchable_terms(self) -> list[str]:
        """Return the terms that should be matched when filtering."""
        terms = [
            self.order_number,
            self.customer_name,
            self.created_by,
            self.payment_method,
        ]
        return [value.lower() for value in terms if value]


def parse_sale_item(payload: Mapping[str, Any]) -> SaleItem:
    """Parse one entry of a sale's ``items`` array."""
    return SaleItem(
        product_id=to_int(payload.get("productId")),
        product_name=to_text(payload.get("productName")),
        quantity=to_int(payload.get("quantity")),
        unit_price=to_float(payload.get("unitPrice")),
        total=to_float(payload.get("total")),
    )


def parse_sale(payload: Mapping[str, Any]) -> Sale:
    """
    Parse a camelCase sale payload into a Sale dataclass.

    Args:
        payload: One element of the ``sales`` array.

    Returns:
        Fully populated Sale with defaults for anything missing.
    """
    customer_id = payload.get("customerId")
    raw_items = payload.get("items") or []
    return Sale(
        id=to_int(payload.get("id")),
        order_number=to_text(payload.get("orderNumber")),
        customer_id=to_int(customer_id) if customer_id is not None else None,
        customer_name=to_text(payload.get("customerName")),
        date=to_text(payload.get("date")),
        time=to_text(payload.get("time")),
        items=tuple(
            parse_sale_item(item) for item in raw_items if isinstance(item, Mapping)
        ),
        subtotal=to_float(payload.get("subtotal")),
        discount=to_float(payload.get("discount")),
        tax=to_float(payload.get("tax")),
        total=to_float(payload.get("total")),
        payment_method=to_text(payload.get("paymentMethod")),
        status=to_text(payload.get("status")),
        created_by=to_text(payload.get("createdBy")),
        created_at=to_text(payload.get("createdAt")),
    )
