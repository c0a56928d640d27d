"""
Reflex-compatible view models for the Orders UI.

These are plain dataclasses with defaults on every field so they can be
used as state vars with rx.foreach. Display strings are formatted here in
Python, since currency formatting cannot run on frontend vars.
"""

from dataclasses import dataclass, field

from orders_ui.models.common import Summary
from orders_ui.models.customer import Customer
from orders_ui.models.sale import Sale, SaleItem
from orders_ui.utils import format_currency


@dataclass
class SaleItemModel:
    """Product line on a sale."""

    product_name: str = ""
    quantity: int = 0
    unit_price: str = ""
    total: str = ""


@dataclass
class SaleModel:
    """Sales order row."""

    id: int = 0
    order_number: str = ""
    customer_name: str = ""
    date: str = ""
    time: str = ""
    item_count: int = 0
    items: list[SaleItemModel] = field(default_factory=list)
    total: str = ""
    payment_method: str = ""
    status: str = ""
    created_by: str = ""


@dataclass
class SummaryModel:
    """Formatted summary figures."""

    total_value: str = ""
    total_count: int = 0
    average_value: str = ""


@dataclass
class CustomerModel:
    """Customer with credit; the id is a string to match select values."""

    id: str = ""
    name: str = ""
    phone: str = ""
    email: str = ""
    type: str = ""
    current_balance: str = ""


def to_sale_item_model(item: SaleItem, currency: str) -> SaleItemModel:
    return SaleItemModel(
        product_name=item.product_name,
        quantity=item.quantity,
        unit_price=format_currency(item.unit_price, currency),
        total=format_currency(item.total, currency),
    )


def to_sale_model(sale: Sale, currency: str) -> SaleModel:
    """
    Convert a Sale record into its display model.

    Args:
        sale: Parsed sale record.
        currency: Currency code used for amounts.
    """
    return SaleModel(
        id=sale.id,
        order_number=sale.order_number,
        customer_name=sale.customer_name or "Walk-in Customer",
        date=sale.date,
        time=sale.time,
        item_count=sale.item_count,
        items=[to_sale_item_model(item, currency) for item in sale.items],
        total=format_currency(sale.total, currency),
        payment_method=sale.payment_method,
        status=sale.status,
        created_by=sale.created_by,
    )


def to_summary_model(summary: Summary, currency: str) -> SummaryModel:
    return SummaryModel(
        total_value=format_currency(summary.total_value, currency),
        total_count=summary.total_count,
        average_value=format_currency(summary.average_value, currency),
    )


def to_customer_model(customer: Customer, currency: str) -> CustomerModel:
    return CustomerModel(
        id=str(customer.id),
        name=customer.name,
        phone=customer.phone,
        email=customer.email,
        type=customer.type,
        current_balance=format_currency(customer.current_balance, currency),
    )
