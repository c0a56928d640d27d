"""
Data models for the Orders UI.

This package provides:
- Record types returned by the list API (Sale, SaleItem, Customer)
- The Record protocol the browsing layer depends on
- View models shared by the browsing core and the UI (BrowseView, Summary, ...)

Display models for Reflex state live in ``orders_ui.models.reflex_models``.
"""

from orders_ui.models.common import BrowseView, Notice, PageWindow, Summary
from orders_ui.models.customer import Customer, parse_customer
from orders_ui.models.record import Record
from orders_ui.models.sale import Sale, SaleItem, parse_sale, parse_sale_item

__all__ = [
    "BrowseView",
    "Customer",
    "Notice",
    "PageWindow",
    "Record",
    "Sale",
    "SaleItem",
    "Summary",
    "parse_customer",
    "parse_sale",
    "parse_sale_item",
]
