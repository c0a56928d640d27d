"""
Reflex UI components for the Orders UI application.

This package provides modular, composable components:
- filters_panel: Search input and scope filters for orders
- summary_cards: Totals, counts and averages for orders and credits
- orders_table: Current page of orders with loading and empty states
- pagination: Previous/next controls
- credits_list: Customers with outstanding credit

All components are pure functions that return Reflex components.
"""

from orders_ui.components.credits_list import credits_filters, credits_list
from orders_ui.components.filters_panel import filters_panel
from orders_ui.components.orders_table import orders_results
from orders_ui.components.pagination import pagination
from orders_ui.components.summary_cards import (
    credits_summary_cards,
    orders_summary_cards,
    summary_card,
)

__all__ = [
    "credits_filters",
    "credits_list",
    "credits_summary_cards",
    "filters_panel",
    "orders_results",
    "orders_summary_cards",
    "pagination",
    "summary_card",
]
