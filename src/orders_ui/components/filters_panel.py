"""
Filters panel component for the orders page.

Provides the search input plus the scope filters: status, payment method,
customer id and date range.
"""

import reflex as rx

from orders_ui.state import PAYMENT_METHOD_OPTIONS, STATUS_OPTIONS, OrdersState


def filters_panel() -> rx.Component:
    """
    Build the filters panel.

    Returns:
        The filters panel component.
    """
    return rx.box(
        rx.box(
            rx.icon("search", class_name="input-icon"),
            rx.input(
                placeholder="Search by order number, customer, cashier, payment method...",
                value=OrdersState.search_text,
                on_change=OrdersState.on_search_change,
                class_name="search-input",
            ),
            class_name="input-with-icon",
        ),
        rx.box(
            _labeled(
                "Status",
                rx.select(
                    STATUS_OPTIONS,
                    value=OrdersState.filter_status,
                    on_change=OrdersState.on_status_change,
                ),
            ),
            _labeled(
                "Payment Method",
                rx.select(
                    PAYMENT_METHOD_OPTIONS,
                    value=OrdersState.filter_payment_method,
                    on_change=OrdersState.on_payment_method_change,
                ),
            ),
            _labeled(
                "Customer ID",
                rx.input(
                    placeholder="Any customer",
                    value=OrdersState.filter_customer,
                    on_change=OrdersState.on_customer_change,
                    type="number",
                ),
            ),
            _labeled(
                "From",
                rx.input(
                    type="date",
                    value=OrdersState.date_from,
                    on_change=OrdersState.on_date_from_change,
                ),
            ),
            _labeled(
                "To",
                rx.input(
                    type="date",
                    value=OrdersState.date_to,
                    on_change=OrdersState.on_date_to_change,
                ),
            ),
            class_name="filter-grid",
        ),
        class_name="card search-card",
    )


def _labeled(label: str, control: rx.Component) -> rx.Component:
    """Build a filter control with its label."""
    return rx.box(
        rx.text(label, class_name="label"),
        control,
        class_name="filter-field",
    )
