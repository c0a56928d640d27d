"""
Orders results component for Reflex.

Handles the display of the current page of orders, loading states, and
empty states.
"""

import reflex as rx

from orders_ui.components.pagination import pagination
from orders_ui.models.reflex_models import SaleModel
from orders_ui.state import OrdersState


def orders_results() -> rx.Component:
    """
    Build the orders results container.

    Displays the loading state while a network call is in flight, the empty
    state when nothing matched, or the orders table.

    Returns:
        The results container component.
    """
    return rx.box(
        rx.cond(
            OrdersState.is_loading,
            _loader(),
            rx.cond(OrdersState.is_empty, _empty(), _results()),
        ),
        id="results-container",
    )


def _results() -> rx.Component:
    return rx.box(
        rx.box(
            rx.text(OrdersState.result_summary, class_name="muted"),
            class_name="results-summary",
        ),
        rx.table.root(
            rx.table.header(
                rx.table.row(
                    rx.table.column_header_cell("Order #"),
                    rx.table.column_header_cell("Customer"),
                    rx.table.column_header_cell("Date"),
                    rx.table.column_header_cell("Items"),
                    rx.table.column_header_cell("Total"),
                    rx.table.column_header_cell("Payment"),
                    rx.table.column_header_cell("Status"),
                    rx.table.column_header_cell("Created By"),
                ),
            ),
            rx.table.body(rx.foreach(OrdersState.orders, _order_row)),
            variant="surface",
            class_name="orders-table",
        ),
        pagination(),
        class_name="results",
    )


def _order_row(order: SaleModel) -> rx.Component:
    """Build one table row for an order."""
    return rx.table.row(
        rx.table.cell(rx.text(order.order_number, class_name="mono")),
        rx.table.cell(order.customer_name),
        rx.table.cell(
            rx.box(
                rx.text(order.date),
                rx.text(order.time, class_name="muted"),
            )
        ),
        rx.table.cell(order.item_count),
        rx.table.cell(rx.text(order.total, class_name="value")),
        rx.table.cell(rx.text(order.payment_method, class_name="badge outline")),
        rx.table.cell(_status_badge(order.status)),
        rx.table.cell(order.created_by),
    )


def _status_badge(status: rx.Var) -> rx.Component:
    return rx.badge(
        status,
        color_scheme=rx.match(
            status,
            ("completed", "green"),
            ("pending", "amber"),
            ("refunded", "red"),
            "gray",
        ),
    )


def _empty() -> rx.Component:
    """Build the empty state when no orders are found."""
    return rx.box(
        rx.icon("file-x", class_name="empty-icon", size=60),
        rx.heading("No orders found", size="3", as_="h3"),
        rx.cond(
            OrdersState.is_searching,
            rx.text(
                rx.text.span('No results match "'),
                rx.text.span(OrdersState.settled_search),
                rx.text.span('". Try a different search term.'),
                class_name="muted",
            ),
            rx.text("No orders match the current filters.", class_name="muted"),
        ),
        class_name="card empty-state",
    )


def _loader() -> rx.Component:
    """Build the loading indicator shown while orders are fetched."""
    return rx.box(
        rx.box(class_name="spinner"),
        rx.text("Loading orders...", class_name="muted"),
        class_name="card loading-state",
    )
