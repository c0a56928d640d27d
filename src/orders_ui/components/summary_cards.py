"""
Summary card components.

The orders page shows totals for the record universe being paginated; the
credits page shows totals over every customer with credit.
"""

import reflex as rx

from orders_ui.state import CreditsState, OrdersState


def summary_card(icon: str, label: str, value: rx.Var | str, tone: str) -> rx.Component:
    """Build a single figure card with icon, label and value."""
    return rx.box(
        rx.icon(icon, class_name=f"summary-icon {tone}", size=32),
        rx.box(
            rx.text(label, class_name="label"),
            rx.text(value, class_name=f"summary-value {tone}"),
        ),
        class_name=f"card summary-card {tone}",
    )


def orders_summary_cards() -> rx.Component:
    return rx.box(
        summary_card(
            "dollar-sign", "Total Sales", OrdersState.summary.total_value, "green"
        ),
        summary_card(
            "shopping-cart", "Total Orders", OrdersState.summary.total_count, "blue"
        ),
        summary_card(
            "trending-up",
            "Average Order Value",
            OrdersState.summary.average_value,
            "purple",
        ),
        class_name="summary-grid",
    )


def credits_summary_cards() -> rx.Component:
    return rx.box(
        summary_card("credit-card", "Total Credits", CreditsState.total_credits, "red"),
        summary_card(
            "users",
            "Customers with Credits",
            CreditsState.customers_with_credits,
            "orange",
        ),
        summary_card(
            "circle-alert", "Average Credit", CreditsState.average_credit, "blue"
        ),
        class_name="summary-grid",
    )
