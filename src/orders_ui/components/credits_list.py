"""
Customer credits components for Reflex.

Displays the search and customer selection filters and the list of
customers with outstanding balances.
"""

import reflex as rx

from orders_ui.browse.scope import ALL
from orders_ui.models.reflex_models import CustomerModel
from orders_ui.state import CreditsState


def credits_filters() -> rx.Component:
    """Build the search input and customer selector."""
    return rx.box(
        rx.box(
            rx.icon("search", class_name="input-icon"),
            rx.input(
                placeholder="Search by name, phone, or email...",
                value=CreditsState.search_text,
                on_change=CreditsState.on_search_change,
                class_name="search-input",
            ),
            class_name="input-with-icon",
        ),
        rx.select.root(
            rx.select.trigger(placeholder="Select customer"),
            rx.select.content(
                rx.select.item("All Customers", value=ALL),
                rx.foreach(
                    CreditsState.customer_options,
                    lambda customer: rx.select.item(customer.name, value=customer.id),
                ),
            ),
            value=CreditsState.selected_customer_id,
            on_change=CreditsState.on_customer_select,
        ),
        class_name="card search-card filter-row",
    )


def credits_list() -> rx.Component:
    """
    Build the customers list.

    Returns:
        Loading state, empty state, or one row per customer with credit.
    """
    return rx.box(
        rx.cond(
            CreditsState.is_loading,
            rx.box(
                rx.box(class_name="spinner"),
                rx.text("Loading credits...", class_name="muted"),
                class_name="card loading-state",
            ),
            rx.cond(
                CreditsState.is_empty,
                rx.box(
                    rx.icon("users", class_name="empty-icon", size=60),
                    rx.heading("No customers with credits", size="3", as_="h3"),
                    class_name="card empty-state",
                ),
                rx.box(
                    rx.foreach(CreditsState.customers, _customer_row),
                    class_name="card stack",
                ),
            ),
        ),
        id="credits-container",
    )


def _customer_row(customer: CustomerModel) -> rx.Component:
    """Build a row with contact details and the outstanding balance."""
    return rx.box(
        rx.box(
            rx.box(
                rx.heading(customer.name, size="3", as_="h3"),
                rx.badge(customer.type, variant="outline"),
                class_name="title-row",
            ),
            rx.box(
                rx.cond(
                    customer.phone != "",
                    _meta_item("phone", customer.phone),
                ),
                rx.cond(
                    customer.email != "",
                    _meta_item("mail", customer.email),
                ),
                class_name="meta-row",
            ),
        ),
        rx.box(
            rx.text("Outstanding", class_name="label"),
            rx.text(customer.current_balance, class_name="summary-value red"),
            class_name="balance",
        ),
        class_name="customer-row",
    )


def _meta_item(icon: str, label: rx.Var) -> rx.Component:
    """Build a metadata chip with icon and label."""
    return rx.box(
        rx.icon(icon, class_name="meta-icon", size=16),
        rx.text(label),
        class_name="meta-item",
    )
