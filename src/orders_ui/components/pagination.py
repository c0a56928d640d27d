"""Previous/next pagination controls for the orders table."""

import reflex as rx

from orders_ui.state import OrdersState


def pagination() -> rx.Component:
    """
    Build the pagination bar.

    Returns:
        Buttons for the previous and next page around the page label.
    """
    return rx.box(
        rx.button(
            rx.icon("chevron-left", size=16),
            "Previous",
            on_click=OrdersState.go_to_page(OrdersState.current_page - 1),
            disabled=~OrdersState.has_previous,
            variant="outline",
        ),
        rx.text(OrdersState.page_label, class_name="muted"),
        rx.button(
            "Next",
            rx.icon("chevron-right", size=16),
            on_click=OrdersState.go_to_page(OrdersState.current_page + 1),
            disabled=~OrdersState.has_next,
            variant="outline",
        ),
        class_name="pagination",
    )
