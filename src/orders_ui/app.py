"""
Reflex application entry point for the Orders UI.

This module initializes the Reflex app and defines the orders and credits
page layouts.
"""

import reflex as rx

from orders_ui import config
from orders_ui.components import (
    credits_filters,
    credits_list,
    credits_summary_cards,
    filters_panel,
    orders_results,
    orders_summary_cards,
)
from orders_ui.lib import logs
from orders_ui.state import APP_SUBTITLE, APP_TITLE, CreditsState, OrdersState

LOG = logs.logger(__file__)

APP_PORT = config.app_port()
USE_GENERIC_BRANDING = config.use_generic_branding()

LOG.info("List service: %s", config.service_kind())
if config.service_kind() == "http":
    LOG.info("ORDERS_UI_API_URL: %s", config.api_url())

# Font URLs for theming
_FONT_URL_GENERIC = "https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700&family=Fira+Code:wght@400;500&display=swap"
_FONT_URL_BRANDED = "https://fonts.googleapis.com/css2?family=JetBrains+Mono:wght@400;500&family=Source+Sans+3:ital,wght@0,300;0,400;0,500;0,600;0,700;1,400&display=swap"
_FONT_URL = _FONT_URL_GENERIC if USE_GENERIC_BRANDING else _FONT_URL_BRANDED

# Theme class for the page shell
_SHELL_CLASS = "app-shell theme-generic" if USE_GENERIC_BRANDING else "app-shell"


def page_header(title: str, subtitle: str) -> rx.Component:
    """Build the hero text area at the top of a page."""
    return rx.box(
        rx.box(
            rx.heading(title, size="6", as_="h1"),
            rx.text(subtitle, class_name="muted"),
        ),
        rx.box(
            rx.link("Orders", href="/", class_name="nav-link"),
            rx.link("Credits", href="/credits", class_name="nav-link"),
            class_name="page-nav",
        ),
        class_name="page-header",
    )


def index() -> rx.Component:
    """
    Build the orders page layout.

    Returns:
        The complete page component with header, summary, filters, and results.
    """
    return rx.box(
        rx.box(
            page_header(APP_TITLE, APP_SUBTITLE),
            orders_summary_cards(),
            filters_panel(),
            orders_results(),
            class_name="app-container",
        ),
        class_name=_SHELL_CLASS,
    )


def credits_page() -> rx.Component:
    """Build the customer credits page layout."""
    return rx.box(
        rx.box(
            page_header("Customer Credits", "Track outstanding customer balances."),
            credits_summary_cards(),
            credits_filters(),
            credits_list(),
            class_name="app-container",
        ),
        class_name=_SHELL_CLASS,
    )


# Create the Reflex app
app = rx.App(
    theme=rx.theme(
        appearance="light",
        has_background=True,
        radius="large",
    ),
    stylesheets=[
        _FONT_URL,
        "/styles.css",
    ],
)

app.add_page(
    index,
    route="/",
    title=APP_TITLE,
    on_load=OrdersState.on_load,
)
app.add_page(
    credits_page,
    route="/credits",
    title="Customer Credits",
    on_load=CreditsState.on_load,
)


def main() -> None:
    """Entrypoint used by `uv run orders_ui`."""
    # Note: In production, use `reflex run` instead
    import subprocess
    import sys

    subprocess.run([sys.executable, "-m", "reflex", "run", "--backend-port", str(APP_PORT)])


if __name__ == "__main__":
    main()
