"""
Reflex state management for the Orders UI application.

This module contains the state classes for the orders and credits pages.
State vars hold only the view model; the browsing objects that decide
between network and cache live in bounded per-session registries keyed by
the client token, since they carry caches and pending timers that are not
serializable state.
"""

from dataclasses import dataclass

import reflex as rx
from reflex.event import EventSpec

from orders_ui import config
from orders_ui.browse.credits import CreditsBrowser
from orders_ui.browse.debounce import Debouncer
from orders_ui.browse.orchestrator import BrowseOrchestrator
from orders_ui.browse.scope import ALL
from orders_ui.lib import logs
from orders_ui.models.common import BrowseView, Notice
from orders_ui.models.reflex_models import (
    CustomerModel,
    SaleModel,
    SummaryModel,
    to_customer_model,
    to_sale_model,
    to_summary_model,
)
from orders_ui.models.sale import Sale
from orders_ui.services import SALES, get_list_service
from orders_ui.sessions import SessionRegistry
from orders_ui.utils import format_currency

LOG = logs.logger(__file__)

CURRENCY = config.currency()
STATUS_OPTIONS = ["all", "completed", "pending", "refunded"]
PAYMENT_METHOD_OPTIONS = ["all", "cash", "card", "credit", "bank_transfer"]

# Branding configuration
APP_TITLE = "Orders" if config.use_generic_branding() else "Sales Orders"
APP_SUBTITLE = "Browse and search sales orders."


@dataclass
class _OrdersSession:
    browser: BrowseOrchestrator[Sale]
    debouncer: Debouncer


def _new_orders_session() -> _OrdersSession:
    return _OrdersSession(
        browser=BrowseOrchestrator(get_list_service(), SALES),
        debouncer=Debouncer(
            delay=config.search_delay(),
            min_length=config.min_search_length(),
        ),
    )


_ORDERS_SESSIONS: SessionRegistry[_OrdersSession] = SessionRegistry(
    "orders", _new_orders_session
)
_CREDITS_SESSIONS: SessionRegistry[CreditsBrowser] = SessionRegistry(
    "credits", lambda: CreditsBrowser(get_list_service())
)


def _orders_session(token: str) -> _OrdersSession:
    """Return the browsing session for a client, creating it on first use."""
    return _ORDERS_SESSIONS.get(token)


def _credits_browser(token: str) -> CreditsBrowser:
    return _CREDITS_SESSIONS.get(token)


def _toasts(notices: list[Notice]) -> list[EventSpec]:
    return [rx.toast.error(notice.title, description=notice.message) for notice in notices]


class OrdersState(rx.State):
    """
    Application state for the orders page.

    Handles filters, debounced search, pagination and the summary cards.
    """

    # Current page of orders
    orders: list[SaleModel] = []
    current_page: int = 1
    total_pages: int = 1
    summary: SummaryModel = SummaryModel()
    is_loading: bool = True
    is_searching: bool = False

    # Search state: raw input and the last settled value
    search_text: str = ""
    settled_search: str = ""

    # Filter scope
    filter_status: str = ALL
    filter_payment_method: str = ALL
    filter_customer: str = ""
    date_from: str = ""
    date_to: str = ""

    @rx.var
    def result_summary(self) -> str:
        """Generate summary text for the current result set."""
        count = self.summary.total_count
        noun = "order" if count == 1 else "orders"
        base = f"{count} {noun} found"
        if self.is_searching and self.settled_search:
            return f'{base} for "{self.settled_search}"'
        return base

    @rx.var
    def page_label(self) -> str:
        return f"Page {self.current_page} of {self.total_pages}"

    @rx.var
    def has_previous(self) -> bool:
        return self.current_page > 1

    @rx.var
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @rx.var
    def is_empty(self) -> bool:
        """Check if empty state should be shown."""
        return not self.is_loading and len(self.orders) == 0

    @rx.event(background=True)
    async def on_load(self):
        """Event handler for initial page load."""
        async with self:
            token = self.router.session.client_token
        return await self._refresh(_orders_session(token))

    @rx.event(background=True)
    async def on_search_change(self, text: str):
        """
        Event handler for raw search input.

        Waits out the debounce period; only a settled value re-runs the
        orchestration, and it always restarts from page 1.
        """
        async with self:
            self.search_text = text
            token = self.router.session.client_token
        session = _orders_session(token)
        settled = await session.debouncer.submit(text)
        if settled is None or not session.browser.apply_search_settle(settled):
            return
        async with self:
            self.settled_search = settled.strip()
        return await self._refresh(session)

    @rx.event(background=True)
    async def on_status_change(self, value: str):
        async with self:
            self.filter_status = value
        return await self._change_scope(status=value)

    @rx.event(background=True)
    async def on_payment_method_change(self, value: str):
        async with self:
            self.filter_payment_method = value
        return await self._change_scope(payment_method=value)

    @rx.event(background=True)
    async def on_customer_change(self, value: str):
        async with self:
            self.filter_customer = value
        return await self._change_scope(customer_id=value.strip())

    @rx.event(background=True)
    async def on_date_from_change(self, value: str):
        async with self:
            self.date_from = value
        return await self._change_scope(date_from=value)

    @rx.event(background=True)
    async def on_date_to_change(self, value: str):
        async with self:
            self.date_to = value
        return await self._change_scope(date_to=value)

    @rx.event(background=True)
    async def go_to_page(self, page: int):
        """Event handler for pagination controls."""
        async with self:
            token = self.router.session.client_token
            page = min(max(page, 1), self.total_pages)
        session = _orders_session(token)
        if not session.browser.set_page(page):
            return
        return await self._refresh(session)

    async def _change_scope(self, **changes: str) -> list[EventSpec]:
        async with self:
            token = self.router.session.client_token
        session = _orders_session(token)
        if not session.browser.update_scope(**changes):
            return []
        return await self._refresh(session)

    async def _refresh(self, session: _OrdersSession) -> list[EventSpec]:
        """Run one orchestration cycle and publish its view."""
        browser = session.browser
        async with self:
            if browser.needs_network():
                self.is_loading = True
        try:
            view = await browser.refresh()
        except Exception as e:
            LOG.error("Refreshing orders failed: %s", e, exc_info=True)
            async with self:
                self.is_loading = False
            return _toasts([Notice(title="Error", message="Failed to load orders data")])

        if view is not None:
            async with self:
                self._apply_view(view)
        return _toasts(browser.take_notices())

    def _apply_view(self, view: BrowseView[Sale]) -> None:
        self.orders = [to_sale_model(sale, CURRENCY) for sale in view.records]
        self.current_page = view.current_page
        self.total_pages = view.total_pages
        self.summary = to_summary_model(view.summary, CURRENCY)
        self.is_searching = view.is_searching
        self.is_loading = view.is_loading


class CreditsState(rx.State):
    """
    Application state for the customer credits page.

    Search and customer selection filter client-side; only loading the
    customer list touches the network.
    """

    customers: list[CustomerModel] = []
    customer_options: list[CustomerModel] = []
    total_credits: str = format_currency(0, CURRENCY)
    customers_with_credits: int = 0
    average_credit: str = format_currency(0, CURRENCY)
    is_loading: bool = True

    search_text: str = ""
    selected_customer_id: str = ALL

    @rx.var
    def is_empty(self) -> bool:
        return not self.is_loading and len(self.customers) == 0

    @rx.event(background=True)
    async def on_load(self):
        """Load customers with outstanding credit."""
        async with self:
            token = self.router.session.client_token
            self.is_loading = True
        browser = _credits_browser(token)
        try:
            await browser.load()
        except Exception as e:
            LOG.error("Loading credits failed: %s", e, exc_info=True)
            async with self:
                self.is_loading = False
            return _toasts([Notice(title="Error", message="Failed to load customers")])
        async with self:
            self._apply(browser)
        return _toasts(browser.take_notices())

    @rx.event
    def on_search_change(self, text: str):
        browser = _credits_browser(self.router.session.client_token)
        self.search_text = text
        browser.search_text = text
        self._apply(browser)

    @rx.event
    def on_customer_select(self, customer_id: str):
        browser = _credits_browser(self.router.session.client_token)
        self.selected_customer_id = customer_id
        browser.selected_customer_id = customer_id
        self._apply(browser)

    def _apply(self, browser: CreditsBrowser) -> None:
        summary = browser.summary
        self.customers = [
            to_customer_model(customer, CURRENCY) for customer in browser.visible
        ]
        self.customer_options = [
            to_customer_model(customer, CURRENCY) for customer in browser.customers
        ]
        self.total_credits = format_currency(summary.total_value, CURRENCY)
        self.customers_with_credits = summary.total_count
        self.average_credit = format_currency(round(summary.average_value), CURRENCY)
        self.is_loading = browser.is_loading