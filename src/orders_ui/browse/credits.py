"""
Customer credits browser.

Loads every active customer once, keeps the ones carrying a positive
balance, and filters that set client-side by search text and an optional
selected customer. Balance mutations are handled by the external ledger
service and are not part of this browser.
"""

from orders_ui import config
from orders_ui.browse.aggregate import summarize
from orders_ui.browse.base import BrowserBase
from orders_ui.browse.scope import ALL
from orders_ui.lib import logs
from orders_ui.models.common import Summary
from orders_ui.models.customer import Customer
from orders_ui.services.errors import ListServiceError
from orders_ui.services.list_service import CUSTOMERS, ListService
from orders_ui.utils import matches_query

LOG = logs.logger(__file__)


class CreditsBrowser(BrowserBase[Customer]):
    """
    Browses customers with outstanding credit.

    Attributes:
        customers: Active customers whose current balance is positive.
        search_text: Free-text filter over name, phone and email.
        selected_customer_id: Customer id to show alone, or "all".
        limit: Page size used to fetch all active customers.
        is_loading: True while a load is in flight.
    """

    def __init__(self, service: ListService, *, limit: int | None = None) -> None:
        super().__init__(service, CUSTOMERS)
        self.limit = limit or config.credits_limit()
        self.customers: list[Customer] = []
        self.search_text = ""
        self.selected_customer_id = ALL
        self.is_loading = False

    async def load(self) -> bool:
        """
        Reload the customers with credit.

        Returns:
            True if this load committed, False if it failed or was superseded.
        """
        generation = self._begin_cycle()
        self.is_loading = True
        try:
            result = await self._fetch({"status": "active"}, 1, self.limit)
        except ListServiceError as exc:
            if self._is_current(generation):
                self._notify_failure(exc, "Failed to load customers")
                self.is_loading = False
            return False

        if not self._is_current(generation):
            return False
        self.customers = [customer for customer in result.items if customer.has_credit]
        self.is_loading = False
        LOG.info(
            "Loaded %d customers with credit out of %d",
            len(self.customers),
            len(result.items),
        )
        return True

    @property
    def visible(self) -> list[Customer]:
        """Customers matching both the search text and the customer selection."""
        return [
            customer
            for customer in self.customers
            if matches_query(customer, self.search_text)
            and (
                self.selected_customer_id == ALL
                or str(customer.id) == self.selected_customer_id
            )
        ]

    @property
    def summary(self) -> Summary:
        """Totals over every customer with credit, independent of filters."""
        return summarize(self.customers)
