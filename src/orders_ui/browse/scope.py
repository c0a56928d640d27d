"""
Filter scope and its cache identity.

A scope is the set of non-search constraints applied to a listing. Its key
excludes search text and page number, so two scopes share cached data iff
their keys are equal.
"""

from dataclasses import dataclass
from typing import Any

from orders_ui.lib import logs

LOG = logs.logger(__file__)

ALL = "all"


@dataclass(frozen=True, slots=True)
class FilterScope:
    """
    Non-search filters for a listing.

    Attributes:
        status: Record status, or "all".
        payment_method: Payment method, or "all".
        customer_id: Customer id as entered, or "" for any customer.
        date_from: Inclusive ISO start date, or "".
        date_to: Inclusive ISO end date, or "".
    """

    status: str = ALL
    payment_method: str = ALL
    customer_id: str = ""
    date_from: str = ""
    date_to: str = ""

    @property
    def key(self) -> str:
        """Deterministic cache identity of this scope."""
        return "|".join(
            [
                self.status,
                self.payment_method,
                self.date_from,
                self.date_to,
                self.customer_id,
            ]
        )

    def to_params(self) -> dict[str, Any]:
        """
        Return the list API filter parameters for this scope.

        "all" and empty values are omitted; the customer id is sent as an
        integer and dropped when it is not numeric.
        """
        params: dict[str, Any] = {}
        if self.status and self.status != ALL:
            params["status"] = self.status
        customer_id = self.customer_id.strip()
        if customer_id:
            if customer_id.isdigit():
                params["customerId"] = int(customer_id)
            else:
                LOG.warning("Ignoring non-numeric customer filter: %r", customer_id)
        if self.date_from:
            params["dateFrom"] = self.date_from
        if self.date_to:
            params["dateTo"] = self.date_to
        if self.payment_method and self.payment_method != ALL:
            params["paymentMethod"] = self.payment_method
        return params
