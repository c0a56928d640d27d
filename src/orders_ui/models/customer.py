"""Customer models used by the credits page."""

from dataclasses import dataclass
from typing import Any, Mapping

from orders_ui.utils import to_float, to_int, to_text


@dataclass(frozen=True, slots=True)
class Customer:
    """A customer with an outstanding balance tracked by the ledger service."""

    id: int
    name: str
    phone: str
    email: str
    type: str
    status: str
    current_balance: float

    @property
    def value(self) -> float:
        """The amount credit summaries aggregate for a customer."""
        return self.current_balance

    @property
    def has_credit(self) -> bool:
        return self.current_balance > 0

    def searchable_terms(self) -> list[str]:
        """Return the terms that should be matched when filtering."""
        terms = [self.name, self.phone, self.email]
        return [value.lower() for value in terms if value]


def parse_customer(payload: Mapping[str, Any]) -> Customer:
    """Parse a camelCase customer payload, defaulting missing fields."""
    return Customer(
        id=to_int(payload.get("id")),
        name=to_text(payload.get("name")),
        phone=to_text(payload.get("phone")),
        email=to_text(payload.get("email")),
        type=to_text(payload.get("type")),
        status=to_text(payload.get("status")),
        current_balance=to_float(payload.get("currentBalance")),
    )
