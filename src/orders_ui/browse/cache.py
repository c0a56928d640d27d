"""
Single-slot cache for the full result set of one filter scope.

The browser never holds more than one scope at a time: storing records for
a new scope key replaces whatever was cached before.
"""

from typing import Generic, Sequence, TypeVar

from orders_ui.lib import logs

LOG = logs.logger(__file__)

R = TypeVar("R")


class ResultCache(Generic[R]):
    """
    Holds the unpaginated records fetched for one scope key.

    Attributes:
        scope_key: Key of the scope the slot was last set for, or None.
        records: Cached records for that scope (possibly empty).
    """

    def __init__(self) -> None:
        self.scope_key: str | None = None
        self.records: list[R] = []

    def is_valid_for(self, scope_key: str) -> bool:
        """Return True when the slot holds non-empty data for ``scope_key``."""
        return self.scope_key == scope_key and len(self.records) > 0

    def store(self, scope_key: str, records: Sequence[R]) -> None:
        """Replace the slot with the full record set of ``scope_key``."""
        LOG.debug("Caching %d records for scope %s", len(records), scope_key)
        self.scope_key = scope_key
        self.records = list(records)

    def reset(self, scope_key: str | None = None) -> None:
        """Drop cached records and remember ``scope_key`` as the last-seen scope."""
        self.scope_key = scope_key
        self.records = []

    def __len__(self) -> int:
        return len(self.records)
