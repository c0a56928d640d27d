"""
Common state models for the Orders UI browsing layer.

This module defines the value objects that flow between the browsing
core and the Reflex state:

- Summary: totals over the record universe currently being paginated
- PageWindow: page number plus fixed page size, shared by both pagination modes
- BrowseView: the view model the UI renders after every orchestration cycle
- Notice: a user-visible notification raised by a failed cycle
"""

import math
from dataclasses import dataclass, field
from typing import Generic, Sequence, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Summary:
    """
    Aggregate figures for a set of records.

    Attributes:
        total_value: Sum of the records' value field.
        total_count: Number of records.
        average_value: total_value / total_count, or 0 when there are none.
    """

    total_value: float = 0.0
    total_count: int = 0
    average_value: float = 0.0

    @classmethod
    def zero(cls) -> "Summary":
        return cls()


@dataclass(frozen=True, slots=True)
class PageWindow:
    """
    A 1-indexed page of fixed size.

    Attributes:
        page: Current page number (>= 1).
        page_size: Number of records per page.
    """

    page: int = 1
    page_size: int = 20

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {self.page_size}")
        if self.page < 1:
            object.__setattr__(self, "page", 1)

    @property
    def start(self) -> int:
        return (self.page - 1) * self.page_size

    @property
    def end(self) -> int:
        return self.page * self.page_size

    def slice(self, items: Sequence[T]) -> list[T]:
        """Return the records of this page from a full, ordered sequence."""
        return list(items[self.start : self.end])

    def total_pages(self, count: int) -> int:
        """Number of pages needed for ``count`` records, never less than 1."""
        return max(1, math.ceil(count / self.page_size))


@dataclass(frozen=True, slots=True)
class Notice:
    """A user-visible notification, rendered as a toast by the UI."""

    title: str
    message: str
    level: str = "error"


@dataclass(slots=True)
class BrowseView(Generic[T]):
    """
    View model produced after every orchestration cycle.

    The UI is a passive consumer of this object: it never decides whether
    a page comes from the network or from the cache.

    Attributes:
        records: Records on the current page (at most page_size).
        current_page: Page the records belong to.
        total_pages: Number of pages in the current record universe.
        summary: Totals over the whole universe, not just this page.
        is_loading: True while a network call for this view is in flight.
        is_searching: True when records come from client-side search.
        search_text: Settled search text the view was computed for.
    """

    records: list[T] = field(default_factory=list)
    current_page: int = 1
    total_pages: int = 1
    summary: Summary = field(default_factory=Summary.zero)
    is_loading: bool = False
    is_searching: bool = False
    search_text: str = ""

    @property
    def is_empty(self) -> bool:
        return not self.is_loading and not self.records
