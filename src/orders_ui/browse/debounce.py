"""
Trailing debounce for the search input.

Each raw value restarts the quiet period; only the value that survives the
whole delay settles. Values whose trimmed length is positive but below the
minimum (a single character by default) never settle, so the first
keystroke of a query does not flip the browser into search mode.

Usage:
    debouncer = Debouncer(delay=0.5)

    async def on_change(text):
        settled = await debouncer.submit(text)
        if settled is not None:
            browser.apply_search_settle(settled)
"""

import asyncio
from dataclasses import dataclass

from orders_ui.lib import logs

LOG = logs.logger(__file__)

DEFAULT_DELAY = 0.5
DEFAULT_MIN_LENGTH = 2


@dataclass(frozen=True, slots=True)
class SearchSettle:
    """State change produced by a settled search value."""

    search_text: str
    page: int = 1


def on_search_settle(text: str) -> SearchSettle:
    """A settled search always restarts pagination from page 1."""
    return SearchSettle(search_text=text, page=1)


def is_searching(text: str | None, min_length: int = DEFAULT_MIN_LENGTH) -> bool:
    """Return True when ``text`` is long enough to switch to search mode."""
    return len((text or "").strip()) >= min_length


class Debouncer:
    """
    Collapses bursts of raw search values into one settled value.

    Attributes:
        delay: Quiet period in seconds.
        min_length: Shortest non-empty trimmed value allowed to settle.
        settled: Last value that settled.
    """

    def __init__(
        self, delay: float = DEFAULT_DELAY, min_length: int = DEFAULT_MIN_LENGTH
    ) -> None:
        self.delay = delay
        self.min_length = min_length
        self.settled = ""
        self._generation = 0

    def can_settle(self, raw: str) -> bool:
        """Empty values and values of at least ``min_length`` may settle."""
        length = len(raw.strip())
        return length == 0 or length >= self.min_length

    async def submit(self, raw: str) -> str | None:
        """
        Offer a raw value and wait out the quiet period.

        Returns:
            The settled value, or None when a newer value arrived during
            the delay or the value is too short to settle.
        """
        self._generation += 1
        generation = self._generation
        await asyncio.sleep(self.delay)
        if generation != self._generation:
            return None
        if not self.can_settle(raw):
            LOG.debug("Suppressing short search value %r", raw)
            return None
        self.settled = raw
        return raw

    def cancel(self) -> None:
        """Discard any pending value."""
        self._generation += 1
