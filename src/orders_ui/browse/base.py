"""
Shared plumbing for browsers that load records from a list service.

Provides generation tokens for discarding stale cycles, executor-backed
fetches so blocking service calls never stall the event loop, and a notice
queue the UI drains after each cycle.
"""

import asyncio
import functools
from typing import Any, Generic, Mapping

from orders_ui.lib import logs
from orders_ui.models.common import Notice
from orders_ui.services.errors import ListServiceError
from orders_ui.services.list_service import ListPage, ListService, R, Resource

LOG = logs.logger(__file__)


class BrowserBase(Generic[R]):
    """
    Base class for asynchronous record browsers.

    Every cycle calls _begin_cycle() before its first suspension point and
    checks _is_current() after each one; only the most recently started
    cycle may commit results.
    """

    def __init__(self, service: ListService, resource: Resource[R]) -> None:
        self.service = service
        self.resource = resource
        self._generation = 0
        self._notices: list[Notice] = []

    @property
    def generation(self) -> int:
        return self._generation

    def _begin_cycle(self) -> int:
        self._generation += 1
        return self._generation

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation

    async def _fetch(
        self, filters: Mapping[str, Any], page: int, limit: int
    ) -> ListPage[R]:
        """Run the blocking list call in the loop's default executor."""
        loop = asyncio.get_running_loop()
        call = functools.partial(
            self.service.list_records, self.resource, filters, page, limit
        )
        return await loop.run_in_executor(None, call)

    def _notify_failure(self, error: ListServiceError, fallback: str) -> None:
        """Queue a user-visible error notice for a failed fetch."""
        LOG.error(
            "Loading %s failed: %s", self.resource.label, error, exc_info=error
        )
        self._notices.append(Notice(title="Error", message=error.message or fallback))

    def take_notices(self) -> list[Notice]:
        """Return and clear the notices queued since the last call."""
        notices, self._notices = self._notices, []
        return notices
