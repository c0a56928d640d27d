"""
Fetch orchestration for the hybrid search/pagination cache.

For every change of scope, page, or settled search text the orchestrator
decides between two modes:

- Server pagination (not searching): the list API pages, filters and
  summarizes; its page and summary are shown verbatim and the search
  cache is reset.
- Search (settled text of at least two characters): the full scope is
  fetched once into a single-slot cache, then filtered, paginated and
  summarized locally on every refinement.

Cycles are tagged with generation tokens so a slow response for an older
query can never overwrite the results of a newer one.
"""

from dataclasses import replace
from typing import Sequence

from orders_ui import config
from orders_ui.browse.aggregate import summarize
from orders_ui.browse.base import BrowserBase
from orders_ui.browse.cache import ResultCache
from orders_ui.browse.debounce import is_searching, on_search_settle
from orders_ui.browse.scope import FilterScope
from orders_ui.lib import logs
from orders_ui.models.common import BrowseView, PageWindow, Summary
from orders_ui.services.errors import ListServiceError
from orders_ui.services.list_service import ListService, R, Resource
from orders_ui.utils import matches_query

LOG = logs.logger(__file__)


class BrowseOrchestrator(BrowserBase[R]):
    """
    Produces one consistent page of records and summary per cycle.

    Attributes:
        scope: Current filter scope.
        search_text: Current settled search text.
        page: Current page number.
        page_size: Fixed page size for both modes.
        full_scope_limit: Page size used to fetch a whole scope while searching.
        cache: Single-slot full result set for search mode.
        view: View model committed by the latest completed cycle.
    """

    def __init__(
        self,
        service: ListService,
        resource: Resource[R],
        *,
        page_size: int | None = None,
        full_scope_limit: int | None = None,
        min_search_length: int | None = None,
        cache: ResultCache[R] | None = None,
    ) -> None:
        super().__init__(service, resource)
        self.page_size = page_size or config.page_size()
        self.full_scope_limit = full_scope_limit or config.full_scope_limit()
        self.min_search_length = min_search_length or config.min_search_length()
        self.cache: ResultCache[R] = cache if cache is not None else ResultCache()
        self.scope = FilterScope()
        self.search_text = ""
        self.page = 1
        self.view: BrowseView[R] = BrowseView()

    @property
    def is_searching(self) -> bool:
        return is_searching(self.search_text, self.min_search_length)

    @property
    def window(self) -> PageWindow:
        return PageWindow(page=self.page, page_size=self.page_size)

    def set_scope(self, scope: FilterScope) -> bool:
        """
        Replace the filter scope; a different scope restarts at page 1.

        Returns:
            True if the scope changed and a refresh is needed.
        """
        if scope == self.scope:
            return False
        LOG.info("Scope changed: %s -> %s", self.scope.key, scope.key)
        self.scope = scope
        self.page = 1
        return True

    def update_scope(self, **changes: str) -> bool:
        """Change individual scope fields, e.g. ``update_scope(status="pending")``."""
        return self.set_scope(replace(self.scope, **changes))

    def set_page(self, page: int) -> bool:
        page = max(page, 1)
        if page == self.page:
            return False
        self.page = page
        return True

    def apply_search_settle(self, text: str) -> bool:
        """
        Apply a settled search value and reset to page 1.

        Returns:
            True if the search text or page changed.
        """
        settle = on_search_settle(text)
        changed = (settle.search_text, settle.page) != (self.search_text, self.page)
        self.search_text = settle.search_text
        self.page = settle.page
        return changed

    def needs_network(self) -> bool:
        """Return True when the next cycle will call the list service."""
        return not self.is_searching or not self.cache.is_valid_for(self.scope.key)

    async def refresh(self) -> BrowseView[R] | None:
        """
        Run one orchestration cycle for the current scope, search and page.

        Returns:
            The committed view, or None when a newer cycle started while
            this one was waiting on the network.
        """
        generation = self._begin_cycle()
        scope = self.scope
        window = self.window
        term = self.search_text.strip()
        if is_searching(term, self.min_search_length):
            return await self._search_cycle(generation, scope, term, window)
        return await self._server_cycle(generation, scope, window)

    async def _server_cycle(
        self, generation: int, scope: FilterScope, window: PageWindow
    ) -> BrowseView[R] | None:
        self.view.is_loading = True
        try:
            result = await self._fetch(
                scope.to_params(), window.page, window.page_size
            )
        except ListServiceError as exc:
            if not self._is_current(generation):
                LOG.info("Discarding failure of stale cycle %s", generation)
                return None
            self._notify_failure(exc, f"Failed to load {self.resource.label} data")
            self.view.is_loading = False
            return self.view

        if not self._is_current(generation):
            LOG.info("Discarding stale page %s of cycle %s", window.page, generation)
            return None

        self.cache.reset(scope.key)
        self.view = BrowseView(
            records=list(result.items),
            current_page=window.page,
            total_pages=result.total_pages or 1,
            summary=result.summary or Summary.zero(),
        )
        return self.view

    async def _search_cycle(
        self, generation: int, scope: FilterScope, term: str, window: PageWindow
    ) -> BrowseView[R] | None:
        key = scope.key
        if not self.cache.is_valid_for(key):
            self.view.is_loading = True
            records = await self._fetch_full_scope(generation, scope)
            if not self._is_current(generation):
                LOG.info("Discarding stale full-scope fetch of cycle %s", generation)
                return None
            self.cache.store(key, records)

        matched = [record for record in self.cache.records if matches_query(record, term)]
        LOG.debug(
            "Search %r matched %d of %d cached %s",
            term,
            len(matched),
            len(self.cache),
            self.resource.label,
        )
        self.view = BrowseView(
            records=window.slice(matched),
            current_page=window.page,
            total_pages=window.total_pages(len(matched)),
            summary=summarize(matched),
            is_searching=True,
            search_text=term,
        )
        return self.view

    async def _fetch_full_scope(self, generation: int, scope: FilterScope) -> Sequence[R]:
        """Fetch every record of a scope; failures degrade to an empty list."""
        try:
            result = await self._fetch(scope.to_params(), 1, self.full_scope_limit)
        except ListServiceError as exc:
            if self._is_current(generation):
                self._notify_failure(exc, f"Failed to load {self.resource.label} data")
            return []
        if len(result.items) >= self.full_scope_limit:
            LOG.warning(
                "Full-scope fetch of %s hit the %d record limit; search results may be incomplete",
                self.resource.label,
                self.full_scope_limit,
            )
        return result.items
