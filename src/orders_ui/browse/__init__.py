"""
Browsing core: everything between user input and the rendered page.

Modules:
- debounce: Trailing debounce of the search input with a minimum-length gate
- scope: Filter scope, its cache key and its request parameters
- cache: Single-slot cache of one scope's full result set
- aggregate: Summary reduction over a record universe
- orchestrator: Network-vs-cache decisions and view model production
- credits: Client-side browser for customers with outstanding credit

Nothing here imports Reflex; the UI state drives these objects.
"""

from orders_ui.browse.aggregate import summarize
from orders_ui.browse.cache import ResultCache
from orders_ui.browse.credits import CreditsBrowser
from orders_ui.browse.debounce import Debouncer, SearchSettle, is_searching, on_search_settle
from orders_ui.browse.orchestrator import BrowseOrchestrator
from orders_ui.browse.scope import ALL, FilterScope

__all__ = [
    "ALL",
    "BrowseOrchestrator",
    "CreditsBrowser",
    "Debouncer",
    "FilterScope",
    "ResultCache",
    "SearchSettle",
    "is_searching",
    "on_search_settle",
    "summarize",
]
