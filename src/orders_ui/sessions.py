"""
Per-client session registry.

Browsers carry a result cache and pending debounce timers, so they live
outside Reflex state, keyed by client token. Entries expire after a period
of inactivity and the least recently used entry is evicted once the
registry is full, so memory stays bounded on a long-running server.
"""

import time
from threading import Lock
from typing import Callable, Generic, TypeVar

from cachetools import TTLCache

from orders_ui import config
from orders_ui.lib import logs

LOG = logs.logger(__file__)

T = TypeVar("T")


class SessionRegistry(Generic[T]):
    """
    Bounded map from client token to a lazily created session object.

    Attributes:
        name: Label used in log messages.
    """

    def __init__(
        self,
        name: str,
        factory: Callable[[], T],
        *,
        maxsize: int | None = None,
        ttl: float | None = None,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        self.name = name
        self._factory = factory
        self._sessions: TTLCache = TTLCache(
            maxsize=maxsize or config.session_limit(),
            ttl=ttl if ttl is not None else config.session_ttl(),
            timer=timer,
        )
        self._lock = Lock()

    def get(self, token: str) -> T:
        """Return the session for ``token``, creating it on first use."""
        with self._lock:
            session = self._sessions.get(token)
            if session is None:
                LOG.info("Creating %s session for client %s", self.name, token)
                session = self._factory()
            # Re-inserting restarts the inactivity timer
            self._sessions[token] = session
        return session

    def discard(self, token: str) -> None:
        with self._lock:
            self._sessions.pop(token, None)

    def __contains__(self, token: str) -> bool:
        with self._lock:
            return token in self._sessions

    def __len__(self) -> int:
        with self._lock:
            self._sessions.expire()
            return len(self._sessions)
