"""
HTTP client factory for the remote list API.

Provides a process-wide ``requests.Session`` so list calls reuse pooled
connections. Blocking calls made with it are run in the event loop's
executor by the browsing layer.
"""

import functools

import requests

from orders_ui import __version__


@functools.cache
def http_session() -> requests.Session:
    """
    Return the shared HTTP session, creating it on first use.

    Returns:
        Session configured to request JSON.
    """
    session = requests.Session()
    session.headers.update(
        {
            "Accept": "application/json",
            "User-Agent": f"orders-ui/{__version__}",
        }
    )
    return session
