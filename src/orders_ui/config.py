"""
Environment-driven configuration for the Orders UI.

Every setting is read lazily through a small helper so tests can adjust
the environment with monkeypatch and see the change immediately.
"""

import os

from orders_ui.lib import logs

LOG = logs.logger(__file__)

_TRUE_VALUES = {"1", "true", "yes"}

DEFAULT_API_URL = "http://localhost:3001/api"


def get_env(name: str, default: str | None = None) -> str | None:
    """Return a raw environment value or default."""
    return os.getenv(name, default)


def get_bool(name: str, default: bool = False) -> bool:
    """Return True when the variable holds one of the truthy spellings."""
    raw = get_env(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUE_VALUES


def get_int(name: str, default: int, minimum: int = 1) -> int:
    """
    Return an integer setting.

    Unparseable values and values below ``minimum`` fall back to the
    default with a warning.
    """
    raw = get_env(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw.strip())
    except ValueError:
        LOG.warning("Invalid integer for %s: %r, using %s", name, raw, default)
        return default
    if value < minimum:
        LOG.warning("%s=%s is below %s, using %s", name, value, minimum, default)
        return default
    return value


def api_url() -> str:
    """Base URL of the remote list API, without a trailing slash."""
    return (get_env("ORDERS_UI_API_URL") or DEFAULT_API_URL).rstrip("/")


def service_kind() -> str:
    """Return the list service implementation to use (``http`` or ``demo``)."""
    kind = get_env("ORDERS_UI_SERVICE")
    if kind and kind.strip():
        return kind.strip().lower()
    return "http" if get_env("ORDERS_UI_API_URL") else "demo"


def page_size() -> int:
    return get_int("ORDERS_UI_PAGE_SIZE", 20)


def search_delay() -> float:
    """Quiet period before a search value settles, in seconds."""
    return get_int("ORDERS_UI_SEARCH_DELAY_MS", 500, minimum=0) / 1000


def min_search_length() -> int:
    return get_int("ORDERS_UI_MIN_SEARCH_LENGTH", 2)


def full_scope_limit() -> int:
    """Page size used to approximate a full-scope fetch while searching."""
    return get_int("ORDERS_UI_FULL_SCOPE_LIMIT", 10000)


def credits_limit() -> int:
    return get_int("ORDERS_UI_CREDITS_LIMIT", 1000)


def request_timeout() -> float:
    """Transport timeout for list requests, in seconds."""
    return float(get_int("ORDERS_UI_REQUEST_TIMEOUT", 30))


def currency() -> str:
    return (get_env("ORDERS_UI_CURRENCY") or "PKR").strip() or "PKR"


def session_limit() -> int:
    """Most client sessions kept in memory at once."""
    return get_int("ORDERS_UI_SESSION_LIMIT", 500)


def session_ttl() -> float:
    """Seconds of inactivity after which a client session is dropped."""
    return float(get_int("ORDERS_UI_SESSION_TTL", 3600))


def app_port() -> int:
    return get_int("ORDERS_UI_PORT", 8000)


def use_generic_branding() -> bool:
    return get_bool("ORDERS_UI_GENERIC")
