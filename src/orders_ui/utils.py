"""
Utility functions for record parsing, matching and formatting.

Provides helpers for:
- Lenient scalar coercion (malformed values degrade to "" / 0)
- Currency formatting
- Search query matching against record fields
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from orders_ui.models.record import Record


def to_text(value: Any) -> str:
    """Return ``value`` as a string, treating None as empty."""
    if value is None:
        return ""
    return str(value)


def to_float(value: Any) -> float:
    """
    Coerce a JSON scalar to float.

    Args:
        value: Number, numeric string, or anything else.

    Returns:
        The float value, or 0.0 when the value is missing or not numeric.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def to_int(value: Any) -> int:
    """Coerce a JSON scalar to int, returning 0 for missing or invalid values."""
    if value is None or isinstance(value, bool):
        return 0
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return 0


def format_currency(value: float, currency: str) -> str:
    """
    Format a currency amount with the currency code prefix.

    Args:
        value: Numeric amount to format.
        currency: Currency code (e.g., 'PKR', 'USD').

    Returns:
        Formatted string like 'PKR 1,234.56'.
    """
    return f"{currency} {value:,.2f}"


def normalize_query(query: str | None) -> str:
    """Trim and lowercase a search query."""
    if not query:
        return ""
    return query.strip().lower()


def matches_query(record: "Record", query: str) -> bool:
    """
    Check if a record matches the search query.

    Performs case-insensitive substring matching against all searchable
    terms of the record; a match on any single term is enough.

    Args:
        record: Record to check.
        query: Search query string.

    Returns:
        True if query matches any searchable term, or if query is empty.
    """
    normalized = normalize_query(query)
    if not normalized:
        return True
    return any(normalized in term for term in record.searchable_terms())
