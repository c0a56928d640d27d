"""Structural contract shared by every record type the browser can list."""

from typing import Protocol


class Record(Protocol):
    """
    Opaque item returned by the list API.

    The browsing layer never mutates records; it only needs an identifier,
    the lowercased terms a search may match, and the numeric value that
    summaries aggregate.
    """

    @property
    def id(self) -> int: ...

    @property
    def value(self) -> float: ...

    def searchable_terms(self) -> list[str]: ...
