"""Exceptions raised by list service implementations."""


class ListServiceError(Exception):
    """Base class for a failed list call; ``message`` is safe to show to users."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NetworkFailure(ListServiceError):
    """Transport-level error: connection failure, timeout, or non-2xx status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ServiceFailure(ListServiceError):
    """The service answered but reported ``success: false`` or an unreadable body."""
