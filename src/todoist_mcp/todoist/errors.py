"""Classified failures raised by the Todoist client."""

from __future__ import annotations

DEFAULT_RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please try again later."
DEFAULT_SERVER_MESSAGE = "Todoist server error"
DEFAULT_NETWORK_MESSAGE = "Network error. Please check your internet connection."
DEFAULT_UNKNOWN_MESSAGE = "Unknown error occurred"


class TodoistAPIError(Exception):
    """Base class for every failure talking to the Todoist API.

    ``status_code`` is ``0`` when no HTTP response was involved.
    """

    retryable: bool = False

    def __init__(self, message: str, status_code: int = 0):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class TodoistClientError(TodoistAPIError):
    """HTTP 4xx other than 429. Retrying the same request will not help."""


class TodoistRateLimitError(TodoistAPIError):
    """HTTP 429."""

    retryable = True

    def __init__(self, message: str = DEFAULT_RATE_LIMIT_MESSAGE):
        super().__init__(message, 429)


class TodoistServerError(TodoistAPIError):
    """HTTP 5xx."""

    retryable = True


class TodoistNetworkError(TodoistAPIError):
    """No response was received (connection failure or timeout)."""

    retryable = True

    def __init__(self, message: str = DEFAULT_NETWORK_MESSAGE):
        super().__init__(message, 0)


class TodoistUnknownError(TodoistAPIError):
    """Anything that does not fit the other categories."""

    def __init__(self, message: str = DEFAULT_UNKNOWN_MESSAGE):
        super().__init__(message, 0)


__all__ = [
    "DEFAULT_NETWORK_MESSAGE",
    "DEFAULT_RATE_LIMIT_MESSAGE",
    "DEFAULT_SERVER_MESSAGE",
    "DEFAULT_UNKNOWN_MESSAGE",
    "TodoistAPIError",
    "TodoistClientError",
    "TodoistNetworkError",
    "TodoistRateLimitError",
    "TodoistServerError",
    "TodoistUnknownError",
]
