"""Todoist REST API package: records, failures and the HTTP client."""

from .client import TodoistClient, classify_response
from .errors import (
    TodoistAPIError,
    TodoistClientError,
    TodoistNetworkError,
    TodoistRateLimitError,
    TodoistServerError,
    TodoistUnknownError,
)
from .models import Due, Project, Task, projects_from_api, tasks_from_api

__all__ = [
    "Due",
    "Project",
    "Task",
    "TodoistAPIError",
    "TodoistClient",
    "TodoistClientError",
    "TodoistNetworkError",
    "TodoistRateLimitError",
    "TodoistServerError",
    "TodoistUnknownError",
    "classify_response",
    "projects_from_api",
    "tasks_from_api",
]
