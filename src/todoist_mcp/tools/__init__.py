"""Todoist tool layer: input validation, handlers, formatting and results."""

from .handlers import (
    complete_task,
    create_task,
    get_task,
    list_projects,
    list_tasks,
    search_tasks,
    update_task,
)
from .results import TextBlock, ToolResult

__all__ = [
    "TextBlock",
    "ToolResult",
    "complete_task",
    "create_task",
    "get_task",
    "list_projects",
    "list_tasks",
    "search_tasks",
    "update_task",
]
