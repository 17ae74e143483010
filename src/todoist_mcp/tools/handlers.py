"""Tool handlers: validate, call Todoist, format, return a ``ToolResult``.

Every handler takes the Todoist client and the raw argument bundle and always
returns a :class:`ToolResult`; validation failures, remote failures and
unexpected exceptions all become error-flagged results.
"""

from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Awaitable, Callable, Dict, Mapping, Type
from urllib.parse import quote

from ..todoist.client import TodoistClient
from ..todoist.errors import TodoistAPIError, TodoistUnknownError
from ..todoist.models import Task, projects_from_api, tasks_from_api
from .formatting import (
    format_ambiguous_parent,
    format_created_task,
    format_missing_parent,
    format_project_list,
    format_task_details,
    format_task_list,
    format_updated_task,
    format_validation_error,
)
from .resolution import AmbiguousMatch, NoMatch, resolve_parent
from .results import ToolResult
from .schemas import (
    CompleteTaskInput,
    CreateTaskInput,
    GetTaskInput,
    ListProjectsInput,
    ListTasksInput,
    SearchTasksInput,
    ToolInput,
    UpdateTaskInput,
    parse_arguments,
)

logger = logging.getLogger(__name__)

ToolHandler = Callable[[TodoistClient, Any], Awaitable[ToolResult]]


def tool_handler(
    model: Type[ToolInput], action: str
) -> Callable[[Callable[..., Awaitable[ToolResult]]], ToolHandler]:
    """Wrap a handler with argument validation and error containment.

    ``action`` completes the failure message, e.g. ``"creating task"`` gives
    ``"Error creating task: <message>"``.
    """

    def decorator(func: Callable[..., Awaitable[ToolResult]]) -> ToolHandler:
        @wraps(func)
        async def wrapper(client: TodoistClient, arguments: Any = None) -> ToolResult:
            parsed = parse_arguments(model, arguments)
            if not parsed.ok:
                logger.debug("Rejected arguments for %s: %s", func.__name__, parsed.violations)
                return ToolResult.failure(format_validation_error(parsed.violations))

            try:
                return await func(client, parsed.value)
            except TodoistAPIError as exc:
                logger.error(
                    "Error %s: %s (status=%s, retryable=%s)",
                    action,
                    exc.message,
                    exc.status_code,
                    exc.retryable,
                )
                return ToolResult.failure(f"Error {action}: {exc.message}", error=exc)
            except Exception as exc:
                logger.exception("Unexpected error %s", action)
                return ToolResult.failure(f"Error {action}: {exc}")

        return wrapper

    return decorator


def _task_path(task_id: str, *actions: str) -> str:
    # The ID is a single path segment
    return "/".join(["/tasks", quote(task_id, safe=""), *actions])


def _task_record(payload: Any) -> Task:
    if not isinstance(payload, Mapping):
        raise TodoistUnknownError("Todoist returned an empty or malformed task record")
    return Task.from_api(payload)


@tool_handler(CreateTaskInput, "creating task")
async def create_task(client: TodoistClient, params: CreateTaskInput) -> ToolResult:
    payload: Dict[str, Any] = {"content": params.content}
    if params.description:
        payload["description"] = params.description
    if params.project_id:
        payload["project_id"] = params.project_id
    if params.section_id:
        payload["section_id"] = params.section_id
    if params.priority is not None:
        payload["priority"] = params.priority
    if params.labels is not None:
        payload["labels"] = list(params.labels)
    # Todoist parses natural-language due expressions itself
    if params.due_date:
        payload["due_string"] = params.due_date

    parent_id = params.parent_id
    if params.parent_task_name:
        logger.debug("Searching for parent task: %r", params.parent_task_name)
        candidates = tasks_from_api(await client.get("/tasks"))
        match = resolve_parent(candidates, params.parent_task_name)
        if isinstance(match, NoMatch):
            return ToolResult.failure(format_missing_parent(params.parent_task_name))
        if isinstance(match, AmbiguousMatch):
            return ToolResult.failure(format_ambiguous_parent(params.parent_task_name, match))
        parent_id = match.task.id
        logger.debug("Found parent task: %s (%s)", match.task.content, parent_id)

    if parent_id:
        payload["parent_id"] = parent_id

    logger.debug("Creating task with params: %s", payload)
    task = _task_record(await client.post("/tasks", payload))
    return ToolResult.success(format_created_task(task))


@tool_handler(ListTasksInput, "listing tasks")
async def list_tasks(client: TodoistClient, params: ListTasksInput) -> ToolResult:
    query: Dict[str, str] = {}
    for key in ("project_id", "section_id", "label", "filter"):
        value = getattr(params, key)
        if value:
            query[key] = value

    tasks = tasks_from_api(await client.get("/tasks", query))
    shown = tasks[: params.limit]
    if not shown:
        return ToolResult.success("No tasks found.")
    return ToolResult.success(format_task_list(shown, len(tasks)))


@tool_handler(GetTaskInput, "getting task")
async def get_task(client: TodoistClient, params: GetTaskInput) -> ToolResult:
    task = _task_record(await client.get(_task_path(params.task_id)))
    return ToolResult.success(format_task_details(task))


@tool_handler(UpdateTaskInput, "updating task")
async def update_task(client: TodoistClient, params: UpdateTaskInput) -> ToolResult:
    changes: Dict[str, Any] = {}
    if params.content is not None:
        changes["content"] = params.content
    if params.description is not None:
        changes["description"] = params.description
    if params.priority is not None:
        changes["priority"] = params.priority
    if params.labels is not None:
        changes["labels"] = list(params.labels)
    if params.due_date is not None:
        changes["due_string"] = params.due_date

    logger.debug("Updating task %s with: %s", params.task_id, changes)
    task = _task_record(await client.post(_task_path(params.task_id), changes))
    return ToolResult.success(format_updated_task(task))


@tool_handler(CompleteTaskInput, "completing task")
async def complete_task(client: TodoistClient, params: CompleteTaskInput) -> ToolResult:
    await client.post(_task_path(params.task_id, "close"), {})
    return ToolResult.success(f"✓ Task {params.task_id} marked as completed!")


@tool_handler(ListProjectsInput, "listing projects")
async def list_projects(client: TodoistClient, params: ListProjectsInput) -> ToolResult:
    projects = projects_from_api(await client.get("/projects"))
    if not projects:
        return ToolResult.success("No projects found.")
    return ToolResult.success(format_project_list(projects))


@tool_handler(SearchTasksInput, "searching tasks")
async def search_tasks(client: TodoistClient, params: SearchTasksInput) -> ToolResult:
    logger.debug("Searching tasks for: %r", params.query)
    tasks = tasks_from_api(await client.get("/tasks"))
    matches = [task for task in tasks if task.matches(params.query, include_description=True)]
    shown = matches[: params.limit]
    if not shown:
        return ToolResult.success(f'No tasks found matching "{params.query}".')
    return ToolResult.success(format_task_list(shown, len(matches), query=params.query))


__all__ = [
    "ToolHandler",
    "complete_task",
    "create_task",
    "get_task",
    "list_projects",
    "list_tasks",
    "search_tasks",
    "tool_handler",
    "update_task",
]
