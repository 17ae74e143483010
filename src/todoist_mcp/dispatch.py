"""Tool catalog and routing of tool calls to their handlers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Final, List, Optional, Type

from .todoist.client import TodoistClient
from .tools import handlers
from .tools.handlers import ToolHandler
from .tools.results import ToolResult
from .tools.schemas import (
    CompleteTaskInput,
    CreateTaskInput,
    GetTaskInput,
    ListProjectsInput,
    ListTasksInput,
    SearchTasksInput,
    ToolInput,
    UpdateTaskInput,
    tool_input_schema,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ToolSpec:
    name: str
    description: str
    input_model: Type[ToolInput]
    handler: ToolHandler

    def definition(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "inputSchema": tool_input_schema(self.input_model),
        }


TOOLS: Final[tuple[ToolSpec, ...]] = (
    ToolSpec(
        name="todoist_create_task",
        description=(
            "Create a new task in Todoist with optional project, due date, priority, "
            "labels, and parent task for subtasks"
        ),
        input_model=CreateTaskInput,
        handler=handlers.create_task,
    ),
    ToolSpec(
        name="todoist_list_tasks",
        description=(
            "List active tasks with optional filters for project, section, label, "
            "or custom Todoist filter"
        ),
        input_model=ListTasksInput,
        handler=handlers.list_tasks,
    ),
    ToolSpec(
        name="todoist_get_task",
        description="Get detailed information about a specific task including all metadata",
        input_model=GetTaskInput,
        handler=handlers.get_task,
    ),
    ToolSpec(
        name="todoist_update_task",
        description=(
            "Update an existing task with new content, description, due date, "
            "priority, or labels"
        ),
        input_model=UpdateTaskInput,
        handler=handlers.update_task,
    ),
    ToolSpec(
        name="todoist_complete_task",
        description="Mark a task as completed",
        input_model=CompleteTaskInput,
        handler=handlers.complete_task,
    ),
    ToolSpec(
        name="todoist_list_projects",
        description="List all projects in Todoist, including inbox and shared projects",
        input_model=ListProjectsInput,
        handler=handlers.list_projects,
    ),
    ToolSpec(
        name="todoist_search_tasks",
        description="Search for tasks by text in their content or description",
        input_model=SearchTasksInput,
        handler=handlers.search_tasks,
    ),
)

_TOOLS_BY_NAME: Final[Dict[str, ToolSpec]] = {spec.name: spec for spec in TOOLS}


def get_tool(name: str) -> Optional[ToolSpec]:
    return _TOOLS_BY_NAME.get(name)


def list_tool_definitions() -> List[Dict[str, Any]]:
    """Return the advertised catalog: name, description and input schema per tool."""

    return [spec.definition() for spec in TOOLS]


async def dispatch_tool(
    client: TodoistClient,
    name: str,
    arguments: Optional[Dict[str, Any]] = None,
) -> ToolResult:
    """Route a tool call by name. Never raises."""

    logger.debug("Tool called: %s", name)

    spec = get_tool(name)
    if spec is None:
        logger.warning("Unknown tool requested: %s", name)
        return ToolResult.failure(f"Unknown tool: {name}")

    try:
        return await spec.handler(client, arguments)
    except Exception as exc:
        logger.exception("Error executing tool %s", name)
        return ToolResult.failure(f"Error: {exc}")


__all__ = ["TOOLS", "ToolSpec", "dispatch_tool", "get_tool", "list_tool_definitions"]
