"""Model Context Protocol server exposing Todoist task management tools.

Tools provided
--------------
* ``todoist_create_task`` – create a task, optionally as a subtask found by
  parent ID or by parent name.
* ``todoist_list_tasks`` – list active tasks filtered by project, section,
  label or a Todoist filter query.
* ``todoist_get_task`` – detailed view of one task.
* ``todoist_update_task`` – partial update of content, description, due date,
  priority or labels.
* ``todoist_complete_task`` – close a task.
* ``todoist_list_projects`` – list projects including inbox and shared ones.
* ``todoist_search_tasks`` – case-insensitive text search over task content
  and description.

Required environment variables
------------------------------
* ``TODOIST_API_TOKEN`` – personal API token from
  https://todoist.com/app/settings/integrations/developer.
* ``LOG_LEVEL`` (optional) – ``debug``, ``info``, ``warn``, ``error`` (default)
  or ``off``. Logs go to stderr because stdout carries the MCP protocol.

The server runs over stdio: ``python -m todoist_mcp`` or ``todoist-mcp-server``.
"""

from __future__ import annotations

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict, List, Optional

import mcp.types as types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server
from pydantic import ValidationError

from . import __version__
from .config import TODOIST_TOKEN_URL, get_settings
from .dispatch import dispatch_tool, list_tool_definitions
from .logging_settings import configure_logging
from .todoist.client import TodoistClient
from .tools.results import ToolResult

logger = logging.getLogger(__name__)

SERVER_NAME = "todoist-mcp-server"


@asynccontextmanager
async def _lifespan(_server: Server) -> AsyncIterator[Dict[str, Any]]:
    """Own one Todoist client for the lifetime of the session."""

    async with TodoistClient.from_settings(get_settings()) as client:
        logger.debug("Todoist client initialized for %s", client.base_url)
        yield {"client": client}


server: Server = Server(SERVER_NAME, version=__version__, lifespan=_lifespan)


def to_call_tool_result(result: ToolResult) -> types.CallToolResult:
    return types.CallToolResult(
        content=[types.TextContent(type="text", text=block.text) for block in result.content],
        isError=result.is_error,
    )


def _client_from_context() -> TodoistClient:
    return server.request_context.lifespan_context["client"]


@server.list_tools()
async def handle_list_tools() -> List[types.Tool]:
    return [
        types.Tool(
            name=definition["name"],
            description=definition["description"],
            inputSchema=definition["inputSchema"],
        )
        for definition in list_tool_definitions()
    ]


# Input validation happens in the tool layer so callers get field-qualified messages
@server.call_tool(validate_input=False)
async def handle_call_tool(
    name: str, arguments: Optional[Dict[str, Any]] = None
) -> types.CallToolResult:
    result = await dispatch_tool(_client_from_context(), name, arguments)
    return to_call_tool_result(result)


async def serve() -> None:
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Todoist MCP server started")
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def run() -> None:  # pragma: no cover - integration entrypoint
    """Validate configuration, configure logging and serve over stdio."""

    try:
        settings = get_settings()
    except ValidationError as exc:
        configure_logging("error")
        logger.error("TODOIST_API_TOKEN environment variable is required")
        logger.error("Get your API token from: %s", TODOIST_TOKEN_URL)
        raise SystemExit(1) from exc

    configure_logging(settings.log_level)
    asyncio.run(serve())


if __name__ == "__main__":  # pragma: no cover - CLI helper
    run()


__all__ = [
    "SERVER_NAME",
    "handle_call_tool",
    "handle_list_tools",
    "run",
    "serve",
    "server",
    "to_call_tool_result",
]
