"""Todoist task management over the Model Context Protocol.

Submodules are imported on demand; importing the package does not load the
MCP server or read configuration.
"""

__version__ = "1.0.0"

__all__ = ["__version__"]
