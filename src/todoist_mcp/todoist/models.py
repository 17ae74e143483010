"""Domain models mirroring Todoist REST records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, List, Literal, Mapping, Optional

from .errors import TodoistUnknownError

PRIORITY_NAMES = {1: "Normal", 2: "Medium", 3: "High", 4: "Urgent"}


def _optional_str(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def _int(value: Any, default: int = 0) -> int:
    if isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


@dataclass(slots=True)
class Due:
    """Due information attached to a task."""

    date: str
    string: str
    is_recurring: bool = False
    datetime: Optional[str] = None
    timezone: Optional[str] = None

    @classmethod
    def from_api(cls, payload: Optional[Mapping[str, Any]]) -> Optional["Due"]:
        if not payload:
            return None
        date = str(payload.get("date") or "")
        # The human-readable string is always present for display
        string = str(payload.get("string") or date)
        if not string:
            return None
        return cls(
            date=date,
            string=string,
            is_recurring=bool(payload.get("is_recurring", False)),
            datetime=_optional_str(payload.get("datetime")),
            timezone=_optional_str(payload.get("timezone")),
        )


@dataclass(slots=True)
class Task:
    """Representation of a Todoist task."""

    id: str
    content: str
    description: str = ""
    project_id: Optional[str] = None
    section_id: Optional[str] = None
    parent_id: Optional[str] = None
    is_completed: bool = False
    labels: List[str] = field(default_factory=list)
    priority: int = 1
    due: Optional[Due] = None
    order: int = 0
    url: str = ""
    comment_count: int = 0
    created_at: str = ""
    creator_id: Optional[str] = None
    assignee_id: Optional[str] = None
    assigner_id: Optional[str] = None

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> "Task":
        priority = _int(payload.get("priority"), 1)
        if priority not in PRIORITY_NAMES:
            priority = 1
        labels = payload.get("labels") or []
        return cls(
            id=_optional_str(payload.get("id")) or "",
            content=str(payload.get("content") or ""),
            description=str(payload.get("description") or ""),
            project_id=_optional_str(payload.get("project_id")),
            section_id=_optional_str(payload.get("section_id")),
            parent_id=_optional_str(payload.get("parent_id")),
            is_completed=bool(payload.get("is_completed", False)),
            labels=[str(label) for label in labels],
            priority=priority,
            due=Due.from_api(payload.get("due")),
            order=_int(payload.get("order")),
            url=str(payload.get("url") or ""),
            comment_count=_int(payload.get("comment_count")),
            created_at=str(payload.get("created_at") or ""),
            creator_id=_optional_str(payload.get("creator_id")),
            assignee_id=_optional_str(payload.get("assignee_id")),
            assigner_id=_optional_str(payload.get("assigner_id")),
        )

    @property
    def priority_name(self) -> str:
        return PRIORITY_NAMES.get(self.priority, PRIORITY_NAMES[1])

    def matches(self, query: str, *, include_description: bool = False) -> bool:
        """Return True when ``query`` appears in the task text, ignoring case."""

        needle = query.lower()
        if needle in self.content.lower():
            return True
        return include_description and needle in self.description.lower()


@dataclass(slots=True)
class Project:
    """Representation of a Todoist project."""

    id: str
    name: str
    color: str = ""
    parent_id: Optional[str] = None
    order: int = 0
    comment_count: int = 0
    is_shared: bool = False
    is_favorite: bool = False
    is_inbox_project: bool = False
    is_team_inbox: bool = False
    view_style: Literal["list", "board"] = "list"
    url: str = ""

    @classmethod
    def from_api(cls, payload: Mapping[str, Any]) -> "Project":
        view_style = payload.get("view_style")
        return cls(
            id=_optional_str(payload.get("id")) or "",
            name=str(payload.get("name") or ""),
            color=str(payload.get("color") or ""),
            parent_id=_optional_str(payload.get("parent_id")),
            order=_int(payload.get("order")),
            comment_count=_int(payload.get("comment_count")),
            is_shared=bool(payload.get("is_shared", False)),
            is_favorite=bool(payload.get("is_favorite", False)),
            is_inbox_project=bool(payload.get("is_inbox_project", False)),
            is_team_inbox=bool(payload.get("is_team_inbox", False)),
            view_style="board" if view_style == "board" else "list",
            url=str(payload.get("url") or ""),
        )


def tasks_from_api(payload: Any) -> List[Task]:
    """Build tasks from a list response; entries that are not objects are skipped.

    Raises :class:`TodoistUnknownError` when the body is not a list.
    """

    if not isinstance(payload, list):
        raise TodoistUnknownError("Todoist returned a malformed task list")
    return [Task.from_api(item) for item in payload if isinstance(item, Mapping)]


def projects_from_api(payload: Any) -> List[Project]:
    if not isinstance(payload, list):
        raise TodoistUnknownError("Todoist returned a malformed project list")
    return [Project.from_api(item) for item in payload if isinstance(item, Mapping)]


__all__ = [
    "Due",
    "PRIORITY_NAMES",
    "Project",
    "Task",
    "projects_from_api",
    "tasks_from_api",
]
