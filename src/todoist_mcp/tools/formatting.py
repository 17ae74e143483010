"""Render Todoist records as display text for the assistant host."""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from ..todoist.models import Project, Task
from .resolution import AmbiguousMatch
from .schemas import FieldViolation

DETAIL_RULE = "─────────────"


def _view_link(task: Task) -> str:
    return f"View in Todoist: {task.url}"


def format_task_line(task: Task, index: int) -> str:
    """One numbered task line, always ending with its ID."""

    parts = [f"{index}. {task.content}"]
    if task.due:
        parts.append(f"(Due: {task.due.string})")
    if task.priority > 1:
        parts.append(f"[P{task.priority}]")
    if task.labels:
        parts.append(f"[{', '.join(task.labels)}]")
    parts.append(f"[ID: {task.id}]")
    return " ".join(parts)


def format_task_list(tasks: Sequence[Task], total: int, *, query: Optional[str] = None) -> str:
    """Numbered task lines under a header stating the full match count."""

    subject = f"task(s) matching \"{query}\"" if query is not None else "task(s)"
    if total > len(tasks):
        header = f"Found {total} {subject}, showing first {len(tasks)}:"
    else:
        header = f"Found {len(tasks)} {subject}:"

    lines = [format_task_line(task, index) for index, task in enumerate(tasks, start=1)]
    return "\n".join([header, "", *lines])


def _summary_lines(task: Task, *, description: bool = False) -> List[str]:
    lines = [f"ID: {task.id}", f"Content: {task.content}"]
    if description and task.description:
        lines.append(f"Description: {task.description}")
    if task.due:
        lines.append(f"Due: {task.due.string}")
    if task.priority > 1:
        lines.append(f"Priority: {task.priority_name}")
    if task.labels:
        lines.append(f"Labels: {', '.join(task.labels)}")
    return lines


def format_created_task(task: Task) -> str:
    lines = [
        "✓ Task created successfully!",
        "",
        *_summary_lines(task, description=True),
        "",
        _view_link(task),
    ]
    text = "\n".join(lines)
    if task.parent_id:
        text += f"\n\nℹ️  This is a subtask (parent: {task.parent_id})"
    return text


def format_updated_task(task: Task) -> str:
    lines = ["✓ Task updated successfully!", "", *_summary_lines(task), "", _view_link(task)]
    return "\n".join(lines)


def format_task_details(task: Task) -> str:
    """Long-form view used by ``todoist_get_task``."""

    lines = [
        "Task Details:",
        DETAIL_RULE,
        f"ID: {task.id}",
        f"Content: {task.content}",
        f"Completed: {'Yes' if task.is_completed else 'No'}",
    ]

    if task.description:
        lines.extend(["", "Description:", task.description])

    lines.append("")
    if task.due:
        lines.append(f"Due: {task.due.string} ({task.due.date})")
        if task.due.is_recurring:
            lines.append("Recurring: Yes")
    else:
        lines.append("Due: Not set")

    lines.append(f"Priority: {task.priority_name}")
    if task.labels:
        lines.append(f"Labels: {', '.join(task.labels)}")

    lines.append("")
    lines.append(f"Project ID: {task.project_id or 'Unknown'}")
    if task.section_id:
        lines.append(f"Section ID: {task.section_id}")
    if task.parent_id:
        lines.append(f"Parent Task ID: {task.parent_id}")

    lines.extend(
        [
            "",
            f"Created: {task.created_at}",
            f"Comments: {task.comment_count}",
            "",
            _view_link(task),
        ]
    )
    return "\n".join(lines)


def format_project_list(projects: Sequence[Project]) -> str:
    lines = [f"Found {len(projects)} project(s):", ""]
    for index, project in enumerate(projects, start=1):
        parts = [f"{index}. {project.name}"]
        if project.is_favorite:
            parts.append("★")
        if project.is_inbox_project:
            parts.append("(Inbox)")
        if project.is_shared:
            parts.append("(Shared)")
        parts.append(f"[ID: {project.id}]")
        lines.append(" ".join(parts))
    return "\n".join(lines)


def format_ambiguous_parent(name: str, match: AmbiguousMatch) -> str:
    candidates = "\n".join(
        f'{index}. "{task.content}" [ID: {task.id}]'
        for index, task in enumerate(match.shown, start=1)
    )
    text = f'Found {match.total} tasks matching "{name}":\n\n{candidates}'
    if match.remaining > 0:
        text += f"\n\n...and {match.remaining} more"
    return text + "\n\nPlease be more specific or use the task ID instead."


def format_missing_parent(name: str) -> str:
    return (
        f'No parent task found matching "{name}". '
        "Please check the task name or use a task ID instead."
    )


def format_validation_error(violations: Iterable[FieldViolation]) -> str:
    return "Validation error: " + ", ".join(str(violation) for violation in violations)


__all__ = [
    "format_ambiguous_parent",
    "format_created_task",
    "format_missing_parent",
    "format_project_list",
    "format_task_details",
    "format_task_line",
    "format_task_list",
    "format_updated_task",
    "format_validation_error",
]
