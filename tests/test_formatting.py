from todoist_mcp.todoist.models import Due, Project, Task
from todoist_mcp.tools.formatting import (
    format_created_task,
    format_project_list,
    format_task_details,
    format_task_line,
    format_task_list,
    format_validation_error,
)
from todoist_mcp.tools.schemas import FieldViolation


def test_task_line_annotations() -> None:
    task = Task(
        id="42",
        content="Pay rent",
        priority=3,
        labels=["home", "money"],
        due=Due(date="2024-06-01", string="Jun 1"),
    )

    assert format_task_line(task, 1) == "1. Pay rent (Due: Jun 1) [P3] [home, money] [ID: 42]"


def test_task_line_without_annotations() -> None:
    assert format_task_line(Task(id="7", content="Read"), 2) == "2. Read [ID: 7]"


def test_task_list_header_reports_truncation() -> None:
    tasks = [Task(id=str(n), content=f"Task {n}") for n in range(3)]

    text = format_task_list(tasks, 120)

    assert text.startswith("Found 120 task(s), showing first 3:\n\n1. Task 0 [ID: 0]")


def test_search_header_includes_query() -> None:
    text = format_task_list([Task(id="1", content="Buy milk")], 1, query="milk")

    assert text.splitlines()[0] == 'Found 1 task(s) matching "milk":'


def test_created_task_includes_subtask_note() -> None:
    task = Task(
        id="9",
        content="Sub",
        description="details",
        priority=2,
        parent_id="1",
        url="https://todoist.com/showTask?id=9",
    )

    text = format_created_task(task)

    assert text.startswith("✓ Task created successfully!")
    assert "Description: details" in text
    assert "Priority: Medium" in text
    assert "View in Todoist: https://todoist.com/showTask?id=9" in text
    assert text.endswith("ℹ️  This is a subtask (parent: 1)")


def test_task_details_conditional_sections() -> None:
    plain = format_task_details(Task(id="1", content="Plain", project_id="p"))

    assert "Description:" not in plain
    assert "Due: Not set" in plain
    assert "Priority: Normal" in plain
    assert "Section ID" not in plain
    assert "Parent Task ID" not in plain

    rich = format_task_details(
        Task(
            id="2",
            content="Rich",
            description="Long text",
            project_id="p",
            section_id="s",
            parent_id="1",
            is_completed=True,
            due=Due(date="2024-06-07", string="every friday", is_recurring=True),
        )
    )

    assert "Completed: Yes" in rich
    assert "Description:\nLong text" in rich
    assert "Due: every friday (2024-06-07)\nRecurring: Yes" in rich
    assert "Section ID: s" in rich
    assert "Parent Task ID: 1" in rich


def test_project_list_flags() -> None:
    projects = [
        Project(id="1", name="Inbox", is_inbox_project=True),
        Project(id="2", name="Team", is_shared=True, is_favorite=True),
    ]

    assert format_project_list(projects) == (
        "Found 2 project(s):\n\n1. Inbox (Inbox) [ID: 1]\n2. Team ★ (Shared) [ID: 2]"
    )


def test_validation_error_lists_every_violation() -> None:
    text = format_validation_error(
        [FieldViolation("content", "Task content is required"), FieldViolation("", "Cannot do both")]
    )

    assert text == "Validation error: content: Task content is required, Cannot do both"
