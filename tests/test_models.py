import pytest

from todoist_mcp.todoist.errors import TodoistUnknownError
from todoist_mcp.todoist.models import Due, Project, Task, projects_from_api, tasks_from_api


def test_task_from_api_parses_full_record(task_payload) -> None:
    task = Task.from_api(
        task_payload(
            priority=4,
            labels=["work", "urgent"],
            due={
                "date": "2024-06-01",
                "string": "every friday",
                "is_recurring": True,
                "datetime": "2024-06-01T09:00:00Z",
                "timezone": "Europe/Berlin",
            },
            section_id="77",
        )
    )

    assert task.id == "1001"
    assert task.priority == 4
    assert task.priority_name == "Urgent"
    assert task.labels == ["work", "urgent"]
    assert task.section_id == "77"
    assert task.due == Due(
        date="2024-06-01",
        string="every friday",
        is_recurring=True,
        datetime="2024-06-01T09:00:00Z",
        timezone="Europe/Berlin",
    )


def test_task_from_api_tolerates_missing_fields() -> None:
    task = Task.from_api({"id": 5, "content": "Minimal"})

    assert task.id == "5"
    assert task.description == ""
    assert task.labels == []
    assert task.priority == 1
    assert task.due is None
    assert task.comment_count == 0


def test_out_of_range_priority_falls_back_to_normal() -> None:
    assert Task.from_api({"id": "1", "content": "x", "priority": 9}).priority == 1


def test_due_without_string_uses_date() -> None:
    due = Due.from_api({"date": "2024-06-01", "is_recurring": False})

    assert due is not None
    assert due.string == "2024-06-01"


def test_task_matches_is_case_insensitive() -> None:
    task = Task(id="1", content="Call Bob", description="buy flowers")

    assert task.matches("call")
    assert not task.matches("BUY")
    assert task.matches("BUY", include_description=True)


def test_project_from_api_defaults_view_style() -> None:
    project = Project.from_api(
        {"id": "9", "name": "Inbox", "is_inbox_project": True, "view_style": "calendar"}
    )

    assert project.is_inbox_project is True
    assert project.view_style == "list"


def test_task_list_skips_entries_that_are_not_objects() -> None:
    tasks = tasks_from_api([{"id": "1", "content": "a"}, "junk"])

    assert [task.id for task in tasks] == ["1"]


@pytest.mark.parametrize(
    "payload",
    [None, {"results": [{"id": "1", "content": "Plan"}], "next_cursor": None}, "oops"],
)
def test_non_list_bodies_are_rejected(payload) -> None:
    with pytest.raises(TodoistUnknownError):
        tasks_from_api(payload)
    with pytest.raises(TodoistUnknownError):
        projects_from_api(payload)


def test_null_ids_become_empty_strings() -> None:
    assert Task.from_api({"id": None, "content": "x"}).id == ""
    assert Project.from_api({"id": None, "name": "x"}).id == ""
