import pathlib
import sys
from typing import Any, Callable, Dict, List, Optional

import pytest

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC_DIR = PROJECT_ROOT / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


class FakeTodoistClient:
    """In-memory stand-in for ``TodoistClient`` that records every call.

    ``responses`` maps ``(method, path)`` to a body or to an exception instance
    that is raised instead.
    """

    def __init__(self, responses: Optional[Dict[tuple, Any]] = None):
        self.responses: Dict[tuple, Any] = dict(responses or {})
        self.calls: List[tuple] = []

    def _respond(self, method: str, path: str) -> Any:
        response = self.responses.get((method, path))
        if isinstance(response, BaseException):
            raise response
        return response

    async def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        self.calls.append(("GET", path, params))
        return self._respond("GET", path)

    async def post(self, path: str, json: Optional[Dict[str, Any]] = None) -> Any:
        self.calls.append(("POST", path, json))
        return self._respond("POST", path)

    async def delete(self, path: str) -> None:
        self.calls.append(("DELETE", path, None))
        self._respond("DELETE", path)


def build_task_payload(**overrides: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "id": "1001",
        "project_id": "2001",
        "section_id": None,
        "parent_id": None,
        "content": "Buy milk",
        "description": "",
        "is_completed": False,
        "labels": [],
        "priority": 1,
        "due": None,
        "order": 1,
        "url": "https://todoist.com/showTask?id=1001",
        "comment_count": 0,
        "created_at": "2024-05-01T10:00:00.000000Z",
        "creator_id": "3001",
        "assignee_id": None,
        "assigner_id": None,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def fake_client() -> FakeTodoistClient:
    return FakeTodoistClient()


@pytest.fixture
def task_payload() -> Callable[..., Dict[str, Any]]:
    return build_task_payload
