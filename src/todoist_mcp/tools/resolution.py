"""Resolve a parent task from a free-text name."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple, Union

from ..todoist.models import Task

MAX_CANDIDATES_SHOWN = 5


@dataclass(frozen=True, slots=True)
class UniqueMatch:
    task: Task


@dataclass(frozen=True, slots=True)
class NoMatch:
    pass


@dataclass(frozen=True, slots=True)
class AmbiguousMatch:
    shown: Tuple[Task, ...]
    total: int

    @property
    def remaining(self) -> int:
        return self.total - len(self.shown)


ParentMatch = Union[UniqueMatch, NoMatch, AmbiguousMatch]


def resolve_parent(candidates: Sequence[Task], query: str) -> ParentMatch:
    """Match ``query`` against task content, ignoring case.

    This scans every candidate; callers pass the full task list.
    """

    matches = [task for task in candidates if task.matches(query)]
    if not matches:
        return NoMatch()
    if len(matches) == 1:
        return UniqueMatch(matches[0])
    return AmbiguousMatch(shown=tuple(matches[:MAX_CANDIDATES_SHOWN]), total=len(matches))


__all__ = [
    "AmbiguousMatch",
    "MAX_CANDIDATES_SHOWN",
    "NoMatch",
    "ParentMatch",
    "UniqueMatch",
    "resolve_parent",
]
