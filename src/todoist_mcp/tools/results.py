"""Uniform result envelope returned by every tool."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal, Optional

from ..todoist.errors import TodoistAPIError


@dataclass(frozen=True, slots=True)
class TextBlock:
    text: str
    type: Literal["text"] = "text"


@dataclass(slots=True)
class ToolResult:
    """Ordered text blocks plus an error flag.

    ``error`` keeps the classified remote failure for in-process callers that
    want to inspect ``retryable``; it is not part of the wire payload.
    """

    content: List[TextBlock]
    is_error: bool = False
    error: Optional[TodoistAPIError] = field(default=None, repr=False, compare=False)

    @classmethod
    def success(cls, text: str) -> "ToolResult":
        return cls(content=[TextBlock(text)])

    @classmethod
    def failure(cls, text: str, *, error: Optional[TodoistAPIError] = None) -> "ToolResult":
        return cls(content=[TextBlock(text)], is_error=True, error=error)

    @property
    def text(self) -> str:
        return "\n".join(block.text for block in self.content)

    @property
    def retryable(self) -> bool:
        return bool(self.error is not None and self.error.retryable)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "content": [{"type": block.type, "text": block.text} for block in self.content]
        }
        if self.is_error:
            payload["isError"] = True
        return payload


__all__ = ["TextBlock", "ToolResult"]
