"""Input models for the Todoist tools.

Every tool validates its raw argument bundle through :func:`parse_arguments`
before any network call. Parsing never raises: it returns a
:class:`ParsedArguments` carrying either the frozen model instance or every
violated constraint as a :class:`FieldViolation`.

The same models produce the JSON-Schema advertised in the tool catalog via
:func:`tool_input_schema`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import (
    Annotated,
    Any,
    ClassVar,
    Dict,
    Generic,
    List,
    Mapping,
    Optional,
    Type,
    TypeVar,
)

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictInt,
    StrictStr,
    StringConstraints,
    ValidationError,
    model_validator,
)
from pydantic_core import PydanticCustomError

DEFAULT_LIMIT = 50
MAX_LIMIT = 200

NonEmptyStr = Annotated[str, StringConstraints(strict=True, min_length=1)]
Priority = Annotated[StrictInt, Field(ge=1, le=4)]
Limit = Annotated[StrictInt, Field(gt=0, le=MAX_LIMIT)]


class ToolInput(BaseModel):
    """Base class for tool inputs: immutable, unknown keys dropped.

    ``required_messages`` replaces pydantic's wording when a required text
    field is missing or empty.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    required_messages: ClassVar[Dict[str, str]] = {}


class CreateTaskInput(ToolInput):
    required_messages: ClassVar[Dict[str, str]] = {"content": "Task content is required"}

    content: NonEmptyStr = Field(description="The task content/title")
    description: Optional[StrictStr] = Field(default=None, description="Optional task description")
    project_id: Optional[StrictStr] = Field(
        default=None, description="Optional project ID to add the task to"
    )
    section_id: Optional[StrictStr] = Field(
        default=None, description="Optional section ID within the project"
    )
    due_date: Optional[StrictStr] = Field(
        default=None,
        description=(
            'Due date in natural language (e.g., "tomorrow", "next Monday") or YYYY-MM-DD format'
        ),
    )
    priority: Optional[Priority] = Field(
        default=None,
        description="Priority level: 1 (normal), 2 (medium), 3 (high), 4 (urgent)",
        json_schema_extra={"enum": [1, 2, 3, 4]},
    )
    labels: Optional[List[StrictStr]] = Field(default=None, description="Array of label names")
    parent_id: Optional[StrictStr] = Field(
        default=None, description="Parent task ID to create this as a subtask"
    )
    parent_task_name: Optional[StrictStr] = Field(
        default=None,
        description=(
            "Parent task name to search for (alternative to parent_id). "
            "The tool will search for tasks matching this name."
        ),
    )

    @model_validator(mode="after")
    def _check_parent_reference(self) -> "CreateTaskInput":
        if self.parent_id and self.parent_task_name:
            raise PydanticCustomError(
                "parent_conflict",
                "Cannot specify both parent_id and parent_task_name. Use one or the other.",
            )
        return self


class ListTasksInput(ToolInput):
    project_id: Optional[StrictStr] = Field(default=None, description="Filter by project ID")
    section_id: Optional[StrictStr] = Field(default=None, description="Filter by section ID")
    label: Optional[StrictStr] = Field(default=None, description="Filter by label name")
    filter: Optional[StrictStr] = Field(
        default=None,
        description='Todoist filter query (e.g., "today", "overdue", "p1")',
    )
    limit: Limit = Field(
        default=DEFAULT_LIMIT,
        description="Maximum number of tasks to return (default: 50, max: 200)",
    )


class GetTaskInput(ToolInput):
    required_messages: ClassVar[Dict[str, str]] = {"task_id": "Task ID is required"}

    task_id: NonEmptyStr = Field(description="The task ID to retrieve")


class UpdateTaskInput(ToolInput):
    required_messages: ClassVar[Dict[str, str]] = {"task_id": "Task ID is required"}

    task_id: NonEmptyStr = Field(description="The task ID to update")
    content: Optional[StrictStr] = Field(default=None, description="New task content")
    description: Optional[StrictStr] = Field(default=None, description="New task description")
    due_date: Optional[StrictStr] = Field(
        default=None, description="New due date (natural language or YYYY-MM-DD)"
    )
    priority: Optional[Priority] = Field(
        default=None,
        description="New priority level (1-4)",
        json_schema_extra={"enum": [1, 2, 3, 4]},
    )
    labels: Optional[List[StrictStr]] = Field(default=None, description="New labels array")


class CompleteTaskInput(ToolInput):
    required_messages: ClassVar[Dict[str, str]] = {"task_id": "Task ID is required"}

    task_id: NonEmptyStr = Field(description="The task ID to complete")


class ListProjectsInput(ToolInput):
    pass


class SearchTasksInput(ToolInput):
    required_messages: ClassVar[Dict[str, str]] = {"query": "Search query is required"}

    query: NonEmptyStr = Field(
        description="Text to search for in task content and description"
    )
    limit: Limit = Field(
        default=DEFAULT_LIMIT,
        description="Maximum number of tasks to return (default: 50, max: 200)",
    )


InputT = TypeVar("InputT", bound=ToolInput)


@dataclass(frozen=True, slots=True)
class FieldViolation:
    """One violated constraint. ``path`` is empty for model-level rules."""

    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}" if self.path else self.message


@dataclass(frozen=True, slots=True)
class ParsedArguments(Generic[InputT]):
    value: Optional[InputT] = None
    violations: tuple[FieldViolation, ...] = ()

    @property
    def ok(self) -> bool:
        return self.value is not None and not self.violations


_REQUIRED_ERROR_TYPES = frozenset({"missing", "string_too_short"})


def _violations_from(
    model: Type[ToolInput], exc: ValidationError
) -> tuple[FieldViolation, ...]:
    violations = []
    for error in exc.errors(include_url=False):
        path = ".".join(str(part) for part in error["loc"])
        message = error["msg"]
        if error["type"] in _REQUIRED_ERROR_TYPES:
            message = model.required_messages.get(path, message)
        violations.append(FieldViolation(path=path, message=message))
    return tuple(violations)


def parse_arguments(model: Type[InputT], arguments: Any) -> ParsedArguments[InputT]:
    """Validate an untyped argument bundle against ``model``."""

    if arguments is None:
        arguments = {}
    if not isinstance(arguments, Mapping):
        return ParsedArguments(
            violations=(FieldViolation("", "Arguments must be an object"),)
        )

    try:
        value = model.model_validate(dict(arguments))
    except ValidationError as exc:
        return ParsedArguments(violations=_violations_from(model, exc))
    return ParsedArguments(value=value)


def _simplify(schema: Any) -> Any:
    """Drop pydantic titles and collapse ``Optional[X]`` into ``X``."""

    if isinstance(schema, list):
        return [_simplify(item) for item in schema]
    if not isinstance(schema, dict):
        return schema

    any_of = schema.get("anyOf")
    if isinstance(any_of, list):
        non_null = [item for item in any_of if item != {"type": "null"}]
        if len(non_null) == 1 and len(non_null) < len(any_of):
            merged = {key: value for key, value in schema.items() if key != "anyOf"}
            merged.update(non_null[0])
            if merged.get("default", ...) is None:
                merged.pop("default")
            return _simplify(merged)

    return {key: _simplify(value) for key, value in schema.items() if key != "title"}


def tool_input_schema(model: Type[ToolInput]) -> Dict[str, Any]:
    """Return the JSON-Schema object advertised for a tool's input."""

    schema = _simplify(model.model_json_schema())
    schema.setdefault("properties", {})
    schema["type"] = "object"
    if not schema.get("required"):
        schema.pop("required", None)
    return schema


__all__ = [
    "CompleteTaskInput",
    "CreateTaskInput",
    "DEFAULT_LIMIT",
    "FieldViolation",
    "GetTaskInput",
    "ListProjectsInput",
    "ListTasksInput",
    "MAX_LIMIT",
    "ParsedArguments",
    "SearchTasksInput",
    "ToolInput",
    "UpdateTaskInput",
    "parse_arguments",
    "tool_input_schema",
]
