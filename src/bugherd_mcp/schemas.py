"""Pydantic schemas for tool argument validation."""
from typing import Any, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictInt, ValidationError

from .models import TaskStatus, TaskPriority


ArgsModel = TypeVar("ArgsModel", bound=BaseModel)


class InvalidArgumentsError(ValueError):
    """Raised when tool arguments do not match the tool's input schema."""

    def __init__(self, message: str, errors: list[dict]):
        super().__init__(message)
        self.errors = errors


class ListProjectsArgs(BaseModel):
    """Arguments for bugherd_list_projects (none)."""

    model_config = ConfigDict(extra="ignore")


class ListTasksArgs(BaseModel):
    """Arguments for bugherd_list_tasks.

    Integer fields are strict: numeric strings, booleans and floats are
    rejected, matching the "integer" type the tool advertises.
    """

    project_id: StrictInt = Field(..., gt=0, description="The BugHerd project ID")
    status: Optional[TaskStatus] = Field(None, description="Filter by task status")
    priority: Optional[TaskPriority] = Field(None, description="Filter by priority")
    tag: Optional[str] = Field(None, description="Filter by tag name")
    assigned_to_id: Optional[StrictInt] = Field(None, gt=0, description="Filter by assignee user ID")
    page: Optional[StrictInt] = Field(None, ge=1, description="Page number for pagination")

    model_config = ConfigDict(extra="ignore", use_enum_values=True)


class TaskRefArgs(BaseModel):
    """Arguments identifying a single task (bugherd_get_task, bugherd_list_comments)."""

    project_id: StrictInt = Field(..., gt=0, description="The BugHerd project ID")
    task_id: StrictInt = Field(..., gt=0, description="The task ID")

    model_config = ConfigDict(extra="ignore")


def parse_arguments(model: Type[ArgsModel], arguments: Optional[dict[str, Any]]) -> ArgsModel:
    """Validate raw tool arguments against a schema model.

    Raises:
        InvalidArgumentsError: One entry per failing field, formatted as
            ``field: message``.
    """
    try:
        return model.model_validate(arguments or {})
    except ValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'arguments'}: {err['msg']}"
            for err in e.errors()
        )
        raise InvalidArgumentsError(f"Invalid arguments: {details}", e.errors()) from e
