"""BugHerd response shapes and status/priority lookup tables."""
import enum
from types import MappingProxyType
from typing import Mapping, Optional, TypedDict


class TaskStatus(str, enum.Enum):
    """Task status filter values accepted by the tasks endpoint."""

    BACKLOG = "backlog"
    TODO = "todo"
    DOING = "doing"
    DONE = "done"
    CLOSED = "closed"


class TaskPriority(str, enum.Enum):
    """Task priority filter values accepted by the tasks endpoint."""

    CRITICAL = "critical"
    IMPORTANT = "important"
    NORMAL = "normal"
    MINOR = "minor"


# BugHerd sends status_id / priority_id as integer codes.
# Status code 3 is not used by the API.
STATUS_NAMES: Mapping[int, str] = MappingProxyType({
    0: TaskStatus.BACKLOG.value,
    1: TaskStatus.TODO.value,
    2: TaskStatus.DOING.value,
    4: TaskStatus.DONE.value,
    5: TaskStatus.CLOSED.value,
})

PRIORITY_NAMES: Mapping[int, str] = MappingProxyType({
    1: TaskPriority.CRITICAL.value,
    2: TaskPriority.IMPORTANT.value,
    3: TaskPriority.NORMAL.value,
    4: TaskPriority.MINOR.value,
})

UNKNOWN = "unknown"


def get_status_name(status_id: Optional[int]) -> str:
    """Map a status code to its name, or "unknown" for unmapped codes."""
    return STATUS_NAMES.get(status_id, UNKNOWN)


def get_priority_name(priority_id: Optional[int]) -> str:
    """Map a priority code to its name, or "unknown" for unmapped codes."""
    return PRIORITY_NAMES.get(priority_id, UNKNOWN)


# ============================================================================
# Response shapes (returned unvalidated, typed for readers only)
# ============================================================================

class Project(TypedDict, total=False):
    id: int
    name: str
    devurl: str
    is_active: bool


class SelectorInfo(TypedDict, total=False):
    url: str
    selector: str


class Task(TypedDict, total=False):
    id: int
    local_task_id: int
    status_id: Optional[int]
    priority_id: Optional[int]
    description: str
    tag_names: list[str]
    created_at: str
    updated_at: str
    requester_email: str
    assigned_to_id: Optional[int]
    screenshot: Optional[str]
    selector_info: Optional[SelectorInfo]
    admin_link: str


class CommentUser(TypedDict, total=False):
    id: int
    display_name: str


class Comment(TypedDict, total=False):
    text: str
    created_at: str
    user: CommentUser


class PaginationMeta(TypedDict, total=False):
    current_page: int
    total_pages: int
    count: int


class ProjectsResponse(TypedDict):
    projects: list[Project]


class ProjectResponse(TypedDict):
    project: Project


class TasksResponse(TypedDict, total=False):
    tasks: list[Task]
    meta: PaginationMeta


class TaskResponse(TypedDict):
    task: Task


class CommentsResponse(TypedDict):
    comments: list[Comment]
