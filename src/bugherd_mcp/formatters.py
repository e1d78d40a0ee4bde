"""Markdown formatting for BugHerd tool responses.

Every function takes the decoded JSON as returned by the client and
returns the text block sent back to the assistant.
"""
from .models import (
    Comment,
    PaginationMeta,
    Project,
    Task,
    get_priority_name,
    get_status_name,
)

NO_PROJECTS_MESSAGE = "No projects found. Make sure your API key has access to at least one project."
NO_TASKS_MESSAGE = "No tasks found matching the criteria."
NO_COMMENTS_MESSAGE = "No comments on this task."

DESCRIPTION_PREVIEW_LENGTH = 100


def truncate_description(description: str, limit: int = DESCRIPTION_PREVIEW_LENGTH) -> str:
    """Cut a description to ``limit`` characters, adding "..." only if it was longer."""
    if len(description) > limit:
        return description[:limit] + "..."
    return description


def format_tags(tag_names: list[str]) -> str:
    """Comma-join tag names, or "none"."""
    return ", ".join(tag_names) if tag_names else "none"


# ============================================================================
# Projects
# ============================================================================

def format_project(project: Project) -> str:
    """Format a project as a list entry."""
    active = "Yes" if project.get('is_active') else "No"
    return (f"- **{project['name']}** (ID: {project['id']})\n"
            f"  URL: {project.get('devurl')}\n"
            f"  Active: {active}")


def format_project_list(projects: list[Project]) -> str:
    if not projects:
        return NO_PROJECTS_MESSAGE

    project_list = "\n\n".join(format_project(p) for p in projects)
    return f"## BugHerd Projects ({len(projects)})\n\n{project_list}"


# ============================================================================
# Tasks
# ============================================================================

def format_pagination(meta: PaginationMeta, item_count: int) -> str:
    """Format the pagination summary line.

    Falls back to a single page holding ``item_count`` tasks when the
    response has no meta block.
    """
    current_page = meta.get('current_page', 1)
    total_pages = meta.get('total_pages', 1)
    count = meta.get('count', item_count)
    return f"Page {current_page} of {total_pages} ({count} total tasks)"


def format_task_summary(task: Task) -> str:
    """Format a task as a list entry with a truncated description."""
    status = get_status_name(task.get('status_id'))
    priority = get_priority_name(task.get('priority_id'))
    tags = format_tags(task.get('tag_names') or [])
    description = truncate_description(task.get('description') or "")

    return f"""### Task #{task['local_task_id']} (ID: {task['id']})
- **Status:** {status}
- **Priority:** {priority}
- **Tags:** {tags}
- **Created:** {task.get('created_at')}
- **Description:** {description}
- [View in BugHerd]({task.get('admin_link')})"""


def format_task_list(project_id: int, tasks: list[Task], meta: PaginationMeta) -> str:
    if not tasks:
        return NO_TASKS_MESSAGE

    pagination = format_pagination(meta or {}, len(tasks))
    task_list = "\n\n".join(format_task_summary(t) for t in tasks)
    return f"## Tasks for Project {project_id}\n\n{pagination}\n\n{task_list}"


def format_selector_info(task: Task) -> str:
    """Format the element locator captured with the task, or "Not available"."""
    selector_info = task.get('selector_info')
    if not selector_info:
        return "Not available"
    return f"URL: {selector_info.get('url')}\nSelector: `{selector_info.get('selector')}`"


def format_task_detail(task: Task) -> str:
    """Format a single task with full description, screenshot and element info."""
    status = get_status_name(task.get('status_id'))
    priority = get_priority_name(task.get('priority_id'))
    tags = format_tags(task.get('tag_names') or [])

    assigned_to = task.get('assigned_to_id')
    if assigned_to is None:
        assigned_to = "Unassigned"

    screenshot = task.get('screenshot') or "No screenshot available"

    return f"""## Task #{task['local_task_id']}

**Status:** {status}
**Priority:** {priority}
**Tags:** {tags}
**Created:** {task.get('created_at')}
**Updated:** {task.get('updated_at')}
**Requester:** {task.get('requester_email')}
**Assigned To:** {assigned_to}

### Description
{task.get('description') or ''}

### Screenshot
{screenshot}

### Element Info
{format_selector_info(task)}

### Links
- [View in BugHerd]({task.get('admin_link')})"""


# ============================================================================
# Comments
# ============================================================================

def format_comment(comment: Comment) -> str:
    user = comment.get('user') or {}
    return f"**{user.get('display_name', 'Unknown user')}** ({comment.get('created_at')}):\n> {comment.get('text', '')}"


def format_comment_list(task_id: int, comments: list[Comment]) -> str:
    if not comments:
        return NO_COMMENTS_MESSAGE

    comment_list = "\n\n---\n\n".join(format_comment(c) for c in comments)
    return f"## Comments on Task {task_id} ({len(comments)})\n\n{comment_list}"
