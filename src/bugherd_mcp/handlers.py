"""MCP tool handlers for BugHerd.

All handlers follow the same pattern:
- Accept: raw arguments dict and an httpx.AsyncClient scoped to the call
- Validate arguments with the tool's schema model
- Call the API client and format the result with ``formatters``
- Return: list with exactly one TextContent

Handlers raise on failure. Turning errors into tool results is the
server's job.
"""
import logging
from typing import Any, Awaitable, Callable, Optional

import httpx
from mcp.types import TextContent

from . import client as api
from . import formatters
from .schemas import ListProjectsArgs, ListTasksArgs, TaskRefArgs, parse_arguments

logger = logging.getLogger("bugherd-mcp.handlers")

Handler = Callable[[Optional[dict[str, Any]], httpx.AsyncClient], Awaitable[list[TextContent]]]


def _text(text: str) -> list[TextContent]:
    return [TextContent(type="text", text=text)]


async def handle_list_projects(arguments: Optional[dict], client: httpx.AsyncClient) -> list[TextContent]:
    """List every project the API key can see."""
    parse_arguments(ListProjectsArgs, arguments)
    result = await api.list_projects(client)
    projects = result.get('projects', [])
    logger.info(f"Successfully listed {len(projects)} projects")

    return _text(formatters.format_project_list(projects))


async def handle_list_tasks(arguments: Optional[dict], client: httpx.AsyncClient) -> list[TextContent]:
    """List tasks for a project, optionally filtered.

    Filters: status, priority, tag, assigned_to_id, page. Unset filters
    are not sent to the API.
    """
    args = parse_arguments(ListTasksArgs, arguments)
    result = await api.list_tasks(
        client,
        args.project_id,
        status=args.status,
        priority=args.priority,
        tag=args.tag,
        assigned_to_id=args.assigned_to_id,
        page=args.page,
    )
    tasks = result.get('tasks', [])
    meta = result.get('meta') or {}
    logger.info(f"Successfully listed {len(tasks)} tasks for project {args.project_id}")

    return _text(formatters.format_task_list(args.project_id, tasks, meta))


async def handle_get_task(arguments: Optional[dict], client: httpx.AsyncClient) -> list[TextContent]:
    """Get one task with its full description, screenshot and element info."""
    args = parse_arguments(TaskRefArgs, arguments)
    result = await api.get_task(client, args.project_id, args.task_id)
    task = result['task']
    logger.info(f"Successfully retrieved task {args.task_id} in project {args.project_id}")

    return _text(formatters.format_task_detail(task))


async def handle_list_comments(arguments: Optional[dict], client: httpx.AsyncClient) -> list[TextContent]:
    """List the comments on a task."""
    args = parse_arguments(TaskRefArgs, arguments)
    result = await api.list_comments(client, args.project_id, args.task_id)
    comments = result.get('comments', [])
    logger.info(f"Successfully listed {len(comments)} comments for task {args.task_id}")

    return _text(formatters.format_comment_list(args.task_id, comments))


HANDLERS: dict[str, Handler] = {
    "bugherd_list_projects": handle_list_projects,
    "bugherd_list_tasks": handle_list_tasks,
    "bugherd_get_task": handle_get_task,
    "bugherd_list_comments": handle_list_comments,
}
