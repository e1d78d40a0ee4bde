"""MCP tool definitions for BugHerd.

This module is the single list of tools the server advertises. Argument
validation for each tool lives in ``schemas``; keep the two in step.
"""

from mcp.types import Tool

from .models import TaskStatus, TaskPriority


PROJECT_ID_PROPERTY = {
    "type": "integer",
    "description": "The BugHerd project ID"
}


def get_tools() -> list[Tool]:
    """Get the list of all BugHerd MCP tools."""
    return [
        Tool(
            name="bugherd_list_projects",
            description="List all BugHerd projects accessible to the authenticated user. "
                       "Returns project names, URLs, and IDs.",
            inputSchema={
                "type": "object",
                "properties": {},
                "required": []
            }
        ),
        Tool(
            name="bugherd_list_tasks",
            description="List tasks (bugs/feedback) for a specific BugHerd project. "
                       "Can filter by status, priority, tag, or assignee.",
            inputSchema={
                "type": "object",
                "properties": {
                    "project_id": PROJECT_ID_PROPERTY,
                    "status": {
                        "type": "string",
                        "enum": [s.value for s in TaskStatus],
                        "description": "Filter by task status"
                    },
                    "priority": {
                        "type": "string",
                        "enum": [p.value for p in TaskPriority],
                        "description": "Filter by priority"
                    },
                    "tag": {
                        "type": "string",
                        "description": "Filter by tag name"
                    },
                    "assigned_to_id": {
                        "type": "integer",
                        "description": "Filter by the ID of the assigned user"
                    },
                    "page": {
                        "type": "integer",
                        "minimum": 1,
                        "description": "Page number for pagination (default: 1)"
                    }
                },
                "required": ["project_id"]
            }
        ),
        Tool(
            name="bugherd_get_task",
            description="Get detailed information about a specific task including description, "
                       "screenshot URL, selector info, and metadata.",
            inputSchema={
                "type": "object",
                "properties": {
                    "project_id": PROJECT_ID_PROPERTY,
                    "task_id": {
                        "type": "integer",
                        "description": "The task ID to retrieve"
                    }
                },
                "required": ["project_id", "task_id"]
            }
        ),
        Tool(
            name="bugherd_list_comments",
            description="List all comments on a specific task. "
                       "Returns comment text, author, and timestamp.",
            inputSchema={
                "type": "object",
                "properties": {
                    "project_id": PROJECT_ID_PROPERTY,
                    "task_id": {
                        "type": "integer",
                        "description": "The task ID to get comments for"
                    }
                },
                "required": ["project_id", "task_id"]
            }
        ),
    ]
