"""BugHerd API v2 client.

Authentication is HTTP Basic Auth with the API key as the username and the
literal ``x`` as the password. The key is read from ``BUGHERD_API_KEY`` on
every request, so a key exported after the server starts is picked up.

BugHerd rate limits to roughly 60 requests/minute with bursts of 10. A 429
is reported immediately; nothing here retries.
"""
import base64
import logging
import os
from typing import Any, Optional

import httpx

from .models import (
    ProjectsResponse,
    ProjectResponse,
    TasksResponse,
    TaskResponse,
    CommentsResponse,
)

logger = logging.getLogger("bugherd-mcp.client")

BUGHERD_BASE_URL = os.getenv("BUGHERD_BASE_URL", "https://www.bugherd.com/api_v2")
API_KEY_ENV_VAR = "BUGHERD_API_KEY"
REQUEST_TIMEOUT = 30.0


# ============================================================================
# Errors
# ============================================================================

class BugherdError(Exception):
    """Base class for BugHerd client errors."""


class BugherdConfigError(BugherdError):
    """Raised when the API key is not configured."""


class BugherdHTTPError(BugherdError):
    """Raised when the API answers with a non-2xx status."""

    def __init__(self, message: str, status_code: int, endpoint: str):
        super().__init__(message)
        self.status_code = status_code
        self.endpoint = endpoint


class BugherdRateLimitError(BugherdHTTPError):
    """HTTP 429."""


class BugherdAuthenticationError(BugherdHTTPError):
    """HTTP 401."""


class BugherdNotFoundError(BugherdHTTPError):
    """HTTP 404."""


class BugherdAPIError(BugherdHTTPError):
    """Any other non-2xx response."""

    def __init__(self, message: str, status_code: int, endpoint: str, body: str):
        super().__init__(message, status_code, endpoint)
        self.body = body


# ============================================================================
# Request plumbing
# ============================================================================

def get_api_key() -> str:
    """Return the API key from the environment.

    Raises:
        BugherdConfigError: If BUGHERD_API_KEY is unset or empty.
    """
    api_key = os.getenv(API_KEY_ENV_VAR)
    if not api_key:
        raise BugherdConfigError(
            f"{API_KEY_ENV_VAR} environment variable is required. "
            "Get your API key from BugHerd Settings > General Settings."
        )
    return api_key


def build_headers(api_key: str) -> dict[str, str]:
    """Build the auth and content headers sent with every request."""
    token = base64.b64encode(f"{api_key}:x".encode()).decode("ascii")
    return {
        "Authorization": f"Basic {token}",
        "Content-Type": "application/json",
        "Accept": "application/json",
    }


def create_client(transport: Optional[httpx.AsyncBaseTransport] = None) -> httpx.AsyncClient:
    """Create an HTTP client for one tool invocation.

    Credentials are not attached here; they are added per request.
    """
    return httpx.AsyncClient(
        base_url=BUGHERD_BASE_URL,
        timeout=REQUEST_TIMEOUT,
        transport=transport,
    )


def _raise_for_status(response: httpx.Response, endpoint: str) -> None:
    """Map a non-2xx response onto the client error types."""
    status = response.status_code
    if status == 429:
        raise BugherdRateLimitError(
            "BugHerd API rate limit exceeded. Wait a moment and try again.",
            status, endpoint,
        )
    if status == 401:
        raise BugherdAuthenticationError(
            f"BugHerd API authentication failed. Check your {API_KEY_ENV_VAR}.",
            status, endpoint,
        )
    if status == 404:
        raise BugherdNotFoundError(
            f"BugHerd resource not found: {endpoint}",
            status, endpoint,
        )
    body = response.text
    raise BugherdAPIError(f"BugHerd API error ({status}): {body}", status, endpoint, body)


async def bugherd_request(
    client: httpx.AsyncClient,
    endpoint: str,
    params: Optional[dict[str, Any]] = None,
) -> Any:
    """GET an endpoint and return the decoded JSON body.

    The API key is resolved before any I/O, so a missing key never reaches
    the network. Transport errors (``httpx.RequestError``) propagate as-is.
    """
    headers = build_headers(get_api_key())

    logger.debug(f"GET {endpoint} params={params}")
    response = await client.get(endpoint, params=params or None, headers=headers)

    if not response.is_success:
        # Path relative to the API base, query string included
        base_path = client.base_url.raw_path.decode().rstrip("/")
        requested = response.request.url.raw_path.decode()[len(base_path):]
        logger.warning(f"BugHerd returned {response.status_code} for {requested}")
        _raise_for_status(response, requested)

    return response.json()


# ============================================================================
# Projects
# ============================================================================

async def list_projects(client: httpx.AsyncClient) -> ProjectsResponse:
    """List all projects accessible to the authenticated user."""
    return await bugherd_request(client, "/projects.json")


async def get_project(client: httpx.AsyncClient, project_id: int) -> ProjectResponse:
    """Get a single project by ID."""
    return await bugherd_request(client, f"/projects/{project_id}.json")


# ============================================================================
# Tasks
# ============================================================================

async def list_tasks(
    client: httpx.AsyncClient,
    project_id: int,
    status: Optional[str] = None,
    priority: Optional[str] = None,
    tag: Optional[str] = None,
    assigned_to_id: Optional[int] = None,
    page: Optional[int] = None,
) -> TasksResponse:
    """List tasks for a project. Filters left as None are not sent."""
    params: dict[str, Any] = {}
    if status:
        params["status"] = status
    if priority:
        params["priority"] = priority
    if tag:
        params["tag"] = tag
    if assigned_to_id:
        params["assigned_to_id"] = assigned_to_id
    if page:
        params["page"] = page

    return await bugherd_request(client, f"/projects/{project_id}/tasks.json", params)


async def get_task(client: httpx.AsyncClient, project_id: int, task_id: int) -> TaskResponse:
    """Get a single task by ID."""
    return await bugherd_request(client, f"/projects/{project_id}/tasks/{task_id}.json")


# ============================================================================
# Comments
# ============================================================================

async def list_comments(client: httpx.AsyncClient, project_id: int, task_id: int) -> CommentsResponse:
    """List comments on a task."""
    return await bugherd_request(
        client, f"/projects/{project_id}/tasks/{task_id}/comments.json"
    )


# ============================================================================
# Health Check
# ============================================================================

async def verify_connection(client: httpx.AsyncClient) -> bool:
    """Check that the API is reachable with the configured key.

    Any failure is reduced to False; the cause is only logged.
    """
    try:
        await list_projects(client)
        return True
    except Exception as e:
        logger.warning(f"BugHerd connection check failed: {type(e).__name__}: {e}")
        return False
