"""Shared fixtures: a fake BugHerd API served through httpx.MockTransport."""
from typing import Optional

import httpx
import pytest

from bugherd_mcp import client as api

API_PREFIX = httpx.URL(api.BUGHERD_BASE_URL).path.rstrip("/")


PROJECTS = [
    {"id": 1001, "name": "Marketing Site", "devurl": "https://example.com", "is_active": True},
    {"id": 1002, "name": "Old Shop", "devurl": "https://shop.example.com", "is_active": False},
]

TASKS = [
    {
        "id": 501,
        "local_task_id": 1,
        "status_id": 2,
        "priority_id": 1,
        "description": "Header logo is blurry on retina screens",
        "tag_names": ["ui", "mobile"],
        "created_at": "2024-03-01T10:00:00Z",
        "updated_at": "2024-03-02T10:00:00Z",
        "requester_email": "client@example.com",
        "assigned_to_id": 77,
        "screenshot": "https://cdn.example.com/shot-501.png",
        "selector_info": {"url": "https://example.com/", "selector": "header > img.logo"},
        "admin_link": "https://www.bugherd.com/projects/1001/tasks/1",
    },
    {
        "id": 502,
        "local_task_id": 2,
        "status_id": 2,
        "priority_id": 1,
        "description": "x" * 150,
        "tag_names": [],
        "created_at": "2024-03-03T10:00:00Z",
        "updated_at": "2024-03-03T10:00:00Z",
        "requester_email": "client@example.com",
        "assigned_to_id": None,
        "screenshot": None,
        "selector_info": None,
        "admin_link": "https://www.bugherd.com/projects/1001/tasks/2",
    },
]

COMMENTS = [
    {"text": "Confirmed on iPhone 13.", "created_at": "2024-03-02T11:00:00Z",
     "user": {"id": 77, "display_name": "Dana"}},
    {"text": "Fixed in staging.", "created_at": "2024-03-04T09:30:00Z",
     "user": {"id": 78, "display_name": "Sam"}},
]


class FakeBugherd:
    """Routes request paths (relative to the API base) to canned responses.

    Unrouted paths answer 404. Every request is recorded in ``requests``.
    """

    def __init__(self):
        self.routes: dict[str, tuple[int, object]] = {}
        self.requests: list[httpx.Request] = []
        self.error: Optional[Exception] = None

    def add(self, path: str, body: object, status: int = 200) -> None:
        self.routes[path] = (status, body)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        path = request.url.path[len(API_PREFIX):]
        status, body = self.routes.get(path, (404, {"error": "Not Found"}))
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, json=body)

    def client(self) -> httpx.AsyncClient:
        return api.create_client(transport=httpx.MockTransport(self.handle))

    def paths(self) -> list[str]:
        """Requested paths with query strings, relative to the API base."""
        return [r.url.raw_path.decode()[len(API_PREFIX):] for r in self.requests]


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setenv("BUGHERD_API_KEY", "test-key")
    return "test-key"


@pytest.fixture
def fake_bugherd(api_key):
    fake = FakeBugherd()
    fake.add("/projects.json", {"projects": PROJECTS})
    return fake
