"""
Test Configuration

A fake Paragraph API served through httpx.MockTransport, and sessions wired
to it. No test touches the network.
"""

import json
from typing import Any, Dict, List, Optional, Tuple

import httpx
import pytest

from paragraph_mcp.config import ParagraphConfig
from paragraph_mcp.session import ParagraphSession, set_session

BASE_URL = "https://api.paragraph.test/api"
API_PREFIX = "/api"


class FakeParagraphAPI:
    """Routes (method, path) to canned responses and records every request."""

    def __init__(self):
        self.routes: Dict[Tuple[str, str], Dict[str, Any]] = {}
        self.requests: List[httpx.Request] = []

    def add(
        self,
        method: str,
        path: str,
        status: int = 200,
        json_body: Any = None,
        text: Optional[str] = None,
        headers: Optional[Dict[str, str]] = None,
    ):
        """Register a response for an API path (without the /api prefix)."""
        kwargs: Dict[str, Any] = {"headers": headers}
        if json_body is not None:
            kwargs["json"] = json_body
        elif text is not None:
            kwargs["text"] = text
        self.routes[(method, API_PREFIX + path)] = {"status_code": status, **kwargs}

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.path))
        if route is None:
            return httpx.Response(404, json={"message": f"no route for {request.method} {request.url.path}"})
        return httpx.Response(**route)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def paths(self) -> List[str]:
        return [request.url.path[len(API_PREFIX):] for request in self.requests]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


def make_session(api: FakeParagraphAPI, **config_overrides) -> ParagraphSession:
    settings = {"api_key": "test-key", "base_url": BASE_URL}
    settings.update(config_overrides)
    return ParagraphSession(ParagraphConfig(**settings), transport=api.transport)


@pytest.fixture
def api():
    return FakeParagraphAPI()


@pytest.fixture
async def session(api):
    session = make_session(api)
    yield session
    await session.aclose()


@pytest.fixture
async def keyless_session(api):
    session = make_session(api, api_key=None)
    yield session
    await session.aclose()


@pytest.fixture
def global_session(session):
    """Install `session` as the process-wide session used by the MCP handlers."""
    set_session(session)
    yield session
    set_session(None)


def assert_envelope(result):
    """Exactly one of data/error is set, and success agrees with which."""
    if result.success:
        assert result.error is None
        assert result.data is not None
    else:
        assert result.data is None
        assert result.error
