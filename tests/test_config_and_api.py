"""
Unit Tests - Configuration and the REST bridge
"""

import pytest
from httpx import ASGITransport, AsyncClient

from paragraph_mcp.config import DEFAULT_API_BASE_URL, ParagraphConfig, get_tools_mode, mask_secret
from paragraph_mcp.http_api import app


class TestConfig:

    def test_from_environment(self, monkeypatch):
        monkeypatch.setenv("PARAGRAPH_API_KEY", "key-123")
        monkeypatch.setenv("PARAGRAPH_API_BASE_URL", "https://example.test/api/")
        monkeypatch.setenv("PARAGRAPH_PUBLICATION_ID", "pub_1")
        monkeypatch.delenv("PARAGRAPH_PUBLICATION_SLUG", raising=False)
        monkeypatch.setenv("PARAGRAPH_TIMEOUT", "5")

        config = ParagraphConfig.from_environment()

        assert config.api_key == "key-123"
        assert config.base_url == "https://example.test/api"
        assert config.publication_id == "pub_1"
        assert config.publication_slug is None
        assert config.timeout == 5.0
        assert config.has_credentials

    def test_defaults(self, monkeypatch):
        for name in ("PARAGRAPH_API_KEY", "PARAGRAPH_API_BASE_URL", "PARAGRAPH_PUBLICATION_ID", "PARAGRAPH_TIMEOUT"):
            monkeypatch.delenv(name, raising=False)

        config = ParagraphConfig.from_environment()

        assert config.base_url == DEFAULT_API_BASE_URL
        assert not config.has_credentials
        assert config.describe()["api_key"] == "<not set>"

    def test_rejects_non_positive_timeout(self):
        with pytest.raises(ValueError):
            ParagraphConfig(timeout=0)

    def test_mask_secret(self):
        assert mask_secret("abcdefgh") == "abcd****"
        assert mask_secret(None) == "<not set>"

    @pytest.mark.parametrize("value,expected", [
        (None, "hybrid"),
        ("SEARCH_ONLY", "search_only"),
        ("everything", "hybrid"),
    ])
    def test_tools_mode(self, monkeypatch, value, expected):
        if value is None:
            monkeypatch.delenv("TOOLS_MODE", raising=False)
        else:
            monkeypatch.setenv("TOOLS_MODE", value)

        assert get_tools_mode() == expected


class TestHttpApi:

    @pytest.fixture
    async def http(self, global_session):
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://bridge") as client:
            yield client

    @pytest.mark.asyncio
    async def test_root(self, http):
        response = await http.get("/")

        assert response.json()["status"] == "ok"

    @pytest.mark.asyncio
    async def test_list_tools(self, http):
        response = await http.get("/tools")

        names = {tool["name"] for tool in response.json()}
        assert "paragraph_get_feed" in names
        assert "search_tool" in names

    @pytest.mark.asyncio
    async def test_call_tool_returns_envelope(self, http, api):
        api.add("GET", "/v1/users/user_1", json_body={"id": "user_1"})

        response = await http.post("/tool/paragraph_get_user", json={"userId": "user_1"})

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": {"id": "user_1"}, "error": None}

    @pytest.mark.asyncio
    async def test_generic_call(self, http):
        response = await http.post("/call", json={
            "method": "tools/call",
            "params": {"name": "paragraph_get_coin", "arguments": {}},
        })

        assert response.json() == {"success": False, "data": None, "error": "coinId is required"}

    @pytest.mark.asyncio
    async def test_generic_call_rejects_unknown_method(self, http):
        response = await http.post("/call", json={"method": "prompts/list"})

        assert response.status_code == 400
