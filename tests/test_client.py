"""
Unit Tests - ParagraphClient

Request construction and response classification.
"""

import httpx
import pytest

from paragraph_mcp.client import ParagraphClient, clean_params, quote_segment
from paragraph_mcp.config import ParagraphConfig
from paragraph_mcp.errors import ConfigurationError, ParagraphAPIError

from conftest import BASE_URL


def make_client(api, api_key="test-key"):
    return ParagraphClient(ParagraphConfig(api_key=api_key, base_url=BASE_URL), transport=api.transport)


class TestHelpers:

    def test_clean_params_drops_none_and_renders_booleans(self):
        assert clean_params({"limit": 10, "cursor": None, "includeContent": True, "flag": False}) == {
            "limit": "10",
            "includeContent": "true",
            "flag": "false",
        }

    def test_clean_params_accepts_none(self):
        assert clean_params(None) == {}

    def test_quote_segment_encodes_slashes_and_spaces(self):
        assert quote_segment("my blog/2024") == "my%20blog%2F2024"
        assert quote_segment(123) == "123"


class TestRequest:

    @pytest.mark.asyncio
    async def test_missing_api_key_raises_without_request(self, api):
        client = make_client(api, api_key=None)

        with pytest.raises(ConfigurationError, match="PARAGRAPH_API_KEY"):
            await client.request("GET", "/v1/posts/feed")

        assert api.requests == []
        assert client.request_count == 0

    @pytest.mark.asyncio
    async def test_sends_bearer_token_and_query(self, api):
        api.add("GET", "/v1/subscribers", json_body={"items": []})
        client = make_client(api)

        await client.request("GET", "/v1/subscribers", params={"limit": 5, "cursor": None})

        request = api.last
        assert request.headers["Authorization"] == "Bearer test-key"
        assert str(request.url) == f"{BASE_URL}/v1/subscribers?limit=5"
        await client.aclose()

    @pytest.mark.asyncio
    async def test_json_body_sets_content_type(self, api):
        api.add("POST", "/v1/posts", json_body={"id": "p1"})
        client = make_client(api)

        result = await client.request("POST", "/v1/posts", {"title": "Hello"})

        assert result == {"id": "p1"}
        assert api.last.headers["Content-Type"] == "application/json"
        assert api.last_json() == {"title": "Hello"}
        await client.aclose()

    @pytest.mark.asyncio
    async def test_raw_content_uses_custom_headers(self, api):
        api.add("POST", "/v1/raw", json_body={"ok": True})
        client = make_client(api)

        await client.request("POST", "/v1/raw", content=b"a,b\n", headers={"Content-Type": "text/csv"})

        assert api.last.content == b"a,b\n"
        assert api.last.headers["Content-Type"] == "text/csv"
        await client.aclose()

    @pytest.mark.asyncio
    async def test_204_returns_success_marker(self, api):
        api.add("DELETE", "/v1/thing", status=204)
        client = make_client(api)

        assert await client.request("DELETE", "/v1/thing") == {"success": True}
        await client.aclose()

    @pytest.mark.asyncio
    async def test_empty_body_returns_success_marker(self, api):
        api.add("POST", "/v1/subscribers", status=200, headers={"Content-Length": "0"})
        client = make_client(api)

        assert await client.request("POST", "/v1/subscribers", {"email": "a@b.c"}) == {"success": True}
        await client.aclose()

    @pytest.mark.asyncio
    async def test_non_json_body_returned_as_text(self, api):
        api.add("GET", "/v1/plain", text="pong")
        client = make_client(api)

        assert await client.request("GET", "/v1/plain") == "pong"
        await client.aclose()

    @pytest.mark.asyncio
    async def test_json_null_body_returns_success_marker(self, api):
        api.add("GET", "/v1/nothing", text="null", headers={"Content-Type": "application/json"})
        client = make_client(api)

        assert await client.request("GET", "/v1/nothing") == {"success": True}
        await client.aclose()


class TestErrorClassification:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body,expected", [
        ({"msg": "from msg", "message": "from message", "error": "from error"}, "from msg"),
        ({"message": "from message", "error": "from error"}, "from message"),
        ({"error": "from error"}, "from error"),
        ({"detail": "unrelated"}, "HTTP 400 Bad Request"),
        (["not", "an", "object"], "HTTP 400 Bad Request"),
    ])
    async def test_error_field_priority(self, api, body, expected):
        api.add("GET", "/v1/broken", status=400, json_body=body)
        client = make_client(api)

        with pytest.raises(ParagraphAPIError) as exc_info:
            await client.request("GET", "/v1/broken")

        assert str(exc_info.value) == expected
        assert exc_info.value.status_code == 400
        await client.aclose()

    @pytest.mark.asyncio
    async def test_non_json_error_falls_back_to_status_line(self, api):
        api.add("GET", "/v1/broken", status=500, text="<html>oops</html>")
        client = make_client(api)

        with pytest.raises(ParagraphAPIError, match="^HTTP 500 Internal Server Error$"):
            await client.request("GET", "/v1/broken")
        await client.aclose()

    @pytest.mark.asyncio
    async def test_rate_limit_is_an_ordinary_error(self, api):
        api.add("GET", "/v1/posts/feed", status=429, json_body={"message": "Too many requests"})
        client = make_client(api)

        with pytest.raises(ParagraphAPIError, match="Too many requests"):
            await client.request("GET", "/v1/posts/feed")
        assert client.request_count == 1
        await client.aclose()


class TestUpload:

    @pytest.mark.asyncio
    async def test_multipart_upload(self, api):
        api.add("POST", "/v1/subscribers/import", json_body={"imported": 2})
        client = make_client(api)

        result = await client.upload(
            "/v1/subscribers/import",
            files={"file": ("subscribers.csv", b"email\na@b.c\n", "text/csv")},
            params={"sendWelcomeEmail": False},
        )

        request = api.last
        assert result == {"imported": 2}
        assert request.headers["Content-Type"].startswith("multipart/form-data; boundary=")
        assert request.headers["Authorization"] == "Bearer test-key"
        assert request.url.params["sendWelcomeEmail"] == "false"
        assert b'filename="subscribers.csv"' in request.content
        await client.aclose()

    @pytest.mark.asyncio
    async def test_upload_204_returns_none(self, api):
        api.add("POST", "/v1/subscribers/import", status=204)
        client = make_client(api)

        assert await client.upload("/v1/subscribers/import", files={"file": ("x.csv", b"", "text/csv")}) is None
        await client.aclose()


class TestLifecycle:

    @pytest.mark.asyncio
    async def test_aclose_is_idempotent(self, api):
        api.add("GET", "/v1/ping", json_body={})
        client = make_client(api)
        await client.request("GET", "/v1/ping")

        await client.aclose()
        await client.aclose()

        assert client.get_client_info()["open"] is False

    def test_client_info_masks_key(self, api):
        client = make_client(api, api_key="secret-token-value")
        info = client.get_client_info()

        assert info["api_key"] == "secr****"
        assert "secret-token-value" not in str(info)

    @pytest.mark.asyncio
    async def test_transport_errors_propagate(self):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        client = ParagraphClient(
            ParagraphConfig(api_key="k", base_url=BASE_URL), transport=httpx.MockTransport(refuse)
        )
        with pytest.raises(httpx.ConnectError):
            await client.request("GET", "/v1/posts/feed")
        await client.aclose()
