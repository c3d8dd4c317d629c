"""
Unit Tests - PublicationResolver

Auto-discovery of the publication behind the API key.
"""

import asyncio

import pytest

from paragraph_mcp.client import ParagraphClient
from paragraph_mcp.config import ParagraphConfig
from paragraph_mcp.errors import ConfigurationError, DiscoveryError
from paragraph_mcp.publication import PublicationResolver

from conftest import BASE_URL


def make_resolver(api, api_key="test-key", **cached):
    client = ParagraphClient(ParagraphConfig(api_key=api_key, base_url=BASE_URL), transport=api.transport)
    return PublicationResolver(client, **cached)


def add_discovery_routes(api, feed_publication=None, record=None):
    api.add("GET", "/v1/posts/feed", json_body={
        "items": [{"id": "post_1", "publication": feed_publication or {"slug": "my-blog"}}],
        "pagination": {},
    })
    api.add("GET", "/v1/publications/slug/my-blog", json_body=record or {"id": 42, "slug": "my-blog"})


class TestResolveId:

    @pytest.mark.asyncio
    async def test_configured_id_needs_no_request(self, api):
        resolver = make_resolver(api, publication_id="pub_9")

        assert await resolver.resolve_id() == "pub_9"
        assert api.requests == []

    @pytest.mark.asyncio
    async def test_discovers_through_feed_and_slug(self, api):
        add_discovery_routes(api)
        resolver = make_resolver(api)

        publication_id = await resolver.resolve_id()

        assert publication_id == "42"
        assert resolver.publication_slug == "my-blog"
        assert api.paths() == ["/v1/posts/feed", "/v1/publications/slug/my-blog"]
        assert api.requests[0].url.params["limit"] == "1"

    @pytest.mark.asyncio
    async def test_discovery_is_cached(self, api):
        add_discovery_routes(api)
        resolver = make_resolver(api)

        first = await resolver.resolve_id()
        second = await resolver.resolve_id()
        third = await resolver.resolve_id()

        assert first == second == third == "42"
        assert len(api.requests) == 2

    @pytest.mark.asyncio
    async def test_concurrent_first_use_converges(self, api):
        add_discovery_routes(api)
        resolver = make_resolver(api)

        results = await asyncio.gather(*(resolver.resolve_id() for _ in range(3)))

        assert set(results) == {"42"}
        assert resolver.publication_id == "42"

    @pytest.mark.asyncio
    async def test_custom_domain_fallback(self, api):
        api.add("GET", "/v1/posts/feed", json_body={
            "items": [{"publication": {"customDomain": "blog.example.com"}}],
        })
        api.add("GET", "/v1/publications/slug/blog.example.com", json_body={"id": "pub_7"})
        resolver = make_resolver(api)

        assert await resolver.resolve_id() == "pub_7"
        assert resolver.publication_slug == "blog.example.com"

    @pytest.mark.asyncio
    async def test_empty_feed_fails(self, api):
        api.add("GET", "/v1/posts/feed", json_body={"items": []})
        resolver = make_resolver(api)

        with pytest.raises(DiscoveryError, match="Could not auto-discover publication ID"):
            await resolver.resolve_id()
        assert resolver.publication_id is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("feed", [
        {"items": [{"id": "post_1", "publication": "pub_1"}]},
        {"items": [{"id": "post_1"}]},
        {"items": ["post_1"]},
        {"items": {"id": "post_1"}},
        ["post_1"],
    ])
    async def test_unexpected_feed_shapes_fail_discovery(self, api, feed):
        api.add("GET", "/v1/posts/feed", json_body=feed)
        resolver = make_resolver(api)

        with pytest.raises(DiscoveryError, match="Could not auto-discover publication ID"):
            await resolver.resolve_id()
        assert api.paths() == ["/v1/posts/feed"]

    @pytest.mark.asyncio
    async def test_failed_feed_request_fails(self, api):
        api.add("GET", "/v1/posts/feed", status=500, json_body={"message": "boom"})
        resolver = make_resolver(api)

        with pytest.raises(DiscoveryError, match="PARAGRAPH_PUBLICATION_ID"):
            await resolver.resolve_id()

    @pytest.mark.asyncio
    async def test_publication_without_id_fails(self, api):
        add_discovery_routes(api, record={"slug": "my-blog"})
        resolver = make_resolver(api)

        with pytest.raises(DiscoveryError):
            await resolver.resolve_id()

    @pytest.mark.asyncio
    async def test_missing_key_is_reported_as_configuration_error(self, api):
        resolver = make_resolver(api, api_key=None)

        with pytest.raises(ConfigurationError):
            await resolver.resolve_id()
        assert api.requests == []


class TestResolveSlug:

    @pytest.mark.asyncio
    async def test_cached_slug(self, api):
        resolver = make_resolver(api, publication_slug="cached")

        assert await resolver.resolve_slug() == "cached"
        assert api.requests == []

    @pytest.mark.asyncio
    async def test_slug_from_discovery(self, api):
        add_discovery_routes(api)
        resolver = make_resolver(api)

        assert await resolver.resolve_slug() == "my-blog"
        assert len(api.requests) == 2

    @pytest.mark.asyncio
    async def test_slug_fetched_by_configured_id(self, api):
        api.add("GET", "/v1/publications/pub_9", json_body={"id": "pub_9", "slug": "nine"})
        resolver = make_resolver(api, publication_id="pub_9")

        assert await resolver.resolve_slug() == "nine"
        assert api.paths() == ["/v1/publications/pub_9"]

    @pytest.mark.asyncio
    async def test_slug_unavailable(self, api):
        api.add("GET", "/v1/publications/pub_9", json_body={"id": "pub_9"})
        resolver = make_resolver(api, publication_id="pub_9")

        with pytest.raises(DiscoveryError, match="Could not determine publication slug"):
            await resolver.resolve_slug()


def test_remember_prefers_custom_domain():
    resolver = PublicationResolver(client=None)

    resolver.remember({"slug": "my-blog", "customDomain": "blog.example.com"})

    assert resolver.get_state() == {"publication_id": None, "publication_slug": "blog.example.com"}
