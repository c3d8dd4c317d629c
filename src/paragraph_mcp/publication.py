"""
Publication Resolver - derives the publication behind the API key.

The Paragraph API key is scoped to a single publication, but several endpoints
still need its id (or slug) in the URL. When PARAGRAPH_PUBLICATION_ID is not
configured the resolver discovers it:

1. Read one post from the feed
2. Take the embedded publication's slug (or custom domain)
3. Fetch the publication by that slug to get its canonical id
4. Cache id and slug for the lifetime of the resolver

Concurrent first calls may both run discovery. The writes are idempotent, so
the only cost is a duplicate round trip.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from .client import ParagraphClient, quote_segment
from .errors import ConfigurationError, DiscoveryError, ParagraphError

logger = logging.getLogger(__name__)

DISCOVERY_ERROR = (
    "Could not auto-discover publication ID. Either set PARAGRAPH_PUBLICATION_ID env var, "
    "or ensure your publication has at least one post to read from the feed."
)
SLUG_ERROR = (
    "Could not determine publication slug. Set PARAGRAPH_PUBLICATION_ID and ensure the publication exists."
)


class PublicationResolver:
    """Holds the cached publication id/slug and resolves them on first use."""

    def __init__(
        self,
        client: ParagraphClient,
        publication_id: Optional[str] = None,
        publication_slug: Optional[str] = None,
    ):
        self.client = client
        self.publication_id = publication_id
        self.publication_slug = publication_slug

    async def resolve_id(self) -> str:
        """
        Return the publication id, discovering it through the feed if needed.

        Raises:
            DiscoveryError: If the feed is empty, unreachable, or carries no publication
        """
        if self.publication_id:
            return self.publication_id

        try:
            publication_id = await self._discover()
        except ConfigurationError:
            raise
        except (ParagraphError, httpx.HTTPError) as e:
            logger.warning(f"Publication auto-discovery failed: {e}")
            raise DiscoveryError(DISCOVERY_ERROR) from e

        if not publication_id:
            raise DiscoveryError(DISCOVERY_ERROR)

        self.publication_id = publication_id
        logger.info(f"Auto-discovered publication id {publication_id} (slug: {self.publication_slug})")
        return publication_id

    async def _discover(self) -> Optional[str]:
        feed = await self.client.request("GET", "/v1/posts/feed", params={"limit": 1})
        items = feed.get("items") if isinstance(feed, dict) else None
        if not isinstance(items, list) or not items or not isinstance(items[0], dict):
            return None

        embedded = items[0].get("publication")
        if not isinstance(embedded, dict):
            return None
        identifier = embedded.get("slug") or embedded.get("customDomain")
        if not identifier:
            return None

        record = await self.client.request("GET", f"/v1/publications/slug/{quote_segment(identifier)}")
        if not isinstance(record, dict) or not record.get("id"):
            return None

        self.publication_slug = record.get("slug") or identifier
        return str(record["id"])

    async def resolve_slug(self) -> str:
        """
        Return the publication slug (or custom domain) for URL building.

        Raises:
            DiscoveryError: If neither the feed nor the publication record yields one
        """
        if self.publication_slug:
            return self.publication_slug

        publication_id = await self.resolve_id()
        if self.publication_slug:
            return self.publication_slug

        try:
            record = await self.client.request("GET", f"/v1/publications/{quote_segment(publication_id)}")
        except ConfigurationError:
            raise
        except (ParagraphError, httpx.HTTPError) as e:
            logger.warning(f"Could not fetch publication {publication_id}: {e}")
            raise DiscoveryError(SLUG_ERROR) from e

        if isinstance(record, dict):
            self.remember(record)
        if not self.publication_slug:
            raise DiscoveryError(SLUG_ERROR)
        return self.publication_slug

    def remember(self, record: Dict[str, Any]):
        """Update the cached slug from a fetched publication record."""
        if record.get("slug"):
            self.publication_slug = record["slug"]
        if record.get("customDomain"):
            self.publication_slug = record["customDomain"]

    def get_state(self) -> dict:
        return {
            "publication_id": self.publication_id,
            "publication_slug": self.publication_slug,
        }
