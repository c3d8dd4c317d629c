"""
Get My Publication Tool - The publication the API key belongs to.
"""

import logging
from typing import Any

from ...client import quote_segment
from ..base import ToolBase, ToolContext, ToolInput, ToolMetadata

logger = logging.getLogger(__name__)


class GetMyPublicationInput(ToolInput):
    """Input schema for paragraph_get_my_publication (no parameters required)."""
    pass


class GetMyPublicationTool(ToolBase):
    """
    Returns the full record of the API key's publication.

    The id comes from configuration or auto-discovery (feed -> slug -> id);
    the record is then fetched by id and its slug cached for URL building.
    """

    METADATA = ToolMetadata(
        name="paragraph_get_my_publication",
        description="Get the publication associated with the API key (auto-discovered)",
        category="publications",
        tags=["publication", "me", "current", "discover"],
        uses_publication=True,
    )

    class InputSchema(GetMyPublicationInput):
        pass

    async def execute(self, input_data: GetMyPublicationInput, context: ToolContext) -> Any:
        publication_id = await context.resolver.resolve_id()
        result = await context.client.request("GET", f"/v1/publications/{quote_segment(publication_id)}")
        if isinstance(result, dict):
            context.resolver.remember(result)
        return result
