"""
Get Publication Tool - Fetch a publication by slug.
"""

from typing import Any, Optional
from pydantic import Field

from ...client import quote_segment
from ..base import ToolBase, ToolContext, ToolInput, ToolMetadata, require


class GetPublicationInput(ToolInput):
    """Input schema for paragraph_get_publication."""
    slug: Optional[str] = Field(default=None, description="Publication slug (required)")


class GetPublicationTool(ToolBase):
    """Returns the publication record for a slug."""

    METADATA = ToolMetadata(
        name="paragraph_get_publication",
        description="Get a publication by its slug",
        category="publications",
        tags=["publication", "get", "slug", "blog"],
    )

    class InputSchema(GetPublicationInput):
        pass

    async def execute(self, input_data: GetPublicationInput, context: ToolContext) -> Any:
        require(input_data, "slug")
        return await context.client.request("GET", f"/publications/slug/{quote_segment(input_data.slug)}")
