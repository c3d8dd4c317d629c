"""
Get Post By Slug Tool - Fetch a post by publication slug and post slug.
"""

from typing import Any, Optional
from pydantic import Field

from ...client import quote_segment
from ...errors import ToolValidationError
from ..base import ToolBase, ToolContext, ToolInput, ToolMetadata


class GetPostBySlugInput(ToolInput):
    """Input schema for paragraph_get_post_by_slug."""
    publication_slug: Optional[str] = Field(default=None, description="Publication slug (required)")
    post_slug: Optional[str] = Field(default=None, description="Post slug (required)")


class GetPostBySlugTool(ToolBase):
    """
    Looks a post up through its public URL parts.

    Both slugs are URL-encoded, so slugs with special characters are safe.
    """

    METADATA = ToolMetadata(
        name="paragraph_get_post_by_slug",
        description="Get a post by its publication slug and post slug",
        category="posts",
        tags=["post", "get", "slug", "read"],
    )

    class InputSchema(GetPostBySlugInput):
        pass

    async def execute(self, input_data: GetPostBySlugInput, context: ToolContext) -> Any:
        if not input_data.publication_slug or not input_data.post_slug:
            raise ToolValidationError("publicationSlug and postSlug are required")

        path = (
            f"/publications/slug/{quote_segment(input_data.publication_slug)}"
            f"/posts/slug/{quote_segment(input_data.post_slug)}"
        )
        return await context.client.request("GET", path)
