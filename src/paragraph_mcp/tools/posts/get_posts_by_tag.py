"""
Get Posts By Tag Tool - List posts carrying a tag.
"""

from typing import Optional
from pydantic import Field

from ...client import quote_segment
from ..base import PageInput, ToolBase, ToolContext, ToolMetadata, page_of, require
from .list_posts import ListPostsOutput


class GetPostsByTagInput(PageInput):
    """Input schema for paragraph_get_posts_by_tag."""
    tag: Optional[str] = Field(default=None, description="Tag to filter by (required)")
    limit: int = Field(default=20, ge=1, description="Maximum number of posts to return")


class GetPostsByTagTool(ToolBase):
    """Lists posts for a tag, with cursor pagination."""

    METADATA = ToolMetadata(
        name="paragraph_get_posts_by_tag",
        description="Get posts by tag",
        category="posts",
        tags=["post", "tag", "category", "list", "pagination"],
    )

    class InputSchema(GetPostsByTagInput):
        pass

    OutputSchema = ListPostsOutput

    async def execute(self, input_data: GetPostsByTagInput, context: ToolContext) -> ListPostsOutput:
        require(input_data, "tag")
        result = await context.client.request(
            "GET", f"/v1/posts/tag/{quote_segment(input_data.tag)}", params=input_data.page_params()
        )
        posts, pagination = page_of(result)
        return ListPostsOutput(posts=posts, pagination=pagination)
