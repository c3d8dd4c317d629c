"""
Get Feed Tool - Curated posts across Paragraph.
"""

from pydantic import Field

from ..base import PageInput, ToolBase, ToolContext, ToolMetadata, page_of
from .list_posts import ListPostsOutput


class GetFeedInput(PageInput):
    """Input schema for paragraph_get_feed."""
    limit: int = Field(default=20, ge=1, description="Maximum number of posts to return")


class GetFeedTool(ToolBase):
    """Returns a page of the curated feed."""

    METADATA = ToolMetadata(
        name="paragraph_get_feed",
        description="Get the curated feed of posts",
        category="posts",
        tags=["post", "feed", "curated", "list", "pagination"],
    )

    class InputSchema(GetFeedInput):
        pass

    OutputSchema = ListPostsOutput

    async def execute(self, input_data: GetFeedInput, context: ToolContext) -> ListPostsOutput:
        result = await context.client.request("GET", "/v1/posts/feed", params=input_data.page_params())
        posts, pagination = page_of(result)
        return ListPostsOutput(posts=posts, pagination=pagination)
