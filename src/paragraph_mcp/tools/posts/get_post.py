"""
Get Post Tool - Fetch a post by its id.
"""

from typing import Any, Optional
from pydantic import Field

from ...client import quote_segment
from ..base import ToolBase, ToolContext, ToolInput, ToolMetadata, require


class GetPostInput(ToolInput):
    """Input schema for paragraph_get_post."""
    post_id: Optional[str] = Field(default=None, description="Post id (required)")


class GetPostTool(ToolBase):
    """Returns the full post record for an id."""

    METADATA = ToolMetadata(
        name="paragraph_get_post",
        description="Get a post by its id",
        category="posts",
        tags=["post", "get", "id", "read"],
    )

    class InputSchema(GetPostInput):
        pass

    async def execute(self, input_data: GetPostInput, context: ToolContext) -> Any:
        require(input_data, "post_id")
        return await context.client.request("GET", f"/v1/posts/{quote_segment(input_data.post_id)}")
