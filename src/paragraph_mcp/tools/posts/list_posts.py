"""
List Posts Tool - List the posts of a publication.
"""

from typing import Any, Dict, List, Optional
from pydantic import Field
import logging

from ...client import quote_segment
from ..base import PageInput, ToolBase, ToolContext, ToolMetadata, ToolOutput, page_of

logger = logging.getLogger(__name__)


class ListPostsInput(PageInput):
    """Input schema for paragraph_list_posts."""
    publication_id: Optional[str] = Field(
        default=None,
        description="Publication id (auto-discovered from the API key when omitted)"
    )
    include_content: bool = Field(default=False, description="Include the full post content")


class ListPostsOutput(ToolOutput):
    """Output schema for the post listing tools."""
    posts: List[Any] = Field(default_factory=list, description="Posts on this page")
    pagination: Dict[str, Any] = Field(default_factory=dict, description="Cursor pagination info")


class ListPostsTool(ToolBase):
    """
    Lists posts in a publication, newest first.

    Publication Resolution (priority order):
    1. publicationId argument
    2. PARAGRAPH_PUBLICATION_ID / previously discovered id
    3. Auto-discovery through the feed
    """

    METADATA = ToolMetadata(
        name="paragraph_list_posts",
        description="List posts in a publication (defaults to the publication of the API key)",
        category="posts",
        tags=["post", "list", "publication", "pagination"],
        uses_publication=True,
    )

    class InputSchema(ListPostsInput):
        pass

    OutputSchema = ListPostsOutput

    async def execute(self, input_data: ListPostsInput, context: ToolContext) -> ListPostsOutput:
        publication_id = input_data.publication_id or await context.resolver.resolve_id()

        params = input_data.page_params()
        if input_data.include_content:
            params["includeContent"] = "true"

        result = await context.client.request(
            "GET", f"/v1/publications/{quote_segment(publication_id)}/posts", params=params
        )
        posts, pagination = page_of(result)
        logger.debug(f"Listed {len(posts)} posts of publication {publication_id}")
        return ListPostsOutput(posts=posts, pagination=pagination)
