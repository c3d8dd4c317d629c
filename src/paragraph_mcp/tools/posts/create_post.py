"""
Create Post Tool - Publish a new post from markdown.
"""

from typing import Any, Dict, List, Optional, Union
from pydantic import Field
import logging

from ..base import ToolBase, ToolContext, ToolInput, ToolMetadata, ToolOutput, require

logger = logging.getLogger(__name__)


class CreatePostInput(ToolInput):
    """Input schema for paragraph_create_post."""
    title: Optional[str] = Field(default=None, description="Post title (required)")
    markdown: Optional[str] = Field(default=None, description="Post body in markdown (required)")
    subtitle: Optional[str] = Field(default=None, description="Post subtitle")
    image_url: Optional[str] = Field(default=None, description="Cover image URL")
    send_newsletter: bool = Field(default=False, description="Email the post to subscribers")
    slug: Optional[str] = Field(default=None, description="Custom URL slug")
    post_preview: Optional[str] = Field(default=None, description="Preview text shown in listings")
    categories: Optional[Union[List[str], str]] = Field(
        default=None,
        description="Categories as a list or a comma-separated string"
    )


class CreatePostOutput(ToolOutput):
    """Output schema for paragraph_create_post."""
    id: Optional[str] = Field(default=None, description="New post id")
    slug: Optional[str] = Field(default=None, description="Post slug (may be absent right after creation)")
    url: Optional[str] = Field(default=None, description="Public URL (may be absent right after creation)")
    published_at: Optional[Any] = Field(default=None, description="Publication timestamp")


class CreatePostTool(ToolBase):
    """
    Creates and publishes a new post.

    Posts are published immediately; the API has no draft mode and no update
    endpoint, so changing a post means creating a new one.
    """

    METADATA = ToolMetadata(
        name="paragraph_create_post",
        description="Create and publish a new post on the publication",
        category="posts",
        tags=["post", "create", "publish", "markdown", "newsletter"],
    )

    class InputSchema(CreatePostInput):
        pass

    OutputSchema = CreatePostOutput

    async def execute(self, input_data: CreatePostInput, context: ToolContext) -> CreatePostOutput:
        """
        Create the post.

        Args:
            input_data: Post content and options
            context: Execution context with the API client

        Returns:
            Identifiers of the new post
        """
        require(input_data, "title", "markdown")

        body: Dict[str, Any] = {
            "title": input_data.title,
            "markdown": input_data.markdown,
            "sendNewsletter": input_data.send_newsletter,
        }
        optional = {
            "subtitle": input_data.subtitle,
            "imageUrl": input_data.image_url,
            "slug": input_data.slug,
            "postPreview": input_data.post_preview,
            "categories": input_data.categories,
        }
        body.update({key: value for key, value in optional.items() if value})

        logger.debug(f"Creating post '{input_data.title}'")
        result = await context.client.request("POST", "/v1/posts", body)
        if not isinstance(result, dict):
            result = {}

        post_id = result.get("id")
        return CreatePostOutput(
            id=str(post_id) if post_id is not None else None,
            slug=result.get("slug"),
            url=result.get("url"),
            published_at=result.get("publishedAt"),
        )
