"""
Get Subscriber Count Tool - Number of subscribers of a publication.
"""

from typing import Optional
from pydantic import Field

from ...client import quote_segment
from ..base import ToolBase, ToolContext, ToolInput, ToolMetadata, ToolOutput, require


class GetSubscriberCountInput(ToolInput):
    """Input schema for paragraph_get_subscriber_count."""
    publication_id: Optional[str] = Field(default=None, description="Publication id (required)")


class GetSubscriberCountOutput(ToolOutput):
    """Output schema for paragraph_get_subscriber_count."""
    count: Optional[int] = Field(default=None, description="Subscriber count reported by the API")


class GetSubscriberCountTool(ToolBase):
    """Returns the subscriber count for a publication id."""

    METADATA = ToolMetadata(
        name="paragraph_get_subscriber_count",
        description="Get the subscriber count of a publication",
        category="publications",
        tags=["publication", "subscribers", "count", "stats"],
    )

    class InputSchema(GetSubscriberCountInput):
        pass

    OutputSchema = GetSubscriberCountOutput

    async def execute(self, input_data: GetSubscriberCountInput, context: ToolContext) -> GetSubscriberCountOutput:
        require(input_data, "publication_id")
        result = await context.client.request(
            "GET", f"/v1/publications/{quote_segment(input_data.publication_id)}/subscribers/count"
        )
        count = result.get("count") if isinstance(result, dict) else None
        return GetSubscriberCountOutput(count=count)
