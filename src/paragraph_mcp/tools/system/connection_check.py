"""
Connection Check Tool - Verify the API key against a lightweight endpoint.
"""

import logging

from pydantic import Field

from ..base import ToolBase, ToolContext, ToolInput, ToolMetadata, ToolOutput, page_of

logger = logging.getLogger(__name__)


class ConnectionCheckInput(ToolInput):
    """Input schema for paragraph_test_connection (no parameters required)."""
    pass


class ConnectionCheckOutput(ToolOutput):
    """Output schema for paragraph_test_connection."""
    message: str = Field(default="Connected to Paragraph API")
    has_subscribers: bool = Field(default=False, description="Whether the publication has any subscriber")
    total_subscribers: int = Field(default=0, description="Subscriber total reported by the API")


class ConnectionCheckTool(ToolBase):
    """
    Tests the connection and authentication.

    Reads a single subscriber; a successful response proves the API key is
    valid for a publication.
    """

    METADATA = ToolMetadata(
        name="paragraph_test_connection",
        description="Test the connection to the Paragraph API and verify the API key",
        category="system",
        tags=["connection", "auth", "health", "status"],
    )

    class InputSchema(ConnectionCheckInput):
        pass

    OutputSchema = ConnectionCheckOutput

    async def execute(self, input_data: ConnectionCheckInput, context: ToolContext) -> ConnectionCheckOutput:
        result = await context.client.request("GET", "/v1/subscribers", params={"limit": 1})
        items, pagination = page_of(result)
        return ConnectionCheckOutput(
            has_subscribers=len(items) > 0,
            total_subscribers=pagination.get("total") or 0,
        )
