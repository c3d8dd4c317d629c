"""
Get User Tool - Fetch a Paragraph user by id.
"""

from typing import Any, Optional
from pydantic import Field

from ...client import quote_segment
from ..base import ToolBase, ToolContext, ToolInput, ToolMetadata, require


class GetUserInput(ToolInput):
    """Input schema for paragraph_get_user."""
    user_id: Optional[str] = Field(default=None, description="User id (required)")


class GetUserTool(ToolBase):
    """Returns the user record for an id."""

    METADATA = ToolMetadata(
        name="paragraph_get_user",
        description="Get a user by id",
        category="users",
        tags=["user", "profile", "get", "id"],
    )

    class InputSchema(GetUserInput):
        pass

    async def execute(self, input_data: GetUserInput, context: ToolContext) -> Any:
        require(input_data, "user_id")
        return await context.client.request("GET", f"/v1/users/{quote_segment(input_data.user_id)}")
