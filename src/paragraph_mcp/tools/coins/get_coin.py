"""
Get Coin Tool - Fetch a coin (tokenized post) by id.
"""

from typing import Any, Optional
from pydantic import Field

from ...client import quote_segment
from ..base import ToolBase, ToolContext, ToolInput, ToolMetadata, require


class GetCoinInput(ToolInput):
    """Input schema for paragraph_get_coin."""
    coin_id: Optional[str] = Field(default=None, description="Coin id (required)")


class GetCoinTool(ToolBase):
    """Returns the coin record for an id."""

    METADATA = ToolMetadata(
        name="paragraph_get_coin",
        description="Get a coin (tokenized post) by its id",
        category="coins",
        tags=["coin", "token", "get", "web3"],
    )

    class InputSchema(GetCoinInput):
        pass

    async def execute(self, input_data: GetCoinInput, context: ToolContext) -> Any:
        require(input_data, "coin_id")
        return await context.client.request("GET", f"/v1/coins/{quote_segment(input_data.coin_id)}")
