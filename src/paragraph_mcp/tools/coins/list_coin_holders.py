"""
List Coin Holders Tool - Page through the holders of a coin.
"""

from typing import Any, Dict, List, Optional
from pydantic import Field

from ...client import quote_segment
from ..base import PageInput, ToolBase, ToolContext, ToolMetadata, ToolOutput, page_of, require


class ListCoinHoldersInput(PageInput):
    """Input schema for paragraph_list_coin_holders."""
    coin_id: Optional[str] = Field(default=None, description="Coin id (required)")
    limit: int = Field(default=50, ge=1, description="Maximum number of holders to return")


class ListCoinHoldersOutput(ToolOutput):
    """Output schema for paragraph_list_coin_holders."""
    holders: List[Any] = Field(default_factory=list, description="Holders on this page")
    pagination: Dict[str, Any] = Field(default_factory=dict, description="Cursor pagination info")


class ListCoinHoldersTool(ToolBase):
    """Lists the wallets holding a coin, with cursor pagination."""

    METADATA = ToolMetadata(
        name="paragraph_list_coin_holders",
        description="List the holders of a coin",
        category="coins",
        tags=["coin", "token", "holders", "list", "pagination", "web3"],
    )

    class InputSchema(ListCoinHoldersInput):
        pass

    OutputSchema = ListCoinHoldersOutput

    async def execute(self, input_data: ListCoinHoldersInput, context: ToolContext) -> ListCoinHoldersOutput:
        require(input_data, "coin_id")
        result = await context.client.request(
            "GET", f"/v1/coins/{quote_segment(input_data.coin_id)}/holders", params=input_data.page_params()
        )
        # Holders come back under "holders", not "items"
        holders, pagination = page_of(result, items_key="holders")
        return ListCoinHoldersOutput(holders=holders, pagination=pagination)
