"""
Get Coin By Contract Tool - Fetch a coin by its token contract address.
"""

from typing import Any, Optional
from pydantic import Field

from ...client import quote_segment
from ..base import ToolBase, ToolContext, ToolInput, ToolMetadata, require


class GetCoinByContractInput(ToolInput):
    """Input schema for paragraph_get_coin_by_contract."""
    contract_address: Optional[str] = Field(default=None, description="Token contract address (required)")


class GetCoinByContractTool(ToolBase):

    METADATA = ToolMetadata(
        name="paragraph_get_coin_by_contract",
        description="Get a coin by its contract address",
        category="coins",
        tags=["coin", "token", "contract", "address", "web3"],
    )

    class InputSchema(GetCoinByContractInput):
        pass

    async def execute(self, input_data: GetCoinByContractInput, context: ToolContext) -> Any:
        require(input_data, "contract_address")
        return await context.client.request(
            "GET", f"/v1/coins/contract/{quote_segment(input_data.contract_address)}"
        )
