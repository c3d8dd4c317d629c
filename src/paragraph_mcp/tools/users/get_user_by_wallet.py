"""
Get User By Wallet Tool - Fetch a Paragraph user by wallet address.
"""

from typing import Any, Optional
from pydantic import Field

from ...client import quote_segment
from ..base import ToolBase, ToolContext, ToolInput, ToolMetadata, require


class GetUserByWalletInput(ToolInput):
    """Input schema for paragraph_get_user_by_wallet."""
    wallet_address: Optional[str] = Field(default=None, description="Wallet address (required)")


class GetUserByWalletTool(ToolBase):

    METADATA = ToolMetadata(
        name="paragraph_get_user_by_wallet",
        description="Get a user by wallet address",
        category="users",
        tags=["user", "profile", "wallet", "address", "web3"],
    )

    class InputSchema(GetUserByWalletInput):
        pass

    async def execute(self, input_data: GetUserByWalletInput, context: ToolContext) -> Any:
        require(input_data, "wallet_address")
        return await context.client.request(
            "GET", f"/v1/users/wallet/{quote_segment(input_data.wallet_address)}"
        )
