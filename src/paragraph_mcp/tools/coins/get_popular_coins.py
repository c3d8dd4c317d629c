"""
Get Popular Coins Tool - The currently popular coins.
"""

from typing import Any

from ..base import ToolBase, ToolContext, ToolInput, ToolMetadata


class GetPopularCoinsInput(ToolInput):
    """Input schema for paragraph_get_popular_coins (no parameters required)."""
    pass


class GetPopularCoinsTool(ToolBase):
    """
    Lists popular coins.

    The endpoint has answered both {"coins": [...]} and {"items": [...]};
    whichever is present is returned, otherwise the body as-is.
    """

    METADATA = ToolMetadata(
        name="paragraph_get_popular_coins",
        description="Get the list of popular coins",
        category="coins",
        tags=["coin", "token", "popular", "trending", "list", "web3"],
    )

    class InputSchema(GetPopularCoinsInput):
        pass

    async def execute(self, input_data: GetPopularCoinsInput, context: ToolContext) -> Any:
        result = await context.client.request("GET", "/v1/coins/list/popular")
        if isinstance(result, dict):
            for key in ("coins", "items"):
                if result.get(key) is not None:
                    return result[key]
        return result
