"""
List Subscribers Tool - Page through the publication's subscribers.
"""

from typing import Any, Dict, List
from pydantic import Field

from ..base import PageInput, ToolBase, ToolContext, ToolMetadata, ToolOutput, page_of


class ListSubscribersInput(PageInput):
    """Input schema for paragraph_list_subscribers."""
    pass


class ListSubscribersOutput(ToolOutput):
    """Output schema for paragraph_list_subscribers."""
    subscribers: List[Any] = Field(default_factory=list, description="Subscribers on this page")
    pagination: Dict[str, Any] = Field(default_factory=dict, description="Cursor pagination info")


class ListSubscribersTool(ToolBase):
    """
    Lists subscribers with cursor pagination.

    The endpoint takes no publication id: the API key already scopes it.
    """

    METADATA = ToolMetadata(
        name="paragraph_list_subscribers",
        description="List subscribers of the publication (cursor-based pagination)",
        category="subscribers",
        tags=["subscriber", "list", "email", "pagination"],
    )

    class InputSchema(ListSubscribersInput):
        pass

    OutputSchema = ListSubscribersOutput

    async def execute(self, input_data: ListSubscribersInput, context: ToolContext) -> ListSubscribersOutput:
        result = await context.client.request("GET", "/v1/subscribers", params=input_data.page_params())
        subscribers, pagination = page_of(result)
        return ListSubscribersOutput(subscribers=subscribers, pagination=pagination)
