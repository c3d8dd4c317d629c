"""
Get Publication By Domain Tool - Fetch a publication by its custom domain.
"""

from typing import Any, Optional
from pydantic import Field

from ...client import quote_segment
from ..base import ToolBase, ToolContext, ToolInput, ToolMetadata, require


class GetPublicationByDomainInput(ToolInput):
    """Input schema for paragraph_get_publication_by_domain."""
    domain: Optional[str] = Field(default=None, description="Custom domain, e.g. blog.example.com (required)")


class GetPublicationByDomainTool(ToolBase):

    METADATA = ToolMetadata(
        name="paragraph_get_publication_by_domain",
        description="Get a publication by its custom domain",
        category="publications",
        tags=["publication", "get", "domain", "blog"],
    )

    class InputSchema(GetPublicationByDomainInput):
        pass

    async def execute(self, input_data: GetPublicationByDomainInput, context: ToolContext) -> Any:
        require(input_data, "domain")
        return await context.client.request("GET", f"/publications/domain/{quote_segment(input_data.domain)}")
