"""
Search Tool - find Paragraph tools by topic, category or tag.

Results are read from the tool metadata, and the guide that comes back tells
the agent how to call what it found: directly in hybrid mode, through
execute_tool in search_only mode.
"""

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from ..config import get_tools_mode
from .base import ToolBase, ToolContext, ToolInput, ToolMetadata


class SearchToolInput(ToolInput):
    query: Optional[str] = Field(
        default=None,
        description="Text matched against tool names, descriptions and tags (e.g. 'subscriber', 'wallet')"
    )
    category: Optional[str] = Field(
        default=None,
        description="One of: posts, publications, subscribers, coins, users, system"
    )
    tags: Optional[List[str]] = Field(
        default=None,
        description="Keep tools carrying any of these tags"
    )
    uses_publication: Optional[bool] = Field(
        default=None,
        description="true: only tools that fall back to your own publication; false: only tools that never do"
    )
    detail_level: Literal["minimal", "standard", "full"] = Field(
        default="standard",
        description="'minimal' (name, category), 'standard' (+ description, tags), 'full' (+ input/output schemas)"
    )


class SearchResults(BaseModel):
    """Data of a search_tool call. Keys stay snake_case."""
    tools: List[Dict[str, Any]] = Field(default_factory=list)
    count: int = 0
    execution_guide: str = ""


class SearchTool(ToolBase):
    """
    Look up Paragraph tools.

    {"category": "subscribers"}
    {"query": "coin", "detailLevel": "full"}
    {"usesPublication": true}
    """

    METADATA = ToolMetadata(
        name="search_tool",
        description=(
            "Find Paragraph tools (posts, publications, subscribers, coins, users) "
            "and learn how to call them."
        ),
        category="system",
        tags=["search", "discovery", "meta"],
        requires_auth=False,
    )

    class InputSchema(SearchToolInput):
        pass

    OutputSchema = SearchResults

    async def execute(self, input_data: SearchToolInput, context: ToolContext) -> SearchResults:
        from .executor import ToolExecutor

        executor = context.tool_executor or ToolExecutor()
        tools = executor.search_tools(
            query=input_data.query,
            category=input_data.category,
            tags=input_data.tags,
            detail_level=input_data.detail_level,
            uses_publication=input_data.uses_publication,
        )
        metadata = [executor.load_tool(tool["name"]).METADATA for tool in tools]

        return SearchResults(
            tools=tools,
            count=len(tools),
            execution_guide=execution_guide(metadata, get_tools_mode()),
        )


def execution_guide(found: List[ToolMetadata], tools_mode: str) -> str:
    """Explain how to call the tools found, for the given TOOLS_MODE."""
    if not found:
        return "No tools found. Try a broader query or one of the categories: posts, publications, subscribers, coins, users."

    names = [metadata.name for metadata in found]
    if tools_mode == "search_only":
        lines = [
            f"Found {len(found)} tool(s). Run them through execute_tool:",
            f'  execute_tool({{"toolName": "{names[0]}", "arguments": {{...}}}})',
            "Argument names are the camelCase keys of each tool's inputSchema.",
        ]
    else:
        lines = [f"Found {len(found)} tool(s). These tools are directly callable: {', '.join(names)}"]

    with_publication = [metadata.name for metadata in found if metadata.uses_publication]
    if with_publication:
        lines.append(
            f"{', '.join(with_publication)}: use your own publication, "
            "discovered from the API key, when no publicationId is passed."
        )
    if any(metadata.requires_auth for metadata in found):
        lines.append("Tools calling the API need PARAGRAPH_API_KEY to be set.")

    return "\n".join(lines)
