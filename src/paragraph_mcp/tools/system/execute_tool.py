"""
Execute Tool - Universal proxy for executing discovered tools.

Used in search_only mode, where only search_tool and execute_tool are listed:
search_tool finds a tool, execute_tool runs it by name.
"""

from typing import Any, Dict, Optional
from pydantic import Field
import logging

from ...errors import ParagraphError
from ..base import ToolBase, ToolContext, ToolInput, ToolMetadata

logger = logging.getLogger(__name__)


class ExecuteToolInput(ToolInput):
    """Input schema for execute_tool."""
    tool_name: Optional[str] = Field(
        default=None,
        description="Name of the tool to execute (discover tools first with search_tool)"
    )
    arguments: Dict[str, Any] = Field(
        default_factory=dict,
        description="Arguments to pass to the tool (use schema from search_tool results)"
    )


class ExecuteTool(ToolBase):
    """
    Universal executor for discovered tools.

    Routes to the named tool and returns that tool's `data` as its own; a
    failure of the inner tool becomes the failure of execute_tool, so the
    envelope the caller sees is the same as a direct call.

    Example Workflow:
    ```python
    # Step 1: Discover tools
    search_tool({"query": "subscriber", "detailLevel": "full"})

    # Step 2: Execute discovered tool
    execute_tool({
        "toolName": "paragraph_list_subscribers",
        "arguments": {"limit": 5}
    })
    # Returns: {"success": true, "data": {"subscribers": [...], "pagination": {...}}, "error": null}
    ```
    """

    METADATA = ToolMetadata(
        name="execute_tool",
        description=(
            "Execute a tool discovered via search_tool. "
            "Use search_tool first to discover available tools, "
            "then use execute_tool with the tool name and arguments."
        ),
        category="system",
        tags=["execution", "proxy", "meta", "tools-as-code"],
        requires_auth=False,
    )

    class InputSchema(ExecuteToolInput):
        pass

    async def execute(self, input_data: ExecuteToolInput, context: ToolContext) -> Any:
        """
        Execute a discovered tool by routing to its implementation.

        Raises:
            ParagraphError: With the inner tool's error message when it fails
        """
        tool_name = input_data.tool_name
        if not tool_name:
            raise ParagraphError("toolName is required")
        if tool_name == self.METADATA.name:
            raise ParagraphError("execute_tool cannot execute itself")

        if context.tool_executor is None:
            raise ParagraphError("Tool executor not available in context")

        logger.info(f"execute_tool routing to: {tool_name}")
        result = await context.tool_executor.execute_tool(
            tool_name=tool_name,
            arguments=input_data.arguments,
            context=context
        )

        if not result.success:
            if result.error == f"Tool not found: {tool_name}":
                raise ParagraphError(
                    f"Tool '{tool_name}' not found. Use search_tool to discover available tools first."
                )
            raise ParagraphError(result.error)

        return result.data
