"""
MCP Tool Handlers for the Paragraph tools

Bridges the MCP list_tools / call_tool requests to the tool executor. Two
listing modes are supported via the TOOLS_MODE environment variable:

- TOOLS_MODE=hybrid (default): every tool is listed and directly callable
- TOOLS_MODE=search_only: only search_tool and execute_tool are listed;
  the other tools are found with search_tool and run through execute_tool
"""

import json
import logging
from typing import Any, List

import mcp.types as types

from .config import get_tools_mode
from .session import get_session
from .tools import ToolResult

logger = logging.getLogger(__name__)

ResponseType = List[types.TextContent | types.ImageContent | types.EmbeddedResource]

SEARCH_ONLY_TOOLS = ("search_tool", "execute_tool")


def format_result(result: ToolResult) -> ResponseType:
    """Render an envelope as MCP text content."""
    return [types.TextContent(
        type="text",
        text=json.dumps(result.model_dump(), default=str, indent=2)
    )]


async def handle_list_tools() -> list[types.Tool]:
    """List the tools for the configured TOOLS_MODE."""
    session = get_session()
    executor = session.tool_executor
    tools_mode = get_tools_mode()

    if tools_mode == "search_only":
        names = list(SEARCH_ONLY_TOOLS)
    else:
        names = executor.tool_names()

    mcp_tools = []
    for name in names:
        tool_class = executor.load_tool(name)
        if tool_class:
            mcp_tools.append(types.Tool(**tool_class.to_mcp_tool()))

    logger.info(f"Listing {len(mcp_tools)} tools in {tools_mode} mode")
    return mcp_tools


async def handle_tool_call(name: str, arguments: dict[str, Any] | None) -> ResponseType:
    """
    Handle tool execution.

    Args:
        name: Tool name
        arguments: Tool arguments

    Returns:
        The tool's {success, data, error} envelope as JSON text
    """
    logger.info(f"Tool call: {name}")
    result = await get_session().call(name, arguments or {})
    if not result.success:
        logger.warning(f"Tool {name} returned error: {result.error}")
    return format_result(result)
