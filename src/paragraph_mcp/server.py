"""
Paragraph MCP Server using FastMCP
Supports all transport methods: stdio, SSE, and streamable-http
"""
import asyncio
import logging
import os

import uvicorn
from mcp.server import Server
from mcp.server.fastmcp import FastMCP
from mcp.server.sse import SseServerTransport
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.routing import Mount, Route

from .config import get_tools_mode
from .fnc_tools import handle_list_tools, handle_tool_call
from .session import get_session

logger = logging.getLogger(__name__)

# Create FastMCP app
app = FastMCP("paragraph-mcp")

# Set up the handlers using the internal MCP server for dynamic tools
app._mcp_server.list_tools()(handle_list_tools)
app._mcp_server.call_tool(validate_input=False)(handle_tool_call)


def configure_logging():
    """Configure root logging from LOG_LEVEL (default INFO)."""
    level = os.getenv("LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s %(message)s"
    )


def create_starlette_app(mcp_server: Server, *, debug: bool = False) -> Starlette:
    """Create a Starlette application for SSE transport."""
    sse = SseServerTransport("/messages/")

    async def handle_sse(request: Request) -> None:
        async with sse.connect_sse(
                request.scope,
                request.receive,
                request._send,
        ) as (read_stream, write_stream):
            await mcp_server.run(
                read_stream,
                write_stream,
                mcp_server.create_initialization_options(),
            )

    routes = [
        Route("/sse", endpoint=handle_sse),
        Mount("/messages/", app=sse.handle_post_message),
    ]
    return Starlette(debug=debug, routes=routes)


async def main():
    """Main entry point for the server."""
    configure_logging()

    session = get_session()
    logger.info(f"Tools Mode: {get_tools_mode()}")
    logger.info(f"Discovered {len(session.list_tools())} tools")

    mcp_transport = os.getenv("MCP_TRANSPORT", "stdio").lower()
    logger.info(f"MCP_TRANSPORT: {mcp_transport}")

    try:
        if mcp_transport == "sse":
            host = os.getenv("MCP_HOST", "127.0.0.1")
            port = int(os.getenv("MCP_PORT", "8000"))
            logger.info(f"Starting MCP server on {host}:{port}")
            starlette_app = create_starlette_app(app._mcp_server, debug=False)
            config = uvicorn.Config(starlette_app, host=host, port=port, log_level="info")
            await uvicorn.Server(config).serve()
        elif mcp_transport == "streamable-http":
            app.settings.host = os.getenv("MCP_HOST", "127.0.0.1")
            app.settings.port = int(os.getenv("MCP_PORT", "8000"))
            app.settings.streamable_http_path = os.getenv("MCP_PATH", "/mcp/")
            logger.info(
                f"Starting MCP server on {app.settings.host}:{app.settings.port} "
                f"with path {app.settings.streamable_http_path}"
            )
            await app.run_streamable_http_async()
        else:
            logger.info("Starting MCP server on stdin/stdout")
            await app.run_stdio_async()
    finally:
        await session.aclose()


if __name__ == "__main__":
    asyncio.run(main())
