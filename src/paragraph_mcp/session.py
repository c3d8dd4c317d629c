"""
Paragraph Session - the collaborators one server process shares.

Bundles the API client, the publication resolver and the tool executor, and
exposes the catalogue as `call(name, arguments) -> ToolResult`.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from .client import ParagraphClient
from .config import ParagraphConfig
from .publication import PublicationResolver
from .tools import ToolContext, ToolExecutor, ToolMetadata, ToolResult

logger = logging.getLogger(__name__)


class ParagraphSession:
    """One client, one resolver and one executor, created once per process."""

    def __init__(
        self,
        config: Optional[ParagraphConfig] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        tool_executor: Optional[ToolExecutor] = None,
    ):
        self.config = config or ParagraphConfig.from_environment()
        self.client = ParagraphClient(self.config, transport=transport)
        self.resolver = PublicationResolver(
            self.client,
            publication_id=self.config.publication_id,
            publication_slug=self.config.publication_slug,
        )
        self.tool_executor = tool_executor or ToolExecutor()
        self.context = ToolContext(
            client=self.client,
            resolver=self.resolver,
            tool_executor=self.tool_executor,
        )

        if not self.config.has_credentials:
            logger.warning("PARAGRAPH_API_KEY is not set. Tool calls will fail until it is configured.")

    def list_tools(self) -> List[ToolMetadata]:
        return self.tool_executor.discover_all_tools()

    async def call(self, tool_name: str, arguments: Optional[Dict[str, Any]] = None) -> ToolResult:
        """Run a tool by name and return its envelope."""
        return await self.tool_executor.execute_tool(tool_name, arguments or {}, self.context)

    async def aclose(self):
        await self.client.aclose()


_session: Optional[ParagraphSession] = None


def get_session() -> ParagraphSession:
    """Process-wide session, created from the environment on first use."""
    global _session
    if _session is None:
        _session = ParagraphSession()
        logger.info(f"Paragraph session initialized: {_session.config.describe()}")
    return _session


def set_session(session: Optional[ParagraphSession]):
    """Replace (or clear) the process-wide session."""
    global _session
    _session = session
