"""
Exception types raised by the Paragraph client and tools.

Every error is reduced to its message by the tool wrapper, so callers of the
MCP tools only ever see strings. The classes exist so the client, the
publication resolver and the tools can raise something more precise than a
bare Exception.
"""

from typing import Optional


class ParagraphError(Exception):
    """Base class for all Paragraph MCP errors."""


class ConfigurationError(ParagraphError):
    """Raised when the API credential (or other required setting) is missing."""


class ToolValidationError(ParagraphError):
    """Raised when a tool is called without a required parameter."""


class DiscoveryError(ParagraphError):
    """Raised when the publication id or slug cannot be auto-discovered."""


class ParagraphAPIError(ParagraphError):
    """Raised for any non-2xx response from the Paragraph API."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
