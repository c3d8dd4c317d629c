"""
Tools as Code - Paragraph tool catalogue

Each tool is a separate Python module with typed interfaces (Pydantic models),
organised by category (posts/, publications/, subscribers/, coins/, users/,
system/). Tools are discovered from the filesystem by ToolExecutor and always
run through ToolBase.run, which returns a {success, data, error} envelope.
"""

from .base import ToolBase, ToolContext, ToolMetadata, ToolInput, ToolOutput, ToolResult
from .executor import ToolExecutor

__all__ = [
    "ToolBase",
    "ToolContext",
    "ToolMetadata",
    "ToolInput",
    "ToolOutput",
    "ToolResult",
    "ToolExecutor",
]
