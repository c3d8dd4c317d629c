"""
Base classes and types for the Paragraph tools.
"""

import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from ..errors import ToolValidationError

logger = logging.getLogger(__name__)


class ToolMetadata(BaseModel):
    """Metadata describing a tool."""
    name: str = Field(..., description="Unique identifier for the tool")
    description: str = Field(..., description="Human-readable description of what the tool does")
    category: str = Field(..., description="Category/group this tool belongs to (e.g., 'posts', 'coins')")
    tags: List[str] = Field(default_factory=list, description="Searchable tags for tool discovery")
    requires_auth: bool = Field(default=True, description="Whether tool calls the API with the bearer token")
    uses_publication: bool = Field(default=False, description="Whether tool may auto-discover the publication")
    version: str = Field(default="1.0.0", description="Tool version")


class ToolInput(BaseModel):
    """
    Base class for tool input schemas.

    Fields are declared in snake_case and exposed in camelCase (postId, csvPath, ...).
    Numeric ids are accepted for string fields and passed on as strings.
    """
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore", coerce_numbers_to_str=True
    )


class ToolOutput(BaseModel):
    """Base class for shaped tool results (the `data` of a successful call)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PageInput(ToolInput):
    """Cursor pagination parameters shared by the list tools."""
    limit: int = Field(default=10, ge=1, description="Maximum number of items to return")
    cursor: Optional[str] = Field(default=None, description="Cursor returned by a previous call")

    def page_params(self) -> Dict[str, Any]:
        params: Dict[str, Any] = {"limit": self.limit}
        if self.cursor:
            params["cursor"] = self.cursor
        return params


def page_of(result: Any, items_key: str = "items") -> tuple:
    """Split a list response into (items, pagination), defaulting missing parts."""
    if not isinstance(result, dict):
        return [], {}
    items = result.get(items_key)
    pagination = result.get("pagination")
    return (
        items if isinstance(items, list) else [],
        pagination if isinstance(pagination, dict) else {},
    )


class ToolResult(BaseModel):
    """The envelope every tool call returns."""
    success: bool = Field(..., description="Whether the tool execution was successful")
    data: Any = Field(default=None, description="Tool result, set only on success")
    error: Optional[str] = Field(default=None, description="Error message, set only on failure")

    @classmethod
    def ok(cls, data: Any) -> "ToolResult":
        return cls(success=True, data=data, error=None)

    @classmethod
    def fail(cls, error: str) -> "ToolResult":
        return cls(success=False, data=None, error=error)


class ToolContext(BaseModel):
    """Collaborators shared by every tool call of a session."""
    client: Any = Field(exclude=True)  # ParagraphClient
    resolver: Any = Field(default=None, exclude=True)  # PublicationResolver
    tool_executor: Any = Field(default=None, exclude=True)  # ToolExecutor, for the meta tools

    model_config = ConfigDict(arbitrary_types_allowed=True)


TInput = TypeVar('TInput', bound=ToolInput)


def error_message(error: BaseException) -> str:
    """Reduce an exception to the string reported in the envelope."""
    if isinstance(error, ValidationError):
        problems = []
        for item in error.errors():
            location = ".".join(str(part) for part in item.get("loc", ())) or "arguments"
            problems.append(f"{location}: {item.get('msg')}")
        return "Invalid parameters: " + "; ".join(problems)
    return str(error) or type(error).__name__


def require(input_data: ToolInput, *field_names: str):
    """
    Raise ToolValidationError naming every required field that is empty.

    Field names are reported by their public (camelCase) alias.
    """
    fields = type(input_data).model_fields
    missing = [
        fields[name].alias or name
        for name in field_names
        if getattr(input_data, name) in (None, "")
    ]
    if not missing:
        return
    if len(missing) == 1:
        raise ToolValidationError(f"{missing[0]} is required")
    raise ToolValidationError(f"Missing required parameters: {', '.join(missing)}")


class ToolBase(ABC):
    """
    Base class for all Paragraph tools.

    Each tool should:
    1. Define METADATA as a class attribute
    2. Define InputSchema (and OutputSchema when the result is reshaped) as nested classes
    3. Implement the execute() method, raising on failure

    Tools are only ever called through run(), which converts the outcome of
    execute() into a ToolResult envelope. No exception escapes run().
    """

    METADATA: ToolMetadata
    InputSchema = ToolInput
    OutputSchema: Optional[type] = None

    @abstractmethod
    async def execute(self, input_data: TInput, context: ToolContext) -> Any:
        """
        Execute the tool with validated input.

        Args:
            input_data: Validated input matching InputSchema
            context: Shared client and publication resolver

        Returns:
            The tool result (a ToolOutput, dict, list or string)
        """
        pass

    async def run(self, arguments: Optional[Dict[str, Any]], context: ToolContext) -> ToolResult:
        """Parse arguments, execute, and wrap the outcome in an envelope."""
        name = self.METADATA.name
        try:
            input_data = self.InputSchema.model_validate(arguments or {})
            result = await self.execute(input_data, context)
        except Exception as e:
            message = error_message(e)
            logger.error(f"Tool {name} failed: {message}")
            return ToolResult.fail(message)

        if isinstance(result, BaseModel):
            result = result.model_dump(by_alias=True)
        return ToolResult.ok(result)

    @classmethod
    def get_input_schema(cls) -> Dict[str, Any]:
        """Get JSON Schema for tool input."""
        return cls.InputSchema.model_json_schema(by_alias=True)

    @classmethod
    def get_output_schema(cls) -> Dict[str, Any]:
        """Get JSON Schema for the tool's `data` (empty when the upstream record is passed through)."""
        if cls.OutputSchema is None:
            return {}
        return cls.OutputSchema.model_json_schema(by_alias=True)

    @classmethod
    def get_metadata(cls) -> ToolMetadata:
        """Get tool metadata."""
        return cls.METADATA

    @classmethod
    def to_mcp_tool(cls) -> Dict[str, Any]:
        """Convert to MCP tool format."""
        return {
            "name": cls.METADATA.name,
            "description": cls.METADATA.description,
            "inputSchema": cls.get_input_schema()
        }
