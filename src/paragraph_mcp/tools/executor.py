"""
Dynamic Tool Executor - Loads and executes tools on demand.
"""

import importlib
import inspect
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Type

from .base import ToolBase, ToolContext, ToolMetadata, ToolResult

logger = logging.getLogger(__name__)

# Modules in the tools directory that never contain tools
_SKIPPED_FILES = {"base.py", "executor.py"}


class ToolExecutor:
    """
    Manages dynamic loading and execution of tools.

    Features:
    - Discovers tools from filesystem
    - Loads tools on-demand
    - Caches loaded tools for performance
    - Wraps every execution in a ToolResult envelope
    """

    def __init__(self, tools_dir: Optional[Path] = None, package: Optional[str] = None):
        """
        Initialize the tool executor.

        Args:
            tools_dir: Directory containing tool modules (defaults to this package)
            package: Dotted package name matching tools_dir
        """
        if tools_dir is None:
            tools_dir = Path(__file__).parent
            package = __package__
        self.tools_dir = tools_dir
        self.package = package or __package__
        self._tool_cache: Dict[str, Type[ToolBase]] = {}
        self._metadata_cache: Dict[str, List[Type[ToolBase]]] = {}
        self._scanned = False

    def _module_paths(self) -> List[str]:
        paths = []
        for py_file in sorted(self.tools_dir.rglob("*.py")):
            if py_file.name.startswith("_") or py_file.name in _SKIPPED_FILES:
                continue
            rel_path = py_file.relative_to(self.tools_dir).with_suffix("")
            paths.append(".".join((self.package,) + rel_path.parts))
        return paths

    def _load_module_tools(self, module_path: str) -> List[Type[ToolBase]]:
        """
        Import a module and return the ToolBase subclasses it defines.

        Args:
            module_path: Python module path (e.g., 'paragraph_mcp.tools.posts.get_post')
        """
        if module_path in self._metadata_cache:
            return self._metadata_cache[module_path]

        try:
            module = importlib.import_module(module_path)
        except Exception as e:
            logger.error(f"Error loading tools from {module_path}: {e}")
            return []

        found = []
        for _, obj in inspect.getmembers(module, inspect.isclass):
            if (issubclass(obj, ToolBase) and
                obj is not ToolBase and
                obj.__module__ == module.__name__ and
                hasattr(obj, 'METADATA')):
                found.append(obj)

        self._metadata_cache[module_path] = found
        return found

    def _scan(self):
        if self._scanned:
            return
        for module_path in self._module_paths():
            for tool_class in self._load_module_tools(module_path):
                name = tool_class.METADATA.name
                if name in self._tool_cache and self._tool_cache[name] is not tool_class:
                    logger.warning(f"Duplicate tool name {name} in {module_path}, keeping the first")
                    continue
                self._tool_cache[name] = tool_class
                logger.debug(f"Discovered tool: {name} from {module_path}")
        self._scanned = True

    def discover_all_tools(self) -> List[ToolMetadata]:
        """
        Discover all available tools by scanning the tools directory.

        Returns:
            List of tool metadata for all discovered tools, sorted by name
        """
        self._scan()
        return [self._tool_cache[name].METADATA for name in sorted(self._tool_cache)]

    def tool_names(self) -> List[str]:
        """Names of every discovered tool."""
        return [meta.name for meta in self.discover_all_tools()]

    def load_tool(self, tool_name: str) -> Optional[Type[ToolBase]]:
        """
        Load a tool class by name.

        Args:
            tool_name: Name of the tool to load

        Returns:
            Tool class or None if not found
        """
        self._scan()
        tool_class = self._tool_cache.get(tool_name)
        if tool_class is None:
            logger.warning(f"Tool not found: {tool_name}")
        return tool_class

    async def execute_tool(
        self,
        tool_name: str,
        arguments: Optional[Dict[str, Any]],
        context: ToolContext
    ) -> ToolResult:
        """
        Load and execute a tool with given arguments.

        Args:
            tool_name: Name of the tool to execute
            arguments: Tool input arguments
            context: Execution context

        Returns:
            The tool's envelope
        """
        tool_class = self.load_tool(tool_name)
        if not tool_class:
            return ToolResult.fail(f"Tool not found: {tool_name}")

        if context.tool_executor is None:
            context = context.model_copy(update={"tool_executor": self})

        logger.info(f"Executing tool {tool_name}")
        return await tool_class().run(arguments, context)

    def search_tools(
        self,
        query: Optional[str] = None,
        category: Optional[str] = None,
        tags: Optional[List[str]] = None,
        detail_level: str = "standard",
        uses_publication: Optional[bool] = None
    ) -> List[Dict[str, Any]]:
        """
        Search for tools matching criteria.

        Args:
            query: Text query to match against name/description
            category: Filter by category
            tags: Filter by tags (any match)
            detail_level: Amount of detail to return ('minimal', 'standard', 'full')
            uses_publication: Keep only tools that do (True) or do not (False) fall back to the
                auto-discovered publication

        Returns:
            List of tool information matching criteria
        """
        results = []

        for metadata in self.discover_all_tools():
            if category and metadata.category != category:
                continue

            if tags and not any(tag in metadata.tags for tag in tags):
                continue

            if uses_publication is not None and metadata.uses_publication != uses_publication:
                continue

            if query:
                query_lower = query.lower()
                if not (query_lower in metadata.name.lower() or
                        query_lower in metadata.description.lower() or
                        any(query_lower in tag.lower() for tag in metadata.tags)):
                    continue

            if detail_level == "minimal":
                results.append({
                    "name": metadata.name,
                    "category": metadata.category
                })
            elif detail_level == "standard":
                results.append({
                    "name": metadata.name,
                    "description": metadata.description,
                    "category": metadata.category,
                    "tags": metadata.tags
                })
            else:  # full
                tool_class = self._tool_cache[metadata.name]
                results.append({
                    "name": metadata.name,
                    "description": metadata.description,
                    "category": metadata.category,
                    "tags": metadata.tags,
                    "requires_auth": metadata.requires_auth,
                    "uses_publication": metadata.uses_publication,
                    "version": metadata.version,
                    "inputSchema": tool_class.get_input_schema(),
                    "outputSchema": tool_class.get_output_schema()
                })

        return results

    def clear_cache(self):
        """Clear the tool cache (useful for development/hot reload)."""
        self._tool_cache.clear()
        self._metadata_cache.clear()
        self._scanned = False
        logger.info("Tool cache cleared")
