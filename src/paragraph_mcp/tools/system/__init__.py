"""
System Tools Package

Contains the connection check and the meta-tools for the tools-as-code pattern:
- paragraph_test_connection: Verify the API key works
- execute_tool: Universal executor for discovered tools
"""

__all__ = ['connection_check', 'execute_tool']
