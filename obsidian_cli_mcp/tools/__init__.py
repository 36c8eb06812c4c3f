"""MCP tool definitions for Obsidian CLI operations.

This module imports all tool submodules to register them with the MCP server.
Each tool module uses the @mcp.tool() decorator to auto-register its tools.
"""

# Import all tool modules to register their @mcp.tool() decorated functions
from obsidian_cli_mcp.tools import query_tools
from obsidian_cli_mcp.tools import write_tools
from obsidian_cli_mcp.tools import navigation_tools
from obsidian_cli_mcp.tools import sync_tools

__all__ = [
    "query_tools",
    "write_tools",
    "navigation_tools",
    "sync_tools",
]
