"""Obsidian CLI MCP Server

Exposes the Obsidian CLI and the headless sync client via Model Context Protocol.
"""

from obsidian_cli_mcp.config import get_configuration, load_configuration
from obsidian_cli_mcp.data_models import (
    CliConfiguration,
    ExecutionResult,
    ExecutionTarget,
    ObCommand,
    ObsidianCommand,
    ObsidianRequest,
)
from obsidian_cli_mcp.server import mcp, run_server

# Import tools to register them with the MCP server
from obsidian_cli_mcp import tools  # noqa: F401

__version__ = "0.1.0"
__all__ = [
    "CliConfiguration",
    "ExecutionResult",
    "ExecutionTarget",
    "ObCommand",
    "ObsidianCommand",
    "ObsidianRequest",
    "get_configuration",
    "load_configuration",
    "mcp",
    "run_server",
]
