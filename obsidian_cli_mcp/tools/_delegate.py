"""Shared plumbing between MCP tools and the CLI executor."""

from __future__ import annotations

from typing import Iterable

from obsidian_cli_mcp.config import get_configuration
from obsidian_cli_mcp.core.executor import run_ob_cli, run_obsidian_cli
from obsidian_cli_mcp.core.output import format_text_response
from obsidian_cli_mcp.data_models import ObCommand, ObsidianRequest


async def obsidian_tool(request: ObsidianRequest) -> str:
    """Run an ``obsidian`` request and render the text response."""
    result = await run_obsidian_cli(get_configuration(), request)
    return format_text_response(result)


async def ob_tool(command: ObCommand, args: Iterable[str] = ()) -> str:
    """Run an ``ob`` subcommand and render the text response."""
    result = await run_ob_cli(get_configuration(), command, args)
    return format_text_response(result)
