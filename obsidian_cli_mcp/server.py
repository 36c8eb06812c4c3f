"""FastMCP server initialization and startup."""

import logging
import sys

from mcp.server.fastmcp import FastMCP

from obsidian_cli_mcp.config import load_configuration, set_configuration
from obsidian_cli_mcp.constants import LOG_LEVEL
from obsidian_cli_mcp.errors import ConfigurationError

# Initialize logger
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("obsidian_cli")

# Tool modules are imported in __init__.py to register all @mcp.tool() decorators


def run_server():
    """Resolve configuration and start the MCP server with stdio transport."""
    try:
        config = load_configuration()
    except ConfigurationError as exc:
        logger.error("Failed to start obsidian-cli-mcp server: %s", exc)
        sys.exit(1)

    set_configuration(config)
    logger.info(
        "Starting Obsidian CLI MCP Server (obsidian=%s, ob=%s, default vault=%s)",
        config.obsidian_cli_path,
        config.ob_cli_path,
        config.vault or "<none>",
    )
    mcp.run(transport="stdio")
