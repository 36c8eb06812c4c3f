"""MCP tools for the Obsidian headless sync client (``ob``)."""

import logging

from obsidian_cli_mcp.server import mcp
from obsidian_cli_mcp.models import SyncInput, SyncStatusInput
from obsidian_cli_mcp.tools._delegate import ob_tool

logger = logging.getLogger(__name__)


@mcp.tool()
async def obsidian_sync(input: SyncInput) -> str:
    """Trigger Obsidian sync (requires ob headless client).

    The vault is addressed by OBSIDIAN_VAULT_PATH. Continuous sync runs until
    OB_CLI_TIMEOUT expires, after which the call fails with a timeout.

    Args:
        input (SyncInput): Validated input containing:
            - continuous (bool): Keep syncing instead of a single pass

    Error Handling:
        - ob not installed → spawn error naming the binary
        - Sync exceeds OB_CLI_TIMEOUT → timeout error, ob is terminated
    """
    command, args = input.to_args()
    logger.info("Starting %s sync", "continuous" if input.continuous else "one-shot")
    return await ob_tool(command, args)


@mcp.tool()
async def obsidian_sync_status(input: SyncStatusInput) -> str:
    """Check Obsidian sync status (requires ob headless client)."""
    command, args = input.to_args()
    return await ob_tool(command, args)
