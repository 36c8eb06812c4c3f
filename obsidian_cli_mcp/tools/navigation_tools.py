"""MCP tools for vault navigation."""

from obsidian_cli_mcp.server import mcp
from obsidian_cli_mcp.models import (
    ListFilesInput,
    ListFoldersInput,
    ListTemplatesInput,
    VaultInfoInput,
)
from obsidian_cli_mcp.tools._delegate import obsidian_tool


@mcp.tool()
async def obsidian_files(input: ListFilesInput) -> str:
    """List files in the vault, optionally filtered by folder or extension.

    Args:
        input (ListFilesInput): Validated input containing:
            - folder (str, optional): Vault-relative folder (omit for the root)
            - ext (str, optional): Extension filter, e.g. "md" or "pdf"
            - vault (str, optional): Vault name (omit to use default vault)

    Returns:
        One vault-relative file path per line.

    Examples:
        - Use when: Browsing a folder before reading notes
        - Use ext="canvas": To find canvases only
    """
    return await obsidian_tool(input.to_request())


@mcp.tool()
async def obsidian_folders(input: ListFoldersInput) -> str:
    """List folders in the vault."""
    return await obsidian_tool(input.to_request())


@mcp.tool()
async def obsidian_templates(input: ListTemplatesInput) -> str:
    """List available templates in the vault."""
    return await obsidian_tool(input.to_request())


@mcp.tool()
async def obsidian_vault_info(input: VaultInfoInput) -> str:
    """Get vault metadata (name, path, file count, etc.).

    Returns:
        Vault information as reported by the CLI.

    Examples:
        - Use when: Starting a conversation to confirm which vault is targeted
    """
    return await obsidian_tool(input.to_request())
