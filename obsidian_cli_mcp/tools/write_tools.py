"""Note writing MCP tools.

This module provides MCP tool wrappers for operations that modify the vault:
- Create notes
- Append / prepend content
- Set frontmatter properties
- Update task status

All tools delegate to the ``obsidian`` binary. Content is passed as a single
argv entry and never reaches a shell.
"""
from __future__ import annotations

import logging

from obsidian_cli_mcp.server import mcp
from obsidian_cli_mcp.models import (
    CreateNoteInput,
    AppendInput,
    PrependInput,
    PropertySetInput,
    TaskUpdateInput,
)
from obsidian_cli_mcp.tools._delegate import obsidian_tool

logger = logging.getLogger(__name__)


# ==============================================================================
# CREATE OPERATIONS
# ==============================================================================

@mcp.tool()
async def obsidian_create(input: CreateNoteInput) -> str:
    """Create a new note in the vault.

    Args:
        input (CreateNoteInput): Validated input containing:
            - name (str): Name of the new note
            - path (str, optional): Folder to create it in
            - content (str, optional): Initial markdown (up to 100000 characters)
            - template (str, optional): Template to create the note from
            - overwrite (bool): Replace an existing note with the same name
            - vault (str, optional): Vault name (omit to use default vault)

    Returns:
        The CLI's confirmation message.

    Examples:
        - Use when: Creating a note from scratch or from a template
        - Don't use: Adding to an existing note → Use obsidian_append()

    Error Handling:
        - ValidationError: Unsafe name/path/template, or content too long
        - Note exists and overwrite=False → CLI error returned as a tool error
    """
    logger.info("Creating note '%s' (vault=%s)", input.name, input.vault or "<default>")
    return await obsidian_tool(input.to_request())


# ==============================================================================
# UPDATE OPERATIONS
# ==============================================================================

@mcp.tool()
async def obsidian_append(input: AppendInput) -> str:
    """Append content to an existing note.

    Args:
        input (AppendInput): Validated input containing:
            - content (str): Markdown to append (must not be empty)
            - file / path (str, optional): Target note
            - vault (str, optional): Vault name (omit to use default vault)

    Examples:
        - Use when: Adding entries to logs or journals
        - Don't use: Adding to the beginning → Use obsidian_prepend()
    """
    logger.info("Appending %d characters (vault=%s)", len(input.content), input.vault or "<default>")
    return await obsidian_tool(input.to_request())


@mcp.tool()
async def obsidian_prepend(input: PrependInput) -> str:
    """Prepend content to an existing note."""
    logger.info("Prepending %d characters (vault=%s)", len(input.content), input.vault or "<default>")
    return await obsidian_tool(input.to_request())


@mcp.tool()
async def obsidian_property_set(input: PropertySetInput) -> str:
    """Set a frontmatter property on a note.

    Args:
        input (PropertySetInput): Validated input containing:
            - name (str): Property name
            - value (str): Property value
            - type (str, optional): Obsidian property type, e.g. "date"
            - file / path (str, optional): Target note
            - vault (str, optional): Vault name (omit to use default vault)

    Error Handling:
        - ValidationError: Property name outside the allowed characters
    """
    logger.info("Setting property '%s' (vault=%s)", input.name, input.vault or "<default>")
    return await obsidian_tool(input.to_request())


@mcp.tool()
async def obsidian_task_update(input: TaskUpdateInput) -> str:
    """Update a task's status (toggle, complete, etc.).

    Use obsidian_tasks() first to find the task's line number.
    """
    logger.info("Task update '%s' on line %d (vault=%s)", input.action, input.line, input.vault or "<default>")
    return await obsidian_tool(input.to_request())
