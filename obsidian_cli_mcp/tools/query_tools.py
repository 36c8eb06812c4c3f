"""Reading and querying tools for Obsidian CLI operations.

This module contains the MCP tool wrappers for read-only operations:
- obsidian_read: Read note content
- obsidian_search: Full-text search with context
- obsidian_outline: Heading structure of a note
- obsidian_backlinks: Incoming links
- obsidian_links: Outgoing links
- obsidian_tags: Tags with counts
- obsidian_tasks: Tasks (todos)

Each tool validates its input model, builds the request, and delegates to the
``obsidian`` binary.
"""
from __future__ import annotations

from obsidian_cli_mcp.server import mcp
from obsidian_cli_mcp.models import (
    ReadNoteInput,
    SearchInput,
    OutlineInput,
    BacklinksInput,
    LinksInput,
    TagsInput,
    TasksInput,
)
from obsidian_cli_mcp.tools._delegate import obsidian_tool


# ==============================================================================
# READ OPERATIONS
# ==============================================================================

@mcp.tool()
async def obsidian_read(input: ReadNoteInput) -> str:
    """Read the contents of an Obsidian note.

    Args:
        input (ReadNoteInput): Validated input containing:
            - file (str, optional): Note name, resolved like a wikilink
                Examples: "Meeting Notes", "Roadmap.md"
            - path (str, optional): Exact vault-relative path
                Example: "01 Work/Projects/Roadmap.md"
            - vault (str, optional): Vault name (omit to use default vault)

    Returns:
        The note's markdown content as text.

    Examples:
        - Use when: Need the full text of a known note
        - Workflow: obsidian_search() → obsidian_read()
        - Don't use: Only need headings → Use obsidian_outline()

    Error Handling:
        - ValidationError: '..' traversal, absolute path, null byte, or invalid vault name
        - Note not found → CLI error message is returned as a tool error
    """
    return await obsidian_tool(input.to_request())


@mcp.tool()
async def obsidian_search(input: SearchInput) -> str:
    """Full-text search across vault notes with context.

    Args:
        input (SearchInput): Validated input containing:
            - query (str): Search text (1-10000 characters)
            - folder (str, optional): Restrict to a vault-relative folder
            - limit (int, optional): Maximum number of files
            - vault (str, optional): Vault name (omit to use default vault)

    Returns:
        Matching files with the lines that matched, as printed by the CLI.

    Error Handling:
        - ValidationError: Empty query, non-positive limit, unsafe folder
    """
    return await obsidian_tool(input.to_request())


@mcp.tool()
async def obsidian_outline(input: OutlineInput) -> str:
    """Get the heading structure of a note."""
    return await obsidian_tool(input.to_request())


# ==============================================================================
# LINK GRAPH
# ==============================================================================

@mcp.tool()
async def obsidian_backlinks(input: BacklinksInput) -> str:
    """Get incoming links to a note.

    Set ``counts`` to include how many times each note links here.
    """
    return await obsidian_tool(input.to_request())


@mcp.tool()
async def obsidian_links(input: LinksInput) -> str:
    """Get outgoing links from a note."""
    return await obsidian_tool(input.to_request())


# ==============================================================================
# TAGS & TASKS
# ==============================================================================

@mcp.tool()
async def obsidian_tags(input: TagsInput) -> str:
    """List tags in a note or across the vault with counts.

    Args:
        input (TagsInput): Validated input containing:
            - file / path (str, optional): Note to inspect (omit for whole vault)
            - sort (str, optional): "name" or "count"
            - vault (str, optional): Vault name (omit to use default vault)
    """
    return await obsidian_tool(input.to_request())


@mcp.tool()
async def obsidian_tasks(input: TasksInput) -> str:
    """List tasks (todos) in a note or across the vault.

    Args:
        input (TasksInput): Validated input containing:
            - file / path (str, optional): Note to inspect (omit for whole vault)
            - status (str, optional): "todo", "done" or "all"
            - vault (str, optional): Vault name (omit to use default vault)

    Returns:
        Task lines with their line numbers. Use the line number with
        obsidian_task_update() to change a task's status.
    """
    return await obsidian_tool(input.to_request())
