"""Pydantic input models for MCP tool validation.

This package defines Pydantic models that validate the input of every MCP
tool before anything reaches the Obsidian CLI. Field validators delegate to
the named contracts in :mod:`obsidian_cli_mcp.validation`, so a rejected value
surfaces as a per-field ``ValidationError`` and no process is started.

Each ``obsidian`` model also knows how to turn itself into an
:class:`~obsidian_cli_mcp.data_models.ObsidianRequest` (``to_request()``).

Architecture:
- base: BaseVaultInput and BaseNoteTargetInput (vault override, file/path selectors)
- query_models: read, search, outline, backlinks, links, tags, tasks
- write_models: create, append, prepend, property set, task update
- navigation_models: files, folders, templates, vault info
- sync_models: sync and sync status (``ob`` client)

Usage:
    from obsidian_cli_mcp.models import ReadNoteInput, SearchInput
    from obsidian_cli_mcp.models import SyncInput
"""

from .base import BaseVaultInput, BaseNoteTargetInput
from .query_models import (
    ReadNoteInput,
    SearchInput,
    OutlineInput,
    BacklinksInput,
    LinksInput,
    TagsInput,
    TasksInput,
)
from .write_models import (
    CreateNoteInput,
    AppendInput,
    PrependInput,
    PropertySetInput,
    TaskUpdateInput,
)
from .navigation_models import (
    ListFilesInput,
    ListFoldersInput,
    ListTemplatesInput,
    VaultInfoInput,
)
from .sync_models import (
    SyncInput,
    SyncStatusInput,
)

__all__ = [
    # Base models
    "BaseVaultInput",
    "BaseNoteTargetInput",
    # Query models
    "ReadNoteInput",
    "SearchInput",
    "OutlineInput",
    "BacklinksInput",
    "LinksInput",
    "TagsInput",
    "TasksInput",
    # Write models
    "CreateNoteInput",
    "AppendInput",
    "PrependInput",
    "PropertySetInput",
    "TaskUpdateInput",
    # Navigation models
    "ListFilesInput",
    "ListFoldersInput",
    "ListTemplatesInput",
    "VaultInfoInput",
    # Sync models
    "SyncInput",
    "SyncStatusInput",
]
