"""Pydantic input models for vault navigation operations.

This module defines input models for navigation tools:
- List files (optionally filtered by folder and extension)
- List folders
- List templates
- Vault information
"""

from __future__ import annotations

from typing import Optional
from pydantic import Field, field_validator

from obsidian_cli_mcp.core.arguments import key_value
from obsidian_cli_mcp.data_models import ObsidianCommand, ObsidianRequest
from obsidian_cli_mcp.validation import validate_extension, validate_folder_token

from .base import BaseVaultInput


class _FolderFilterInput(BaseVaultInput):
    folder: Optional[str] = Field(
        None,
        description="Vault-relative folder to list (omit for the vault root).",
        examples=["Projects", "01 Work/subfolder"]
    )

    @field_validator('folder')
    @classmethod
    def validate_folder(cls, v: Optional[str]) -> Optional[str]:
        """Reject traversal, absolute paths and null bytes in ``folder``."""
        if v is None:
            return None
        return validate_folder_token(v).unwrap()

    def folder_tokens(self) -> list[str]:
        return [key_value("folder", self.folder)] if self.folder else []


class ListFilesInput(_FolderFilterInput):
    """Input model for obsidian_files tool.

    Examples:
        >>> ListFilesInput(folder="Projects", ext="md")
        >>> ListFilesInput(ext="pdf")
    """

    ext: Optional[str] = Field(
        None,
        description="Only list files with this extension, e.g. 'md' or 'pdf'.",
        examples=["md", "canvas", "pdf"]
    )

    @field_validator('ext')
    @classmethod
    def validate_ext(cls, v: Optional[str]) -> Optional[str]:
        """Validate the extension filter. An empty string means no filter."""
        if v is None:
            return None
        return validate_extension(v).unwrap() or None

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {"folder": "Projects", "ext": "md"},
                {"ext": "pdf", "vault": "work"}
            ]
        }

    def to_request(self) -> ObsidianRequest:
        positional = self.folder_tokens()
        if self.ext:
            positional.append(key_value("ext", self.ext))
        return ObsidianRequest(ObsidianCommand.FILES, positional, vault=self.vault)


class ListFoldersInput(_FolderFilterInput):
    """Input model for obsidian_folders tool."""

    def to_request(self) -> ObsidianRequest:
        return ObsidianRequest(ObsidianCommand.FOLDERS, self.folder_tokens(), vault=self.vault)


class ListTemplatesInput(BaseVaultInput):
    """Input model for obsidian_templates tool. Only the optional vault."""

    def to_request(self) -> ObsidianRequest:
        return ObsidianRequest(ObsidianCommand.TEMPLATES, vault=self.vault)


class VaultInfoInput(BaseVaultInput):
    """Input model for obsidian_vault_info tool. Only the optional vault."""

    def to_request(self) -> ObsidianRequest:
        return ObsidianRequest(ObsidianCommand.VAULT, vault=self.vault)
