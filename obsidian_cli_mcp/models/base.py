"""Base Pydantic models for MCP tool input validation.

This module defines base models that provide common validation patterns
for operations delegated to the Obsidian CLI. Other input models inherit
from these bases.

Base Models:
- BaseVaultInput: Optional vault override, validated by the vault-name contract
- BaseNoteTargetInput: Adds the optional ``file`` / ``path`` note selectors
"""

from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, Field, field_validator

from obsidian_cli_mcp.core.arguments import key_value
from obsidian_cli_mcp.validation import (
    validate_file_token,
    validate_vault_name,
)


class BaseVaultInput(BaseModel):
    """Base model for every ``obsidian`` tool.

    The optional ``vault`` overrides the configured default vault. It is
    passed to the CLI as ``--vault=<name>``, so it must satisfy the strict
    vault-name allow-list and must not start with a dash.
    """

    vault: Optional[str] = Field(
        None,
        description=(
            "Vault name (omit to use the configured default vault). "
            "Letters, numbers, spaces, hyphens, underscores, parentheses and dots only."
        ),
        examples=["My Vault", "work-notes", "Vault (backup)"]
    )

    @field_validator('vault')
    @classmethod
    def validate_vault(cls, v: Optional[str]) -> Optional[str]:
        """Validate the vault override.

        Args:
            v: The vault name to validate

        Returns:
            The validated vault name or None

        Raises:
            ValueError: If the vault name is empty, too long, contains characters
                outside the allow-list, or starts with a dash
        """
        if v is None:
            return None
        return validate_vault_name(v).unwrap()


class BaseNoteTargetInput(BaseVaultInput):
    """Base model for operations on a single note.

    The note is selected by ``file`` (name, resolved like a wikilink) or
    ``path`` (exact vault-relative path). When both are omitted the CLI
    falls back to the active file in Obsidian.
    """

    file: Optional[str] = Field(
        None,
        description=(
            "Note file name, resolved like a wikilink. "
            "Examples: 'Meeting Notes', 'Projects/Roadmap.md'. "
            "Must be relative: no leading '/', no '..' segments."
        ),
        examples=["Meeting Notes", "note (copy).md"]
    )

    path: Optional[str] = Field(
        None,
        description=(
            "Exact path of the note relative to the vault root. "
            "Example: '01 Work/Projects/Roadmap.md'."
        ),
        examples=["01 Work/Projects/Roadmap.md"]
    )

    @field_validator('file')
    @classmethod
    def validate_file(cls, v: Optional[str]) -> Optional[str]:
        """Reject traversal, absolute paths and null bytes in ``file``."""
        if v is None:
            return None
        return validate_file_token(v).unwrap()

    @field_validator('path')
    @classmethod
    def validate_path(cls, v: Optional[str]) -> Optional[str]:
        """Reject traversal, absolute paths and null bytes in ``path``."""
        if v is None:
            return None
        return validate_file_token(v, label="Path").unwrap()

    def target_tokens(self) -> list[str]:
        """Positional ``file=`` / ``path=`` tokens for the selected note."""
        tokens = []
        if self.file:
            tokens.append(key_value("file", self.file))
        if self.path:
            tokens.append(key_value("path", self.path))
        return tokens
