"""Pydantic input models for note writing operations.

This module defines input models for tools that modify the vault:
- Create notes (optionally from a template)
- Append / prepend content
- Set frontmatter properties
- Update task status
"""

from __future__ import annotations

from typing import Literal, Optional
from pydantic import Field, field_validator

from obsidian_cli_mcp.constants import MAX_CONTENT_LENGTH, MAX_PROPERTY_VALUE_LENGTH
from obsidian_cli_mcp.core.arguments import key_value
from obsidian_cli_mcp.data_models import ObsidianCommand, ObsidianRequest
from obsidian_cli_mcp.validation import (
    validate_file_token,
    validate_property_name,
    validate_property_type,
    validate_text,
)

from .base import BaseNoteTargetInput, BaseVaultInput


class CreateNoteInput(BaseVaultInput):
    """Input model for obsidian_create tool.

    Creates a new note. Fails in the CLI if the note exists, unless
    ``overwrite`` is set.

    Examples:
        >>> CreateNoteInput(name="New Project", path="Projects", content="# Goals")
        >>> CreateNoteInput(name="2025-10-27", template="Daily Template")
    """

    name: str = Field(
        description="Name of the new note. Examples: 'New Project', 'Ideas.md'.",
        examples=["New Project", "Meeting 2025-10-27"]
    )

    path: Optional[str] = Field(
        None,
        description="Vault-relative folder to create the note in.",
        examples=["Projects", "01 Work/Meetings"]
    )

    content: Optional[str] = Field(
        None,
        description="Initial markdown content (up to 100000 characters)."
    )

    template: Optional[str] = Field(
        None,
        description="Name of a template to create the note from.",
        examples=["Daily Template"]
    )

    overwrite: bool = Field(
        False,
        description="If True, replace an existing note with the same name."
    )

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Reject traversal, absolute paths and null bytes in the note name."""
        return validate_file_token(v, label="Note name").unwrap()

    @field_validator('path')
    @classmethod
    def validate_path(cls, v: Optional[str]) -> Optional[str]:
        """Reject traversal, absolute paths and null bytes in ``path``."""
        if v is None:
            return None
        return validate_file_token(v, label="Path").unwrap()

    @field_validator('template')
    @classmethod
    def validate_template(cls, v: Optional[str]) -> Optional[str]:
        """Templates are files too; apply the same path contract."""
        if v is None:
            return None
        return validate_file_token(v, label="Template").unwrap()

    @field_validator('content')
    @classmethod
    def validate_content(cls, v: Optional[str]) -> Optional[str]:
        """Validate content length."""
        if v is None:
            return None
        return validate_text(v, "Content", MAX_CONTENT_LENGTH).unwrap()

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {
                    "name": "New Project",
                    "path": "Projects",
                    "content": "# New Project\n\nGoals:\n- Goal 1",
                    "vault": None
                },
                {
                    "name": "2025-10-27",
                    "template": "Daily Template",
                    "overwrite": False,
                    "vault": "personal"
                }
            ]
        }

    def to_request(self) -> ObsidianRequest:
        positional = [key_value("name", self.name)]
        if self.path:
            positional.append(key_value("path", self.path))
        if self.content:
            positional.append(key_value("content", self.content))
        if self.template:
            positional.append(key_value("template", self.template))
        return ObsidianRequest(
            ObsidianCommand.CREATE,
            positional,
            {"overwrite": self.overwrite},
            vault=self.vault,
        )


class _ContentInput(BaseNoteTargetInput):
    """Shared shape of append and prepend."""

    content: str = Field(
        description="Markdown content to add. Must not be empty.",
        examples=["- 3:00 PM: Meeting notes"]
    )

    @field_validator('content')
    @classmethod
    def validate_content(cls, v: str) -> str:
        """Validate content length (1 to 100000 characters)."""
        return validate_text(v, "Content", MAX_CONTENT_LENGTH, min_length=1).unwrap()

    def _request(self, command: ObsidianCommand) -> ObsidianRequest:
        positional = [key_value("content", self.content), *self.target_tokens()]
        return ObsidianRequest(command, positional, vault=self.vault)


class AppendInput(_ContentInput):
    """Input model for obsidian_append tool.

    Examples:
        >>> AppendInput(file="Daily Log", content="- Finished review")
    """

    def to_request(self) -> ObsidianRequest:
        return self._request(ObsidianCommand.APPEND)


class PrependInput(_ContentInput):
    """Input model for obsidian_prepend tool."""

    def to_request(self) -> ObsidianRequest:
        return self._request(ObsidianCommand.PREPEND)


class PropertySetInput(BaseNoteTargetInput):
    """Input model for obsidian_property_set tool.

    Sets a frontmatter property on a note.

    Examples:
        >>> PropertySetInput(name="status", value="active", file="Roadmap")
        >>> PropertySetInput(name="due", value="2025-11-01", type="date", path="Tasks/Ship.md")
    """

    name: str = Field(
        description="Property name. Letters, numbers, underscores, hyphens, dots and spaces.",
        examples=["status", "due-date"]
    )

    value: str = Field(
        description="Property value (up to 10000 characters).",
        examples=["active", "2025-11-01"]
    )

    type: Optional[str] = Field(
        None,
        description="Property type understood by Obsidian, e.g. 'text', 'date', 'checkbox'.",
        examples=["text", "date", "checkbox"]
    )

    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate the property name against the allow-list."""
        return validate_property_name(v).unwrap()

    @field_validator('value')
    @classmethod
    def validate_value(cls, v: str) -> str:
        """Validate value length."""
        return validate_text(v, "Property value", MAX_PROPERTY_VALUE_LENGTH).unwrap()

    @field_validator('type')
    @classmethod
    def validate_type(cls, v: Optional[str]) -> Optional[str]:
        """Property types are short identifiers."""
        if v is None:
            return None
        return validate_property_type(v).unwrap()

    def to_request(self) -> ObsidianRequest:
        positional = [key_value("name", self.name), key_value("value", self.value)]
        if self.type:
            positional.append(key_value("type", self.type))
        positional.extend(self.target_tokens())
        return ObsidianRequest(ObsidianCommand.PROPERTY_SET, positional, vault=self.vault)


class TaskUpdateInput(BaseNoteTargetInput):
    """Input model for obsidian_task_update tool.

    Examples:
        >>> TaskUpdateInput(file="Sprint 12", line=5, action="toggle")
    """

    line: int = Field(
        ge=0,
        description="Line number of the task in the note."
    )

    action: Literal["toggle", "complete", "incomplete"] = Field(
        description="What to do with the task."
    )

    def to_request(self) -> ObsidianRequest:
        positional = [key_value("line", self.line), key_value("action", self.action)]
        positional.extend(self.target_tokens())
        return ObsidianRequest(ObsidianCommand.TASK, positional, vault=self.vault)
