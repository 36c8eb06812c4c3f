"""Pydantic input models for reading and querying operations.

This module defines input models for read-only tools:
- Read note content
- Full-text search with context
- Heading outline
- Backlinks and outgoing links
- Tags and tasks
"""

from __future__ import annotations

from typing import Literal, Optional
from pydantic import Field, field_validator

from obsidian_cli_mcp.constants import MAX_QUERY_LENGTH
from obsidian_cli_mcp.core.arguments import key_value
from obsidian_cli_mcp.data_models import ObsidianCommand, ObsidianRequest
from obsidian_cli_mcp.validation import validate_folder_token, validate_text

from .base import BaseNoteTargetInput, BaseVaultInput


class ReadNoteInput(BaseNoteTargetInput):
    """Input model for obsidian_read tool.

    Examples:
        >>> ReadNoteInput(file="Meeting Notes")
        >>> ReadNoteInput(path="01 Work/Roadmap.md", vault="work")
    """

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {"file": "Meeting Notes", "vault": None},
                {"path": "01 Work/Roadmap.md", "vault": "work"}
            ]
        }

    def to_request(self) -> ObsidianRequest:
        return ObsidianRequest(ObsidianCommand.READ, self.target_tokens(), vault=self.vault)


class SearchInput(BaseVaultInput):
    """Input model for obsidian_search tool.

    Full-text search across the vault, returning matching lines with context.

    Examples:
        >>> SearchInput(query="quarterly review")
        >>> SearchInput(query="TODO", folder="Projects", limit=10)
    """

    query: str = Field(
        description=(
            "Search text. Passed to the CLI verbatim; Obsidian search "
            "operators are supported."
        ),
        examples=["quarterly review", "tag:#project"]
    )

    folder: Optional[str] = Field(
        None,
        description="Restrict the search to this vault-relative folder.",
        examples=["Projects", "01 Work/subfolder"]
    )

    limit: Optional[int] = Field(
        None,
        gt=0,
        description="Maximum number of matching files to return."
    )

    @field_validator('query')
    @classmethod
    def validate_query(cls, v: str) -> str:
        """Validate the query length (1 to 10000 characters)."""
        return validate_text(v, "Search query", MAX_QUERY_LENGTH, min_length=1).unwrap()

    @field_validator('folder')
    @classmethod
    def validate_folder(cls, v: Optional[str]) -> Optional[str]:
        """Reject traversal, absolute paths and null bytes in ``folder``."""
        if v is None:
            return None
        return validate_folder_token(v).unwrap()

    def to_request(self) -> ObsidianRequest:
        positional = [key_value("query", self.query)]
        if self.folder:
            positional.append(key_value("folder", self.folder))
        return ObsidianRequest(
            ObsidianCommand.SEARCH_CONTEXT,
            positional,
            {"limit": self.limit},
            vault=self.vault,
        )


class OutlineInput(BaseNoteTargetInput):
    """Input model for obsidian_outline tool."""

    def to_request(self) -> ObsidianRequest:
        return ObsidianRequest(ObsidianCommand.OUTLINE, self.target_tokens(), vault=self.vault)


class BacklinksInput(BaseNoteTargetInput):
    """Input model for obsidian_backlinks tool.

    Examples:
        >>> BacklinksInput(file="Roadmap", counts=True)
    """

    counts: bool = Field(
        False,
        description="If True, include the number of links from each linking note."
    )

    def to_request(self) -> ObsidianRequest:
        return ObsidianRequest(
            ObsidianCommand.BACKLINKS,
            self.target_tokens(),
            {"counts": self.counts},
            vault=self.vault,
        )


class LinksInput(BaseNoteTargetInput):
    """Input model for obsidian_links tool."""

    def to_request(self) -> ObsidianRequest:
        return ObsidianRequest(ObsidianCommand.LINKS, self.target_tokens(), vault=self.vault)


class TagsInput(BaseNoteTargetInput):
    """Input model for obsidian_tags tool.

    Without ``file`` or ``path`` the tags of the whole vault are listed.
    """

    sort: Optional[Literal["name", "count"]] = Field(
        None,
        description="Sort tags by 'name' or by 'count'."
    )

    def to_request(self) -> ObsidianRequest:
        return ObsidianRequest(
            ObsidianCommand.TAGS,
            self.target_tokens(),
            {"sort": self.sort},
            vault=self.vault,
        )


class TasksInput(BaseNoteTargetInput):
    """Input model for obsidian_tasks tool.

    Examples:
        >>> TasksInput(status="todo")
        >>> TasksInput(file="Sprint 12", status="done")
    """

    status: Optional[Literal["todo", "done", "all"]] = Field(
        None,
        description="Filter tasks by status: 'todo', 'done' or 'all'."
    )

    class Config:
        """Pydantic model configuration."""
        json_schema_extra = {
            "examples": [
                {"status": "todo"},
                {"file": "Sprint 12", "status": "done", "vault": "work"}
            ]
        }

    def to_request(self) -> ObsidianRequest:
        return ObsidianRequest(
            ObsidianCommand.TASKS,
            self.target_tokens(),
            {"status": self.status},
            vault=self.vault,
        )
