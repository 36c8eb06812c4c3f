"""Pydantic input models for the headless sync client (``ob``).

Sync commands address the vault by its filesystem path from configuration,
so they take no vault override.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from obsidian_cli_mcp.data_models import ObCommand


class SyncInput(BaseModel):
    """Input model for obsidian_sync tool.

    Examples:
        >>> SyncInput()
        >>> SyncInput(continuous=True)
    """

    continuous: bool = Field(
        False,
        description="If True, keep syncing until the command times out or is stopped."
    )

    def to_args(self) -> tuple[ObCommand, list[str]]:
        return ObCommand.SYNC, ["--continuous"] if self.continuous else []


class SyncStatusInput(BaseModel):
    """Input model for obsidian_sync_status tool.

    Takes no parameters; the model keeps the tool signature consistent.
    """

    def to_args(self) -> tuple[ObCommand, list[str]]:
        return ObCommand.SYNC_STATUS, []
