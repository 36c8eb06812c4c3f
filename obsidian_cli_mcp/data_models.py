"""Data models for configuration, CLI requests and execution results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional, Union

from obsidian_cli_mcp.constants import MAX_BUFFER_BYTES

FlagValue = Optional[Union[str, int, float, bool]]


class ObsidianCommand(str, Enum):
    """Closed set of ``obsidian`` subcommands the server may invoke."""

    READ = "read"
    SEARCH_CONTEXT = "search:context"
    OUTLINE = "outline"
    BACKLINKS = "backlinks"
    LINKS = "links"
    TAGS = "tags"
    TASKS = "tasks"
    CREATE = "create"
    APPEND = "append"
    PREPEND = "prepend"
    PROPERTY_SET = "property:set"
    TASK = "task"
    FILES = "files"
    FOLDERS = "folders"
    TEMPLATES = "templates"
    VAULT = "vault"


class ObCommand(str, Enum):
    """Closed set of ``ob`` (headless sync client) subcommands."""

    SYNC = "sync"
    SYNC_STATUS = "sync-status"


@dataclass(frozen=True)
class ExecutionTarget:
    """Which binary to run, and the limits applied to a single invocation."""

    binary: str
    timeout: float
    max_buffer: int = MAX_BUFFER_BYTES

    def __post_init__(self) -> None:
        if not self.binary:
            raise ValueError("Execution target requires a binary path or name")
        if self.timeout <= 0:
            raise ValueError(f"Timeout must be positive, got {self.timeout!r}")
        if self.max_buffer <= 0:
            raise ValueError(f"Output ceiling must be positive, got {self.max_buffer!r}")


@dataclass(frozen=True)
class ExecutionResult:
    """Captured output of a successful invocation. ``stderr`` is already filtered."""

    stdout: str
    stderr: str


@dataclass(frozen=True)
class ObsidianRequest:
    """One delegated ``obsidian`` operation.

    ``positional`` holds ``key=value`` tokens that were composed from validated
    values. ``flags`` keeps insertion order, which fixes the order of the
    resulting ``--name`` tokens.
    """

    command: ObsidianCommand
    positional: tuple[str, ...] = ()
    flags: Mapping[str, FlagValue] = field(default_factory=dict)
    vault: Optional[str] = None

    def __post_init__(self) -> None:
        # Coerce on a frozen instance: unknown names raise ValueError here.
        object.__setattr__(self, "command", ObsidianCommand(self.command))
        object.__setattr__(self, "positional", tuple(self.positional))
        object.__setattr__(self, "flags", MappingProxyType(dict(self.flags)))


@dataclass(frozen=True)
class CliConfiguration:
    """Resolved server configuration.

    Built once at startup by :func:`obsidian_cli_mcp.config.load_configuration`
    and shared read-only between concurrent tool calls.
    """

    vault: Optional[str]
    vault_path: Optional[str]
    obsidian_cli_path: str
    ob_cli_path: str
    obsidian_cli_timeout_ms: float
    ob_cli_timeout_ms: float
    max_buffer_bytes: int = MAX_BUFFER_BYTES

    def obsidian_target(self) -> ExecutionTarget:
        """Execution target for the Obsidian desktop CLI."""
        return ExecutionTarget(
            binary=self.obsidian_cli_path,
            timeout=self.obsidian_cli_timeout_ms / 1000,
            max_buffer=self.max_buffer_bytes,
        )

    def ob_target(self) -> ExecutionTarget:
        """Execution target for the headless sync client."""
        return ExecutionTarget(
            binary=self.ob_cli_path,
            timeout=self.ob_cli_timeout_ms / 1000,
            max_buffer=self.max_buffer_bytes,
        )
