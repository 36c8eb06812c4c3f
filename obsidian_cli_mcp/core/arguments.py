"""Argument vector construction for the ``obsidian`` and ``ob`` binaries.

The builders are pure functions. Their output is handed to process creation
as-is: no token is split, re-joined, or parsed again, and no shell is involved.
"""

from __future__ import annotations

from typing import Iterable, Optional

from obsidian_cli_mcp.data_models import (
    FlagValue,
    ObCommand,
    ObsidianCommand,
    ObsidianRequest,
)

__all__ = [
    "ObCommand",
    "ObsidianCommand",
    "ObsidianRequest",
    "build_ob_args",
    "build_obsidian_args",
    "key_value",
]


def key_value(key: str, value: object) -> str:
    """Compose a positional ``key=value`` token from a fixed key and a validated value."""
    return f"{key}={value}"


def _flag_token(name: str, value: FlagValue) -> Optional[str]:
    if value is None or value is False:
        return None
    if value is True:
        return f"--{name}"
    return f"--{name}={value}"


def build_obsidian_args(
    request: ObsidianRequest, default_vault: Optional[str] = None
) -> list[str]:
    """Translate a request into the argument vector for ``obsidian``.

    Order: command, ``--vault=<name>`` (explicit override, else the configured
    default), positional tokens as supplied, then flags in insertion order.
    Flags valued ``None`` or ``False`` are omitted and ``True`` becomes a bare
    ``--name``.

    Examples:
        >>> build_obsidian_args(ObsidianRequest("read", ("file=test.md",)), "TestVault")
        ['read', '--vault=TestVault', 'file=test.md']
    """
    args = [request.command.value]

    vault = request.vault if request.vault is not None else default_vault
    if vault:
        args.append(f"--vault={vault}")

    args.extend(request.positional)

    for name, value in request.flags.items():
        token = _flag_token(name, value)
        if token is not None:
            args.append(token)

    return args


def build_ob_args(
    command: ObCommand | str,
    args: Iterable[str] = (),
    vault_path: Optional[str] = None,
) -> list[str]:
    """Build the argument vector for the ``ob`` sync client.

    ``ob`` addresses a vault by filesystem path (``--path=``) rather than by name.
    """
    full_args = [ObCommand(command).value, *args]
    if vault_path:
        full_args.append(f"--path={vault_path}")
    return full_args
