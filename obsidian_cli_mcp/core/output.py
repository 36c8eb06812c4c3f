"""Normalization of captured CLI output."""

from __future__ import annotations

import json
from typing import Any

from obsidian_cli_mcp.data_models import ExecutionResult

NO_OUTPUT = "(no output)"

# Runtime diagnostics printed by the Electron/Node host of the CLI.
_NOISE_PREFIXES = ("(node:",)
_NOISE_MARKERS = ("ExperimentalWarning",)


def _is_noise(line: str) -> bool:
    return line.startswith(_NOISE_PREFIXES) or any(marker in line for marker in _NOISE_MARKERS)


def filter_stderr(stderr: str) -> str:
    """Drop blank lines and runtime noise from captured stderr.

    Only changes what diagnostic text is surfaced, never whether a call failed.
    Applying it twice gives the same result as applying it once.
    """
    if not stderr:
        return ""
    kept = []
    for line in stderr.split("\n"):
        stripped = line.strip()
        if not stripped or _is_noise(stripped):
            continue
        kept.append(line)
    return "\n".join(kept)


def parse_json_output(stdout: str) -> Any:
    """Parse CLI output as JSON, falling back to the trimmed text.

    Returns ``None`` for empty or whitespace-only output.
    """
    trimmed = stdout.strip()
    if not trimmed:
        return None
    try:
        return json.loads(trimmed)
    except ValueError:
        return trimmed


def format_text_response(result: ExecutionResult) -> str:
    """Render an execution result as the text returned to the MCP caller.

    Stdout is trimmed and otherwise returned exactly as the CLI printed it,
    JSON included. Callers that want structured data use
    :func:`parse_json_output`.
    """
    text = result.stdout.strip() or NO_OUTPUT

    if result.stderr:
        text += f"\n[stderr]: {result.stderr}"
    return text
