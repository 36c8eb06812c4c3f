"""Exception taxonomy for validation, configuration and CLI execution failures."""

from __future__ import annotations

from typing import Sequence

# Tokens whose values are free text supplied by the caller. Error messages and
# logs show their length instead of their content.
REDACTED_KEYS = ("content=", "value=")


def describe_args(args: Sequence[str]) -> str:
    """Render an argument vector for messages, redacting free-text values.

    Examples:
        >>> describe_args(["append", "file=a.md", "content=secret"])
        'append file=a.md content=<6 chars>'
    """
    rendered = []
    for arg in args:
        for key in REDACTED_KEYS:
            if arg.startswith(key):
                arg = f"{key}<{len(arg) - len(key)} chars>"
                break
        rendered.append(arg)
    return " ".join(rendered)


class ValidationRejection(ValueError):
    """A caller-supplied value failed a validation contract."""


class ConfigurationError(RuntimeError):
    """The server configuration is missing, malformed, or points at an unusable binary."""


class CliError(RuntimeError):
    """Base class for failures while running an external CLI binary."""

    def __init__(self, binary: str, args: Sequence[str], message: str) -> None:
        super().__init__(message)
        self.binary = binary
        self.args_vector = list(args)


class CliTimeoutError(CliError):
    """The process exceeded its timeout and was terminated."""

    def __init__(self, binary: str, args: Sequence[str], timeout: float) -> None:
        super().__init__(
            binary,
            args,
            f"{binary} command timed out after {timeout:g}s: {binary} {describe_args(args)}",
        )
        self.timeout = timeout


class CliCommandError(CliError):
    """The process ran to completion but exited with a non-zero status."""

    def __init__(
        self,
        binary: str,
        args: Sequence[str],
        detail: str,
        returncode: int | None = None,
    ) -> None:
        super().__init__(binary, args, f"{binary} command failed: {detail}")
        self.detail = detail
        self.returncode = returncode


class CliOutputLimitError(CliCommandError):
    """The process produced more output than the configured ceiling."""

    def __init__(self, binary: str, args: Sequence[str], limit: int) -> None:
        super().__init__(
            binary,
            args,
            f"output exceeded {limit} bytes and the process was terminated",
        )
        self.limit = limit


class CliSpawnError(CliError):
    """The binary could not be started (missing or not executable)."""

    def __init__(self, binary: str, args: Sequence[str], reason: str) -> None:
        super().__init__(
            binary,
            args,
            f'"{binary}" binary not found or not executable: {reason}',
        )
        self.reason = reason
