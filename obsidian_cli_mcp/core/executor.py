"""Process execution for the external CLI binaries.

Each call spawns exactly one child process argv-style (never through a shell),
writes nothing to its stdin, and waits for it under a timeout. Output on each
stream is bounded by the target's ``max_buffer``. A call ends in exactly one
of four ways:

- success: :class:`ExecutionResult` with filtered stderr
- timeout: the child is killed and reaped, :class:`CliTimeoutError`
- failure: non-zero exit or output over the ceiling, :class:`CliCommandError`
- spawn error: the binary could not be started, :class:`CliSpawnError`

Nothing here retries.
"""

from __future__ import annotations

import asyncio
import logging
import os
import signal
from typing import Iterable, Sequence

from obsidian_cli_mcp.core.arguments import build_ob_args, build_obsidian_args
from obsidian_cli_mcp.core.output import filter_stderr
from obsidian_cli_mcp.data_models import (
    CliConfiguration,
    ExecutionResult,
    ExecutionTarget,
    ObCommand,
    ObsidianRequest,
)
from obsidian_cli_mcp.errors import (
    CliCommandError,
    CliOutputLimitError,
    CliSpawnError,
    CliTimeoutError,
    describe_args,
)

logger = logging.getLogger(__name__)

_READ_CHUNK_SIZE = 64 * 1024
# Upper bound on reaping a killed child.
_REAP_TIMEOUT_SECONDS = 5.0
# Each child leads its own process group so a kill reaches its descendants.
_USE_PROCESS_GROUP = os.name == "posix"


class _OutputLimitExceeded(Exception):
    pass


async def _read_bounded(stream: asyncio.StreamReader, limit: int) -> bytes:
    chunks: list[bytes] = []
    total = 0
    while True:
        chunk = await stream.read(_READ_CHUNK_SIZE)
        if not chunk:
            return b"".join(chunks)
        total += len(chunk)
        if total > limit:
            raise _OutputLimitExceeded()
        chunks.append(chunk)


async def _collect(
    process: asyncio.subprocess.Process, limit: int
) -> tuple[bytes, bytes]:
    readers = [
        asyncio.ensure_future(_read_bounded(process.stdout, limit)),
        asyncio.ensure_future(_read_bounded(process.stderr, limit)),
    ]
    try:
        stdout, stderr = await asyncio.gather(*readers)
    except BaseException:
        for reader in readers:
            reader.cancel()
        raise
    await process.wait()
    return stdout, stderr


async def _kill(process: asyncio.subprocess.Process) -> None:
    """Kill the child and anything it started, then reap it.

    Descendants inherit the output pipes, and the child is only reaped once
    every pipe is closed, so the whole process group is killed. The reap
    itself is bounded by ``_REAP_TIMEOUT_SECONDS``.
    """
    try:
        if _USE_PROCESS_GROUP:
            os.killpg(process.pid, signal.SIGKILL)
        elif process.returncode is None:
            process.kill()
    except (ProcessLookupError, PermissionError):
        pass
    try:
        await asyncio.wait_for(process.wait(), timeout=_REAP_TIMEOUT_SECONDS)
    except asyncio.TimeoutError:
        logger.warning(
            "Process %s did not release its output pipes within %gs of being killed",
            process.pid,
            _REAP_TIMEOUT_SECONDS,
        )


def _decode(data: bytes) -> str:
    return data.decode("utf-8", errors="replace")


async def run_process(target: ExecutionTarget, args: Sequence[str]) -> ExecutionResult:
    """Run ``target.binary`` with ``args`` and return its captured output.

    Args:
        target: Binary, timeout (seconds) and per-stream output ceiling (bytes).
        args: Literal argument vector. Each entry becomes exactly one argv entry.

    Returns:
        The decoded stdout and the filtered stderr.

    Raises:
        CliSpawnError: The binary is missing or not executable.
        CliTimeoutError: The process did not finish within ``target.timeout``.
        CliOutputLimitError: A stream exceeded ``target.max_buffer`` bytes.
        CliCommandError: The process exited with a non-zero status.
    """
    args = list(args)
    logger.debug("Running %s %s", target.binary, describe_args(args))

    try:
        process = await asyncio.create_subprocess_exec(
            target.binary,
            *args,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
            start_new_session=_USE_PROCESS_GROUP,
        )
    except OSError as exc:
        logger.warning("Could not start %s: %s", target.binary, exc)
        raise CliSpawnError(target.binary, args, exc.strerror or str(exc)) from exc

    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(
            _collect(process, target.max_buffer), timeout=target.timeout
        )
    except asyncio.TimeoutError as exc:
        await _kill(process)
        logger.warning(
            "%s timed out after %gs: %s", target.binary, target.timeout, describe_args(args)
        )
        raise CliTimeoutError(target.binary, args, target.timeout) from exc
    except _OutputLimitExceeded as exc:
        await _kill(process)
        logger.warning(
            "%s exceeded the %d byte output limit: %s",
            target.binary,
            target.max_buffer,
            describe_args(args),
        )
        raise CliOutputLimitError(target.binary, args, target.max_buffer) from exc
    except BaseException:
        # Cancelled by the caller: do not leave the child running.
        await _kill(process)
        raise

    stdout = _decode(stdout_bytes)
    stderr = filter_stderr(_decode(stderr_bytes))

    if process.returncode != 0:
        detail = stderr.strip() or f"exited with status {process.returncode}"
        logger.warning("%s exited with status %s", target.binary, process.returncode)
        raise CliCommandError(target.binary, args, detail, returncode=process.returncode)

    return ExecutionResult(stdout=stdout, stderr=stderr)


async def run_obsidian_cli(config: CliConfiguration, request: ObsidianRequest) -> ExecutionResult:
    """Run an ``obsidian`` request against the configured binary and default vault."""
    args = build_obsidian_args(request, config.vault)
    return await run_process(config.obsidian_target(), args)


async def run_ob_cli(
    config: CliConfiguration,
    command: ObCommand | str,
    args: Iterable[str] = (),
) -> ExecutionResult:
    """Run an ``ob`` sync client subcommand against the configured vault path."""
    full_args = build_ob_args(command, args, config.vault_path)
    return await run_process(config.ob_target(), full_args)
