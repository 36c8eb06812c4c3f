"""Tests for the process executor.

The running Python interpreter stands in for the external binaries, so these
tests spawn real child processes without needing Obsidian installed.
"""

import asyncio
import json
import os
import stat
import sys
import time

import pytest

from obsidian_cli_mcp.core import executor
from obsidian_cli_mcp.core.executor import run_ob_cli, run_obsidian_cli, run_process
from obsidian_cli_mcp.data_models import (
    CliConfiguration,
    ExecutionResult,
    ExecutionTarget,
    ObsidianRequest,
)
from obsidian_cli_mcp.errors import (
    CliCommandError,
    CliError,
    CliOutputLimitError,
    CliSpawnError,
    CliTimeoutError,
)

PYTHON = ExecutionTarget(binary=sys.executable, timeout=20)


def make_config(**overrides) -> CliConfiguration:
    values = dict(
        vault="TestVault",
        vault_path="/path/to/TestVault",
        obsidian_cli_path="obsidian",
        ob_cli_path="ob",
        obsidian_cli_timeout_ms=30000,
        ob_cli_timeout_ms=60000,
    )
    values.update(overrides)
    return CliConfiguration(**values)


@pytest.fixture
def recorded_calls(monkeypatch):
    calls = []

    async def fake_run_process(target, args):
        calls.append((target, list(args)))
        return ExecutionResult(stdout="ok", stderr="")

    monkeypatch.setattr(executor, "run_process", fake_run_process)
    return calls


class TestRunProcess:
    """Test suite for run_process against real child processes."""

    @pytest.mark.asyncio
    async def test_returns_stdout(self):
        result = await run_process(PYTHON, ["-c", "print('hello')"])
        assert result.stdout.strip() == "hello"
        assert result.stderr == ""

    @pytest.mark.asyncio
    async def test_arguments_are_passed_literally(self):
        hostile = ["; rm -rf /", "$(id)", "`whoami`", "a | b && c", "--vault=x y", "*"]
        script = "import json, sys; print(json.dumps(sys.argv[1:]))"
        result = await run_process(PYTHON, ["-c", script, *hostile])
        assert json.loads(result.stdout) == hostile

    @pytest.mark.asyncio
    async def test_stdin_is_empty(self):
        result = await run_process(PYTHON, ["-c", "import sys; print(repr(sys.stdin.read()))"])
        assert result.stdout.strip() == "''"

    @pytest.mark.asyncio
    async def test_stderr_is_filtered_on_success(self):
        script = (
            "import sys; "
            "sys.stderr.write('(node:12345) ExperimentalWarning: something\\n\\nreal warning\\n')"
        )
        result = await run_process(PYTHON, ["-c", script])
        assert result.stderr == "real warning"

    @pytest.mark.asyncio
    async def test_non_zero_exit_carries_stderr(self):
        script = "import sys; sys.stderr.write('file not found\\n'); sys.exit(3)"
        with pytest.raises(CliCommandError) as exc_info:
            await run_process(PYTHON, ["-c", script])
        assert exc_info.value.returncode == 3
        assert "file not found" in str(exc_info.value)
        assert exc_info.value.binary == sys.executable

    @pytest.mark.asyncio
    async def test_non_zero_exit_without_stderr_has_generic_detail(self):
        with pytest.raises(CliCommandError, match="exited with status 4"):
            await run_process(PYTHON, ["-c", "import sys; sys.exit(4)"])

    @pytest.mark.asyncio
    async def test_timeout_terminates_process(self):
        target = ExecutionTarget(binary=sys.executable, timeout=0.5)
        started = time.monotonic()
        with pytest.raises(CliTimeoutError) as exc_info:
            await run_process(target, ["-c", "import time; time.sleep(30)"])
        assert time.monotonic() - started < 10
        assert sys.executable in str(exc_info.value)
        assert "timed out" in str(exc_info.value)
        assert exc_info.value.timeout == 0.5

    @pytest.mark.skipif(os.name != "posix", reason="requires POSIX process groups")
    @pytest.mark.asyncio
    async def test_timeout_also_kills_descendants_holding_the_pipes(self):
        """A grandchild inheriting stdout/stderr must not delay the timeout."""
        target = ExecutionTarget(binary=sys.executable, timeout=0.5)
        script = (
            "import subprocess, sys, time; "
            "subprocess.Popen([sys.executable, '-c', 'import time; time.sleep(15)']); "
            "time.sleep(30)"
        )
        started = time.monotonic()
        with pytest.raises(CliTimeoutError):
            await asyncio.wait_for(run_process(target, ["-c", script]), timeout=12)
        assert time.monotonic() - started < 5

    @pytest.mark.asyncio
    async def test_timeout_message_redacts_content(self):
        target = ExecutionTarget(binary=sys.executable, timeout=0.5)
        with pytest.raises(CliTimeoutError) as exc_info:
            await run_process(target, ["-c", "import time; time.sleep(30)", "content=secret diary"])
        assert "secret diary" not in str(exc_info.value)
        assert "content=<12 chars>" in str(exc_info.value)

    @pytest.mark.asyncio
    async def test_output_over_limit_is_rejected(self):
        target = ExecutionTarget(binary=sys.executable, timeout=20, max_buffer=1000)
        with pytest.raises(CliOutputLimitError) as exc_info:
            await run_process(target, ["-c", "print('x' * 200000)"])
        assert exc_info.value.limit == 1000
        assert isinstance(exc_info.value, CliCommandError)

    @pytest.mark.asyncio
    async def test_output_at_limit_is_accepted(self):
        target = ExecutionTarget(binary=sys.executable, timeout=20, max_buffer=1000)
        result = await run_process(target, ["-c", "import sys; sys.stdout.write('x' * 1000)"])
        assert result.stdout == "x" * 1000

    @pytest.mark.asyncio
    async def test_missing_binary_is_a_spawn_failure(self, tmp_path):
        target = ExecutionTarget(binary=str(tmp_path / "no-such-obsidian"), timeout=5)
        with pytest.raises(CliSpawnError) as exc_info:
            await run_process(target, ["vault"])
        assert "no-such-obsidian" in str(exc_info.value)

    @pytest.mark.skipif(os.name != "posix", reason="requires POSIX permissions")
    @pytest.mark.asyncio
    async def test_non_executable_binary_is_a_spawn_failure(self, tmp_path):
        binary = tmp_path / "obsidian"
        binary.write_text("#!/bin/sh\necho hi\n")
        binary.chmod(stat.S_IRUSR | stat.S_IWUSR)
        with pytest.raises(CliSpawnError):
            await run_process(ExecutionTarget(binary=str(binary), timeout=5), ["vault"])

    @pytest.mark.asyncio
    async def test_failures_share_a_base_class(self, tmp_path):
        target = ExecutionTarget(binary=str(tmp_path / "missing"), timeout=5)
        with pytest.raises(CliError):
            await run_process(target, [])


class TestExecutionTarget:
    """Test suite for target construction."""

    @pytest.mark.parametrize("timeout", [0, -1])
    def test_rejects_non_positive_timeout(self, timeout):
        with pytest.raises(ValueError):
            ExecutionTarget(binary="obsidian", timeout=timeout)

    def test_rejects_empty_binary(self):
        with pytest.raises(ValueError):
            ExecutionTarget(binary="", timeout=1)

    def test_config_targets_convert_milliseconds(self):
        config = make_config(obsidian_cli_timeout_ms=5000, ob_cli_timeout_ms=120000)
        assert config.obsidian_target().timeout == 5
        assert config.ob_target().timeout == 120
        assert config.obsidian_target().max_buffer == 10 * 1024 * 1024


class TestRunObsidianCli:
    """Test suite for the obsidian entry point."""

    @pytest.mark.asyncio
    async def test_uses_binary_and_default_vault(self, recorded_calls):
        await run_obsidian_cli(make_config(), ObsidianRequest("read", ["file=test.md"]))
        target, args = recorded_calls[0]
        assert target.binary == "obsidian"
        assert target.timeout == 30
        assert args == ["read", "--vault=TestVault", "file=test.md"]

    @pytest.mark.asyncio
    async def test_custom_path_and_timeout(self, recorded_calls):
        config = make_config(obsidian_cli_path="/custom/obsidian", obsidian_cli_timeout_ms=5000)
        await run_obsidian_cli(config, ObsidianRequest("vault"))
        target, _ = recorded_calls[0]
        assert target.binary == "/custom/obsidian"
        assert target.timeout == 5

    @pytest.mark.asyncio
    async def test_omits_vault_flag_when_unconfigured(self, recorded_calls):
        await run_obsidian_cli(make_config(vault=None), ObsidianRequest("vault"))
        _, args = recorded_calls[0]
        assert not any("--vault" in arg for arg in args)


class TestRunObCli:
    """Test suite for the ob entry point."""

    @pytest.mark.asyncio
    async def test_sync_uses_vault_path(self, recorded_calls):
        await run_ob_cli(make_config(), "sync")
        target, args = recorded_calls[0]
        assert target.binary == "ob"
        assert args == ["sync", "--path=/path/to/TestVault"]

    @pytest.mark.asyncio
    async def test_passes_additional_args(self, recorded_calls):
        await run_ob_cli(make_config(), "sync", ["--continuous"])
        _, args = recorded_calls[0]
        assert "--continuous" in args

    @pytest.mark.asyncio
    async def test_uses_ob_timeout(self, recorded_calls):
        await run_ob_cli(make_config(ob_cli_timeout_ms=120000), "sync-status")
        target, _ = recorded_calls[0]
        assert target.timeout == 120

    @pytest.mark.asyncio
    async def test_failure_propagates(self):
        config = make_config(ob_cli_path=sys.executable, vault_path=None)
        # "sync" is not a script python can run, so it exits non-zero.
        with pytest.raises(CliCommandError):
            await run_ob_cli(config, "sync")
