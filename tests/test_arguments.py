import pytest

from obsidian_cli_mcp.core.arguments import (
    ObCommand,
    ObsidianCommand,
    ObsidianRequest,
    build_ob_args,
    build_obsidian_args,
    key_value,
)


class TestBuildObsidianArgs:
    """Test suite for the obsidian argument builder."""

    def test_command_only(self):
        assert build_obsidian_args(ObsidianRequest("vault")) == ["vault"]

    def test_read_with_configured_vault(self):
        request = ObsidianRequest(command="read", positional=["file=test.md"])
        assert build_obsidian_args(request, "TestVault") == [
            "read",
            "--vault=TestVault",
            "file=test.md",
        ]

    def test_adds_vault_from_config(self):
        assert build_obsidian_args(ObsidianRequest("read"), "My Vault") == [
            "read",
            "--vault=My Vault",
        ]

    def test_explicit_vault_overrides_config(self):
        request = ObsidianRequest("read", vault="Other Vault")
        assert build_obsidian_args(request, "My Vault") == ["read", "--vault=Other Vault"]

    def test_no_vault_flag_without_any_vault(self):
        args = build_obsidian_args(ObsidianRequest("files", ("folder=A",)))
        assert not any(arg.startswith("--vault") for arg in args)

    def test_positional_order_is_preserved(self):
        request = ObsidianRequest("read", positional=["file=note.md", "path=folder"])
        assert build_obsidian_args(request) == ["read", "file=note.md", "path=folder"]

    def test_boolean_true_flag_is_bare(self):
        request = ObsidianRequest("backlinks", flags={"counts": True})
        assert build_obsidian_args(request) == ["backlinks", "--counts"]

    def test_string_and_number_flags(self):
        request = ObsidianRequest("search:context", flags={"limit": 10, "sort": "name"})
        assert build_obsidian_args(request) == ["search:context", "--limit=10", "--sort=name"]

    def test_skips_none_and_false_flags(self):
        request = ObsidianRequest("tasks", flags={"status": None, "verbose": False})
        assert build_obsidian_args(request) == ["tasks"]

    def test_zero_and_empty_string_flags_are_kept(self):
        """Only None and False are dropped; other falsy values are real values."""
        request = ObsidianRequest("files", flags={"depth": 0, "label": ""})
        assert build_obsidian_args(request) == ["files", "--depth=0", "--label="]

    def test_flag_order_follows_insertion_order(self):
        request = ObsidianRequest("tags", flags={"sort": "count", "counts": True, "limit": 3})
        assert build_obsidian_args(request)[1:] == ["--sort=count", "--counts", "--limit=3"]

    def test_combines_vault_positional_and_flags(self):
        request = ObsidianRequest(
            "search:context", positional=["query=test"], flags={"limit": 5}, vault="V"
        )
        assert build_obsidian_args(request, "Default") == [
            "search:context",
            "--vault=V",
            "query=test",
            "--limit=5",
        ]

    def test_tokens_are_not_split(self):
        request = ObsidianRequest("append", positional=["content=a b; rm -rf / && $(id)"])
        assert build_obsidian_args(request) == ["append", "content=a b; rm -rf / && $(id)"]

    def test_deterministic(self):
        request = ObsidianRequest(
            "create", ("name=N", "content=C"), {"overwrite": True, "x": 1}, vault="V"
        )
        assert build_obsidian_args(request, "D") == build_obsidian_args(request, "D")


class TestObsidianRequest:
    """Test suite for the immutable request record."""

    def test_command_is_coerced_to_enum(self):
        assert ObsidianRequest("property:set").command is ObsidianCommand.PROPERTY_SET

    def test_unknown_command_is_rejected(self):
        with pytest.raises(ValueError):
            ObsidianRequest("eval")

    def test_request_is_immutable(self):
        flags = {"limit": 1}
        positional = ["query=x"]
        request = ObsidianRequest("search:context", positional, flags)

        flags["limit"] = 99
        positional.append("folder=y")

        assert request.positional == ("query=x",)
        assert request.flags["limit"] == 1
        with pytest.raises(TypeError):
            request.flags["limit"] = 2  # type: ignore[index]
        with pytest.raises(AttributeError):
            request.vault = "other"  # type: ignore[misc]


class TestBuildObArgs:
    """Test suite for the ob sync client argument builder."""

    def test_appends_vault_path(self):
        assert build_ob_args("sync", vault_path="/path/to/TestVault") == [
            "sync",
            "--path=/path/to/TestVault",
        ]

    def test_extra_args_precede_path(self):
        assert build_ob_args(ObCommand.SYNC, ["--continuous"], "/v") == [
            "sync",
            "--continuous",
            "--path=/v",
        ]

    def test_no_path_when_unconfigured(self):
        assert build_ob_args(ObCommand.SYNC_STATUS) == ["sync-status"]

    def test_unknown_command_is_rejected(self):
        with pytest.raises(ValueError):
            build_ob_args("login")


def test_key_value():
    assert key_value("file", "note (copy).md") == "file=note (copy).md"
    assert key_value("line", 5) == "line=5"
