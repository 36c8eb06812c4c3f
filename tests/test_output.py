import json

import pytest

from obsidian_cli_mcp.core.output import (
    NO_OUTPUT,
    filter_stderr,
    format_text_response,
    parse_json_output,
)
from obsidian_cli_mcp.data_models import ExecutionResult


class TestFilterStderr:
    """Test suite for stderr noise filtering."""

    def test_empty(self):
        assert filter_stderr("") == ""

    def test_keeps_real_warnings(self):
        assert filter_stderr("some warning\n") == "some warning"

    def test_drops_node_experimental_warnings(self):
        stderr = "(node:12345) ExperimentalWarning: something\nreal warning"
        assert filter_stderr(stderr) == "real warning"

    def test_drops_lines_mentioning_experimental_warning(self):
        stderr = "Warning: ExperimentalWarning is deprecated\nfile not found"
        assert filter_stderr(stderr) == "file not found"

    def test_drops_blank_lines(self):
        assert filter_stderr("\n  \nfirst\n\n\t\nsecond\n") == "first\nsecond"

    def test_only_noise_becomes_empty(self):
        assert filter_stderr("(node:1) Warning: x\n\n(node:2) Warning: y\n") == ""

    @pytest.mark.parametrize(
        "stderr",
        [
            "a\n\nb",
            "(node:1) ExperimentalWarning\n  indented\nlast  ",
            "  \n(node:9) x\n",
            "one line",
        ],
    )
    def test_idempotent(self, stderr):
        once = filter_stderr(stderr)
        assert filter_stderr(once) == once


class TestParseJsonOutput:
    """Test suite for payload parsing."""

    def test_parses_objects(self):
        assert parse_json_output('{"key": "value"}') == {"key": "value"}

    def test_parses_arrays(self):
        assert parse_json_output("[1, 2, 3]") == [1, 2, 3]

    def test_empty_is_none(self):
        assert parse_json_output("") is None

    def test_whitespace_only_is_none(self):
        assert parse_json_output("   \n  ") is None

    def test_plain_text_is_returned(self):
        assert parse_json_output("Some plain text output") == "Some plain text output"

    def test_plain_text_is_trimmed(self):
        assert parse_json_output("\n  # Heading\nbody  \n") == "# Heading\nbody"

    def test_trims_before_parsing(self):
        assert parse_json_output('  {"a": 1}  \n') == {"a": 1}

    def test_structured_payload_round_trips(self):
        payload = {"files": [{"path": "a.md", "size": 3}], "total": 1, "ok": True}
        assert parse_json_output(json.dumps(payload)) == payload

    def test_malformed_json_falls_back_to_text(self):
        assert parse_json_output('{"a": 1') == '{"a": 1'


class TestFormatTextResponse:
    """Test suite for the text returned to MCP callers."""

    def test_plain_output(self):
        assert format_text_response(ExecutionResult("note content\n", "")) == "note content"

    def test_empty_output(self):
        assert format_text_response(ExecutionResult("  \n", "")) == NO_OUTPUT

    def test_structured_output_is_returned_as_printed(self):
        stdout = '\n[{"tag":"#a","count":2}]\n'
        assert format_text_response(ExecutionResult(stdout, "")) == '[{"tag":"#a","count":2}]'

    @pytest.mark.parametrize(
        "stdout",
        ["null", '"quoted"', '{"a":1,"a":2}', "1e400", "[]", "0", "false"],
    )
    def test_json_scalars_and_edge_documents_are_not_rewritten(self, stdout):
        assert format_text_response(ExecutionResult(stdout, "")) == stdout

    def test_stderr_is_appended(self):
        text = format_text_response(ExecutionResult("ok", "some warning"))
        assert text == "ok\n[stderr]: some warning"

    def test_unicode_is_not_escaped(self):
        text = format_text_response(ExecutionResult('{"title": "日記"}', ""))
        assert "日記" in text
