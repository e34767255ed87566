"""Tests for `microresult convert`."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from microresult.cli import cli

VERBOSE = {
    "errors": [
        {
            "code": "OUTER",
            "message": "outer",
            "status": 500,
            "cause": {"code": "INNER", "message": "inner", "path": "a.b"},
        }
    ],
    "status": 500,
    "traceId": "t1",
}
COMPACT = {
    "errors": [
        {"c": "OUTER", "m": "outer", "s": 500, "cause": {"c": "INNER", "m": "inner", "p": "a.b"}}
    ],
    "status": 500,
    "traceId": "t1",
}


class TestConvert:
    def test_to_compact(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["convert", "--compact"], input=json.dumps(VERBOSE))
        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == COMPACT

    def test_to_verbose(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["convert", "--verbose"], input=json.dumps(COMPACT))
        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == VERBOSE

    def test_default_is_verbose_indented(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["convert"], input=json.dumps(COMPACT))
        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == VERBOSE
        assert '\n  "errors"' in result.output

    def test_indent_zero_is_single_line(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["convert", "--indent", "0"], input='{"errors": []}')
        assert result.output.strip() == '{"errors": []}'

    def test_codec_defaults_from_toml(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "microresult.toml").write_text("[codec]\ncompact = true\nindent = 0\n")
        result = cli_runner.invoke(cli, ["convert"], input=json.dumps(VERBOSE))
        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == COMPACT
        assert result.output.count("\n") == 1

    def test_flag_beats_toml(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        (tmp_path / "microresult.toml").write_text("[codec]\ncompact = true\n")
        result = cli_runner.invoke(cli, ["convert", "--verbose"], input=json.dumps(COMPACT))
        assert json.loads(result.output) == VERBOSE

    def test_error_result_converts_successfully(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["convert"], input=json.dumps(VERBOSE))
        assert result.exit_code == 0

    def test_malformed_input(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["convert"], input="[1, 2]")
        assert result.exit_code == 1
        assert "Not a serialized Result" in result.output
