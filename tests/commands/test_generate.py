"""Tests for the generate, goal, and document commands."""

from __future__ import annotations

import json
import re
from pathlib import Path

import pytest
from click.testing import CliRunner

from aidctl.cli import cli


@pytest.mark.usefixtures("_isolated_project")
class TestGenerateCommand:
    def test_generate_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli,
            [
                "--json",
                "generate",
                "G",
                "--title",
                "Test Task",
                "--kind",
                "task",
                "--status",
                "todo",
            ],
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["ok"] is True
        assert re.fullmatch(r"g-[a-z0-9]{6}", data["data"]["id"])

    def test_generate_human(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["generate", "T", "--title", "Draft"])
        assert result.exit_code == 0
        assert "OK" in result.output
        assert re.search(r"t-[a-z0-9]{6}", result.output)
        assert "Text (Content)" in result.output

    def test_generate_count_quiet(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "generate", "P", "--title", "Widget", "-n", "5"])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert len(lines) == 5
        assert len(set(lines)) == 5
        assert all(re.fullmatch(r"p-[a-z0-9]{6}", line) for line in lines)

    def test_invalid_prefix(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "generate", "!", "--title", "Test"])
        assert result.exit_code == 1
        assert result.stdout == ""
        payload = json.loads(result.stderr)
        assert payload["error"]["code"] == "INVALID_PREFIX"
        assert "Invalid AID prefix: !" in payload["error"]["message"]

    def test_zero_count_rejected_by_click(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["generate", "G", "--title", "x", "-n", "0"])
        assert result.exit_code == 2

    def test_title_required(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["generate", "G"])
        assert result.exit_code == 2

    def test_seeded_config_is_deterministic(
        self, cli_runner: CliRunner, project_root: Path
    ) -> None:
        (project_root / "aidctl.toml").write_text("[ids]\nseed = 123\n")
        first = cli_runner.invoke(cli, ["-q", "generate", "G", "--title", "x"])
        second = cli_runner.invoke(cli, ["-q", "generate", "G", "--title", "x"])
        assert first.exit_code == 0
        assert first.output == second.output

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["generate", "--examples"])
        assert result.exit_code == 0
        assert "aidctl generate G" in result.output


@pytest.mark.usefixtures("_isolated_project")
class TestGoalAndDocumentCommands:
    def test_goal(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "goal", "Launch the beta"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["op"] == "generate_goal"
        assert data["data"]["id"].startswith("g-")

    def test_document(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "document", "Quarterly report"])
        assert result.exit_code == 0
        assert re.fullmatch(r"a-[a-z0-9]{6}", result.output.strip())

    def test_empty_title(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "goal", ""])
        assert result.exit_code == 1
        assert json.loads(result.stderr)["error"]["code"] == "INVALID_DESCRIPTOR"
