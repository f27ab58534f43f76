"""Tests for the interactive menu driven through scripted input."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from staffctl.cli import cli
from tests.conftest import raw_fields


def _script(*lines: str) -> str:
    return "\n".join(lines) + "\n"


ADD_ANNA = ("1", *raw_fields().values())


def _records(project_root: Path) -> list[dict]:
    doc = json.loads((project_root / "employees.json").read_text(encoding="utf-8"))
    return doc["records"]


@pytest.mark.usefixtures("_isolated_project")
class TestShell:
    def test_menu_and_exit(self, cli_runner: CliRunner, project_root: Path) -> None:
        result = cli_runner.invoke(cli, ["shell"], input=_script("7"))
        assert result.exit_code == 0
        assert "Employee Record System" in result.output
        assert "7. Exit" in result.output
        assert "Exiting..." in result.output
        assert _records(project_root) == []

    def test_invalid_choice(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["shell"], input=_script("9", "", "7"))
        assert result.exit_code == 0
        assert result.output.count("Invalid choice. Please try again.") == 2

    def test_add_count_and_exit_saves(self, cli_runner: CliRunner, project_root: Path) -> None:
        result = cli_runner.invoke(cli, ["shell"], input=_script(*ADD_ANNA, "6", "7"))
        assert result.exit_code == 0, result.output
        assert "Total number of records: 1" in result.output
        assert [r["first_name"] for r in _records(project_root)] == ["Anna"]

    def test_failed_add_returns_to_menu(self, cli_runner: CliRunner) -> None:
        bad = ("1", *raw_fields(age="12").values())
        result = cli_runner.invoke(cli, ["shell"], input=_script(*bad, "6", "7"))
        assert result.exit_code == 0
        assert "Age must be between 18 and 65" in result.output
        assert "Total number of records: 0" in result.output

    def test_delete(self, cli_runner: CliRunner, project_root: Path) -> None:
        result = cli_runner.invoke(cli, ["shell"], input=_script(*ADD_ANNA, "2", "1", "7"))
        assert result.exit_code == 0
        assert _records(project_root) == []

    def test_delete_bad_id(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["shell"], input=_script("2", "abc", "7"))
        assert result.exit_code == 0
        assert "ERROR" in result.output
        assert "Exiting..." in result.output

    def test_modify_blank_keeps_values(
        self, cli_runner: CliRunner, project_root: Path
    ) -> None:
        blanks = [""] * 9
        blanks[4] = "Sales"
        result = cli_runner.invoke(
            cli, ["shell"], input=_script(*ADD_ANNA, "3", "1", *blanks, "7")
        )
        assert result.exit_code == 0, result.output
        assert "Leave fields blank to keep existing values." in result.output
        record = _records(project_root)[0]
        assert record["department"] == "Sales"
        assert record["first_name"] == "Anna"

    def test_modify_missing(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["shell"], input=_script("3", "4", "7"))
        assert result.exit_code == 0
        assert "Employee not found: 4" in result.output
        assert "Enter new First Name" not in result.output

    def test_search_and_display(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(
            cli, ["shell"], input=_script(*ADD_ANNA, "4", "", "lee", "", "5", "7")
        )
        assert result.exit_code == 0
        assert "Search Results:" in result.output
        assert "All Employee Records:" in result.output

    def test_exit_keeps_unreadable_file(
        self, cli_runner: CliRunner, project_root: Path
    ) -> None:
        path = project_root / "employees.json"
        path.write_text('{"format": "staffctl.employees", "vers', encoding="utf-8")
        result = cli_runner.invoke(cli, ["shell"], input=_script("6", "7"))
        assert result.exit_code == 0
        assert "Corrupt record file" in result.output
        assert "Total number of records: 0" in result.output
        assert path.read_text(encoding="utf-8") == '{"format": "staffctl.employees", "vers'

    def test_exit_after_changes_replaces_unreadable_file(
        self, cli_runner: CliRunner, project_root: Path
    ) -> None:
        (project_root / "employees.json").write_text("{not json", encoding="utf-8")
        result = cli_runner.invoke(cli, ["shell"], input=_script(*ADD_ANNA, "7"))
        assert result.exit_code == 0
        assert [r["first_name"] for r in _records(project_root)] == ["Anna"]

    def test_eof_aborts_but_keeps_changes(
        self, cli_runner: CliRunner, project_root: Path
    ) -> None:
        result = cli_runner.invoke(cli, ["shell"], input=_script(*ADD_ANNA))
        assert result.exit_code == 1
        assert len(_records(project_root)) == 1
