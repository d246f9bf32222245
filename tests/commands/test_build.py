"""Tests for the build command group."""

import json

from click.testing import CliRunner

from fdm.cli import cli


def test_person_complete(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["--json", "build", "person", "--age", "42", "--name", "Ada"])
    assert result.exit_code == 0
    data = json.loads(result.output)["data"]
    assert data["person"] == {"variant": "Person", "name": "Ada", "age": 42}
    assert data["marks"] == ["AgeSet", "NameSet"]


def test_person_missing_name(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["build", "person", "--age", "42"])
    assert result.exit_code == 1
    assert "INCOMPLETE_BUILDER" in result.output
    assert "NameSet" in result.output


def test_person_nothing_set(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli, ["-q", "build", "person"])
    assert result.exit_code == 1
    assert "AgeSet, NameSet" in result.output
