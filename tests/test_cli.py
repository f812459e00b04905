"""Tests for the command line interface."""

import asyncio

import pytest
from click.testing import CliRunner

from gym_companion.cli import main
from gym_companion.commands.base import format_table
from gym_companion.db import MachineRepository, get_db_path


@pytest.fixture
def data_dir(tmp_path, monkeypatch):
    path = tmp_path / "data"
    monkeypatch.setenv("GYM_COMPANION_DATA_DIR", str(path))
    return path


@pytest.fixture
def runner():
    return CliRunner()


class TestCli:
    """Tests for the gym-companion commands."""

    def test_requires_init(self, runner, data_dir):
        result = runner.invoke(main, ["machines", "list"])

        assert result.exit_code == 1
        assert "gym-companion init" in result.output

    def test_init_then_empty_list(self, runner, data_dir):
        assert runner.invoke(main, ["init"]).exit_code == 0

        result = runner.invoke(main, ["machines", "list"])

        assert result.exit_code == 0
        assert "No machines found" in result.output

    def test_list_show_and_delete(self, runner, data_dir):
        """Test machines created elsewhere are visible and removable."""
        runner.invoke(main, ["init"])
        repo = MachineRepository(get_db_path(data_dir))
        machine = asyncio.run(repo.create("Lat Pulldown", ["Lats", "Biceps"]))

        listed = runner.invoke(main, ["machines", "list"])
        assert "Lat Pulldown" in listed.output
        assert "Total: 1 machine(s)" in listed.output

        shown = runner.invoke(main, ["machines", "show", str(machine.id)])
        assert "Target muscles: Lats, Biceps" in shown.output

        deleted = runner.invoke(main, ["machines", "delete", str(machine.id), "--yes"])
        assert deleted.exit_code == 0
        assert asyncio.run(repo.list_all()) == []

    def test_delete_missing(self, runner, data_dir):
        runner.invoke(main, ["init"])

        result = runner.invoke(main, ["machines", "delete", "42", "--yes"])

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_exercises_blank_goal(self, runner, data_dir):
        runner.invoke(main, ["init"])

        result = runner.invoke(main, ["exercises", "1", "   "])

        assert result.exit_code == 1
        assert "Please enter a workout goal" in result.output


def test_format_table():
    table = format_table(["ID", "Name"], [["1", "Leg Press"]])
    assert table.splitlines()[0] == "ID  Name"
    assert table.splitlines()[2] == "1   Leg Press"
    assert format_table(["ID"], []) == ""
