"""Tests for the dagrun command."""

from __future__ import annotations

import importlib
import json
import textwrap

import pytest
from click.testing import CliRunner

from dagrun.frontends.cli.main import cli

cli_main = importlib.import_module("dagrun.frontends.cli.main")


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    """Keep the CLI from replacing the test session's log handlers."""
    monkeypatch.setattr(cli_main, "configure_logging", lambda **kwargs: None)
    for name in ("DAGRUN_FILE", "DAGRUN_FORMAT", "DAGRUN_SHELL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def cli_runner():
    return CliRunner()


@pytest.fixture
def dag_file(tmp_path):
    """Declaration file for a restapi service; programs append to run.log."""
    log = tmp_path / "run.log"
    path = tmp_path / "dag.py"
    path.write_text(
        textwrap.dedent(
            f"""
            dep("restapi", "db")
            dep("restapi", "cache")
            dep("db", "network")
            prog("network", "echo network >> {log}")
            prog("db", "echo db >> {log}")
            prog("cache", "echo cache >> {log}")
            prog("restapi", "echo restapi >> {log}")
            """
        )
    )
    return path


def run_log(dag_file) -> list[str]:
    log = dag_file.parent / "run.log"
    return log.read_text().split() if log.exists() else []


class TestCommandDefinition:
    """Tests for the command's parameters."""

    def test_options_defined(self):
        """The command exposes the expected parameters."""
        param_names = [p.name for p in cli.params]

        for name in (
            "targets",
            "config_file",
            "show",
            "run",
            "output_format",
            "forward",
            "inverse",
            "shell",
            "verbose",
        ):
            assert name in param_names

    def test_help(self, cli_runner):
        """--help lists the mode flags."""
        result = cli_runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "--show" in result.output
        assert "--run" in result.output


class TestShow:
    """Tests for show mode."""

    def test_show_text(self, cli_runner, dag_file):
        """-s renders every node as text and runs nothing."""
        result = cli_runner.invoke(cli, ["-f", str(dag_file), "-s"])

        assert result.exit_code == 0, result.output
        assert "# restapi (0)" in result.stdout
        assert "# dependencies: db, cache" in result.stdout
        assert run_log(dag_file) == []

    def test_show_is_default_mode(self, cli_runner, dag_file):
        """Without -s or -r the graph is shown."""
        result = cli_runner.invoke(cli, ["-f", str(dag_file)])

        assert result.exit_code == 0, result.output
        assert "# network (3)" in result.stdout

    def test_show_json(self, cli_runner, dag_file):
        """-o json emits one parseable document keyed by root."""
        result = cli_runner.invoke(cli, ["-f", str(dag_file), "-s", "-o", "json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert list(data) == ["cache", "network"]
        shown = [name for records in data.values() for record in records for name in record]
        assert sorted(shown) == ["cache", "db", "network", "restapi"]

    def test_format_from_environment(self, cli_runner, dag_file, monkeypatch):
        """DAGRUN_FORMAT selects the format when -o is not given."""
        monkeypatch.setenv("DAGRUN_FORMAT", "yaml")

        result = cli_runner.invoke(cli, ["-f", str(dag_file), "-s"])

        assert result.exit_code == 0, result.output
        assert result.stdout.startswith("--- # dag\n")

    def test_file_from_environment(self, cli_runner, dag_file, monkeypatch):
        """DAGRUN_FILE selects the declaration file when -f is not given."""
        monkeypatch.setenv("DAGRUN_FILE", str(dag_file))

        result = cli_runner.invoke(cli, ["-s", "restapi"])

        assert result.exit_code == 0, result.output
        assert "# restapi (0)" in result.stdout


class TestRun:
    """Tests for run mode."""

    def test_run_target(self, cli_runner, dag_file):
        """-r restapi runs its dependencies first, each once."""
        result = cli_runner.invoke(cli, ["-f", str(dag_file), "-r", "restapi"])

        assert result.exit_code == 0, result.output
        assert run_log(dag_file) == ["network", "db", "cache", "restapi"]

    def test_run_all_roots(self, cli_runner, dag_file):
        """-r without targets runs everything from the roots up."""
        result = cli_runner.invoke(cli, ["-f", str(dag_file), "-r"])

        assert result.exit_code == 0, result.output
        assert run_log(dag_file) == ["cache", "network", "db", "restapi"]

    def test_run_no_forward(self, cli_runner, dag_file):
        """--no-forward runs only the target when it has no dependents."""
        result = cli_runner.invoke(cli, ["-f", str(dag_file), "-r", "--no-forward", "restapi"])

        assert result.exit_code == 0, result.output
        assert run_log(dag_file) == ["restapi"]

    def test_run_failure_exits_nonzero(self, cli_runner, tmp_path):
        """A failing program stops the run with exit status 1."""
        log = tmp_path / "run.log"
        path = tmp_path / "dag.py"
        path.write_text(
            textwrap.dedent(
                f"""
                dep("deploy", "test")
                prog("test", "exit 3")
                prog("deploy", "echo deploy >> {log}")
                """
            )
        )

        result = cli_runner.invoke(cli, ["-f", str(path), "-r", "deploy"])

        assert result.exit_code == 1
        assert "Program for node 'test' exited with code 3" in result.output
        assert not log.exists()


class TestErrors:
    """Tests for fatal configuration errors."""

    def test_unknown_target(self, cli_runner, dag_file):
        """An undeclared target is reported and nothing runs."""
        result = cli_runner.invoke(cli, ["-f", str(dag_file), "-s", "-r", "frontend"])

        assert result.exit_code == 1
        assert "Error: No such node: 'frontend'" in result.output
        assert run_log(dag_file) == []

    def test_unknown_format(self, cli_runner, dag_file):
        """An unknown output format is reported."""
        result = cli_runner.invoke(cli, ["-f", str(dag_file), "-s", "-o", "xml"])

        assert result.exit_code == 1
        assert "Unknown output format: 'xml'" in result.output

    def test_missing_file(self, cli_runner, tmp_path):
        """A missing declaration file is reported."""
        result = cli_runner.invoke(cli, ["-f", str(tmp_path / "nope.py"), "-s"])

        assert result.exit_code == 1
        assert "file not found" in result.output
