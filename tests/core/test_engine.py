"""Tests for the show/run entry point."""

import io
import json

import pytest

from dagrun.core.config import RunOptions
from dagrun.core.engine import execute_graph, resolve_starts
from dagrun.core.errors import NoSuchNodeError, UnknownFormatError
from dagrun.core.graph import Graph


class TestResolveStarts:
    """Tests for resolve_starts."""

    def test_no_targets_uses_roots(self, diamond_graph):
        """Without targets every root is a start node."""
        assert resolve_starts(diamond_graph, ()) == [diamond_graph.node_id("a")]

    def test_targets_looked_up_exactly(self, chain_graph):
        """Targets with dependencies are kept, in the order given."""
        starts = resolve_starts(chain_graph, ("a", "c"))

        assert starts == [chain_graph.node_id("a"), chain_graph.node_id("c")]

    def test_unknown_target_raises(self, chain_graph):
        """An undeclared target raises NoSuchNodeError."""
        with pytest.raises(NoSuchNodeError, match="nope"):
            resolve_starts(chain_graph, ("a", "nope"))


class TestExecuteGraph:
    """Tests for execute_graph."""

    def test_run_without_targets(self, chain_graph, runner):
        """Running from the roots executes the whole chain in order."""
        execute_graph(chain_graph, RunOptions(run=True), runner=runner)

        assert runner.commands == ["echo c", "echo b", "echo a"]

    def test_run_diamond_once_each(self, diamond_graph, runner):
        """Each diamond node runs exactly once."""
        execute_graph(diamond_graph, RunOptions(run=True), runner=runner)

        assert sorted(runner.commands) == ["echo a", "echo b", "echo c", "echo d"]

    def test_unknown_target_has_no_side_effects(self, chain_graph, runner):
        """A bad target aborts before anything is rendered or run."""
        out = io.StringIO()
        options = RunOptions(show=True, run=True, targets=("a", "ghost"))

        with pytest.raises(NoSuchNodeError):
            execute_graph(chain_graph, options, out=out, runner=runner)

        assert out.getvalue() == ""
        assert runner.commands == []

    def test_unknown_format_has_no_side_effects(self, chain_graph, runner):
        """A bad format aborts before anything is rendered or run."""
        out = io.StringIO()
        options = RunOptions(show=True, run=True, output_format="xml")

        with pytest.raises(UnknownFormatError):
            execute_graph(chain_graph, options, out=out, runner=runner)

        assert out.getvalue() == ""
        assert runner.commands == []

    def test_nothing_to_do(self, chain_graph):
        """Neither show nor run is rejected."""
        with pytest.raises(ValueError, match="Nothing to do"):
            execute_graph(chain_graph, RunOptions())

    def test_show_json_chain(self):
        """A two-node chain renders to parseable JSON."""
        graph = Graph()
        graph.declare_dependency("a", "b")
        graph.declare_program("a", ["echo", '"a"', ">", "/tmp/a.log"])
        graph.declare_program("b", ["printf 'b\\n'\nexit 0"])
        out = io.StringIO()

        execute_graph(graph, RunOptions(show=True, output_format="json"), out=out)

        data = json.loads(out.getvalue())
        assert data == {
            "b": [
                {"b": {"index": 1, "dependencies": [], "program": "printf 'b\\n'\nexit 0"}},
                {"a": {"index": 0, "dependencies": ["b"], "program": 'echo "a" > /tmp/a.log'}},
            ]
        }

    def test_show_json_multiple_targets(self, chain_graph):
        """Each target gets its own key; shared nodes are shown once."""
        out = io.StringIO()
        options = RunOptions(show=True, targets=("b", "a"), inverse=False, output_format="json")

        execute_graph(chain_graph, options, out=out)

        data = json.loads(out.getvalue())
        assert [list(record) for record in data["b"]] == [["c"], ["b"]]
        assert [list(record) for record in data["a"]] == [["a"]]

    def test_show_yaml(self, chain_graph):
        """YAML output starts with the document separator."""
        out = io.StringIO()

        execute_graph(chain_graph, RunOptions(show=True, output_format="yaml"), out=out)

        lines = out.getvalue().splitlines()
        assert lines[0] == "--- # dag"
        assert lines[1] == '"c":'
        assert '  - "a":' in lines

    def test_show_and_run(self, chain_graph, runner):
        """Show and run in one invocation."""
        out = io.StringIO()

        execute_graph(chain_graph, RunOptions(show=True, run=True), out=out, runner=runner)

        assert out.getvalue().startswith("# c (2)\n")
        assert runner.commands == ["echo c", "echo b", "echo a"]

    def test_cycle_target_completes(self, cycle_graph, runner):
        """A cyclic graph run from an explicit target finishes cleanly."""
        execute_graph(cycle_graph, RunOptions(run=True, targets=("x",)), runner=runner)

        assert sorted(runner.commands) == ["echo x", "echo y"]
