"""Pytest configuration and fixtures."""

from __future__ import annotations

import pytest

from dagrun.core.graph import Graph


class RecordingRunner:
    """Command runner that records commands instead of running them.

    Commands listed in `failures` return the mapped exit status.
    """

    def __init__(self, failures: dict[str, int] | None = None) -> None:
        self.commands: list[str] = []
        self.failures = failures or {}

    def run(self, command: str) -> int:
        self.commands.append(command)
        return self.failures.get(command, 0)


def with_programs(graph: Graph) -> Graph:
    """Give every node the program `echo <name>`."""
    for name in graph.names():
        graph.declare_program(name, ["echo", name])
    return graph


@pytest.fixture
def runner():
    """A fresh recording runner."""
    return RecordingRunner()


@pytest.fixture
def chain_graph():
    """a depends on b depends on c; c is the only root."""
    graph = Graph()
    graph.declare_dependency("a", "b")
    graph.declare_dependency("b", "c")
    return with_programs(graph)


@pytest.fixture
def diamond_graph():
    """b and c depend on a; d depends on both; a is the only root."""
    graph = Graph()
    graph.declare_dependency("b", "a")
    graph.declare_dependency("c", "a")
    graph.declare_dependency("d", "b")
    graph.declare_dependency("d", "c")
    return with_programs(graph)


@pytest.fixture
def cycle_graph():
    """x depends on y and y depends on x."""
    graph = Graph()
    graph.declare_dependency("x", "y")
    graph.declare_dependency("y", "x")
    return with_programs(graph)
