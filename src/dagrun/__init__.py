"""dagrun - Declare a graph of named tasks, then show it or run it.

Nodes are work items, edges are "must run after" relations. A walk visits
the graph from a set of start nodes and finalizes every node it reaches at
most once: rendering it, running its program, or both.

Layers:
    core/       Graph store, walker, renderers, loader (no UI)
    frontends/  User interfaces (CLI)

Quick Start:
    >>> from dagrun import Graph, RunOptions, execute_graph
    >>>
    >>> graph = Graph()
    >>> graph.declare_dependency("api", "db")
    >>> graph.declare_program("db", ["echo", "db"])
    >>> graph.declare_program("api", ["echo", "api"])
    >>> execute_graph(graph, RunOptions(run=True))
    db
    api
"""

from dagrun.__version__ import __version__

# Re-export core for convenience
from dagrun.core import (
    CommandFailedError,
    DagError,
    DeclarationError,
    Graph,
    NoSuchNodeError,
    RunOptions,
    UnknownFormatError,
    Walker,
    execute_graph,
    load_declarations,
)

__all__ = [
    "__version__",
    "CommandFailedError",
    "DagError",
    "DeclarationError",
    "Graph",
    "NoSuchNodeError",
    "RunOptions",
    "UnknownFormatError",
    "Walker",
    "execute_graph",
    "load_declarations",
]
