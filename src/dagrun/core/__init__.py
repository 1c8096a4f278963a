"""Core - Graph bookkeeping, traversal and rendering.

This module contains no knowledge of:
- Command-line parsing
- Where declarations come from (beyond the file loader)
- How output is presented to a terminal

Architecture:
    graph       Graph store and declaration API
    walker      Traversal and finalization engine
    engine      Show/run entry point
    renderers/  Text, YAML and JSON emitters
    execution   Command runners
    loader      Python declaration files
    types       Pure data types

Example:
    >>> from dagrun.core import Graph, RunOptions, execute_graph
    >>>
    >>> graph = Graph()
    >>> graph.declare_dependency("b", "a")
    >>> execute_graph(graph, RunOptions(show=True, output_format="json"))
"""

from dagrun.core.config import RunOptions
from dagrun.core.engine import execute_graph
from dagrun.core.errors import (
    CommandFailedError,
    DagError,
    DeclarationError,
    NoSuchNodeError,
    UnknownFormatError,
)
from dagrun.core.execution import CommandRunner, ShellRunner
from dagrun.core.graph import Graph
from dagrun.core.loader import load_declarations
from dagrun.core.types import Direction, Node
from dagrun.core.walker import Walker

__all__ = [
    "CommandFailedError",
    "CommandRunner",
    "DagError",
    "DeclarationError",
    "Direction",
    "Graph",
    "Node",
    "NoSuchNodeError",
    "RunOptions",
    "ShellRunner",
    "UnknownFormatError",
    "Walker",
    "execute_graph",
    "load_declarations",
]
