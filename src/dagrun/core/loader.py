"""Declaration loader.

Evaluates a Python declaration file against a Graph. The file gets two
functions in its namespace:

    dep(name, *dependencies)    declare that name runs after each dependency
    prog(name, *tokens)         set the program for name

Example dag.py:

    dep("api", "db")
    dep("api", "cache")
    prog("db", "make", "db")
    prog("api", '''
    set -e
    make api
    ''')
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from dagrun.core.errors import DagError, DeclarationError
from dagrun.core.graph import Graph
from dagrun.core.logging_config import get_logger

logger = get_logger(__name__)


def _require_strings(path: str, call: str, values: tuple[Any, ...]) -> None:
    for value in values:
        if not isinstance(value, str):
            raise DeclarationError(path, f"{call}() arguments must be strings, got {value!r}")


def build_namespace(graph: Graph, path: str) -> dict[str, Any]:
    """Build the namespace a declaration file is evaluated in.

    Args:
        graph: Graph that dep() and prog() populate.
        path: File path, used in error messages.

    Returns:
        Namespace dict for exec().
    """

    def dep(name: str, *dependencies: str) -> None:
        if not dependencies:
            raise DeclarationError(path, f"dep({name!r}) needs at least one dependency")
        _require_strings(path, "dep", (name, *dependencies))
        for dependency in dependencies:
            graph.declare_dependency(name, dependency)

    def prog(name: str, *tokens: str) -> None:
        _require_strings(path, "prog", (name, *tokens))
        graph.declare_program(name, tokens)

    return {
        "dep": dep,
        "prog": prog,
        "graph": graph,
        "__name__": "__dagrun_config__",
        "__file__": path,
    }


def load_declarations(path: str | Path, graph: Graph | None = None) -> Graph:
    """Load a declaration file into a graph.

    Args:
        path: Path to the Python declaration file.
        graph: Graph to populate. A new one is created if omitted.

    Returns:
        The populated graph.

    Raises:
        DeclarationError: If the file is missing, invalid, raises, or
            makes a malformed dep()/prog() call.
    """
    path = str(path)
    graph = graph if graph is not None else Graph()

    try:
        code = Path(path).read_text()
    except FileNotFoundError:
        raise DeclarationError(path, "file not found") from None
    except OSError as e:
        raise DeclarationError(path, f"cannot read file: {e}") from e

    try:
        compiled = compile(code, path, "exec")
    except SyntaxError as e:
        raise DeclarationError(path, f"syntax error on line {e.lineno}: {e.msg}") from e

    namespace = build_namespace(graph, path)
    try:
        exec(compiled, namespace)
    except DagError:
        raise
    except TypeError as e:
        # Typically dep() or prog() called without a name
        raise DeclarationError(path, f"malformed declaration: {e}") from e
    except Exception as e:
        raise DeclarationError(path, f"{type(e).__name__}: {e}") from e

    logger.debug(f"[loader] loaded: path={path}, nodes={len(graph)}")
    return graph
