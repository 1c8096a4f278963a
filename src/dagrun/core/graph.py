"""Graph store and declaration API."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from dagrun.core.errors import NoSuchNodeError
from dagrun.core.types import Node


class Graph:
    """Registry of named nodes and their dependency edges.

    Pure bookkeeping - doesn't know about:
    - Traversal order (see Walker)
    - Rendering or execution
    - Where declarations come from (see loader)

    Nodes live in a list indexed by their ID. Every edge is stored twice,
    once as a dependency of the dependent and once as a dependent of the
    dependency, so both walk directions only touch local adjacency.

    Example:
        >>> graph = Graph()
        >>> graph.declare_dependency("api", "db")
        >>> graph.declare_program("db", ["make", "db"])
        >>> graph.forward_deps_of("api")
        ['db']
        >>> [graph.name_of(i) for i in graph.roots()]
        ['db']
    """

    def __init__(self) -> None:
        self._nodes: list[Node] = []
        self._ids: dict[str, int] = {}
        self._edges: set[tuple[str, str]] = set()

    # =========================================================================
    # Declaration API
    # =========================================================================

    def ensure_node(self, name: str) -> int:
        """Get the ID for a node, registering it on first sight.

        Args:
            name: Node name.

        Returns:
            The node's ID.
        """
        node_id = self._ids.get(name)
        if node_id is None:
            node_id = len(self._nodes)
            self._nodes.append(Node(id=node_id, name=name))
            self._ids[name] = node_id
        return node_id

    def declare_dependency(self, name: str, dependency: str) -> None:
        """Declare that `name` must run after `dependency`.

        Repeated declarations of the same pair are ignored. A node may
        depend on itself; the walker's visited flags bound the loop.

        Args:
            name: The dependent node.
            dependency: The node it depends on.
        """
        node_id = self.ensure_node(name)
        dependency_id = self.ensure_node(dependency)

        if (name, dependency) in self._edges:
            return
        self._edges.add((name, dependency))

        self._nodes[node_id].dependencies.append(dependency_id)
        self._nodes[dependency_id].dependents.append(node_id)

    def declare_program(self, name: str, tokens: Sequence[str]) -> None:
        """Set the program for a node, replacing any previous one.

        Args:
            name: Node name.
            tokens: Command tokens, or a single multi-line script body.
                An empty sequence clears the program.
        """
        node_id = self.ensure_node(name)
        self._nodes[node_id].program = tuple(tokens) or None

    # =========================================================================
    # Root resolution
    # =========================================================================

    def roots(self, names: Iterable[str] = ()) -> list[int]:
        """Get nodes without dependencies, in ID order.

        Args:
            names: Optional candidate names. When given, only those nodes
                are considered and any with dependencies are dropped.

        Returns:
            List of node IDs.

        Raises:
            NoSuchNodeError: If a candidate name was never declared.
        """
        names = list(names)
        if not names:
            return [node.id for node in self._nodes if not node.dependencies]

        candidates = [self.node_id(name) for name in names]
        return sorted({i for i in candidates if not self._nodes[i].dependencies})

    # =========================================================================
    # Read accessors
    # =========================================================================

    def node_id(self, name: str) -> int:
        """Look up a node ID by name.

        Raises:
            NoSuchNodeError: If the name was never declared.
        """
        try:
            return self._ids[name]
        except KeyError:
            raise NoSuchNodeError(name) from None

    def node(self, node_id: int) -> Node:
        return self._nodes[node_id]

    def name_of(self, node_id: int) -> str:
        return self._nodes[node_id].name

    def program_of(self, name: str) -> tuple[str, ...] | None:
        return self._nodes[self.node_id(name)].program

    def forward_deps_of(self, name: str) -> list[str]:
        """Names of the nodes `name` depends on, in declaration order."""
        node = self._nodes[self.node_id(name)]
        return [self._nodes[i].name for i in node.dependencies]

    def inverse_deps_of(self, name: str) -> list[str]:
        """Names of the nodes depending on `name`, in declaration order."""
        node = self._nodes[self.node_id(name)]
        return [self._nodes[i].name for i in node.dependents]

    def names(self) -> list[str]:
        """All node names in ID order."""
        return [node.name for node in self._nodes]

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, name: object) -> bool:
        return name in self._ids

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        return f"Graph({self.names()})"
