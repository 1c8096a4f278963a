"""Pure data types for dagrun.core.

These are simple dataclasses with no behavior coupling. The Graph owns
them; the walker only flips their run-state flags.
"""

from dataclasses import dataclass, field
from enum import Enum


class Direction(Enum):
    """Traversal direction along dependency edges."""

    FORWARD = "forward"  # Follow dependencies (what a node needs)
    INVERSE = "inverse"  # Follow dependents (what needs a node)


@dataclass
class Node:
    """A named unit of work in the graph.

    Attributes:
        id: Dense zero-based ID, assigned in first-seen order.
        name: Unique node name.
        dependencies: IDs this node depends on, in declaration order.
        dependents: IDs that depend on this node, in declaration order.
        program: Command tokens, or None when the node has no program.
        visited_forward: Set once the forward walk has descended into the node.
        visited_inverse: Set once the inverse walk has descended into the node.
        shown: Set once the node has been rendered.
        executed: Set once the node has been executed (program or not).
    """

    id: int
    name: str
    dependencies: list[int] = field(default_factory=list)
    dependents: list[int] = field(default_factory=list)
    program: tuple[str, ...] | None = None

    # Run state (never reset within a process)
    visited_forward: bool = field(default=False, repr=False)
    visited_inverse: bool = field(default=False, repr=False)
    shown: bool = field(default=False, repr=False)
    executed: bool = field(default=False, repr=False)

    @property
    def program_text(self) -> str | None:
        """Program as a single command string.

        Tokens are joined with single spaces. A multi-line script declared
        as one token comes back verbatim.
        """
        if self.program is None:
            return None
        return " ".join(self.program)

    def is_visited(self, direction: Direction) -> bool:
        if direction is Direction.FORWARD:
            return self.visited_forward
        return self.visited_inverse

    def mark_visited(self, direction: Direction) -> None:
        if direction is Direction.FORWARD:
            self.visited_forward = True
        else:
            self.visited_inverse = True
