"""Base renderer protocol."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TextIO


class Renderer(ABC):
    """Abstract base class for streaming graph renderers.

    Renderers are pure emitters - they write records to a stream as the
    walker finalizes nodes. They know nothing about traversal order.

    Call protocol for one run:
        begin()
        begin_graph(start)      # once per start node
            render_node(...)    # once per finalized node
        end_graph()
        end()

    Subclasses must implement:
        - render_node(): Emit one node record
    """

    name: str = ""

    def __init__(self, out: TextIO | None = None) -> None:
        self.out = out if out is not None else sys.stdout
        self._first_record = True

    def write(self, text: str) -> None:
        self.out.write(text)

    def begin(self) -> None:
        """Emit the document opening marker."""

    def begin_graph(self, start: str) -> None:
        """Open the section for one start node.

        Args:
            start: Name of the start node.
        """
        self._first_record = True

    @abstractmethod
    def render_node(
        self,
        name: str,
        index: int,
        dependencies: Sequence[str],
        program: str | None,
    ) -> None:
        """Emit one node record.

        Args:
            name: Node name.
            index: Node ID.
            dependencies: Dependency names in declaration order.
            program: Program text, or None to omit it from the record.
        """
        ...

    def end_graph(self) -> None:
        """Close the current section and reset per-section state."""
        self._first_record = True

    def end(self) -> None:
        """Emit the document closing marker."""
