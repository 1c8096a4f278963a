"""YAML-like renderer.

Output is a single document with one key per start node:

    --- # dag
    "api":
      - "db":
          index: 1
          program: |2
            make db
      - "api":
          index: 0
          dependencies: ["db"]
"""

from __future__ import annotations

from collections.abc import Sequence

from dagrun.core.renderers.base import Renderer
from dagrun.core.renderers.json import quote

DOCUMENT_START = "--- # dag"
BLOCK_INDENT = " " * 8


class YamlRenderer(Renderer):
    """Document per run, sequence of node mappings per start node."""

    name = "yaml"

    def begin(self) -> None:
        self.write(f"{DOCUMENT_START}\n")

    def begin_graph(self, start: str) -> None:
        super().begin_graph(start)
        self.write(f"{quote(start)}:\n")

    def render_node(
        self,
        name: str,
        index: int,
        dependencies: Sequence[str],
        program: str | None,
    ) -> None:
        lines = [f"  - {quote(name)}:", f"      index: {index}"]
        if dependencies:
            lines.append(f"      dependencies: [{', '.join(quote(dep) for dep in dependencies)}]")
        if program is not None:
            # Content sits two columns past the mapping, whatever its first line holds
            lines.append("      program: |2")
            lines.extend(
                f"{BLOCK_INDENT}{line}" if line.strip() else ""
                for line in program.splitlines()
            )
        self.write("\n".join(lines) + "\n")
        self._first_record = False

    def end_graph(self) -> None:
        # A section without records still needs a value
        if self._first_record:
            self.write("  []\n")
        super().end_graph()
