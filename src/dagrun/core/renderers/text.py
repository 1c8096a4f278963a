"""Plain text renderer.

Output is a comment block per node:

    # api (0)
    # dependencies: db, cache
    # program:
    #         make api
"""

from __future__ import annotations

from collections.abc import Sequence

from dagrun.core.renderers.base import Renderer

PROGRAM_PREFIX = "#         "


class TextRenderer(Renderer):
    """Human-readable comment blocks, no document framing."""

    name = "text"

    def render_node(
        self,
        name: str,
        index: int,
        dependencies: Sequence[str],
        program: str | None,
    ) -> None:
        lines = [f"# {name} ({index})"]
        if dependencies:
            lines.append(f"# dependencies: {', '.join(dependencies)}")
        if program is not None:
            lines.append("# program:")
            lines.extend(f"{PROGRAM_PREFIX}{line}".rstrip() for line in program.splitlines())
        self.write("\n".join(lines) + "\n\n")
        self._first_record = False
