"""JSON renderer.

Streams one object keyed by start node name:

    {
      "api": [
        {"db": {"index": 1, "dependencies": [], "program": "make db"}},
        {"api": {"index": 0, "dependencies": ["db"]}}
      ]
    }
"""

from __future__ import annotations

import re
from collections.abc import Sequence
from typing import TextIO

from dagrun.core.renderers.base import Renderer

# Backslash must come first so later replacements are not escaped twice
_ESCAPES = (
    ("\\", "\\\\"),
    ("/", "\\/"),
    ('"', '\\"'),
    ("\t", "\\t"),
    ("\n", "\\n"),
    ("\r", "\\r"),
    ("\f", "\\f"),
    ("\b", "\\b"),
)

# Any other C0 control character is written as a \u escape
_CONTROL = re.compile(r"[\x00-\x1f]")


def json_escape(text: str) -> str:
    """Escape a string for use inside a JSON string literal.

    Args:
        text: Raw string.

    Returns:
        Escaped string, without surrounding quotes.
    """
    for raw, escaped in _ESCAPES:
        text = text.replace(raw, escaped)
    return _CONTROL.sub(lambda match: f"\\u{ord(match.group()):04x}", text)


def quote(text: str) -> str:
    return f'"{json_escape(text)}"'


class JsonRenderer(Renderer):
    """Streaming JSON emitter.

    Records and sections are separated by commas, so the output parses as
    a single JSON document for any number of start nodes.
    """

    name = "json"

    def __init__(self, out: TextIO | None = None) -> None:
        super().__init__(out)
        self._sections = 0

    def begin(self) -> None:
        self._sections = 0
        self.write("{")

    def begin_graph(self, start: str) -> None:
        super().begin_graph(start)
        separator = "," if self._sections else ""
        self.write(f"{separator}\n  {quote(start)}: [")
        self._sections += 1

    def render_node(
        self,
        name: str,
        index: int,
        dependencies: Sequence[str],
        program: str | None,
    ) -> None:
        fields = [
            f'"index": {index}',
            f'"dependencies": [{", ".join(quote(dep) for dep in dependencies)}]',
        ]
        if program is not None:
            fields.append(f'"program": {quote(program)}')

        separator = "" if self._first_record else ","
        self.write(f"{separator}\n    {{{quote(name)}: {{{', '.join(fields)}}}}}")
        self._first_record = False

    def end_graph(self) -> None:
        self.write("]" if self._first_record else "\n  ]")
        super().end_graph()

    def end(self) -> None:
        self.write("\n}\n")
