"""Graph renderers.

Streaming emitters driven by the walker - they receive nodes in
finalize order and write records straight to an output stream.

Classes:
    Renderer: Abstract base for renderers.
    TextRenderer: Comment-prefixed human-readable blocks.
    YamlRenderer: YAML-like document.
    JsonRenderer: Parseable JSON document.

Functions:
    get_renderer: Get renderer instance for an output format name.
    json_escape: Escape a string for a JSON string literal.

Example:
    >>> from dagrun.core.renderers import get_renderer
    >>>
    >>> renderer = get_renderer("json")
    >>> renderer.begin()
    >>> renderer.begin_graph("api")
    >>> renderer.render_node("api", 0, [], "make api")
    >>> renderer.end_graph()
    >>> renderer.end()
"""

from __future__ import annotations

from typing import TextIO

from dagrun.core.errors import UnknownFormatError
from dagrun.core.renderers.base import Renderer
from dagrun.core.renderers.json import JsonRenderer, json_escape
from dagrun.core.renderers.text import TextRenderer
from dagrun.core.renderers.yaml import YamlRenderer

_RENDERERS: dict[str, type[Renderer]] = {
    TextRenderer.name: TextRenderer,
    YamlRenderer.name: YamlRenderer,
    JsonRenderer.name: JsonRenderer,
}

FORMATS = tuple(_RENDERERS)


def get_renderer(name: str, out: TextIO | None = None) -> Renderer:
    """Get renderer instance for an output format.

    Args:
        name: Format name ("text", "yaml" or "json").
        out: Stream to write to. Defaults to stdout.

    Returns:
        A renderer instance.

    Raises:
        UnknownFormatError: If the format is not supported.
    """
    renderer_class = _RENDERERS.get(name)
    if renderer_class is None:
        raise UnknownFormatError(name, FORMATS)

    return renderer_class(out)


__all__ = [
    "FORMATS",
    "JsonRenderer",
    "Renderer",
    "TextRenderer",
    "YamlRenderer",
    "get_renderer",
    "json_escape",
]
