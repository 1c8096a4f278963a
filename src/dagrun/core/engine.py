"""Top-level entry point for show/run invocations."""

from __future__ import annotations

import time
from typing import TextIO

from dagrun.core.config import RunOptions
from dagrun.core.execution import CommandRunner, ShellRunner
from dagrun.core.graph import Graph
from dagrun.core.logging_config import get_logger
from dagrun.core.renderers import Renderer, get_renderer
from dagrun.core.run_logging import log_complete, log_start
from dagrun.core.walker import Walker

logger = get_logger(__name__)


def resolve_starts(graph: Graph, targets: tuple[str, ...]) -> list[int]:
    """Get start node IDs for a walk.

    Explicit targets are looked up exactly (targets with dependencies are
    kept). Without targets, every root is a start node, in ID order.

    Raises:
        NoSuchNodeError: If a target was never declared.
    """
    if targets:
        return [graph.node_id(name) for name in targets]
    return graph.roots()


def execute_graph(
    graph: Graph,
    options: RunOptions,
    *,
    out: TextIO | None = None,
    runner: CommandRunner | None = None,
) -> None:
    """Show and/or run a graph.

    All start nodes and the renderer are resolved before anything is
    walked, so a bad target or format produces no output and runs nothing.

    Args:
        graph: Populated graph.
        options: Modes, targets, direction toggles and output format.
        out: Stream for rendered output. Defaults to stdout.
        runner: Command runner. Defaults to a ShellRunner using options.shell.

    Raises:
        ValueError: If neither show nor run is requested.
        NoSuchNodeError: If a target was never declared.
        UnknownFormatError: If the output format is not supported.
        CommandFailedError: If a node's program exits non-zero.
    """
    if not (options.show or options.run):
        raise ValueError("Nothing to do: enable show and/or run")

    starts = resolve_starts(graph, options.targets)

    renderer: Renderer | None = None
    if options.show:
        renderer = get_renderer(options.output_format, out)

    if options.run and runner is None:
        runner = ShellRunner(shell=options.shell)

    walker = Walker(
        graph,
        show=options.show,
        run=options.run,
        renderer=renderer,
        runner=runner,
        forward=options.forward,
        inverse=options.inverse,
    )

    log_start(
        logger,
        "dag",
        "walk_start",
        starts=[graph.name_of(i) for i in starts],
        show=options.show,
        run=options.run,
    )
    start_mono = time.monotonic()

    if renderer is not None:
        renderer.begin()

    for node_id in starts:
        if renderer is not None:
            renderer.begin_graph(graph.name_of(node_id))
        walker.walk_from(node_id)
        if renderer is not None:
            renderer.end_graph()

    if renderer is not None:
        renderer.end()

    log_complete(logger, "dag", "walk_complete", time.monotonic() - start_mono, starts=len(starts))
