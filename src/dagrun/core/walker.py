"""Traversal and finalization engine."""

from __future__ import annotations

import time
from collections.abc import Iterable, Iterator
from typing import cast

from dagrun.core.errors import CommandFailedError
from dagrun.core.execution import CommandRunner
from dagrun.core.graph import Graph
from dagrun.core.logging_config import get_logger
from dagrun.core.renderers import Renderer
from dagrun.core.run_logging import log_complete, log_error, log_start
from dagrun.core.types import Direction

logger = get_logger(__name__)


class Walker:
    """Depth-first walker that finalizes each node at most once.

    Finalizing a node renders it (show mode) and/or runs its program
    (run mode). Forward walks finalize in post-order, so a node is only
    finalized after every node on its dependency chain. Inverse walks pull
    in the dependents of a node; each dependent is settled through its own
    forward walk, which skips anything already visited.

    Visited flags on the nodes are the only protection against cycles: a
    cycle stops propagating once every node on it has been entered once.

    Args:
        graph: Populated graph. Its run-state flags are updated in place.
        show: Render nodes as they are finalized.
        run: Execute node programs as they are finalized.
        renderer: Required when show is set.
        runner: Required when run is set.
        forward: Walk dependencies before finalizing a node.
        inverse: Pull in dependents of each start node.

    Example:
        >>> walker = Walker(graph, run=True, runner=ShellRunner())
        >>> walker.walk_from(graph.node_id("api"))
    """

    def __init__(
        self,
        graph: Graph,
        *,
        show: bool = False,
        run: bool = False,
        renderer: Renderer | None = None,
        runner: CommandRunner | None = None,
        forward: bool = True,
        inverse: bool = True,
    ) -> None:
        if show and renderer is None:
            raise ValueError("show mode requires a renderer")
        if run and runner is None:
            raise ValueError("run mode requires a command runner")

        self.graph = graph
        self.show = show
        self.run = run
        self.renderer = renderer
        self.runner = runner
        self.forward = forward
        self.inverse = inverse

    def walk_from(self, node_id: int) -> None:
        """Walk from one start node.

        The start node is settled first (its dependency chain, then itself),
        then its dependents are pulled in when the inverse direction is on.

        Args:
            node_id: ID of the start node.
        """
        self._settle(node_id)
        if self.inverse:
            self.walk_inverse([node_id])

    def walk_forward(self, node_ids: Iterable[int]) -> None:
        """Walk dependencies and finalize in post-order.

        Each stack frame is a node whose descent is in progress, paired with
        the dependencies it has yet to walk. The bottom frame holds the
        requested IDs and has no node of its own.

        Args:
            node_ids: IDs to walk, processed in the order given.
        """
        stack: list[tuple[int | None, Iterator[int]]] = [(None, iter(node_ids))]
        while stack:
            parent_id, pending = stack[-1]
            node_id = next(pending, None)
            if node_id is None:
                stack.pop()
                # Finalize per node, once its own descent is complete
                if parent_id is not None:
                    self.finalize(parent_id)
                continue

            node = self.graph.node(node_id)
            if not node.dependencies:
                self.finalize(node_id)
            elif not node.is_visited(Direction.FORWARD):
                node.mark_visited(Direction.FORWARD)
                log_start(
                    logger, node.name, "descend", direction="forward", deps=len(node.dependencies)
                )
                stack.append((node_id, iter(node.dependencies)))

    def walk_inverse(self, node_ids: Iterable[int]) -> None:
        """Walk dependents, settling each one before going further out.

        Args:
            node_ids: IDs to walk, processed in the order given.
        """
        stack: list[Iterator[int]] = [iter(node_ids)]
        while stack:
            node_id = next(stack[-1], None)
            if node_id is None:
                stack.pop()
                continue

            node = self.graph.node(node_id)
            if not node.dependents or node.is_visited(Direction.INVERSE):
                continue
            node.mark_visited(Direction.INVERSE)
            log_start(
                logger, node.name, "descend", direction="inverse", dependents=len(node.dependents)
            )
            for dependent_id in node.dependents:
                self._settle(dependent_id)
            stack.append(iter(node.dependents))

    def _settle(self, node_id: int) -> None:
        if self.forward:
            self.walk_forward([node_id])
        else:
            self.finalize(node_id)

    def finalize(self, node_id: int) -> None:
        """Render and/or execute a node, at most once each.

        Args:
            node_id: ID of the node to finalize.

        Raises:
            CommandFailedError: If the node's program exits non-zero.
        """
        node = self.graph.node(node_id)

        if self.show and not node.shown:
            renderer = cast(Renderer, self.renderer)
            renderer.render_node(
                node.name,
                node.id,
                [self.graph.name_of(i) for i in node.dependencies],
                node.program_text,
            )
            node.shown = True

        if self.run and not node.executed:
            self.execute(node_id)
            node.executed = True

    def execute(self, node_id: int) -> None:
        """Run a node's program, if it has one.

        Args:
            node_id: ID of the node to execute.

        Raises:
            CommandFailedError: If the program exits non-zero.
        """
        node = self.graph.node(node_id)
        command = node.program_text
        if command is None:
            logger.debug(f"[{node.name}] execute_skip: no program")
            return

        runner = cast(CommandRunner, self.runner)
        log_start(logger, node.name, "execute_start", command=command)
        start_mono = time.monotonic()

        returncode = runner.run(command)
        duration = time.monotonic() - start_mono

        if returncode != 0:
            log_error(
                logger,
                node.name,
                "execute_failed",
                f"exited with code {returncode}",
                exit_code=returncode,
                duration_s=f"{duration:.1f}",
            )
            raise CommandFailedError(node.name, command, returncode)

        log_complete(logger, node.name, "execute_complete", duration, exit_code=0)

    def __repr__(self) -> str:
        modes = [m for m, on in (("show", self.show), ("run", self.run)) if on]
        return f"Walker(modes={modes}, forward={self.forward}, inverse={self.inverse})"
