"""CLI entry point."""

from __future__ import annotations

import rich_click as click

from dagrun.core.config import RunOptions, config_file_from_env
from dagrun.core.engine import execute_graph
from dagrun.core.errors import DagError
from dagrun.core.loader import load_declarations
from dagrun.core.logging_config import configure_logging, get_logger, verbosity_to_level
from dagrun.core.renderers import FORMATS
from dagrun.frontends.cli.output import error_exit

logger = get_logger(__name__)

# Configure rich-click styling
click.rich_click.USE_RICH_MARKUP = True
click.rich_click.USE_MARKDOWN = True
click.rich_click.SHOW_ARGUMENTS = True
click.rich_click.GROUP_ARGUMENTS_OPTIONS = True
click.rich_click.STYLE_ERRORS_SUGGESTION = "magenta italic"
click.rich_click.ERRORS_SUGGESTION = "Try running '--help' for more information."
click.rich_click.ERRORS_EPILOGUE = ""
click.rich_click.MAX_WIDTH = 100


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("targets", nargs=-1)
@click.option(
    "--file",
    "-f",
    "config_file",
    default=None,
    help="Declaration file (default: $DAGRUN_FILE or dag.py)",
)
@click.option("--show", "-s", is_flag=True, help="Render the walked nodes")
@click.option("--run", "-r", is_flag=True, help="Run the walked nodes' programs")
@click.option(
    "--format",
    "-o",
    "output_format",
    default=None,
    help=f"Output format for --show: {', '.join(FORMATS)} (default: $DAGRUN_FORMAT or text)",
)
@click.option(
    "--forward/--no-forward",
    default=True,
    help="Walk the dependencies of each target",
)
@click.option(
    "--inverse/--no-inverse",
    default=True,
    help="Pull in the dependents of each target",
)
@click.option("--shell", default=None, help="Shell for programs (default: $DAGRUN_SHELL or sh)")
@click.option("--verbose", "-v", count=True, help="Trace the walk (-v info, -vv debug)")
@click.version_option(package_name="dagrun")
def cli(
    targets: tuple[str, ...],
    config_file: str | None,
    show: bool,
    run: bool,
    output_format: str | None,
    forward: bool,
    inverse: bool,
    shell: str | None,
    verbose: int,
):
    """Show or run a graph of dependent tasks.

    Nodes and edges come from a Python declaration file calling
    `dep(name, *dependencies)` and `prog(name, *tokens)`. Every node is
    finalized at most once, after the nodes it depends on.

    Without TARGETS, every node that has no dependencies is a start node.
    Without --show or --run, the graph is shown.

    **Examples:**

        dagrun -f dag.py -s

        dagrun -f dag.py -s -o json

        dagrun -f dag.py -r restapi

        dagrun -f dag.py -r --no-inverse build
    """
    configure_logging(level=verbosity_to_level(verbose))

    if not (show or run):
        show = True

    config_file = config_file or config_file_from_env()

    try:
        graph = load_declarations(config_file)
        options = RunOptions.from_env(
            show=show,
            run=run,
            targets=targets,
            forward=forward,
            inverse=inverse,
            output_format=output_format,
            shell=shell,
        )
        execute_graph(graph, options)
    except DagError as e:
        logger.debug(f"[cli] aborted: {type(e).__name__}")
        error_exit(str(e))


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
