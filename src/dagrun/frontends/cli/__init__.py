"""CLI frontend for dagrun.

Commands:
    dagrun -f dag.py -s             Show the whole graph
    dagrun -f dag.py -r restapi     Run restapi and everything around it

Example:
    $ dagrun --file dag.py --show --format json
    $ dagrun --file dag.py --run --no-inverse build
"""

from dagrun.frontends.cli.main import cli, main

__all__ = ["cli", "main"]
