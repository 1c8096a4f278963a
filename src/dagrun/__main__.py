"""Allow running as `python -m dagrun`."""

from dagrun.frontends.cli.main import main

main()
