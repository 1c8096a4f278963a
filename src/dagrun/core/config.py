"""Run configuration.

Environment Variables:
    DAGRUN_FILE: Declaration file to load (default "dag.py")
    DAGRUN_FORMAT: Output format for show mode (default "text")
    DAGRUN_SHELL: Shell used to run node programs (default: platform shell)
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_CONFIG_FILE = "dag.py"
DEFAULT_FORMAT = "text"


@dataclass(frozen=True)
class RunOptions:
    """Options for one invocation of the engine.

    Attributes:
        show: Render the walked nodes.
        run: Execute the walked nodes' programs.
        targets: Start node names. Empty means every root.
        forward: Walk dependencies of each start node.
        inverse: Pull in dependents of each start node.
        output_format: Renderer name ("text", "yaml" or "json").
        shell: Shell executable for programs. None uses the platform shell.
    """

    show: bool = False
    run: bool = False
    targets: tuple[str, ...] = ()
    forward: bool = True
    inverse: bool = True
    output_format: str = DEFAULT_FORMAT
    shell: str | None = None

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None, **overrides) -> RunOptions:
        """Build options with defaults taken from the environment.

        Args:
            env: Environment mapping. Defaults to os.environ.
            **overrides: Explicit values, which win over the environment.

        Returns:
            RunOptions instance.
        """
        env = os.environ if env is None else env
        values = {
            "output_format": env.get("DAGRUN_FORMAT", DEFAULT_FORMAT),
            "shell": env.get("DAGRUN_SHELL") or None,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        if "targets" in values:
            values["targets"] = tuple(values["targets"])
        return cls(**values)


def config_file_from_env(env: Mapping[str, str] | None = None) -> str:
    """Get the declaration file path, honoring DAGRUN_FILE."""
    env = os.environ if env is None else env
    return env.get("DAGRUN_FILE") or DEFAULT_CONFIG_FILE
