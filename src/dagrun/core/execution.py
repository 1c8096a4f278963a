"""Command runners for node programs.

The walker only needs "run this command string and report its exit
status". ShellRunner does that with a blocking subprocess that shares the
caller's environment and standard streams.
"""

from __future__ import annotations

import subprocess
import time
from typing import Protocol, runtime_checkable

from dagrun.core.logging_config import get_logger
from dagrun.core.run_logging import log_complete, log_error, log_start

logger = get_logger(__name__)

# Exit status reported when the shell itself cannot be started
EXIT_NOT_FOUND = 127


@runtime_checkable
class CommandRunner(Protocol):
    """Protocol for running a node's program."""

    def run(self, command: str) -> int:
        """Run a command to completion.

        Args:
            command: Command string (may span several lines).

        Returns:
            Exit status of the command.
        """
        ...


class ShellRunner:
    """Run commands through a shell, one at a time.

    Each call spawns a fresh process and waits for it. stdin, stdout and
    stderr are inherited, so program output interleaves with rendered
    output in the order it happens.

    Args:
        shell: Shell executable. None uses the platform default (/bin/sh).
        cwd: Working directory. None uses the current directory.

    Example:
        >>> runner = ShellRunner(shell="/bin/bash")
        >>> runner.run("echo hello")
        hello
        0
    """

    def __init__(self, shell: str | None = None, cwd: str | None = None) -> None:
        self.shell = shell
        self.cwd = cwd

    def run(self, command: str) -> int:
        log_start(logger, "shell", "run_start", command=command, shell=self.shell or "sh")
        start_mono = time.monotonic()

        try:
            result = subprocess.run(
                command,
                shell=True,
                executable=self.shell,
                cwd=self.cwd,
                check=False,
            )
        except OSError as e:
            log_error(logger, "shell", "run_error", e, command=command)
            return EXIT_NOT_FOUND

        log_complete(
            logger,
            "shell",
            "run_complete",
            time.monotonic() - start_mono,
            exit_code=result.returncode,
        )
        return result.returncode

    def __repr__(self) -> str:
        return f"ShellRunner(shell={self.shell!r}, cwd={self.cwd!r})"
