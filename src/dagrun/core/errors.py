"""Error types for dagrun.

Every fatal condition raised by the core derives from DagError so that
front ends can report it with a single handler.
"""

from __future__ import annotations


class DagError(Exception):
    """Base error for graph declaration, traversal and execution."""


class NoSuchNodeError(DagError):
    """A requested node name was never declared."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No such node: '{name}'")
        self.name = name


class UnknownFormatError(DagError):
    """The requested output format has no renderer."""

    def __init__(self, name: str, known: tuple[str, ...] = ()) -> None:
        message = f"Unknown output format: '{name}'"
        if known:
            message += f" (expected one of: {', '.join(known)})"
        super().__init__(message)
        self.name = name


class CommandFailedError(DagError):
    """A node's program exited with a non-zero status.

    Raised after the program has completed. Nodes finalized before the
    failure stay finalized.
    """

    def __init__(self, node: str, command: str, returncode: int) -> None:
        super().__init__(f"Program for node '{node}' exited with code {returncode}: {command}")
        self.node = node
        self.command = command
        self.returncode = returncode


class DeclarationError(DagError):
    """The declaration file could not be loaded or issued a malformed call.

    Raised when:
    - The file does not exist or cannot be read
    - The file is not valid Python
    - The file raises while being evaluated
    - dep() or prog() is called with missing or non-string arguments
    """

    def __init__(self, path: str, message: str) -> None:
        super().__init__(f"{path}: {message}")
        self.path = path
