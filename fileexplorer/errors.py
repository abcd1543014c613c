"""Exception types raised by the tree model and state transitions."""

from __future__ import annotations


class FileExplorerError(Exception):
    """Base class for all fileexplorer errors."""


class SchemaViolation(FileExplorerError, ValueError):
    """Input tree failed validation.

    ``path`` names the first offending location (``children[1].kind``) and
    ``violations`` keeps every ``(path, message)`` pair that was reported.
    """

    def __init__(self, path: str, message: str, violations: tuple[tuple[str, str], ...] = ()) -> None:
        self.path = path
        self.message = message
        self.violations = violations or ((path, message),)
        super().__init__(f"{path}: {message}")


class NodeNotFound(FileExplorerError, LookupError):
    """An operation referenced an id or index absent from the flat list."""

    def __init__(self, node_ref: str | int) -> None:
        self.node_ref = node_ref
        super().__init__(f"node not found: {node_ref!r}")


class InvalidOperation(FileExplorerError):
    """An operation is not allowed for the referenced node."""


__all__ = [
    "FileExplorerError",
    "SchemaViolation",
    "NodeNotFound",
    "InvalidOperation",
]
