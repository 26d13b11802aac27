"""Protocol definitions for core abstractions.

This module defines abstract interfaces (Protocols) for the collaborators
of the tree builder. Designing to interfaces enables:
- Swapping the storage backend without touching the builder
- Easy substitution of test doubles
- Clear contracts for caller-supplied operation factories

All concrete implementations satisfy these protocols structurally (duck typing).
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from fixture_tree.context import NodeContext
    from fixture_tree.tree import OperationNode


Operation = Callable[..., Any]
OperationTable = Mapping[str, Operation]


@runtime_checkable
class StorageBackend(Protocol):
    """Protocol for filesystem operations.

    Abstracts filesystem access so operation trees can run against a
    test double. All calls are synchronous and take absolute paths.
    """

    def read_text(self, path: Path) -> str:
        """Read text content from a file.

        Args:
            path: Path to the file.

        Returns:
            File content as string, line endings preserved.

        Raises:
            FileNotFoundError: If file does not exist.
        """
        ...

    def write_text(self, path: Path, content: str) -> None:
        """Write text content to a file, replacing existing content.

        Args:
            path: Path to the file.
            content: Content to write.

        Raises:
            FileNotFoundError: If the parent directory does not exist.
        """
        ...

    def exists(self, path: Path) -> bool:
        """Check if a file or directory exists at a path.

        Args:
            path: Path to check.

        Returns:
            True if path exists, False otherwise.
        """
        ...

    def mkdir(self, path: Path, parents: bool = False, exist_ok: bool = False) -> None:
        """Create a directory.

        Args:
            path: Path to create.
            parents: Create parent directories if needed.
            exist_ok: Don't raise if directory exists.
        """
        ...

    def unlink(self, path: Path, missing_ok: bool = False) -> None:
        """Remove a file.

        Args:
            path: Path to remove.
            missing_ok: Don't raise if the file is absent.
        """
        ...

    def rmtree(self, path: Path, missing_ok: bool = False) -> None:
        """Remove a directory tree.

        Args:
            path: Path to remove.
            missing_ok: Don't raise if the directory is absent.
        """
        ...


@runtime_checkable
class OperationFactory(Protocol):
    """Protocol for per-node-kind operation factories.

    A factory receives a node's context and returns a mapping of method
    name to callable, closed over that context.
    """

    def __call__(self, context: NodeContext) -> OperationTable:
        """Build the operation table for one node.

        Args:
            context: The node's resolved context.

        Returns:
            Mapping of operation name to implementation.
        """
        ...


Spawner = Callable[["NodeContext"], "OperationNode"]
