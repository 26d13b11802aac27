"""Default operation sets for file and directory nodes.

Directory operations take a name relative to the directory's own path.
File operations act on the node's own path and take no name.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from fixture_tree.context import NodeContext, resolve_path
from fixture_tree.descriptors import FileData, resolve_data
from fixture_tree.protocols import OperationFactory, OperationTable, Spawner, StorageBackend

if TYPE_CHECKING:
    from fixture_tree.tree import OperationNode

logger = logging.getLogger(__name__)

__all__ = [
    "DIR_OPERATION_NAMES",
    "FILE_OPERATION_NAMES",
    "dir_operations",
    "file_operations",
]

DIR_OPERATION_NAMES = (
    "get_path",
    "get_parent_path",
    "exists",
    "dir_create",
    "dir_delete",
    "file_create",
    "file_delete",
    "file_read",
    "file_write",
    "file_clear",
)

FILE_OPERATION_NAMES = (
    "get_path",
    "get_parent_path",
    "exists",
    "file_read",
    "file_write",
    "file_clear",
    "file_delete",
)


def dir_operations(filesystem: StorageBackend, spawn: Spawner) -> OperationFactory:
    """Create the default factory for directory nodes.

    Args:
        filesystem: Storage backend the operations act on.
        spawn: Binds a derived context into a node. Nodes returned by
            ``dir_create`` and ``file_create`` come from here, so they carry
            the same operations as nodes built from the descriptor.

    Returns:
        Operation factory for directory contexts.
    """

    def factory(directory: NodeContext) -> OperationTable:
        def target(name: str) -> Path:
            return resolve_path(directory.path, name)

        def get_path() -> Path:
            return directory.path

        def get_parent_path() -> Path | None:
            return directory.parent_path

        def exists(name: str) -> bool:
            return filesystem.exists(target(name))

        def dir_create(name: str) -> OperationNode:
            path = target(name)
            filesystem.mkdir(path, parents=True, exist_ok=True)
            logger.debug("Created directory %s", path)
            return spawn(directory.derived(name, "dir"))

        def dir_delete(name: str) -> None:
            path = target(name)
            filesystem.rmtree(path, missing_ok=True)
            logger.debug("Deleted directory %s", path)

        def file_create(name: str, data: FileData = None) -> OperationNode:
            path = target(name)
            # Intermediate directories must already exist
            filesystem.write_text(path, resolve_data(data))
            logger.debug("Created file %s", path)
            return spawn(directory.derived(name, "file", data))

        def file_delete(name: str) -> None:
            path = target(name)
            filesystem.unlink(path, missing_ok=True)
            logger.debug("Deleted file %s", path)

        def file_read(name: str) -> str:
            return filesystem.read_text(target(name))

        def file_write(name: str, data: FileData) -> None:
            filesystem.write_text(target(name), resolve_data(data))

        def file_clear(name: str) -> None:
            file_write(name, "")

        return {
            "get_path": get_path,
            "get_parent_path": get_parent_path,
            "exists": exists,
            "dir_create": dir_create,
            "dir_delete": dir_delete,
            "file_create": file_create,
            "file_delete": file_delete,
            "file_read": file_read,
            "file_write": file_write,
            "file_clear": file_clear,
        }

    return factory


def file_operations(filesystem: StorageBackend) -> OperationFactory:
    """Create the default factory for file nodes."""

    def factory(file: NodeContext) -> OperationTable:
        def get_path() -> Path:
            return file.path

        def get_parent_path() -> Path | None:
            return file.parent_path

        def exists() -> bool:
            return filesystem.exists(file.path)

        def file_read() -> str:
            return filesystem.read_text(file.path)

        def file_write(data: FileData = None) -> None:
            # Without an argument, write the declared data
            content = resolve_data(file.data if data is None else data)
            filesystem.write_text(file.path, content)

        def file_clear() -> None:
            filesystem.write_text(file.path, "")

        def file_delete() -> None:
            filesystem.unlink(file.path, missing_ok=True)
            logger.debug("Deleted file %s", file.path)

        return {
            "get_path": get_path,
            "get_parent_path": get_parent_path,
            "exists": exists,
            "file_read": file_read,
            "file_write": file_write,
            "file_clear": file_clear,
            "file_delete": file_delete,
        }

    return factory
