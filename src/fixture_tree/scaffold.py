"""Write a built operation tree to disk and remove it again."""

from __future__ import annotations

import logging

from fixture_tree.descriptors import resolve_data
from fixture_tree.protocols import StorageBackend
from fixture_tree.tree import OperationNode

logger = logging.getLogger(__name__)

__all__ = ["materialize", "teardown"]


def materialize(node: OperationNode, filesystem: StorageBackend) -> None:
    """Create every declared entry of a tree, parents before children.

    Directories are created with missing parents; files are written with
    their declared data, resolved afresh. Nodes flagged ``skip`` are left
    alone together with their subtrees.

    Args:
        node: Root of the tree (or subtree) to create.
        filesystem: Storage backend to write through.
    """
    context = node.context
    if context.skip:
        logger.debug("Skipping %s", context.path)
        return

    if context.type == "dir":
        filesystem.mkdir(context.path, parents=True, exist_ok=True)
        for child in node.children.values():
            materialize(child, filesystem)
    else:
        filesystem.write_text(context.path, resolve_data(context.data))

    logger.debug("Materialized %s %s", context.type, context.path)


def teardown(node: OperationNode, filesystem: StorageBackend) -> None:
    """Remove a node's entry from disk. Absent entries are ignored."""
    context = node.context
    if context.type == "dir":
        filesystem.rmtree(context.path, missing_ok=True)
    else:
        filesystem.unlink(context.path, missing_ok=True)
    logger.debug("Removed %s %s", context.type, context.path)
