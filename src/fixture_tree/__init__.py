"""Declarative file trees with bound filesystem operations."""

__version__ = "0.1.0"

# Export the public surface for building and extending operation trees
from fixture_tree.context import NodeContext
from fixture_tree.descriptors import (
    DescriptorError,
    DirDescriptor,
    FileDescriptor,
    parse_descriptor,
)
from fixture_tree.protocols import OperationFactory, StorageBackend
from fixture_tree.tree import OperationNode, OperationTreeBuilder, build_operation_tree

__all__ = [
    "__version__",
    "DescriptorError",
    "DirDescriptor",
    "FileDescriptor",
    "NodeContext",
    "OperationFactory",
    "OperationNode",
    "OperationTreeBuilder",
    "StorageBackend",
    "build_operation_tree",
    "parse_descriptor",
]
