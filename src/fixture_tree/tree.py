"""Operation tree construction.

Turns a descriptor into a mirrored tree of OperationNode objects whose
bound operations act on the matching filesystem paths.

Operations and children live on separate surfaces of a node, so a
declared child may share its name with an operation:

    >>> tree = build_operation_tree(root, {"exists": {"type": "file"}})
    >>> tree.exists("exists")      # directory operation
    False
    >>> tree["exists"].get_path()  # declared child
    PosixPath('.../exists')

Nodes returned by ``dir_create`` and ``file_create`` are independent
handles. They are not added to the parent's children, which always match
the descriptor the tree was built from.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from pathlib import Path
from types import MappingProxyType
from typing import Any

from fixture_tree.binder import bind_operations
from fixture_tree.context import NodeContext
from fixture_tree.descriptors import DescriptorError, NodeType, parse_descriptor
from fixture_tree.filesystem import RealFileSystem
from fixture_tree.operations import dir_operations, file_operations
from fixture_tree.protocols import Operation, OperationFactory, StorageBackend

logger = logging.getLogger(__name__)

__all__ = ["OperationNode", "OperationTreeBuilder", "build_operation_tree"]

NODE_TYPES: tuple[NodeType, ...] = ("file", "dir")


class OperationNode:
    """A built node of an operation tree.

    Bound operations are reachable as attributes (``node.file_read("a")``)
    or through ``node.operations``. Declared children are reachable by item
    access (``node["a"]``) or through ``node.children``.
    """

    __slots__ = ("_children", "_context", "_operations")

    def __init__(
        self,
        context: NodeContext,
        operations: Mapping[str, Operation],
        children: Mapping[str, OperationNode] | None = None,
    ) -> None:
        self._context = context
        self._operations = operations
        self._children: Mapping[str, OperationNode] = MappingProxyType(
            dict(children or {})
        )

    @property
    def context(self) -> NodeContext:
        """The node's resolved context."""
        return self._context

    @property
    def operations(self) -> Mapping[str, Operation]:
        """Bound operations by name."""
        return self._operations

    @property
    def children(self) -> Mapping[str, OperationNode]:
        """Declared children by name (always empty for files)."""
        return self._children

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._operations[name]
        except KeyError:
            raise AttributeError(
                f"{self._context.type} node at {self._context.path} "
                f"has no operation '{name}'"
            ) from None

    def __getitem__(self, key: str) -> OperationNode:
        return self._children[key]

    def __contains__(self, key: object) -> bool:
        return key in self._children

    def __iter__(self) -> Iterator[str]:
        return iter(self._children)

    def __len__(self) -> int:
        return len(self._children)

    def __dir__(self) -> list[str]:
        return sorted(set(super().__dir__()) | set(self._operations))

    def __repr__(self) -> str:
        return f"OperationNode(type={self._context.type!r}, path={str(self._context.path)!r})"


class OperationTreeBuilder:
    """Builds operation trees against a storage backend.

    Follows Separate Use from Creation: constructor requires the backend.
    Use factory method `create()` for production instantiation with defaults.
    """

    def __init__(
        self,
        filesystem: StorageBackend,
        custom_operations: Mapping[str, OperationFactory] | None = None,
    ) -> None:
        """Initialize the builder.

        Args:
            filesystem: Storage backend the default operations act on.
            custom_operations: Optional factories keyed by node type
                ("file" or "dir"). Their operations are merged over the
                defaults, replacing any with the same name.

        Raises:
            DescriptorError: If a key is not a node type.
            TypeError: If a factory is not callable.
        """
        custom_operations = dict(custom_operations or {})
        unknown = sorted(set(custom_operations) - set(NODE_TYPES))
        if unknown:
            raise DescriptorError(
                f"Unknown node type(s) for custom operations: {', '.join(unknown)}"
            )
        for node_type, factory in custom_operations.items():
            if not callable(factory):
                raise TypeError(f"Custom {node_type} operations must be callable")

        self.fs = filesystem
        self.custom_operations: Mapping[str, OperationFactory] = MappingProxyType(
            custom_operations
        )
        self._defaults: dict[str, OperationFactory] = {
            "dir": dir_operations(filesystem, self.bind),
            "file": file_operations(filesystem),
        }

    @classmethod
    def create(
        cls,
        custom_operations: Mapping[str, OperationFactory] | None = None,
        filesystem: StorageBackend | None = None,
    ) -> OperationTreeBuilder:
        """Factory method for production instantiation.

        Args:
            custom_operations: Optional factories keyed by node type.
            filesystem: Optional storage backend (real filesystem if not provided).

        Returns:
            Configured OperationTreeBuilder instance.
        """
        return cls(
            filesystem=filesystem or RealFileSystem(),
            custom_operations=custom_operations,
        )

    def factories_for(self, node_type: NodeType) -> list[OperationFactory]:
        """Return the ordered factories for a node type, defaults first."""
        factories = [self._defaults[node_type]]
        custom = self.custom_operations.get(node_type)
        if custom is not None:
            factories.append(custom)
        return factories

    def bind(self, context: NodeContext) -> OperationNode:
        """Bind a single node without descending into its children."""
        return OperationNode(
            context, bind_operations(context, self.factories_for(context.type))
        )

    def build(self, root_path: Path | str, descriptor: Any) -> OperationNode:
        """Build the operation tree for a descriptor.

        The descriptor is validated before any node is bound, and building
        never touches the filesystem.

        Args:
            root_path: Path of the root node.
            descriptor: Descriptor model or mapping (see `parse_descriptor`).

        Returns:
            The root OperationNode.

        Raises:
            DescriptorError: If the descriptor is malformed.
        """
        root = parse_descriptor(descriptor)
        tree = self._build_node(NodeContext.root(root_path, root))
        logger.debug("Built operation tree at %s", tree.context.path)
        return tree

    def _build_node(self, context: NodeContext) -> OperationNode:
        operations = bind_operations(context, self.factories_for(context.type))
        children = {
            key: self._build_node(context.child(key, child))
            for key, child in context.children.items()
        }
        return OperationNode(context, operations, children)


def build_operation_tree(
    root_path: Path | str,
    descriptor: Any,
    custom_operations: Mapping[str, OperationFactory] | None = None,
    filesystem: StorageBackend | None = None,
) -> OperationNode:
    """Build an operation tree rooted at ``root_path``.

    Args:
        root_path: Path of the root node.
        descriptor: Descriptor model, tagged mapping, or bare children
            mapping for a root directory.
        custom_operations: Optional factories keyed by "file" / "dir".
        filesystem: Optional storage backend (real filesystem if not provided).

    Returns:
        The root OperationNode.

    Example:
        >>> tree = build_operation_tree(tmp, {
        ...     "file1": {"type": "file", "data": "hello"},
        ...     "dir1": {"type": "dir"},
        ... })
        >>> tree["dir1"].get_path() == tmp / "dir1"
        True
    """
    builder = OperationTreeBuilder.create(
        custom_operations=custom_operations, filesystem=filesystem
    )
    return builder.build(root_path, descriptor)
