"""Node contexts and path resolution.

A NodeContext records everything a tree position knows about itself: its
resolved path, its parent's path and what the descriptor declared for it.
Contexts are immutable; creating an entry on disk produces a new context
for the derived path rather than changing an existing one.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

from fixture_tree.descriptors import (
    DescriptorError,
    DirDescriptor,
    FileData,
    FileDescriptor,
    NodeType,
)

__all__ = ["NodeContext", "resolve_path"]


def resolve_path(parent_path: Path, key: str) -> Path:
    """Join a child key onto its parent's path.

    Nested keys such as ``"a/b/c"`` are joined segment by segment.

    Raises:
        DescriptorError: If the key is absolute and would escape the parent.
    """
    relative = Path(key)
    if relative.anchor:
        raise DescriptorError(f"Name must be relative to {parent_path}: {key!r}")
    return parent_path.joinpath(*relative.parts)


@dataclass(frozen=True)
class NodeContext:
    """Resolved state for one position in an operation tree.

    Attributes:
        path: Absolute path of the node.
        parent_path: Path of the parent directory (None for the root).
        type: Either "file" or "dir".
        key: Name under which the node was declared (None for the root).
        data: Declared file data; literal text or a producer.
        children: Declared child descriptors of a directory.
        skip: Caller-defined flag passed through to custom operations.
    """

    path: Path
    parent_path: Path | None
    type: NodeType
    key: str | None = None
    data: FileData = None
    children: Mapping[str, FileDescriptor | DirDescriptor] = field(
        default_factory=lambda: MappingProxyType({})
    )
    skip: bool = False

    @classmethod
    def root(
        cls, path: Path | str, descriptor: FileDescriptor | DirDescriptor
    ) -> NodeContext:
        """Create the context for a tree's root node."""
        return cls._from_descriptor(Path(path), None, None, descriptor)

    def child(self, key: str, descriptor: FileDescriptor | DirDescriptor) -> NodeContext:
        """Create the context for a declared child of this node."""
        return self._from_descriptor(
            resolve_path(self.path, key), self.path, key, descriptor
        )

    def derived(self, name: str, type: NodeType, data: FileData = None) -> NodeContext:
        """Create the context for an entry created at runtime under this node.

        The derived node has no declared children and its parent path is
        the directory that actually contains it, which differs from this
        node's path when ``name`` is nested.
        """
        path = resolve_path(self.path, name)
        return NodeContext(
            path=path,
            parent_path=path.parent,
            type=type,
            key=path.name,
            data=data,
        )

    @classmethod
    def _from_descriptor(
        cls,
        path: Path,
        parent_path: Path | None,
        key: str | None,
        descriptor: FileDescriptor | DirDescriptor,
    ) -> NodeContext:
        if isinstance(descriptor, DirDescriptor):
            return cls(
                path=path,
                parent_path=parent_path,
                type="dir",
                key=key,
                children=MappingProxyType(dict(descriptor.children)),
                skip=descriptor.skip,
            )
        return cls(
            path=path,
            parent_path=parent_path,
            type="file",
            key=key,
            data=descriptor.data,
            skip=descriptor.skip,
        )
