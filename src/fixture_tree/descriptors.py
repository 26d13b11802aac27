"""Descriptor models for declarative file trees.

A descriptor is a nested description of files and directories. It is
authored by the caller and never mutated by the builder.

Example:
    >>> tree = parse_descriptor({
    ...     "file1": {"type": "file", "data": "hello"},
    ...     "dir1": {"type": "dir", "children": {"file2": {"type": "file"}}},
    ... })
    >>> tree.type
    'dir'
    >>> sorted(tree.children)
    ['dir1', 'file1']
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from pathlib import PurePath
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

__all__ = [
    "Descriptor",
    "DescriptorError",
    "DirDescriptor",
    "FileData",
    "FileDescriptor",
    "NodeType",
    "parse_descriptor",
    "resolve_data",
]

NodeType = Literal["file", "dir"]

# Literal text or a zero-argument producer evaluated at each use
FileData = Union[str, Callable[[], str], None]


class DescriptorError(ValueError):
    """Malformed descriptor or custom operations mapping."""

    pass


class FileDescriptor(BaseModel):
    """A file entry."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: Literal["file"] = "file"
    data: str | Callable[[], str] | None = None
    skip: bool = False


class DirDescriptor(BaseModel):
    """A directory entry with optional named children."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    type: Literal["dir"] = "dir"
    children: dict[str, Descriptor] = Field(default_factory=dict)
    skip: bool = False


Descriptor = Annotated[
    Union[FileDescriptor, DirDescriptor], Field(discriminator="type")
]

DirDescriptor.model_rebuild()

_descriptor_adapter: TypeAdapter[FileDescriptor | DirDescriptor] = TypeAdapter(Descriptor)


def _is_node_mapping(value: Mapping[str, Any]) -> bool:
    """Tell a tagged node mapping apart from a bare children mapping."""
    return isinstance(value.get("type"), str)


def _check_keys(node: FileDescriptor | DirDescriptor, where: str) -> None:
    if isinstance(node, FileDescriptor):
        return
    for key, child in node.children.items():
        if not key:
            raise DescriptorError(f"Empty child name under {where}")
        if PurePath(key).anchor:
            raise DescriptorError(f"Absolute child name under {where}: {key!r}")
        _check_keys(child, f"{where}/{key}")


def parse_descriptor(value: Any) -> FileDescriptor | DirDescriptor:
    """Validate a descriptor and return it as a model.

    Args:
        value: A descriptor model, a tagged mapping such as
            ``{"type": "dir", "children": {...}}``, or a bare children
            mapping ``{name: node}`` which denotes the root directory.

    Returns:
        The validated descriptor.

    Raises:
        DescriptorError: If a node lacks a valid ``type`` tag or the
            structure is otherwise malformed.
    """
    if isinstance(value, (FileDescriptor, DirDescriptor)):
        node = value
    elif isinstance(value, Mapping):
        raw = value if _is_node_mapping(value) else {"type": "dir", "children": value}
        try:
            node = _descriptor_adapter.validate_python(raw)
        except ValidationError as e:
            raise DescriptorError(f"Invalid descriptor: {e}") from e
    else:
        raise DescriptorError(
            f"Descriptor must be a mapping, got {type(value).__name__}"
        )

    _check_keys(node, "<root>")
    return node


def resolve_data(data: FileData) -> str:
    """Materialize file data.

    Producers are invoked on every call; the result is never cached.
    """
    if data is None:
        return ""
    if callable(data):
        return data()
    return data
