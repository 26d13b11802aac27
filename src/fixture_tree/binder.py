"""Operation binding.

Merges the operation tables produced by an ordered list of factories into
the final, read-only method table of a node.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType

from fixture_tree.context import NodeContext
from fixture_tree.protocols import Operation, OperationFactory

__all__ = ["bind_operations"]


def bind_operations(
    context: NodeContext, factories: Iterable[OperationFactory]
) -> Mapping[str, Operation]:
    """Bind a node's operations.

    Factories are applied left to right; when two factories define the same
    name, the later one wins. Names are not validated.

    Args:
        context: The node's context, passed to every factory.
        factories: Ordered factories, defaults first.

    Returns:
        Read-only mapping of operation name to callable.

    Raises:
        TypeError: If a factory returns something other than a mapping of
            callables.
    """
    table: dict[str, Operation] = {}
    for factory in factories:
        operations = factory(context)
        if not isinstance(operations, Mapping):
            raise TypeError(
                f"Operation factory {factory!r} returned "
                f"{type(operations).__name__}, expected a mapping"
            )
        for name, operation in operations.items():
            if not callable(operation):
                raise TypeError(
                    f"Operation '{name}' from factory {factory!r} is not callable"
                )
        table.update(operations)
    return MappingProxyType(table)
