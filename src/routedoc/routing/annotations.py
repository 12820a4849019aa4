"""Side table attaching operation metadata to route nodes."""
from __future__ import annotations

from typing import Dict, Iterable, Iterator, Tuple, Union

from routedoc.openapi.builder import OperationBuilder
from routedoc.openapi.models import Operation
from routedoc.routing.tree import RouteNode

OperationSource = Union[Operation, OperationBuilder]


class OperationTable:
    """Maps route nodes, by identity, to the operation documented on them."""

    def __init__(self) -> None:
        self._entries: Dict[int, Tuple[RouteNode, Operation]] = {}

    def attach(self, node: RouteNode, operation: OperationSource) -> None:
        if isinstance(operation, OperationBuilder):
            operation = operation.build()
        self._entries[id(node)] = (node, operation)

    def api(self, operation: OperationSource, node: RouteNode) -> RouteNode:
        """Attach ``operation`` to ``node`` and return the node."""
        self.attach(node, operation)
        return node

    def get(self, node: RouteNode) -> Operation | None:
        entry = self._entries.get(id(node))
        return entry[1] if entry is not None else None

    def documented(self, nodes: Iterable[RouteNode]) -> Iterator[Tuple[RouteNode, Operation]]:
        for node in nodes:
            operation = self.get(node)
            if operation is not None:
                yield node, operation

    def __contains__(self, node: object) -> bool:
        return id(node) in self._entries

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["OperationSource", "OperationTable"]
