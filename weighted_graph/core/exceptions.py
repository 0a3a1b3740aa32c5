"""Exceptions raised by Graph operations."""

from __future__ import annotations

from typing import Hashable


class GraphError(Exception):
    """Base class for all graph errors."""


class DuplicateEdgeError(GraphError, ValueError):
    """An edge with the same key is already registered."""

    def __init__(self, key: Hashable) -> None:
        self.key = key
        super().__init__(f"Edge {key!r} has already been added")


class EdgeNotFoundError(GraphError, KeyError):
    """The edge key is not registered in the graph."""

    def __init__(self, key: Hashable) -> None:
        self.key = key
        super().__init__(f"Edge {key!r} not found in graph")

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class VertexNotFoundError(GraphError, KeyError):
    """The vertex key is not registered in the graph."""

    def __init__(self, key: Hashable) -> None:
        self.key = key
        super().__init__(f"Vertex {key!r} not found in graph")

    def __str__(self) -> str:
        return str(self.args[0])


class GraphConsistencyError(GraphError, RuntimeError):
    """A vertex adjacency entry has no matching registered edge."""
