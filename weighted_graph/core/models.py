"""Vertex and Edge types used by the Graph."""

from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, List, Optional

from weighted_graph.core.base import BaseEdge, BaseVertex, EdgeKey


@dataclass(eq=False)
class Vertex(BaseVertex):
    """A vertex identified by a caller-supplied key.

    Attributes:
        key: Unique, hashable identity of the vertex within a graph.
        value: Optional payload carried by the vertex.

    The incident edges are kept in an ordered mapping keyed by edge key.
    They are only reachable as copies (``get_edges``) so the adjacency can
    only be changed through a ``Graph``.
    """

    key: Hashable
    value: Any = None
    _edges: Dict[EdgeKey, BaseEdge] = field(
        default_factory=dict, init=False, repr=False
    )

    def __post_init__(self) -> None:
        if self.key is None:
            raise ValueError("Vertex key must not be None")

    def add_edge(self, edge: BaseEdge) -> None:
        self._edges[edge.key] = edge

    def delete_edge(self, edge: BaseEdge) -> None:
        self._edges.pop(edge.key, None)

    def get_edges(self) -> List[BaseEdge]:
        return list(self._edges.values())

    def _far_end(self, edge: BaseEdge) -> BaseVertex:
        if edge.start_vertex.key == self.key:
            return edge.end_vertex
        return edge.start_vertex

    def get_neighbors(self) -> List[BaseVertex]:
        """Return the far endpoint of every incident edge.

        A self-loop yields this vertex. Order follows edge insertion.
        """
        return [self._far_end(edge) for edge in self._edges.values()]

    def has_edge(self, edge: BaseEdge) -> bool:
        return edge.key in self._edges

    def has_neighbor(self, vertex: BaseVertex) -> bool:
        return self.find_edge(vertex) is not None

    def find_edge(self, vertex: BaseVertex) -> Optional[BaseEdge]:
        for edge in self._edges.values():
            if self._far_end(edge).key == vertex.key:
                return edge
        return None

    @property
    def degree(self) -> int:
        return len(self._edges)

    def __str__(self) -> str:
        return str(self.key)


@dataclass(eq=False)
class Edge(BaseEdge):
    """A weighted connection from ``start_vertex`` to ``end_vertex``.

    Attributes:
        start_vertex: Origin vertex.
        end_vertex: Destination vertex.
        weight: Any real number, negative values included. Defaults to 0.
    """

    start_vertex: BaseVertex
    end_vertex: BaseVertex
    weight: float = 0

    def __post_init__(self) -> None:
        if isinstance(self.weight, bool) or not isinstance(self.weight, numbers.Real):
            raise TypeError(
                f"weight must be a real number, got {type(self.weight).__name__}"
            )

    def reverse(self) -> Edge:
        self.start_vertex, self.end_vertex = self.end_vertex, self.start_vertex
        return self

    def __str__(self) -> str:
        return f"{self.start_vertex}_{self.end_vertex}"
