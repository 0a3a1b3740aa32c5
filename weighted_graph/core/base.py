"""Abstract contracts for the vertex and edge types a Graph works with."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Hashable, List, Optional, Tuple

EdgeKey = Tuple[Hashable, Hashable]


class BaseVertex(ABC):
    """Interface that all vertex types must implement.

    A vertex owns its adjacency (the edges incident to it). Only the owning
    ``Graph`` should call ``add_edge`` / ``delete_edge``.
    """

    key: Hashable

    def get_key(self) -> Hashable:
        return self.key

    @abstractmethod
    def add_edge(self, edge: BaseEdge) -> None:
        """Register an incident edge."""

    @abstractmethod
    def delete_edge(self, edge: BaseEdge) -> None:
        """Drop an incident edge. Must be a no-op if the edge is not present."""

    @abstractmethod
    def get_edges(self) -> List[BaseEdge]:
        """Return a copy of the incident edges."""

    @abstractmethod
    def get_neighbors(self) -> List[BaseVertex]:
        """Return the vertices at the other end of each incident edge."""

    @abstractmethod
    def find_edge(self, vertex: BaseVertex) -> Optional[BaseEdge]:
        """Return the incident edge connecting to ``vertex``, or None."""


class BaseEdge(ABC):
    """Interface that all edge types must implement."""

    start_vertex: BaseVertex
    end_vertex: BaseVertex
    weight: float

    @property
    def key(self) -> EdgeKey:
        """Direction-sensitive identity: ``(start key, end key)``."""
        return (self.start_vertex.key, self.end_vertex.key)

    def get_key(self) -> EdgeKey:
        return self.key

    @abstractmethod
    def reverse(self) -> BaseEdge:
        """Swap start and end vertex in place."""
