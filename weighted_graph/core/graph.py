"""The Graph class, the primary public API for weighted-graph."""

from __future__ import annotations

import logging
from typing import Dict, Hashable, List, Optional

import numpy as np

from weighted_graph.core.base import BaseEdge, BaseVertex, EdgeKey
from weighted_graph.core.exceptions import (
    DuplicateEdgeError,
    EdgeNotFoundError,
    VertexNotFoundError,
)
from weighted_graph.core.matrix import (
    MatrixConfig,
    build_adjacency_matrix,
    to_array,
    vertex_indices,
)

logger = logging.getLogger(__name__)


class Graph:
    """A weighted graph, directed or undirected.

    The graph keeps two registries, vertices by key and edges by edge key,
    and keeps every vertex's own adjacency in step with them:

    - every registered edge has both endpoints registered;
    - an edge is attached to its start vertex, and also to its end vertex
      unless the graph is directed;
    - every adjacency entry on a registered vertex is a registered edge.

    Example::

        from weighted_graph import Edge, Graph, Vertex

        a, b = Vertex("A"), Vertex("B")
        graph = Graph(is_directed=True)
        graph.add_edge(Edge(a, b, weight=3))
        graph.get_adjacency_matrix()  # [[inf, 3], [inf, inf]]
    """

    def __init__(
        self,
        is_directed: bool = False,
        matrix_config: Optional[MatrixConfig] = None,
    ) -> None:
        """
        Args:
            is_directed: Whether edges are one-way. Fixed for the graph's life.
            matrix_config: Adjacency matrix settings. Uses defaults if None.
        """
        self._is_directed = bool(is_directed)
        self._matrix_config = matrix_config or MatrixConfig()
        self._vertices: Dict[Hashable, BaseVertex] = {}
        self._edges: Dict[EdgeKey, BaseEdge] = {}

    @property
    def is_directed(self) -> bool:
        return self._is_directed

    # ── Vertex operations ────────────────────────────────────────────

    def add_vertex(self, vertex: BaseVertex) -> Graph:
        """Register a vertex under its key. Returns the graph for chaining.

        Re-adding under a key that is already registered replaces the old
        vertex object. Edges touching the old object are moved over to the
        new one so the registries stay consistent.
        """
        previous = self._vertices.get(vertex.key)
        self._vertices[vertex.key] = vertex
        if previous is not None and previous is not vertex:
            self._rebind_edges(previous, vertex)
        return self

    def get_vertex_by_key(self, key: Hashable) -> Optional[BaseVertex]:
        """Retrieve a vertex by key, or None if not found."""
        return self._vertices.get(key)

    def has_vertex(self, key: Hashable) -> bool:
        return key in self._vertices

    def get_all_vertices(self) -> List[BaseVertex]:
        return list(self._vertices.values())

    def get_neighbors(self, vertex: BaseVertex) -> List[BaseVertex]:
        """Return the neighbours of the registered vertex with ``vertex``'s key."""
        registered = self.get_vertex_by_key(vertex.key)
        if registered is None:
            return []
        return registered.get_neighbors()

    def delete_vertex(self, vertex: BaseVertex) -> None:
        """Remove a vertex together with every edge touching it.

        Raises:
            VertexNotFoundError: If no vertex is registered under the key.
        """
        registered = self._vertices.get(vertex.key)
        if registered is None:
            raise VertexNotFoundError(vertex.key)

        # Incoming edges of a directed graph are not on the vertex itself.
        incident = [
            edge
            for edge in self._edges.values()
            if vertex.key in (edge.start_vertex.key, edge.end_vertex.key)
        ]
        for edge in incident:
            self.delete_edge(edge)
        del self._vertices[vertex.key]
        logger.debug(
            "Deleted vertex %r and %d incident edges", vertex.key, len(incident)
        )

    # ── Edge operations ──────────────────────────────────────────────

    def get_all_edges(self) -> List[BaseEdge]:
        return list(self._edges.values())

    def has_edge(self, edge: BaseEdge) -> bool:
        return edge.key in self._edges

    def add_edge(self, edge: BaseEdge) -> Graph:
        """Add an edge, registering any endpoint not yet in the graph.

        The duplicate check runs first, so a rejected edge leaves the graph
        untouched (no endpoint is registered as a side effect).

        Raises:
            DuplicateEdgeError: If an edge with the same key is registered,
                or, in an undirected graph, one joining the same pair the
                other way round.
        """
        key = edge.key
        if key in self._edges:
            raise DuplicateEdgeError(key)
        # An undirected edge joins the same pair in either direction.
        reversed_key = (edge.end_vertex.key, edge.start_vertex.key)
        if not self._is_directed and reversed_key in self._edges:
            raise DuplicateEdgeError(reversed_key)

        start_vertex = self._ensure_vertex(edge.start_vertex)
        end_vertex = self._ensure_vertex(edge.end_vertex)
        edge.start_vertex = start_vertex
        edge.end_vertex = end_vertex

        self._edges[key] = edge
        self._connect(edge)
        logger.debug("Added edge %r with weight %s", key, edge.weight)
        return self

    def delete_edge(self, edge: BaseEdge) -> None:
        """Remove an edge from the graph and from its endpoints' adjacency.

        Raises:
            EdgeNotFoundError: If the edge's key is not registered.
        """
        key = edge.key
        if key not in self._edges:
            raise EdgeNotFoundError(key)

        registered = self._edges.pop(key)
        # A vertex tolerates deleting an edge it never held (directed graphs
        # only attach to the start vertex).
        registered.start_vertex.delete_edge(registered)
        registered.end_vertex.delete_edge(registered)
        logger.debug("Deleted edge %r", key)

    def find_edge(
        self, start_vertex: BaseVertex, end_vertex: BaseVertex
    ) -> Optional[BaseEdge]:
        """Return the edge from ``start_vertex`` to ``end_vertex``, or None.

        ``start_vertex`` is resolved by key; an unregistered key yields None.
        """
        vertex = self.get_vertex_by_key(start_vertex.key)
        if vertex is None:
            return None
        return vertex.find_edge(end_vertex)

    # ── Whole-graph operations ───────────────────────────────────────

    def get_weight(self) -> float:
        """Sum of all edge weights (0 for an edge-less graph)."""
        return sum(edge.weight for edge in self._edges.values())

    def reverse(self) -> Graph:
        """Flip the direction of every edge in place.

        Works on a snapshot of the edges: all are detached first, reversed,
        then re-added, so a pair like A->B / B->A swaps without colliding.
        """
        edges = self.get_all_edges()
        for edge in edges:
            self.delete_edge(edge)
        for edge in edges:
            edge.reverse()
            self.add_edge(edge)
        logger.debug("Reversed %d edges", len(edges))
        return self

    def get_vertices_indices(self) -> Dict[Hashable, int]:
        """Map each vertex key to its position in ``get_all_vertices()``."""
        return vertex_indices(self.get_all_vertices())

    def get_adjacency_matrix(self) -> List[List[float]]:
        """Return the N x N weight matrix, rows/columns in vertex order.

        Cells with no edge hold ``MatrixConfig.no_edge`` (``inf`` by default).

        Raises:
            GraphConsistencyError: If a vertex lists a neighbour with no
                matching edge (only in strict mode).
        """
        return build_adjacency_matrix(
            self.get_all_vertices(), self.find_edge, self._matrix_config
        )

    def get_adjacency_array(self) -> np.ndarray:
        """Return the adjacency matrix as a 2-D numpy array."""
        return to_array(self.get_adjacency_matrix(), self._matrix_config)

    # ── Internals ────────────────────────────────────────────────────

    def _ensure_vertex(self, vertex: BaseVertex) -> BaseVertex:
        registered = self._vertices.get(vertex.key)
        if registered is None:
            self._vertices[vertex.key] = vertex
            registered = vertex
        return registered

    def _connect(self, edge: BaseEdge) -> None:
        edge.start_vertex.add_edge(edge)
        if not self._is_directed:
            edge.end_vertex.add_edge(edge)

    def _rebind_edges(self, previous: BaseVertex, vertex: BaseVertex) -> None:
        moved = [
            edge
            for edge in self._edges.values()
            if edge.start_vertex is previous or edge.end_vertex is previous
        ]
        for edge in moved:
            previous.delete_edge(edge)
            if edge.start_vertex is previous:
                edge.start_vertex = vertex
            if edge.end_vertex is previous:
                edge.end_vertex = vertex
            self._connect(edge)
        if moved:
            logger.debug(
                "Moved %d edges onto replacement vertex %r", len(moved), vertex.key
            )

    # ── Dunder helpers ───────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, key: object) -> bool:
        return key in self._vertices

    def __str__(self) -> str:
        return ",".join(str(key) for key in self._vertices)

    def __repr__(self) -> str:
        kind = "directed" if self._is_directed else "undirected"
        return (
            f"Graph({kind}, vertices={len(self._vertices)}, "
            f"edges={len(self._edges)})"
        )
