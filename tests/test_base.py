"""Tests for the vertex/edge contracts with caller-supplied types."""

import math

import pytest

from weighted_graph.core.base import BaseEdge, BaseVertex
from weighted_graph.core.graph import Graph
from weighted_graph.core.models import Edge


class ListVertex(BaseVertex):
    """Minimal vertex that keeps its adjacency in a plain list."""

    def __init__(self, key):
        self.key = key
        self._edges = []

    def add_edge(self, edge):
        if edge not in self._edges:
            self._edges.append(edge)

    def delete_edge(self, edge):
        if edge in self._edges:
            self._edges.remove(edge)

    def get_edges(self):
        return list(self._edges)

    def get_neighbors(self):
        return [e.end_vertex if e.start_vertex is self else e.start_vertex for e in self._edges]

    def find_edge(self, vertex):
        for edge in self._edges:
            if vertex.key in (edge.start_vertex.key, edge.end_vertex.key):
                return edge
        return None


class TestContracts:
    def test_abstract_vertex_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            BaseVertex()

    def test_abstract_edge_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            BaseEdge()

    def test_get_key_defaults_to_key(self):
        assert ListVertex("A").get_key() == "A"


class TestCustomVertexInGraph:
    def test_graph_operations(self):
        g = Graph(is_directed=True)
        a, b = ListVertex("A"), ListVertex("B")
        edge = Edge(a, b, 2)
        g.add_edge(edge)
        assert g.find_edge(a, b) is edge
        assert g.get_adjacency_matrix() == [[math.inf, 2], [math.inf, math.inf]]

        g.reverse()
        assert b.get_edges() == [edge]
        assert a.get_edges() == []

        g.delete_edge(edge)
        assert b.get_edges() == []
        assert len(g) == 2
