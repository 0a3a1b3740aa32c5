"""Tests for the adjacency matrix builders."""

import logging
import math

import numpy as np
import pytest

from weighted_graph.core.exceptions import GraphConsistencyError
from weighted_graph.core.matrix import (
    MatrixConfig,
    build_adjacency_matrix,
    to_array,
    vertex_indices,
)
from weighted_graph.core.models import Edge, Vertex

INF = math.inf


def _chain():
    """Helper: A -> B (1), B -> C (2), edges attached to start vertices only."""
    a, b, c = Vertex("A"), Vertex("B"), Vertex("C")
    ab, bc = Edge(a, b, 1), Edge(b, c, 2)
    a.add_edge(ab)
    b.add_edge(bc)
    return [a, b, c]


def _lookup(start, end):
    return start.find_edge(end)


class TestVertexIndices:
    def test_dense_indices_in_order(self):
        assert vertex_indices(_chain()) == {"A": 0, "B": 1, "C": 2}

    def test_empty(self):
        assert vertex_indices([]) == {}


class TestBuildAdjacencyMatrix:
    def test_chain(self):
        matrix = build_adjacency_matrix(_chain(), _lookup, MatrixConfig())
        assert matrix == [[INF, 1, INF], [INF, INF, 2], [INF, INF, INF]]

    def test_empty(self):
        assert build_adjacency_matrix([], _lookup, MatrixConfig()) == []

    def test_custom_no_edge(self):
        matrix = build_adjacency_matrix(_chain(), _lookup, MatrixConfig(no_edge=0))
        assert matrix == [[0, 1, 0], [0, 0, 2], [0, 0, 0]]

    def test_rows_are_independent(self):
        matrix = build_adjacency_matrix(_chain(), _lookup, MatrixConfig())
        matrix[0][0] = 99
        assert matrix[1][0] == INF

    def test_missing_edge_raises_in_strict_mode(self):
        vertices = _chain()
        with pytest.raises(GraphConsistencyError, match="'A'"):
            build_adjacency_matrix(vertices, lambda s, e: None, MatrixConfig())

    def test_unregistered_neighbor_raises_in_strict_mode(self):
        a, b = Vertex("A"), Vertex("B")
        a.add_edge(Edge(a, b, 1))
        with pytest.raises(GraphConsistencyError, match="'B'"):
            build_adjacency_matrix([a], _lookup, MatrixConfig())

    def test_missing_edge_warns_when_not_strict(self, caplog):
        config = MatrixConfig(strict=False)
        with caplog.at_level(logging.WARNING, logger="weighted_graph.core.matrix"):
            matrix = build_adjacency_matrix(_chain(), lambda s, e: None, config)
        assert matrix == [[INF] * 3 for _ in range(3)]
        assert "no matching registered edge" in caplog.text


class TestToArray:
    def test_shape_and_values(self):
        matrix = build_adjacency_matrix(_chain(), _lookup, MatrixConfig())
        array = to_array(matrix, MatrixConfig())
        assert array.shape == (3, 3)
        assert array.dtype == np.float64
        assert array[0, 1] == 1.0
        assert np.isinf(array[1, 0])

    def test_empty_matrix(self):
        array = to_array([], MatrixConfig())
        assert array.shape == (0, 0)

    def test_dtype_from_config(self):
        matrix = [[0, 1], [1, 0]]
        array = to_array(matrix, MatrixConfig(dtype="float32"))
        assert array.dtype == np.float32
