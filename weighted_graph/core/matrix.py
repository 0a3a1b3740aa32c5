"""Dense adjacency-matrix views of a graph.

Matrix layout
=============
  cell [i][j] = weight of the edge from vertex i to vertex j
              = ``MatrixConfig.no_edge`` (default ``math.inf``) if none exists

Row/column ``i`` is the vertex at position ``i`` of the vertex sequence the
matrix was built from, so ``vertex_indices`` of the same sequence maps keys
to matrix positions. The builders are pure: they read the vertices' own
adjacency and never mutate anything.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Dict, Hashable, List, Optional, Sequence

import numpy as np

from weighted_graph.core.base import BaseEdge, BaseVertex
from weighted_graph.core.exceptions import GraphConsistencyError

logger = logging.getLogger(__name__)


@dataclass
class MatrixConfig:
    """Tuneable knobs for the adjacency matrix.

    Attributes:
        no_edge: Value of a cell with no connecting edge.
        strict: Raise ``GraphConsistencyError`` when a neighbour reported by
            a vertex has no matching edge. When False the cell keeps
            ``no_edge`` and a warning is logged.
        dtype: numpy dtype used by ``to_array``.
    """

    no_edge: float = math.inf
    strict: bool = True
    dtype: str = "float64"


def vertex_indices(vertices: Sequence[BaseVertex]) -> Dict[Hashable, int]:
    """Map each vertex key to its dense position ``0..N-1``."""
    return {vertex.key: index for index, vertex in enumerate(vertices)}


def build_adjacency_matrix(
    vertices: Sequence[BaseVertex],
    find_edge: Callable[[BaseVertex, BaseVertex], Optional[BaseEdge]],
    config: MatrixConfig,
) -> List[List[float]]:
    """Build an N x N weight matrix from each vertex's neighbours.

    Args:
        vertices: Vertices in row/column order.
        find_edge: Lookup of the edge joining two vertices.
        config: Matrix settings.

    Raises:
        GraphConsistencyError: In strict mode, if a neighbour has no edge.
    """
    indices = vertex_indices(vertices)
    size = len(vertices)
    matrix = [[config.no_edge] * size for _ in range(size)]

    for row, vertex in enumerate(vertices):
        for neighbor in vertex.get_neighbors():
            edge = find_edge(vertex, neighbor)
            column = indices.get(neighbor.key)
            if edge is None or column is None:
                message = (
                    f"Vertex {vertex.key!r} lists neighbour {neighbor.key!r} "
                    "with no matching registered edge"
                )
                if config.strict:
                    raise GraphConsistencyError(message)
                logger.warning(message)
                continue
            matrix[row][column] = edge.weight

    return matrix


def to_array(matrix: List[List[float]], config: MatrixConfig) -> np.ndarray:
    """Convert a nested-list matrix to a 2-D numpy array."""
    size = len(matrix)
    return np.asarray(matrix, dtype=config.dtype).reshape(size, size)
