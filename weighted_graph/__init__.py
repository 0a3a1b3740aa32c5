"""Weighted Graph: a directed/undirected weighted graph with consistent adjacency bookkeeping."""

import logging

__version__ = "0.1.0"

from weighted_graph.core.exceptions import (
    DuplicateEdgeError,
    EdgeNotFoundError,
    GraphConsistencyError,
    GraphError,
    VertexNotFoundError,
)
from weighted_graph.core.graph import Graph
from weighted_graph.core.matrix import MatrixConfig
from weighted_graph.core.models import Edge, Vertex

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DuplicateEdgeError",
    "Edge",
    "EdgeNotFoundError",
    "Graph",
    "GraphConsistencyError",
    "GraphError",
    "MatrixConfig",
    "Vertex",
    "VertexNotFoundError",
    "__version__",
]
