from weighted_graph.core.base import BaseEdge, BaseVertex
from weighted_graph.core.graph import Graph
from weighted_graph.core.matrix import MatrixConfig
from weighted_graph.core.models import Edge, Vertex

__all__ = ["BaseEdge", "BaseVertex", "Edge", "Graph", "MatrixConfig", "Vertex"]
