"""Graph subpackage containing the document model and identifier helpers."""

from .ids import IdCounter, scoped_id, subgraph_id
from .model import Edge, Graph, GraphOwner, Node

__all__ = [
    "Edge",
    "Graph",
    "GraphOwner",
    "IdCounter",
    "Node",
    "scoped_id",
    "subgraph_id",
]
