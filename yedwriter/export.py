"""Export ``networkx`` graphs as yEd documents."""
from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import Dict, Hashable, Optional, Set

import networkx as nx

from .document import Document
from .graph.model import Graph, Node
from .writer import Sink

LOGGER = logging.getLogger(__name__)


@dataclass
class GraphExporter:
    """Serialize a :mod:`networkx` graph to the yEd flavour of GraphML.

    Node and edge attributes named by ``label_attr``, ``description_attr`` and
    ``style_attr`` become the label, description and style of the written
    element.  A node whose ``parent_attr`` names another node of the graph is
    nested inside that node, which becomes a group node.
    """

    graph: nx.Graph
    label_attr: str = "label"
    description_attr: str = "description"
    parent_attr: str = "parent"
    style_attr: str = "style"

    def build(self, document: Document) -> Dict[Hashable, Node]:
        """Add every node and edge of :attr:`graph` to ``document``.

        Returns the mapping from networkx node to the created :class:`Node`.
        Raises :class:`ValueError` when a parent reference names an unknown
        node or parent references form a cycle.
        """

        created: Dict[Hashable, Node] = {}
        pending: Set[Hashable] = set()

        def place(key: Hashable) -> Node:
            if key in created:
                return created[key]
            if key in pending:
                raise ValueError(f"Cyclic parent reference at node {key!r}")
            pending.add(key)
            data = self.graph.nodes[key]
            container = self._container(document, data.get(self.parent_attr), place)
            created[key] = container.new_node(
                label=str(data.get(self.label_attr, key)),
                description=str(data.get(self.description_attr, "")),
                style=data.get(self.style_attr),
            )
            pending.discard(key)
            return created[key]

        for key in self.graph.nodes:
            place(key)
        for source, target, data in self.graph.edges(data=True):
            document.new_edge(
                created[source],
                created[target],
                label=str(data.get(self.label_attr, "")),
                description=str(data.get(self.description_attr, "")),
                style=data.get(self.style_attr),
            )
        LOGGER.debug(
            "Built document from networkx graph: %d nodes, %d edges",
            self.graph.number_of_nodes(),
            self.graph.number_of_edges(),
        )
        return created

    def _container(self, document: Document, parent: Optional[Hashable], place) -> Graph:
        if parent is None:
            return document.graph
        if parent not in self.graph:
            raise ValueError(f"Unknown parent node: {parent!r}")
        return place(parent).subgraph

    def export(self, sink: Sink, *, creator: Optional[str] = None) -> Document:
        """Write :attr:`graph` to ``sink`` and return the closed document."""

        document = Document(sink, creator=creator)
        self.build(document)
        document.close()
        return document

    def to_string(self, *, creator: Optional[str] = None) -> str:
        buffer = io.StringIO()
        self.export(buffer, creator=creator)
        return buffer.getvalue()


__all__ = ["GraphExporter"]
