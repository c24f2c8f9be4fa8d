"""Documents tie the graph model to a :class:`~yedwriter.writer.DocumentWriter`.

:class:`Document` keeps the whole node tree in memory, including group nodes,
and serializes it when closed.  :class:`StreamWriter` writes every node and
edge of a single, flat root graph as soon as it is created.
"""
from __future__ import annotations

import logging
from typing import List, Optional

from .errors import NestingError, WriterClosedError
from .graph.ids import IdCounter
from .graph.model import Edge, Graph, Node
from .style import EdgeStyle, NodeStyle
from .writer import DocumentWriter, Sink

LOGGER = logging.getLogger(__name__)


class Document:
    """A yEd document built in memory and written to ``sink`` on :meth:`close`.

    Nodes are created through :attr:`graph` (and the subgraphs of group
    nodes), edges through :meth:`new_edge`.  Closing writes the nested graph
    tree, then every edge in creation order, then the footer.  Once closed,
    or once a sink write has failed, no further nodes, subgraphs or edges can
    be added.
    """

    def __init__(self, sink: Sink, *, creator: Optional[str] = None) -> None:
        self._writer = DocumentWriter(sink, creator=creator)
        self._edge_ids = IdCounter("e")
        self.graph = Graph(owner=self)
        self.edges: List[Edge] = []

    def __enter__(self) -> "Document":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.close()

    @property
    def closed(self) -> bool:
        return self._writer.closed

    @property
    def error(self) -> Optional[BaseException]:
        """The sink failure that made this document unfinishable, if any."""

        return self._writer.error

    def check_open(self) -> None:
        if self.closed:
            raise WriterClosedError()
        if self._writer.error is not None:
            raise self._writer.error

    def node_added(self, node: Node) -> None:
        pass

    def allocate_edge_id(self) -> str:
        return self._edge_ids.allocate()

    def new_edge(
        self,
        source: Node,
        target: Node,
        label: str = "",
        description: str = "",
        style: Optional[EdgeStyle] = None,
    ) -> Edge:
        """Create a directed edge from ``source`` to ``target``."""

        self.check_open()
        edge = Edge(
            id=self.allocate_edge_id(),
            source=source,
            target=target,
            label=label,
            description=description,
            style=style,
        )
        self._edge_added(edge)
        self.edges.append(edge)
        return edge

    def _edge_added(self, edge: Edge) -> None:
        pass

    def close(self) -> None:
        """Serialize the document; calling it again after success does nothing."""

        if self.closed:
            return
        LOGGER.debug("Closing document with %d edges", len(self.edges))
        self._writer.write_graph(self.graph)
        for edge in self.edges:
            self._writer.write_edge(edge)
        self._writer.close()


class StreamWriter(Document):
    """Flat document whose nodes and edges are written as they are created.

    The header opens the root graph, which stays open until :meth:`close`.
    Nodes must carry their final label, description and style when created;
    later changes are not written.  Group nodes are not supported.
    """

    def __init__(self, sink: Sink, *, creator: Optional[str] = None) -> None:
        super().__init__(sink, creator=creator)
        self._root_open = False

    def _start(self) -> None:
        if not self._root_open:
            self._writer.open_graph(self.graph)
            self._root_open = True

    def new_node(
        self,
        label: str = "",
        description: str = "",
        style: Optional[NodeStyle] = None,
    ) -> Node:
        """Create a node in the root graph and write it immediately."""

        return self.graph.new_node(label=label, description=description, style=style)

    def node_added(self, node: Node) -> None:
        if node.graph is not self.graph:
            raise NestingError(f"yed: stream writer cannot write nested node {node.id!r}")
        self._start()
        self._writer.write_node(node)

    def _edge_added(self, edge: Edge) -> None:
        self._start()
        self._writer.write_edge(edge)

    def close(self) -> None:
        if self.closed:
            return
        LOGGER.debug("Closing stream with %d edges", len(self.edges))
        self._start()
        self._writer.close_graph()
        self._writer.close()


__all__ = ["Document", "StreamWriter"]
