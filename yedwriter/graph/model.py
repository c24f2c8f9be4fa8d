"""In-memory model of a yEd document: graphs, nodes and edges."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Protocol

from ..style import EdgeStyle, NodeStyle
from .ids import IdCounter, subgraph_id


class GraphOwner(Protocol):
    """Document a graph reports to when nodes are created."""

    def check_open(self) -> None:
        """Raise if the document no longer accepts new nodes or edges."""

    def node_added(self, node: "Node") -> None:
        """Called for every new node before it is attached to its graph."""


@dataclass(eq=False)
class Node:
    """A node owned by exactly one :class:`Graph`.

    Accessing :attr:`subgraph` turns the node into a group node; the nested
    graph is created on first access and kept for the node's lifetime.
    Creating it on a closed document raises like any other addition.
    """

    id: str
    graph: "Graph" = field(repr=False)
    label: str = ""
    description: str = ""
    style: Optional[NodeStyle] = None
    _subgraph: Optional["Graph"] = field(default=None, init=False, repr=False)

    @property
    def subgraph(self) -> "Graph":
        if self._subgraph is None:
            if self.graph.owner is not None:
                self.graph.owner.check_open()
            self._subgraph = Graph(id=subgraph_id(self.id), owner=self.graph.owner)
        return self._subgraph

    @property
    def is_group(self) -> bool:
        """Whether the node has a nested graph, without creating one."""

        return self._subgraph is not None


@dataclass(eq=False)
class Graph:
    """Container of nodes; the root graph of a document has an empty id."""

    id: str = ""
    description: str = ""
    owner: Optional[GraphOwner] = field(default=None, repr=False)
    nodes: List[Node] = field(default_factory=list, init=False)
    _ids: IdCounter = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._ids = IdCounter("n", scope=self.id)

    def allocate_node_id(self) -> str:
        """Return a fresh node identifier scoped to this graph."""

        return self._ids.allocate()

    def new_node(
        self,
        label: str = "",
        description: str = "",
        style: Optional[NodeStyle] = None,
    ) -> Node:
        """Create a node in this graph and return it."""

        if self.owner is not None:
            self.owner.check_open()
        node = Node(
            id=self.allocate_node_id(),
            graph=self,
            label=label,
            description=description,
            style=style,
        )
        if self.owner is not None:
            self.owner.node_added(node)
        self.nodes.append(node)
        return node

    @property
    def is_root(self) -> bool:
        return not self.id

    def walk(self) -> Iterator[Node]:
        """Yield every node depth first, group nodes before their children."""

        for node in self.nodes:
            yield node
            if node.is_group:
                yield from node.subgraph.walk()


@dataclass(eq=False)
class Edge:
    """Directed edge between two nodes of the same document.

    The endpoints may live in different, possibly nested, graphs.
    """

    id: str
    source: Node
    target: Node
    label: str = ""
    description: str = ""
    style: Optional[EdgeStyle] = None


__all__ = ["Edge", "Graph", "GraphOwner", "Node"]
