"""Append-only emitter that serializes the document model to a sink."""
from __future__ import annotations

import io
import logging
from typing import Any, Optional, Protocol

from . import markup
from .config import get_creator
from .errors import WriterClosedError
from .graph.model import Edge, Graph, Node
from .style import resolve_edge_style, resolve_node_style

LOGGER = logging.getLogger(__name__)


class Sink(Protocol):
    """Destination accepting sequential writes of text or bytes."""

    def write(self, data: Any) -> Any:  # pragma: no cover - interface
        ...


def _is_binary(sink: Sink) -> bool:
    if isinstance(sink, (io.RawIOBase, io.BufferedIOBase)):
        return True
    if isinstance(sink, io.TextIOBase):
        return False
    return "b" in getattr(sink, "mode", "")


class DocumentWriter:
    """Write yEd GraphML markup to ``sink`` in header, body, footer order.

    The header is written by the first write of any kind and :meth:`close`
    writes the footer exactly once.  Writes after :meth:`close` raise
    :class:`~yedwriter.errors.WriterClosedError`.

    When ``sink.write`` raises, the exception is kept as the terminal error of
    the writer and raised again by every later operation without touching the
    sink.  The writer does not close the sink.
    """

    def __init__(self, sink: Sink, *, creator: Optional[str] = None) -> None:
        self._sink = sink
        self._binary = _is_binary(sink)
        self.creator = creator if creator is not None else get_creator()
        self.error: Optional[BaseException] = None
        self.header_written = False
        self.closed = False

    def _write(self, text: str) -> None:
        if self.error is not None:
            raise self.error
        try:
            self._sink.write(text.encode("utf-8") if self._binary else text)
        except Exception as exc:
            LOGGER.warning("Sink write failed, document cannot be finished: %s", exc)
            self.error = exc
            raise

    def write_header(self) -> None:
        """Write the XML declaration and key table unless already written."""

        if self.closed:
            raise WriterClosedError()
        if self.header_written:
            if self.error is not None:
                raise self.error
            return
        self._write(markup.header(self.creator))
        self.header_written = True
        LOGGER.debug("Wrote GraphML header")

    def open_graph(self, graph: Graph) -> None:
        """Write the opening ``graph`` element of ``graph`` without its nodes."""

        self.write_header()
        self._write(markup.graph_open(graph.id, graph.description))

    def close_graph(self) -> None:
        self.write_header()
        self._write(markup.graph_close())

    def write_graph(self, graph: Graph) -> None:
        """Write ``graph`` with all of its nodes, recursing into group nodes."""

        self.open_graph(graph)
        for node in graph.nodes:
            self.write_node(node)
        self.close_graph()

    def write_node(self, node: Node) -> None:
        self.write_header()
        self._write(markup.node_open(node.id, group=node.is_group))
        self._write(markup.description(node.description))
        if node.is_group:
            self._write(markup.group_node_graphics(node.label))
            self.write_graph(node.subgraph)
        else:
            style = resolve_node_style(node.style)
            self._write(markup.shape_node_graphics(node.label, style))
        self._write(markup.node_close())

    def write_edge(self, edge: Edge) -> None:
        self.write_header()
        self._write(markup.edge_open(edge.id, edge.source.id, edge.target.id))
        self._write(markup.description(edge.description))
        style = resolve_edge_style(edge.style)
        self._write(markup.edge_graphics(edge.label, style))
        self._write(markup.edge_close())

    def close(self) -> None:
        """Write the footer; later calls are no-ops."""

        if self.closed:
            return
        self.write_header()
        self._write(markup.footer())
        self.closed = True
        LOGGER.debug("Wrote GraphML footer")


__all__ = ["DocumentWriter", "Sink"]
