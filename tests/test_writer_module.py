"""Tests for :mod:`yedwriter.writer`."""

from __future__ import annotations

import io
import xml.etree.ElementTree as ET

import pytest

from yedwriter.errors import WriterClosedError
from yedwriter.graph.model import Edge, Graph
from yedwriter.writer import DocumentWriter


class FailingSink:
    """Sink that accepts ``limit`` writes and then raises ``OSError``."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        self.chunks: list[str] = []
        self.attempts = 0

    def write(self, data: str) -> int:
        self.attempts += 1
        if len(self.chunks) >= self.limit:
            raise OSError("disk full")
        self.chunks.append(data)
        return len(data)


def test_header_is_written_once():
    buffer = io.StringIO()
    writer = DocumentWriter(buffer, creator="test")

    writer.write_header()
    writer.write_header()

    assert buffer.getvalue().count("<graphml ") == 1
    assert writer.header_written


def test_close_without_content_produces_valid_document():
    buffer = io.StringIO()
    writer = DocumentWriter(buffer, creator="test")

    writer.close()

    root = ET.fromstring(buffer.getvalue().encode("utf-8"))
    assert root.tag.endswith("graphml")
    assert writer.closed


def test_close_is_idempotent_and_blocks_writes():
    buffer = io.StringIO()
    writer = DocumentWriter(buffer, creator="test")
    graph = Graph()
    node = graph.new_node(label="A")
    writer.write_graph(graph)
    writer.close()
    output = buffer.getvalue()

    writer.close()
    assert buffer.getvalue() == output

    with pytest.raises(WriterClosedError, match="writer is closed"):
        writer.write_node(node)
    with pytest.raises(WriterClosedError):
        writer.write_edge(Edge(id="e0", source=node, target=node))
    with pytest.raises(WriterClosedError):
        writer.write_header()
    assert buffer.getvalue() == output


def test_sink_failure_is_sticky():
    sink = FailingSink(limit=3)
    writer = DocumentWriter(sink, creator="test")
    graph = Graph()
    for _ in range(3):
        graph.new_node(label="x")

    with pytest.raises(OSError) as first:
        writer.write_graph(graph)
    attempts = sink.attempts

    with pytest.raises(OSError) as again:
        writer.write_graph(graph)
    with pytest.raises(OSError) as on_close:
        writer.close()

    assert again.value is first.value
    assert on_close.value is first.value
    assert writer.error is first.value
    assert sink.attempts == attempts
    assert not writer.closed


def test_binary_sink_receives_utf8():
    buffer = io.BytesIO()
    writer = DocumentWriter(buffer, creator="test")
    graph = Graph()
    graph.new_node(label="café")

    writer.write_graph(graph)
    writer.close()

    root = ET.fromstring(buffer.getvalue())
    ns = {"y": "http://www.yworks.com/xml/graphml"}
    assert root.find(".//y:NodeLabel", ns).text == "café"


def test_group_node_subgraph_is_written_inside_node():
    buffer = io.StringIO()
    writer = DocumentWriter(buffer, creator="test")
    graph = Graph()
    group = graph.new_node(label="group")
    group.subgraph.new_node(label="child")

    writer.write_graph(graph)
    writer.close()

    text = buffer.getvalue()
    assert text.index('<graph edgedefault="directed" id="n0:">') < text.index('<node id="n0::n0">')
    assert text.index('<node id="n0::n0">') < text.rindex("</node>")
