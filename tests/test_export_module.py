"""Tests for :mod:`yedwriter.export`."""

from __future__ import annotations

import io
import xml.etree.ElementTree as ET

import networkx as nx
import pytest

from yedwriter import Document, NodeStyle, StreamWriter
from yedwriter.errors import NestingError
from yedwriter.export import GraphExporter

NS = {
    "g": "http://graphml.graphdrawing.org/xmlns",
    "y": "http://www.yworks.com/xml/graphml",
}


def build_graph() -> nx.DiGraph:
    graph = nx.DiGraph()
    graph.add_node("api", label="API", description="public entry point")
    graph.add_node("backend", label="Backend")
    graph.add_node("db", parent="backend", style=NodeStyle(color="#CCCCCC"))
    graph.add_node("cache", parent="backend")
    graph.add_edge("api", "db", label="reads")
    graph.add_edge("api", "cache")
    return graph


def test_build_nests_children_inside_parents():
    document = Document(io.StringIO(), creator="test")
    created = GraphExporter(build_graph()).build(document)

    assert created["backend"].is_group
    assert created["db"].id == "n1::n0"
    assert created["cache"].id == "n1::n1"
    assert created["db"].label == "db"
    assert created["db"].style == NodeStyle(color="#CCCCCC")
    assert created["api"].description == "public entry point"
    assert [(edge.source, edge.target) for edge in document.edges] == [
        (created["api"], created["db"]),
        (created["api"], created["cache"]),
    ]


def test_children_listed_before_parent_are_still_nested():
    graph = nx.DiGraph()
    graph.add_node("leaf", parent="box")
    graph.add_node("box")

    document = Document(io.StringIO(), creator="test")
    created = GraphExporter(graph).build(document)

    assert [node.id for node in document.graph.nodes] == [created["box"].id]
    assert created["leaf"].id.startswith(created["box"].id)


def test_to_string_produces_parseable_document():
    text = GraphExporter(build_graph()).to_string(creator="test")

    root = ET.fromstring(text.encode("utf-8"))
    groups = [
        node
        for node in root.findall("g:graph/g:node", NS)
        if node.get("yfiles.foldertype") == "group"
    ]
    assert len(groups) == 1
    group = groups[0]
    assert len(group.findall("g:graph/g:node", NS)) == 2
    labels = [element.text for element in root.findall(".//y:EdgeLabel", NS)]
    assert labels == ["reads"]


def test_multigraph_parallel_edges_get_distinct_ids():
    graph = nx.MultiDiGraph()
    graph.add_edge("a", "b", label="first")
    graph.add_edge("a", "b", label="second")

    buffer = io.StringIO()
    document = GraphExporter(graph).export(buffer, creator="test")

    assert document.closed
    assert [edge.id for edge in document.edges] == ["e0", "e1"]


def test_unknown_parent_raises():
    graph = nx.Graph()
    graph.add_node("orphan", parent="missing")

    with pytest.raises(ValueError, match="Unknown parent"):
        GraphExporter(graph).build(Document(io.StringIO(), creator="test"))


def test_parent_cycle_raises():
    graph = nx.DiGraph()
    graph.add_node("a", parent="b")
    graph.add_node("b", parent="a")

    with pytest.raises(ValueError, match="Cyclic"):
        GraphExporter(graph).build(Document(io.StringIO(), creator="test"))


def test_flat_graph_can_be_streamed():
    graph = nx.path_graph(3, create_using=nx.DiGraph)
    buffer = io.StringIO()
    stream = StreamWriter(buffer, creator="test")

    GraphExporter(graph).build(stream)
    stream.close()

    root = ET.fromstring(buffer.getvalue().encode("utf-8"))
    assert len(root.findall("g:graph/g:edge", NS)) == 2
    labels = [element.text for element in root.findall(".//y:NodeLabel", NS)]
    assert labels == ["0", "1", "2"]


def test_nested_graph_cannot_be_streamed():
    with pytest.raises(NestingError):
        GraphExporter(build_graph()).build(StreamWriter(io.StringIO(), creator="test"))
