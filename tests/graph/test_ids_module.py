"""Tests for :mod:`yedwriter.graph.ids`."""

from __future__ import annotations

from yedwriter.graph import ids


def test_counter_allocates_sequential_identifiers():
    counter = ids.IdCounter("e")
    assert [counter.allocate() for _ in range(3)] == ["e0", "e1", "e2"]
    assert counter.allocated == 3


def test_counter_qualifies_with_scope():
    counter = ids.IdCounter("n", scope="n3:")
    assert counter.allocate() == "n3::n0"


def test_scoped_and_subgraph_ids():
    assert ids.scoped_id("", "n1") == "n1"
    assert ids.scoped_id("n0:", "n1") == "n0::n1"
    assert ids.subgraph_id("n0") == "n0:"
