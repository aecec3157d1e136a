"""Tests for graph/traversal.py - depth-bounded depth-first walks.

Walks keep no visited set. On shared or cyclic references an asset is
emitted once per path that reaches it, and branches are cut off by
depth-limit markers.
"""

import pytest

from assetgraph.graph import Direction, TraversalEntry, iter_traversal, traverse

A = "a" * 32
B = "b" * 32
C = "c" * 32
D = "d" * 32


def steps(entries):
    """(id, depth) pairs; markers have id None."""
    return [(entry.id, entry.depth) for entry in entries]


class TestDepthBounds:
    """Tests for max_depth handling."""

    def test_depth_zero_is_empty(self, make_graph):
        graph = make_graph([(A, B), (B, C)])
        assert traverse(graph, A, Direction.DEPENDENCIES, 0) == []

    def test_depth_one_returns_immediate_neighbors(self, make_graph):
        graph = make_graph([(A, B), (A, C)])
        assert steps(traverse(graph, A, Direction.DEPENDENCIES, 1)) == [(B, 0), (C, 0)]

    def test_depth_one_cuts_off_grandchildren(self, make_graph):
        graph = make_graph([(A, B), (B, C)])
        entries = traverse(graph, A, Direction.DEPENDENCIES, 1)
        assert steps(entries) == [(B, 0), (None, 1)]
        assert entries[-1].is_depth_limit

    def test_negative_depth_rejected(self, make_graph):
        graph = make_graph([(A, B)])
        with pytest.raises(ValueError):
            traverse(graph, A, Direction.DEPENDENCIES, -1)

    def test_chain_within_bound_has_no_marker(self, make_graph):
        graph = make_graph([(A, B), (B, C), (C, D)])
        assert steps(traverse(graph, A, Direction.DEPENDENCIES, 8)) == [(B, 0), (C, 1), (D, 2)]


class TestCycles:
    """Tests for termination on cyclic graphs."""

    def test_three_node_cycle_terminates(self, make_graph):
        graph = make_graph([(A, B), (B, C), (C, A)])
        entries = traverse(graph, A, Direction.DEPENDENCIES, 5)

        assert steps(entries) == [(B, 0), (C, 1), (A, 2), (B, 3), (C, 4), (None, 5)]
        assert entries[-1].is_depth_limit
        assert entries[-1].node is None

    def test_self_loop_terminates(self, make_graph):
        graph = make_graph([(A, A)])
        assert steps(traverse(graph, A, Direction.DEPENDENCIES, 3)) == [
            (A, 0),
            (A, 1),
            (A, 2),
            (None, 3),
        ]

    def test_large_depth_on_cycle_does_not_recurse(self, make_graph):
        graph = make_graph([(A, B), (B, A)])
        entries = traverse(graph, A, Direction.DEPENDENCIES, 5000)
        assert len(entries) == 5001
        assert entries[-1].is_depth_limit


class TestPathsAndDirections:
    """Tests for ordering, repeat visits, and direction."""

    def test_shared_dependency_emitted_per_path(self, make_graph):
        graph = make_graph([(A, B), (A, C), (B, D), (C, D)])
        assert steps(traverse(graph, A, Direction.DEPENDENCIES, 4)) == [
            (B, 0),
            (D, 1),
            (C, 0),
            (D, 1),
        ]

    def test_dependents_follow_incoming_edges(self, make_graph):
        graph = make_graph([(B, A), (C, B), (D, A)])
        assert steps(traverse(graph, A, Direction.DEPENDENTS, 4)) == [(B, 0), (C, 1), (D, 0)]

    def test_start_node_not_emitted(self, make_graph):
        graph = make_graph([(A, B)])
        ids = [entry.id for entry in traverse(graph, A, Direction.DEPENDENCIES, 3)]
        assert A not in ids

    def test_leaf_has_empty_traversal(self, make_graph):
        graph = make_graph([(A, B)])
        assert traverse(graph, B, Direction.DEPENDENCIES, 8) == []

    def test_start_by_node(self, make_graph):
        graph = make_graph([(A, B)])
        node = graph.find_by_id(A)
        assert steps(traverse(graph, node, Direction.DEPENDENCIES, 2)) == [(B, 0)]

    def test_unknown_start_raises(self, make_graph):
        graph = make_graph([(A, B)])
        with pytest.raises(KeyError):
            traverse(graph, C, Direction.DEPENDENCIES, 2)

    def test_entries_unpack_as_pairs(self, make_graph):
        graph = make_graph([(A, B)])
        for node, depth in iter_traversal(graph, A, Direction.DEPENDENCIES, 2):
            assert node.id == B
            assert depth == 0

    def test_iter_traversal_is_lazy(self, make_graph):
        graph = make_graph([(A, B), (B, A)])
        walk = iter_traversal(graph, A, Direction.DEPENDENCIES, 10**6)
        assert next(walk) == TraversalEntry(graph.find_by_id(B), 0)
