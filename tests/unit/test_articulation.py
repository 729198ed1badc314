"""Tests for articulation vertex detection."""

from __future__ import annotations

import pytest

from graphwalk import Graph, TraversalSettings
from graphwalk.graph.articulation import ArticulationVisitor, articulation_vertices
from graphwalk.graph.errors import UnknownVertexError
from graphwalk.graph.traversal import depth_first


class TestArticulationVertices:
    """Tests for each kind of cut vertex."""

    def test_root(self) -> None:
        """A root with two subtrees is a cut vertex."""
        graph = Graph(False, [1, 2, 1, 3])

        assert articulation_vertices(graph, 1) == {1: "root"}

    def test_parent(self) -> None:
        """A vertex no back edge climbs above is a parent cut vertex."""
        graph = Graph(False, [1, 2, 2, 3, 3, 4, 4, 2])

        assert articulation_vertices(graph, 1) == {2: "parent"}

    def test_bridge(self) -> None:
        """The inner end of a bridge is a cut vertex."""
        graph = Graph(False, [1, 2, 2, 3])

        assert articulation_vertices(graph, 1) == {2: "bridge"}

    def test_bridge_child_with_children(self) -> None:
        """Both ends of an inner bridge are cut vertices."""
        graph = Graph(False, [1, 2, 2, 3, 3, 4])

        assert articulation_vertices(graph, 1) == {2: "bridge", 3: "bridge"}

    def test_start_defaults_to_one(self) -> None:
        """The traversal starts at vertex 1 unless told otherwise."""
        graph = Graph(False, [1, 2, 2, 3])

        assert articulation_vertices(graph) == {2: "bridge"}

    def test_middle_start_is_root(self) -> None:
        """Starting in the middle of a path makes the middle a root cut vertex."""
        graph = Graph(False, [1, 2, 2, 3])

        assert articulation_vertices(graph, 2) == {2: "root"}

    def test_cycle_has_no_cut_vertices(self, triangle: Graph) -> None:
        """Every vertex of a cycle has an alternative route."""
        assert articulation_vertices(triangle, 1) == {}

    def test_two_triangles_sharing_a_vertex(self) -> None:
        """The shared vertex of two cycles is a cut vertex."""
        graph = Graph(False, [1, 2, 2, 3, 3, 1, 3, 4, 4, 5, 5, 3])

        assert set(articulation_vertices(graph, 1)) == {3}

    def test_empty_graph(self) -> None:
        """An empty graph has no cut vertices."""
        assert articulation_vertices(Graph(False, [])) == {}

    def test_unknown_start_raises(self, triangle: Graph) -> None:
        """Starting outside the graph raises UnknownVertexError."""
        with pytest.raises(UnknownVertexError):
            articulation_vertices(triangle, 7)

    def test_idempotent(self) -> None:
        """Repeated calls give identical results."""
        graph = Graph(False, [1, 2, 2, 3, 3, 4, 4, 2, 4, 5])

        assert articulation_vertices(graph) == articulation_vertices(graph)

    @pytest.mark.parametrize(
        "pairs",
        [
            [1, 2, 1, 3],
            [1, 2, 2, 3, 3, 4, 4, 2],
            [1, 2, 2, 3, 3, 4],
            [1, 2, 2, 3, 3, 1, 3, 4, 4, 5, 5, 3],
        ],
    )
    def test_strategies_agree(self, pairs: list[int]) -> None:
        """Recursive and iterative traversal find the same cut vertices."""
        iterative = Graph(False, pairs)
        recursive = Graph(False, pairs, settings=TraversalSettings(dfs_strategy="recursive"))

        assert articulation_vertices(iterative) == articulation_vertices(recursive)


class TestArticulationVisitor:
    """Tests for the accumulators kept by the visitor."""

    def test_out_degree_counts_tree_children(self) -> None:
        """out_degree counts tree edges only."""
        graph = Graph(False, [1, 2, 1, 3, 3, 4])
        visitor = ArticulationVisitor(graph.vertex_count)

        depth_first(graph, 1, visitor)

        assert visitor.out_degree[1:] == [2, 0, 1, 0]

    def test_ancestor_propagates_through_back_edge(self) -> None:
        """A back edge lowers the ancestor of every vertex on the cycle."""
        graph = Graph(False, [1, 2, 2, 3, 3, 4, 4, 2])
        visitor = ArticulationVisitor(graph.vertex_count)

        depth_first(graph, 1, visitor)

        assert visitor.ancestor[3] == 2
        assert visitor.ancestor[4] == 2
        assert visitor.ancestor[2] == 2
