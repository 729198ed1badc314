"""Tests for the simple graph algorithms."""

from __future__ import annotations

import pytest

from graphwalk import Graph, TraversalSettings
from graphwalk.graph.algorithms import (
    connected_components,
    has_cycle,
    is_bipartite,
    topological_sort,
)
from graphwalk.graph.errors import CycleDetectedError, DirectedGraphRequiredError


class TestConnectedComponents:
    """Tests for component counting."""

    def test_one_component(self, small_tree_pairs: list[int]) -> None:
        """A connected graph has one component."""
        graph = Graph(False, small_tree_pairs)

        assert connected_components(graph) == 1

    def test_two_components(self, two_components: Graph) -> None:
        """Disconnected pieces are counted separately."""
        assert connected_components(two_components) == 2

    def test_empty_graph(self) -> None:
        """An empty graph has no components."""
        assert connected_components(Graph(False, [])) == 0

    @pytest.mark.parametrize(
        ("directed", "pairs"),
        [
            (False, [1, 2, 1, 3, 3, 4, 5, 6]),
            (False, [1, 2, 3, 4, 5, 6, 7, 8, 8, 9]),
            (True, [2, 1, 3, 1, 4, 5]),
            (True, [1, 2, 2, 3, 3, 1, 4, 4]),
        ],
    )
    def test_bfs_and_dfs_agree(self, directed: bool, pairs: list[int]) -> None:
        """Breadth-first and depth-first counting give the same answer."""
        graph = Graph(directed, pairs)

        assert connected_components(graph, "bfs") == connected_components(graph, "dfs")

    def test_directed_counts_traversal_roots(self) -> None:
        """Edges pointing into earlier vertices do not merge components."""
        graph = Graph(True, [2, 1, 3, 1])

        assert connected_components(graph) == 3

    def test_unknown_strategy_raises(self, triangle: Graph) -> None:
        """Only bfs and dfs are accepted."""
        with pytest.raises(ValueError, match="strategy"):
            connected_components(triangle, "sideways")  # type: ignore[arg-type]


class TestIsBipartite:
    """Tests for two-colouring."""

    def test_path_is_bipartite(self) -> None:
        """A path can be two-coloured."""
        assert is_bipartite(Graph(False, [1, 2, 2, 3])) is True

    def test_triangle_is_not_bipartite(self, triangle: Graph) -> None:
        """An odd cycle cannot be two-coloured."""
        assert is_bipartite(triangle) is False

    def test_even_cycle_is_bipartite(self) -> None:
        """An even cycle can be two-coloured."""
        assert is_bipartite(Graph(False, [1, 2, 2, 3, 3, 4, 4, 1])) is True

    def test_odd_cycle_in_second_component(self) -> None:
        """Every component is checked until a conflict is found."""
        graph = Graph(False, [1, 2, 3, 4, 4, 5, 5, 3])

        assert is_bipartite(graph) is False

    def test_pentagon_with_chord(self) -> None:
        """A five-cycle is odd even with extra structure."""
        graph = Graph(False, [1, 2, 2, 3, 3, 4, 4, 5, 5, 1, 6, 1])

        assert is_bipartite(graph) is False

    def test_empty_graph(self) -> None:
        """An empty graph is trivially bipartite."""
        assert is_bipartite(Graph(False, [])) is True


class TestHasCycle:
    """Tests for cycle detection from vertex 1."""

    def test_path_has_no_cycle(self) -> None:
        """A path is acyclic."""
        assert has_cycle(Graph(False, [1, 2, 2, 3])) is False

    def test_triangle_has_cycle(self, triangle: Graph) -> None:
        """A triangle is a cycle."""
        assert has_cycle(triangle) is True

    def test_directed_cycle(self) -> None:
        """A directed cycle through vertex 1 is found."""
        assert has_cycle(Graph(True, [1, 2, 2, 3, 3, 1])) is True

    def test_directed_chain_has_no_cycle(self) -> None:
        """A directed chain is acyclic."""
        assert has_cycle(Graph(True, [1, 2, 2, 3])) is False

    def test_cycle_outside_first_component_is_missed(self) -> None:
        """Only vertex 1's component is explored."""
        graph = Graph(False, [1, 2, 3, 4, 4, 5, 5, 3])

        assert has_cycle(graph) is False

    def test_empty_graph(self) -> None:
        """An empty graph has no cycle."""
        assert has_cycle(Graph(False, [])) is False


class TestTopologicalSort:
    """Tests for depth-first finishing order."""

    def test_finishing_order(self) -> None:
        """Vertices appear after everything reachable from them."""
        graph = Graph(True, [1, 2, 2, 3, 2, 4, 4, 5])

        assert topological_sort(graph) == [5, 4, 3, 2, 1]

    def test_every_edge_target_comes_first(self) -> None:
        """For each edge x -> y, y precedes x."""
        pairs = [1, 2, 1, 3, 2, 4, 3, 4, 3, 5, 4, 6, 5, 6, 7, 5]
        graph = Graph(True, pairs)

        order = topological_sort(graph)

        assert sorted(order) == list(graph.vertices())
        for x, y in zip(pairs[::2], pairs[1::2], strict=True):
            assert order.index(y) < order.index(x)

    def test_disconnected_dag(self) -> None:
        """Every component is sorted."""
        graph = Graph(True, [1, 2, 3, 4])

        assert topological_sort(graph) == [2, 1, 4, 3]

    def test_undirected_raises(self, triangle: Graph) -> None:
        """Sorting needs a directed graph."""
        with pytest.raises(DirectedGraphRequiredError, match="topological_sort"):
            topological_sort(triangle)

    def test_cycle_raises(self) -> None:
        """A back edge makes sorting impossible."""
        graph = Graph(True, [1, 2, 2, 3, 3, 1])

        with pytest.raises(CycleDetectedError) as exc_info:
            topological_sort(graph)

        assert (exc_info.value.source, exc_info.value.target) == (3, 1)

    def test_self_loop_raises(self) -> None:
        """A self loop is a cycle."""
        with pytest.raises(CycleDetectedError):
            topological_sort(Graph(True, [1, 1]))

    def test_recursive_strategy_matches(self) -> None:
        """The recursive strategy gives the same order."""
        pairs = [1, 2, 2, 3, 2, 4, 4, 5]
        iterative = Graph(True, pairs)
        recursive = Graph(True, pairs, settings=TraversalSettings(dfs_strategy="recursive"))

        assert topological_sort(iterative) == topological_sort(recursive)


class TestIdempotence:
    """Repeated calls on the same graph give identical results."""

    def test_repeat_calls(self) -> None:
        """No state survives between calls."""
        undirected = Graph(False, [1, 2, 2, 3, 3, 1, 4, 5])
        directed = Graph(True, [1, 2, 2, 3, 2, 4, 4, 5])

        assert connected_components(undirected) == connected_components(undirected)
        assert is_bipartite(undirected) == is_bipartite(undirected)
        assert has_cycle(undirected) == has_cycle(undirected)
        assert topological_sort(directed) == topological_sort(directed)
