"""Simple graph algorithms built on the traversal engine.

Pure functions that read a graph without modifying it. Each call creates its
own ``TraversalState`` and visitor, so repeated calls on the same graph give
identical results.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from graphwalk.graph.errors import CycleDetectedError, DirectedGraphRequiredError
from graphwalk.graph.state import TraversalState
from graphwalk.graph.traversal import Visitor, breadth_first, depth_first
from graphwalk.observability.logging import get_logger

if TYPE_CHECKING:
    from graphwalk.graph.graph import Graph

log = get_logger(__name__)

UNCOLORED = 0


def connected_components(graph: Graph, strategy: Literal["bfs", "dfs"] = "bfs") -> int:
    """Count the components of the graph.

    Starts one traversal from every vertex no earlier traversal reached.
    Traversals only follow outgoing edges, so on a directed graph the result
    is the number of traversal roots needed to cover every vertex, which can
    exceed the number of weakly connected components.

    Args:
        graph: Graph to inspect.
        strategy: ``"bfs"`` or ``"dfs"``; both give the same count.

    Returns:
        Number of traversals needed to discover every vertex.
    """
    if strategy not in ("bfs", "dfs"):
        msg = f"strategy must be 'bfs' or 'dfs', got {strategy!r}"
        raise ValueError(msg)

    traverse = breadth_first if strategy == "bfs" else depth_first
    state = TraversalState.for_graph(graph)
    count = 0
    for vertex in graph.vertices():
        if not state.discovered[vertex]:
            count += 1
            traverse(graph, vertex, Visitor(), state=state)

    log.debug("connected_components_complete", strategy=strategy, count=count)
    return count


class _TwoColoring(Visitor):
    def __init__(self, vertex_count: int) -> None:
        self.color = [UNCOLORED] * (vertex_count + 1)
        self.bipartite = True

    def on_edge(self, source: int, target: int, state: TraversalState) -> None:
        if self.color[source] == self.color[target]:
            self.bipartite = False
        else:
            self.color[target] = 2 if self.color[source] == 1 else 1


def is_bipartite(graph: Graph) -> bool:
    """Check whether the vertices can be two-coloured with no edge inside a colour.

    Colours each component breadth-first, seeding its root with colour 1.
    Once a conflict is found no further components are examined.

    Returns:
        True if no edge joins two vertices of the same colour.
    """
    state = TraversalState.for_graph(graph)
    coloring = _TwoColoring(graph.vertex_count)

    for vertex in graph.vertices():
        if not coloring.bipartite:
            break
        if not state.discovered[vertex]:
            coloring.color[vertex] = 1
            breadth_first(graph, vertex, coloring, state=state)

    log.debug("bipartite_complete", bipartite=coloring.bipartite)
    return coloring.bipartite


class _CycleFinder(Visitor):
    def __init__(self) -> None:
        self.found = False

    def on_edge(self, source: int, target: int, state: TraversalState) -> None:
        if state.discovered[target] and state.parent[source] != target:
            self.found = True


def has_cycle(graph: Graph) -> bool:
    """Check for a cycle reachable from vertex 1.

    Runs a single depth-first traversal rooted at vertex 1 and reports a cycle
    when an edge reaches an already discovered vertex other than the current
    vertex's parent. Components not reachable from vertex 1 are never
    examined, so a cycle that lives only there is not reported.

    Returns:
        True if a cycle was found; False for an empty graph.
    """
    if graph.vertex_count == 0:
        return False

    finder = _CycleFinder()
    depth_first(graph, 1, finder)

    log.debug("cycle_check_complete", has_cycle=finder.found)
    return finder.found


class _FinishOrder(Visitor):
    def __init__(self) -> None:
        self.order: list[int] = []

    def on_vertex_exit(self, vertex: int, state: TraversalState) -> None:
        self.order.append(vertex)

    def on_edge(self, source: int, target: int, state: TraversalState) -> None:
        if state.discovered[target] and not state.processed[target]:
            log.warning("topological_sort_cycle", source=source, target=target)
            raise CycleDetectedError(source, target)


def topological_sort(graph: Graph) -> list[int]:
    """Order the vertices of a directed acyclic graph by finishing time.

    The result is depth-first postorder: every vertex appears after all the
    vertices reachable from it, so for an edge ``x -> y``, ``y`` comes before
    ``x``. Reverse the list to put each vertex before its successors.

    Returns:
        Vertices in finishing order.

    Raises:
        DirectedGraphRequiredError: If the graph is undirected.
        CycleDetectedError: If a back edge is found.
    """
    if not graph.directed:
        raise DirectedGraphRequiredError("topological_sort")

    state = TraversalState.for_graph(graph)
    finish = _FinishOrder()
    for vertex in graph.vertices():
        if not state.discovered[vertex]:
            depth_first(graph, vertex, finish, state=state)

    log.debug("topological_sort_complete", vertices=len(finish.order))
    return finish.order
