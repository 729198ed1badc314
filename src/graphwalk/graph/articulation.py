"""Articulation vertices (cut vertices).

A single depth-first traversal tracks, for every vertex ``v``:

- ``ancestor[v]``: the earliest-entered vertex reachable from ``v``'s subtree
  through a back edge (initially ``v`` itself)
- ``out_degree[v]``: the number of tree edges from ``v`` to its children

When a vertex finishes, these decide whether it or its parent is a cut
vertex, and ``ancestor`` is propagated to the parent. Three cases exist:

- ``"root"``: the traversal root has two or more tree children.
- ``"parent"``: no back edge from ``v``'s subtree climbs above ``v``'s
  parent, so removing the parent cuts ``v`` off.
- ``"bridge"``: no back edge leaves ``v``'s subtree at all, so the tree edge
  ``(parent, v)`` is a bridge. The parent is a cut vertex, and so is ``v``
  whenever it has children of its own.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Literal

from graphwalk.graph.classify import EdgeClass, classify_edge
from graphwalk.graph.graph import NO_VERTEX
from graphwalk.graph.state import TraversalState
from graphwalk.graph.traversal import Visitor, depth_first
from graphwalk.observability.logging import get_logger

if TYPE_CHECKING:
    from graphwalk.graph.graph import Graph

log = get_logger(__name__)

CutVertexKind = Literal["root", "parent", "bridge"]


class ArticulationVisitor(Visitor):
    """Accumulates cut vertices during one depth-first traversal.

    Attributes:
        ancestor: Earliest reachable ancestor per vertex.
        out_degree: Tree-edge children per vertex.
        cut_vertices: Cut vertex id to the case that identified it.
    """

    def __init__(self, vertex_count: int) -> None:
        self.ancestor = [NO_VERTEX] * (vertex_count + 1)
        self.out_degree = [0] * (vertex_count + 1)
        self.cut_vertices: dict[int, CutVertexKind] = {}

    def on_vertex_enter(self, vertex: int, state: TraversalState) -> None:
        self.ancestor[vertex] = vertex

    def on_edge(self, source: int, target: int, state: TraversalState) -> None:
        edge_class = classify_edge(source, target, state)
        if edge_class is EdgeClass.TREE:
            self.out_degree[source] += 1
            return
        if edge_class is EdgeClass.BACK and state.parent[source] != target:
            if state.entry_time[target] < state.entry_time[self.ancestor[source]]:
                self.ancestor[source] = target

    def on_vertex_exit(self, vertex: int, state: TraversalState) -> None:
        if state.is_root(vertex) and self.out_degree[vertex] > 1:
            self.cut_vertices[vertex] = "root"
            return

        parent = state.parent[vertex]
        # Neither case below can apply when the parent is the root.
        if not state.is_root(parent):
            if self.ancestor[vertex] == parent:
                self.cut_vertices[parent] = "parent"
            elif self.ancestor[vertex] == vertex:
                self.cut_vertices[parent] = "bridge"
                if self.out_degree[vertex] > 0:
                    self.cut_vertices[vertex] = "bridge"

        earliest = state.entry_time[self.ancestor[vertex]]
        if earliest < state.entry_time[self.ancestor[parent]]:
            self.ancestor[parent] = self.ancestor[vertex]


def articulation_vertices(graph: Graph, start: int = 1) -> dict[int, CutVertexKind]:
    """Find the cut vertices reachable from ``start``.

    Intended for undirected graphs; only the component containing ``start``
    is examined.

    Args:
        graph: Graph to inspect.
        start: Root of the depth-first traversal.

    Returns:
        Mapping from cut vertex id to ``"root"``, ``"parent"`` or ``"bridge"``.
        Empty for an empty graph.

    Raises:
        UnknownVertexError: If ``start`` is not in a non-empty graph.
    """
    if graph.vertex_count == 0:
        return {}

    visitor = ArticulationVisitor(graph.vertex_count)
    depth_first(graph, start, visitor, state=TraversalState.for_graph(graph))

    log.debug("articulation_vertices_complete", start=start, cut_vertices=len(visitor.cut_vertices))
    return visitor.cut_vertices
