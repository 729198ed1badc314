"""Strongly connected components of a directed graph.

Single-pass depth-first algorithm over every undiscovered vertex. Each vertex
is pushed onto an ``active`` stack when entered. ``low[v]`` holds the
earliest-entered vertex known to share ``v``'s component: it is lowered by
back edges, and by cross edges into vertices whose component is still open.
A vertex whose ``low`` is itself when it finishes is the root of a component;
everything above it on the stack belongs to that component.

Components are numbered from 1 in the order they finish.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from graphwalk.graph.classify import EdgeClass, classify_edge
from graphwalk.graph.errors import DirectedGraphRequiredError
from graphwalk.graph.graph import NO_VERTEX
from graphwalk.graph.state import TraversalState
from graphwalk.graph.traversal import Visitor, depth_first
from graphwalk.observability.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator

    from graphwalk.graph.graph import Graph

log = get_logger(__name__)

UNASSIGNED = 0


@dataclass(frozen=True)
class SCCResult:
    """Outcome of a strongly connected component decomposition.

    Unpacks as ``count, components``.

    Attributes:
        count: Number of components.
        components: Vertex id to component id (``1..count``).
    """

    count: int
    components: dict[int, int]

    def __iter__(self) -> Iterator[object]:
        yield self.count
        yield self.components

    def members(self, component_id: int) -> list[int]:
        """Return the vertices of one component in ascending order."""
        return sorted(v for v, c in self.components.items() if c == component_id)


class StrongComponentVisitor(Visitor):
    """Assigns component ids during depth-first traversals sharing one state."""

    def __init__(self, vertex_count: int) -> None:
        self.count = 0
        self.scc = [UNASSIGNED] * (vertex_count + 1)
        self.low = list(range(vertex_count + 1))
        self.active: list[int] = []

    def _lower(self, vertex: int, target: int, state: TraversalState) -> None:
        if state.entry_time[target] < state.entry_time[self.low[vertex]]:
            self.low[vertex] = target

    def on_vertex_enter(self, vertex: int, state: TraversalState) -> None:
        self.active.append(vertex)

    def on_edge(self, source: int, target: int, state: TraversalState) -> None:
        edge_class = classify_edge(source, target, state)
        if edge_class is EdgeClass.BACK:
            self._lower(source, target, state)
        elif edge_class is EdgeClass.CROSS and self.scc[target] == UNASSIGNED:
            # A finished component must not pull low into it.
            self._lower(source, target, state)

    def on_vertex_exit(self, vertex: int, state: TraversalState) -> None:
        if self.low[vertex] == vertex:
            self.count += 1
            while True:
                member = self.active.pop()
                self.scc[member] = self.count
                if member == vertex:
                    break

        parent = state.parent[vertex]
        if parent != NO_VERTEX:
            self._lower(parent, self.low[vertex], state)


def strongly_connected_components(graph: Graph) -> SCCResult:
    """Decompose a directed graph into strongly connected components.

    Returns:
        Component count and the component id of every vertex. A lower id
        means the component finished earlier; ids say nothing further about
        the order of the condensation graph.

    Raises:
        DirectedGraphRequiredError: If the graph is undirected.
    """
    if not graph.directed:
        raise DirectedGraphRequiredError("strongly_connected_components")

    state = TraversalState.for_graph(graph)
    visitor = StrongComponentVisitor(graph.vertex_count)
    for vertex in graph.vertices():
        if not state.discovered[vertex]:
            depth_first(graph, vertex, visitor, state=state)

    components = {v: visitor.scc[v] for v in graph.vertices()}
    log.debug("scc_complete", components=visitor.count, vertices=graph.vertex_count)
    return SCCResult(visitor.count, components)
