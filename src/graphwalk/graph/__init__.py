"""Graph package - adjacency-list graph, traversal engine and algorithms.

Algorithms are pure functions over an immutable ``Graph``. Each one builds
its own ``TraversalState`` and visitor, then drives the breadth-first or
depth-first engine once per root it needs.
"""

from graphwalk.graph.algorithms import (
    connected_components,
    has_cycle,
    is_bipartite,
    topological_sort,
)
from graphwalk.graph.articulation import (
    ArticulationVisitor,
    CutVertexKind,
    articulation_vertices,
)
from graphwalk.graph.classify import EdgeClass, classify_edge
from graphwalk.graph.components import (
    SCCResult,
    StrongComponentVisitor,
    strongly_connected_components,
)
from graphwalk.graph.errors import (
    CycleDetectedError,
    DirectedGraphRequiredError,
    EdgeClassificationError,
    EdgeListError,
    GraphError,
    UnknownVertexError,
    VertexRangeError,
)
from graphwalk.graph.graph import NO_VERTEX, Graph
from graphwalk.graph.state import TraversalState
from graphwalk.graph.traversal import (
    CallbackVisitor,
    TraversalVisitor,
    Visitor,
    breadth_first,
    depth_first,
)

__all__ = [
    "NO_VERTEX",
    "ArticulationVisitor",
    "CallbackVisitor",
    "CutVertexKind",
    "CycleDetectedError",
    "DirectedGraphRequiredError",
    "EdgeClass",
    "EdgeClassificationError",
    "EdgeListError",
    "Graph",
    "GraphError",
    "SCCResult",
    "StrongComponentVisitor",
    "TraversalState",
    "TraversalVisitor",
    "UnknownVertexError",
    "VertexRangeError",
    "Visitor",
    "articulation_vertices",
    "breadth_first",
    "classify_edge",
    "connected_components",
    "depth_first",
    "has_cycle",
    "is_bipartite",
    "strongly_connected_components",
    "topological_sort",
]
