"""graphwalk: graph traversal engine and classic graph algorithms."""

import logging

from graphwalk.config import SettingsError, TraversalSettings, load_settings
from graphwalk.graph import (
    CycleDetectedError,
    DirectedGraphRequiredError,
    EdgeClass,
    EdgeClassificationError,
    EdgeListError,
    Graph,
    GraphError,
    SCCResult,
    TraversalState,
    UnknownVertexError,
    VertexRangeError,
    Visitor,
    articulation_vertices,
    breadth_first,
    classify_edge,
    connected_components,
    depth_first,
    has_cycle,
    is_bipartite,
    strongly_connected_components,
    topological_sort,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CycleDetectedError",
    "DirectedGraphRequiredError",
    "EdgeClass",
    "EdgeClassificationError",
    "EdgeListError",
    "Graph",
    "GraphError",
    "SCCResult",
    "SettingsError",
    "TraversalSettings",
    "TraversalState",
    "UnknownVertexError",
    "VertexRangeError",
    "Visitor",
    "__version__",
    "articulation_vertices",
    "breadth_first",
    "classify_edge",
    "connected_components",
    "depth_first",
    "has_cycle",
    "is_bipartite",
    "load_settings",
    "strongly_connected_components",
    "topological_sort",
]
