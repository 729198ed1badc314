"""Depth-first edge classification."""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from graphwalk.graph.errors import EdgeClassificationError

if TYPE_CHECKING:
    from graphwalk.graph.state import TraversalState


class EdgeClass(Enum):
    """Kind of an edge relative to a depth-first search tree."""

    TREE = "tree"  # discovers a new vertex
    BACK = "back"  # to an ancestor still on the stack
    FORWARD = "forward"  # to a finished descendant
    CROSS = "cross"  # to a finished vertex in another subtree


def classify_edge(x: int, y: int, state: TraversalState) -> EdgeClass:
    """Classify edge ``x -> y`` using a depth-first traversal state.

    Must be called while the depth-first run that populated ``state`` is
    examining the edge; the answer depends on which vertices are finished.

    Raises:
        EdgeClassificationError: If the state fits none of the four classes.
    """
    if state.parent[y] == x:
        return EdgeClass.TREE
    if state.discovered[y] and not state.processed[y]:
        return EdgeClass.BACK
    if state.processed[y] and state.entry_time[y] > state.entry_time[x]:
        return EdgeClass.FORWARD
    if state.processed[y] and state.entry_time[y] < state.entry_time[x]:
        return EdgeClass.CROSS
    raise EdgeClassificationError(
        x,
        y,
        details={
            "discovered": state.discovered[y],
            "processed": state.processed[y],
            "parent": state.parent[y],
            "entry_time_source": state.entry_time[x],
            "entry_time_target": state.entry_time[y],
        },
    )
