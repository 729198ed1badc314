"""Per-traversal bookkeeping.

A ``TraversalState`` records which vertices a traversal has discovered and
finished, the parent links of the search tree, and (for depth-first runs)
entry and exit timestamps. All lists are indexed by vertex id and carry an
unused slot 0 for the ``NO_VERTEX`` sentinel.

One state is created per algorithm call. Algorithms that need to cover a
disconnected graph reuse the same state across several root traversals; the
``discovered`` flags carried between roots are what lets them start a new
traversal only from vertices no earlier traversal reached.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from graphwalk.graph.graph import NO_VERTEX

if TYPE_CHECKING:
    from graphwalk.graph.graph import Graph


@dataclass
class TraversalState:
    """Mutable state populated by the traversal engine.

    Attributes:
        discovered: Vertex has been reached.
        processed: Vertex has been fully handled (all its edges examined).
        parent: Vertex that discovered this one, or ``NO_VERTEX``.
        entry_time: Depth-first entry timestamp.
        exit_time: Depth-first exit timestamp.
        time: Shared depth-first clock, bumped once per entry and once per exit.
    """

    discovered: list[bool]
    processed: list[bool]
    parent: list[int]
    entry_time: list[int]
    exit_time: list[int]
    time: int = 0
    vertex_count: int = field(init=False)

    def __post_init__(self) -> None:
        self.vertex_count = len(self.parent) - 1

    @classmethod
    def for_graph(cls, graph: Graph) -> TraversalState:
        """Create a fresh state sized for ``graph``."""
        size = graph.vertex_count + 1
        return cls(
            discovered=[False] * size,
            processed=[False] * size,
            parent=[NO_VERTEX] * size,
            entry_time=[0] * size,
            exit_time=[0] * size,
        )

    def is_root(self, vertex: int) -> bool:
        """True if ``vertex`` has no parent (a traversal started there or it is unseen)."""
        return self.parent[vertex] == NO_VERTEX

    def path_to(self, vertex: int) -> list[int]:
        """Return the tree path from the traversal root to ``vertex``.

        Returns an empty list if ``vertex`` was never discovered.
        """
        if not self.discovered[vertex]:
            return []
        path = [vertex]
        while self.parent[path[-1]] != NO_VERTEX:
            path.append(self.parent[path[-1]])
        path.reverse()
        return path

    def depth_of(self, vertex: int) -> int:
        """Number of tree edges between ``vertex`` and its traversal root.

        Returns -1 if ``vertex`` was never discovered.
        """
        return len(self.path_to(vertex)) - 1
