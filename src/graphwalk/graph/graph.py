"""Adjacency-list graph over dense integer vertex ids.

Vertices are the integers ``1..vertex_count``; ``0`` is reserved as the
"no vertex" sentinel used for parent links. A graph is built once from a flat
edge list and never changes afterwards.

Neighbors are prepended as edges are inserted, so every adjacency sequence is
the reverse of insertion order. Traversal order depends on this.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING

from graphwalk.config import TraversalSettings
from graphwalk.graph.errors import EdgeListError, UnknownVertexError, VertexRangeError
from graphwalk.observability.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

log = get_logger(__name__)

# Vertex id meaning "none" (no parent, no vertex).
NO_VERTEX = 0


class Graph:
    """Immutable directed or undirected graph.

    Attributes:
        directed: Whether edges are one-way.
        vertex_count: Number of vertices (ids ``1..vertex_count``).
        edge_count: Number of edges; an undirected pair counts once.
        settings: Traversal settings used by algorithms over this graph.
    """

    def __init__(
        self,
        directed: bool,
        edge_pairs: Sequence[int],
        *,
        settings: TraversalSettings | None = None,
    ) -> None:
        """Build a graph from a flat edge list.

        Args:
            directed: If False, every pair is inserted in both directions.
            edge_pairs: Flat sequence ``x1, y1, x2, y2, ...``; each pair is an
                edge ``x -> y``. The vertex set is every distinct id in the
                sequence and must be exactly ``1..N``.
            settings: Traversal settings; defaults to ``TraversalSettings()``.

        Raises:
            EdgeListError: If the sequence has odd length or non-integer ids.
            VertexRangeError: If the ids are not the dense range ``1..N``.
        """
        pairs = list(edge_pairs)
        if len(pairs) % 2:
            raise EdgeListError("expected an even number of vertex ids", position=len(pairs) - 1)
        for index, value in enumerate(pairs):
            # bool is an int subclass but never a valid id
            if not isinstance(value, int) or isinstance(value, bool):
                raise EdgeListError(f"vertex ids must be integers, got {value!r}", position=index)

        ids = set(pairs)
        vertex_count = len(ids)
        out_of_range = sorted(v for v in ids if v < 1 or v > vertex_count)
        if out_of_range:
            missing = sorted(set(range(1, vertex_count + 1)) - ids)
            log.warning(
                "graph_vertex_range_invalid",
                vertex_count=vertex_count,
                out_of_range=out_of_range[:10],
            )
            raise VertexRangeError(vertex_count, out_of_range=out_of_range, missing=missing)

        self.directed = directed
        self.vertex_count = vertex_count
        self.edge_count = 0
        self.settings = settings or TraversalSettings()

        building: list[deque[int]] = [deque() for _ in range(vertex_count + 1)]
        for x, y in zip(pairs[::2], pairs[1::2], strict=True):
            self._insert_edge(building, x, y)

        self._adjacency: tuple[tuple[int, ...], ...] = tuple(tuple(d) for d in building)

        log.debug(
            "graph_built",
            directed=directed,
            vertices=self.vertex_count,
            edges=self.edge_count,
        )

    def _insert_edge(self, building: list[deque[int]], x: int, y: int) -> None:
        building[x].appendleft(y)
        if not self.directed:
            building[y].appendleft(x)
        self.edge_count += 1

    @classmethod
    def from_edges(
        cls,
        directed: bool,
        edges: Iterable[tuple[int, int]],
        *,
        settings: TraversalSettings | None = None,
    ) -> Graph:
        """Build a graph from ``(x, y)`` tuples instead of a flat list."""
        flat: list[int] = []
        for x, y in edges:
            flat.extend((x, y))
        return cls(directed, flat, settings=settings)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def vertices(self) -> range:
        """Return the vertex ids in ascending order."""
        return range(1, self.vertex_count + 1)

    def has_vertex(self, vertex: int) -> bool:
        """Check whether ``vertex`` is a valid id for this graph."""
        return 1 <= vertex <= self.vertex_count

    @property
    def adjacency(self) -> tuple[tuple[int, ...], ...]:
        """Neighbor tuples indexed by vertex id; slot 0 is empty.

        Unchecked counterpart of ``neighbors`` for traversal loops that only
        follow ids already taken from the graph.
        """
        return self._adjacency

    def neighbors(self, vertex: int) -> tuple[int, ...]:
        """Return the neighbors of ``vertex`` in traversal order.

        Raises:
            UnknownVertexError: If the vertex is not in the graph.
        """
        self.require_vertex(vertex)
        return self._adjacency[vertex]

    def require_vertex(self, vertex: int) -> None:
        """Raise ``UnknownVertexError`` unless ``vertex`` is in the graph."""
        if isinstance(vertex, bool) or not isinstance(vertex, int) or not self.has_vertex(vertex):
            raise UnknownVertexError(vertex, self.vertex_count)

    def __len__(self) -> int:
        return self.vertex_count

    def __repr__(self) -> str:
        kind = "directed" if self.directed else "undirected"
        return f"Graph({kind}, vertices={self.vertex_count}, edges={self.edge_count})"
