"""Graph error types.

Three families of failure exist:

- Input errors: the edge list or a start vertex does not describe a valid
  graph position (``EdgeListError``, ``VertexRangeError``,
  ``UnknownVertexError``).
- Precondition and structural errors: an algorithm was asked to run on a
  graph it cannot handle (``DirectedGraphRequiredError``,
  ``CycleDetectedError``).
- Invariant errors: traversal bookkeeping is inconsistent, which indicates
  a bug rather than bad input (``EdgeClassificationError``).

None of these are transient; callers decide whether to abort.
"""

from __future__ import annotations

from dataclasses import dataclass, field


class GraphError(Exception):
    """Base class for all graphwalk errors."""


@dataclass
class EdgeListError(GraphError):
    """Raised when a flat edge list cannot be read as vertex pairs.

    Attributes:
        reason: What is wrong with the edge list.
        position: Index of the offending element, if any.
    """

    reason: str
    position: int | None = None

    def __post_init__(self) -> None:
        msg = f"Invalid edge list: {self.reason}"
        if self.position is not None:
            msg += f" (at index {self.position})"
        super().__init__(msg)


@dataclass
class VertexRangeError(GraphError):
    """Raised when vertex ids do not form the dense range ``1..N``.

    Attributes:
        vertex_count: Number of distinct ids found in the edge list.
        out_of_range: Ids outside ``1..vertex_count``.
        missing: Ids inside ``1..vertex_count`` that never appear.
    """

    vertex_count: int
    out_of_range: list[int] = field(default_factory=list)
    missing: list[int] = field(default_factory=list)

    def __post_init__(self) -> None:
        msg = f"Vertex ids must be exactly 1..{self.vertex_count}"
        details: list[str] = []
        if self.out_of_range:
            details.append(f"out of range: {_preview(self.out_of_range)}")
        if self.missing:
            details.append(f"missing: {_preview(self.missing)}")
        if details:
            msg += " (" + "; ".join(details) + ")"
        super().__init__(msg)


@dataclass
class UnknownVertexError(GraphError):
    """Raised when a traversal is started from a vertex the graph lacks."""

    vertex: int
    vertex_count: int

    def __post_init__(self) -> None:
        super().__init__(
            f"Vertex {self.vertex!r} is not in the graph (valid ids: 1..{self.vertex_count})"
        )


@dataclass
class DirectedGraphRequiredError(GraphError):
    """Raised when an algorithm that needs a directed graph gets an undirected one.

    Attributes:
        operation: Name of the algorithm that was called.
    """

    operation: str

    def __post_init__(self) -> None:
        super().__init__(f"Cannot run {self.operation} on an undirected graph")


@dataclass
class CycleDetectedError(GraphError):
    """Raised when a back edge makes an ordering undefined.

    Attributes:
        source: Tail of the back edge.
        target: Head of the back edge (an ancestor of ``source``).
    """

    source: int
    target: int

    def __post_init__(self) -> None:
        super().__init__(
            f"Back edge found: {self.source} -> {self.target}. "
            "Cannot topologically sort a graph with cycles."
        )


@dataclass
class EdgeClassificationError(GraphError):
    """Raised when an edge fits none of tree, back, forward or cross.

    This is unreachable for a consistent depth-first run and means the
    traversal state was built or modified incorrectly.

    Attributes:
        source: Tail of the edge.
        target: Head of the edge.
        details: Snapshot of the state fields used for classification.
    """

    source: int
    target: int
    details: dict[str, object] = field(default_factory=dict)

    def __post_init__(self) -> None:
        super().__init__(f"Cannot classify edge: {self.source}, {self.target}")

    def __str__(self) -> str:
        lines = [f"Cannot classify edge: {self.source}, {self.target}"]
        for key, value in sorted(self.details.items()):
            lines.append(f"  - {key}: {value}")
        return "\n".join(lines)


def _preview(values: list[int], limit: int = 10) -> str:
    shown = ", ".join(str(v) for v in values[:limit])
    if len(values) > limit:
        shown += f", ... and {len(values) - limit} more"
    return shown
