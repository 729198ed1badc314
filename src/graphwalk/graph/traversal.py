"""Breadth-first and depth-first traversal engine.

Both drivers report three kinds of event to a visitor:

- ``on_vertex_enter(v, state)`` when a vertex is first handled
- ``on_vertex_exit(v, state)`` after all of its edges were examined
- ``on_edge(x, y, state)`` for each edge the driver decides to report

Algorithms implement these hooks on a ``Visitor`` subclass holding their own
accumulators. Plain callables can be passed instead and are wrapped in a
``CallbackVisitor``.

The engine holds no state of its own; everything a run mutates lives in the
``TraversalState`` passed in (or created for the call) and in the visitor.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable
from typing import TYPE_CHECKING, Protocol

from graphwalk.graph.state import TraversalState
from graphwalk.observability.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Iterator

    from graphwalk.config import DFSStrategy
    from graphwalk.graph.graph import Graph

log = get_logger(__name__)

VertexHook = Callable[[int, TraversalState], None]
EdgeHook = Callable[[int, int, TraversalState], None]


class TraversalVisitor(Protocol):
    """Receives traversal events."""

    def on_vertex_enter(self, vertex: int, state: TraversalState) -> None: ...

    def on_vertex_exit(self, vertex: int, state: TraversalState) -> None: ...

    def on_edge(self, source: int, target: int, state: TraversalState) -> None: ...


class Visitor:
    """Visitor with no-op hooks.

    Subclasses override the hooks they need.
    """

    def on_vertex_enter(self, vertex: int, state: TraversalState) -> None:
        """Called when ``vertex`` is dequeued (BFS) or entered (DFS)."""

    def on_vertex_exit(self, vertex: int, state: TraversalState) -> None:
        """Called after every edge of ``vertex`` was examined."""

    def on_edge(self, source: int, target: int, state: TraversalState) -> None:
        """Called for each reported edge ``source -> target``."""


class CallbackVisitor(Visitor):
    """Visitor that forwards events to plain callables.

    Hooks left as ``None`` do nothing.
    """

    def __init__(
        self,
        on_vertex_enter: VertexHook | None = None,
        on_vertex_exit: VertexHook | None = None,
        on_edge: EdgeHook | None = None,
    ) -> None:
        self._enter = on_vertex_enter
        self._exit = on_vertex_exit
        self._edge = on_edge

    def on_vertex_enter(self, vertex: int, state: TraversalState) -> None:
        if self._enter is not None:
            self._enter(vertex, state)

    def on_vertex_exit(self, vertex: int, state: TraversalState) -> None:
        if self._exit is not None:
            self._exit(vertex, state)

    def on_edge(self, source: int, target: int, state: TraversalState) -> None:
        if self._edge is not None:
            self._edge(source, target, state)


class _TracingVisitor(Visitor):
    """Logs every event before handing it to the wrapped visitor."""

    def __init__(self, inner: TraversalVisitor, mode: str) -> None:
        self._inner = inner
        self._mode = mode

    def on_vertex_enter(self, vertex: int, state: TraversalState) -> None:
        log.debug("traversal_vertex_enter", mode=self._mode, vertex=vertex, time=state.time)
        self._inner.on_vertex_enter(vertex, state)

    def on_vertex_exit(self, vertex: int, state: TraversalState) -> None:
        log.debug("traversal_vertex_exit", mode=self._mode, vertex=vertex, time=state.time)
        self._inner.on_vertex_exit(vertex, state)

    def on_edge(self, source: int, target: int, state: TraversalState) -> None:
        log.debug("traversal_edge", mode=self._mode, source=source, target=target)
        self._inner.on_edge(source, target, state)


def _prepare(
    graph: Graph,
    start: int,
    visitor: TraversalVisitor | None,
    state: TraversalState | None,
    callbacks: dict[str, Callable[..., None] | None],
    mode: str,
) -> tuple[TraversalVisitor, TraversalState]:
    """Validate arguments and resolve the visitor and state for one run."""
    graph.require_vertex(start)

    given = {name: hook for name, hook in callbacks.items() if hook is not None}
    if visitor is None:
        visitor = CallbackVisitor(**given)
    elif given:
        msg = f"Pass either a visitor or callbacks, not both (got {', '.join(sorted(given))})"
        raise TypeError(msg)

    if state is None:
        state = TraversalState.for_graph(graph)
    elif state.vertex_count != graph.vertex_count:
        msg = (
            f"TraversalState sized for {state.vertex_count} vertices "
            f"used with a graph of {graph.vertex_count}"
        )
        raise ValueError(msg)

    if graph.settings.trace_events:
        visitor = _TracingVisitor(visitor, mode)
    return visitor, state


def breadth_first(
    graph: Graph,
    start: int,
    visitor: TraversalVisitor | None = None,
    *,
    state: TraversalState | None = None,
    on_vertex_enter: VertexHook | None = None,
    on_vertex_exit: VertexHook | None = None,
    on_edge: EdgeHook | None = None,
) -> TraversalState:
    """Visit every vertex reachable from ``start`` in level order.

    A dequeued vertex is entered, marked processed, has each neighbor's edge
    reported (undirected graphs skip edges to already processed neighbors),
    and is exited. Undiscovered neighbors are discovered, given the current
    vertex as parent, and queued. Parent links form a fewest-edges tree.

    Args:
        graph: Graph to traverse.
        start: Root vertex.
        visitor: Receives events. Mutually exclusive with the callbacks.
        state: State to continue from; a fresh one is created if omitted.
        on_vertex_enter: Callback alternative to ``visitor``.
        on_vertex_exit: Callback alternative to ``visitor``.
        on_edge: Callback alternative to ``visitor``.

    Returns:
        The populated traversal state.

    Raises:
        UnknownVertexError: If ``start`` is not in the graph.
    """
    visitor, state = _prepare(
        graph,
        start,
        visitor,
        state,
        {
            "on_vertex_enter": on_vertex_enter,
            "on_vertex_exit": on_vertex_exit,
            "on_edge": on_edge,
        },
        "bfs",
    )
    directed = graph.directed
    adjacency = graph.adjacency

    state.discovered[start] = True
    queue = deque([start])

    while queue:
        v = queue.popleft()
        visitor.on_vertex_enter(v, state)
        state.processed[v] = True

        for y in adjacency[v]:
            if directed or not state.processed[y]:
                visitor.on_edge(v, y, state)
            if not state.discovered[y]:
                state.discovered[y] = True
                state.parent[y] = v
                queue.append(y)

        visitor.on_vertex_exit(v, state)

    return state


def depth_first(
    graph: Graph,
    start: int,
    visitor: TraversalVisitor | None = None,
    *,
    state: TraversalState | None = None,
    strategy: DFSStrategy | None = None,
    on_vertex_enter: VertexHook | None = None,
    on_vertex_exit: VertexHook | None = None,
    on_edge: EdgeHook | None = None,
) -> TraversalState:
    """Visit every vertex reachable from ``start`` in depth-first order.

    Entering a vertex marks it discovered, calls ``on_vertex_enter`` and then
    stamps its entry time. Each neighbor is examined in adjacency order: an
    undiscovered neighbor gets a parent link, its tree edge is reported and
    the search descends into it. Any other edge is reported only for directed
    graphs, or, for undirected graphs, when it leads to an unfinished vertex
    other than the parent (a back edge to a non-parent ancestor). Leaving a
    vertex marks it processed, calls ``on_vertex_exit`` and then stamps its
    exit time.

    Args:
        graph: Graph to traverse.
        start: Root vertex.
        visitor: Receives events. Mutually exclusive with the callbacks.
        state: State to continue from; a fresh one is created if omitted.
        strategy: ``"iterative"`` or ``"recursive"``; defaults to
            ``graph.settings.dfs_strategy``. Both yield identical events
            and timestamps.
        on_vertex_enter: Callback alternative to ``visitor``.
        on_vertex_exit: Callback alternative to ``visitor``.
        on_edge: Callback alternative to ``visitor``.

    Returns:
        The populated traversal state.

    Raises:
        UnknownVertexError: If ``start`` is not in the graph.
        ValueError: If ``strategy`` is not recognised.
    """
    visitor, state = _prepare(
        graph,
        start,
        visitor,
        state,
        {
            "on_vertex_enter": on_vertex_enter,
            "on_vertex_exit": on_vertex_exit,
            "on_edge": on_edge,
        },
        "dfs",
    )
    strategy = strategy or graph.settings.dfs_strategy
    if strategy == "iterative":
        _depth_first_iterative(graph, start, visitor, state)
    elif strategy == "recursive":
        _depth_first_recursive(graph, start, visitor, state)
    else:
        msg = f"Unknown depth-first strategy: {strategy!r}"
        raise ValueError(msg)
    return state


def _enter(vertex: int, visitor: TraversalVisitor, state: TraversalState) -> None:
    state.discovered[vertex] = True
    visitor.on_vertex_enter(vertex, state)
    state.time += 1
    state.entry_time[vertex] = state.time


def _exit(vertex: int, visitor: TraversalVisitor, state: TraversalState) -> None:
    state.processed[vertex] = True
    visitor.on_vertex_exit(vertex, state)
    state.time += 1
    state.exit_time[vertex] = state.time


def _reports_visited_edge(directed: bool, v: int, y: int, state: TraversalState) -> bool:
    # Undirected: y is an ancestor or a finished descendant. Only an unfinished
    # non-parent ancestor (a back edge) is worth reporting.
    return directed or (not state.processed[y] and state.parent[v] != y)


def _depth_first_recursive(
    graph: Graph,
    v: int,
    visitor: TraversalVisitor,
    state: TraversalState,
) -> None:
    _enter(v, visitor, state)

    for y in graph.adjacency[v]:
        if not state.discovered[y]:
            state.parent[y] = v
            visitor.on_edge(v, y, state)
            _depth_first_recursive(graph, y, visitor, state)
        elif _reports_visited_edge(graph.directed, v, y, state):
            visitor.on_edge(v, y, state)

    _exit(v, visitor, state)


def _depth_first_iterative(
    graph: Graph,
    start: int,
    visitor: TraversalVisitor,
    state: TraversalState,
) -> None:
    # Each frame keeps its own neighbor iterator so a vertex resumes scanning
    # exactly where it left off when its child finishes.
    adjacency = graph.adjacency
    _enter(start, visitor, state)
    stack: list[tuple[int, Iterator[int]]] = [(start, iter(adjacency[start]))]

    while stack:
        v, neighbors = stack[-1]
        for y in neighbors:
            if not state.discovered[y]:
                state.parent[y] = v
                visitor.on_edge(v, y, state)
                _enter(y, visitor, state)
                stack.append((y, iter(adjacency[y])))
                break
            if _reports_visited_edge(graph.directed, v, y, state):
                visitor.on_edge(v, y, state)
        else:
            stack.pop()
            _exit(v, visitor, state)
