"""Ordered depth-first walks over an edge component."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import chain
from typing import Iterator, List, Optional, Set, Tuple

from .components import Component
from .graph import GraphView
from .host import EdgeRef, VertexRef

_DONE = object()


@dataclass(frozen=True)
class PathStep:
    """One edge of a walk, traversed from ``source`` to ``target``.

    ``offset`` is the arc length walked in this component before the edge.
    """

    edge: EdgeRef
    source: VertexRef
    target: VertexRef
    offset: float
    length: float


def _is_extremity(view: GraphView, vertex: VertexRef, edge: EdgeRef, members: Set[EdgeRef]) -> bool:
    return not any(other != edge and other in members for other in view.incident(vertex))


def find_path_start(view: GraphView, component: Component) -> Tuple[EdgeRef, VertexRef]:
    """Pick the first edge (in component order) that has a dangling end.

    Closed components have none, so the walk starts at the start vertex of
    the component's first edge.
    """

    members = component.edge_set
    for edge in component.edges:
        start, end = view.endpoints(edge)
        if _is_extremity(view, start, edge, members):
            return edge, start
        if _is_extremity(view, end, edge, members):
            return edge, end
    first = component.edges[0]
    return first, view.start(first)


def _ordered_edges(view: GraphView, vertex: VertexRef, members: Set[EdgeRef]) -> List[EdgeRef]:
    return sorted((edge for edge in view.incident(vertex) if edge in members), key=view.sort_key)


def walk_component(
    view: GraphView,
    component: Component,
    start: Optional[Tuple[EdgeRef, VertexRef]] = None,
) -> Iterator[PathStep]:
    """Yield every edge of ``component`` once, depth first from ``start``.

    At each vertex the unvisited edges are taken in selection order.  After
    the start edge's subtree is exhausted the walk resumes with the other
    edges at the start vertex, so a closed component whose start vertex has
    more than two edges is still covered.
    """

    if not component.edges:
        return
    start_edge, start_vertex = start or find_path_start(view, component)
    members = component.edge_set
    remaining = set(members)
    offset = 0.0

    first = chain((start_edge,), _ordered_edges(view, start_vertex, members))
    stack: List[Tuple[VertexRef, Iterator[EdgeRef]]] = [(start_vertex, first)]
    while stack:
        vertex, candidates = stack[-1]
        edge = next(candidates, _DONE)
        if edge is _DONE:
            stack.pop()
            continue
        if edge not in remaining:
            continue
        remaining.discard(edge)
        target = view.other_vertex(edge, vertex)
        length = view.length(edge)
        yield PathStep(edge, vertex, target, offset, length)
        offset += length
        stack.append((target, iter(_ordered_edges(view, target, members))))


__all__ = ["PathStep", "find_path_start", "walk_component"]
