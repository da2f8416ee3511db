"""Connected-component decomposition of a selection.

Both decompositions walk depth-first with an explicit stack of
``(item, iterator)`` frames, which visits items in exactly the order a
recursive walk over the host's incident-edge lists would.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from itertools import chain
from typing import Dict, Iterator, List, Optional, Set, Tuple

from .graph import GraphView
from .host import EdgeRef, VertexRef

logger = logging.getLogger(__name__)

_DONE = object()


@dataclass
class Component:
    """Maximal connected piece of a selection, in discovery order."""

    vertices: List[VertexRef] = field(default_factory=list)
    edges: List[EdgeRef] = field(default_factory=list)
    _vertex_set: Set[VertexRef] = field(default_factory=set, repr=False)
    _edge_set: Set[EdgeRef] = field(default_factory=set, repr=False)

    def add_vertex(self, vertex: VertexRef) -> None:
        if vertex not in self._vertex_set:
            self._vertex_set.add(vertex)
            self.vertices.append(vertex)

    def add_edge(self, edge: EdgeRef) -> None:
        if edge not in self._edge_set:
            self._edge_set.add(edge)
            self.edges.append(edge)

    def has_vertex(self, vertex: VertexRef) -> bool:
        return vertex in self._vertex_set

    def has_edge(self, edge: EdgeRef) -> bool:
        return edge in self._edge_set

    @property
    def edge_set(self) -> Set[EdgeRef]:
        return self._edge_set

    @property
    def is_isolated_point(self) -> bool:
        return len(self.vertices) == 1 and not self.edges

    @property
    def is_single_vertex(self) -> bool:
        return len(self.vertices) == 1


def decompose_edges(view: GraphView) -> List[Component]:
    """Split the selected edges into components, seeded in selection order."""

    remaining: Dict[EdgeRef, None] = dict.fromkeys(view.edges)
    components: List[Component] = []

    for seed in view.edges:
        if seed not in remaining:
            continue
        component = Component()
        stack: List[Iterator[EdgeRef]] = [iter((seed,))]
        while stack:
            edge = next(stack[-1], _DONE)
            if edge is _DONE:
                stack.pop()
                continue
            if edge not in remaining:
                continue
            del remaining[edge]
            start, end = view.endpoints(edge)
            component.add_edge(edge)
            component.add_vertex(start)
            component.add_vertex(end)
            stack.append(chain(view.incident(start), view.incident(end)))
        if component.edges:
            components.append(component)

    logger.debug("Decomposed %d selected edges into %d components", len(view.edges), len(components))
    return components


def decompose_selection(view: GraphView) -> List[Component]:
    """Split selected vertices (or the vertices of selected edges) into components.

    In vertex mode any host edge joining two selected vertices belongs to the
    component; in edge mode only selected edges do.  A vertex with no such
    edge forms an isolated-point component.
    """

    pool: Dict[VertexRef, None] = dict.fromkeys(view.touched_vertices())
    allowed: Optional[Dict[EdgeRef, int]] = None if view.vertex_mode else view.selection_index
    components: List[Component] = []

    while pool:
        seed = next(iter(pool))
        del pool[seed]
        component = Component()
        component.add_vertex(seed)
        stack: List[Tuple[VertexRef, Iterator[EdgeRef]]] = [(seed, iter(view.incident(seed)))]
        while stack:
            vertex, edges = stack[-1]
            edge = next(edges, _DONE)
            if edge is _DONE:
                stack.pop()
                continue
            if allowed is not None and edge not in allowed:
                continue
            other = view.other_vertex(edge, vertex)
            if other not in pool and not component.has_vertex(other):
                continue
            component.add_edge(edge)
            if other in pool:
                del pool[other]
                component.add_vertex(other)
                stack.append((other, iter(view.incident(other))))
        components.append(component)

    logger.debug(
        "Decomposed selection (vertex_mode=%s) into %d components", view.vertex_mode, len(components)
    )
    return components


def take_radial_origin(
    components: List[Component],
) -> Tuple[Optional[VertexRef], List[Component]]:
    """Pop the first isolated-point component and return its vertex."""

    for idx, component in enumerate(components):
        if component.is_isolated_point:
            rest = components[:idx] + components[idx + 1 :]
            return component.vertices[0], rest
    return None, list(components)


def with_incident_edges(view: GraphView, component: Component) -> Component:
    """Return a copy of a single-vertex component that owns all its host edges."""

    expanded = Component()
    for vertex in component.vertices:
        expanded.add_vertex(vertex)
    for vertex in component.vertices:
        for edge in view.incident(vertex):
            expanded.add_edge(edge)
    return expanded


__all__ = [
    "Component",
    "decompose_edges",
    "decompose_selection",
    "take_radial_origin",
    "with_incident_edges",
]
