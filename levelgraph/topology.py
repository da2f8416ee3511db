"""Apply planned extrusions to the host map through its mutation primitives."""

from __future__ import annotations

import logging
from typing import List

from .extrusion import ExtrusionPlan
from .geometry import Segment
from .host import MapHost

logger = logging.getLogger(__name__)


def apply_move(host: MapHost, plan: ExtrusionPlan, *, reselect: bool = False) -> None:
    """Move the component; endpoint vertices stay and their edges are split.

    Split-off edges join the component so a second endpoint on the same edge
    splits the new half.  With ``reselect`` the inserted vertices replace the
    endpoints in the vertex selection.
    """

    component = plan.component
    for vertex in list(component.vertices):
        target = plan.positions[vertex]
        if vertex in plan.endpoints:
            touching = [edge for edge in host.incident_edges(vertex) if component.has_edge(edge)]
            if touching:
                for edge in touching:
                    new_edge = host.split_edge(edge, target)
                    component.add_edge(new_edge)
                    if reselect:
                        host.set_vertex_selected(vertex, False)
                        host.set_vertex_selected(host.edge_endpoints(new_edge)[0], True)
                continue
        host.set_vertex_position(vertex, target)
    host.stitch()


def apply_copy(host: MapHost, plan: ExtrusionPlan) -> int:
    """Draw the extruded duplicate and the edges joining it to the original.

    Returns the number of edges drawn.
    """

    component = plan.component
    first, second = plan.endpoints.as_tuple()
    positions = plan.positions
    segments: List[Segment] = []

    for vertex in component.vertices:
        if vertex == first:
            segments.append((host.vertex_position(vertex), positions[vertex]))
        if vertex == second:
            segments.append((positions[vertex], host.vertex_position(vertex)))

    for edge in component.edges:
        start, end = host.edge_endpoints(edge)
        if start != end and start in positions and end in positions:
            segments.append((positions[start], positions[end]))

    if plan.endpoints.synthesized:
        # neighbours of a lone vertex are not part of the component
        centre = positions[component.vertices[0]]
        segments.append((host.vertex_position(first), centre))
        segments.append((centre, host.vertex_position(second)))

    for start, end in segments:
        host.draw_edge(start, end)
        host.stitch()

    logger.debug("Copy extrusion drew %d edges", len(segments))
    return len(segments)


__all__ = ["apply_copy", "apply_move"]
