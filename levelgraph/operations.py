"""Distribute and extrude operations over a :class:`~levelgraph.host.MapHost`."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional

from .components import decompose_edges, decompose_selection, take_radial_origin, with_incident_edges
from .endpoints import select_endpoints
from .errors import NoSelectionError
from .extrusion import ExtrusionPlan, build_extrusion_model, extruded_positions
from .graph import GraphView
from .host import MapHost, VertexRef
from .options import (
    DistributeOptions,
    ExtrudeOptions,
    get_default_distribute_options,
    get_default_extrude_options,
    validate_distribute_options,
    validate_extrude_options,
)
from .placement import Placement, plan_placements
from .topology import apply_copy, apply_move

logger = logging.getLogger(__name__)


@dataclass
class DistributeResult:
    component_count: int
    placements: List[Placement] = field(default_factory=list)
    markers: List[Any] = field(default_factory=list)

    @property
    def message(self) -> str:
        return f"Distributed along {self.component_count} component(s)."


@dataclass
class ExtrudeResult:
    plans: List[ExtrusionPlan] = field(default_factory=list)
    radial_origin: Optional[VertexRef] = None

    @property
    def section_count(self) -> int:
        return len(self.plans)

    @property
    def message(self) -> str:
        return f"Extruded {self.section_count} section(s)."


def distribute(host: MapHost, options: Optional[DistributeOptions] = None) -> DistributeResult:
    """Place ``options.count`` markers evenly along the selected edges."""

    options = options or get_default_distribute_options()
    validate_distribute_options(options)

    view = GraphView.from_edge_selection(host)
    if not view.edges:
        raise NoSelectionError("No linedefs selected.")

    components = decompose_edges(view)
    logger.info(
        "Distributing %d markers of type %d along %d edges in %d components",
        options.count,
        options.thing_type,
        len(view.edges),
        len(components),
    )
    placements = plan_placements(view, components, options.count)
    markers = [host.create_marker(p.position, options.thing_type) for p in placements]

    result = DistributeResult(len(components), placements, markers)
    logger.info("%s", result.message)
    return result


def plan_extrusions(host: MapHost, options: ExtrudeOptions) -> ExtrudeResult:
    """Compute every component's extrusion without touching the map."""

    view = GraphView.from_selection(host)
    if view.empty:
        raise NoSelectionError("No vertices or linedefs selected.")

    components = decompose_selection(view)
    origin: Optional[VertexRef] = None
    if options.radial_vertex_select:
        origin, components = take_radial_origin(components)
        if origin is not None:
            logger.info("Using vertex %r as radial origin", origin)
    origin_position = view.position(origin) if origin is not None else None

    plans: List[ExtrusionPlan] = []
    for component in components:
        if component.is_single_vertex:
            component = with_incident_edges(view, component)
        endpoints = select_endpoints(view, component)
        model = build_extrusion_model(view, component, endpoints, options, origin_position)
        positions = extruded_positions(view, component, model)
        plans.append(ExtrusionPlan(component, endpoints, model, positions))
        logger.debug(
            "Component %d: %d vertices, %d edges, mode=%s",
            len(plans) - 1,
            len(component.vertices),
            len(component.edges),
            model.mode,
        )

    return ExtrudeResult(plans, origin)


def extrude(host: MapHost, options: Optional[ExtrudeOptions] = None) -> ExtrudeResult:
    """Extrude the selected vertices or edges.

    All components are planned first, so a component whose direction cannot
    be determined aborts the call before anything is mutated.
    """

    options = options or get_default_extrude_options()
    validate_extrude_options(options)

    result = plan_extrusions(host, options)
    vertex_mode = bool(host.selected_vertices())
    logger.info(
        "Extruding %d component(s) distance=%s copy=%s angle=%s arc_angle=%s",
        result.section_count,
        options.distance,
        options.copy,
        options.angle,
        options.arc_angle,
    )
    for plan in result.plans:
        if options.copy:
            apply_copy(host, plan)
        else:
            apply_move(host, plan, reselect=vertex_mode)

    logger.info("%s", result.message)
    return result


__all__ = [
    "DistributeResult",
    "ExtrudeResult",
    "distribute",
    "extrude",
    "plan_extrusions",
]
