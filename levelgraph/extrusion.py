"""Extrusion geometry: offset direction or radial centre, and extruded positions.

Three mutually exclusive models, chosen in this order:

* ``radial`` - an explicit origin vertex is the centre; positive distance
  moves every vertex away from it.
* ``arc`` - the centre of the circle through the two endpoints whose chord
  subtends ``arc_angle``.  Positive angles put the centre behind the edges
  (left of the start->end direction), negative angles in front.
* ``linear`` - the right-hand normal of the endpoint chord, rotated by
  ``angle``.

Positive distance moves a component to the right-hand side of its edges in
the linear and arc models.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, Literal, Optional, Sequence, Tuple

import numpy as np

from .components import Component
from .endpoints import EndpointPair
from .errors import DegenerateGeometryError
from .geometry import (
    EPS,
    Point,
    Vector,
    as_point,
    distance,
    midpoint,
    reversed_vec,
    right_normal,
    rotated,
    scale,
    sub,
    winding_sum,
)
from .graph import GraphView
from .host import VertexRef
from .logging_utils import apply_debug_logging
from .options import ExtrudeOptions

logger = logging.getLogger(__name__)

ExtrusionMode = Literal["linear", "arc", "radial"]
Winding = Literal["cw", "ccw", "flat"]

# relative slack on r^2 - h^2/4 before the arc construction is rejected
_ARC_TOL = 1e-9


@dataclass
class ExtrusionModel:
    mode: ExtrusionMode
    distance: float
    angle: float = 0.0
    direction: Optional[Vector] = None
    center: Optional[Point] = None
    radius: Optional[float] = None
    winding: Optional[Winding] = None

    def extrude_many(self, points: np.ndarray) -> np.ndarray:
        """Extruded positions for an ``(n, 2)`` array of points."""

        pts = np.asarray(points, dtype=float).reshape(-1, 2)
        if self.center is None:
            return pts + self.distance * np.asarray(self.direction, dtype=float)

        center = np.asarray(self.center, dtype=float)
        to_center = center - pts
        lengths = np.linalg.norm(to_center, axis=1)
        if np.any(lengths <= EPS):
            raise DegenerateGeometryError("Cannot extrude a vertex lying on the radial centre.")
        unit = to_center / lengths[:, None]
        if not self.angle:
            return pts + self.distance * unit
        theta = math.radians(self.angle)
        rotation = np.array(
            [[math.cos(theta), -math.sin(theta)], [math.sin(theta), math.cos(theta)]], dtype=float
        )
        outward = (-unit) @ rotation.T
        return center + (lengths - self.distance)[:, None] * outward

    def extrude(self, point: Sequence[float]) -> Point:
        x, y = self.extrude_many(np.asarray([as_point(point)]))[0]
        return (float(x), float(y))


@dataclass
class ExtrusionPlan:
    """Everything needed to mutate one component, computed before any mutation."""

    component: Component
    endpoints: EndpointPair
    model: ExtrusionModel
    positions: Dict[VertexRef, Point]


def arc_center(
    a: Sequence[float], b: Sequence[float], arc_angle: float
) -> Optional[Tuple[Point, float, float]]:
    """Centre of the arc from ``a`` to ``b`` sweeping ``arc_angle`` degrees.

    Returns ``(center, radius, sign)`` where ``sign`` is the factor applied to
    the user distance, or ``None`` when the construction is degenerate.  A
    sweep that is a multiple of 360 is treated as a half circle.
    """

    direction = right_normal(a, b)
    if direction is None:
        return None
    sweep = abs(arc_angle) % 360.0
    if not sweep:
        sweep = 180.0
    if arc_angle < 0:
        direction = reversed_vec(direction)
        sign = 1.0
    else:
        sign = -1.0
    if sweep > 180.0:
        # chord faces away from the edges: centre goes to the other side
        sweep -= 360.0
        direction = reversed_vec(direction)

    chord = distance(a, b)
    denom = math.sqrt(max(2.0 - 2.0 * math.cos(math.radians(sweep)), 0.0))
    if denom <= EPS:
        return None
    radius = chord / denom
    offset_sq = radius * radius - chord * chord / 4.0
    if offset_sq < 0.0:
        if offset_sq < -_ARC_TOL * radius * radius:
            return None
        offset_sq = 0.0
    offset = math.sqrt(offset_sq)
    center = sub(midpoint(a, b), scale(direction, offset))
    return center, radius, sign


def _winding(view: GraphView, component: Component, center: Point) -> Winding:
    segments = []
    for edge in component.edges:
        start, end = view.endpoints(edge)
        segments.append((view.position(start), view.position(end)))
    total = winding_sum(center, segments)
    if total > EPS:
        return "cw"
    if total < -EPS:
        return "ccw"
    return "flat"


def build_extrusion_model(
    view: GraphView,
    component: Component,
    endpoints: EndpointPair,
    options: ExtrudeOptions,
    radial_origin: Optional[Sequence[float]] = None,
) -> ExtrusionModel:
    a = view.position(endpoints.first)
    b = view.position(endpoints.second)
    dist = float(options.distance)
    angle = float(options.angle)

    if radial_origin is not None:
        center = as_point(radial_origin)
        winding = _winding(view, component, center)
        logger.debug("Radial extrusion about %s, component winding %s", center, winding)
        # outward for positive distance, whichever way the edges run
        return ExtrusionModel("radial", -dist, angle, center=center, winding=winding)

    if options.arc_angle:
        arc = arc_center(a, b, float(options.arc_angle))
        if arc is None:
            raise DegenerateGeometryError("Cannot construct an arc through the extrude endpoints.")
        center, radius, sign = arc
        logger.debug("Arc extrusion centre %s radius %.6g", center, radius)
        return ExtrusionModel("arc", sign * dist, angle, center=center, radius=radius)

    direction = right_normal(a, b)
    if direction is None:
        raise DegenerateGeometryError("Extrude endpoints coincide.")
    if angle:
        direction = rotated(direction, angle)
    return ExtrusionModel("linear", dist, angle, direction=direction)


def extruded_positions(
    view: GraphView, component: Component, model: ExtrusionModel
) -> Dict[VertexRef, Point]:
    if not component.vertices:
        return {}
    originals = np.asarray([view.position(v) for v in component.vertices], dtype=float)
    moved = model.extrude_many(originals)
    return {
        vertex: (float(x), float(y)) for vertex, (x, y) in zip(component.vertices, moved)
    }


apply_debug_logging(globals(), logger=logger)


__all__ = [
    "ExtrusionMode",
    "ExtrusionModel",
    "ExtrusionPlan",
    "arc_center",
    "build_extrusion_model",
    "extruded_positions",
]
