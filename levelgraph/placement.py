"""Even arc-length placement of markers along edge components."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Sequence

import numpy as np

from .components import Component
from .errors import DegenerateGeometryError, InvalidCountError
from .geometry import Point, lerp
from .graph import GraphView
from .host import EdgeRef
from .paths import walk_component

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Placement:
    position: Point
    edge: EdgeRef
    t: float
    distance: float
    component: int


def total_length(view: GraphView, components: Sequence[Component]) -> float:
    return sum(view.length(edge) for component in components for edge in component.edges)


def distance_plan(total: float, count: int) -> List[float]:
    """Return the midpoints of ``count`` equal buckets covering ``(0, total)``."""

    if count <= 0:
        raise InvalidCountError("No things to distribute.")
    if total <= 0.0:
        raise DegenerateGeometryError("Selected linedefs have zero total length.")
    step = total / count
    return ((np.arange(count, dtype=float) + 0.5) * step).tolist()


def plan_placements(view: GraphView, components: Sequence[Component], count: int) -> List[Placement]:
    """Map each planned distance onto an edge of the concatenated walks.

    Distances are consumed in increasing order across all components in
    component order; the running length carries over between components.
    """

    plan = distance_plan(total_length(view, components), count)
    placements: List[Placement] = []
    index = 0
    running = 0.0

    for component_index, component in enumerate(components):
        for step in walk_component(view, component):
            end = running + step.length
            if step.length > 0.0:
                source = view.position(step.source)
                target = view.position(step.target)
                while index < len(plan) and plan[index] <= end:
                    t = (plan[index] - running) / step.length
                    placements.append(
                        Placement(lerp(source, target, t), step.edge, t, plan[index], component_index)
                    )
                    index += 1
            running = end

    logger.debug("Planned %d of %d placements over length %.6g", len(placements), len(plan), running)
    return placements


__all__ = ["Placement", "distance_plan", "plan_placements", "total_length"]
