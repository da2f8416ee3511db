"""Choice of the two extremity vertices that orient an extrusion.

Candidates are gathered by an ordered list of strategies; each strategy sees
the candidates found so far and returns the new list.  The first point at
which two or more candidates exist ends the search.  Surplus candidates are
reduced to the farthest-apart pair, and the pair is then oriented so the
first vertex starts one of its component edges.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np
from scipy.spatial.distance import cdist

from .components import Component
from .errors import AmbiguousDirectionError
from .graph import GraphView
from .host import VertexRef
from .logging_utils import apply_debug_logging

logger = logging.getLogger(__name__)

CandidateStrategy = Callable[[GraphView, Component, List[VertexRef]], List[VertexRef]]


@dataclass(frozen=True)
class EndpointPair:
    first: VertexRef
    second: VertexRef
    tier: str
    synthesized: bool = False

    def __contains__(self, vertex: object) -> bool:
        return vertex == self.first or vertex == self.second

    def as_tuple(self) -> Tuple[VertexRef, VertexRef]:
        return (self.first, self.second)


def _component_degree(view: GraphView, component: Component, vertex: VertexRef) -> int:
    return len(view.incident_within(vertex, component.edge_set))


def _path_extremities(view: GraphView, component: Component, found: List[VertexRef]) -> List[VertexRef]:
    return found + [v for v in component.vertices if _component_degree(view, component, v) <= 1]


def _selection_boundary(view: GraphView, component: Component, found: List[VertexRef]) -> List[VertexRef]:
    extra = []
    for vertex in component.vertices:
        inside = _component_degree(view, component, vertex)
        if 1 < inside < len(view.incident(vertex)):
            extra.append(vertex)
    return found + extra


def _every_vertex(view: GraphView, component: Component, found: List[VertexRef]) -> List[VertexRef]:
    return list(component.vertices)


ENDPOINT_STRATEGIES: Sequence[Tuple[str, CandidateStrategy]] = (
    ("extremities", _path_extremities),
    ("boundary", _selection_boundary),
    ("all", _every_vertex),
)


def _neighbour_candidates(view: GraphView, vertex: VertexRef) -> List[VertexRef]:
    candidates = [view.other_vertex(edge, vertex) for edge in view.incident(vertex)]
    if len(candidates) < 2:
        candidates.append(vertex)
    return candidates


def farthest_pair(view: GraphView, candidates: Sequence[VertexRef]) -> Optional[Tuple[VertexRef, VertexRef]]:
    """Return the first pair (row-major) at maximum distance, or ``None`` if all coincide."""

    coords = np.asarray([view.position(v) for v in candidates], dtype=float)
    distances = cdist(coords, coords)
    flat = int(np.argmax(distances))
    if distances.flat[flat] <= 0.0:
        return None
    i, j = divmod(flat, len(candidates))
    return candidates[i], candidates[j]


def _starts_component_edge(view: GraphView, vertex: VertexRef, edges) -> bool:
    return any(view.start(edge) == vertex for edge in view.incident_within(vertex, edges))


def select_endpoints(view: GraphView, component: Component) -> EndpointPair:
    if component.is_single_vertex:
        vertex = component.vertices[0]
        candidates = _neighbour_candidates(view, vertex)
        tier = "neighbours"
        edges = set(view.incident(vertex)) | component.edge_set
    else:
        candidates = []
        tier = ""
        for tier, strategy in ENDPOINT_STRATEGIES:
            candidates = strategy(view, component, candidates)
            if len(candidates) >= 2:
                break
        edges = component.edge_set

    if len(candidates) > 2:
        pair = farthest_pair(view, candidates)
        candidates = list(pair) if pair else []
    if len(candidates) != 2:
        raise AmbiguousDirectionError("Couldn't determine extrude direction.")

    first, second = candidates
    if not _starts_component_edge(view, first, edges):
        first, second = second, first

    logger.debug("Endpoints %r, %r chosen from tier %s", first, second, tier)
    return EndpointPair(first, second, tier, synthesized=component.is_single_vertex)


apply_debug_logging(globals(), logger=logger)


__all__ = [
    "CandidateStrategy",
    "ENDPOINT_STRATEGIES",
    "EndpointPair",
    "farthest_pair",
    "select_endpoints",
]
