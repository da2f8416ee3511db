"""Read-only view of the selected part of a host map."""

from __future__ import annotations

from typing import Dict, Iterable, List, Sequence, Tuple

from .geometry import Point, distance
from .host import EdgeRef, MapHost, VertexRef


class GraphView:
    """Selected edges (or vertices) of ``host`` with derived adjacency.

    The selection index of an edge is its position in the selected edge
    sequence; it is assigned once here and only used for tie-breaking.
    Edge lengths are cached, so the view must not outlive a single
    invocation once the host starts mutating.
    """

    def __init__(
        self,
        host: MapHost,
        edges: Iterable[EdgeRef] = (),
        vertices: Iterable[VertexRef] = (),
    ) -> None:
        self.host = host
        self.edges: List[EdgeRef] = list(dict.fromkeys(edges))
        self.vertices: List[VertexRef] = list(dict.fromkeys(vertices))
        self.selection_index: Dict[EdgeRef, int] = {
            edge: idx for idx, edge in enumerate(self.edges)
        }
        self._lengths: Dict[EdgeRef, float] = {}

    @classmethod
    def from_selection(cls, host: MapHost) -> "GraphView":
        """Vertex selection wins over edge selection when both are present."""

        vertices = list(host.selected_vertices())
        if vertices:
            return cls(host, vertices=vertices)
        return cls(host, edges=host.selected_edges())

    @classmethod
    def from_edge_selection(cls, host: MapHost) -> "GraphView":
        return cls(host, edges=host.selected_edges())

    @property
    def vertex_mode(self) -> bool:
        return bool(self.vertices)

    @property
    def empty(self) -> bool:
        return not self.vertices and not self.edges

    def sort_key(self, edge: EdgeRef) -> int:
        return self.selection_index.get(edge, len(self.selection_index))

    def position(self, vertex: VertexRef) -> Point:
        return self.host.vertex_position(vertex)

    def endpoints(self, edge: EdgeRef) -> Tuple[VertexRef, VertexRef]:
        return self.host.edge_endpoints(edge)

    def start(self, edge: EdgeRef) -> VertexRef:
        return self.host.edge_endpoints(edge)[0]

    def other_vertex(self, edge: EdgeRef, vertex: VertexRef) -> VertexRef:
        start, end = self.host.edge_endpoints(edge)
        return end if start == vertex else start

    def length(self, edge: EdgeRef) -> float:
        cached = self._lengths.get(edge)
        if cached is None:
            start, end = self.host.edge_endpoints(edge)
            cached = distance(self.position(start), self.position(end))
            self._lengths[edge] = cached
        return cached

    def incident(self, vertex: VertexRef) -> Sequence[EdgeRef]:
        return self.host.incident_edges(vertex)

    def incident_within(self, vertex: VertexRef, edges: Iterable[EdgeRef]) -> List[EdgeRef]:
        """Incident edges of ``vertex`` that belong to ``edges``, in host order."""

        allowed = edges if isinstance(edges, (set, frozenset, dict)) else set(edges)
        return [edge for edge in self.incident(vertex) if edge in allowed]

    def touched_vertices(self) -> List[VertexRef]:
        """Vertices of the selection in first-seen order."""

        if self.vertex_mode:
            return list(self.vertices)
        seen: Dict[VertexRef, None] = {}
        for edge in self.edges:
            start, end = self.endpoints(edge)
            seen.setdefault(start, None)
            seen.setdefault(end, None)
        return list(seen)


__all__ = ["GraphView"]
