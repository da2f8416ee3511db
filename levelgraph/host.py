"""Interface the operations expect from the map store that owns the geometry.

Vertex and edge references are opaque, hashable handles.  Sequences returned
by ``selected_vertices``/``selected_edges`` must be in selection order and
``incident_edges`` must be stable between calls, since traversal order (and
therefore marker placement) depends on both.
"""

from __future__ import annotations

from typing import Any, Hashable, Protocol, Sequence, Tuple

from .geometry import Point

VertexRef = Hashable
EdgeRef = Hashable


class MapHost(Protocol):
    def selected_vertices(self) -> Sequence[VertexRef]:
        ...

    def selected_edges(self) -> Sequence[EdgeRef]:
        ...

    def vertex_position(self, vertex: VertexRef) -> Point:
        ...

    def set_vertex_position(self, vertex: VertexRef, position: Point) -> None:
        ...

    def set_vertex_selected(self, vertex: VertexRef, selected: bool) -> None:
        ...

    def incident_edges(self, vertex: VertexRef) -> Sequence[EdgeRef]:
        ...

    def edge_endpoints(self, edge: EdgeRef) -> Tuple[VertexRef, VertexRef]:
        ...

    def create_marker(self, position: Point, kind: int) -> Any:
        ...

    def split_edge(self, edge: EdgeRef, position: Point) -> EdgeRef:
        """Insert a vertex at ``position``; return the new edge that starts at it."""
        ...

    def draw_edge(self, start: Point, end: Point) -> Any:
        ...

    def stitch(self) -> None:
        """Merge coincident vertices and edges created by separate draws."""
        ...


__all__ = ["EdgeRef", "MapHost", "VertexRef"]
