"""In-memory map store implementing :class:`levelgraph.host.MapHost`."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .geometry import Point, as_point, distance

logger = logging.getLogger(__name__)

STITCH_DECIMALS = 6


@dataclass(eq=False)
class Vertex:
    index: int
    x: float
    y: float

    @property
    def position(self) -> Point:
        return (self.x, self.y)

    def __repr__(self) -> str:
        return f"Vertex({self.index}, {self.x:g}, {self.y:g})"


@dataclass(eq=False)
class Edge:
    index: int
    start: Vertex
    end: Vertex

    @property
    def length(self) -> float:
        return distance(self.start.position, self.end.position)

    def __repr__(self) -> str:
        return f"Edge({self.index}, {self.start.index}->{self.end.index})"


@dataclass
class Marker:
    x: float
    y: float
    kind: int

    @property
    def position(self) -> Point:
        return (self.x, self.y)


class LevelMap:
    """Vertices, directed edges, markers and an ordered selection."""

    def __init__(self) -> None:
        self.vertices: List[Vertex] = []
        self.edges: List[Edge] = []
        self.markers: List[Marker] = []
        self._incident: Dict[Vertex, List[Edge]] = {}
        # dicts double as insertion-ordered sets
        self._selected_vertices: Dict[Vertex, None] = {}
        self._selected_edges: Dict[Edge, None] = {}
        self._next_vertex = 0
        self._next_edge = 0

    # construction -----------------------------------------------------

    def add_vertex(self, x: float, y: float) -> Vertex:
        vertex = Vertex(self._next_vertex, float(x), float(y))
        self._next_vertex += 1
        self.vertices.append(vertex)
        self._incident[vertex] = []
        return vertex

    def add_edge(self, start: Vertex, end: Vertex) -> Edge:
        edge = Edge(self._next_edge, start, end)
        self._next_edge += 1
        self.edges.append(edge)
        self._incident[start].append(edge)
        if end is not start:
            self._incident[end].append(edge)
        return edge

    def add_chain(self, points: Sequence[Sequence[float]], closed: bool = False) -> List[Edge]:
        """Add vertices for ``points`` joined head to tail; return the new edges."""

        verts = [self.add_vertex(pt[0], pt[1]) for pt in points]
        edges = [self.add_edge(a, b) for a, b in zip(verts, verts[1:])]
        if closed and len(verts) > 2:
            edges.append(self.add_edge(verts[-1], verts[0]))
        return edges

    def find_vertex(self, position: Sequence[float], tol: float = 1e-6) -> Optional[Vertex]:
        for vertex in self.vertices:
            if distance(vertex.position, position) <= tol:
                return vertex
        return None

    def edge_between(self, a: Vertex, b: Vertex) -> Optional[Edge]:
        for edge in self._incident.get(a, []):
            if (edge.start is a and edge.end is b) or (edge.start is b and edge.end is a):
                return edge
        return None

    # selection --------------------------------------------------------

    def select_vertices(self, vertices: Iterable[Vertex]) -> None:
        for vertex in vertices:
            self._selected_vertices[vertex] = None

    def select_edges(self, edges: Iterable[Edge]) -> None:
        for edge in edges:
            self._selected_edges[edge] = None

    def clear_selection(self) -> None:
        self._selected_vertices.clear()
        self._selected_edges.clear()

    def selected_vertices(self) -> List[Vertex]:
        return list(self._selected_vertices)

    def selected_edges(self) -> List[Edge]:
        return list(self._selected_edges)

    def set_vertex_selected(self, vertex: Vertex, selected: bool) -> None:
        if selected:
            self._selected_vertices[vertex] = None
        else:
            self._selected_vertices.pop(vertex, None)

    # accessors --------------------------------------------------------

    def vertex_position(self, vertex: Vertex) -> Point:
        return vertex.position

    def set_vertex_position(self, vertex: Vertex, position: Point) -> None:
        vertex.x, vertex.y = as_point(position)

    def incident_edges(self, vertex: Vertex) -> List[Edge]:
        return list(self._incident.get(vertex, []))

    def edge_endpoints(self, edge: Edge) -> Tuple[Vertex, Vertex]:
        return edge.start, edge.end

    # mutation primitives ----------------------------------------------

    def create_marker(self, position: Point, kind: int) -> Marker:
        x, y = as_point(position)
        marker = Marker(x, y, kind)
        self.markers.append(marker)
        return marker

    def split_edge(self, edge: Edge, position: Point) -> Edge:
        inserted = self.add_vertex(*as_point(position))
        old_end = edge.end
        self._incident[old_end].remove(edge)
        edge.end = inserted
        self._incident[inserted].append(edge)
        new_edge = self.add_edge(inserted, old_end)
        if edge in self._selected_edges:
            self._selected_edges[new_edge] = None
        return new_edge

    def draw_edge(self, start: Point, end: Point) -> Edge:
        a = self.add_vertex(*as_point(start))
        b = self.add_vertex(*as_point(end))
        return self.add_edge(a, b)

    def stitch(self) -> None:
        survivors: Dict[Tuple[float, float], Vertex] = {}
        replacement: Dict[Vertex, Vertex] = {}
        kept_vertices: List[Vertex] = []
        for vertex in self.vertices:
            key = (round(vertex.x, STITCH_DECIMALS) + 0.0, round(vertex.y, STITCH_DECIMALS) + 0.0)
            survivor = survivors.get(key)
            if survivor is None:
                survivors[key] = vertex
                kept_vertices.append(vertex)
                continue
            replacement[vertex] = survivor
            if vertex in self._selected_vertices:
                self._selected_vertices.pop(vertex)
                self._selected_vertices[survivor] = None

        seen_pairs = set()
        kept_edges: List[Edge] = []
        for edge in self.edges:
            edge.start = replacement.get(edge.start, edge.start)
            edge.end = replacement.get(edge.end, edge.end)
            pair = frozenset((edge.start, edge.end))
            if edge.start is edge.end or pair in seen_pairs:
                self._selected_edges.pop(edge, None)
                continue
            seen_pairs.add(pair)
            kept_edges.append(edge)

        merged = len(self.vertices) - len(kept_vertices)
        dropped = len(self.edges) - len(kept_edges)
        self.vertices = kept_vertices
        self.edges = kept_edges
        self._incident = {vertex: [] for vertex in kept_vertices}
        for edge in kept_edges:
            self._incident[edge.start].append(edge)
            self._incident[edge.end].append(edge)
        if merged or dropped:
            logger.debug("Stitch merged %d vertices and dropped %d edges", merged, dropped)


__all__ = ["Edge", "LevelMap", "Marker", "Vertex"]
