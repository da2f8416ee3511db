"""JSON serialisation of :class:`~levelgraph.level_map.LevelMap`.

Layout::

    {
      "vertices": [[x, y], ...],
      "edges": [[start, end], ...],
      "selection": {"vertices": [i, ...], "edges": [j, ...]},
      "markers": [{"x": x, "y": y, "kind": k}, ...]
    }

Indices refer to positions in the ``vertices``/``edges`` arrays.  Selection
lists are kept in order since traversal depends on it.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Mapping, Union

from .level_map import LevelMap

PathLike = Union[str, Path]


def _index_list(payload: Mapping[str, Any], key: str, limit: int, what: str) -> List[int]:
    values = payload.get(key, [])
    if not isinstance(values, list):
        raise ValueError(f"selection.{key} must be a list")
    for value in values:
        if not isinstance(value, int) or isinstance(value, bool) or not 0 <= value < limit:
            raise ValueError(f"selection.{key} refers to unknown {what} {value!r}")
    return values


def map_from_dict(data: Mapping[str, Any]) -> LevelMap:
    level = LevelMap()
    vertices = []
    for idx, entry in enumerate(data.get("vertices", [])):
        if not (isinstance(entry, (list, tuple)) and len(entry) == 2):
            raise ValueError(f"vertex {idx} must be an [x, y] pair, got {entry!r}")
        vertices.append(level.add_vertex(float(entry[0]), float(entry[1])))

    edges = []
    for idx, entry in enumerate(data.get("edges", [])):
        if not (isinstance(entry, (list, tuple)) and len(entry) == 2):
            raise ValueError(f"edge {idx} must be a [start, end] pair, got {entry!r}")
        start, end = entry
        if not all(isinstance(i, int) and 0 <= i < len(vertices) for i in (start, end)):
            raise ValueError(f"edge {idx} refers to unknown vertex in {entry!r}")
        edges.append(level.add_edge(vertices[start], vertices[end]))

    selection = data.get("selection")
    if selection is None:
        selection = {}
    if not isinstance(selection, Mapping):
        raise ValueError("selection must be an object")
    level.select_vertices(vertices[i] for i in _index_list(selection, "vertices", len(vertices), "vertex"))
    level.select_edges(edges[i] for i in _index_list(selection, "edges", len(edges), "edge"))

    for entry in data.get("markers", []):
        level.create_marker((float(entry["x"]), float(entry["y"])), int(entry["kind"]))
    return level


def map_to_dict(level: LevelMap) -> Dict[str, Any]:
    vertex_index = {vertex: idx for idx, vertex in enumerate(level.vertices)}
    edge_index = {edge: idx for idx, edge in enumerate(level.edges)}
    return {
        "vertices": [[vertex.x, vertex.y] for vertex in level.vertices],
        "edges": [[vertex_index[edge.start], vertex_index[edge.end]] for edge in level.edges],
        "selection": {
            "vertices": [vertex_index[v] for v in level.selected_vertices() if v in vertex_index],
            "edges": [edge_index[e] for e in level.selected_edges() if e in edge_index],
        },
        "markers": [
            {"x": marker.x, "y": marker.y, "kind": marker.kind} for marker in level.markers
        ],
    }


def load_map(path: PathLike) -> LevelMap:
    with open(path, encoding="utf-8") as fin:
        return map_from_dict(json.load(fin))


def dump_map(level: LevelMap, path: PathLike) -> None:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(map_to_dict(level), indent=2), encoding="utf-8")


__all__ = ["dump_map", "load_map", "map_from_dict", "map_to_dict"]
