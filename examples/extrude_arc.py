"""Example: bend a wall outward along a quarter arc, then copy it linearly."""

from levelgraph import ExtrudeOptions, LevelMap, extrude


def _dump(level: LevelMap) -> None:
    for edge in level.edges:
        (x0, y0), (x1, y1) = edge.start.position, edge.end.position
        print(f"  {edge!r}: ({x0:.2f}, {y0:.2f}) -> ({x1:.2f}, {y1:.2f})")


def main() -> None:
    level = LevelMap()
    wall = level.add_chain([(0, 0), (50, 0), (100, 0)])
    level.select_edges(wall)

    result = extrude(level, ExtrudeOptions(distance=16, arc_angle=90))
    model = result.plans[0].model
    print(f"{result.message} centre={model.center} radius={model.radius:.2f}")
    _dump(level)

    level.clear_selection()
    level.select_edges(level.edges)
    result = extrude(level, ExtrudeOptions(distance=32, copy=True))
    print(result.message)
    _dump(level)


if __name__ == "__main__":
    main()
