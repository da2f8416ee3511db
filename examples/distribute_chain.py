"""Example: place markers evenly along a bent wall and a separate ledge."""

from levelgraph import DistributeOptions, LevelMap, distribute


def main() -> None:
    level = LevelMap()
    wall = level.add_chain([(0, 0), (128, 0), (192, 64), (192, 192)])
    ledge = level.add_chain([(256, 0), (384, 0)])
    level.select_edges(wall + ledge)

    result = distribute(level, DistributeOptions(count=6))
    print(result.message)
    for placement in result.placements:
        x, y = placement.position
        print(
            f"  component {placement.component}: ({x:.2f}, {y:.2f})"
            f" at {placement.distance:.2f} along {placement.edge!r}"
        )


if __name__ == "__main__":
    main()
