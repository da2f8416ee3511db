import argparse
import logging
from typing import Optional, Sequence

from levelgraph import (
    DistributeOptions,
    ExtrudeOptions,
    GraphOperationError,
    distribute,
    dump_map,
    extrude,
    load_map,
)
from levelgraph.options import DEFAULT_THING_TYPE

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Distribute markers along or extrude map geometry")
    parser.add_argument("path", help="Path to a JSON map file")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "-o",
        "--output",
        help="Write the resulting map to this path",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    dist = commands.add_parser("distribute", help="Place markers evenly along selected edges")
    dist.add_argument(
        "--thing-type",
        type=int,
        default=DEFAULT_THING_TYPE,
        help=f"Marker kind (default: {DEFAULT_THING_TYPE})",
    )
    dist.add_argument(
        "--count",
        type=int,
        default=8,
        help="Number of markers (default: 8)",
    )

    ext = commands.add_parser("extrude", help="Extrude selected vertices or edges")
    ext.add_argument("--distance", type=float, default=64.0, help="Extrude distance (default: 64)")
    ext.add_argument("--copy", action="store_true", help="Extrude a copy of the geometry")
    ext.add_argument("--angle", type=float, default=0.0, help="Angle adjustment in degrees")
    ext.add_argument(
        "--arc-angle",
        type=float,
        default=0.0,
        help="Signed arc angle in degrees for radial extrusion",
    )
    ext.add_argument(
        "--radial-vertex-select",
        action="store_true",
        help="Use an isolated selected vertex as the radial origin",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = _build_parser().parse_args(argv)

    _configure_logging(args.log_level)

    logger.info("Loading map from %s", args.path)
    level = load_map(args.path)

    try:
        if args.command == "distribute":
            result = distribute(level, DistributeOptions(thing_type=args.thing_type, count=args.count))
        else:
            options = ExtrudeOptions(
                distance=args.distance,
                copy=args.copy,
                angle=args.angle,
                arc_angle=args.arc_angle,
                radial_vertex_select=args.radial_vertex_select,
            )
            result = extrude(level, options)
    except GraphOperationError as exc:
        logger.error("%s failed: %s", args.command, exc)
        raise SystemExit(1) from exc

    print(result.message)

    if args.output:
        dump_map(level, args.output)
        logger.info("Wrote map to %s", args.output)


if __name__ == "__main__":
    main()
