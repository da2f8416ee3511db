"""Option structures for the distribute and extrude operations."""

from __future__ import annotations

import copy
import math
import numbers
from dataclasses import dataclass

from .errors import InvalidCountError, OptionsError

DEFAULT_THING_TYPE = 2014


@dataclass
class DistributeOptions:
    """Options for placing markers along selected edge chains."""

    thing_type: int = DEFAULT_THING_TYPE
    count: int = 8


@dataclass
class ExtrudeOptions:
    """Options for extruding selected vertices or edges.

    ``angle`` and ``arc_angle`` are in degrees.  A non-zero ``arc_angle``
    bends the extrusion around the centre of the arc through the component's
    endpoints; ``radial_vertex_select`` uses a lone selected vertex as the
    centre instead.
    """

    distance: float = 64.0
    copy: bool = False
    angle: float = 0.0
    arc_angle: float = 0.0
    radial_vertex_select: bool = False


_DISTRIBUTE_DEFAULTS = DistributeOptions()
_EXTRUDE_DEFAULTS = ExtrudeOptions()


def get_default_distribute_options() -> DistributeOptions:
    return copy.deepcopy(_DISTRIBUTE_DEFAULTS)


def set_default_distribute_options(options: DistributeOptions) -> None:
    global _DISTRIBUTE_DEFAULTS
    validate_distribute_options(options)
    _DISTRIBUTE_DEFAULTS = copy.deepcopy(options)


def get_default_extrude_options() -> ExtrudeOptions:
    return copy.deepcopy(_EXTRUDE_DEFAULTS)


def set_default_extrude_options(options: ExtrudeOptions) -> None:
    global _EXTRUDE_DEFAULTS
    validate_extrude_options(options)
    _EXTRUDE_DEFAULTS = copy.deepcopy(options)


def _is_int(value: object) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def _ensure_float(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise OptionsError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(float(value)):
        raise OptionsError(f"{name} must be finite, got {value!r}")


def _ensure_bool(name: str, value: object) -> None:
    if not isinstance(value, bool):
        raise OptionsError(f"{name} must be true|false, got {value!r}")


def validate_distribute_options(options: DistributeOptions) -> None:
    if not _is_int(options.thing_type):
        raise OptionsError(f"thing_type must be an integer, got {options.thing_type!r}")
    if not _is_int(options.count):
        raise OptionsError(f"count must be an integer, got {options.count!r}")
    if options.count <= 0:
        raise InvalidCountError("No things to distribute.")


def validate_extrude_options(options: ExtrudeOptions) -> None:
    _ensure_float("distance", options.distance)
    _ensure_float("angle", options.angle)
    _ensure_float("arc_angle", options.arc_angle)
    _ensure_bool("copy", options.copy)
    _ensure_bool("radial_vertex_select", options.radial_vertex_select)


__all__ = [
    "DEFAULT_THING_TYPE",
    "DistributeOptions",
    "ExtrudeOptions",
    "get_default_distribute_options",
    "set_default_distribute_options",
    "get_default_extrude_options",
    "set_default_extrude_options",
    "validate_distribute_options",
    "validate_extrude_options",
]
