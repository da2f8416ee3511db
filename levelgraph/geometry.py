"""Small 2D vector helpers shared by the placement and extrusion code.

Points and vectors are plain ``(x, y)`` float tuples.  Helpers that can hit a
degenerate case (normalising a zero vector, taking the normal of a collapsed
segment) return ``None`` instead of raising so callers decide how to report
the problem.
"""

from __future__ import annotations

import math
from typing import Iterable, Optional, Sequence, Tuple

Point = Tuple[float, float]
Vector = Tuple[float, float]
Segment = Tuple[Point, Point]

EPS = 1e-12


def as_point(pt: Sequence[float]) -> Point:
    return (float(pt[0]), float(pt[1]))


def sub(a: Sequence[float], b: Sequence[float]) -> Vector:
    return (float(a[0]) - float(b[0]), float(a[1]) - float(b[1]))


def scale(vec: Sequence[float], factor: float) -> Vector:
    return (float(vec[0]) * factor, float(vec[1]) * factor)


def cross(a: Sequence[float], b: Sequence[float]) -> float:
    return float(a[0]) * float(b[1]) - float(a[1]) * float(b[0])


def norm(vec: Sequence[float]) -> float:
    return math.hypot(float(vec[0]), float(vec[1]))


def distance(a: Sequence[float], b: Sequence[float]) -> float:
    return norm(sub(b, a))


def normalized(vec: Sequence[float]) -> Optional[Vector]:
    length = norm(vec)
    if length <= EPS:
        return None
    return (float(vec[0]) / length, float(vec[1]) / length)


def reversed_vec(vec: Sequence[float]) -> Vector:
    return (-float(vec[0]), -float(vec[1]))


def rotated(vec: Sequence[float], degrees: float) -> Vector:
    """Rotate ``vec`` counter-clockwise by ``degrees``."""

    theta = math.radians(degrees)
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    x, y = float(vec[0]), float(vec[1])
    return (x * cos_t - y * sin_t, x * sin_t + y * cos_t)


def right_normal(a: Sequence[float], b: Sequence[float]) -> Optional[Vector]:
    """Return the unit normal on the right-hand side of the segment ``a -> b``."""

    ab = sub(b, a)
    return normalized((ab[1], -ab[0]))


def lerp(a: Sequence[float], b: Sequence[float], t: float) -> Point:
    ax, ay = as_point(a)
    bx, by = as_point(b)
    return (ax + (bx - ax) * t, ay + (by - ay) * t)


def midpoint(a: Sequence[float], b: Sequence[float]) -> Point:
    return lerp(a, b, 0.5)


def winding_sum(center: Sequence[float], segments: Iterable[Segment]) -> float:
    """Sum of ``cross(center - a, b - a)`` over directed segments ``(a, b)``.

    Positive when ``center`` lies mostly on the right of the segments, i.e.
    the segments run clockwise around it.
    """

    total = 0.0
    for a, b in segments:
        total += cross(sub(center, a), sub(b, a))
    return total


__all__ = [
    "EPS",
    "Point",
    "Segment",
    "Vector",
    "as_point",
    "cross",
    "distance",
    "lerp",
    "midpoint",
    "norm",
    "normalized",
    "reversed_vec",
    "right_normal",
    "rotated",
    "scale",
    "sub",
    "winding_sum",
]
