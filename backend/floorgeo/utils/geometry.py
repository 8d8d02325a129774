"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

Point = tuple[float, float]
Bounds = tuple[float, float, float, float]


def distance(a: Point, b: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(b[0] - a[0], b[1] - a[1])


def path_length(points: Sequence[Point]) -> float:
    """Sum of consecutive Euclidean distances along a point sequence."""
    return sum(distance(points[i - 1], points[i]) for i in range(1, len(points)))


def union_bounds(bounds: Iterable[Bounds]) -> Bounds | None:
    """Smallest (xmin, ymin, xmax, ymax) covering every input box."""
    xmin = ymin = math.inf
    xmax = ymax = -math.inf
    for bx1, by1, bx2, by2 in bounds:
        xmin = min(xmin, bx1)
        ymin = min(ymin, by1)
        xmax = max(xmax, bx2)
        ymax = max(ymax, by2)
    if xmin == math.inf:
        return None
    return (xmin, ymin, xmax, ymax)


def points_bounds(points: Sequence[Point]) -> Bounds | None:
    """Bounding box of a point list, or None when empty."""
    return union_bounds((x, y, x, y) for x, y in points)

