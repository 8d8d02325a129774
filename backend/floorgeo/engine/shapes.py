"""Wall geometry shapes — the input vocabulary for RegionGrid rasterization.

Angles are radians, measured CCW from +x. A positive polyline bulge is a CCW
arc to the next vertex; |bulge| = tan(included_angle / 4).
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Union

from floorgeo.utils.geometry import Bounds, Point


@dataclass(frozen=True)
class Segment:
    start: Point
    end: Point

    def bounds(self) -> Bounds:
        (x1, y1), (x2, y2) = self.start, self.end
        return (min(x1, x2), min(y1, y2), max(x1, x2), max(y1, y2))


@dataclass(frozen=True)
class Arc:
    center: Point
    radius: float
    start_angle: float
    end_angle: float

    def bounds(self) -> Bounds:
        # Conservative: full circle box regardless of sweep
        cx, cy = self.center
        r = self.radius
        return (cx - r, cy - r, cx + r, cy + r)


@dataclass(frozen=True)
class Circle:
    center: Point
    radius: float

    def bounds(self) -> Bounds:
        cx, cy = self.center
        r = self.radius
        return (cx - r, cy - r, cx + r, cy + r)

    def as_arc(self) -> Arc:
        return Arc(self.center, self.radius, 0.0, 2 * math.pi)


@dataclass(frozen=True)
class PolylineVertex:
    location: Point
    # Bulge of the segment leaving this vertex
    bulge: float = 0.0


@dataclass(frozen=True)
class Polyline:
    vertices: tuple[PolylineVertex, ...] = field(default_factory=tuple)
    closed: bool = False

    @classmethod
    def from_points(cls, points: list[Point], *, closed: bool = False) -> "Polyline":
        return cls(tuple(PolylineVertex(p) for p in points), closed)

    def bounds(self) -> Bounds | None:
        if not self.vertices:
            return None
        xs = [v.location[0] for v in self.vertices]
        ys = [v.location[1] for v in self.vertices]
        return (min(xs), min(ys), max(xs), max(ys))

    def edges(self) -> list[tuple[PolylineVertex, PolylineVertex]]:
        """Consecutive vertex pairs, plus the closing pair when closed with >2 vertices."""
        verts = self.vertices
        pairs = [(verts[i], verts[i + 1]) for i in range(len(verts) - 1)]
        if self.closed and len(verts) > 2:
            pairs.append((verts[-1], verts[0]))
        return pairs


Shape = Union[Segment, Arc, Circle, Polyline]

# Shape kinds RegionGrid knows how to rasterize.
SUPPORTED_SHAPES = (Segment, Arc, Circle, Polyline)
