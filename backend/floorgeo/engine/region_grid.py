"""RegionGrid — rasterized wall occupancy for deriving closed regions.

Walls are stamped onto a padded uniform grid; empty space is then flood
filled from a seed (unit areas) or wall clusters are labeled directly
(background outline). Filled masks are traced back to world-space contours.

Not thread-safe: rasterize everything first, then query.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Sequence

import numpy as np
from numpy.typing import NDArray

from floorgeo.engine.shapes import Arc, Circle, Polyline, Segment, Shape
from floorgeo.utils.contour import moore_trace, rdp_simplify
from floorgeo.utils.geometry import Point
from floorgeo.utils.morphology import border_labels, component_sizes, label_regions
from floorgeo.utils.rasterizer import (
    BULGE_EPSILON,
    arc_sample_points,
    bresenham_cells,
    bulge_to_arc,
    mark_block,
)

logger = logging.getLogger(__name__)

# Padding around the requested extents, in cells, on every side.
GRID_PADDING_CELLS = 2

# Wall-seed fallback probe order: +x, -x, -y, +y.
_SEED_PROBES = ((1, 0), (-1, 0), (0, -1), (0, 1))


class RegionGrid:
    """Binary wall grid over a padded world bounding box."""

    def __init__(self, min_x: float, min_y: float, max_x: float, max_y: float, cell_size: float) -> None:
        self.cell_size = cell_size
        pad = GRID_PADDING_CELLS * cell_size
        self.origin_x = min_x - pad
        self.origin_y = min_y - pad
        self.width = int(math.ceil((max_x - min_x + 2 * pad) / cell_size))
        self.height = int(math.ceil((max_y - min_y + 2 * pad) / cell_size))
        self._walls = np.zeros((self.height, self.width), dtype=np.bool_)
        # Empty-space labeling, rebuilt lazily after any rasterization
        self._empty_labels: NDArray[np.int32] | None = None
        self._open_labels: set[int] = set()
        logger.debug(
            "RegionGrid %dx%d cells (cell=%.6g, origin=(%.6g, %.6g))",
            self.width,
            self.height,
            cell_size,
            self.origin_x,
            self.origin_y,
        )

    # ── Coordinates ──

    @property
    def shape(self) -> tuple[int, int]:
        return (self.height, self.width)

    @property
    def walls(self) -> NDArray[np.bool_]:
        """Read-only (height, width) view of the wall cells."""
        view = self._walls.view()
        view.flags.writeable = False
        return view

    def world_to_grid(self, x: float, y: float) -> tuple[int, int]:
        return (
            int(round((x - self.origin_x) / self.cell_size)),
            int(round((y - self.origin_y) / self.cell_size)),
        )

    def grid_to_world(self, gx: int, gy: int) -> Point:
        return (self.origin_x + gx * self.cell_size, self.origin_y + gy * self.cell_size)

    def in_bounds(self, gx: int, gy: int) -> bool:
        return 0 <= gx < self.width and 0 <= gy < self.height

    def is_wall(self, gx: int, gy: int) -> bool:
        if not self.in_bounds(gx, gy):
            raise IndexError(f"cell ({gx}, {gy}) outside {self.width}x{self.height} grid")
        return bool(self._walls[gy, gx])

    # ── Rasterization ──

    def rasterize(self, shape: Shape) -> None:
        """Stamp one shape onto the wall grid. Unknown shape kinds are ignored."""
        match shape:
            case Segment(start=(x1, y1), end=(x2, y2)):
                self._rasterize_segment(x1, y1, x2, y2)
            case Arc(center=(cx, cy), radius=r, start_angle=a0, end_angle=a1):
                self._rasterize_arc(cx, cy, r, a0, a1)
            case Circle():
                arc = shape.as_arc()
                self._rasterize_arc(arc.center[0], arc.center[1], arc.radius, arc.start_angle, arc.end_angle)
            case Polyline():
                self._rasterize_polyline(shape)
            case _:
                return
        self._empty_labels = None

    def rasterize_all(self, shapes: Iterable[Shape]) -> None:
        for shape in shapes:
            self.rasterize(shape)

    def _rasterize_segment(self, x1: float, y1: float, x2: float, y2: float) -> None:
        gx1, gy1 = self.world_to_grid(x1, y1)
        gx2, gy2 = self.world_to_grid(x2, y2)
        mark_block(self._walls, bresenham_cells(gx1, gy1, gx2, gy2))

    def _rasterize_arc(self, cx: float, cy: float, radius: float, start_angle: float, end_angle: float) -> None:
        pts = arc_sample_points(cx, cy, radius, start_angle, end_angle, self.cell_size)
        for (x1, y1), (x2, y2) in zip(pts[:-1], pts[1:]):
            self._rasterize_segment(x1, y1, x2, y2)

    def _rasterize_polyline(self, polyline: Polyline) -> None:
        if len(polyline.vertices) < 2:
            return
        for v0, v1 in polyline.edges():
            (x1, y1), (x2, y2) = v0.location, v1.location
            if abs(v0.bulge) > BULGE_EPSILON:
                arc = bulge_to_arc(x1, y1, x2, y2, v0.bulge)
                if arc is not None:
                    self._rasterize_arc(*arc)
            else:
                self._rasterize_segment(x1, y1, x2, y2)

    # ── Regions ──

    def _label_empty_space(self) -> NDArray[np.int32]:
        if self._empty_labels is None:
            labels, count = label_regions(~self._walls)
            self._empty_labels = labels
            self._open_labels = border_labels(labels)
            logger.debug("Empty space: %d regions, %d open", count, len(self._open_labels))
        return self._empty_labels

    def _seed_cell(self, gx: int, gy: int) -> tuple[int, int] | None:
        if self.in_bounds(gx, gy) and not self._walls[gy, gx]:
            return gx, gy
        for dx, dy in _SEED_PROBES:
            nx, ny = gx + dx, gy + dy
            if self.in_bounds(nx, ny) and not self._walls[ny, nx]:
                return nx, ny
        return None

    def flood_fill(self, x: float, y: float) -> NDArray[np.bool_] | None:
        """4-connected fill of empty space from the cell nearest (x, y).

        Returns the filled mask, or None when the seed is boxed in by walls or
        the fill escapes to the grid boundary (the region is not enclosed).
        """
        seed = self._seed_cell(*self.world_to_grid(x, y))
        if seed is None:
            return None

        labels = self._label_empty_space()
        label = int(labels[seed[1], seed[0]])
        if label in self._open_labels:
            return None
        return labels == label

    def find_wall_components(self, min_cell_count: int) -> list[NDArray[np.bool_]]:
        """8-connected wall clusters with at least ``min_cell_count`` cells, in scan order."""
        labels, count = label_regions(self._walls, eight_connected=True)
        sizes = component_sizes(labels, count)
        keep = [label for label in range(1, count + 1) if sizes[label] >= min_cell_count]
        logger.debug("Wall components: %d found, %d kept (min %d cells)", count, len(keep), min_cell_count)
        return [labels == label for label in keep]

    # ── Contours ──

    def extract_contour(self, mask: NDArray[np.bool_]) -> list[Point]:
        """Moore-traced outer boundary of a mask, in world coordinates (ring not closed)."""
        mask = np.asarray(mask, dtype=np.bool_)
        if mask.shape != self.shape:
            raise ValueError(f"mask shape {mask.shape} does not match grid shape {self.shape}")
        return [self.grid_to_world(gx, gy) for gx, gy in moore_trace(mask)]

    @staticmethod
    def simplify_polygon(points: Sequence[Point], tolerance: float) -> list[Point]:
        """Ramer-Douglas-Peucker reduction; fewer than three points pass through."""
        return rdp_simplify(points, tolerance)
