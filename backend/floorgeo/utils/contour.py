"""Contour extraction — Moore boundary tracing, RDP simplification."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray

from floorgeo.utils.morphology import first_boundary_cell

# Moore neighborhood, clockwise in grid space starting east:
# right, down-right, down, down-left, left, up-left, up, up-right
_MOORE_DX = (1, 1, 0, -1, -1, -1, 0, 1)
_MOORE_DY = (0, 1, 1, 1, 0, -1, -1, -1)

# Initial heading: up-right, so the first search starts at "right".
_START_DIRECTION = 7

# Backtrack offset: search resumes one step past the cell we came from.
_BACKTRACK = 5

# Chords shorter than this (squared) fall back to point distance.
_MIN_CHORD_SQ = 1e-20


def moore_trace(mask: NDArray[np.bool_]) -> list[tuple[int, int]]:
    """Trace the outer boundary of a (height, width) mask.

    Returns ordered (gx, gy) cells starting at the first row-major boundary
    cell, without a closing duplicate. Empty when the mask has no boundary
    cell. The trace stops on returning to the start, on a dead end, or after
    width × height steps.
    """
    start = first_boundary_cell(mask)
    if start is None:
        return []

    height, width = mask.shape
    cx, cy = start
    direction = _START_DIRECTION
    cells = [start]
    max_steps = width * height
    steps = 0

    while steps < max_steps:
        search = (direction + _BACKTRACK) % 8
        for i in range(8):
            d = (search + i) % 8
            nx = cx + _MOORE_DX[d]
            ny = cy + _MOORE_DY[d]
            if 0 <= nx < width and 0 <= ny < height and mask[ny, nx]:
                cx, cy, direction = nx, ny, d
                break
        else:
            break

        if (cx, cy) == start:
            break

        cells.append((cx, cy))
        steps += 1

    return cells


def _chord_distances(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Distance of each interior point to the chord (first, last)."""
    start = points[0]
    end = points[-1]
    interior = points[1:-1]

    dx, dy = end - start
    length_sq = dx * dx + dy * dy
    if length_sq < _MIN_CHORD_SQ:
        # Degenerate chord: plain distance to the start point
        return np.hypot(interior[:, 0] - start[0], interior[:, 1] - start[1])

    cross = dy * interior[:, 0] - dx * interior[:, 1] + end[0] * start[1] - end[1] * start[0]
    return np.abs(cross) / np.sqrt(length_sq)


def _rdp(points: NDArray[np.float64], epsilon: float) -> NDArray[np.float64]:
    if len(points) <= 2:
        return points

    distances = _chord_distances(points)
    max_idx = int(np.argmax(distances)) + 1
    max_dist = float(distances[max_idx - 1])

    if max_dist > epsilon:
        left = _rdp(points[: max_idx + 1], epsilon)
        right = _rdp(points[max_idx:], epsilon)
        return np.vstack([left[:-1], right])
    return points[[0, -1]]


def rdp_simplify(
    points: Sequence[tuple[float, float]] | NDArray[np.float64],
    epsilon: float,
) -> list[tuple[float, float]]:
    """Ramer-Douglas-Peucker line simplification.

    Endpoints are always kept; fewer than three points come back unchanged.
    """
    if len(points) < 3:
        return [(float(x), float(y)) for x, y in points]

    arr = np.asarray(points, dtype=np.float64)
    simplified = _rdp(arr, epsilon)
    return [(float(x), float(y)) for x, y in simplified]
