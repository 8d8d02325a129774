"""Rasterization utilities — Bresenham stepping, arc sampling, bulge arcs.

Leaf helpers used by RegionGrid. No engine imports.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import NDArray

# ── Named constants ──

# Sweeps within 1 mrad of 2π are treated as full circles.
FULL_CIRCLE_TOLERANCE = 0.001

# Arcs are sampled every half cell; never fewer than 8 chords per arc
# (an octagon is the coarsest polygon that still reads as round).
MIN_ARC_SAMPLES = 8
ARC_SAMPLES_PER_CELL = 2.0

# Bulge magnitudes at or below this are straight segments.
BULGE_EPSILON = 1e-4

# Chords shorter than this cannot define an arc.
MIN_CHORD_LENGTH = 1e-10

# Wall stamp: each stepped cell also marks +1 in x and y (2×2 block).
_BLOCK_OFFSETS = ((0, 0), (1, 0), (0, 1), (1, 1))


def bresenham_cells(gx1: int, gy1: int, gx2: int, gy2: int) -> list[tuple[int, int]]:
    """Integer Bresenham stepping between two grid cells, endpoints included."""
    cells: list[tuple[int, int]] = []
    dx = abs(gx2 - gx1)
    dy = abs(gy2 - gy1)
    sx = 1 if gx1 < gx2 else -1
    sy = 1 if gy1 < gy2 else -1
    err = dx - dy

    x, y = gx1, gy1
    while True:
        cells.append((x, y))
        if x == gx2 and y == gy2:
            break
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy
    return cells


def mark_block(walls: NDArray[np.bool_], cells: list[tuple[int, int]]) -> None:
    """Mark every cell and its 2×2 block on a (height, width) grid, clipped to bounds."""
    if not cells:
        return
    height, width = walls.shape
    pts = np.asarray(cells, dtype=np.int64)
    for ox, oy in _BLOCK_OFFSETS:
        xs = pts[:, 0] + ox
        ys = pts[:, 1] + oy
        valid = (xs >= 0) & (xs < width) & (ys >= 0) & (ys < height)
        walls[ys[valid], xs[valid]] = True


def arc_sweep(start_angle: float, end_angle: float) -> float:
    """Positive CCW sweep from start to end; a wrapped 2π stays a full circle."""
    sweep = end_angle - start_angle
    if sweep <= 0:
        sweep += 2 * math.pi
    if abs(sweep - 2 * math.pi) < FULL_CIRCLE_TOLERANCE:
        sweep = 2 * math.pi
    return sweep


def arc_sample_count(radius: float, start_angle: float, end_angle: float, cell_size: float) -> int:
    """Number of chords so each is about half a cell long (minimum 8)."""
    span = end_angle - start_angle
    if abs(span - 2 * math.pi) < FULL_CIRCLE_TOLERANCE or (
        abs(span) < FULL_CIRCLE_TOLERANCE and start_angle == 0
    ):
        length = 2 * math.pi * radius
    else:
        sweep = span if span >= 0 else span + 2 * math.pi
        length = sweep * radius
    return max(int(length / (cell_size / ARC_SAMPLES_PER_CELL)), MIN_ARC_SAMPLES)


def arc_sample_points(
    cx: float,
    cy: float,
    radius: float,
    start_angle: float,
    end_angle: float,
    cell_size: float,
) -> NDArray[np.float64]:
    """Sample an arc CCW from start_angle. Returns (steps+1)×2 world points."""
    steps = arc_sample_count(radius, start_angle, end_angle, cell_size)
    sweep = arc_sweep(start_angle, end_angle)
    angles = start_angle + sweep * np.arange(steps + 1) / steps
    return np.column_stack([cx + radius * np.cos(angles), cy + radius * np.sin(angles)])


def bulge_to_arc(
    x1: float,
    y1: float,
    x2: float,
    y2: float,
    bulge: float,
) -> tuple[float, float, float, float, float] | None:
    """Convert a bulge segment to (cx, cy, radius, start_angle, end_angle).

    The returned angles always sweep CCW from start to end, so a negative
    (clockwise) bulge comes back with its endpoints swapped. Returns None for a
    degenerate chord.
    """
    dx = x2 - x1
    dy = y2 - y1
    chord = math.hypot(dx, dy)
    if chord < MIN_CHORD_LENGTH:
        return None

    sagitta = abs(bulge) * chord / 2
    radius = (chord * chord / 4 + sagitta * sagitta) / (2 * sagitta)

    mx = (x1 + x2) / 2
    my = (y1 + y2) / 2
    # Unit normal, left of the chord direction
    nx = -dy / chord
    ny = dx / chord

    offset = radius - sagitta
    sign = 1.0 if bulge > 0 else -1.0
    cx = mx + sign * offset * nx
    cy = my + sign * offset * ny

    start_angle = math.atan2(y1 - cy, x1 - cx)
    end_angle = math.atan2(y2 - cy, x2 - cx)

    if bulge > 0:
        if end_angle <= start_angle:
            end_angle += 2 * math.pi
    else:
        if start_angle <= end_angle:
            start_angle += 2 * math.pi
        start_angle, end_angle = end_angle, start_angle

    return cx, cy, radius, start_angle, end_angle
