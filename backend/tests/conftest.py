"""Shared test fixtures."""

from __future__ import annotations

import pytest

from floorgeo.engine import layer_names
from floorgeo.engine.config import GenerationConfig
from floorgeo.engine.context import DrawingEntity, GenerationContext, UnitLabel
from floorgeo.engine.region_grid import RegionGrid
from floorgeo.engine.shapes import Circle, Polyline, Segment
from floorgeo.engine.walk_graph import EdgeCandidate, NodeMarker


# Closed unit square (5,5)-(15,15), rasterized at half-unit cells
SQUARE_CORNERS = [(5.0, 5.0), (15.0, 5.0), (15.0, 15.0), (5.0, 15.0)]
SQUARE_BOUNDS = (5.0, 5.0, 15.0, 15.0)
SQUARE_CENTER = (10.0, 10.0)
CELL_SIZE = 0.5

# With 2-cell walls on every side the square leaves an 18×18 cell interior
SQUARE_INTERIOR_CELLS = 18 * 18


def square_segments(corners=SQUARE_CORNERS) -> list[Segment]:
    return [Segment(corners[i], corners[(i + 1) % len(corners)]) for i in range(len(corners))]


# Two rooms sharing a wall, with a walkway corridor below them.
#
#   +---------+---------+
#   |  101    |  102    |          103 (outside)
#   +---------+---------+
#
#   o---------o----[E]
#  201       202   203
WALLS_LAYER = "Walls"
PLAN_WALLS = [
    DrawingEntity(1, WALLS_LAYER, Polyline.from_points([(0, 0), (20, 0), (20, 10), (0, 10)], closed=True)),
    DrawingEntity(2, WALLS_LAYER, Segment((10, 0), (10, 10))),
]
PLAN_WALKWAYS = [
    DrawingEntity(201, layer_names.WALKWAYS, Circle((5.0, -4.0), 0.5), color=5),
    DrawingEntity(202, layer_names.WALKWAYS, Circle((15.0, -4.0), 0.5), color=5),
    DrawingEntity(203, layer_names.WALKWAYS, Circle((20.0, -4.0), 0.5), color=3),
    DrawingEntity(301, layer_names.WALKWAYS, Segment((5.0, -4.0), (15.0, -4.0))),
    DrawingEntity(302, layer_names.WALKWAYS, Segment((15.0, -4.0), (20.0, -4.0))),
]
PLAN_LABELS = [
    UnitLabel(101, "101", 5.0, 5.0),
    UnitLabel(102, "102", 15.0, 5.0),
    UnitLabel(103, "103", 25.0, 5.0),
]

# Coarse enough for quick tests: 25 units wide / 100 = quarter-unit cells
PLAN_CONFIG = GenerationConfig(resolution_divisor=100.0)

# A (non-entrance) to B (entrance), ten units apart
LINE_GRAPH = [
    NodeMarker("A", (0.0, 0.0), 1.0),
    NodeMarker("B", (10.0, 0.0), 1.0, is_entrance=True),
    EdgeCandidate("AB", (0.0, 0.0), (10.0, 0.0)),
]


@pytest.fixture
def square_grid() -> RegionGrid:
    grid = RegionGrid(*SQUARE_BOUNDS, CELL_SIZE)
    grid.rasterize_all(square_segments())
    return grid


@pytest.fixture
def empty_grid() -> RegionGrid:
    return RegionGrid(*SQUARE_BOUNDS, CELL_SIZE)


@pytest.fixture
def plan_context() -> GenerationContext:
    return GenerationContext(
        entities=PLAN_WALLS + PLAN_WALKWAYS,
        unit_labels=list(PLAN_LABELS),
    )


def entity_payload(entity: DrawingEntity) -> dict:
    """JSON request body for one plan entity."""
    shape = entity.shape
    if isinstance(shape, Segment):
        body = {"kind": "segment", "start": list(shape.start), "end": list(shape.end)}
    elif isinstance(shape, Circle):
        body = {"kind": "circle", "center": list(shape.center), "radius": shape.radius}
    else:
        body = {
            "kind": "polyline",
            "closed": shape.closed,
            "vertices": [{"location": list(v.location), "bulge": v.bulge} for v in shape.vertices],
        }
    return {"handle": entity.handle, "layer": entity.layer, "color": entity.color, "shape": body}
