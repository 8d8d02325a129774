"""T1.01 — Unit Areas.

Flood fill from each unit label, trace the filled region and simplify it to
a polygon. Labels outside any enclosed space count as failures.
"""

from __future__ import annotations

import logging

from floorgeo.engine.context import GenerationContext, UnitArea
from floorgeo.engine.registry import Stage, transform

logger = logging.getLogger(__name__)

# Fewer vertices than this is not a polygon.
MIN_POLYGON_POINTS = 3


@transform(
    id="T1.01",
    stage=Stage.REGIONS,
    dependencies=["T0.02"],
    description="Generate unit area polygons from unit labels",
)
def unit_areas(ctx: GenerationContext) -> None:
    grid = ctx.wall_grid
    if grid is None:
        return

    tolerance = ctx.cell_size * ctx.config.simplify_tolerance_cells
    for label in ctx.unit_number_labels():
        filled = grid.flood_fill(label.x, label.y)
        if filled is None:
            logger.debug("Unit %r is not inside an enclosed area", label.text)
            ctx.failed_unit_areas += 1
            continue

        contour = grid.extract_contour(filled)
        if len(contour) < MIN_POLYGON_POINTS:
            ctx.failed_unit_areas += 1
            continue

        simplified = grid.simplify_polygon(contour, tolerance)
        if len(simplified) < MIN_POLYGON_POINTS:
            ctx.failed_unit_areas += 1
            continue

        ctx.unit_areas.append(UnitArea(label.handle, label.text, simplified))

    logger.info(
        "Unit areas: %d generated, %d failed",
        len(ctx.unit_areas),
        ctx.failed_unit_areas,
    )
