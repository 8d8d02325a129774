"""T1.02 — Background Contours.

Each sizeable 8-connected cluster of background wall cells becomes one
simplified outline polygon.
"""

from __future__ import annotations

import logging

from floorgeo.engine.context import GenerationContext
from floorgeo.engine.registry import Stage, transform
from floorgeo.engine.stage1.t1_01_unit_areas import MIN_POLYGON_POINTS

logger = logging.getLogger(__name__)


@transform(
    id="T1.02",
    stage=Stage.REGIONS,
    dependencies=["T0.03"],
    description="Trace background outline contours from wall clusters",
)
def background_contours(ctx: GenerationContext) -> None:
    grid = ctx.background_grid
    if grid is None:
        return

    tolerance = ctx.cell_size * ctx.config.simplify_tolerance_cells
    for mask in grid.find_wall_components(ctx.config.min_component_cells):
        contour = grid.extract_contour(mask)
        if len(contour) < MIN_POLYGON_POINTS:
            ctx.failed_background_contours += 1
            continue

        simplified = grid.simplify_polygon(contour, tolerance)
        if len(simplified) < MIN_POLYGON_POINTS:
            ctx.failed_background_contours += 1
            continue

        ctx.background_contours.append(simplified)

    logger.info(
        "Background contours: %d generated, %d failed",
        len(ctx.background_contours),
        ctx.failed_background_contours,
    )
