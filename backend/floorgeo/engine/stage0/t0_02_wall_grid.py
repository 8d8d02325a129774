"""T0.02 — Wall Grid.

Rasterize every visible drawing entity except existing unit areas. This grid
seeds the unit-area flood fills.
"""

from __future__ import annotations

import logging

from floorgeo.engine import layer_names
from floorgeo.engine.context import DrawingEntity, GenerationContext
from floorgeo.engine.region_grid import RegionGrid
from floorgeo.engine.registry import Stage, transform
from floorgeo.engine.shapes import SUPPORTED_SHAPES

logger = logging.getLogger(__name__)


def build_grid(ctx: GenerationContext, entities: list[DrawingEntity]) -> tuple[RegionGrid, int]:
    """Rasterize the supported entities onto a grid covering the drawing extents.

    Returns the grid and the number of unsupported entities left out.
    """
    xmin, ymin, xmax, ymax = ctx.extents
    grid = RegionGrid(xmin, ymin, xmax, ymax, ctx.cell_size)
    skipped = 0
    for entity in entities:
        if isinstance(entity.shape, SUPPORTED_SHAPES):
            grid.rasterize(entity.shape)
        else:
            skipped += 1
    if skipped:
        logger.debug("Skipped %d unsupported entities", skipped)
    return grid, skipped


@transform(
    id="T0.02",
    stage=Stage.RASTERIZATION,
    dependencies=["T0.01"],
    description="Rasterize visible walls for unit-area fills",
)
def wall_grid(ctx: GenerationContext) -> None:
    if ctx.extents is None:
        return
    walls = [e for e in ctx.visible_entities() if e.layer != layer_names.UNIT_AREAS]
    ctx.wall_grid, ctx.skipped_entities = build_grid(ctx, walls)
