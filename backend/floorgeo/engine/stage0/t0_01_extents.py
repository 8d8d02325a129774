"""T0.01 — Drawing Extents.

Bounding box of every entity plus unit-label insert points, and the grid
cell size derived from it.
"""

from __future__ import annotations

import logging

from floorgeo.engine.context import GenerationContext
from floorgeo.engine.registry import Stage, transform
from floorgeo.engine.shapes import SUPPORTED_SHAPES
from floorgeo.utils.geometry import union_bounds

logger = logging.getLogger(__name__)


@transform(
    id="T0.01",
    stage=Stage.RASTERIZATION,
    description="Compute drawing extents and grid cell size",
)
def extents(ctx: GenerationContext) -> None:
    shapes = [e.shape for e in ctx.entities if isinstance(e.shape, SUPPORTED_SHAPES)]
    boxes = [b for b in (s.bounds() for s in shapes) if b is not None]
    boxes.extend((label.x, label.y, label.x, label.y) for label in ctx.unit_labels)

    bounds = union_bounds(boxes)
    if bounds is None:
        return
    xmin, ymin, xmax, ymax = bounds
    if not (xmin < xmax and ymin < ymax):
        logger.info("Degenerate extents %s; nothing to rasterize", bounds)
        return

    ctx.extents = bounds
    ctx.cell_size = max(xmax - xmin, ymax - ymin) / ctx.config.resolution_divisor
