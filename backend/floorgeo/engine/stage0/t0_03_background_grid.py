"""T0.03 — Background Grid.

Rasterize only imported drawing geometry: everything visible that is not on
an editor-generated layer.
"""

from __future__ import annotations

from floorgeo.engine import layer_names
from floorgeo.engine.context import GenerationContext
from floorgeo.engine.registry import Stage, transform
from floorgeo.engine.stage0.t0_02_wall_grid import build_grid


@transform(
    id="T0.03",
    stage=Stage.RASTERIZATION,
    dependencies=["T0.01"],
    description="Rasterize background geometry for outline contours",
)
def background_grid(ctx: GenerationContext) -> None:
    if ctx.extents is None:
        return
    background = [e for e in ctx.visible_entities() if e.layer not in layer_names.APP_GENERATED]
    if not background:
        return
    ctx.background_grid, _ = build_grid(ctx, background)
