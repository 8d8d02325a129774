"""T2.01 — Walkway Graph.

Build the routing graph from visible walkway-layer markers and segments.
"""

from __future__ import annotations

from floorgeo.engine import layer_names
from floorgeo.engine.context import GenerationContext
from floorgeo.engine.registry import Stage, transform
from floorgeo.engine.walkways import WalkwayService


@transform(
    id="T2.01",
    stage=Stage.ROUTING,
    description="Build the walkway graph",
)
def walkway_graph(ctx: GenerationContext) -> None:
    service = WalkwayService(ctx.config)
    service.rebuild_graph(ctx.entities_on(layer_names.WALKWAYS))
    ctx.walk_graph = service.graph
