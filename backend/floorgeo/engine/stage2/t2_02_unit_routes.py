"""T2.02 — Unit Routes.

For every unit label: the generated area that contains it, and the walking
route from the label to the nearest entrance.
"""

from __future__ import annotations

import logging

from shapely.geometry import Point as ShapelyPoint
from shapely.prepared import prep

from floorgeo.engine.context import GenerationContext, UnitArea, UnitRoute
from floorgeo.engine.registry import Stage, transform
from floorgeo.engine.walkways import WalkwayService

logger = logging.getLogger(__name__)


def _enclosing_area(areas: list[tuple[object, UnitArea]], x: float, y: float) -> UnitArea | None:
    point = ShapelyPoint(x, y)
    for prepared, area in areas:
        if prepared.contains(point):
            return area
    return None


@transform(
    id="T2.02",
    stage=Stage.ROUTING,
    dependencies=["T1.01", "T2.01"],
    description="Route each unit to its nearest entrance",
)
def unit_routes(ctx: GenerationContext) -> None:
    if ctx.walk_graph is None:
        return

    service = WalkwayService(ctx.config, ctx.walk_graph)
    max_distance = service.compute_max_node_distance()
    areas = [(prep(area.polygon), area) for area in ctx.unit_areas]

    for label in ctx.unit_number_labels():
        route = UnitRoute(label.handle, label.text, area=_enclosing_area(areas, label.x, label.y))
        resolved = service.find_route_for_unit(label.x, label.y, max_distance)
        if resolved is not None:
            route.node_ids = resolved.node_ids
            route.path = resolved.points
            route.distance = resolved.distance
            route.highlight_ids = resolved.highlight_ids
        ctx.unit_routes.append(route)

    routed = sum(1 for r in ctx.unit_routes if r.routed)
    logger.info("Unit routes: %d of %d units reach an entrance", routed, len(ctx.unit_routes))
