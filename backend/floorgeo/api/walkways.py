"""POST /api/walkways/route — highlight the route from a point to the nearest entrance."""

from __future__ import annotations

from fastapi import APIRouter

from floorgeo.engine.walkways import WalkwayService
from floorgeo.models.requests import RouteRequest
from floorgeo.models.responses import RouteResponse

router = APIRouter(prefix="/walkways")


@router.post("/route", response_model=RouteResponse)
def route(req: RouteRequest) -> RouteResponse:
    service = WalkwayService()
    service.rebuild_graph(e.to_entity() for e in req.entities)

    resolved = service.find_route_for_unit(req.x, req.y)
    if resolved is None:
        return RouteResponse()

    return RouteResponse(
        highlight_ids=sorted(resolved.highlight_ids),
        node_ids=resolved.node_ids,
        path=resolved.points,
        distance=resolved.distance,
    )
