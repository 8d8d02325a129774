"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from floorgeo.engine.context import GenerationContext, UnitArea, UnitRoute

PointModel = tuple[float, float]


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    transforms_registered: int = 0


class UnitAreaResponse(BaseModel):
    label_handle: int
    unit_number: str
    points: list[PointModel]
    area: float

    @classmethod
    def from_area(cls, area: UnitArea) -> UnitAreaResponse:
        return cls(
            label_handle=area.label_handle,
            unit_number=area.unit_number,
            points=area.points,
            area=area.area,
        )


class UnitRouteResponse(BaseModel):
    label_handle: int
    unit_number: str
    enclosed: bool = Field(default=False, description="Whether a generated unit area contains the label")
    node_ids: list[int] = Field(default_factory=list)
    path: list[PointModel] = Field(default_factory=list)
    distance: float | None = None
    highlight_ids: list[int] = Field(default_factory=list)

    @classmethod
    def from_route(cls, route: UnitRoute) -> UnitRouteResponse:
        return cls(
            label_handle=route.label_handle,
            unit_number=route.unit_number,
            enclosed=route.area is not None,
            node_ids=route.node_ids,
            path=route.path,
            distance=route.distance if route.routed else None,
            highlight_ids=sorted(route.highlight_ids),
        )


class GenerateResponse(BaseModel):
    unit_areas: list[UnitAreaResponse] = Field(default_factory=list)
    background_contours: list[list[PointModel]] = Field(default_factory=list)
    unit_routes: list[UnitRouteResponse] = Field(default_factory=list)
    generated_unit_areas: int = 0
    failed_unit_areas: int = 0
    generated_background_contours: int = 0
    failed_background_contours: int = 0
    skipped_entities: int = 0
    processing_time_ms: float = 0.0
    transforms_completed: int = 0
    transforms_failed: int = 0
    errors: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_context(cls, ctx: GenerationContext, elapsed_ms: float) -> GenerateResponse:
        return cls(
            unit_areas=[UnitAreaResponse.from_area(a) for a in ctx.unit_areas],
            background_contours=ctx.background_contours,
            unit_routes=[UnitRouteResponse.from_route(r) for r in ctx.unit_routes],
            generated_unit_areas=len(ctx.unit_areas),
            failed_unit_areas=ctx.failed_unit_areas,
            generated_background_contours=len(ctx.background_contours),
            failed_background_contours=ctx.failed_background_contours,
            skipped_entities=ctx.skipped_entities,
            processing_time_ms=round(elapsed_ms, 1),
            transforms_completed=len(ctx.completed_transforms),
            transforms_failed=len(ctx.errors),
            errors=ctx.errors,
        )


class RouteResponse(BaseModel):
    highlight_ids: list[int] = Field(default_factory=list)
    node_ids: list[int] = Field(default_factory=list)
    path: list[PointModel] = Field(default_factory=list)
    distance: float | None = Field(default=None, description="Total path length; null when no route")
