"""Wire models for drawing geometry, discriminated on ``kind``."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from floorgeo.engine.shapes import Arc, Circle, Polyline, PolylineVertex, Segment, Shape

PointModel = tuple[float, float]


class SegmentModel(BaseModel):
    kind: Literal["segment"] = "segment"
    start: PointModel
    end: PointModel

    def to_shape(self) -> Shape:
        return Segment(self.start, self.end)


class ArcModel(BaseModel):
    kind: Literal["arc"] = "arc"
    center: PointModel
    radius: float = Field(..., ge=0, description="Arc radius in drawing units")
    start_angle: float = Field(..., description="Start angle in radians, counter-clockwise")
    end_angle: float = Field(..., description="End angle in radians, counter-clockwise")

    def to_shape(self) -> Shape:
        return Arc(self.center, self.radius, self.start_angle, self.end_angle)


class CircleModel(BaseModel):
    kind: Literal["circle"] = "circle"
    center: PointModel
    radius: float = Field(..., ge=0)

    def to_shape(self) -> Shape:
        return Circle(self.center, self.radius)


class PolylineVertexModel(BaseModel):
    location: PointModel
    bulge: float = Field(default=0.0, description="tan(sweep / 4) of the arc to the next vertex; 0 = straight")


class PolylineModel(BaseModel):
    kind: Literal["polyline"] = "polyline"
    vertices: list[PolylineVertexModel] = Field(default_factory=list)
    closed: bool = False

    def to_shape(self) -> Shape:
        return Polyline(
            tuple(PolylineVertex(v.location, v.bulge) for v in self.vertices),
            self.closed,
        )


ShapeModel = Annotated[
    Union[SegmentModel, ArcModel, CircleModel, PolylineModel],
    Field(discriminator="kind"),
]
