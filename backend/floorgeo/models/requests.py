"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from floorgeo.engine import layer_names
from floorgeo.engine.context import DrawingEntity, UnitLabel
from floorgeo.models.shapes import ShapeModel


class EntityModel(BaseModel):
    handle: int = Field(..., description="Unique entity handle")
    layer: str = Field(..., description="CAD layer name")
    color: int | None = Field(default=None, description="CAD color index; null = by layer")
    shape: ShapeModel

    def to_entity(self) -> DrawingEntity:
        return DrawingEntity(self.handle, self.layer, self.shape.to_shape(), self.color)


class UnitLabelModel(BaseModel):
    handle: int
    text: str = Field(..., description="Unit number")
    x: float = Field(..., description="Insert point x")
    y: float = Field(..., description="Insert point y")
    layer: str = layer_names.UNIT_NUMBERS

    def to_label(self) -> UnitLabel:
        return UnitLabel(self.handle, self.text, self.x, self.y, self.layer)


class GenerateRequest(BaseModel):
    entities: list[EntityModel] = Field(default_factory=list, description="Drawing geometry")
    unit_labels: list[UnitLabelModel] = Field(default_factory=list)
    hidden_layers: list[str] = Field(
        default_factory=list,
        description="Layers to leave out of every generator",
    )


class RouteRequest(BaseModel):
    entities: list[EntityModel] = Field(..., description="Drawing geometry; only walkway-layer entities are used")
    x: float = Field(..., description="Query point x")
    y: float = Field(..., description="Query point y")
