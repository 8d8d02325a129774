"""GenerationContext — the single mutable state object flowing through all transforms.

Inputs (entities, unit labels, hidden layers) are set by the caller;
every other field is populated by a transform.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from shapely.geometry import Polygon

from floorgeo.engine import layer_names
from floorgeo.engine.config import GenerationConfig
from floorgeo.engine.region_grid import RegionGrid
from floorgeo.engine.shapes import Shape
from floorgeo.engine.walk_graph import NodeId, WalkGraph
from floorgeo.utils.geometry import Bounds, Point


@dataclass
class DrawingEntity:
    """One piece of drawing geometry on a named CAD layer."""

    handle: int
    layer: str
    shape: Shape
    # CAD color index (e.g. 3 = green); None = by layer
    color: int | None = None


@dataclass
class UnitLabel:
    """A unit-number text whose insert point seeds a unit area."""

    handle: int
    text: str
    x: float
    y: float
    layer: str = layer_names.UNIT_NUMBERS


@dataclass
class UnitArea:
    """Closed polygon generated around a unit label."""

    label_handle: int
    unit_number: str
    points: list[Point]

    @property
    def polygon(self) -> Polygon:
        return Polygon(self.points)

    @property
    def area(self) -> float:
        return float(self.polygon.area)


@dataclass
class UnitRoute:
    """Walking route from a unit label to the nearest entrance."""

    label_handle: int
    unit_number: str
    # Generated unit area enclosing the label, if any
    area: UnitArea | None = None
    node_ids: list[NodeId] = field(default_factory=list)
    path: list[Point] = field(default_factory=list)
    distance: float = 0.0
    highlight_ids: set[NodeId] = field(default_factory=set)

    @property
    def routed(self) -> bool:
        return bool(self.node_ids)


@dataclass
class GenerationContext:
    """Shared state flowing through the generation pipeline."""

    # --- Inputs ---
    entities: list[DrawingEntity] = field(default_factory=list)
    unit_labels: list[UnitLabel] = field(default_factory=list)
    hidden_layers: set[str] = field(default_factory=set)
    config: GenerationConfig = field(default_factory=GenerationConfig)

    # --- Stage 0: rasterization ---
    extents: Bounds | None = None
    cell_size: float = 0.0
    wall_grid: RegionGrid | None = None
    background_grid: RegionGrid | None = None
    skipped_entities: int = 0

    # --- Stage 1: regions ---
    unit_areas: list[UnitArea] = field(default_factory=list)
    failed_unit_areas: int = 0
    background_contours: list[list[Point]] = field(default_factory=list)
    failed_background_contours: int = 0

    # --- Stage 2: routing ---
    walk_graph: WalkGraph | None = None
    unit_routes: list[UnitRoute] = field(default_factory=list)

    # --- Pipeline metadata ---
    completed_transforms: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)

    def visible_entities(self) -> list[DrawingEntity]:
        return [e for e in self.entities if e.layer not in self.hidden_layers]

    def entities_on(self, layer: str) -> list[DrawingEntity]:
        return [e for e in self.visible_entities() if e.layer == layer]

    def unit_number_labels(self) -> list[UnitLabel]:
        # Hiding the layer declutters the view; the labels still seed areas
        return [label for label in self.unit_labels if label.layer == layer_names.UNIT_NUMBERS]
