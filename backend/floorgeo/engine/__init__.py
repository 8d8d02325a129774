"""Floor-plan derived-geometry engine."""

from floorgeo.engine.context import GenerationContext, DrawingEntity, UnitLabel
from floorgeo.engine.pipeline import Pipeline, create_pipeline
from floorgeo.engine.region_grid import RegionGrid
from floorgeo.engine.registry import transform, Stage, get_registry
from floorgeo.engine.walk_graph import WalkGraph

__all__ = [
    "transform",
    "Stage",
    "get_registry",
    "GenerationContext",
    "DrawingEntity",
    "UnitLabel",
    "Pipeline",
    "create_pipeline",
    "RegionGrid",
    "WalkGraph",
]
