"""Walkway service — owns the WalkGraph and answers "route this unit" queries."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from floorgeo.engine import layer_names
from floorgeo.engine.config import GenerationConfig
from floorgeo.engine.context import DrawingEntity
from floorgeo.engine.shapes import Circle, Segment
from floorgeo.engine.walk_graph import EdgeCandidate, EntranceRoute, NodeMarker, TaggedShape, WalkGraph
from floorgeo.utils.geometry import points_bounds

logger = logging.getLogger(__name__)

# Search radius = 3 × mean edge length when the graph has edges.
_EDGE_RADIUS_FACTOR = 3.0

# Edgeless graphs: 10% of the node spread, but never below 50 drawing units.
_SPAN_RADIUS_FRACTION = 0.1
_MIN_SPAN_RADIUS = 50.0


def walkway_shapes(entities: Iterable[DrawingEntity], config: GenerationConfig | None = None) -> list[TaggedShape]:
    """Tag walkway-layer circles as nodes and segments as edge candidates."""
    config = config or GenerationConfig()
    tagged: list[TaggedShape] = []
    for entity in entities:
        if entity.layer != layer_names.WALKWAYS:
            continue
        match entity.shape:
            case Circle(center=center, radius=radius):
                tagged.append(
                    NodeMarker(entity.handle, center, radius, is_entrance=entity.color == config.entrance_color)
                )
            case Segment(start=start, end=end):
                tagged.append(EdgeCandidate(entity.handle, start, end))
    return tagged


def toggle_entrance_color(color: int | None, config: GenerationConfig | None = None) -> int:
    """Flip a marker between the entrance and regular colors."""
    config = config or GenerationConfig()
    return config.regular_color if color == config.entrance_color else config.entrance_color


class WalkwayService:
    """Rebuilds the walkway graph and resolves routes for unit positions."""

    def __init__(self, config: GenerationConfig | None = None, graph: WalkGraph | None = None) -> None:
        self.config = config or GenerationConfig()
        self.graph = graph if graph is not None else WalkGraph()

    def rebuild_graph(self, entities: Iterable[DrawingEntity]) -> None:
        self.graph.build_from_entities(walkway_shapes(entities, self.config))
        logger.info(
            "Walkway graph rebuilt: %d nodes, %d edges",
            len(self.graph.nodes),
            len(self.graph.edges),
        )

    def compute_max_node_distance(self) -> float:
        """How far from a unit the nearest walkway node may be."""
        nodes = self.graph.nodes
        if len(nodes) < 2:
            return math.inf

        if self.graph.edges:
            mean_weight = sum(e.weight for e in self.graph.edges.values()) / len(self.graph.edges)
            return mean_weight * _EDGE_RADIUS_FACTOR

        xmin, ymin, xmax, ymax = points_bounds([n.position for n in nodes.values()])
        span = max(xmax - xmin, ymax - ymin)
        return max(span * _SPAN_RADIUS_FRACTION, _MIN_SPAN_RADIUS)

    def find_route_for_unit(self, x: float, y: float, max_distance: float | None = None) -> EntranceRoute | None:
        """Route from (x, y) to the nearest entrance, with its highlight ids.

        ``max_distance`` defaults to the search-radius heuristic; pass it in
        when routing many points against the same graph.
        """
        if not self.graph.nodes:
            return None
        if max_distance is None:
            max_distance = self.compute_max_node_distance()
        route = self.graph.find_path_coordinates_to_entrance(x, y, max_distance)
        if route is None:
            return None
        route.highlight_ids = self.graph.get_all_ids_for_path(route.node_ids)
        return route
