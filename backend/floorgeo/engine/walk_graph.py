"""WalkGraph — walkway network and shortest routes to the nearest entrance.

Nodes come from circular markers, edges from straight segments whose
endpoints snap to the nearest marker. The graph is undirected and rebuilt
from scratch on every build.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import math
from collections.abc import Hashable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Union

from floorgeo.utils.geometry import Point, distance, path_length

logger = logging.getLogger(__name__)

# Markers smaller than this still snap endpoints within 2 × this radius.
DEFAULT_NODE_RADIUS = 2.0

# Snap tolerance = this factor × largest marker radius.
MATCH_TOLERANCE_FACTOR = 2.0

NodeId = Hashable


@dataclass(frozen=True)
class NodeMarker:
    """Tagged circular marker that becomes a graph node."""

    id: NodeId
    center: Point
    radius: float
    is_entrance: bool = False


@dataclass(frozen=True)
class EdgeCandidate:
    """Tagged straight segment that may become an edge."""

    id: NodeId
    start: Point
    end: Point


TaggedShape = Union[NodeMarker, EdgeCandidate]


@dataclass
class WalkNode:
    id: NodeId
    x: float
    y: float
    is_entrance: bool = False
    edge_ids: list[NodeId] = field(default_factory=list)

    @property
    def position(self) -> Point:
        return (self.x, self.y)


@dataclass
class WalkEdge:
    id: NodeId
    node_a: NodeId
    node_b: NodeId
    weight: float

    def other(self, node_id: NodeId) -> NodeId:
        return self.node_b if self.node_a == node_id else self.node_a


@dataclass
class EntranceRoute:
    """Resolved route from a start node to its nearest entrance."""

    node_ids: list[NodeId]
    points: list[Point]
    distance: float
    # Path nodes plus the edges joining them; filled in on request
    highlight_ids: set[NodeId] = field(default_factory=set)


class WalkGraph:
    """Undirected weighted walkway graph."""

    def __init__(self) -> None:
        self.nodes: dict[NodeId, WalkNode] = {}
        self.edges: dict[NodeId, WalkEdge] = {}
        self.match_tolerance: float = DEFAULT_NODE_RADIUS * MATCH_TOLERANCE_FACTOR

    def build_from_entities(self, shapes: Iterable[TaggedShape]) -> None:
        """Replace the graph with one built from tagged markers and segments."""
        self.nodes.clear()
        self.edges.clear()
        shapes = list(shapes)

        max_radius = DEFAULT_NODE_RADIUS
        for shape in shapes:
            if isinstance(shape, NodeMarker):
                x, y = shape.center
                self.nodes[shape.id] = WalkNode(shape.id, x, y, shape.is_entrance)
                max_radius = max(max_radius, shape.radius)

        self.match_tolerance = max_radius * MATCH_TOLERANCE_FACTOR

        for shape in shapes:
            if not isinstance(shape, EdgeCandidate):
                continue
            node_a = self.find_nearest_node(*shape.start, self.match_tolerance)
            node_b = self.find_nearest_node(*shape.end, self.match_tolerance)
            if node_a is None or node_b is None or node_a.id == node_b.id:
                continue

            edge = WalkEdge(shape.id, node_a.id, node_b.id, distance(node_a.position, node_b.position))
            self.edges[edge.id] = edge
            node_a.edge_ids.append(edge.id)
            node_b.edge_ids.append(edge.id)

        logger.debug(
            "WalkGraph built: %d nodes, %d edges (tolerance %.4g)",
            len(self.nodes),
            len(self.edges),
            self.match_tolerance,
        )

    def find_nearest_node(self, x: float, y: float, max_distance: float) -> WalkNode | None:
        """Nearest node strictly closer than ``max_distance``. Linear scan."""
        nearest: WalkNode | None = None
        best = max_distance
        for node in self.nodes.values():
            d = math.hypot(node.x - x, node.y - y)
            if d < best:
                best = d
                nearest = node
        return nearest

    def find_path_to_nearest_entrance(self, start_id: NodeId) -> list[NodeId] | None:
        """Dijkstra from ``start_id``, stopping at the first entrance popped.

        Returns node ids from start to entrance inclusive, or None when the
        start is unknown or no entrance is reachable.
        """
        start = self.nodes.get(start_id)
        if start is None:
            return None
        if start.is_entrance:
            return [start_id]

        dist: dict[NodeId, float] = {start_id: 0.0}
        prev: dict[NodeId, NodeId] = {}
        visited: set[NodeId] = set()
        # Counter breaks ties so node ids never get compared
        tie = itertools.count()
        queue: list[tuple[float, int, NodeId]] = [(0.0, next(tie), start_id)]
        found: NodeId | None = None

        while queue:
            d, _, current = heapq.heappop(queue)
            if current in visited:
                continue
            visited.add(current)

            node = self.nodes[current]
            if node.is_entrance:
                found = current
                break

            for edge_id in node.edge_ids:
                edge = self.edges.get(edge_id)
                if edge is None:
                    continue
                neighbor = edge.other(current)
                if neighbor in visited or neighbor not in self.nodes:
                    continue
                candidate = d + edge.weight
                if candidate < dist.get(neighbor, math.inf):
                    dist[neighbor] = candidate
                    prev[neighbor] = current
                    heapq.heappush(queue, (candidate, next(tie), neighbor))

        if found is None:
            return None

        path = [found]
        while path[-1] != start_id:
            path.append(prev[path[-1]])
        path.reverse()
        return path

    def find_path_coordinates_to_entrance(self, x: float, y: float, max_distance: float) -> EntranceRoute | None:
        """Snap (x, y) to the nearest node and route it to the nearest entrance."""
        nearest = self.find_nearest_node(x, y, max_distance)
        if nearest is None:
            return None

        node_ids = self.find_path_to_nearest_entrance(nearest.id)
        if node_ids is None:
            return None

        points = [self.nodes[node_id].position for node_id in node_ids]
        return EntranceRoute(node_ids, points, path_length(points))

    def get_edge_ids_for_path(self, node_ids: Sequence[NodeId]) -> list[NodeId]:
        """Edge ids joining consecutive path nodes, in either orientation."""
        edge_ids: list[NodeId] = []
        for a, b in zip(node_ids[:-1], node_ids[1:]):
            for edge in self.edges.values():
                if {edge.node_a, edge.node_b} == {a, b}:
                    edge_ids.append(edge.id)
                    break
        return edge_ids

    def get_all_ids_for_path(self, node_ids: Sequence[NodeId]) -> set[NodeId]:
        """Node and edge ids of a path, for highlighting."""
        return set(node_ids) | set(self.get_edge_ids_for_path(node_ids))
