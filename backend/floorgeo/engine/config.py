"""Generation configuration — grid resolution and walkway conventions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class GenerationConfig:
    """Knobs for the unit-area, background and routing generators."""

    # Cell size = max(extent width, extent height) / resolution_divisor
    resolution_divisor: float = 2000.0

    # Wall clusters smaller than this are stray geometry, not outline
    min_component_cells: int = 20

    # RDP tolerance in cells (1.0 = one cell)
    simplify_tolerance_cells: float = 1.0

    # CAD color indices for walkway markers: green = entrance, blue = regular
    entrance_color: int = 3
    regular_color: int = 5
