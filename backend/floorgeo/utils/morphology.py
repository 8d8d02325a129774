"""Connected-component labeling and boundary detection on binary grids.

Grids are (height, width) boolean arrays indexed [row, col] = [gy, gx].
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray
from scipy import ndimage

# 4-connected (orthogonal) and 8-connected structuring elements.
CROSS_STRUCTURE = ndimage.generate_binary_structure(2, 1)
SQUARE_STRUCTURE = ndimage.generate_binary_structure(2, 2)


def label_regions(grid: NDArray[np.bool_], *, eight_connected: bool = False) -> tuple[NDArray[np.int32], int]:
    """Label connected True cells. Labels are assigned in row-major scan order.

    Returns (labels, count); 0 marks background.
    """
    structure = SQUARE_STRUCTURE if eight_connected else CROSS_STRUCTURE
    labels, count = ndimage.label(grid, structure=structure)
    return labels.astype(np.int32, copy=False), int(count)


def border_labels(labels: NDArray[np.int32]) -> set[int]:
    """Labels of every component that touches the outermost ring of cells."""
    edge = np.concatenate([labels[0, :], labels[-1, :], labels[:, 0], labels[:, -1]])
    return {int(v) for v in np.unique(edge) if v > 0}


def component_sizes(labels: NDArray[np.int32], count: int) -> NDArray[np.int64]:
    """Cell count per label, indexed by label (index 0 is background)."""
    return np.bincount(labels.ravel(), minlength=count + 1)


def boundary_cells(mask: NDArray[np.bool_]) -> NDArray[np.bool_]:
    """Mask cells with at least one unset in-grid 4-neighbor.

    Cells on the grid edge are not boundary cells by virtue of the edge alone.
    """
    empty = ~mask
    has_empty = np.zeros_like(mask)
    has_empty[:, 1:] |= empty[:, :-1]   # left
    has_empty[:, :-1] |= empty[:, 1:]   # right
    has_empty[1:, :] |= empty[:-1, :]   # above (lower gy)
    has_empty[:-1, :] |= empty[1:, :]   # below (higher gy)
    return mask & has_empty


def first_boundary_cell(mask: NDArray[np.bool_]) -> tuple[int, int] | None:
    """First boundary cell in row-major order as (gx, gy), or None."""
    hits = np.flatnonzero(boundary_cells(mask))
    if hits.size == 0:
        return None
    gy, gx = divmod(int(hits[0]), mask.shape[1])
    return gx, gy
