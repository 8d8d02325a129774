"""Tests for connected-component labeling and boundary detection."""

import numpy as np

from floorgeo.utils.morphology import (
    border_labels,
    boundary_cells,
    component_sizes,
    first_boundary_cell,
    label_regions,
)


def test_diagonal_cells_split_in_four_connectivity():
    grid = np.array([[1, 0], [0, 1]], dtype=bool)
    _, count4 = label_regions(grid)
    _, count8 = label_regions(grid, eight_connected=True)
    assert count4 == 2
    assert count8 == 1


def test_labels_follow_scan_order():
    grid = np.zeros((4, 6), dtype=bool)
    grid[0, 4] = True
    grid[2, 0] = True
    labels, count = label_regions(grid)
    assert count == 2
    assert labels[0, 4] == 1
    assert labels[2, 0] == 2


def test_border_labels():
    grid = np.zeros((5, 5), dtype=bool)
    grid[2, 2] = True
    grid[0, 1] = True
    labels, _ = label_regions(grid)
    assert border_labels(labels) == {int(labels[0, 1])}


def test_component_sizes():
    grid = np.zeros((3, 5), dtype=bool)
    grid[0, 0:3] = True
    grid[2, 4] = True
    labels, count = label_regions(grid)
    sizes = component_sizes(labels, count)
    assert list(sizes[1:]) == [3, 1]


def test_boundary_ignores_grid_edge():
    assert not boundary_cells(np.ones((3, 3), dtype=bool)).any()


def test_boundary_around_hole():
    mask = np.ones((3, 3), dtype=bool)
    mask[1, 1] = False
    assert boundary_cells(mask).sum() == 4  # only the orthogonal neighbors of the hole


def test_first_boundary_cell():
    mask = np.zeros((4, 5), dtype=bool)
    mask[1:3, 2:4] = True
    assert first_boundary_cell(mask) == (2, 1)
    assert first_boundary_cell(np.zeros((2, 2), dtype=bool)) is None
