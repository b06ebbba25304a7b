import numpy as np
import pytest

from puzzle_grid.src.core import Grid, Point
from puzzle_grid.src.utils.grid_utils import (
    grid_from_array,
    grid_from_lines,
    grid_to_array,
    load_grid,
    validate_grid,
)


def test_validate_grid_valid(sample_grid):
    assert validate_grid(sample_grid, expected_shape=(5, 4))


def test_validate_grid_shape_mismatch(sample_grid):
    assert not validate_grid(sample_grid, expected_shape=(4, 5))


def test_validate_grid_rejects_empty_and_foreign():
    assert not validate_grid(Grid())
    assert not validate_grid([[1, 2], [3, 4]])


def test_validate_grid_broken_invariant():
    grid = Grid.from_rows([[1, 2], [3, 4]])
    grid.elements.append(5)
    assert not validate_grid(grid)


def test_grid_from_lines():
    grid = grid_from_lines(["30373\n", "25512\n", "\n", "65332"], parse=int)
    assert grid.shape() == (3, 5)
    assert grid.get_column(0) == [3, 2, 6]
    assert grid.get_element(Point(4, 1)) == 2


def test_grid_from_lines_keeps_characters():
    grid = grid_from_lines(["#.", ".#"])
    assert grid.get_row(1) == [".", "#"]


def test_grid_from_lines_ragged():
    with pytest.raises(ValueError, match="Line 2"):
        grid_from_lines(["123", "12"])


def test_load_grid(tmp_path):
    path = tmp_path / "trees.txt"
    path.write_text("123\n456\n789\n", encoding="utf-8")
    grid = load_grid(path, parse=int)
    assert grid.get_inner_grid().elements == [5]


def test_numpy_conversion(sample_grid):
    arr = grid_to_array(sample_grid)
    assert arr.shape == (5, 4)
    assert arr[3, 0] == 99

    back = grid_from_array(arr)
    assert back == sample_grid
    assert back.shape() == (5, 4)
    assert isinstance(back.get_element(Point(0, 0)), int)


def test_grid_from_array_requires_2d():
    with pytest.raises(ValueError):
        grid_from_array(np.zeros(4))


def test_grid_from_array_rejects_zero_width():
    with pytest.raises(ValueError):
        grid_from_array(np.zeros((2, 0)))
