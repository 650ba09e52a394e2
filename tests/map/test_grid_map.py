import pytest
import numpy as np

from pathfinding_lab.types import CellType
from pathfinding_lab.map.grid_map import GridMap


def test_new_map_is_empty():
    grid_map = GridMap(6, 4)
    assert grid_map.width == 6
    assert grid_map.height == 4
    assert grid_map.data.shape == (4, 6)  # [y, x]
    assert np.all(grid_map.data == CellType.EMPTY)


@pytest.mark.parametrize("width, height", [(0, 5), (5, 0), (-1, 3)])
def test_invalid_size(width, height):
    with pytest.raises(ValueError):
        GridMap(width, height)


def test_from_strings_round_trip():
    rows = [
        "S.#",
        ".*o",
        "#.T",
    ]
    grid_map = GridMap.from_strings(rows)
    assert grid_map.get((0, 0)) == CellType.START
    assert grid_map.get((2, 0)) == CellType.WALL
    assert grid_map.get((1, 1)) == CellType.EXPLORED
    assert grid_map.get((2, 2)) == CellType.TARGET
    assert grid_map.to_strings() == rows


def test_from_strings_errors():
    with pytest.raises(ValueError):
        GridMap.from_strings([])
    with pytest.raises(ValueError):
        GridMap.from_strings(["...", ".."])
    with pytest.raises(ValueError):
        GridMap.from_strings(["..x"])


def test_classify_hides_marks():
    grid_map = GridMap.from_strings(["*o#"])
    assert grid_map.classify((0, 0)) == CellType.EMPTY
    assert grid_map.classify((1, 0)) == CellType.EMPTY
    assert grid_map.classify((2, 0)) == CellType.WALL


def test_bounds_and_traversability():
    grid_map = GridMap.from_strings([
        ".#",
        "..",
    ])
    assert grid_map.in_bounds((1, 1))
    assert not grid_map.in_bounds((2, 0))
    assert not grid_map.in_bounds((0, -1))

    assert grid_map.is_traversable((0, 0))
    assert not grid_map.is_traversable((1, 0))
    assert not grid_map.is_traversable((5, 5))

    with pytest.raises(IndexError):
        grid_map.get((2, 2))
    with pytest.raises(IndexError):
        grid_map.set((2, 2), CellType.WALL)


def test_find_and_clear_marks():
    grid_map = GridMap.from_strings([
        "S**",
        "#oT",
    ])
    assert grid_map.find(CellType.START) == (0, 0)
    assert grid_map.find(CellType.TARGET) == (2, 1)
    assert grid_map.find(CellType.WALL) == (0, 1)

    grid_map.clear_marks()
    assert grid_map.to_strings() == ["S..", "#.T"]
    assert grid_map.find(CellType.EXPLORED) is None
    assert grid_map.cells_of(CellType.EMPTY) == [(1, 0), (2, 0), (1, 1)]


def test_reachability():
    grid_map = GridMap.from_strings([
        "..#..",
        "..#..",
        "..#..",
    ])
    labels, num = grid_map.component_labels()
    assert num == 2
    assert labels[0, 2] == 0  # 墙

    assert grid_map.is_reachable((0, 0), (1, 2))
    assert not grid_map.is_reachable((0, 0), (4, 0))
    assert not grid_map.is_reachable((0, 0), (2, 0))

    # 对角相邻不算连通
    diagonal = GridMap.from_strings([
        ".#",
        "#.",
    ])
    assert not diagonal.is_reachable((0, 0), (1, 1))


def test_repr():
    assert repr(GridMap(3, 4)) == "GridMap(3x4)"
