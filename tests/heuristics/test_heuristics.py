import pytest

from pathfinding_lab.planning.heuristics import (
    ZeroHeuristic,
    ManhattanHeuristic,
    WeightedHeuristic,
)


@pytest.mark.parametrize("current, goal, expected", [
    ((0, 0), (0, 0), 0.0),
    ((0, 0), (4, 4), 8.0),
    ((7, 10), (23, 10), 16.0),
    ((5, 2), (1, 6), 8.0),
])
def test_manhattan(current, goal, expected):
    assert ManhattanHeuristic().estimate(current, goal) == expected


def test_zero_is_always_zero():
    h = ZeroHeuristic()
    assert h.estimate((0, 0), (29, 20)) == 0.0
    assert h.estimate((3, 3), (3, 3)) == 0.0


def test_weighted_scales_base():
    h = WeightedHeuristic(ManhattanHeuristic(), 2.0)
    assert h.estimate((0, 0), (3, 4)) == 14.0
    assert h.weight == 2.0


def test_manhattan_is_consistent_on_grid():
    # h(a) <= 1 + h(b) 对任意相邻格子成立
    h = ManhattanHeuristic()
    goal = (6, 3)
    for x in range(10):
        for y in range(8):
            for dx, dy in ((0, -1), (1, 0), (0, 1), (-1, 0)):
                assert h.estimate((x, y), goal) <= 1 + h.estimate((x + dx, y + dy), goal)


@pytest.mark.parametrize("weight", [0.0, -1.0])
def test_weighted_rejects_non_positive(weight):
    with pytest.raises(ValueError):
        WeightedHeuristic(ManhattanHeuristic(), weight)
