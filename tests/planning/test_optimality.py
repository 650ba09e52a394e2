# tests/planning/test_optimality.py
import random
import pytest

from pathfinding_lab.types import SearchStatus
from pathfinding_lab.map.grid_map import GridMap
from pathfinding_lab.map.generator import MapGenerator
from pathfinding_lab.planning.planners import PathfinderKind, create_pathfinder

WEIGHT = 2.0


def random_scenario(seed, width=15, height=12, density=0.3):
    """随机地图 + 随机起终点 (不保证连通)"""
    rng = random.Random(seed)
    cells = [(x, y) for x in range(width) for y in range(height)]
    start, target = rng.sample(cells, 2)

    grid_map = GridMap(width, height)
    MapGenerator(obstacle_density=density, carve_path=False, seed=seed).generate(grid_map, start, target)
    return grid_map, start, target


def solve(kind, grid_map, start, target):
    pathfinder = create_pathfinder(kind, grid_map, weight=WEIGHT)
    pathfinder.initialize(start, target)
    limit = grid_map.width * grid_map.height + 1
    for _ in range(limit):
        if pathfinder.is_terminal:
            break
        pathfinder.step()
    assert pathfinder.is_terminal
    return pathfinder


@pytest.mark.parametrize("seed", range(40))
def test_costs_agree_across_algorithms(seed):
    grid_map, start, target = random_scenario(seed)
    results = {kind: solve(kind, grid_map, start, target) for kind in PathfinderKind}

    if not grid_map.is_reachable(start, target):
        for pathfinder in results.values():
            assert pathfinder.status == SearchStatus.UNREACHABLE
            assert pathfinder.get_solution() is None
        return

    lengths = {kind: len(pf.get_solution()) - 1 for kind, pf in results.items()}
    optimal = lengths[PathfinderKind.DIJKSTRA]

    # BFS / Dijkstra / A* 都是最优的
    assert lengths[PathfinderKind.BFS] == optimal
    assert lengths[PathfinderKind.A_STAR] == optimal
    # Strong A*: 不低于最优，且不超过 weight 倍
    assert optimal <= lengths[PathfinderKind.STRONG_A_STAR] <= WEIGHT * optimal

    for kind, pathfinder in results.items():
        assert pathfinder.solution_cost == lengths[kind]


@pytest.mark.parametrize("seed", range(10))
def test_astar_never_expands_more_than_dijkstra(seed):
    grid_map = GridMap(20, 20)
    MapGenerator(obstacle_density=0.25, carve_path=True, seed=seed).generate(grid_map, (1, 1), (18, 18))

    dijkstra = solve(PathfinderKind.DIJKSTRA, grid_map, (1, 1), (18, 18))
    a_star = solve(PathfinderKind.A_STAR, grid_map, (1, 1), (18, 18))

    assert dijkstra.status == SearchStatus.SOLVED
    assert a_star.solution_cost == dijkstra.solution_cost
    assert a_star.expanded_count <= dijkstra.expanded_count
