# pathfinding_lab/planning/planners/factory.py
from enum import Enum
from typing import Optional

from pathfinding_lab.map.base import MapBase
from pathfinding_lab.planning.interfaces import IPlannerObserver
from pathfinding_lab.planning.planners.base import Pathfinder
from pathfinding_lab.planning.planners.bfs import BreadthFirstPathfinder
from pathfinding_lab.planning.planners.dijkstra import DijkstraPathfinder
from pathfinding_lab.planning.planners.a_star import AStarPathfinder, WeightedAStarPathfinder


class PathfinderKind(Enum):
    BFS = "BFS"
    DIJKSTRA = "Dijkstra"
    A_STAR = "A*"
    STRONG_A_STAR = "Strong A*"


def create_pathfinder(kind,
                      grid_map: MapBase,
                      observer: Optional[IPlannerObserver] = None,
                      weight: Optional[float] = None) -> Pathfinder:
    """
    按名字 (或 PathfinderKind) 构造算法实例。
    weight 只对 Strong A* 生效，缺省时使用 WeightedAStarPathfinder 的默认值。
    """
    try:
        kind = PathfinderKind(kind)
    except ValueError:
        raise ValueError(f"Unknown algorithm: {kind}") from None

    if kind == PathfinderKind.BFS:
        return BreadthFirstPathfinder(grid_map, observer)
    if kind == PathfinderKind.DIJKSTRA:
        return DijkstraPathfinder(grid_map, observer)
    if kind == PathfinderKind.A_STAR:
        return AStarPathfinder(grid_map, observer)
    if weight is None:
        return WeightedAStarPathfinder(grid_map, observer=observer)
    return WeightedAStarPathfinder(grid_map, weight=weight, observer=observer)
