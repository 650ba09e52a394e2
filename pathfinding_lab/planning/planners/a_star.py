# pathfinding_lab/planning/planners/a_star.py
from typing import Optional

from pathfinding_lab.map.base import MapBase
from pathfinding_lab.planning.heuristics import ManhattanHeuristic, WeightedHeuristic
from pathfinding_lab.planning.interfaces import IPlannerObserver
from pathfinding_lab.planning.planners.best_first import BestFirstPathfinder

class AStarPathfinder(BestFirstPathfinder):
    """
    针对 4-连通单位代价栅格的 A* 实现。

    f = g + h，h 为曼哈顿距离 (admissible & consistent)，
    解的长度与 Dijkstra 相同，但扩展的节点通常少得多。
    """

    name = "A*"

    def __init__(self, grid_map: MapBase, observer: Optional[IPlannerObserver] = None):
        super().__init__(grid_map, ManhattanHeuristic(), observer)


class WeightedAStarPathfinder(BestFirstPathfinder):
    """
    Weighted A* ("Strong A*")。

    f = g + w * h, w > 1。
    启发式被放大后不再 admissible：扩展更少、收敛更快，
    但解的代价只保证落在 [最优代价, w * 最优代价] 之间。
    """

    name = "Strong A*"

    def __init__(self,
                 grid_map: MapBase,
                 weight: float = 2.0,
                 observer: Optional[IPlannerObserver] = None):
        if weight <= 1.0:
            raise ValueError(f"Strong A* weight must be > 1, got {weight}")
        super().__init__(grid_map, WeightedHeuristic(ManhattanHeuristic(), weight), observer)
        self.weight = weight
