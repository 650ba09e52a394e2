# pathfinding_lab/planning/planners/dijkstra.py
from typing import Optional

from pathfinding_lab.map.base import MapBase
from pathfinding_lab.planning.heuristics import ZeroHeuristic
from pathfinding_lab.planning.interfaces import IPlannerObserver
from pathfinding_lab.planning.planners.best_first import BestFirstPathfinder

class DijkstraPathfinder(BestFirstPathfinder):
    """
    Dijkstra 算法：按累计代价 g 升序扩展，同代价按发现顺序。
    目标第一次出队时的 g 即最短代价。
    """

    name = "Dijkstra"

    def __init__(self, grid_map: MapBase, observer: Optional[IPlannerObserver] = None):
        super().__init__(grid_map, ZeroHeuristic(), observer)
