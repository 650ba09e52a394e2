# pathfinding_lab/planning/planners/best_first.py
from typing import Optional, Tuple

from pathfinding_lab.types import Cell
from pathfinding_lab.map.base import MapBase
from pathfinding_lab.planning.frontiers import PriorityFrontier
from pathfinding_lab.planning.heuristics.base import Heuristic
from pathfinding_lab.planning.interfaces import IPlannerObserver
from pathfinding_lab.planning.planners.base import Pathfinder

class BestFirstPathfinder(Pathfinder):
    """
    基于代价的最佳优先搜索 (Dijkstra / A* / Weighted A* 共用)。

    OpenSet 的 key 为 (g + h, g)：先比 f，再偏向 g 更小的节点，最后按插入顺序。
    - ZeroHeuristic      -> Dijkstra
    - ManhattanHeuristic -> A*
    - WeightedHeuristic  -> Weighted A*

    找到更便宜的路径时直接重新入堆 (lazy decrease-key)，旧条目出队时丢弃。
    已关闭的节点不会重新打开。
    """

    name = "BestFirst"

    def __init__(self,
                 grid_map: MapBase,
                 heuristic: Heuristic,
                 observer: Optional[IPlannerObserver] = None):
        super().__init__(grid_map, observer)
        self.h_fn = heuristic

    def _make_frontier(self) -> PriorityFrontier:
        return PriorityFrontier()

    def _estimate(self, cell: Cell) -> float:
        return self.h_fn.estimate(cell, self._state.target)

    def _frontier_key(self, cost: float, h: float) -> Tuple:
        return (cost + h, cost)

    def _is_stale(self, cell: Cell, key: Tuple) -> bool:
        if cell in self._state.closed:
            return True
        # 入堆之后又找到了更便宜的路径
        return key[1] > self._state.cost[cell]

    def _visit(self, current: Cell, neighbor: Cell) -> bool:
        state = self._state
        new_g = state.cost[current] + self.STEP_COST
        if neighbor in state.cost and new_g >= state.cost[neighbor]:
            return False

        state.cost[neighbor] = new_g
        state.parent[neighbor] = current
        self._push(neighbor)
        return True
