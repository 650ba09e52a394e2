# pathfinding_lab/planning/planners/bfs.py
from pathfinding_lab.types import Cell
from pathfinding_lab.planning.frontiers import FIFOFrontier
from pathfinding_lab.planning.planners.base import Pathfinder

class BreadthFirstPathfinder(Pathfinder):
    """
    广度优先搜索。
    所有边代价相同，第一次发现某格子时的深度就是最短距离，
    因此 "seen" 标记在入队时设置，已发现的格子永不更新，也不会重复入队。
    """

    name = "BFS"

    def _make_frontier(self) -> FIFOFrontier:
        return FIFOFrontier()

    def _visit(self, current: Cell, neighbor: Cell) -> bool:
        state = self._state
        if state.is_seen(neighbor):
            return False
        state.parent[neighbor] = current
        state.cost[neighbor] = state.cost[current] + self.STEP_COST
        self._push(neighbor)
        return True
