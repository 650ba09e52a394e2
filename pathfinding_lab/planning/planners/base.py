# pathfinding_lab/planning/planners/base.py
from abc import ABC, abstractmethod
from typing import FrozenSet, List, Optional, Tuple, Union

from pathfinding_lab.types import Cell, Node, SearchStatus
from pathfinding_lab.map.base import MapBase
from pathfinding_lab.planning.frontiers import FIFOFrontier, PriorityFrontier
from pathfinding_lab.planning.interfaces import IPlannerObserver
from pathfinding_lab.planning.search_state import SearchState
from pathfinding_lab.visualization.observers import EfficientObserver

class Pathfinder(ABC):
    """
    所有逐步搜索算法的抽象基类

    与一次性 plan() 不同，搜索被拆成可恢复的单步：
    1. initialize(start, target): 重置状态，把起点放入 frontier。
    2. step(): 恰好扩展一个节点，返回本次需要标记为 "已探索" 的格子。
    3. get_solution(): 找到目标后返回起点到终点的路径 (含两端)，否则 None。

    子类只决定 frontier 的类型、出队顺序以及如何接纳一个邻居。
    """

    name = "Pathfinder"

    # 固定的邻居顺序: 上、右、下、左 (行号向下增长)
    NEIGHBOR_OFFSETS = ((0, -1), (1, 0), (0, 1), (-1, 0))
    STEP_COST = 1.0

    def __init__(self, grid_map: MapBase, observer: Optional[IPlannerObserver] = None):
        self.grid_map = grid_map
        self.observer = observer if observer is not None else EfficientObserver()
        self._state: Optional[SearchState] = None

    # ------------------------------------------------------------------
    # 对外接口
    # ------------------------------------------------------------------

    def initialize(self, start: Cell, target: Cell):
        state = SearchState(start=start, target=target, frontier=self._make_frontier())
        self._state = state

        self.observer.set_map_info(self.grid_map)
        self.observer.log(f"[{self.name}] Initialize", payload={'start': start, 'target': target})

        # 起终点合法性由调用方保证，这里只做防御：记录错误并直接进入终止态
        if not (self.grid_map.is_traversable(start) and self.grid_map.is_traversable(target)):
            self.observer.log(f"[{self.name}] Start or target is out of bounds or blocked.", level='ERROR',
                              payload={'start': start, 'target': target})
            state.status = SearchStatus.UNREACHABLE
            return

        state.parent[start] = None
        state.cost[start] = 0.0
        self._push(start)

    def step(self) -> List[Cell]:
        state = self._state
        if state is None:
            self.observer.log(f"[{self.name}] step() called before initialize()", level='WARN')
            return []
        if state.status.is_terminal:
            return []

        current = self._pop_next()
        if current is None:
            self._mark_unreachable()
            return []

        # A. 关闭当前节点
        state.open_cells.discard(current)
        state.closed.add(current)
        state.expanded_count += 1
        self.observer.record_current_expansion(current)

        explored = [] if current == state.start else [current]

        # B. 终止条件: 目标出队
        if current == state.target:
            state.solution = self._reconstruct_path(current)
            state.status = SearchStatus.SOLVED
            self.observer.record_solution(state.solution)
            self.observer.log(f"[{self.name}] Target reached.",
                              payload={'expanded': state.expanded_count, 'length': len(state.solution) - 1})
            return explored

        # C. 扩展邻居
        for neighbor in self._neighbors(current):
            if neighbor in state.closed:
                continue
            if self._visit(current, neighbor):
                explored.append(neighbor)

        if not state.open_cells:
            self._mark_unreachable()

        return explored

    def get_solution(self) -> Optional[List[Cell]]:
        if self._state is None or self._state.solution is None:
            return None
        return list(self._state.solution)

    @property
    def status(self) -> SearchStatus:
        if self._state is None:
            return SearchStatus.NOT_STARTED
        return self._state.status

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal

    @property
    def solution_cost(self) -> Optional[float]:
        if self.status != SearchStatus.SOLVED:
            return None
        return self._state.cost[self._state.target]

    @property
    def expanded_count(self) -> int:
        return self._state.expanded_count if self._state else 0

    @property
    def frontier_size(self) -> int:
        return len(self._state.open_cells) if self._state else 0

    @property
    def closed(self) -> FrozenSet[Cell]:
        return frozenset(self._state.closed) if self._state else frozenset()

    def __str__(self):
        return self.name

    def __repr__(self):
        return f"{type(self).__name__}(status={self.status.value}, expanded={self.expanded_count})"

    # ------------------------------------------------------------------
    # 子类实现
    # ------------------------------------------------------------------

    @abstractmethod
    def _make_frontier(self) -> Union[FIFOFrontier, PriorityFrontier]:
        pass

    @abstractmethod
    def _visit(self, current: Cell, neighbor: Cell) -> bool:
        """
        处理一个未关闭且可通行的邻居。
        :return: 邻居被加入 frontier 或其代价被更新时返回 True
        """
        pass

    def _estimate(self, cell: Cell) -> float:
        """启发值 h，默认 0"""
        return 0.0

    def _frontier_key(self, cost: float, h: float) -> Tuple:
        return ()

    def _is_stale(self, cell: Cell, key: Tuple) -> bool:
        return cell in self._state.closed

    # ------------------------------------------------------------------
    # 公共辅助
    # ------------------------------------------------------------------

    def _push(self, cell: Cell):
        state = self._state
        cost = state.cost[cell]
        h = self._estimate(cell)
        state.frontier.push(cell, self._frontier_key(cost, h))
        state.open_cells.add(cell)
        node = Node(cell, state.parent.get(cell), cost, cost + h)
        self.observer.record_open_set_node(node, node.priority, h)

    def _pop_next(self) -> Optional[Cell]:
        """弹出下一个有效节点，过期条目直接丢弃 (不计为一次扩展)"""
        frontier = self._state.frontier
        while len(frontier) > 0:
            key, cell = frontier.pop()
            if self._is_stale(cell, key):
                continue
            return cell
        return None

    def _neighbors(self, cell: Cell) -> List[Cell]:
        """4-连通邻居，越界和墙体直接跳过"""
        x, y = cell
        out = []
        for dx, dy in self.NEIGHBOR_OFFSETS:
            neighbor = (x + dx, y + dy)
            if self.grid_map.is_traversable(neighbor):
                out.append(neighbor)
        return out

    def _reconstruct_path(self, end: Cell) -> List[Cell]:
        """沿 parent 回溯并反转"""
        path = []
        current = end
        while current is not None:
            path.append(current)
            current = self._state.parent.get(current)
        return path[::-1]

    def _mark_unreachable(self):
        self._state.status = SearchStatus.UNREACHABLE
        self.observer.log(f"[{self.name}] Open set is empty, no path found.",
                          payload={'expanded': self._state.expanded_count})
