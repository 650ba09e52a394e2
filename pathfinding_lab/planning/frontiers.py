# pathfinding_lab/planning/frontiers.py
import heapq
from collections import deque
from typing import Deque, List, Tuple

from pathfinding_lab.types import Cell


class FIFOFrontier:
    """BFS 使用的先进先出队列"""
    def __init__(self):
        self._queue: Deque[Cell] = deque()

    def push(self, cell: Cell, key: Tuple = ()):
        self._queue.append(cell)

    def pop(self) -> Tuple[Tuple, Cell]:
        return (), self._queue.popleft()

    def __len__(self): return len(self._queue)


class PriorityFrontier:
    """
    最小堆，key 为元组 (例如 (f, g))。
    同 key 时按插入顺序出队 (先发现者优先)，保证结果确定。
    不支持 decrease-key：更新代价时直接重新插入，旧条目在出队时由调用方判定为过期。
    """
    def __init__(self):
        self._heap: List[Tuple[Tuple, int, Cell]] = []
        self._counter = 0  # tie-breaker for stability

    def push(self, cell: Cell, key: Tuple = ()):
        self._counter += 1
        heapq.heappush(self._heap, (key, self._counter, cell))

    def pop(self) -> Tuple[Tuple, Cell]:
        key, _, cell = heapq.heappop(self._heap)
        return key, cell

    def __len__(self): return len(self._heap)
