# pathfinding_lab/types.py
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Optional, Tuple

# (column, row)，行号向下增长 (屏幕坐标系)
Cell = Tuple[int, int]


class CellType(IntEnum):
    """
    栅格中存储的格子取值。
    约定沿用 0 表示空闲，1 表示障碍物；EXPLORED / SOLUTION 只由 Driver 写入，
    对搜索而言等同于 EMPTY。
    """
    EMPTY = 0
    WALL = 1
    START = 2
    TARGET = 3
    EXPLORED = 4
    SOLUTION = 5


class SearchStatus(Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    SOLVED = "solved"
    UNREACHABLE = "unreachable"

    @property
    def is_terminal(self) -> bool:
        return self in (SearchStatus.SOLVED, SearchStatus.UNREACHABLE)


@dataclass
class Node:
    """搜索树节点"""
    cell: Cell
    parent: Optional[Cell]
    cost: float = 0.0
    priority: float = 0.0

    # 方便访问 x, y (观察者里常用 node.x)
    @property
    def x(self): return self.cell[0]

    @property
    def y(self): return self.cell[1]
