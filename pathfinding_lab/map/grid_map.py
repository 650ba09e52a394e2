# pathfinding_lab/map/grid_map.py
import numpy as np
from typing import Iterable, List, Optional, Tuple
from scipy.ndimage import label

from .base import MapBase
from pathfinding_lab.types import Cell, CellType

# ASCII 地图字符 <-> CellType，主要用于测试和实验脚本
_CHAR_TO_TYPE = {
    '.': CellType.EMPTY,
    '#': CellType.WALL,
    'S': CellType.START,
    'T': CellType.TARGET,
    '*': CellType.EXPLORED,
    'o': CellType.SOLUTION,
}
_TYPE_TO_CHAR = {v: k for k, v in _CHAR_TO_TYPE.items()}


class GridMap(MapBase):
    def __init__(self, width: int, height: int):
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid grid size: {width}x{height}")
        self._width = width
        self._height = height
        self._grid = np.zeros((height, width), dtype=np.int8)  # 初始化全 0 (空闲) 矩阵，类型用 int8 节省内存

    @classmethod
    def from_strings(cls, rows: Iterable[str]) -> "GridMap":
        """
        由字符画构建地图:
            '.' 空闲  '#' 墙  'S' 起点  'T' 终点
        """
        rows = [r for r in rows]
        if not rows:
            raise ValueError("Empty map description")
        width = len(rows[0])
        if any(len(r) != width for r in rows):
            raise ValueError("All rows must have the same length")

        grid_map = cls(width, len(rows))
        for y, row in enumerate(rows):
            for x, ch in enumerate(row):
                if ch not in _CHAR_TO_TYPE:
                    raise ValueError(f"Unknown map character {ch!r} at {(x, y)}")
                grid_map._grid[y, x] = _CHAR_TO_TYPE[ch]
        return grid_map

    @property
    def data(self) -> np.ndarray:
        return self._grid

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return (0 <= x < self._width) and (0 <= y < self._height)

    def get(self, cell: Cell) -> CellType:
        """读取原始取值 (包含 EXPLORED / SOLUTION 标记)"""
        if not self.in_bounds(cell):
            raise IndexError(f"Cell {cell} is out of bounds")
        x, y = cell
        return CellType(int(self._grid[y, x]))

    def set(self, cell: Cell, value: CellType):
        if not self.in_bounds(cell):
            raise IndexError(f"Cell {cell} is out of bounds")
        x, y = cell
        self._grid[y, x] = value

    def classify(self, cell: Cell) -> CellType:
        value = self.get(cell)
        if value in (CellType.EXPLORED, CellType.SOLUTION):
            return CellType.EMPTY
        return value

    def fill(self, value: CellType):
        self._grid[:, :] = value

    def find(self, value: CellType) -> Optional[Cell]:
        """返回第一个取值为 value 的格子 (按行扫描)，没有则返回 None"""
        ys, xs = np.nonzero(self._grid == value)
        if len(xs) == 0:
            return None
        return int(xs[0]), int(ys[0])

    def clear_marks(self):
        """把 Driver 写入的 EXPLORED / SOLUTION 还原为 EMPTY"""
        mask = (self._grid == CellType.EXPLORED) | (self._grid == CellType.SOLUTION)
        self._grid[mask] = CellType.EMPTY

    def cells_of(self, value: CellType) -> List[Cell]:
        ys, xs = np.nonzero(self._grid == value)
        return [(int(x), int(y)) for x, y in zip(xs, ys)]

    def component_labels(self) -> Tuple[np.ndarray, int]:
        """
        对可通行区域做 4-连通分量标记 (scipy.ndimage.label 默认结构元即十字形)。
        墙体标记为 0，其余格子为 1..n。
        """
        traversable = self._grid != CellType.WALL
        labels, num = label(traversable)
        return labels, int(num)

    def is_reachable(self, a: Cell, b: Cell) -> bool:
        """两点是否处于同一个 4-连通分量 (与搜索算法无关的独立判断)"""
        if not (self.is_traversable(a) and self.is_traversable(b)):
            return False
        labels, _ = self.component_labels()
        return labels[a[1], a[0]] == labels[b[1], b[0]]

    def to_strings(self) -> List[str]:
        return [''.join(_TYPE_TO_CHAR[CellType(int(v))] for v in row) for row in self._grid]

    def __repr__(self):
        return f"GridMap({self._width}x{self._height})"
