# pathfinding_lab/map/base.py
from abc import ABC, abstractmethod
import numpy as np

from pathfinding_lab.types import Cell, CellType

class MapBase(ABC):
    """
    地图抽象基类
    搜索算法只通过 classify / in_bounds 读取地图，从不写入。
    """

    @property
    @abstractmethod
    def data(self) -> np.ndarray:
        """
        返回地图数据矩阵，通常用于可视化或底层计算。
        形状为 (height, width)，取值见 CellType。
        """
        pass

    @property
    @abstractmethod
    def width(self) -> int:
        """网格宽度 (x方向数量)"""
        pass

    @property
    @abstractmethod
    def height(self) -> int:
        """网格高度 (y方向数量)"""
        pass

    @abstractmethod
    def in_bounds(self, cell: Cell) -> bool:
        """检查格子是否在地图范围内"""
        pass

    @abstractmethod
    def classify(self, cell: Cell) -> CellType:
        """
        [关键接口] 返回 EMPTY / WALL / START / TARGET 之一。
        Driver 写入的 EXPLORED / SOLUTION 标记一律报告为 EMPTY。
        """
        pass

    def is_traversable(self, cell: Cell) -> bool:
        """越界或墙体都视为不可通行"""
        if not self.in_bounds(cell):
            return False
        return self.classify(cell) != CellType.WALL
