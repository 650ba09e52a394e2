# pathfinding_lab/map/generator.py
import numpy as np
import random
from typing import Optional

from pathfinding_lab.map.grid_map import GridMap
from pathfinding_lab.types import Cell, CellType

class MapGenerator:
    """
    地图生成器
    随机撒墙 + 可选的 "推土机" 通道，保证起点到终点至少有一条路
    """

    def __init__(
        self,
        obstacle_density: float = 0.2,
        carve_path: bool = True,
        seed: int = None
    ):
        if not 0.0 <= obstacle_density <= 1.0:
            raise ValueError(f"obstacle_density must be in [0, 1], got {obstacle_density}")
        self.density = obstacle_density
        self.carve_path = carve_path
        self.seed = seed

        if self.seed is not None:
            random.seed(self.seed)
            np.random.seed(self.seed)

    def generate(self, grid_map: GridMap, start: Cell, target: Cell):
        # 1. 随机障碍底图
        self._generate_random_obstacles(grid_map)

        # 2. 推土机通道 (起点 -> 终点 的随机单调折线)
        if self.carve_path:
            self._carve_path(grid_map, start, target)

        # 3. 放置起终点
        grid_map.set(start, CellType.START)
        grid_map.set(target, CellType.TARGET)

    def _generate_random_obstacles(self, grid_map: GridMap):
        random_mask = np.random.rand(grid_map.height, grid_map.width) < self.density
        grid_map.data[:, :] = CellType.EMPTY
        grid_map.data[random_mask] = CellType.WALL

    def _carve_path(self, grid_map: GridMap, start: Cell, target: Cell):
        """每一步随机选择沿 x 或 y 方向朝目标前进一格，沿途清除墙体"""
        x, y = start
        tx, ty = target
        grid_map.set((x, y), CellType.EMPTY)
        while (x, y) != (tx, ty):
            move_x = x != tx and (y == ty or random.random() < 0.5)
            if move_x:
                x += 1 if tx > x else -1
            else:
                y += 1 if ty > y else -1
            grid_map.set((x, y), CellType.EMPTY)

    @staticmethod
    def add_wall_column(grid_map: GridMap, x: int, gap_row: Optional[int] = None):
        """
        在第 x 列竖一整面墙 (gap_row 处留一个缺口)。
        不留缺口时左右两侧完全隔断。
        """
        for y in range(grid_map.height):
            if y == gap_row:
                continue
            grid_map.set((x, y), CellType.WALL)
