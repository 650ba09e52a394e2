# 绘图逻辑 (Matplotlib)

import math
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.colors import BoundaryNorm, ListedColormap

from pathfinding_lab.types import CellType
from pathfinding_lab.simulation.board import ComparisonBoard

# 按 CellType 取值排列: EMPTY, WALL, START, TARGET, EXPLORED, SOLUTION
CELL_COLORS = ['white', '#141414', 'green', 'red', 'lightgray', 'cyan']


class BoardPlotter:
    """
    把每条 lane 的栅格画成一个子图 (静态快照，不做实时渲染)
    """
    def __init__(self, board: ComparisonBoard, title: str = "Pathfinding Algorithm Comparison"):
        self.board = board
        self.title = title

        n = len(board.lanes)
        cols = 2 if n > 1 else 1
        rows = int(math.ceil(n / cols))
        self.fig, axes = plt.subplots(rows, cols, figsize=(6 * cols, 4.5 * rows))
        self.axes = np.atleast_1d(axes).flatten()

        self.cmap = ListedColormap(CELL_COLORS)
        bounds = np.arange(len(CellType) + 1) - 0.5
        self.norm = BoundaryNorm(bounds, self.cmap.N)

    def draw(self):
        lanes = list(self.board.lanes.values())
        for ax, lane in zip(self.axes, lanes):
            ax.clear()
            # origin='upper': 第 0 行画在最上方，与 "up = y - 1" 一致
            ax.imshow(lane.grid_map.data, cmap=self.cmap, norm=self.norm, interpolation='nearest')
            pathfinder = lane.pathfinder
            ax.set_title(f"{lane.name} | {pathfinder.status.value} | expanded {pathfinder.expanded_count}")
            ax.set_xticks([])
            ax.set_yticks([])

        # 多余的子图隐藏
        for ax in self.axes[len(lanes):]:
            ax.axis('off')

        self.fig.suptitle(f"{self.title} | Tick: {self.board.ticks}")
        return self.fig

    def save(self, path: str, dpi: int = 100):
        self.draw()
        self.fig.savefig(path, dpi=dpi)
        print(f"Saved visualization to {path}")

    def close(self):
        plt.close(self.fig)
