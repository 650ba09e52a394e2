# [关键] 全局配置定义

# pathfinding_lab/config.py
from dataclasses import dataclass
from typing import Optional

@dataclass
class GlobalConfig:
    grid_width: int = 30            # 每个子栅格的宽度 (格子数)，至少 4，保证起终点不重合
    grid_height: int = 21           # 每个子栅格的高度 (格子数)
    step_delay_ms: int = 12         # Run 模式下每个 tick 之间的延迟
    strong_astar_weight: float = 2.0
    max_ticks: Optional[int] = None # None 表示一直跑到所有算法结束
    observer_mode: str = "efficient"  # 'efficient' | 'experiment' | 'debug'
    log_dir: str = "logs/planning_debug"

    def __post_init__(self):
        if self.grid_width < 4 or self.grid_height < 1:
            raise ValueError(f"Grid too small: {self.grid_width}x{self.grid_height}")
        if self.step_delay_ms < 0:
            raise ValueError("step_delay_ms must be >= 0")
