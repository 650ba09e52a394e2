# pathfinding_lab/planning/search_state.py
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Union

from pathfinding_lab.types import Cell, SearchStatus
from pathfinding_lab.planning.frontiers import FIFOFrontier, PriorityFrontier


@dataclass
class SearchState:
    """
    单个算法的一次运行状态。
    由 initialize() 创建，只被 step() 修改，重新 initialize 时整体替换。
    """
    start: Cell
    target: Cell
    frontier: Union[FIFOFrontier, PriorityFrontier]
    status: SearchStatus = SearchStatus.RUNNING
    # 当前在 frontier 中的格子 (过期的堆条目不计入)
    open_cells: Set[Cell] = field(default_factory=set)
    closed: Set[Cell] = field(default_factory=set)
    # CameFrom: 记录路径回溯链 {child: parent}
    parent: Dict[Cell, Optional[Cell]] = field(default_factory=dict)
    # G_Score: 从起点到当前格子的实际代价
    cost: Dict[Cell, float] = field(default_factory=dict)
    solution: Optional[List[Cell]] = None
    expanded_count: int = 0

    def is_seen(self, cell: Cell) -> bool:
        return cell in self.parent
