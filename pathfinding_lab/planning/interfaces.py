from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from pathfinding_lab.types import Cell, Node

class IPlannerObserver(ABC):
    """
    搜索过程观察者接口
    Pathfinder 只负责搜索，记录 / 调试 / 回放都通过这里的回调完成。
    三种实现见 visualization/observers.py：
    1. Efficient: 空实现 (默认)
    2. Experiment: 保存入队 / 扩展 / 解路径，供对比和回放
    3. Debug: 每个算法一份日志文件
    """

    @abstractmethod
    def record_open_set_node(self, node: Node, f: float = 0.0, h: float = 0.0):
        """格子被加入 frontier，或以更低代价重新入队"""
        pass

    @abstractmethod
    def record_current_expansion(self, node: Cell):
        """step() 刚关闭的格子"""
        pass

    @abstractmethod
    def record_solution(self, path: List[Cell]):
        pass

    @abstractmethod
    def set_map_info(self, map_info: Any):
        """initialize() 时传入当前地图"""
        pass

    @abstractmethod
    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        """
        结构化日志记录
        :param message: 日志消息
        :param level: 'INFO', 'WARN', 'ERROR', 'DEBUG'
        :param payload: 额外数据 (起终点、扩展数、路径长度等)
        """
        pass
