import logging
import time
import os
from typing import List, Tuple, Dict, Optional

from pathfinding_lab.planning.interfaces import IPlannerObserver
from pathfinding_lab.map.base import MapBase
from pathfinding_lab.types import Cell, CellType, Node

class EfficientObserver(IPlannerObserver):
    """
    高效运行模式 (默认)
    四个算法同步跑的时候不做任何记录，相当于 NoOp。
    """
    def record_open_set_node(self, node: Node, f: float = 0.0, h: float = 0.0): pass
    def record_current_expansion(self, node: Cell): pass
    def record_solution(self, path: List[Cell]): pass
    def set_map_info(self, map_info: MapBase): pass
    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        # 只把错误打到控制台 (例如起终点落在墙上)
        if level == 'ERROR':
            print(f"[ERROR] {message}")


class ExperimentObserver(IPlannerObserver):
    """
    实验模式
    按时间顺序保存每次入队 / 扩展 / 找到的解，
    用于 benchmark 统计和逐帧回放。
    """
    def __init__(self):
        # 每次入队一条: (x, y, f, h)
        self.open_set_history: List[Tuple[int, int, float, float]] = []
        # 按扩展顺序排列的格子，长度等于 expanded_count
        self.expanded_nodes: List[Cell] = []
        # 重新 initialize 后可能有多条
        self.solutions: List[List[Cell]] = []
        self.map_info: Optional[MapBase] = None

    def record_open_set_node(self, node: Node, f: float = 0.0, h: float = 0.0):
        self.open_set_history.append((node.x, node.y, f, h))

    def record_current_expansion(self, node: Cell):
        self.expanded_nodes.append(node)

    def record_solution(self, path: List[Cell]):
        self.solutions.append(list(path))

    def set_map_info(self, map_info: MapBase):
        self.map_info = map_info

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        pass


class DebugObserver(IPlannerObserver):
    """
    Debug 模式
    排查某个算法为什么走了奇怪的路线 / 扩展了过多节点。
    每个算法实例一份日志文件，同时保留 ExperimentObserver 的数据以便对照画图。
    """
    def __init__(self, log_dir: str = "logs/planning_debug", name: str = "Pathfinder"):
        self.viz_observer = ExperimentObserver()

        self.log_dir = log_dir
        os.makedirs(self.log_dir, exist_ok=True)

        # 文件名里去掉 "A*" 之类的特殊字符
        timestamp = time.strftime("%Y%m%d_%H%M%S")
        safe_name = ''.join(ch if ch.isalnum() else '_' for ch in name)
        self.log_file = os.path.join(self.log_dir, f"plan_debug_{safe_name}_{timestamp}.log")

        # 同一秒内可能创建多个实例 (四条 lane)，logger 名字必须唯一
        self.logger = logging.getLogger(f"PlannerDebug_{safe_name}_{timestamp}_{id(self)}")
        self.logger.setLevel(logging.DEBUG)
        self.logger.propagate = False

        if not self.logger.handlers:
            fh = logging.FileHandler(self.log_file, encoding='utf-8')
            fh.setLevel(logging.DEBUG)
            fh.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))
            self.logger.addHandler(fh)

        self.logger.info(f"=== Debug Session Started ({name}) ===")

    def record_open_set_node(self, node: Node, f: float = 0.0, h: float = 0.0):
        self.viz_observer.record_open_set_node(node, f, h)
        self.logger.debug(f"OpenSet Push: {node.cell} parent={node.parent} g={node.cost:.1f} f={f:.2f} h={h:.2f}")

    def record_current_expansion(self, node: Cell):
        self.viz_observer.record_current_expansion(node)
        self.logger.debug(f"Expanding: {node}")

    def record_solution(self, path: List[Cell]):
        self.viz_observer.record_solution(path)
        self.logger.info(f"Solution found: {len(path)} cells, {len(path) - 1} moves")

    def set_map_info(self, map_info: MapBase):
        self.viz_observer.set_map_info(map_info)
        walls = int((map_info.data == CellType.WALL).sum())
        self.logger.info(f"Map Info set: {map_info.width}x{map_info.height}, {walls} walls")

    def log(self, message: str, level: str = 'INFO', payload: Optional[Dict] = None):
        if payload:
            message = f"{message} | Payload: {payload}"

        if level == 'DEBUG':
            self.logger.debug(message)
        elif level == 'WARN':
            self.logger.warning(message)
        elif level == 'ERROR':
            self.logger.error(message)
        else:
            self.logger.info(message)

    def close(self):
        """释放 FileHandler (测试里删除临时目录前需要调用)"""
        for handler in list(self.logger.handlers):
            handler.close()
            self.logger.removeHandler(handler)

    @property
    def expanded_nodes(self): return self.viz_observer.expanded_nodes
    @property
    def open_set_history(self): return self.viz_observer.open_set_history
    @property
    def solutions(self): return self.viz_observer.solutions
    @property
    def map_info(self): return self.viz_observer.map_info


_OBSERVER_MODES = {
    'efficient': EfficientObserver,
    'experiment': ExperimentObserver,
    'debug': DebugObserver,
}

def make_observer(mode: str, log_dir: str = "logs/planning_debug", name: str = "Pathfinder") -> IPlannerObserver:
    """根据 GlobalConfig.observer_mode 构造对应的观察者"""
    if mode not in _OBSERVER_MODES:
        raise ValueError(f"Unknown observer mode: {mode}")
    if mode == 'debug':
        return DebugObserver(log_dir=log_dir, name=name)
    return _OBSERVER_MODES[mode]()
