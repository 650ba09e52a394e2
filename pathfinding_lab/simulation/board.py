import time
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

import pandas as pd

from pathfinding_lab.config import GlobalConfig
from pathfinding_lab.types import Cell, CellType
from pathfinding_lab.map.grid_map import GridMap
from pathfinding_lab.planning.planners import Pathfinder, PathfinderKind, create_pathfinder
from pathfinding_lab.visualization.observers import make_observer

# 2x2 layout order: top-left, top-right, bottom-left, bottom-right
DEFAULT_LAYOUT = (
    PathfinderKind.DIJKSTRA,
    PathfinderKind.BFS,
    PathfinderKind.A_STAR,
    PathfinderKind.STRONG_A_STAR,
)


@dataclass
class Lane:
    """One algorithm together with its own copy of the shared grid."""
    grid_map: GridMap
    pathfinder: Pathfinder

    @property
    def name(self) -> str:
        return str(self.pathfinder)


class ComparisonBoard:
    """
    Drives several pathfinders in lockstep over identical grids.

    Every edit is mirrored into all lanes. Pathfinders only read their lane's
    grid; explored / solution marks are written here after each step.
    """

    def __init__(self,
                 config: Optional[GlobalConfig] = None,
                 kinds: Iterable = DEFAULT_LAYOUT):
        self.config = config if config is not None else GlobalConfig()

        self.lanes: Dict[str, Lane] = {}
        for kind in kinds:
            kind = PathfinderKind(kind)
            grid_map = GridMap(self.config.grid_width, self.config.grid_height)
            observer = make_observer(self.config.observer_mode, self.config.log_dir, name=kind.value)
            pathfinder = create_pathfinder(kind, grid_map, observer, weight=self.config.strong_astar_weight)
            lane = Lane(grid_map, pathfinder)
            if lane.name in self.lanes:
                raise ValueError(f"Duplicate algorithm on board: {lane.name}")
            self.lanes[lane.name] = lane

        if not self.lanes:
            raise ValueError("A board needs at least one algorithm")

        self.started = False
        self.running = False
        self.ticks = 0
        self.start_pos: Cell = (0, 0)
        self.target_pos: Cell = (0, 0)
        self.clear()

    # ------------------------------------------------------------------
    # Grid editing (mirrored across lanes)
    # ------------------------------------------------------------------

    @property
    def width(self) -> int:
        return self.config.grid_width

    @property
    def height(self) -> int:
        return self.config.grid_height

    def in_bounds(self, cell: Cell) -> bool:
        return self._reference_map.in_bounds(cell)

    def get(self, cell: Cell) -> CellType:
        return self._reference_map.get(cell)

    def set_cell(self, cell: Cell, value: CellType):
        for lane in self.lanes.values():
            lane.grid_map.set(cell, value)

    def move_start(self, cell: Cell) -> bool:
        """Moves the start point onto an EMPTY cell."""
        if self.get(cell) != CellType.EMPTY:
            return False
        self.set_cell(self.start_pos, CellType.EMPTY)
        self.set_cell(cell, CellType.START)
        self.start_pos = cell
        return True

    def move_target(self, cell: Cell) -> bool:
        """Moves the target point onto an EMPTY cell."""
        if self.get(cell) != CellType.EMPTY:
            return False
        self.set_cell(self.target_pos, CellType.EMPTY)
        self.set_cell(cell, CellType.TARGET)
        self.target_pos = cell
        return True

    def load(self, grid_map: GridMap):
        """Copies walls/start/target from a prepared map into every lane."""
        if (grid_map.width, grid_map.height) != (self.width, self.height):
            raise ValueError(f"Map size {grid_map.width}x{grid_map.height} does not match board "
                             f"{self.width}x{self.height}")
        start = grid_map.find(CellType.START)
        target = grid_map.find(CellType.TARGET)
        if start is None or target is None:
            raise ValueError("Map must contain a start and a target cell")

        self.started = False
        self.running = False
        self.ticks = 0
        for lane in self.lanes.values():
            lane.grid_map.data[:] = grid_map.data[:]
            lane.grid_map.clear_marks()
        self.start_pos = start
        self.target_pos = target

    # ------------------------------------------------------------------
    # Buttons
    # ------------------------------------------------------------------

    def clear(self):
        """
        Blank grids. Start sits at 25% of the width, target at 75%,
        both centred vertically.
        """
        self.started = False
        self.running = False
        self.ticks = 0
        for lane in self.lanes.values():
            lane.grid_map.fill(CellType.EMPTY)

        self.start_pos = (self.width // 4, self.height // 2)
        self.target_pos = (self.width - self.width // 4, self.height // 2)
        self.set_cell(self.start_pos, CellType.START)
        self.set_cell(self.target_pos, CellType.TARGET)

    def reset(self):
        """Removes explored / solution marks, keeps walls and endpoints."""
        self.started = False
        self.running = False
        self.ticks = 0
        for lane in self.lanes.values():
            lane.grid_map.clear_marks()

    def initialize_all(self):
        for lane in self.lanes.values():
            lane.pathfinder.initialize(self.start_pos, self.target_pos)

    def step_all(self) -> Dict[str, List[Cell]]:
        """
        Advances every unfinished algorithm by one expansion.
        The first step after an edit (or reset) re-initializes all of them.
        """
        if not self.started:
            self.initialize_all()
        self.started = True

        explored_by_lane: Dict[str, List[Cell]] = {}
        for name, lane in self.lanes.items():
            pathfinder = lane.pathfinder
            if pathfinder.is_terminal:
                continue

            explored = pathfinder.step()
            self._mark(lane.grid_map, explored, CellType.EXPLORED)
            explored_by_lane[name] = explored

            solution = pathfinder.get_solution()
            if solution is not None:
                self._mark(lane.grid_map, solution, CellType.SOLUTION)

        self.ticks += 1
        return explored_by_lane

    @property
    def all_terminal(self) -> bool:
        if not self.started:
            return False
        return all(lane.pathfinder.is_terminal for lane in self.lanes.values())

    def run(self,
            max_ticks: Optional[int] = None,
            delay_ms: Optional[int] = None,
            on_tick: Optional[Callable[["ComparisonBoard"], None]] = None) -> int:
        """
        Main loop. Steps all algorithms until every one is solved or
        unreachable, with a small delay between ticks.
        :return: number of ticks performed by this call
        """
        if max_ticks is None:
            max_ticks = self.config.max_ticks
        if delay_ms is None:
            delay_ms = self.config.step_delay_ms

        self.running = True
        performed = 0
        while self.running:
            self.step_all()
            performed += 1
            if on_tick is not None:
                on_tick(self)

            if self.all_terminal:
                self.running = False
                print(f"All pathfinders finished in {self.ticks} ticks.")
                break
            if max_ticks is not None and performed >= max_ticks:
                self.running = False
                print(f"Max ticks reached ({max_ticks}).")
                break

            if delay_ms > 0:
                time.sleep(delay_ms / 1000.0)
        return performed

    def close(self):
        """释放观察者持有的资源 (debug 模式下每条 lane 一个日志文件)"""
        for lane in self.lanes.values():
            close = getattr(lane.pathfinder.observer, 'close', None)
            if close is not None:
                close()

    # ------------------------------------------------------------------
    # Reporting
    # ------------------------------------------------------------------

    def summary(self) -> pd.DataFrame:
        reachable = self._reference_map.is_reachable(self.start_pos, self.target_pos)
        rows = []
        for name, lane in self.lanes.items():
            pathfinder = lane.pathfinder
            solution = pathfinder.get_solution()
            rows.append({
                'Algorithm': name,
                'Status': pathfinder.status.value,
                'Expanded': pathfinder.expanded_count,
                'Frontier': pathfinder.frontier_size,
                'PathLength': len(solution) - 1 if solution is not None else None,
                'Reachable': reachable,
            })
        return pd.DataFrame(rows)

    # ------------------------------------------------------------------

    @property
    def _reference_map(self) -> GridMap:
        return next(iter(self.lanes.values())).grid_map

    @staticmethod
    def _mark(grid_map: GridMap, cells: List[Cell], value: CellType):
        for cell in cells:
            current = grid_map.get(cell)
            if current != CellType.START and current != CellType.TARGET:
                grid_map.set(cell, value)
