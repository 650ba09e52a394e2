import pytest
import os
import glob
from pathfinding_lab.map.grid_map import GridMap
from pathfinding_lab.visualization.observers import (
    EfficientObserver, ExperimentObserver, DebugObserver, make_observer,
)
from pathfinding_lab.planning.planners import AStarPathfinder, BreadthFirstPathfinder

@pytest.fixture
def planner_setup():
    grid_map = GridMap.from_strings([
        "S.....",
        ".###..",
        "...#..",
        ".#.#.T",
    ])
    return grid_map, (0, 0), (5, 3)

def run(pathfinder):
    while not pathfinder.is_terminal:
        pathfinder.step()

def test_efficient_mode(planner_setup):
    grid_map, start, goal = planner_setup
    observer = EfficientObserver()

    pathfinder = AStarPathfinder(grid_map, observer=observer)
    pathfinder.initialize(start, goal)
    run(pathfinder)

    # EfficientObserver 不保存任何东西
    assert pathfinder.get_solution() is not None
    assert not hasattr(observer, 'expanded_nodes')
    assert not hasattr(observer, 'open_set_history')

def test_default_observer_is_efficient(planner_setup):
    grid_map, _, _ = planner_setup
    assert isinstance(AStarPathfinder(grid_map).observer, EfficientObserver)

def test_experiment_mode(planner_setup):
    grid_map, start, goal = planner_setup
    observer = ExperimentObserver()

    pathfinder = AStarPathfinder(grid_map, observer=observer)
    pathfinder.initialize(start, goal)
    run(pathfinder)

    assert observer.map_info is grid_map
    assert len(observer.expanded_nodes) == pathfinder.expanded_count
    assert observer.expanded_nodes[0] == start
    assert observer.expanded_nodes[-1] == goal
    assert len(observer.open_set_history) > 0
    # (x, y, f, h): 起点 f = h = 曼哈顿距离
    assert observer.open_set_history[0] == (0, 0, 8.0, 8.0)
    assert observer.solutions == [pathfinder.get_solution()]

def test_experiment_mode_unreachable_records_no_solution():
    grid_map = GridMap.from_strings([
        "S#.",
        "##T",
    ])
    observer = ExperimentObserver()
    pathfinder = BreadthFirstPathfinder(grid_map, observer=observer)
    pathfinder.initialize((0, 0), (2, 1))
    run(pathfinder)

    assert observer.expanded_nodes == [(0, 0)]
    assert observer.solutions == []

def test_debug_mode(planner_setup, tmp_path):
    grid_map, start, goal = planner_setup
    log_dir = str(tmp_path / "debug_logs")

    observer = DebugObserver(log_dir=log_dir, name="A*")
    pathfinder = AStarPathfinder(grid_map, observer=observer)
    pathfinder.initialize(start, goal)
    run(pathfinder)
    observer.close()

    # 检查日志文件是否生成 (名字中的 '*' 被替换掉)
    log_files = glob.glob(os.path.join(log_dir, "plan_debug_A__*.log"))
    assert len(log_files) == 1

    with open(log_files[0], 'r', encoding='utf-8') as f:
        content = f.read()
        assert "Debug Session Started" in content
        assert "Expanding:" in content
        assert "OpenSet Push" in content
        assert "Target reached." in content
        assert "Solution found" in content

    # Debug 模式同时保留可视化数据
    assert len(observer.expanded_nodes) == pathfinder.expanded_count

def test_debug_mode_logs_invalid_endpoints(tmp_path):
    grid_map = GridMap.from_strings([
        "...",
        ".#.",
    ])
    observer = DebugObserver(log_dir=str(tmp_path), name="BFS")
    pathfinder = BreadthFirstPathfinder(grid_map, observer=observer)
    pathfinder.step()
    pathfinder.initialize((0, 0), (1, 1))
    observer.close()

    with open(observer.log_file, 'r', encoding='utf-8') as f:
        content = f.read()
    assert "WARNING - [BFS] step() called before initialize()" in content
    assert "ERROR - [BFS] Start or target is out of bounds or blocked." in content

def test_make_observer(tmp_path):
    assert isinstance(make_observer('efficient'), EfficientObserver)
    assert isinstance(make_observer('experiment'), ExperimentObserver)

    debug = make_observer('debug', log_dir=str(tmp_path), name="Dijkstra")
    assert isinstance(debug, DebugObserver)
    debug.close()

    with pytest.raises(ValueError):
        make_observer('verbose')
