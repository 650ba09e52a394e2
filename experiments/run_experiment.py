import os
import sys
import argparse

# --- Path Setup ---
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import matplotlib.pyplot as plt

from pathfinding_lab.config import GlobalConfig
from pathfinding_lab.map.grid_map import GridMap
from pathfinding_lab.map.generator import MapGenerator
from pathfinding_lab.simulation.board import ComparisonBoard
from pathfinding_lab.simulation.editor import BrushEditor
from pathfinding_lab.visualization.plotter import BoardPlotter
from experiments.benchmark_config import BenchmarkConfig as cfg

def ensure_log_dir(log_dir):
    os.makedirs(log_dir, exist_ok=True)

def apply_wall_stroke(board: ComparisonBoard, x: int, y0: int, y1: int) -> int:
    """
    在第 x 列从 y0 拖到 y1，和鼠标拖动一样：
    按在空格子上画墙，按在墙上擦墙，起终点不会被覆盖。
    :return: 改变的格子数
    """
    step = 1 if y1 >= y0 else -1
    cells = [(x, y) for y in range(y0, y1 + step, step)]
    return BrushEditor(board).stroke(cells)

def run_experiment(density=0.2, seed=42, weight=2.0, split=False, observer="efficient",
                   delay_ms=0, show_plot=False, skip=0, wall=None):
    print(f"=== Running Comparison (Density={density}, Seed={seed}, Weight={weight}, Split={split}) ===")
    ensure_log_dir(cfg.LOG_DIR)

    # 1. Setup Environment
    config = GlobalConfig(
        grid_width=cfg.MAP_WIDTH,
        grid_height=cfg.MAP_HEIGHT,
        step_delay_ms=delay_ms,
        strong_astar_weight=weight,
        max_ticks=cfg.MAX_TICKS,
        observer_mode=observer,
        log_dir=os.path.join(cfg.LOG_DIR, "planning_debug"),
    )
    board = ComparisonBoard(config)

    grid_map = GridMap(cfg.MAP_WIDTH, cfg.MAP_HEIGHT)
    generator = MapGenerator(obstacle_density=density, carve_path=not split, seed=seed)
    generator.generate(grid_map, board.start_pos, board.target_pos)
    if split:
        MapGenerator.add_wall_column(grid_map, cfg.MAP_WIDTH // 2)
    board.load(grid_map)

    if wall is not None:
        changed = apply_wall_stroke(board, *wall)
        print(f"Wall stroke changed {changed} cells.")

    # 2. Run all algorithms in lockstep
    plotter = BoardPlotter(board)
    frame_dir = os.path.join(cfg.LOG_DIR, f"frames_d{density}_s{seed}")

    def recorder_callback(b: ComparisonBoard):
        if skip > 0 and b.ticks % skip == 0:
            ensure_log_dir(frame_dir)
            plotter.save(os.path.join(frame_dir, f"tick_{b.ticks:04d}.png"))

    board.run(on_tick=recorder_callback)

    # 3. Report
    print(board.summary().to_string(index=False))

    out_path = os.path.join(cfg.LOG_DIR, f"comparison_d{density}_s{seed}.png")
    plotter.save(out_path)
    if show_plot:
        plt.show()
    plotter.close()
    board.close()
    return board

if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument("--density", type=float, default=0.2, help="Obstacle density")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--weight", type=float, default=cfg.STRONG_ASTAR_WEIGHT, help="Strong A* heuristic weight")
    parser.add_argument("--split", action="store_true", help="Split the grid with a full wall column")
    parser.add_argument("--wall", type=int, nargs=3, metavar=("X", "Y0", "Y1"), default=None,
                        help="Brush stroke down column X from row Y0 to Y1 (paints or erases like a mouse drag)")
    parser.add_argument("--observer", type=str, default="efficient", choices=["efficient", "experiment", "debug"],
                        help="Observer mode")
    parser.add_argument("--delay", type=int, default=0, help="Delay between ticks in ms")
    parser.add_argument("--show", action="store_true", help="Show plot")
    parser.add_argument("--skip", type=int, default=0, help="Save a frame every N ticks (0 = off)")
    args = parser.parse_args()

    run_experiment(density=args.density, seed=args.seed, weight=args.weight, split=args.split,
                   observer=args.observer, delay_ms=args.delay, show_plot=args.show, skip=args.skip,
                   wall=args.wall)
