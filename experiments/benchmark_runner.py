import sys
import os
import time
import numpy as np
import pandas as pd
import matplotlib.pyplot as plt

# --- 路径设置 ---
# 确保能找到 pathfinding_lab 包
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pathfinding_lab.config import GlobalConfig
from pathfinding_lab.map.grid_map import GridMap
from pathfinding_lab.map.generator import MapGenerator
from pathfinding_lab.simulation.board import ComparisonBoard
from experiments.benchmark_config import BenchmarkConfig as cfg

def run_benchmark():
    board_config = GlobalConfig(
        grid_width=cfg.MAP_WIDTH,
        grid_height=cfg.MAP_HEIGHT,
        step_delay_ms=0,
        strong_astar_weight=cfg.STRONG_ASTAR_WEIGHT,
        max_ticks=cfg.MAX_TICKS,
    )
    board = ComparisonBoard(board_config, kinds=cfg.ALGORITHMS)
    names = list(board.lanes.keys())

    rows = []
    print(f"{'Density':<8} | {'Algo':<10} | {'Solved%':<8} | {'Nodes':<8} | {'Len':<8} | {'Ratio':<6}")
    print("-" * 70)

    for density in cfg.DENSITIES:
        for i in range(cfg.NUM_TRIALS):
            # A. 生成地图 (同一张图给所有算法)
            seed = cfg.RANDOM_SEED_BASE + int(density * 1000) + i
            grid_map = GridMap(cfg.MAP_WIDTH, cfg.MAP_HEIGHT)
            generator = MapGenerator(obstacle_density=density, carve_path=cfg.CARVE_PATH, seed=seed)
            generator.generate(grid_map, cfg.START, cfg.TARGET)

            # B. 同步推进所有算法
            board.load(grid_map)
            t0 = time.perf_counter()
            ticks = board.run(max_ticks=cfg.MAX_TICKS, delay_ms=0)
            t1 = time.perf_counter()

            summary = board.summary()
            optimal = summary.loc[summary['Algorithm'] == 'Dijkstra', 'PathLength'].iloc[0]
            for _, r in summary.iterrows():
                length = r['PathLength']
                solved = r['Status'] == 'solved'
                rows.append({
                    'Density': density,
                    'Trial': i,
                    'Algorithm': r['Algorithm'],
                    'Solved': solved,
                    'Expanded': r['Expanded'],
                    'PathLength': length if solved else np.nan,
                    'Ratio': (length / optimal) if solved and optimal else np.nan,
                    'Ticks': ticks,
                    'TimeMs': (t1 - t0) * 1000,
                })

        # --- 汇总当前 Density 的数据 ---
        df_density = pd.DataFrame([r for r in rows if r['Density'] == density])
        for name in names:
            data = df_density[df_density['Algorithm'] == name]
            succ_rate = data['Solved'].mean() * 100
            avg_nodes = data['Expanded'].mean()
            avg_len = data['PathLength'].mean()
            avg_ratio = data['Ratio'].mean()
            print(f"{density:<8.2f} | {name:<10} | {succ_rate:<8.1f} | {avg_nodes:<8.1f} | {avg_len:<8.2f} | {avg_ratio:<6.3f}")

    board.close()
    return pd.DataFrame(rows)

def plot_comparisons(df, output_path=None):
    """可视化对比图表"""
    fig, axes = plt.subplots(1, 3, figsize=(18, 5))

    metrics = [
        ('Expanded', 'Expanded Nodes', 'Search Efficiency (Lower is Better)'),
        ('PathLength', 'Path Length (edges)', 'Path Length'),
        ('Ratio', 'Length / Optimal', 'Optimality (1.0 is Optimal)'),
    ]
    markers = ['o', 's', '^', 'D']

    grouped = df.groupby(['Density', 'Algorithm'], sort=False).mean(numeric_only=True).reset_index()
    algorithms = df['Algorithm'].unique()

    for i, (metric, ylabel, title) in enumerate(metrics):
        ax = axes[i]
        for idx, name in enumerate(algorithms):
            data = grouped[grouped['Algorithm'] == name]
            ax.plot(data['Density'], data[metric], marker=markers[idx % len(markers)], label=name)

        ax.set_xlabel('Obstacle Density')
        ax.set_ylabel(ylabel)
        ax.set_title(title, fontweight='bold')
        ax.grid(True, linestyle=':', alpha=0.6)

        # 仅在第一个图显示图例
        if i == 0:
            ax.legend()

    plt.suptitle("Dijkstra vs BFS vs A* vs Strong A*", fontsize=16)
    plt.tight_layout()

    if output_path:
        print(f"\nSaving plot to {output_path}...")
        plt.savefig(output_path, dpi=150)
    plt.show()

if __name__ == "__main__":
    print("=== 四种算法同步搜索对比实验 ===")
    os.makedirs(cfg.LOG_DIR, exist_ok=True)

    df_results = run_benchmark()
    df_results.to_csv(os.path.join(cfg.LOG_DIR, "benchmark_results.csv"), index=False)

    print("\n实验结束，正在绘图...")
    plot_comparisons(df_results, os.path.join(cfg.LOG_DIR, "algorithm_comparison.png"))
