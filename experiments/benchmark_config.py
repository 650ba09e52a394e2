import sys
import os

# Ensure pathfinding_lab can be imported if this config is used standalone or imported from elsewhere
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from pathfinding_lab.planning.planners import PathfinderKind

class BenchmarkConfig:
    # --- Experiment Settings ---
    DENSITIES = [0.0, 0.1, 0.2, 0.3]   # Obstacle densities to test
    NUM_TRIALS = 20                    # Number of trials per density
    RANDOM_SEED_BASE = 1000            # Base seed for reproducibility

    # --- Output Paths ---
    _BASE_DIR = os.path.dirname(os.path.abspath(__file__))
    _PROJECT_DIR = os.path.dirname(_BASE_DIR)
    LOG_DIR = os.path.join(_PROJECT_DIR, "logs", "experiments")

    # --- Map Parameters (same as the interactive board) ---
    MAP_WIDTH = 30
    MAP_HEIGHT = 21

    # --- Start & Target ---
    START = (MAP_WIDTH // 4, MAP_HEIGHT // 2)
    TARGET = (MAP_WIDTH - MAP_WIDTH // 4, MAP_HEIGHT // 2)

    # Carve a corridor so that most maps stay solvable
    CARVE_PATH = True

    # Safety cap on lockstep ticks
    MAX_TICKS = MAP_WIDTH * MAP_HEIGHT + 1

    # --- Algorithms ---
    ALGORITHMS = [
        PathfinderKind.DIJKSTRA,
        PathfinderKind.BFS,
        PathfinderKind.A_STAR,
        PathfinderKind.STRONG_A_STAR,
    ]
    STRONG_ASTAR_WEIGHT = 2.0
