# pathfinding_lab/planning/planners/__init__.py

from .base import Pathfinder
from .bfs import BreadthFirstPathfinder
from .best_first import BestFirstPathfinder
from .dijkstra import DijkstraPathfinder
from .a_star import AStarPathfinder, WeightedAStarPathfinder
from .factory import PathfinderKind, create_pathfinder



__all__ = [
    "Pathfinder",
    "BreadthFirstPathfinder",
    "BestFirstPathfinder",
    "DijkstraPathfinder",
    "AStarPathfinder",
    "WeightedAStarPathfinder",
    "PathfinderKind",
    "create_pathfinder",
]
