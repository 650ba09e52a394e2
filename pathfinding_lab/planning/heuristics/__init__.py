# pathfinding_lab/planning/heuristics/__init__.py

from .base import Heuristic
from .zero import ZeroHeuristic
from .manhattan import ManhattanHeuristic
from .weighted import WeightedHeuristic


__all__ = [
    "Heuristic",
    "ZeroHeuristic",
    "ManhattanHeuristic",
    "WeightedHeuristic",
]
