# pathfinding_lab/planning/heuristics/weighted.py
from pathfinding_lab.types import Cell
from .base import Heuristic

class WeightedHeuristic(Heuristic):
    """
    h' = weight * h
    weight > 1 时不再 admissible，搜索更贪婪、扩展更少，
    但解的代价只保证不超过 weight * 最优代价。
    """
    def __init__(self, base: Heuristic, weight: float):
        if weight <= 0:
            raise ValueError(f"Heuristic weight must be positive, got {weight}")
        self.base = base
        self.weight = weight

    def estimate(self, current: Cell, goal: Cell) -> float:
        return self.weight * self.base.estimate(current, goal)
