from enum import Enum
from typing import Optional

from pathfinding_lab.types import Cell, CellType
from pathfinding_lab.simulation.board import ComparisonBoard


class BrushMode(Enum):
    NONE = "none"
    PAINT_WALL = "paint_wall"
    ERASE_WALL = "erase_wall"
    DRAG_START = "drag_start"
    DRAG_TARGET = "drag_target"


# What a press decides, based on the cell under the cursor
_MODE_BY_CELL = {
    CellType.EMPTY: BrushMode.PAINT_WALL,
    CellType.WALL: BrushMode.ERASE_WALL,
    CellType.START: BrushMode.DRAG_START,
    CellType.TARGET: BrushMode.DRAG_TARGET,
}


class BrushEditor:
    """
    Press / drag / release editing, independent of any windowing toolkit.

    The cell under the first press picks the brush:
    - EMPTY  -> paint walls over empty cells
    - WALL   -> erase walls
    - START  -> drag the start point onto empty cells
    - TARGET -> drag the target point onto empty cells
    Edits are ignored while the board has a run in progress.
    """

    def __init__(self, board: ComparisonBoard):
        self.board = board
        self.mode = BrushMode.NONE

    @property
    def locked(self) -> bool:
        return self.board.started

    def press(self, cell: Cell) -> bool:
        if self.locked or not self.board.in_bounds(cell):
            return False
        self.mode = _MODE_BY_CELL.get(self.board.get(cell), BrushMode.NONE)
        return self.drag(cell)

    def drag(self, cell: Cell) -> bool:
        """Applies the current brush to the cell; returns True if the grid changed."""
        if self.locked or self.mode == BrushMode.NONE or not self.board.in_bounds(cell):
            return False

        current = self.board.get(cell)
        if self.mode == BrushMode.PAINT_WALL:
            if current == CellType.EMPTY:
                self.board.set_cell(cell, CellType.WALL)
                return True
        elif self.mode == BrushMode.ERASE_WALL:
            if current == CellType.WALL:
                self.board.set_cell(cell, CellType.EMPTY)
                return True
        elif self.mode == BrushMode.DRAG_START:
            return self.board.move_start(cell)
        elif self.mode == BrushMode.DRAG_TARGET:
            return self.board.move_target(cell)
        return False

    def release(self):
        self.mode = BrushMode.NONE

    def stroke(self, cells, release: bool = True) -> int:
        """Press on the first cell, drag across the rest. Returns the number of changed cells."""
        cells = list(cells)
        if not cells:
            return 0
        changed = int(self.press(cells[0]))
        for cell in cells[1:]:
            changed += int(self.drag(cell))
        if release:
            self.release()
        return changed
