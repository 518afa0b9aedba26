"""
Iterative Strategy - Backtracking with an explicit stack instead of recursion.
"""

from typing import List, Tuple

from ..base import SolverStrategy
from ..context import SolveContext
from ..factory import register_strategy
from ..grid import CELL_COUNT, SIZE, Grid


@register_strategy
class IterativeStrategy(SolverStrategy):
    """
    Backtracking driven by a stack of (cell index, assigned value) frames.

    Visits cells and candidates in exactly the same order as the
    recursive strategy, so both produce the same solution, the same
    operation counts and the same sequence of hook calls.
    """
    name = "iterative"
    description = "Backtracking (explicit stack) - Same order, no recursion"

    def search(self, context: SolveContext) -> bool:
        grid = context.grid
        stack: List[Tuple[int, int]] = []

        idx = self._next_empty(grid, 0)
        candidate = 1

        while not self.is_end(idx):
            row, col = self.position(idx)

            for value in range(candidate, SIZE + 1):
                if grid.is_available(row, col, value):
                    context.assign(row, col, value)
                    stack.append((idx, value))
                    idx = self._next_empty(grid, idx + 1)
                    candidate = 1
                    break
            else:
                # Dead end, undo the most recent assignment
                if not stack:
                    return False
                idx, value = stack.pop()
                context.retract(*self.position(idx))
                candidate = value + 1

        return True

    @staticmethod
    def _next_empty(grid: Grid, idx: int) -> int:
        """First empty cell at or after idx, CELL_COUNT if none."""
        while idx < CELL_COUNT and grid.get_cell(*SolverStrategy.position(idx)) != 0:
            idx += 1
        return idx
