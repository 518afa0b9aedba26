"""
Backtracking Strategy - Recursive depth-first search over empty cells.
"""

from ..base import SolverStrategy
from ..context import SolveContext
from ..factory import register_strategy
from ..grid import VALUES


@register_strategy
class BacktrackingStrategy(SolverStrategy):
    """
    Recursive backtracking.

    Walks a row-major cursor over the 81 cells. Givens are skipped,
    empty cells get each legal value 1-9 in ascending order and the
    search recurses on the next cell. The first complete assignment
    wins; a dead end retracts the value and tries the next one.
    """
    name = "backtracking"
    description = "Backtracking (recursive) - Row-major depth-first search"

    def search(self, context: SolveContext) -> bool:
        return self._backtrack(context, 0)

    def _backtrack(self, context: SolveContext, idx: int) -> bool:
        if self.is_end(idx):
            return True

        grid = context.grid
        row, col = self.position(idx)

        if grid.get_cell(row, col) != 0:
            return self._backtrack(context, idx + 1)

        for value in VALUES:
            if not grid.is_available(row, col, value):
                continue

            context.assign(row, col, value)

            if self._backtrack(context, idx + 1):
                return True

            context.retract(row, col)

        return False
