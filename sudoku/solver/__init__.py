"""
Solver Package - Backtracking search for 9x9 Sudoku.

Strategies are registered by name and can be selected at runtime from
the command line.

Public API:
    - Grid: Mutable grid with immutable record of givens
    - SolveContext: Grid plus observation hook and counters
    - Solution: Solved grid and metrics
    - SolutionMetrics: Performance statistics
    - SolverStrategy: Abstract base for strategies
    - UnsolvableError: Raised when no completion exists
    - solve(): Solve a grid in one call
    - create_strategy(): Factory function
    - get_strategy_names(): List available strategies
    - get_strategy_info(): Get strategy metadata

Usage:
    from sudoku.solver import Grid, solve, UnsolvableError

    grid = Grid.from_string(puzzle)

    try:
        solution = solve(grid, on_step=renderer.on_step)
    except UnsolvableError:
        print("Impossible to solve")
    else:
        print(solution.grid)
"""

from typing import Optional

# Core data structures
from .grid import Grid, SIZE, BLOCK, CELL_COUNT, VALUES
from .errors import UnsolvableError
from .solution import Solution, SolutionMetrics
from .context import SolveContext, StepCallback

# Strategy framework
from .base import SolverStrategy
from .factory import (
    create_strategy,
    get_strategy_names,
    get_strategy_info,
    get_default_strategy_name,
    register_strategy,
)

# Import strategies to register them
from . import strategies


def solve(
    grid: Grid,
    strategy: Optional[str] = None,
    on_step: Optional[StepCallback] = None,
    notify_initial: bool = False
) -> Solution:
    """
    Solve a grid in place.

    Args:
        grid: Grid to solve
        strategy: Strategy name, default strategy if None
        on_step: Optional hook called as on_step(cells, given_mask) after
                 each tentative assignment
        notify_initial: Also call the hook once before searching

    Returns:
        Solution holding the solved grid

    Raises:
        UnsolvableError: If the puzzle has no valid completion
    """
    solver = create_strategy(strategy or get_default_strategy_name())
    context = SolveContext(grid=grid, step_callback=on_step, notify_initial=notify_initial)
    return solver.solve(context)


__all__ = [
    # Data structures
    "Grid",
    "SIZE",
    "BLOCK",
    "CELL_COUNT",
    "VALUES",
    "UnsolvableError",
    "Solution",
    "SolutionMetrics",
    "SolveContext",
    "StepCallback",
    # Strategy framework
    "SolverStrategy",
    "solve",
    "create_strategy",
    "get_strategy_names",
    "get_strategy_info",
    "get_default_strategy_name",
    "register_strategy",
]
