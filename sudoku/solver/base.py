"""
Base Strategy Module - Abstract base class for search strategies.
"""

import logging
from abc import ABC, abstractmethod
from typing import Tuple

from .context import SolveContext
from .errors import UnsolvableError
from .grid import CELL_COUNT, SIZE
from .solution import Solution, SolutionMetrics

logger = logging.getLogger(__name__)


class SolverStrategy(ABC):
    """
    Abstract base class for all search strategies.

    Subclasses implement search() and define name and description class
    attributes. Every strategy visits empty cells in row-major order and
    tries candidates in ascending order, so all of them find the same
    first solution.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description for help text
    """
    name: str = "base"
    description: str = "Base strategy"

    def solve(self, context: SolveContext) -> Solution:
        """
        Solve the context's grid in place.

        Givens that already repeat a value in a row, column or block are
        rejected before searching.

        Args:
            context: Solve context with grid and observation hook

        Returns:
            Solution with the solved grid and metrics

        Raises:
            UnsolvableError: If the givens conflict or the search is exhausted
        """
        grid = context.grid

        conflicts = grid.find_conflicts()
        if conflicts:
            logger.info(f"Givens conflict: {conflicts}")
            raise UnsolvableError(conflicts=conflicts)

        logger.info(f"Solving with '{self.name}' ({grid.count_filled()} givens)")
        context.start_timer()

        if context.notify_initial:
            context.report_step()

        if not self.search(context):
            logger.info(
                f"Search exhausted after {context.assignments} assignments"
            )
            raise UnsolvableError()

        solution = self._build_solution(context)
        logger.info(
            f"Solved in {solution.metrics.computation_time_ms:.1f}ms, "
            f"{solution.metrics.assignments} assignments, "
            f"{solution.metrics.retractions} retractions"
        )
        return solution

    @abstractmethod
    def search(self, context: SolveContext) -> bool:
        """
        Fill the grid's empty cells.

        Must only assign values accepted by Grid.is_available, go through
        context.assign()/context.retract() so the hook and counters see
        every step, and leave the grid fully filled on success.

        Args:
            context: Solve context

        Returns:
            True if a complete assignment was found
        """
        pass

    @staticmethod
    def position(idx: int) -> Tuple[int, int]:
        """Map a row-major cursor to (row, col)."""
        return idx // SIZE, idx % SIZE

    @staticmethod
    def is_end(idx: int) -> bool:
        """True once the cursor has moved past the last cell."""
        return idx == CELL_COUNT

    def _build_solution(self, context: SolveContext) -> Solution:
        """Build Solution object from computation results."""
        elapsed_ms = context.elapsed_time() * 1000

        return Solution(
            grid=context.grid,
            metrics=SolutionMetrics(
                computation_time_ms=elapsed_ms,
                assignments=context.assignments,
                retractions=context.retractions,
                strategy_name=self.name
            )
        )
