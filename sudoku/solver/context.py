"""
Solve Context Module - Shared context for strategy execution.
"""

import time
from dataclasses import dataclass, field
from typing import Callable, Optional

import numpy as np

from .grid import Grid


# on_step(cells, given_mask)
StepCallback = Callable[[np.ndarray, np.ndarray], None]


@dataclass
class SolveContext:
    """
    Shared context passed to strategies containing the grid, the
    observation hook and operation counters.

    Attributes:
        grid: Grid to solve, mutated in place
        step_callback: Optional hook called after each tentative assignment
        notify_initial: Also call the hook once before the first decision
        start_time: When the search started (reset by start_timer)
        assignments: Tentative assignments made so far
        retractions: Assignments undone so far
    """
    grid: Grid
    step_callback: Optional[StepCallback] = None
    notify_initial: bool = False
    start_time: float = field(default_factory=time.perf_counter)
    assignments: int = 0
    retractions: int = 0

    def assign(self, row: int, col: int, value: int) -> None:
        """
        Tentatively assign a value and notify the hook.

        Args:
            row: Row index
            col: Column index
            value: Value already checked with Grid.is_available
        """
        self.grid.assign(row, col, value)
        self.assignments += 1
        self.report_step()

    def retract(self, row: int, col: int) -> None:
        """Undo a tentative assignment."""
        self.grid.retract(row, col)
        self.retractions += 1

    def report_step(self) -> None:
        """
        Pass the current grid to the hook.

        Skips the snapshot entirely when no hook is set.
        """
        if self.step_callback:
            self.step_callback(self.grid.snapshot(), self.grid.given_mask)

    def start_timer(self) -> None:
        """Reset start_time to now, called when the search begins."""
        self.start_time = time.perf_counter()

    def elapsed_time(self) -> float:
        """
        Get seconds elapsed since computation started.

        Returns:
            Elapsed time in seconds
        """
        return time.perf_counter() - self.start_time
