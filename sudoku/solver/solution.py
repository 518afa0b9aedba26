"""
Solution Module - Result of a strategy computation.
"""

from dataclasses import dataclass, field

from .grid import Grid


@dataclass
class SolutionMetrics:
    """
    Performance metrics for solution computation.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        assignments: Number of tentative assignments made
        retractions: Number of assignments undone while backtracking
        strategy_name: Name of strategy that computed this solution
    """
    computation_time_ms: float = 0.0
    assignments: int = 0
    retractions: int = 0
    strategy_name: str = ""

    @property
    def operations(self) -> int:
        """Total assign and retract operations."""
        return self.assignments + self.retractions


@dataclass
class Solution:
    """
    Result of a successful search.

    Attributes:
        grid: The solved grid (same object that was searched)
        metrics: Performance statistics
    """
    grid: Grid
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)

    @property
    def filled_count(self) -> int:
        """Number of cells the solver filled in."""
        return int((~self.grid.given_mask).sum())

    def to_string(self) -> str:
        """Row-major 81-character string of the solved grid."""
        return self.grid.to_string()
