"""
Solver Errors Module - Domain errors raised by the search.
"""

from typing import List, Optional, Tuple


class UnsolvableError(Exception):
    """
    Raised when no valid assignment completes the grid.

    Attributes:
        conflicts: Duplicated givens found before searching, as
                   (unit, index, value) tuples. Empty when the search
                   itself was exhausted.
    """

    def __init__(self, message: str = "Impossible to solve",
                 conflicts: Optional[List[Tuple[str, int, int]]] = None):
        super().__init__(message)
        self.conflicts = conflicts or []
