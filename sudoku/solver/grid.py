"""
Grid Module - Mutable 9x9 Sudoku state with an immutable record of givens.
"""

import logging
from typing import List, Sequence, Set, Tuple

import numpy as np

logger = logging.getLogger(__name__)

SIZE = 9
BLOCK = 3
CELL_COUNT = SIZE * SIZE
VALUES = range(1, SIZE + 1)


class Grid:
    """
    Mutable Sudoku grid.

    Cells hold integers 0-9 where 0 means empty. A read-only copy of the
    values present at construction (the givens) is kept alongside so
    renderers can tell puzzle cells from solver-filled cells.

    Attributes:
        cells: 9x9 uint8 array, mutated in place by the solver
    """

    def __init__(self, cells: np.ndarray):
        self.cells = np.array(cells, dtype=np.uint8)
        self._givens = self.cells.copy()
        self._givens.setflags(write=False)
        self._given_mask = self._givens != 0
        self._given_mask.setflags(write=False)

    @classmethod
    def from_string(cls, text: str) -> 'Grid':
        """
        Create Grid from a row-major puzzle string.

        Digits 1-9 are givens. '0' and any other character leave the cell
        empty. Characters past position 81 are ignored and a short string
        leaves the remaining cells empty.

        Args:
            text: Puzzle string

        Returns:
            Grid instance
        """
        cells = np.zeros((SIZE, SIZE), dtype=np.uint8)
        invalid = 0

        for idx, char in enumerate(text[:CELL_COUNT]):
            if char in "123456789":
                cells[idx // SIZE, idx % SIZE] = int(char)
            elif char != "0":
                invalid += 1

        if invalid:
            logger.debug(f"Treated {invalid} non-digit character(s) as empty cells")
        if len(text) != CELL_COUNT:
            logger.debug(f"Puzzle string has {len(text)} characters, expected {CELL_COUNT}")

        return cls(cells)

    @classmethod
    def from_2d_list(cls, rows: Sequence[Sequence[int]]) -> 'Grid':
        """
        Create Grid from a 9x9 numeric literal.

        Args:
            rows: Nine rows of nine integers 0-9

        Returns:
            Grid instance

        Raises:
            ValueError: If the literal is not 9x9 or holds values outside 0-9
        """
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError("Grid literal must be 9x9")

        cells = np.array(rows, dtype=np.int64)
        if cells.min() < 0 or cells.max() > SIZE:
            raise ValueError("Grid values must be in range 0-9")

        return cls(cells)

    @classmethod
    def empty(cls) -> 'Grid':
        """Create a grid with no givens."""
        return cls(np.zeros((SIZE, SIZE), dtype=np.uint8))

    def is_available(self, row: int, col: int, value: int) -> bool:
        """
        Check whether value can legally occupy (row, col) right now.

        Args:
            row: Row index
            col: Column index
            value: Candidate value 1-9

        Returns:
            False if value is already used in the row, column or block
        """
        if (self.cells[row] == value).any():
            return False
        if (self.cells[:, col] == value).any():
            return False

        r0 = row // BLOCK * BLOCK
        c0 = col // BLOCK * BLOCK
        if (self.cells[r0:r0 + BLOCK, c0:c0 + BLOCK] == value).any():
            return False

        return True

    def available_values(self, row: int, col: int) -> Set[int]:
        """
        Get every value that could legally occupy (row, col).

        Args:
            row: Row index
            col: Column index

        Returns:
            Values in 1-9 not used in the row, column or block
        """
        r0 = row // BLOCK * BLOCK
        c0 = col // BLOCK * BLOCK
        used = np.union1d(
            np.union1d(self.cells[row], self.cells[:, col]),
            self.cells[r0:r0 + BLOCK, c0:c0 + BLOCK].ravel()
        )
        return set(VALUES) - {int(v) for v in used}

    def assign(self, row: int, col: int, value: int) -> None:
        """Place value at (row, col) without validation."""
        self.cells[row, col] = value

    def retract(self, row: int, col: int) -> None:
        """Reset (row, col) to empty."""
        self.cells[row, col] = 0

    def get_cell(self, row: int, col: int) -> int:
        """Get value at (row, col), 0 if empty."""
        return int(self.cells[row, col])

    def is_given(self, row: int, col: int) -> bool:
        """Check if (row, col) was part of the original puzzle."""
        return bool(self._given_mask[row, col])

    @property
    def givens(self) -> np.ndarray:
        """Read-only copy of the values present at construction."""
        return self._givens

    @property
    def given_mask(self) -> np.ndarray:
        """Read-only boolean array, True where a cell is a given."""
        return self._given_mask

    def snapshot(self) -> np.ndarray:
        """Copy of the current cell values."""
        return self.cells.copy()

    def copy(self) -> 'Grid':
        """
        Copy this grid, keeping the original givens.

        Returns:
            New Grid with the same cells and givens
        """
        clone = Grid(self._givens)
        clone.cells[:] = self.cells
        return clone

    def find_conflicts(self) -> List[Tuple[str, int, int]]:
        """
        Find duplicated non-zero values in rows, columns and blocks.

        Returns:
            List of (unit, index, value) tuples, unit being "row", "col"
            or "block" and index the unit number 0-8
        """
        conflicts = []

        units = []
        for i in range(SIZE):
            units.append(("row", i, self.cells[i]))
        for i in range(SIZE):
            units.append(("col", i, self.cells[:, i]))
        for i in range(SIZE):
            r0 = i // BLOCK * BLOCK
            c0 = i % BLOCK * BLOCK
            units.append(("block", i, self.cells[r0:r0 + BLOCK, c0:c0 + BLOCK].ravel()))

        for unit, index, values in units:
            counts = np.bincount(values, minlength=SIZE + 1)
            for value in VALUES:
                if counts[value] > 1:
                    conflicts.append((unit, index, value))

        return conflicts

    def is_complete(self) -> bool:
        """True if every cell holds a value."""
        return bool((self.cells != 0).all())

    def is_solved(self) -> bool:
        """True if the grid is complete and has no conflicts."""
        return self.is_complete() and not self.find_conflicts()

    def count_filled(self) -> int:
        """Number of non-empty cells."""
        return int(np.count_nonzero(self.cells))

    def diff(self, other: 'Grid') -> List[Tuple[int, int]]:
        """
        Find cells that differ between this grid and another.

        Args:
            other: Another Grid to compare against

        Returns:
            List of (row, col) tuples where cells differ
        """
        if not isinstance(other, Grid):
            raise TypeError("Can only diff against another Grid")

        rows, cols = np.nonzero(self.cells != other.cells)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def to_list(self) -> List[List[int]]:
        """Convert to a 9x9 list of ints."""
        return self.cells.tolist()

    def to_string(self) -> str:
        """Row-major 81-character string, '0' for empty cells."""
        return "".join(str(v) for v in self.cells.ravel())

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return bool((self.cells == other.cells).all())

    # Mutable, so not hashable
    __hash__ = None

    def __repr__(self):
        return f"Grid('{self.to_string()}')"

    def __str__(self):
        lines = []
        for row in range(SIZE):
            if row and row % BLOCK == 0:
                lines.append("------+-------+------")
            parts = []
            for col in range(SIZE):
                if col and col % BLOCK == 0:
                    parts.append("|")
                value = self.get_cell(row, col)
                parts.append(str(value) if value else ".")
            lines.append(" ".join(parts))
        return "\n".join(lines)

