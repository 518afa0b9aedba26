"""
Terminal Display Module for Sudoku Solver

Renders grids with rich, animates the search through the solver's
observation hook and keeps the cursor visible again on every exit path,
including SIGINT/SIGTERM.
"""

import logging
import signal
import sys
import time
from contextlib import contextmanager
from typing import Iterator, Optional

import numpy as np
from rich.console import Console
from rich.live import Live
from rich.text import Text

from sudoku.solver import BLOCK, SIZE, Grid

# Configure module logger
logger = logging.getLogger(__name__)


# Cell styles
GIVEN_STYLE = "bold"
FILLED_STYLE = "cyan"
EMPTY_STYLE = "dim"
BORDER_STYLE = "dim"

EMPTY_CHAR = "."
ROW_SEPARATOR = "------+-------+------"

# Signals that end the animation early
INTERRUPT_SIGNALS = (signal.SIGINT, signal.SIGTERM)


def render_grid(cells: np.ndarray, given_mask: np.ndarray) -> Text:
    """
    Build a styled text block for a grid.

    Givens and solver-filled cells get different styles so the search
    progress stands out.

    Args:
        cells: 9x9 array of values, 0 for empty
        given_mask: 9x9 boolean array, True for givens

    Returns:
        rich Text with nine rows and block separators
    """
    text = Text()

    for row in range(SIZE):
        if row and row % BLOCK == 0:
            text.append(ROW_SEPARATOR + "\n", style=BORDER_STYLE)

        for col in range(SIZE):
            if col:
                if col % BLOCK == 0:
                    text.append(" | ", style=BORDER_STYLE)
                else:
                    text.append(" ")

            value = int(cells[row, col])
            if value == 0:
                text.append(EMPTY_CHAR, style=EMPTY_STYLE)
            elif given_mask[row, col]:
                text.append(str(value), style=GIVEN_STYLE)
            else:
                text.append(str(value), style=FILLED_STYLE)

        if row < SIZE - 1:
            text.append("\n")

    return text


def print_grid(console: Console, grid: Grid) -> None:
    """Print a grid once, givens and filled cells styled."""
    console.print(render_grid(grid.cells, grid.given_mask))


@contextmanager
def cursor_guard(console: Console) -> Iterator[None]:
    """
    Hide the cursor for the duration of the block.

    SIGINT and SIGTERM restore the cursor and exit with 128 + signal
    number. Previous handlers and cursor visibility are restored however
    the block exits.

    Args:
        console: Console whose cursor is hidden
    """
    def _on_signal(signum, frame):
        console.show_cursor(True)
        logger.info(f"Interrupted by signal {signum}")
        sys.exit(128 + signum)

    previous = {}
    for sig in INTERRUPT_SIGNALS:
        previous[sig] = signal.signal(sig, _on_signal)

    console.show_cursor(False)
    try:
        yield
    finally:
        console.show_cursor(True)
        for sig, handler in previous.items():
            signal.signal(sig, handler)


class TerminalRenderer:
    """
    Animates the search in place.

    Pass on_step as the solver's observation hook. Each call redraws the
    grid and then sleeps for the configured delay. The sleep blocks the
    solver thread between steps and never changes the search.

    Example:
        renderer = TerminalRenderer(delay_ms=20)
        with renderer:
            solution = solve(grid, on_step=renderer.on_step)
    """

    def __init__(self, console: Optional[Console] = None, delay_ms: int = 0):
        """
        Initialize the renderer.

        Args:
            console: rich Console to draw on (stdout if None)
            delay_ms: Pause after each step in milliseconds
        """
        self.console = console or Console()
        self.delay_ms = max(0, delay_ms)
        self.steps = 0
        self._live: Optional[Live] = None

    def start(self) -> None:
        """Begin the in-place display."""
        if self._live is not None:
            return
        self._live = Live(console=self.console, auto_refresh=False, transient=False)
        self._live.start()
        logger.debug(f"Visualization started, delay {self.delay_ms}ms")

    def stop(self) -> None:
        """Leave the last frame on screen and restore the terminal."""
        if self._live is None:
            return
        self._live.stop()
        self._live = None
        logger.debug(f"Visualization stopped after {self.steps} steps")

    def on_step(self, cells: np.ndarray, given_mask: np.ndarray) -> None:
        """
        Observation hook for the solver.

        Args:
            cells: Snapshot of the grid
            given_mask: True where a cell is a given
        """
        self.steps += 1

        if self._live is not None:
            self._live.update(render_grid(cells, given_mask), refresh=True)

        if self.delay_ms:
            time.sleep(self.delay_ms / 1000)

    def __enter__(self) -> 'TerminalRenderer':
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
