"""
Sudoku Solver - Entry Point

Solves a 9x9 puzzle by backtracking and optionally animates the search
in the terminal.

Example:
    python main.py
    python main.py --grid 530070000600195000098000060800060003400803001700020006060000280000419005000080079
    python main.py --puzzle hard --visualize --delay 5 --time
"""

import sys
import logging
import argparse
from typing import List, Optional

from rich.console import Console

from sudoku.image_export import save_grid_image
from sudoku.puzzles import DEFAULT_PUZZLE, get_puzzle, get_puzzle_names
from sudoku.settings import load_settings, save_settings
from sudoku.solver import (
    Grid,
    Solution,
    UnsolvableError,
    get_strategy_info,
    get_strategy_names,
    solve,
)
from sudoku.terminal import TerminalRenderer, cursor_guard, print_grid


logger = logging.getLogger(__name__)

LOG_FILE = "solver.log"

# Exit codes (argparse itself exits 2 on bad flags)
EXIT_OK = 0
EXIT_FAILURE = 1


def setup_logging(debug: bool = False) -> None:
    """
    Configure logging - full log to file, warnings and errors to console.

    Console output is limited to warnings so log lines never break up the
    animated grid.

    Args:
        debug: Log at DEBUG level instead of INFO
    """
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING)

    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            console_handler,  # Console output
            logging.FileHandler(LOG_FILE, mode='w', encoding='utf-8')  # File output
        ],
        force=True
    )


class Application:
    """
    Command line application.

    Resolves options against saved settings, loads the puzzle, runs the
    solver with or without the terminal animation and reports the result.
    """

    def __init__(self, args: argparse.Namespace):
        """
        Initialize the application.

        Args:
            args: Parsed command line arguments (override saved settings)
        """
        self.args = args
        self.console = Console()
        self.err_console = Console(stderr=True)

        # Load persistent settings
        self.settings = load_settings()

        self.delay_ms = args.delay if args.delay is not None else self.settings["delay_ms"]
        self.strategy_name = args.strategy or self.settings["strategy_name"]
        self.show_time = args.time or bool(self.settings["show_time"])
        self.visualize = args.visualize

    def load_grid(self) -> Grid:
        """Build the grid from --grid, else from the named puzzle."""
        if self.args.grid is not None:
            logger.info("Using grid from command line")
            return Grid.from_string(self.args.grid)

        name = self.args.puzzle or DEFAULT_PUZZLE
        logger.info(f"Using sample puzzle: {name}")
        return Grid.from_string(get_puzzle(name))

    def run(self) -> int:
        """
        Run the application.

        Returns:
            Exit code
        """
        if self.args.save_defaults:
            self._save_defaults()

        try:
            grid = self.load_grid()
            solution = self._solve(grid)
        except UnsolvableError as e:
            if e.conflicts:
                logger.warning(f"Puzzle givens conflict: {e.conflicts}")
            self.err_console.print("Impossible to solve")
            return EXIT_FAILURE
        except ValueError as e:
            logger.error(str(e))
            self.err_console.print(f"Error: {e}")
            return EXIT_FAILURE

        # The animation leaves the solved grid on screen
        if not self.visualize:
            print_grid(self.console, solution.grid)

        if self.show_time:
            self.console.print(
                f"Solved in {solution.metrics.computation_time_ms:.3f}ms "
                f"({solution.metrics.assignments} assignments)"
            )

        if self.args.output:
            try:
                self._export(solution)
            except OSError as e:
                logger.error(f"Failed to save image: {e}")
                self.err_console.print(f"Error: could not save image: {e}")
                return EXIT_FAILURE

        return EXIT_OK

    def _solve(self, grid: Grid) -> Solution:
        """Solve, animating each step when --visualize is set."""
        if not self.visualize:
            return solve(grid, strategy=self.strategy_name)

        renderer = TerminalRenderer(console=self.console, delay_ms=self.delay_ms)
        with cursor_guard(self.console), renderer:
            return solve(
                grid,
                strategy=self.strategy_name,
                on_step=renderer.on_step,
                notify_initial=True
            )

    def _export(self, solution: Solution) -> None:
        """Write the solved grid to --output as a PNG."""
        path = save_grid_image(solution.grid, self.args.output)
        self.console.print(f"Image saved: {path}")

    def _save_defaults(self) -> None:
        """Persist the effective delay, strategy and timing options."""
        self.settings["delay_ms"] = self.delay_ms
        self.settings["strategy_name"] = self.strategy_name
        self.settings["show_time"] = self.show_time
        if save_settings(self.settings):
            logger.info("Defaults saved")


def non_negative_int(value: str) -> int:
    """argparse type for millisecond delays."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0: {value!r}")
    return number


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    strategies = "; ".join(
        f"{info['name']}: {info['description']}" for info in get_strategy_info()
    )

    parser = argparse.ArgumentParser(
        description="Sudoku Solver - Backtracking solver with terminal visualization"
    )

    source = parser.add_mutually_exclusive_group()
    source.add_argument(
        "--grid", "-g",
        help="81-character puzzle, digits 1-9 for givens, anything else is empty"
    )
    source.add_argument(
        "--puzzle", "-p",
        choices=get_puzzle_names(),
        help=f"Sample puzzle to solve (default: {DEFAULT_PUZZLE})"
    )

    parser.add_argument(
        "--visualize", "-v",
        action="store_true",
        help="Animate the search in the terminal"
    )
    parser.add_argument(
        "--delay", "-d",
        type=non_negative_int,
        default=None,
        metavar="MS",
        help="Delay between visualization steps in milliseconds (default: saved setting)"
    )
    parser.add_argument(
        "--time", "-t",
        action="store_true",
        help="Print elapsed solve time"
    )
    parser.add_argument(
        "--strategy", "-s",
        choices=get_strategy_names(),
        default=None,
        help=f"Search strategy ({strategies})"
    )
    parser.add_argument(
        "--output", "-o",
        metavar="PATH",
        help="Save the solved grid as a PNG image"
    )
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Remember delay, strategy and timing options in config.json"
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help=f"Enable debug logging (written to {LOG_FILE})"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Initialize and run the Sudoku Solver application."""
    args = parse_args(argv)
    setup_logging(args.debug)

    application = Application(args)
    return application.run()


if __name__ == "__main__":
    sys.exit(main())
