"""
Sample Puzzles

Named puzzle strings selectable with --puzzle.
"""

from typing import Dict, List

# Row-major, '0' for empty cells
PUZZLES: Dict[str, str] = {
    "classic": "530070000600195000098000060800060003400803001700020006060000280000419005000080079",
    # Demo puzzle, thousands of assignments with row-major order
    "hard": "100007090030020008009600500005300900010080002600004000300000010041000007007000300",
    "empty": "0" * 81,
}

DEFAULT_PUZZLE = "classic"


def get_puzzle(name: str) -> str:
    """
    Look up a sample puzzle by name.

    Args:
        name: Puzzle name

    Returns:
        81-character puzzle string

    Raises:
        ValueError: If puzzle name not found
    """
    if name not in PUZZLES:
        available = ", ".join(PUZZLES.keys())
        raise ValueError(f"Unknown puzzle: {name}. Available: {available}")
    return PUZZLES[name]


def get_puzzle_names() -> List[str]:
    """Get list of sample puzzle names."""
    return list(PUZZLES.keys())
