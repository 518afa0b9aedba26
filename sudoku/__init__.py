"""
Sudoku Solver

Backtracking solver for 9x9 Sudoku with an animated terminal view.

Packages:
    - sudoku.solver: Grid, search strategies and results
    - sudoku.terminal: rich rendering and cursor handling
    - sudoku.image_export: PNG export of grids
    - sudoku.settings: Persisted command line defaults
    - sudoku.puzzles: Sample puzzles
"""

__version__ = "1.0.0"
