from sudoku_stream.exceptions import InvalidClue, InvalidSize, SudokuError
from sudoku_stream.grid import Cell, Fixed, Grid, Open
from sudoku_stream.propagation import propagate
from sudoku_stream.solver import (
    SearchStats,
    SolutionIterator,
    choose_cell,
    solutions,
)
from sudoku_stream.text import format_grid, parse

load = Grid.load

__all__ = [
    "Cell",
    "Fixed",
    "Grid",
    "InvalidClue",
    "InvalidSize",
    "Open",
    "SearchStats",
    "SolutionIterator",
    "SudokuError",
    "choose_cell",
    "format_grid",
    "load",
    "parse",
    "propagate",
    "solutions",
]
